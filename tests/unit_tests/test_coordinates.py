"""Unit tests for module and dependency coordinate parsing."""

from __future__ import annotations

import pytest

from bootstrap_params.coordinates import (
    DependencyCoordinate,
    ModuleCoordinate,
    PlatformQualifier,
    parse_dependencies,
    parse_dependency,
    parse_module,
    parse_modules,
)
from bootstrap_params.errors import ErrorKind
from bootstrap_params.validation import Invalid, Valid


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("org:name", ModuleCoordinate("org", "name")),
        ("org::name", ModuleCoordinate("org", "name", qualifier=PlatformQualifier.SCALA)),
        (
            "org::name@sjs",
            ModuleCoordinate("org", "name", qualifier=PlatformQualifier.SCALA_JS),
        ),
        (
            "org::name@native",
            ModuleCoordinate("org", "name", qualifier=PlatformQualifier.NATIVE),
        ),
        (" com.example:lib ", ModuleCoordinate("com.example", "lib")),
    ],
)
def test_parse_module_variants(text: str, expected: ModuleCoordinate) -> None:
    """Parse plain and platform-qualified module syntaxes."""
    assert parse_module(text) == Valid(expected)


def test_parse_module_with_attributes() -> None:
    """Parse ;key=value attributes and render them back sorted."""
    result = parse_module("org:name;sbtVersion=1.0;scalaVersion=2.12")
    assert isinstance(result, Valid)
    module = result.value
    assert module.attribute_map == {"scalaVersion": "2.12", "sbtVersion": "1.0"}
    assert str(module) == "org:name;sbtVersion=1.0;scalaVersion=2.12"


@pytest.mark.parametrize("text", ["orgname", "a:b:c", "", "org:", ":name", "org:::name"])
def test_parse_module_cites_malformed_text(text: str) -> None:
    """Reject wrong separator structure and quote the input verbatim."""
    result = parse_module(text)
    assert isinstance(result, Invalid)
    (error,) = result.errors
    assert error.kind is ErrorKind.MALFORMED_COORDINATE
    assert f"'{text}'" in error.message


def test_platform_marker_requires_scala_module() -> None:
    """Only ORG::NAME modules may carry a platform marker."""
    result = parse_module("org:name@sjs")
    assert isinstance(result, Invalid)
    assert "requires an ORG::NAME module" in result.errors[0].message


def test_unknown_platform_marker() -> None:
    """Reject markers other than sjs and native."""
    result = parse_module("org::name@jvm")
    assert isinstance(result, Invalid)
    assert "Unknown platform marker 'jvm'" in result.errors[0].message


def test_duplicate_attribute_rejected() -> None:
    """Attribute keys must be unique."""
    result = parse_module("org:name;a=1;a=2")
    assert isinstance(result, Invalid)
    assert "Duplicate attribute" in result.errors[0].message


def test_module_equality_ignores_attribute_order() -> None:
    """Compare and hash modules structurally, whatever the attribute order."""
    first = ModuleCoordinate("o", "n", {"a": "1", "b": "2"})
    second = ModuleCoordinate("o", "n", (("b", "2"), ("a", "1")))
    assert first == second
    assert len({first, second}) == 1
    assert first != ModuleCoordinate("o", "n", qualifier=PlatformQualifier.SCALA)


def test_parse_modules_accumulates_errors_in_order() -> None:
    """Report every malformed module of a list, in input order."""
    result = parse_modules(["bad1", "org:ok", "bad2"])
    assert isinstance(result, Invalid)
    assert [error.message.split("'")[1] for error in result.errors] == ["bad1", "bad2"]


def test_parse_dependency_splits_params() -> None:
    """Keep known params on the dependency and return the others."""
    result = parse_dependency(
        "org::name:1.0,classifier=tests,url=https://example.com/a.jar,exclude=o%n"
    )
    assert isinstance(result, Valid)
    dependency, auxiliary = result.value
    assert dependency.module == ModuleCoordinate(
        "org", "name", qualifier=PlatformQualifier.SCALA
    )
    assert dependency.version == "1.0"
    assert dependency.param_map == {"classifier": "tests"}
    assert dependency.exclusions == frozenset({ModuleCoordinate("o", "n")})
    assert dependency.transitive is True
    assert dict(auxiliary) == {"url": "https://example.com/a.jar"}


def test_parse_dependency_with_module_attributes() -> None:
    """Accept attributes between the module name and the version."""
    result = parse_dependency("org.foo:sbt-plugin;scalaVersion=2.13:1.2.3")
    assert isinstance(result, Valid)
    dependency, _ = result.value
    assert dependency.module.attribute_map == {"scalaVersion": "2.13"}
    assert str(dependency) == "org.foo:sbt-plugin;scalaVersion=2.13:1.2.3"


@pytest.mark.parametrize("text", ["org:name", "org:name:1.0:extra", "org"])
def test_parse_dependency_rejects_wrong_segments(text: str) -> None:
    """Require exactly ORG, NAME and VERSION."""
    result = parse_dependency(text)
    assert isinstance(result, Invalid)
    assert result.errors[0].message.startswith(f"Malformed dependency '{text}'")


def test_parse_dependency_reports_module_and_param_errors() -> None:
    """Collect every problem found in a single dependency string."""
    result = parse_dependency("org:name@sjs:1.0,oops,exclude=nopercent")
    assert isinstance(result, Invalid)
    messages = result.messages()
    assert len(messages) == 3
    assert "requires an ORG::NAME module" in messages[0]
    assert "Malformed dependency parameter 'oops'" in messages[1]
    assert "Malformed exclusion 'nopercent'" in messages[2]


def test_dependency_helpers_return_copies() -> None:
    """Derive intransitive and excluded copies without mutating the original."""
    dependency = DependencyCoordinate(ModuleCoordinate("o", "n"), "1.0")
    changed = dependency.intransitive().with_exclusions([ModuleCoordinate("x", "y")])
    assert dependency.transitive is True
    assert dependency.exclusions == frozenset()
    assert changed.transitive is False
    assert changed.exclusions == frozenset({ModuleCoordinate("x", "y")})


def test_parse_dependencies_keeps_order() -> None:
    """Preserve input order of parsed dependencies."""
    result = parse_dependencies(["a:b:1", "c:d:2"])
    assert isinstance(result, Valid)
    assert [str(dependency) for dependency, _ in result.value] == ["a:b:1", "c:d:2"]
