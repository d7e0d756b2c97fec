"""Module and dependency coordinate parsing.

Module syntax::

    org:name                 plain JVM module
    org::name                Scala module (cross-versioned)
    org::name@sjs            Scala.js module
    org::name@native         Scala Native module
    org:name;key=value       module with attributes (repeatable ``;key=value``)

Dependency syntax appends a version and optional ``,key=value`` parameters::

    org::name:1.2.3,classifier=tests,exclude=other-org%other-name
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum
from types import MappingProxyType

from bootstrap_params.errors import ErrorKind, ParamError
from bootstrap_params.validation import (
    Invalid,
    Valid,
    Validated,
    combine,
    invalid,
    traverse,
    valid,
)

_TOKEN = r"[^:;@,=%\s]+"
_MODULE = (
    rf"(?P<org>{_TOKEN})(?P<sep>::?)(?P<name>{_TOKEN})"
    rf"(?:@(?P<marker>{_TOKEN}))?"
    rf"(?P<attrs>(?:;{_TOKEN}={_TOKEN})*)"
)
_MODULE_RE = re.compile(_MODULE)
_DEPENDENCY_RE = re.compile(rf"{_MODULE}:(?P<version>{_TOKEN})")

MODULE_SYNTAX = "ORG:NAME or ORG::NAME[@sjs|@native][;KEY=VALUE]"
DEPENDENCY_SYNTAX = "ORG:NAME:VERSION or ORG::NAME:VERSION[,KEY=VALUE]"

# Dependency parameters stored on the dependency itself; anything else is
# handed back to the caller as an auxiliary parameter.
DEPENDENCY_PARAM_KEYS = frozenset({"classifier", "type", "ext"})

type Attributes = tuple[tuple[str, str], ...]


class PlatformQualifier(StrEnum):
    """Platform flavour a module coordinate refers to."""

    NONE = "none"
    SCALA = "scala"
    SCALA_JS = "sjs"
    NATIVE = "native"


class Platform(StrEnum):
    """Alternate platform selected for dependency resolution."""

    SCALA_JS = "scala-js"
    NATIVE = "native"


_MARKERS = {
    "sjs": PlatformQualifier.SCALA_JS,
    "native": PlatformQualifier.NATIVE,
}


def freeze_mapping(mapping: Mapping[str, str] | Iterable[tuple[str, str]]) -> Attributes:
    """Return a sorted, hashable representation of a string mapping."""
    return tuple(sorted(dict(mapping).items()))


@dataclass(frozen=True)
class ModuleCoordinate:
    """Organization and name of a module, plus attributes and platform."""

    organization: str
    name: str
    attributes: Attributes = ()
    qualifier: PlatformQualifier = PlatformQualifier.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", freeze_mapping(self.attributes))

    @property
    def attribute_map(self) -> dict[str, str]:
        return dict(self.attributes)

    def with_attributes(self, attributes: Mapping[str, str]) -> ModuleCoordinate:
        return replace(self, attributes=freeze_mapping(attributes))

    def __str__(self) -> str:
        if self.qualifier is PlatformQualifier.NONE:
            text = f"{self.organization}:{self.name}"
        else:
            text = f"{self.organization}::{self.name}"
        if self.qualifier in (PlatformQualifier.SCALA_JS, PlatformQualifier.NATIVE):
            text += f"@{self.qualifier.value}"
        return text + "".join(f";{key}={value}" for key, value in self.attributes)


@dataclass(frozen=True)
class DependencyCoordinate:
    """A module at a given version, with its own dependency parameters."""

    module: ModuleCoordinate
    version: str
    params: Attributes = ()
    transitive: bool = True
    exclusions: frozenset[ModuleCoordinate] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", freeze_mapping(self.params))

    @property
    def param_map(self) -> dict[str, str]:
        return dict(self.params)

    def with_module(self, module: ModuleCoordinate) -> DependencyCoordinate:
        return replace(self, module=module)

    def intransitive(self) -> DependencyCoordinate:
        return replace(self, transitive=False)

    def with_exclusions(self, modules: Iterable[ModuleCoordinate]) -> DependencyCoordinate:
        return replace(self, exclusions=self.exclusions | frozenset(modules))

    def __str__(self) -> str:
        return f"{self.module}:{self.version}" + "".join(
            f",{key}={value}" for key, value in self.params
        )


def _malformed(message: str) -> Invalid:
    return invalid(ParamError(ErrorKind.MALFORMED_COORDINATE, message))


def _module_from_match(found: re.Match[str], source: str) -> Validated[ModuleCoordinate]:
    if found["sep"] == "::":
        qualifier = PlatformQualifier.SCALA
    else:
        qualifier = PlatformQualifier.NONE

    marker = found["marker"]
    if marker is not None:
        if marker not in _MARKERS:
            return _malformed(
                f"Unknown platform marker '{marker}' in '{source}' (expected sjs or native)"
            )
        if qualifier is PlatformQualifier.NONE:
            return _malformed(f"Platform marker in '{source}' requires an ORG::NAME module")
        qualifier = _MARKERS[marker]

    attributes = [
        tuple(item.split("=", 1)) for item in found["attrs"].split(";") if item
    ]
    keys = [key for key, _ in attributes]
    if len(set(keys)) != len(keys):
        return _malformed(f"Duplicate attribute in '{source}'")

    return valid(
        ModuleCoordinate(
            organization=found["org"],
            name=found["name"],
            attributes=freeze_mapping(attributes),
            qualifier=qualifier,
        )
    )


def parse_module(text: str) -> Validated[ModuleCoordinate]:
    """Parse a module coordinate such as ``org:name`` or ``org::name@sjs``."""
    found = _MODULE_RE.fullmatch(text.strip())
    if found is None:
        return _malformed(f"Malformed module '{text}': expected {MODULE_SYNTAX}")
    return _module_from_match(found, text)


def parse_modules(texts: Iterable[str]) -> Validated[tuple[ModuleCoordinate, ...]]:
    """Parse every module string, collecting all failures in input order."""
    return traverse(texts, parse_module)


def _parse_exclusion(value: str, source: str) -> Validated[ModuleCoordinate]:
    org, sep, name = value.partition("%")
    if not sep or not org or not name or "%" in name:
        return _malformed(f"Malformed exclusion '{value}' in '{source}': expected ORG%NAME")
    return valid(ModuleCoordinate(org, name))


def parse_dependency(
    text: str,
) -> Validated[tuple[DependencyCoordinate, Mapping[str, str]]]:
    """Parse a dependency and its parameters.

    Returns
    -------
    Validated[tuple[DependencyCoordinate, Mapping[str, str]]]
        The dependency, and the parameters it does not consume itself.
    """
    head, *items = text.strip().split(",")
    found = _DEPENDENCY_RE.fullmatch(head)
    if found is None:
        return _malformed(f"Malformed dependency '{text}': expected {DEPENDENCY_SYNTAX}")

    own: dict[str, str] = {}
    auxiliary: dict[str, str] = {}
    item_vs: list[Validated[object]] = []
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            item_vs.append(
                _malformed(
                    f"Malformed dependency parameter '{item}' in '{text}': expected KEY=VALUE"
                )
            )
        elif key == "exclude":
            item_vs.append(_parse_exclusion(value, text))
        elif key in DEPENDENCY_PARAM_KEYS:
            own[key] = value
        else:
            auxiliary[key] = value

    match combine(_module_from_match(found, text), combine(*item_vs)):
        case Valid(value=(module, parsed_items)):
            dependency = DependencyCoordinate(
                module=module,
                version=found["version"],
                params=freeze_mapping(own),
                exclusions=frozenset(
                    item for item in parsed_items if isinstance(item, ModuleCoordinate)
                ),
            )
            return valid((dependency, MappingProxyType(auxiliary)))
        case Invalid() as failure:
            return failure


def parse_dependencies(
    texts: Iterable[str],
) -> Validated[tuple[tuple[DependencyCoordinate, Mapping[str, str]], ...]]:
    """Parse every dependency string, collecting all failures in input order."""
    return traverse(texts, parse_dependency)
