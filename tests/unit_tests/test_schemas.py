"""Unit tests for raw option bag validation."""

from __future__ import annotations

import pytest

import bootstrap_params
from bootstrap_params.errors import OptionsError
from bootstrap_params.schemas import (
    BootstrapOptions,
    DependencyOptions,
    parse_bootstrap_options,
    parse_dependency_options,
)
from bootstrap_params.validation import Invalid, Valid


def test_parse_options_defaults() -> None:
    """Fill in defaults for omitted options."""
    assert parse_bootstrap_options({}) == BootstrapOptions()
    options = parse_dependency_options({"exclude": ["a:b"]})
    assert options.exclude == ["a:b"]
    assert options.sbt_version == "1.0"
    assert options.local_exclude_file == ""


def test_unknown_option_rejected() -> None:
    """Reject option keys the schema does not know."""
    with pytest.raises(OptionsError, match="Invalid bootstrap options"):
        parse_bootstrap_options({"outptu": "x"})


def test_wrong_type_rejected() -> None:
    """Reject values of the wrong type."""
    with pytest.raises(OptionsError, match="Invalid dependency options"):
        parse_dependency_options({"exclude": "a:b"})


def test_blank_sbt_version_rejected() -> None:
    """Require a non-empty sbt version."""
    with pytest.raises(OptionsError):
        parse_dependency_options({"sbt_version": "  "})
    assert DependencyOptions(sbt_version=" 1.5.8 ").sbt_version == "1.5.8"


def test_package_level_helpers() -> None:
    """Validate raw option bags through the top-level API."""
    deps = bootstrap_params.dependency_params({"sbt_plugin": ["org:p:1.0"]}, "2.13.1")
    assert isinstance(deps, Valid)

    result = bootstrap_params.bootstrap_command_params(
        {"scala_js": True, "native": True}, {"standalone": True}
    )
    assert isinstance(result, Invalid)
    assert len(result.errors) == 2
