"""Unit tests for sbt plugin default attributes."""

from __future__ import annotations

import pytest

from bootstrap_params.coordinates import DependencyCoordinate, ModuleCoordinate
from bootstrap_params.sbt_defaults import (
    inject_defaults,
    plugin_defaults,
    short_sbt_version,
)


@pytest.mark.parametrize(
    ("version", "expected"),
    [("1.5.8", "1.0"), ("1.10.0", "1.0"), ("1", "1.0"), ("0.13.18", "0.13"), ("2.0.0-M2", "2.0")],
)
def test_short_sbt_version(version: str, expected: str) -> None:
    """Collapse every sbt 1.x to 1.0 and keep two components otherwise."""
    assert short_sbt_version(version) == expected


@pytest.mark.parametrize(
    ("version", "expected"),
    [
        ("1.5.8", {"sbtVersion": "1.0", "scalaVersion": "2.12"}),
        ("0.13.18", {"sbtVersion": "0.13", "scalaVersion": "2.10"}),
        ("2.0.0", {"sbtVersion": "2.0", "scalaVersion": "2.12"}),
    ],
)
def test_plugin_defaults_from_sbt_version(version: str, expected: dict[str, str]) -> None:
    """Derive the Scala version from the sbt binary version."""
    assert plugin_defaults(version) == expected


def test_forced_scala_version_wins() -> None:
    """Use the first two components of a forced Scala version."""
    assert plugin_defaults("0.13.18", "2.13.12") == {
        "sbtVersion": "0.13",
        "scalaVersion": "2.13",
    }


def test_own_attributes_override_defaults() -> None:
    """Keep attributes the dependency already declares."""
    dependency = DependencyCoordinate(
        ModuleCoordinate("org", "plugin", {"scalaVersion": "2.13"}), "1.0"
    )

    injected = inject_defaults(dependency, plugin_defaults("1.5.8"))

    assert injected.module.attribute_map == {"scalaVersion": "2.13", "sbtVersion": "1.0"}
    assert injected.version == "1.0"
    assert dependency.module.attribute_map == {"scalaVersion": "2.13"}
