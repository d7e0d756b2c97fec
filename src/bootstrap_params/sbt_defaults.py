"""Default attributes for sbt plugin dependencies."""

from __future__ import annotations

from collections.abc import Mapping

from bootstrap_params.coordinates import DependencyCoordinate

SCALA_VERSION_ATTRIBUTE = "scalaVersion"
SBT_VERSION_ATTRIBUTE = "sbtVersion"

# Scala version sbt itself runs on, by sbt binary version.
SBT_SCALA_VERSIONS: Mapping[str, str] = {
    "0.13": "2.10",
    "1.0": "2.12",
}
FALLBACK_SCALA_VERSION = "2.12"


def _first_two(version: str) -> str:
    return ".".join(version.split(".")[:2])


def short_sbt_version(sbt_version: str) -> str:
    """Return the sbt binary version (every sbt 1.x shares ``1.0``)."""
    if sbt_version.split(".")[0] == "1":
        return "1.0"
    return _first_two(sbt_version)


def default_scala_version(short_version: str) -> str:
    return SBT_SCALA_VERSIONS.get(short_version, FALLBACK_SCALA_VERSION)


def plugin_defaults(
    sbt_version: str, forced_scala_version: str | None = None
) -> dict[str, str]:
    """Compute the attributes every sbt plugin dependency gets by default.

    Parameters
    ----------
    sbt_version : str
        Full sbt version, e.g. ``"1.5.8"`` or ``"0.13.18"``.
    forced_scala_version : str | None, default=None
        Scala version requested by the user; only its first two components
        are kept and it replaces the version derived from sbt.

    Returns
    -------
    dict[str, str]
        ``scalaVersion`` and ``sbtVersion`` attributes.
    """
    sbt_short = short_sbt_version(sbt_version)
    if forced_scala_version is not None:
        scala_short = _first_two(forced_scala_version)
    else:
        scala_short = default_scala_version(sbt_short)
    return {
        SCALA_VERSION_ATTRIBUTE: scala_short,
        SBT_VERSION_ATTRIBUTE: sbt_short,
    }


def inject_defaults(
    dependency: DependencyCoordinate, defaults: Mapping[str, str]
) -> DependencyCoordinate:
    """Add ``defaults`` to the module attributes; existing attributes win."""
    module = dependency.module
    return dependency.with_module(
        module.with_attributes({**defaults, **module.attribute_map})
    )
