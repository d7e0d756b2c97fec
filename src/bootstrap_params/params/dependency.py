"""Dependency-selection parameters."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from bootstrap_params.coordinates import (
    DependencyCoordinate,
    ModuleCoordinate,
    Platform,
    parse_dependencies,
    parse_modules,
)
from bootstrap_params.exclude_file import (
    EMPTY_EXCLUDE_MAPPING,
    ExcludeMapping,
    read_exclude_file,
)
from bootstrap_params.params.checks import check_exclude_attributes, check_platform
from bootstrap_params.sbt_defaults import inject_defaults, plugin_defaults
from bootstrap_params.schemas import DependencyOptions
from bootstrap_params.validation import (
    Valid,
    Validated,
    combine,
    map_valid,
    valid,
    with_context,
)

logger = logging.getLogger(__name__)

type DependencyWithParams = tuple[DependencyCoordinate, Mapping[str, str]]


@dataclass(frozen=True)
class DependencyParams:
    """Validated dependency-selection parameters."""

    exclude: frozenset[ModuleCoordinate]
    per_module_exclude: ExcludeMapping
    intransitive_dependencies: tuple[DependencyWithParams, ...]
    sbt_plugin_dependencies: tuple[DependencyWithParams, ...]
    platform: Platform | None = None

    @property
    def native(self) -> bool:
        return self.platform is Platform.NATIVE

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly view."""
        return {
            "exclude": sorted(str(module) for module in self.exclude),
            "per_module_exclude": {
                str(parent): sorted(str(child) for child in children)
                for parent, children in self.per_module_exclude.items()
            },
            "intransitive_dependencies": [
                _dependency_dict(dependency, params)
                for dependency, params in self.intransitive_dependencies
            ],
            "sbt_plugin_dependencies": [
                _dependency_dict(dependency, params)
                for dependency, params in self.sbt_plugin_dependencies
            ],
            "platform": self.platform.value if self.platform else None,
        }


def _dependency_dict(
    dependency: DependencyCoordinate, params: Mapping[str, str]
) -> dict[str, object]:
    return {
        "dependency": str(dependency),
        "attributes": dependency.module.attribute_map,
        "transitive": dependency.transitive,
        "exclusions": sorted(str(module) for module in dependency.exclusions),
        "params": dict(params),
    }


def apply_exclusions(
    dependencies: Iterable[DependencyWithParams],
    exclude: frozenset[ModuleCoordinate],
    per_module_exclude: ExcludeMapping,
) -> tuple[DependencyWithParams, ...]:
    """Add global and per-module exclusions to each dependency."""
    return tuple(
        (
            dependency.with_exclusions(
                exclude | per_module_exclude.get(dependency.module, frozenset())
            ),
            params,
        )
        for dependency, params in dependencies
    )


def _exclude_modules(texts: Iterable[str]) -> Validated[frozenset[ModuleCoordinate]]:
    match with_context(parse_modules(texts), "Cannot parse excluded module"):
        case Valid(value=modules):
            return check_exclude_attributes(modules)
        case failure:
            return failure


def _per_module_exclude(path: str) -> Validated[ExcludeMapping]:
    if not path:
        return valid(EMPTY_EXCLUDE_MAPPING)
    return with_context(read_exclude_file(path), path)


def _sbt_plugins(
    texts: list[str], sbt_version: str, forced_scala_version: str | None
) -> Validated[tuple[DependencyWithParams, ...]]:
    parsed = with_context(parse_dependencies(texts), "Cannot parse sbt plugin dependency")
    if not texts:
        return parsed
    defaults = plugin_defaults(sbt_version, forced_scala_version)
    logger.debug("sbt plugin default attributes: %s", defaults)
    return map_valid(
        parsed,
        lambda plugins: tuple(
            (inject_defaults(dependency, defaults), params) for dependency, params in plugins
        ),
    )


def build_dependency_params(
    options: DependencyOptions, forced_scala_version: str | None = None
) -> Validated[DependencyParams]:
    """Validate dependency options.

    Every field is checked independently; errors are reported in field order
    (excludes, exclude file, intransitive dependencies, sbt plugins, platform).

    Parameters
    ----------
    options : DependencyOptions
        Raw dependency options.
    forced_scala_version : str | None, default=None
        Scala version requested by the user, used for sbt plugin defaults.

    Returns
    -------
    Validated[DependencyParams]
        The parameters, or every error found.

    Raises
    ------
    ExcludeFileError
        If ``options.local_exclude_file`` is set but cannot be read.
    """
    logger.debug("building dependency params")
    result = combine(
        _exclude_modules(options.exclude),
        _per_module_exclude(options.local_exclude_file),
        with_context(
            parse_dependencies(options.intransitive),
            "Cannot parse intransitive dependency",
        ),
        _sbt_plugins(options.sbt_plugin, options.sbt_version, forced_scala_version),
        check_platform(scala_js=options.scala_js, native=options.native),
    )
    match result:
        case Valid(value=(exclude, per_module_exclude, intransitive, sbt_plugins, platform)):
            intransitive = tuple(
                (dependency.intransitive(), params) for dependency, params in intransitive
            )
            return valid(
                DependencyParams(
                    exclude=exclude,
                    per_module_exclude=per_module_exclude,
                    intransitive_dependencies=apply_exclusions(
                        intransitive, exclude, per_module_exclude
                    ),
                    sbt_plugin_dependencies=sbt_plugins,
                    platform=platform,
                )
            )
        case failure:
            logger.info("dependency options rejected with %d error(s)", len(failure.errors))
            return failure
