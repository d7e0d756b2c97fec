"""Checks spanning several already-parsed options."""

from __future__ import annotations

from collections.abc import Iterable

from bootstrap_params.coordinates import ModuleCoordinate, Platform
from bootstrap_params.errors import ErrorKind, ParamError
from bootstrap_params.validation import Validated, invalid, valid

PACKAGING_FLAGS = ("--assembly", "--standalone", "--hybrid", "--native")


def check_packaging_flags(
    *, assembly: bool, standalone: bool, hybrid: bool, native: bool
) -> Validated[None]:
    """Allow at most one of the packaging modes."""
    enabled = [
        flag
        for flag, value in zip(PACKAGING_FLAGS, (assembly, standalone, hybrid, native))
        if value
    ]
    if len(enabled) > 1:
        return invalid(
            ParamError(
                ErrorKind.MUTUALLY_EXCLUSIVE_FLAGS,
                "Only one of --assembly, --standalone, --hybrid, or --native can be "
                f"specified (got {', '.join(enabled)})",
            )
        )
    return valid(None)


def check_platform(*, scala_js: bool, native: bool) -> Validated[Platform | None]:
    """Select the resolution platform from its two flags."""
    match scala_js, native:
        case False, False:
            return valid(None)
        case True, False:
            return valid(Platform.SCALA_JS)
        case False, True:
            return valid(Platform.NATIVE)
        case _:
            return invalid(
                ParamError(
                    ErrorKind.MUTUALLY_EXCLUSIVE_FLAGS,
                    "Cannot specify both --scala-js and --native",
                )
            )


def check_exclude_attributes(
    modules: Iterable[ModuleCoordinate],
) -> Validated[frozenset[ModuleCoordinate]]:
    """Reject excluded modules that carry attributes, listing all of them."""
    modules = tuple(modules)
    with_attributes = [module for module in modules if module.attributes]
    if with_attributes:
        return invalid(
            ParamError(
                ErrorKind.UNSUPPORTED_ATTRIBUTE_ON_EXCLUDE,
                "Excluded modules with attributes not supported: "
                + ", ".join(str(module) for module in with_attributes),
            )
        )
    return valid(frozenset(modules))
