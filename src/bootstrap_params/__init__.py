"""Validation and normalization of bootstrap and dependency options."""

from __future__ import annotations

from collections.abc import Mapping

from bootstrap_params.errors import (
    ErrorKind,
    ExcludeFileError,
    InvalidParamsError,
    OptionsError,
    ParamError,
    ParamsError,
)
from bootstrap_params.validation import Invalid, Valid, Validated, combine, unwrap

__version__ = "0.1.0"


def dependency_params(
    raw_options: Mapping[str, object],
    forced_scala_version: str | None = None,
) -> Validated:
    """Validate a raw dependency option bag.

    Parameters
    ----------
    raw_options : Mapping[str, object]
        Option bag with :class:`~bootstrap_params.schemas.DependencyOptions`
        keys.
    forced_scala_version : str | None, default=None
        Scala version requested by the user.

    Returns
    -------
    Validated[DependencyParams]
        ``Valid`` parameters or ``Invalid`` with every error found.

    Raises
    ------
    OptionsError
        If the option bag does not match its schema.
    ExcludeFileError
        If the exclude file cannot be read.
    """
    from bootstrap_params.params.dependency import build_dependency_params
    from bootstrap_params.schemas import parse_dependency_options

    return build_dependency_params(
        parse_dependency_options(raw_options), forced_scala_version
    )


def bootstrap_command_params(
    raw_dependency_options: Mapping[str, object],
    raw_bootstrap_options: Mapping[str, object],
    forced_scala_version: str | None = None,
) -> Validated:
    """Validate the raw option bags of a bootstrap run.

    Parameters
    ----------
    raw_dependency_options : Mapping[str, object]
        Option bag with :class:`~bootstrap_params.schemas.DependencyOptions`
        keys.
    raw_bootstrap_options : Mapping[str, object]
        Option bag with :class:`~bootstrap_params.schemas.BootstrapOptions`
        keys.
    forced_scala_version : str | None, default=None
        Scala version requested by the user.

    Returns
    -------
    Validated[BootstrapCommandParams]
        ``Valid`` parameters or ``Invalid`` with the errors of both option
        groups, dependency errors first.
    """
    from bootstrap_params.params.command import build_bootstrap_command_params
    from bootstrap_params.schemas import parse_bootstrap_options, parse_dependency_options

    return build_bootstrap_command_params(
        parse_dependency_options(raw_dependency_options),
        parse_bootstrap_options(raw_bootstrap_options),
        forced_scala_version,
    )


__all__ = [
    "ErrorKind",
    "ExcludeFileError",
    "Invalid",
    "InvalidParamsError",
    "OptionsError",
    "ParamError",
    "ParamsError",
    "Valid",
    "Validated",
    "bootstrap_command_params",
    "combine",
    "dependency_params",
    "unwrap",
]
