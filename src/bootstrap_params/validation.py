"""Accumulating validation results.

A validation either succeeds with a value (:class:`Valid`) or fails with an
ordered, non-empty tuple of :class:`~bootstrap_params.errors.ParamError`
(:class:`Invalid`). Independent results are merged with :func:`combine`,
which keeps every failure instead of stopping at the first one::

    >>> combine(valid(1), invalid(e1), valid(2), invalid(e2, e3))
    Invalid(errors=(e1, e2, e3))

``combine`` is associative, so nesting it as fields are added never changes
the order in which errors are reported.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from bootstrap_params.errors import InvalidParamsError, ParamError


@dataclass(frozen=True)
class Valid[T]:
    """Successful validation carrying ``value``."""

    value: T

    @property
    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """Failed validation carrying every collected error, in order."""

    errors: tuple[ParamError, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Invalid requires at least one error.")

    @property
    def is_valid(self) -> bool:
        return False

    def messages(self) -> list[str]:
        """Return the error messages, one per line of user output."""
        return [error.message for error in self.errors]


type Validated[T] = Valid[T] | Invalid


def valid[T](value: T) -> Valid[T]:
    """Build a successful result."""
    return Valid(value)


def invalid(error: ParamError, *more: ParamError) -> Invalid:
    """Build a failed result from one or more errors."""
    return Invalid((error, *more))


def combine(*results: Validated[Any]) -> Validated[tuple[Any, ...]]:
    """Merge independent results.

    Parameters
    ----------
    *results : Validated
        Results evaluated independently of each other.

    Returns
    -------
    Validated[tuple]
        ``Valid`` of the tuple of values when every result is valid, otherwise
        ``Invalid`` with the errors of all failed results concatenated in
        argument order.
    """
    values: list[Any] = []
    errors: list[ParamError] = []
    for result in results:
        match result:
            case Valid(value=value):
                values.append(value)
            case Invalid(errors=branch_errors):
                errors.extend(branch_errors)
    if errors:
        return Invalid(tuple(errors))
    return Valid(tuple(values))


def map_valid[T, U](result: Validated[T], fn: Callable[[T], U]) -> Validated[U]:
    """Apply ``fn`` to a valid value; pass failures through untouched."""
    match result:
        case Valid(value=value):
            return Valid(fn(value))
        case Invalid():
            return result


def traverse[T, U](
    items: Iterable[T], fn: Callable[[T], Validated[U]]
) -> Validated[tuple[U, ...]]:
    """Validate each item independently and combine the results in order."""
    return combine(*(fn(item) for item in items))


def unwrap[T](result: Validated[T]) -> T:
    """Return the valid value or raise :class:`InvalidParamsError`."""
    match result:
        case Valid(value=value):
            return value
        case Invalid(errors=errors):
            raise InvalidParamsError(errors)


def with_context[T](result: Validated[T], context: str) -> Validated[T]:
    """Prefix every error message of a failed result with ``context``."""
    match result:
        case Valid():
            return result
        case Invalid(errors=errors):
            return Invalid(tuple(error.with_context(context) for error in errors))
