"""Error kinds, accumulated error values, and exceptions raised at the edges."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    """Closed set of failure categories."""

    MALFORMED_COORDINATE = "malformed-coordinate"
    MALFORMED_RULE = "malformed-rule"
    MALFORMED_EXCLUDE_LINE = "malformed-exclude-line"
    MUTUALLY_EXCLUSIVE_FLAGS = "mutually-exclusive-flags"
    UNSUPPORTED_ATTRIBUTE_ON_EXCLUDE = "unsupported-attribute-on-exclude"
    FILE_IO = "file-io"


@dataclass(frozen=True)
class ParamError:
    """A single user-facing validation failure."""

    kind: ErrorKind
    message: str

    def with_context(self, context: str) -> ParamError:
        """Return the same error with ``context`` prefixed to its message."""
        return ParamError(self.kind, f"{context}: {self.message}")

    def __str__(self) -> str:
        return self.message


class ParamsError(Exception):
    """Base exception for parameter building failures."""

    exit_code = 1


class ExcludeFileError(ParamsError):
    """Raised when the exclude file cannot be opened or read."""

    kind = ErrorKind.FILE_IO

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read exclude file {path}: {reason}")
        self.path = path


class OptionsError(ParamsError):
    """Raised when a raw option bag does not match its schema."""

    exit_code = 2


class InvalidParamsError(ParamsError):
    """Raised by ``unwrap`` when a validation result carries errors."""

    exit_code = 2

    def __init__(self, errors: Sequence[ParamError]) -> None:
        self.errors = tuple(errors)
        super().__init__("\n".join(error.message for error in self.errors))
