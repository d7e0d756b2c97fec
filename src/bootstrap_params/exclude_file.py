"""Per-module exclusion file parsing.

Each non-blank line reads ``PARENT--CHILD_ORG:CHILD_NAME`` and excludes the
child module from the dependencies pulled in by the parent module, e.g.::

    org.example::app--com.google.guava:guava
    org.example::app--commons-logging:commons-logging
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from bootstrap_params.coordinates import ModuleCoordinate, parse_module
from bootstrap_params.errors import ErrorKind, ExcludeFileError, ParamError
from bootstrap_params.validation import Invalid, Valid, Validated, combine, invalid, valid

logger = logging.getLogger(__name__)

type ExcludeMapping = Mapping[ModuleCoordinate, frozenset[ModuleCoordinate]]

EMPTY_EXCLUDE_MAPPING: ExcludeMapping = MappingProxyType({})


def _malformed_line(line: str, reason: str) -> Invalid:
    return invalid(
        ParamError(
            ErrorKind.MALFORMED_EXCLUDE_LINE,
            f"Failed to parse exclude line '{line}': {reason}",
        )
    )


def parse_exclude_line(line: str) -> Validated[tuple[ModuleCoordinate, ModuleCoordinate]]:
    """Parse one line into a ``(parent, child)`` pair."""
    segments = line.split("--")
    if len(segments) != 2:
        return _malformed_line(line, "expected PARENT--CHILD_ORG:CHILD_NAME")
    parent_text, child_text = segments

    child_segments = child_text.split(":")
    if len(child_segments) != 2 or not all(child_segments):
        return _malformed_line(line, "expected CHILD_ORG:CHILD_NAME after '--'")
    child = ModuleCoordinate(child_segments[0], child_segments[1])

    match parse_module(parent_text):
        case Valid(value=parent):
            return valid((parent, child))
        case Invalid(errors=errors):
            return _malformed_line(line, "; ".join(error.message for error in errors))


def group_by_parent(
    pairs: Iterable[tuple[ModuleCoordinate, ModuleCoordinate]],
) -> ExcludeMapping:
    """Group ``(parent, child)`` pairs, keeping parents in first-seen order."""
    grouped: dict[ModuleCoordinate, set[ModuleCoordinate]] = {}
    for parent, child in pairs:
        grouped.setdefault(parent, set()).add(child)
    return MappingProxyType(
        {parent: frozenset(children) for parent, children in grouped.items()}
    )


def parse_exclude_lines(lines: Iterable[str]) -> Validated[ExcludeMapping]:
    """Parse every non-blank line, reporting all malformed lines together."""
    results = [parse_exclude_line(line.strip()) for line in lines if line.strip()]
    match combine(*results):
        case Valid(value=pairs):
            return valid(group_by_parent(pairs))
        case failure:
            return failure


def read_exclude_file(path: str | Path) -> Validated[ExcludeMapping]:
    """Read and parse an exclusion file.

    Parameters
    ----------
    path : str | Path
        UTF-8 text file with one ``PARENT--CHILD_ORG:CHILD_NAME`` rule per line.

    Returns
    -------
    Validated[ExcludeMapping]
        The grouped exclusions, or every malformed line.

    Raises
    ------
    ExcludeFileError
        If the file cannot be opened or decoded.
    """
    file_path = Path(path)
    try:
        with file_path.open(encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        raise ExcludeFileError(str(file_path), reason) from exc

    logger.debug("read exclude file %s (%d bytes)", file_path, len(content))
    return parse_exclude_lines(content.splitlines())
