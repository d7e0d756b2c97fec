"""Assembly merge rules and their ``name:value`` string form."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from bootstrap_params.errors import ErrorKind, ParamError
from bootstrap_params.validation import Valid, Validated, invalid, traverse, valid


@dataclass(frozen=True)
class Append:
    """Concatenate every entry found at ``path``."""

    path: str

    def matches(self, path: str) -> bool:
        return path == self.path


@dataclass(frozen=True)
class AppendPattern:
    """Concatenate every entry whose path fully matches ``pattern``."""

    pattern: str

    @property
    def regex(self) -> re.Pattern[str]:
        return re.compile(self.pattern)

    def matches(self, path: str) -> bool:
        return self.regex.fullmatch(path) is not None


@dataclass(frozen=True)
class Exclude:
    """Drop every entry found at ``path``."""

    path: str

    def matches(self, path: str) -> bool:
        return path == self.path


@dataclass(frozen=True)
class ExcludePattern:
    """Drop every entry whose path fully matches ``pattern``."""

    pattern: str

    @property
    def regex(self) -> re.Pattern[str]:
        return re.compile(self.pattern)

    def matches(self, path: str) -> bool:
        return self.regex.fullmatch(path) is not None


type MergeRule = Append | AppendPattern | Exclude | ExcludePattern

DEFAULT_RULES: tuple[MergeRule, ...] = (
    Append("reference.conf"),
    AppendPattern(r"META-INF/services/.*"),
    Exclude("log4j.properties"),
    Exclude("META-INF/MANIFEST.MF"),
    ExcludePattern(r"META-INF/.*\.[sS][fF]"),
    ExcludePattern(r"META-INF/.*\.[dD][sS][aA]"),
    ExcludePattern(r"META-INF/.*\.[rR][sS][aA]"),
)

_RULE_TYPES: dict[str, type[Append | AppendPattern | Exclude | ExcludePattern]] = {
    "append": Append,
    "append-pattern": AppendPattern,
    "exclude": Exclude,
    "exclude-pattern": ExcludePattern,
}


def _malformed(message: str) -> Validated[MergeRule]:
    return invalid(ParamError(ErrorKind.MALFORMED_RULE, message))


def parse_rule(text: str) -> Validated[MergeRule]:
    """Parse ``append:path``, ``append-pattern:regex``, ``exclude:path`` or
    ``exclude-pattern:regex``."""
    name, sep, value = text.partition(":")
    if not sep:
        return _malformed(f"Malformed assembly rule: {text}")

    rule_type = _RULE_TYPES.get(name)
    if rule_type is None:
        return _malformed(f"Unrecognized rule name '{name}' in rule '{text}'")

    if rule_type in (AppendPattern, ExcludePattern):
        try:
            re.compile(value)
        except re.error as exc:
            return _malformed(f"Invalid pattern '{value}' in rule '{text}': {exc}")

    return valid(rule_type(value))


def parse_rules(
    texts: Iterable[str], *, with_defaults: bool = False
) -> Validated[tuple[MergeRule, ...]]:
    """Parse rules in order, optionally preceded by :data:`DEFAULT_RULES`."""
    prefix = DEFAULT_RULES if with_defaults else ()
    match traverse(texts, parse_rule):
        case Valid(value=rules):
            return valid(prefix + rules)
        case failure:
            return failure


def first_match(path: str, rules: Iterable[MergeRule]) -> MergeRule | None:
    """Return the first rule, in list order, that applies to ``path``."""
    for rule in rules:
        if rule.matches(path):
            return rule
    return None


def format_rule(rule: MergeRule) -> str:
    """Render a rule back to its ``name:value`` form."""
    match rule:
        case Append(path=path):
            return f"append:{path}"
        case AppendPattern(pattern=pattern):
            return f"append-pattern:{pattern}"
        case Exclude(path=path):
            return f"exclude:{path}"
        case ExcludePattern(pattern=pattern):
            return f"exclude-pattern:{pattern}"
