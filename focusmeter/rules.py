"""Classification rules and ordered rule tables.

A rule maps a primary pattern (process name for app rules, domain for URL
rules) to a category, optionally narrowed by a secondary regex (window
title or URL path). Tables are ordered: the matcher resolves ties by
position, so a table is compared and versioned as a sequence.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from focusmeter.errors import ValidationError
from focusmeter.models import check_category, check_weight, default_weight

APP = "app"
URL = "url"
TABLE_KINDS = (APP, URL)

# Config key holding the secondary regex for each table kind
SECONDARY_KEYS = {APP: "title", URL: "path"}


def compile_pattern(value: str, field: str = "pattern") -> re.Pattern[str]:
    """Compile a case-insensitive regex, turning re.error into ValidationError."""
    try:
        return re.compile(value, re.IGNORECASE)
    except re.error as exc:
        raise ValidationError(f"invalid {field} regex {value!r}: {exc}") from exc


def _ignorecase(regex: re.Pattern[str]) -> re.Pattern[str]:
    if regex.flags & re.IGNORECASE:
        return regex
    return re.compile(regex.pattern, regex.flags | re.IGNORECASE)


@dataclass(frozen=True)
class ExactMatch:
    """Whole-string, case-insensitive comparison."""

    value: str

    def matches(self, text: str) -> bool:
        return self.value.strip().lower() == text.strip().lower()

    def describe(self) -> str:
        return self.value


@dataclass(frozen=True)
class PatternMatch:
    """Case-insensitive regex search."""

    regex: re.Pattern[str]

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None

    def describe(self) -> str:
        return f"/{self.regex.pattern}/"


Pattern = Union[ExactMatch, PatternMatch]


def as_pattern(value: object) -> Pattern:
    """A plain string is an exact match; a compiled regex is a pattern match."""
    if isinstance(value, (ExactMatch, PatternMatch)):
        return value
    if isinstance(value, re.Pattern):
        return PatternMatch(_ignorecase(value))
    if isinstance(value, str):
        if not value.strip():
            raise ValidationError("empty match pattern")
        return ExactMatch(value.strip().lower())
    raise ValidationError(f"unsupported match pattern {value!r}")


def _as_secondary(value: object) -> re.Pattern[str]:
    if isinstance(value, re.Pattern):
        return _ignorecase(value)
    if isinstance(value, str):
        return compile_pattern(value, "secondary")
    raise ValidationError(f"unsupported secondary pattern {value!r}")


@dataclass(frozen=True)
class Rule:
    primary: Pattern
    category: str
    secondary: re.Pattern[str] | None = None
    weight: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "primary", as_pattern(self.primary))
        if self.secondary is not None:
            object.__setattr__(self, "secondary", _as_secondary(self.secondary))
        check_category(self.category)
        if self.weight is not None:
            object.__setattr__(self, "weight", check_weight(self.weight))

    @property
    def effective_weight(self) -> float:
        return self.weight if self.weight is not None else default_weight(self.category)

    def describe(self) -> str:
        text = self.primary.describe()
        if self.secondary is not None:
            text += f" + /{self.secondary.pattern}/"
        return text


def app_rule(
    process: str | re.Pattern[str],
    category: str,
    title: str | re.Pattern[str] | None = None,
    weight: float | None = None,
) -> Rule:
    return Rule(as_pattern(process), category, title, weight)


def url_rule(
    domain: str | re.Pattern[str],
    category: str,
    path: str | re.Pattern[str] | None = None,
    weight: float | None = None,
) -> Rule:
    return Rule(as_pattern(domain), category, path, weight)


@dataclass(frozen=True)
class RuleTable:
    """Immutable, ordered sequence of rules of one kind."""

    kind: str
    rules: tuple[Rule, ...]
    version: str = "1"

    def __post_init__(self) -> None:
        if self.kind not in TABLE_KINDS:
            raise ValidationError(f"unknown rule table kind {self.kind!r}")
        rules = tuple(self.rules)
        for rule in rules:
            if not isinstance(rule, Rule):
                raise ValidationError(f"not a rule: {rule!r}")
        object.__setattr__(self, "rules", rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __getitem__(self, index: int) -> Rule:
        return self.rules[index]

    def with_custom_rules(self, custom: Iterable[Rule]) -> RuleTable:
        """Return a table with *custom* rules placed ahead of this table's rules."""
        custom = tuple(custom)
        if not custom:
            return self
        return RuleTable(self.kind, custom + self.rules, f"{self.version}+custom")


# ---------------------------------------------------------------------------
# Loading from config dicts
# ---------------------------------------------------------------------------


def rule_from_dict(data: dict, kind: str) -> Rule:
    """Build a rule from a config entry.

    Entries look like ``{"match": "github.com", "category": "productive"}``
    or ``{"regex": "^chrome", "title": "youtube", "category": "unproductive",
    "weight": 0.1}``. App rules use ``title`` for the secondary regex, URL
    rules use ``path``.
    """
    if kind not in TABLE_KINDS:
        raise ValidationError(f"unknown rule table kind {kind!r}")
    if "match" in data and "regex" in data:
        raise ValidationError("rule has both 'match' and 'regex'")
    if "match" in data:
        primary: Pattern = as_pattern(str(data["match"]))
    elif "regex" in data:
        primary = PatternMatch(compile_pattern(str(data["regex"]), "match"))
    else:
        raise ValidationError("rule needs 'match' or 'regex'")

    secondary_key = SECONDARY_KEYS[kind]
    secondary = data.get(secondary_key)
    if secondary is not None:
        secondary = compile_pattern(str(secondary), secondary_key)

    return Rule(primary, str(data.get("category", "")), secondary, data.get("weight"))


def rule_to_dict(rule: Rule, kind: str) -> dict:
    data: dict = {}
    if isinstance(rule.primary, ExactMatch):
        data["match"] = rule.primary.value
    else:
        data["regex"] = rule.primary.regex.pattern
    if rule.secondary is not None:
        data[SECONDARY_KEYS[kind]] = rule.secondary.pattern
    data["category"] = rule.category
    if rule.weight is not None:
        data["weight"] = rule.weight
    return data


def load_rule_table(entries: Iterable[dict], kind: str, version: str = "custom") -> RuleTable:
    """Validate config entries into a table; any bad entry fails the whole load."""
    rules: list[Rule] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValidationError(f"{kind} rule #{index}: expected an object, got {entry!r}")
        try:
            rules.append(rule_from_dict(entry, kind))
        except ValidationError as exc:
            raise ValidationError(f"{kind} rule #{index}: {exc}") from exc
    return RuleTable(kind, tuple(rules), version)
