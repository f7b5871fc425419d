"""Shared data models: categories, samples, and score results."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from focusmeter.errors import ValidationError

if TYPE_CHECKING:
    from focusmeter.rules import Rule

PRODUCTIVE = "productive"
NEUTRAL = "neutral"
UNPRODUCTIVE = "unproductive"

CATEGORIES: tuple[str, ...] = (PRODUCTIVE, NEUTRAL, UNPRODUCTIVE)

DEFAULT_WEIGHTS: dict[str, float] = {
    PRODUCTIVE: 1.0,
    NEUTRAL: 0.5,
    UNPRODUCTIVE: 0.0,
}

# How a sample got its category
SOURCE_APP = "app"
SOURCE_URL = "url"
SOURCE_DEFAULT = "default"
SOURCES = (SOURCE_APP, SOURCE_URL, SOURCE_DEFAULT)


def default_weight(category: str) -> float:
    return DEFAULT_WEIGHTS.get(category, DEFAULT_WEIGHTS[NEUTRAL])


def check_category(category: str) -> None:
    if category not in CATEGORIES:
        raise ValidationError(f"unknown category {category!r} (expected one of {', '.join(CATEGORIES)})")


def check_weight(weight: float) -> float:
    """Return *weight* as a float, rejecting non-numbers and values outside [0, 1]."""
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise ValidationError(f"weight must be a number, got {weight!r}")
    if not 0.0 <= weight <= 1.0:
        raise ValidationError(f"weight {weight} outside [0.0, 1.0]")
    return float(weight)


@dataclass(frozen=True)
class ActivitySample:
    app_name: str
    window_title: str
    url: str | None
    keystrokes: int
    clicks: int
    timestamp_ms: int

    def __post_init__(self) -> None:
        if self.keystrokes < 0 or self.clicks < 0:
            raise ValidationError(
                f"negative counters at {self.timestamp_ms}: "
                f"keystrokes={self.keystrokes}, clicks={self.clicks}"
            )
        if self.timestamp_ms < 0:
            raise ValidationError(f"negative timestamp: {self.timestamp_ms}")

    @classmethod
    def from_dict(cls, data: dict) -> ActivitySample:
        """Build a sample from a JSON-style dict (missing counters default to 0)."""
        if not isinstance(data, dict):
            raise ValidationError(f"malformed sample {data!r}: expected an object")
        try:
            keystrokes = int(data.get("keystrokes", 0))
            clicks = int(data.get("clicks", 0))
            timestamp_ms = int(data["timestamp_ms"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValidationError(f"malformed sample {data!r}: {exc}") from exc
        return cls(
            app_name=str(data.get("app_name") or ""),
            window_title=str(data.get("window_title") or ""),
            url=data.get("url") or None,
            keystrokes=keystrokes,
            clicks=clicks,
            timestamp_ms=timestamp_ms,
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ClassifiedSample:
    sample: ActivitySample
    category: str
    weight: float
    source: str = SOURCE_APP
    rule: Rule | None = None

    def __post_init__(self) -> None:
        check_category(self.category)
        object.__setattr__(self, "weight", check_weight(self.weight))
        if self.source not in SOURCES:
            raise ValidationError(f"unknown source {self.source!r}")

    @property
    def app_name(self) -> str:
        return self.sample.app_name

    @property
    def url(self) -> str | None:
        return self.sample.url

    @property
    def timestamp_ms(self) -> int:
        return self.sample.timestamp_ms

    @property
    def via_url(self) -> bool:
        """True when the URL classification overrode the app result."""
        return self.source == SOURCE_URL


@dataclass(frozen=True)
class ScoreResult:
    activity_score: float
    app_score: float
    url_score: float | None
    focus_score: float
    composite_score: float
    tier: str

    def to_dict(self) -> dict:
        return asdict(self)
