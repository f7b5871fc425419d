"""Session windows and productivity scoring.

A ``SessionWindow`` is immutable. ``update`` returns a new window that
shares the append-only sample log with its parent, so appending is O(1)
amortised and every counter the scorer needs is maintained incrementally.
Readers can score any window version while the producer keeps appending.

Scores:

* activity:  (keystrokes + clicks) / expected_activity_level, as 0-100
* app:       mean weight of samples classified through app rules, as 0-100
* url:       mean weight of samples classified through URL rules, or None
* focus:     100 - switches * switch_penalty - short runs * short_penalty
* composite: weighted blend of the four (url falls back to app)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from focusmeter.config import ScoringConfig
from focusmeter.errors import ValidationError
from focusmeter.models import ClassifiedSample, ScoreResult

# Lower bounds, inclusive, highest first
TIERS: tuple[tuple[float, str], ...] = (
    (85.0, "Exceptional"),
    (70.0, "High"),
    (50.0, "Moderate"),
    (30.0, "Low"),
)
LOWEST_TIER = "Very Low"


def tier_for(composite: float) -> str:
    composite = round(composite, 9)  # absorb float noise from the weighted sum
    for lower_bound, label in TIERS:
        if composite >= lower_bound:
            return label
    return LOWEST_TIER


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _app_key(app_name: str) -> str:
    return app_name.strip().casefold()


@dataclass(frozen=True)
class SessionWindow:
    config: ScoringConfig = field(default_factory=ScoringConfig)
    total_keystrokes: int = 0
    total_clicks: int = 0
    context_switch_count: int = 0
    short_session_count: int = 0
    app_weight_sum: float = 0.0
    app_sample_count: int = 0
    url_weight_sum: float = 0.0
    url_sample_count: int = 0
    first_timestamp_ms: int | None = None
    last_timestamp_ms: int | None = None
    # Open run: consecutive samples of the same app
    run_app: str | None = None
    run_start_ms: int | None = None
    # Runs already ended by a switch (or by close)
    closed_run_count: int = 0
    closed_run_ms: int = 0
    longest_run_ms: int = 0
    closed: bool = False
    _log: list[ClassifiedSample] = field(default_factory=list, repr=False, compare=False)
    _length: int = 0

    def __post_init__(self) -> None:
        self.config.validate()

    @classmethod
    def from_samples(
        cls,
        samples: Iterable[ClassifiedSample],
        config: ScoringConfig | None = None,
    ) -> SessionWindow:
        window = cls(config or ScoringConfig())
        for sample in samples:
            window = update(window, sample)
        return window

    @property
    def sample_count(self) -> int:
        return self._length

    @property
    def samples(self) -> tuple[ClassifiedSample, ...]:
        return tuple(self._log[: self._length])

    @property
    def elapsed_ms(self) -> int:
        if self.first_timestamp_ms is None or self.last_timestamp_ms is None:
            return 0
        return self.last_timestamp_ms - self.first_timestamp_ms

    @property
    def open_run_ms(self) -> int:
        if self.closed or self.run_start_ms is None or self.last_timestamp_ms is None:
            return 0
        return self.last_timestamp_ms - self.run_start_ms

    def update(self, sample: ClassifiedSample) -> SessionWindow:
        return update(self, sample)

    def score(self) -> ScoreResult:
        return score(self)

    def close(self, end_ms: int | None = None) -> SessionWindow:
        """Freeze the window.

        With *end_ms* the trailing run is ended there and judged like any
        other run; without it the trailing run is left out of the short
        session count.
        """
        if self.closed:
            return self
        if end_ms is None or self.run_start_ms is None:
            return replace(self, closed=True)
        if self.last_timestamp_ms is not None and end_ms < self.last_timestamp_ms:
            raise ValidationError(
                f"close time {end_ms} precedes last sample at {self.last_timestamp_ms}"
            )
        duration = end_ms - self.run_start_ms
        short = duration < self.config.short_session_threshold_seconds * 1000
        return replace(
            self,
            closed=True,
            short_session_count=self.short_session_count + (1 if short else 0),
            closed_run_count=self.closed_run_count + 1,
            closed_run_ms=self.closed_run_ms + duration,
            longest_run_ms=max(self.longest_run_ms, duration),
        )


def update(window: SessionWindow, sample: ClassifiedSample) -> SessionWindow:
    """Append one classified sample, returning the new window."""
    if window.closed:
        raise ValidationError("session window is closed")
    ts = sample.timestamp_ms
    if window.last_timestamp_ms is not None and ts < window.last_timestamp_ms:
        raise ValidationError(
            f"sample at {ts} is older than previous sample at {window.last_timestamp_ms}"
        )

    log = window._log
    if len(log) != window._length:
        # Appending to an older version: branch off a private copy
        log = log[: window._length]
    log.append(sample)

    key = _app_key(sample.app_name)
    switches = window.context_switch_count
    short = window.short_session_count
    run_app, run_start = window.run_app, window.run_start_ms
    closed_runs, closed_ms, longest = window.closed_run_count, window.closed_run_ms, window.longest_run_ms

    if window._length == 0:
        run_app, run_start = key, ts
    elif key != run_app:
        switches += 1
        duration = ts - run_start
        closed_runs += 1
        closed_ms += duration
        longest = max(longest, duration)
        if duration < window.config.short_session_threshold_seconds * 1000:
            short += 1
        run_app, run_start = key, ts

    if sample.via_url:
        app_sum, app_count = window.app_weight_sum, window.app_sample_count
        url_sum, url_count = window.url_weight_sum + sample.weight, window.url_sample_count + 1
    else:
        app_sum, app_count = window.app_weight_sum + sample.weight, window.app_sample_count + 1
        url_sum, url_count = window.url_weight_sum, window.url_sample_count

    return replace(
        window,
        total_keystrokes=window.total_keystrokes + sample.sample.keystrokes,
        total_clicks=window.total_clicks + sample.sample.clicks,
        context_switch_count=switches,
        short_session_count=short,
        app_weight_sum=app_sum,
        app_sample_count=app_count,
        url_weight_sum=url_sum,
        url_sample_count=url_count,
        first_timestamp_ms=ts if window.first_timestamp_ms is None else window.first_timestamp_ms,
        last_timestamp_ms=ts,
        run_app=run_app,
        run_start_ms=run_start,
        closed_run_count=closed_runs,
        closed_run_ms=closed_ms,
        longest_run_ms=longest,
        _log=log,
        _length=window._length + 1,
    )


def score(window: SessionWindow) -> ScoreResult:
    if window.sample_count == 0:
        return ScoreResult(
            activity_score=0.0,
            app_score=0.0,
            url_score=None,
            focus_score=0.0,
            composite_score=0.0,
            tier=LOWEST_TIER,
        )

    cfg = window.config
    events = window.total_keystrokes + window.total_clicks
    activity = _clamp(events / cfg.expected_activity_level * 100)

    url_score: float | None = None
    if window.url_sample_count:
        url_score = 100 * window.url_weight_sum / window.url_sample_count

    if window.app_sample_count:
        app_score = 100 * window.app_weight_sum / window.app_sample_count
    else:
        # Every sample went through the URL path
        app_score = url_score if url_score is not None else 0.0

    focus = _clamp(
        100
        - window.context_switch_count * cfg.switch_penalty
        - window.short_session_count * cfg.short_penalty
    )

    w = cfg.weights
    composite = _clamp(
        activity * w.activity
        + app_score * w.app
        + (url_score if url_score is not None else app_score) * w.url
        + focus * w.focus
    )

    return ScoreResult(
        activity_score=activity,
        app_score=app_score,
        url_score=url_score,
        focus_score=focus,
        composite_score=composite,
        tier=tier_for(composite),
    )


def score_samples(
    samples: Iterable[ClassifiedSample],
    config: ScoringConfig | None = None,
) -> ScoreResult:
    return score(SessionWindow.from_samples(samples, config))
