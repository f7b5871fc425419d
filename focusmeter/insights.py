"""Human-readable explanations and usage breakdowns derived from scores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from focusmeter.models import PRODUCTIVE, UNPRODUCTIVE, ClassifiedSample, ScoreResult
from focusmeter.scoring import SessionWindow

CONTEXT_SWITCH_COST_MINUTES = 23


@dataclass(frozen=True)
class FocusMetrics:
    context_switches: int
    average_session_minutes: float
    longest_session_minutes: float
    focus_score: float


@dataclass(frozen=True)
class UsageRow:
    name: str
    category: str
    seconds: float
    percentage: float


def explain(result: ScoreResult) -> list[str]:
    """One line per component that is notably high or low."""
    lines: list[str] = []

    if result.activity_score >= 70:
        lines.append("High activity level - consistent computer engagement")
    elif result.activity_score < 30:
        lines.append("Low activity level - consider increasing engagement")

    if result.app_score >= 70:
        lines.append("Using productive applications")
    elif result.app_score < 30:
        lines.append("Consider switching to more productive apps")

    if result.url_score is not None:
        if result.url_score >= 70:
            lines.append("Focused browsing on work-related sites")
        elif result.url_score < 30:
            lines.append("Consider focusing browsing on work-related sites")

    if result.focus_score >= 70:
        lines.append("Excellent focus - minimal context switching")
    elif result.focus_score < 50:
        lines.append("High context switching - try longer focus sessions")

    return lines


def focus_metrics(window: SessionWindow) -> FocusMetrics:
    """Session-length statistics, counting the still-open run as it stands."""
    runs = window.closed_run_count
    total_ms = window.closed_run_ms
    longest_ms = window.longest_run_ms
    if window.sample_count and not window.closed:
        runs += 1
        total_ms += window.open_run_ms
        longest_ms = max(longest_ms, window.open_run_ms)

    average = total_ms / runs / 60_000 if runs else 0.0
    return FocusMetrics(
        context_switches=window.context_switch_count,
        average_session_minutes=average,
        longest_session_minutes=longest_ms / 60_000,
        focus_score=window.score().focus_score,
    )


def recommendations(metrics: FocusMetrics) -> list[str]:
    tips: list[str] = []

    if metrics.context_switches > 5:
        tips.append(
            f"High context switching detected ({metrics.context_switches} switches). "
            "Try focusing on one task at a time to improve productivity."
        )

    if metrics.average_session_minutes < 15:
        tips.append(
            f"Short work sessions (avg {round(metrics.average_session_minutes)} min). "
            "Try blocking 25-30 minute focus sessions for better results."
        )

    if metrics.focus_score < 50:
        tips.append(
            f"Low focus score ({metrics.focus_score:.0f}/100). "
            "Consider using time-blocking techniques to reduce distractions."
        )

    if metrics.longest_session_minutes > 60:
        tips.append(
            f"Great focus! You had a {round(metrics.longest_session_minutes)}-minute uninterrupted session. "
            "Remember to take breaks every 90 minutes."
        )

    if not tips:
        tips.append("Keep up the good work! Maintain your focus patterns.")
    return tips


def effective_work_minutes(
    total_minutes: float,
    context_switches: int,
    switch_cost_minutes: float = CONTEXT_SWITCH_COST_MINUTES,
) -> float:
    """Tracked time minus the refocus cost of every context switch."""
    return max(0.0, total_minutes - context_switches * switch_cost_minutes)


def _durations(samples: Sequence[ClassifiedSample]) -> list[tuple[ClassifiedSample, float]]:
    # A sample lasts until the next one; the last sample has no measured length
    pairs = []
    for current, following in zip(samples, samples[1:]):
        pairs.append((current, (following.timestamp_ms - current.timestamp_ms) / 1000))
    return pairs


def _rows(totals: dict[str, tuple[str, float]]) -> list[UsageRow]:
    grand_total = sum(seconds for _, seconds in totals.values())
    rows = [
        UsageRow(
            name=name,
            category=category,
            seconds=seconds,
            percentage=(seconds / grand_total * 100) if grand_total else 0.0,
        )
        for name, (category, seconds) in totals.items()
        if seconds > 0
    ]
    rows.sort(key=lambda r: r.seconds, reverse=True)
    return rows


def time_by_app(samples: Sequence[ClassifiedSample]) -> list[UsageRow]:
    """Seconds per app, longest first. The category shown is the latest one seen."""
    totals: dict[str, tuple[str, float]] = {}
    for sample, seconds in _durations(samples):
        _, previous = totals.get(sample.app_name, (sample.category, 0.0))
        totals[sample.app_name] = (sample.category, previous + seconds)
    return _rows(totals)


def time_by_category(samples: Sequence[ClassifiedSample]) -> list[UsageRow]:
    totals: dict[str, tuple[str, float]] = {}
    for sample, seconds in _durations(samples):
        _, previous = totals.get(sample.category, (sample.category, 0.0))
        totals[sample.category] = (sample.category, previous + seconds)
    return _rows(totals)


# ---------------------------------------------------------------------------
# Per-activity descriptions
# ---------------------------------------------------------------------------

_BROWSERS = ("chrome", "firefox", "edge")

_SITE_DESCRIPTIONS = (
    ("youtube", "You're watching YouTube"),
    ("netflix", "You're watching Netflix"),
    ("github", "You're working on GitHub"),
    ("stackoverflow", "You're reading Stack Overflow"),
    ("reddit", "You're browsing Reddit"),
    ("discord", "You're on Discord"),
    ("slack", "You're using Slack"),
)

_APP_DESCRIPTIONS = (
    ("code", "You're coding in VS Code"),
    ("spotify", "You're listening to music"),
    ("discord", "You're chatting on Discord"),
    ("whatsapp", "You're messaging on WhatsApp"),
    ("slack", "You're working on Slack"),
    ("teams", "You're in a Teams meeting"),
    ("zoom", "You're in a Zoom meeting"),
)

COMMUNICATION_APPS = ("slack", "teams", "zoom", "discord", "whatsapp", "telegram", "signal", "skype", "webex")


@dataclass(frozen=True)
class ActivityDescription:
    description: str
    suggestion: str


def _description(app_name: str, url: str, category: str) -> str:
    app = app_name.lower()
    if any(name in app for name in _BROWSERS):
        for needle, text in _SITE_DESCRIPTIONS:
            if needle in url:
                return text
        return f"You're browsing in {app_name}"

    for needle, text in _APP_DESCRIPTIONS:
        if needle in app:
            return text

    if category == PRODUCTIVE:
        return f"You're working in {app_name}"
    if category == UNPRODUCTIVE:
        return f"You're using {app_name} for entertainment"
    if any(name in app for name in COMMUNICATION_APPS):
        return f"You're communicating via {app_name}"
    return f"You're using {app_name}"


def _suggestion(app_name: str, url: str, category: str) -> str:
    app = app_name.lower()
    if category == UNPRODUCTIVE:
        if "youtube" in url or "youtube" in app:
            return "Take a short break after 15 minutes"
        if "netflix" in url or "netflix" in app:
            return "Consider setting a viewing limit"
        if "game" in app or "steam" in app:
            return "Remember to take breaks every hour"
        return "Consider taking a break soon"

    if category == PRODUCTIVE:
        if "code" in app:
            return "Great focus! Take a 5-minute break every 25 minutes"
        return "Stay hydrated and take regular breaks"

    if any(name in app for name in COMMUNICATION_APPS):
        return "Keep conversations focused and productive"
    return "Maintain a healthy balance between work and rest"


def describe(classified: ClassifiedSample) -> ActivityDescription:
    """A one-line description of what the user is doing plus a matching tip."""
    url = (classified.url or "").lower()
    return ActivityDescription(
        description=_description(classified.app_name, url, classified.category),
        suggestion=_suggestion(classified.app_name, url, classified.category),
    )


# ---------------------------------------------------------------------------
# Usage-based suggestions and summaries
# ---------------------------------------------------------------------------

HOUR = 3600


def time_summary(seconds: float) -> str:
    """Compact duration such as ``45s``, ``12m``, ``2h`` or ``1h 5m``."""
    seconds = int(seconds)
    if seconds < 60:
        return f"{seconds}s"
    hours, minutes = seconds // HOUR, (seconds % HOUR) // 60
    if hours:
        return f"{hours}h {minutes}m" if minutes else f"{hours}h"
    return f"{minutes}m"


def productivity_percentage(samples: Sequence[ClassifiedSample]) -> int:
    """Share of measured time spent on productive activity, rounded."""
    rows = time_by_category(samples)
    total = sum(row.seconds for row in rows)
    if not total:
        return 0
    productive = sum(row.seconds for row in rows if row.category == PRODUCTIVE)
    return round(productive / total * 100)


def usage_suggestions(samples: Sequence[ClassifiedSample]) -> list[str]:
    """Tips driven by where the time went. Empty when nothing stands out."""
    by_category = {row.category: row.seconds for row in time_by_category(samples)}
    productive = by_category.get(PRODUCTIVE, 0.0)
    unproductive = by_category.get(UNPRODUCTIVE, 0.0)
    total = sum(by_category.values())
    apps = time_by_app(samples)

    tips: list[str] = []
    if unproductive > productive and unproductive > HOUR:
        tips.append("You've spent more time on entertainment than work. Consider focusing on work tasks.")
    if productivity_percentage(samples) < 50 and total > 30 * 60:
        tips.append("Your productivity is below 50%. Try to focus more on work-related activities.")
    if apps and apps[0].category == UNPRODUCTIVE and apps[0].seconds > HOUR:
        tips.append(f"You've spent over an hour on {apps[0].name}. Consider taking a break.")
    if productive > 4 * HOUR:
        tips.append("You've been working for over 4 hours. Remember to take regular breaks!")
    return tips


def usage_summary(samples: Sequence[ClassifiedSample], categories: int = 3) -> list[str]:
    lines: list[str] = []
    by_category = time_by_category(samples)
    total = sum(row.seconds for row in by_category)
    if total > 0:
        lines.append(f"Total tracked time: {time_summary(total)}")

    apps = time_by_app(samples)
    if apps:
        lines.append(f"Most time spent on {apps[0].name}: {time_summary(apps[0].seconds)}")

    lines.append(f"Your productivity was {productivity_percentage(samples)}%")
    for row in by_category[:categories]:
        lines.append(f"{row.name.capitalize()}: {time_summary(row.seconds)} ({round(row.percentage)}%)")
    return lines
