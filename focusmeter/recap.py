"""Score recap display: composite panel, explanations, and usage tables."""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from focusmeter.insights import (
    describe,
    effective_work_minutes,
    explain,
    focus_metrics,
    recommendations,
    time_by_app,
    time_by_category,
    usage_suggestions,
    usage_summary,
)
from focusmeter.models import ClassifiedSample, ScoreResult
from focusmeter.rules import RuleTable
from focusmeter.scoring import SessionWindow
from focusmeter.ui import (
    CATEGORY_COLORS,
    TIER_COLORS,
    category_markup,
    console,
    format_duration,
    score_color,
)


def _build_color_bar(productive: float, neutral: float, unproductive: float, width: int = 40) -> Text:
    """Build a colored proportion bar."""
    total = productive + neutral + unproductive
    if total == 0:
        return Text("░" * width, style="dim")

    green_w = max(1, round(productive / total * width)) if productive > 0 else 0
    yellow_w = max(1, round(neutral / total * width)) if neutral > 0 else 0
    red_w = width - green_w - yellow_w
    if red_w < 0:
        yellow_w += red_w
        red_w = 0

    bar = Text()
    bar.append("█" * green_w, style="green")
    bar.append("█" * yellow_w, style="yellow")
    bar.append("█" * red_w, style="red")
    return bar


def _score_line(label: str, value: float | None) -> Text:
    line = Text(f"  {label:<10}")
    if value is None:
        line.append("n/a", style="dim")
    else:
        line.append(f"{value:5.1f}", style=f"bold {score_color(value)}")
    return line


def show_score(result: ScoreResult, window: SessionWindow) -> None:
    """Print the composite score panel followed by explanations and tips."""
    cat_seconds = {row.category: row.seconds for row in time_by_category(window.samples)}
    tier_color = TIER_COLORS.get(result.tier, "white")

    body = Text()
    body.append("  Composite: ")
    body.append(f"{result.composite_score:.0f}/100", style=f"bold {tier_color}")
    body.append("  ")
    body.append(result.tier, style=tier_color)
    body.append(f"    Tracked: {format_duration(window.elapsed_ms / 1000)}")
    body.append(f"    Samples: {window.sample_count}\n")
    for label, value in (
        ("Activity", result.activity_score),
        ("App", result.app_score),
        ("URL", result.url_score),
        ("Focus", result.focus_score),
    ):
        body.append_text(_score_line(label, value))
        body.append("\n")
    body.append("  ")
    body.append_text(
        _build_color_bar(
            cat_seconds.get("productive", 0.0),
            cat_seconds.get("neutral", 0.0),
            cat_seconds.get("unproductive", 0.0),
        )
    )
    effective = effective_work_minutes(window.elapsed_ms / 60_000, window.context_switch_count)
    body.append(
        f"\n  Switches: {window.context_switch_count}    Short sessions: {window.short_session_count}"
        f"    Effective work: {format_duration(effective * 60)}"
    )

    console.print(Panel(body, title="[bold]Productivity Score[/bold]", border_style="bright_blue"))

    if window.sample_count:
        for line in usage_summary(window.samples):
            console.print(f"  {escape(line)}")

    notes = explain(result) + usage_suggestions(window.samples) + recommendations(focus_metrics(window))
    for note in notes:
        console.print(f"  [dim]•[/dim] {escape(note)}")


def show_top_apps(samples: list[ClassifiedSample] | tuple[ClassifiedSample, ...], limit: int = 10) -> None:
    rows = time_by_app(samples)[:limit]
    if not rows:
        return
    table = Table(title="Top Apps", show_lines=False, pad_edge=False)
    table.add_column("#", style="dim", width=3)
    table.add_column("App", style="bold", min_width=20)
    table.add_column("Time", min_width=10)
    table.add_column("Share", min_width=6)
    table.add_column("Category", min_width=12)

    for i, row in enumerate(rows, 1):
        table.add_row(
            str(i),
            escape(row.name),
            format_duration(row.seconds),
            f"{row.percentage:.0f}%",
            category_markup(row.category),
        )
    console.print(table)


def show_classification(classified: ClassifiedSample) -> None:
    """Show how a single sample was classified and which rule decided it."""
    color = CATEGORY_COLORS.get(classified.category, "white")
    rule = escape(classified.rule.describe()) if classified.rule is not None else "none (default)"
    about = describe(classified)
    content = (
        f"  App:      [bold]{escape(classified.app_name)}[/bold]\n"
        f"  Title:    {escape(classified.sample.window_title) or '[dim]-[/dim]'}\n"
        f"  URL:      {escape(classified.url or '') or '[dim]-[/dim]'}\n"
        f"\n"
        f"  Category: [bold {color}]{classified.category}[/bold {color}]\n"
        f"  Weight:   {classified.weight:.2f}\n"
        f"  Source:   {classified.source}\n"
        f"  Rule:     {rule}"
        f"\n\n  [italic]{escape(about.description)}[/italic]\n"
        f"  [dim]{escape(about.suggestion)}[/dim]"
    )
    console.print(Panel(content, title="[bold]Classification[/bold]", border_style=color))


def show_rules(table: RuleTable) -> None:
    """List a rule table in evaluation order."""
    secondary = "Title" if table.kind == "app" else "Path"
    out = Table(title=f"{table.kind.upper()} rules (v{table.version}, {len(table)} rules)", show_lines=False)
    out.add_column("#", style="dim", width=4)
    out.add_column("Match", style="bold")
    out.add_column(secondary, style="cyan")
    out.add_column("Category", min_width=12)
    out.add_column("Weight", justify="right")

    for i, rule in enumerate(table, 1):
        out.add_row(
            str(i),
            escape(rule.primary.describe()),
            escape(f"/{rule.secondary.pattern}/") if rule.secondary is not None else "",
            category_markup(rule.category),
            f"{rule.effective_weight:.2f}",
        )
    console.print(out)
