"""Rich console helpers shared by the recap screens and the CLI."""

from __future__ import annotations

from rich.console import Console

console = Console()
error_console = Console(stderr=True)

CATEGORY_COLORS = {
    "productive": "green",
    "neutral": "yellow",
    "unproductive": "red",
}

TIER_COLORS = {
    "Exceptional": "bright_green",
    "High": "green",
    "Moderate": "yellow",
    "Low": "dark_orange",
    "Very Low": "red",
}


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format seconds into human-readable duration string."""
    total = int(seconds)
    if total < 60:
        return f"{total}s"
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    parts: list[str] = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs:
        parts.append(f"{secs}s")
    return " ".join(parts)


def score_color(value: float) -> str:
    return "green" if value >= 70 else ("yellow" if value >= 40 else "red")


def category_markup(category: str) -> str:
    color = CATEGORY_COLORS.get(category, "white")
    return f"[{color}]{category}[/{color}]"


def print_error(message: str) -> None:
    error_console.print(f"[bold red]✗[/bold red] {message}")


def print_info(message: str) -> None:
    console.print(f"[bold blue]i[/bold blue] {message}")
