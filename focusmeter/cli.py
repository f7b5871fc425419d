"""Terminal front end: score a sample file, classify one observation, list rules."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from rich.markup import escape

from focusmeter import __version__
from focusmeter.categorizer import classify
from focusmeter.config import CONFIG_FILE, Config, load_config
from focusmeter.errors import ValidationError
from focusmeter.models import ActivitySample
from focusmeter.recap import show_classification, show_rules, show_score, show_top_apps
from focusmeter.scoring import SessionWindow
from focusmeter.ui import console, print_error, print_info

logger = logging.getLogger(__name__)

USAGE = (
    "[dim]Usage: focusmeter --score FILE [--config PATH] [--verbose][/dim]\n"
    "[dim]       focusmeter --classify APP [--title TITLE] [--url URL] [--config PATH][/dim]\n"
    "[dim]       focusmeter --rules (app|url) [--config PATH][/dim]\n"
    "[dim]       focusmeter --version[/dim]"
)


def setup_logging(verbose: bool = False) -> None:
    logging.captureWarnings(True)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _pop_option(args: list[str], name: str) -> str | None:
    """Remove ``name VALUE`` from *args* and return VALUE (None if absent)."""
    if name not in args:
        return None
    i = args.index(name)
    if i + 1 >= len(args):
        raise ValidationError(f"{name} needs a value")
    value = args[i + 1]
    del args[i : i + 2]
    return value


def _pop_flag(args: list[str], name: str) -> bool:
    if name in args:
        args.remove(name)
        return True
    return False


def _load(config_path: str | None) -> Config:
    return load_config(Path(config_path) if config_path else CONFIG_FILE)


def read_samples(path: Path) -> list[ActivitySample]:
    """Read JSON-lines samples; blank lines are skipped."""
    samples: list[ActivitySample] = []
    with open(path, encoding="utf-8") as f:
        lineno = 0
        try:
            for lineno, line in enumerate(f, 1):
                if not line.strip():
                    continue
                data = json.loads(line)
                if not isinstance(data, dict):
                    raise ValidationError(f"{path}:{lineno}: expected a JSON object, got {data!r}")
                samples.append(ActivitySample.from_dict(data))
        except json.JSONDecodeError as exc:
            raise ValidationError(f"{path}:{lineno}: invalid JSON ({exc})") from exc
        except UnicodeDecodeError as exc:
            raise ValidationError(f"{path}: not valid UTF-8 after line {lineno} ({exc.reason})") from exc
    return samples


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _cmd_score(args: list[str]) -> None:
    config = _load(_pop_option(args, "--config"))
    if len(args) != 1:
        raise ValidationError("--score takes exactly one sample file")
    path = Path(args[0])

    app_rules, url_rules = config.app_rules(), config.url_rules()
    window = SessionWindow(config.scoring)
    for sample in read_samples(path):
        window = window.update(classify(sample, app_rules, url_rules))
    logger.debug("Scored %d samples from %s", window.sample_count, path)

    if window.sample_count == 0:
        print_info(f"No samples in {escape(str(path))}.")
    show_score(window.score(), window)
    show_top_apps(window.samples)


def _cmd_classify(args: list[str]) -> None:
    config = _load(_pop_option(args, "--config"))
    title = _pop_option(args, "--title") or ""
    url = _pop_option(args, "--url")
    if len(args) != 1:
        raise ValidationError("--classify takes exactly one app name")

    sample = ActivitySample(
        app_name=args[0],
        window_title=title,
        url=url,
        keystrokes=0,
        clicks=0,
        timestamp_ms=0,
    )
    show_classification(classify(sample, config.app_rules(), config.url_rules()))


def _cmd_rules(args: list[str]) -> None:
    config = _load(_pop_option(args, "--config"))
    kinds = args or ["app", "url"]
    for kind in kinds:
        if kind == "app":
            show_rules(config.app_rules())
        elif kind == "url":
            show_rules(config.url_rules())
        else:
            raise ValidationError(f"unknown rule table '{kind}' (use app or url)")


COMMANDS = {
    "--score": _cmd_score,
    "--classify": _cmd_classify,
    "--rules": _cmd_rules,
}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Entry point for the ``focusmeter`` command."""
    args = list(sys.argv[1:] if argv is None else argv)
    setup_logging(_pop_flag(args, "--verbose"))

    if not args:
        console.print(USAGE)
        return

    if args[0] in ("--version", "-v"):
        console.print(f"focusmeter v{__version__}")
        return

    command = COMMANDS.get(args[0])
    if command is None:
        print_error(f"Unknown option: {escape(args[0])}")
        console.print(USAGE)
        sys.exit(2)

    try:
        command(args[1:])
    except ValidationError as exc:
        print_error(escape(str(exc)))
        sys.exit(1)
    except OSError as exc:
        print_error(escape(f"{exc.strerror or exc}: {exc.filename}"))
        sys.exit(1)


if __name__ == "__main__":
    main()
