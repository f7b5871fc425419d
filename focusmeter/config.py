"""Scoring parameters and custom rule persistence (~/.config/focusmeter/)."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict, dataclass, field
from pathlib import Path

from focusmeter.errors import ValidationError
from focusmeter.presets import DEFAULT_APP_RULES, DEFAULT_URL_RULES
from focusmeter.rules import APP, URL, RuleTable, load_rule_table

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "focusmeter"
CONFIG_FILE = CONFIG_DIR / "config.json"


@dataclass(frozen=True)
class CompositeWeights:
    activity: float = 0.25
    app: float = 0.25
    url: float = 0.20
    focus: float = 0.30

    @property
    def total(self) -> float:
        return self.activity + self.app + self.url + self.focus


@dataclass(frozen=True)
class ScoringConfig:
    """Tunables for the scorer.

    The defaults are product heuristics, not derived constants; change them
    here or in config.json rather than in the scoring code.
    """

    expected_activity_level: float = 100.0  # keystrokes + clicks that count as 100% activity
    switch_penalty: float = 10.0  # focus points lost per context switch
    short_penalty: float = 5.0  # focus points lost per short session
    short_session_threshold_seconds: float = 600.0
    weights: CompositeWeights = field(default_factory=CompositeWeights)

    def validate(self) -> None:
        if self.expected_activity_level <= 0:
            raise ValidationError("expected_activity_level must be positive")
        if self.switch_penalty < 0 or self.short_penalty < 0:
            raise ValidationError("penalties must not be negative")
        if self.short_session_threshold_seconds < 0:
            raise ValidationError("short_session_threshold_seconds must not be negative")
        w = self.weights
        if min(w.activity, w.app, w.url, w.focus) < 0:
            raise ValidationError("composite weights must not be negative")
        if not math.isclose(w.total, 1.0, abs_tol=1e-9):
            raise ValidationError(f"composite weights must sum to 1.0, got {w.total}")


@dataclass
class Config:
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    custom_app_rules: list[dict] = field(default_factory=list)
    custom_url_rules: list[dict] = field(default_factory=list)

    def app_rules(self) -> RuleTable:
        """Default app rules with the user's rules in front."""
        custom = load_rule_table(self.custom_app_rules, APP)
        return DEFAULT_APP_RULES.with_custom_rules(custom)

    def url_rules(self) -> RuleTable:
        custom = load_rule_table(self.custom_url_rules, URL)
        return DEFAULT_URL_RULES.with_custom_rules(custom)


def _scoring_from_dict(data: dict) -> ScoringConfig:
    if not isinstance(data, dict):
        raise ValidationError(f"scoring: expected an object, got {data!r}")
    defaults = ScoringConfig()
    w = data.get("weights", {})
    if not isinstance(w, dict):
        raise ValidationError(f"scoring.weights: expected an object, got {w!r}")
    try:
        weights = CompositeWeights(
            activity=float(w.get("activity", defaults.weights.activity)),
            app=float(w.get("app", defaults.weights.app)),
            url=float(w.get("url", defaults.weights.url)),
            focus=float(w.get("focus", defaults.weights.focus)),
        )
        scoring = ScoringConfig(
            expected_activity_level=float(data.get("expected_activity_level", defaults.expected_activity_level)),
            switch_penalty=float(data.get("switch_penalty", defaults.switch_penalty)),
            short_penalty=float(data.get("short_penalty", defaults.short_penalty)),
            short_session_threshold_seconds=float(
                data.get("short_session_threshold_seconds", defaults.short_session_threshold_seconds)
            ),
            weights=weights,
        )
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid scoring config: {exc}") from exc
    scoring.validate()
    return scoring


def _rule_list(raw: dict, key: str) -> list[dict]:
    entries = raw.get(key, [])
    if not isinstance(entries, list):
        raise ValidationError(f"{key}: expected a list of rules, got {entries!r}")
    return list(entries)


def config_from_dict(raw: dict) -> Config:
    """Build and validate a Config. Bad rules or tunables raise ValidationError."""
    config = Config(
        scoring=_scoring_from_dict(raw.get("scoring", {})),
        custom_app_rules=_rule_list(raw, "custom_app_rules"),
        custom_url_rules=_rule_list(raw, "custom_url_rules"),
    )
    # Compile now so a malformed pattern fails at load, not mid-classification
    config.app_rules()
    config.url_rules()
    return config


def load_config(path: Path = CONFIG_FILE) -> Config:
    if not path.exists():
        return Config()
    try:
        raw = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read %s (%s), using defaults", path, exc)
        return Config()
    if not isinstance(raw, dict):
        raise ValidationError(f"{path}: expected a JSON object")
    return config_from_dict(raw)


def save_config(config: Config, path: Path = CONFIG_FILE) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "scoring": asdict(config.scoring),
        "custom_app_rules": config.custom_app_rules,
        "custom_url_rules": config.custom_url_rules,
    }
    path.write_text(json.dumps(data, indent=2) + "\n")
