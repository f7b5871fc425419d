"""Activity classification and productivity scoring."""

__version__ = "0.1.0"

from focusmeter.categorizer import classify, classify_all
from focusmeter.config import CompositeWeights, Config, ScoringConfig, load_config, save_config
from focusmeter.errors import NoRuleMatchedWarning, ValidationError
from focusmeter.matcher import RuleMatch, match_app, match_url, split_url
from focusmeter.models import ActivitySample, ClassifiedSample, ScoreResult
from focusmeter.presets import DEFAULT_APP_RULES, DEFAULT_URL_RULES
from focusmeter.rules import ExactMatch, PatternMatch, Rule, RuleTable, app_rule, url_rule
from focusmeter.scoring import SessionWindow, score, score_samples, tier_for, update

__all__ = [
    "__version__",
    "ActivitySample",
    "ClassifiedSample",
    "CompositeWeights",
    "Config",
    "DEFAULT_APP_RULES",
    "DEFAULT_URL_RULES",
    "ExactMatch",
    "NoRuleMatchedWarning",
    "PatternMatch",
    "Rule",
    "RuleMatch",
    "RuleTable",
    "ScoreResult",
    "ScoringConfig",
    "SessionWindow",
    "ValidationError",
    "app_rule",
    "classify",
    "classify_all",
    "load_config",
    "match_app",
    "match_url",
    "save_config",
    "score",
    "score_samples",
    "split_url",
    "tier_for",
    "update",
    "url_rule",
]
