"""Error and warning types raised by the classification and scoring core."""

from __future__ import annotations


class ValidationError(ValueError):
    """Input broke the engine's contract (ordering, counters, rules, config)."""


class NoRuleMatchedWarning(UserWarning):
    """No app or URL rule matched; the sample fell back to neutral."""
