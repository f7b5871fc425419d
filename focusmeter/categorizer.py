"""Classify activity samples as productive / neutral / unproductive."""

from __future__ import annotations

import logging
import warnings
from typing import Iterable, Iterator

from focusmeter.errors import NoRuleMatchedWarning
from focusmeter.matcher import RuleMatch, match_app, match_url, split_url
from focusmeter.models import (
    NEUTRAL,
    SOURCE_APP,
    SOURCE_DEFAULT,
    SOURCE_URL,
    ActivitySample,
    ClassifiedSample,
    default_weight,
)
from focusmeter.rules import RuleTable

logger = logging.getLogger(__name__)


def _url_match(sample: ActivitySample, url_rules: RuleTable) -> RuleMatch | None:
    domain, path = split_url(sample.url or "")
    if not domain:
        return None
    return match_url(domain, path, url_rules)


def classify(
    sample: ActivitySample,
    app_rules: RuleTable,
    url_rules: RuleTable,
) -> ClassifiedSample:
    """Classify one sample.

    The app rules run first. When the app is neutral (browser-like) or
    unknown and the sample carries a URL, a URL match replaces the app
    result entirely. With no match at all the sample is neutral at the
    default weight.
    """
    app = match_app(sample.app_name, sample.window_title, app_rules)

    if sample.url and (app is None or app.category == NEUTRAL):
        url = _url_match(sample, url_rules)
        if url is not None:
            return ClassifiedSample(sample, url.category, url.weight, SOURCE_URL, url.rule)

    if app is not None:
        return ClassifiedSample(sample, app.category, app.weight, SOURCE_APP, app.rule)

    logger.debug("No rule matched app=%r url=%r, defaulting to neutral", sample.app_name, sample.url)
    warnings.warn(
        NoRuleMatchedWarning(f"no rule matched {sample.app_name!r}; classified as neutral"),
        stacklevel=2,
    )
    return ClassifiedSample(sample, NEUTRAL, default_weight(NEUTRAL), SOURCE_DEFAULT, None)


def classify_all(
    samples: Iterable[ActivitySample],
    app_rules: RuleTable,
    url_rules: RuleTable,
) -> Iterator[ClassifiedSample]:
    for sample in samples:
        yield classify(sample, app_rules, url_rules)
