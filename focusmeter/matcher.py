"""Pick the single best rule for an app or URL observation."""

from __future__ import annotations

import re
from typing import NamedTuple
from urllib.parse import urlparse

from focusmeter.rules import Rule, RuleTable

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)


class RuleMatch(NamedTuple):
    category: str
    weight: float
    rule: Rule
    via_secondary: bool


def split_url(url: str) -> tuple[str, str]:
    """Split a URL into (domain, path+query).

    The domain is lowercased with scheme, credentials, port, and a leading
    ``www.`` removed. The path is never empty for a parseable URL.
    """
    url = url.strip()
    if not url:
        return "", ""
    # Add scheme if missing
    if not _SCHEME_RE.match(url):
        url = "https://" + url
    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except ValueError:
        return url.lower(), ""
    if not host:
        return url.lower(), ""
    if host.startswith("www."):
        host = host[4:]
    path = parsed.path or "/"
    if parsed.query:
        path += "?" + parsed.query
    return host.lower(), path


def _select(rules: RuleTable, primary: str, secondary: str) -> RuleMatch | None:
    fallback: Rule | None = None
    for rule in rules:
        if not rule.primary.matches(primary):
            continue
        if rule.secondary is not None:
            # First secondary hit wins outright; a miss is never a fallback
            if rule.secondary.search(secondary):
                return RuleMatch(rule.category, rule.effective_weight, rule, True)
        elif fallback is None:
            fallback = rule
    if fallback is None:
        return None
    return RuleMatch(fallback.category, fallback.effective_weight, fallback, False)


def match_app(process_name: str, window_title: str | None, rules: RuleTable) -> RuleMatch | None:
    """Match a process name (and window title) against an app rule table."""
    return _select(rules, (process_name or "").strip().lower(), (window_title or "").strip().lower())


def match_url(domain: str, path: str | None, rules: RuleTable) -> RuleMatch | None:
    """Match a domain (and path+query) against a URL rule table.

    *domain* may also be a full URL; it is reduced to its host first and
    its path is used when *path* is not given.
    """
    host, url_path = split_url(domain or "")
    if not host:
        return None
    return _select(rules, host, path if path is not None else url_path)
