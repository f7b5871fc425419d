import re
import unittest

from focusmeter.matcher import match_app, match_url, split_url
from focusmeter.models import NEUTRAL, PRODUCTIVE, UNPRODUCTIVE
from focusmeter.presets import DEFAULT_APP_RULES, DEFAULT_URL_RULES
from focusmeter.rules import APP, URL, RuleTable, app_rule, url_rule


def _apps(*rules):
    return RuleTable(APP, tuple(rules))


def _urls(*rules):
    return RuleTable(URL, tuple(rules))


class TestSelection(unittest.TestCase):
    def test_secondary_match_beats_earlier_primary_only_rule(self):
        rules = _apps(
            app_rule(re.compile("^chrome"), NEUTRAL),
            app_rule(re.compile("^chrome"), PRODUCTIVE, title="github"),
        )
        match = match_app("chrome", "github - pull request", rules)
        self.assertEqual(match.category, PRODUCTIVE)
        self.assertTrue(match.via_secondary)

    def test_first_secondary_match_wins(self):
        rules = _apps(
            app_rule(re.compile("^chrome"), UNPRODUCTIVE, title="video"),
            app_rule(re.compile("^chrome"), PRODUCTIVE, title="tutorial"),
        )
        self.assertEqual(match_app("chrome", "tutorial video", rules).category, UNPRODUCTIVE)

    def test_first_primary_only_rule_is_fallback(self):
        rules = _apps(
            app_rule(re.compile("^ch"), PRODUCTIVE),
            app_rule(re.compile("^chrome"), UNPRODUCTIVE),
        )
        match = match_app("chrome", "", rules)
        self.assertEqual(match.category, PRODUCTIVE)
        self.assertFalse(match.via_secondary)

    def test_failed_secondary_is_not_a_fallback(self):
        rules = _apps(app_rule(re.compile("^chrome"), UNPRODUCTIVE, title="youtube"))
        self.assertIsNone(match_app("chrome", "github", rules))

    def test_failed_secondary_skips_to_primary_only_rule(self):
        rules = _apps(
            app_rule(re.compile("^chrome"), UNPRODUCTIVE, title="youtube"),
            app_rule(re.compile("^chrome"), NEUTRAL),
        )
        self.assertEqual(match_app("chrome", "github", rules).category, NEUTRAL)

    def test_no_match(self):
        self.assertIsNone(match_app("unknownapp", "", _apps(app_rule("code", PRODUCTIVE))))
        self.assertIsNone(match_url("example.org", "/", _urls(url_rule("github.com", PRODUCTIVE))))

    def test_exact_match_is_whole_string_and_case_insensitive(self):
        rules = _apps(app_rule("Slack", NEUTRAL))
        self.assertIsNotNone(match_app("  SLACK ", "", rules))
        self.assertIsNone(match_app("slack helper", "", rules))

    def test_weight_comes_from_rule_or_category(self):
        rules = _apps(
            app_rule("spotify", UNPRODUCTIVE, weight=0.8),
            app_rule("steam", UNPRODUCTIVE),
        )
        self.assertEqual(match_app("spotify", "", rules).weight, 0.8)
        self.assertEqual(match_app("steam", "", rules).weight, 0.0)

    def test_missing_title_only_matches_primary_only_rules(self):
        rules = _apps(app_rule("discord", UNPRODUCTIVE, title="game"))
        self.assertIsNone(match_app("discord", None, rules))


class TestSplitUrl(unittest.TestCase):
    def test_full_url(self):
        self.assertEqual(
            split_url("https://www.GitHub.com:443/org/repo?tab=issues#top"),
            ("github.com", "/org/repo?tab=issues"),
        )

    def test_bare_domain(self):
        self.assertEqual(split_url("github.com"), ("github.com", "/"))

    def test_credentials_removed(self):
        self.assertEqual(split_url("http://user:pw@example.com/x"), ("example.com", "/x"))

    def test_empty(self):
        self.assertEqual(split_url("   "), ("", ""))


class TestDefaultTables(unittest.TestCase):
    def test_url_given_as_full_url(self):
        match = match_url("https://www.github.com:8080/x", None, DEFAULT_URL_RULES)
        self.assertEqual(match.category, PRODUCTIVE)

    def test_docs_subdomain_pattern(self):
        self.assertEqual(match_url("docs.python.org", "/3/", DEFAULT_URL_RULES).category, PRODUCTIVE)

    def test_medium_path_rule_and_fallback(self):
        tech = match_url("medium.com", "/@alice/python-programming-tips", DEFAULT_URL_RULES)
        self.assertEqual(tech.category, PRODUCTIVE)
        other = match_url("medium.com", "/about", DEFAULT_URL_RULES)
        self.assertEqual(other.category, NEUTRAL)

    def test_youtube(self):
        tutorial = match_url("youtube.com", "/watch?v=abc-python-tutorial", DEFAULT_URL_RULES)
        self.assertEqual((tutorial.category, tutorial.weight), (NEUTRAL, 0.6))
        other = match_url("youtube.com", "/watch?v=abc", DEFAULT_URL_RULES)
        self.assertEqual((other.category, other.weight), (UNPRODUCTIVE, 0.2))

    def test_reddit(self):
        python = match_url("reddit.com", "/r/Python/comments/1", DEFAULT_URL_RULES)
        self.assertEqual((python.category, python.weight), (NEUTRAL, 0.6))
        funny = match_url("reddit.com", "/r/funny", DEFAULT_URL_RULES)
        self.assertEqual((funny.category, funny.weight), (UNPRODUCTIVE, 0.3))

    def test_discord_title_decides(self):
        self.assertEqual(match_app("Discord", "Gaming Lounge", DEFAULT_APP_RULES).category, UNPRODUCTIVE)
        self.assertEqual(match_app("Discord", "#general", DEFAULT_APP_RULES).category, NEUTRAL)

    def test_browser_title_override(self):
        self.assertEqual(match_app("Chrome", "YouTube - cats", DEFAULT_APP_RULES).category, UNPRODUCTIVE)
        self.assertEqual(match_app("Chrome", "New Tab", DEFAULT_APP_RULES).category, NEUTRAL)

    def test_subdomain_needs_its_own_rule(self):
        self.assertIsNone(match_url("https://gist.github.com/u/1", None, DEFAULT_URL_RULES))
        rules = DEFAULT_URL_RULES.with_custom_rules([url_rule(re.compile(r"(^|\.)github\.com$"), PRODUCTIVE)])
        self.assertEqual(match_url("https://gist.github.com/u/1", None, rules).category, PRODUCTIVE)

    def test_spotify_weight(self):
        match = match_app("Spotify", "", DEFAULT_APP_RULES)
        self.assertEqual((match.category, match.weight), (UNPRODUCTIVE, 0.8))


if __name__ == "__main__":
    unittest.main()
