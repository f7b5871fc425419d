import unittest

from focusmeter.config import CompositeWeights, ScoringConfig
from focusmeter.errors import ValidationError
from focusmeter.models import (
    NEUTRAL,
    PRODUCTIVE,
    SOURCE_APP,
    SOURCE_URL,
    UNPRODUCTIVE,
    ActivitySample,
    ClassifiedSample,
)
from focusmeter.scoring import SessionWindow, score, score_samples, tier_for, update


def _cs(app, ts, category=PRODUCTIVE, weight=1.0, source=SOURCE_APP, keystrokes=0, clicks=0):
    return ClassifiedSample(ActivitySample(app, "", None, keystrokes, clicks, ts), category, weight, source)


def _session():
    return [
        _cs("Code", 0, keystrokes=30, clicks=10),
        _cs("Chrome", 120_000, source=SOURCE_URL, keystrokes=10),
        _cs("Chrome", 900_000, UNPRODUCTIVE, 0.2, SOURCE_URL, keystrokes=20),
        _cs("Code", 1_000_000, keystrokes=40),
    ]


class TestScore(unittest.TestCase):
    def test_empty_window(self):
        result = SessionWindow().score()
        self.assertEqual(result.activity_score, 0.0)
        self.assertEqual(result.app_score, 0.0)
        self.assertIsNone(result.url_score)
        self.assertEqual(result.focus_score, 0.0)
        self.assertEqual(result.composite_score, 0.0)
        self.assertEqual(result.tier, "Very Low")

    def test_single_productive_sample_without_input(self):
        result = SessionWindow().update(_cs("Code", 1_000)).score()
        self.assertEqual(result.activity_score, 0.0)
        self.assertEqual(result.app_score, 100.0)
        self.assertIsNone(result.url_score)
        self.assertEqual(result.focus_score, 100.0)
        self.assertAlmostEqual(result.composite_score, 75.0)
        self.assertEqual(result.tier, "High")

    def test_mixed_session(self):
        result = score_samples(_session())
        self.assertEqual(result.activity_score, 100.0)
        self.assertAlmostEqual(result.app_score, 100.0)
        self.assertAlmostEqual(result.url_score, 60.0)
        self.assertAlmostEqual(result.focus_score, 75.0)
        self.assertAlmostEqual(result.composite_score, 84.5)
        self.assertEqual(result.tier, "High")

    def test_activity_is_clamped(self):
        result = score_samples([_cs("Code", 0, keystrokes=500, clicks=100)])
        self.assertEqual(result.activity_score, 100.0)

    def test_expected_activity_level(self):
        config = ScoringConfig(expected_activity_level=200)
        result = score_samples([_cs("Code", 0, keystrokes=50)], config)
        self.assertAlmostEqual(result.activity_score, 25.0)

    def test_app_score_falls_back_to_url_score(self):
        samples = [
            _cs("Chrome", 0, source=SOURCE_URL),
            _cs("Chrome", 1_000, NEUTRAL, 0.5, SOURCE_URL),
        ]
        result = score_samples(samples)
        self.assertAlmostEqual(result.url_score, 75.0)
        self.assertEqual(result.app_score, result.url_score)

    def test_focus_never_negative(self):
        samples = [_cs("Code" if i % 2 else "Slack", i * 1_000) for i in range(15)]
        result = score_samples(samples)
        self.assertEqual(result.focus_score, 0.0)

    def test_scores_in_range(self):
        for result in (score_samples(_session()), score_samples([_cs("Steam", 0, UNPRODUCTIVE, 0.0)])):
            for value in (result.activity_score, result.app_score, result.focus_score, result.composite_score):
                self.assertGreaterEqual(value, 0.0)
                self.assertLessEqual(value, 100.0)

    def test_module_level_score_matches_method(self):
        window = SessionWindow.from_samples(_session())
        self.assertEqual(score(window), window.score())


class TestClassifiedSample(unittest.TestCase):
    def test_weight_out_of_range_rejected(self):
        with self.assertRaises(ValidationError):
            _cs("Code", 0, weight=5.0)
        with self.assertRaises(ValidationError):
            _cs("Code", 0, weight=-0.5)

    def test_unknown_category_rejected(self):
        with self.assertRaises(ValidationError):
            _cs("Code", 0, category="work")

    def test_unknown_source_rejected(self):
        with self.assertRaises(ValidationError):
            _cs("Code", 0, source="title")

    def test_app_score_stays_in_range(self):
        result = score_samples([_cs("Code", 0, weight=1.0), _cs("Code", 1_000, weight=0.0)])
        self.assertAlmostEqual(result.app_score, 50.0)


class TestRuns(unittest.TestCase):
    def test_context_switches(self):
        window = SessionWindow.from_samples(
            [_cs("VS Code", 0), _cs("Slack", 1_000, NEUTRAL, 0.5), _cs("VS Code", 2_000)]
        )
        self.assertEqual(window.context_switch_count, 2)

    def test_app_names_compared_case_insensitively(self):
        window = SessionWindow.from_samples([_cs("Slack", 0), _cs(" slack", 1_000)])
        self.assertEqual(window.context_switch_count, 0)

    def test_short_sessions(self):
        window = SessionWindow.from_samples(_session())
        # Code ran 120s (short), Chrome ran 880s (long), trailing Code run still open
        self.assertEqual(window.context_switch_count, 2)
        self.assertEqual(window.short_session_count, 1)

    def test_threshold_is_configurable(self):
        config = ScoringConfig(short_session_threshold_seconds=60)
        window = SessionWindow.from_samples(_session(), config)
        self.assertEqual(window.short_session_count, 0)
        self.assertAlmostEqual(window.score().focus_score, 80.0)

    def test_close_judges_trailing_run(self):
        window = SessionWindow.from_samples(_session())
        closed = window.close(1_100_000)
        self.assertTrue(closed.closed)
        self.assertEqual(closed.short_session_count, 2)
        self.assertAlmostEqual(closed.score().focus_score, 70.0)

    def test_close_without_end_leaves_trailing_run(self):
        closed = SessionWindow.from_samples(_session()).close()
        self.assertEqual(closed.short_session_count, 1)

    def test_close_before_last_sample_rejected(self):
        window = SessionWindow.from_samples(_session())
        with self.assertRaises(ValidationError):
            window.close(999_999)

    def test_closed_window_rejects_updates(self):
        closed = SessionWindow().update(_cs("Code", 0)).close()
        with self.assertRaises(ValidationError):
            closed.update(_cs("Code", 1_000))

    def test_longest_run_tracking(self):
        window = SessionWindow.from_samples(_session()).close(1_100_000)
        self.assertEqual(window.closed_run_count, 3)
        self.assertEqual(window.longest_run_ms, 880_000)


class TestWindow(unittest.TestCase):
    def test_streaming_matches_batch(self):
        window = SessionWindow()
        for sample in _session():
            window = update(window, sample)
        self.assertEqual(window.score(), SessionWindow.from_samples(_session()).score())
        self.assertEqual(window.samples, tuple(_session()))

    def test_out_of_order_sample_rejected(self):
        window = SessionWindow().update(_cs("Code", 5_000))
        with self.assertRaises(ValidationError):
            window.update(_cs("Code", 4_999))

    def test_equal_timestamps_allowed(self):
        window = SessionWindow().update(_cs("Code", 5_000)).update(_cs("Code", 5_000))
        self.assertEqual(window.sample_count, 2)

    def test_update_does_not_change_parent(self):
        first = SessionWindow().update(_cs("Code", 0))
        second = first.update(_cs("Slack", 1_000, NEUTRAL, 0.5))
        self.assertEqual(first.sample_count, 1)
        self.assertEqual(first.context_switch_count, 0)
        self.assertEqual(second.sample_count, 2)
        self.assertEqual(second.context_switch_count, 1)

    def test_branching_from_older_version(self):
        a, b, c = _cs("Code", 0), _cs("Slack", 1_000), _cs("Chrome", 2_000)
        base = SessionWindow().update(a)
        left = base.update(b)
        right = base.update(c)
        self.assertEqual(base.samples, (a,))
        self.assertEqual(left.samples, (a, b))
        self.assertEqual(right.samples, (a, c))

    def test_elapsed(self):
        window = SessionWindow.from_samples(_session())
        self.assertEqual(window.elapsed_ms, 1_000_000)
        self.assertEqual(window.open_run_ms, 0)

    def test_invalid_config_rejected(self):
        with self.assertRaises(ValidationError):
            SessionWindow(ScoringConfig(expected_activity_level=0))


class TestTiers(unittest.TestCase):
    def test_boundaries(self):
        self.assertEqual(tier_for(100), "Exceptional")
        self.assertEqual(tier_for(85), "Exceptional")
        self.assertEqual(tier_for(84.99), "High")
        self.assertEqual(tier_for(70), "High")
        self.assertEqual(tier_for(69.99), "Moderate")
        self.assertEqual(tier_for(50), "Moderate")
        self.assertEqual(tier_for(49.99), "Low")
        self.assertEqual(tier_for(30), "Low")
        self.assertEqual(tier_for(29.99), "Very Low")
        self.assertEqual(tier_for(0), "Very Low")

    def test_float_noise_at_boundary(self):
        self.assertEqual(tier_for(69.99999999999999), "High")

    def test_default_weights_sum_to_one(self):
        self.assertAlmostEqual(CompositeWeights().total, 1.0, places=12)

    def test_weights_must_sum_to_one(self):
        bad = ScoringConfig(weights=CompositeWeights(activity=0.5, app=0.5, url=0.5, focus=0.5))
        with self.assertRaises(ValidationError):
            bad.validate()


if __name__ == "__main__":
    unittest.main()
