#!/usr/bin/env python3
"""
Test suite for attempt aggregation.

This test suite covers:
- Success, error and efficiency reduction
- EMPTY slot handling
- Chart data and display formatting
"""

import random
import unittest

from models.score import ScoreValue, SKILL_NAMES, MAX_ATTEMPTS
from models.match_data import SkillStats, create_empty_match_data
from stats.stats_calculator import (
    calculate_stats, apply_stats, recorded_count, format_efficiency,
    efficiency_band, bar_chart_data, overall_efficiency
)

E = ScoreValue.EMPTY


class TestCalculateStats(unittest.TestCase):
    """Test cases for the attempt reducer."""

    def test_all_empty(self):
        """Test that an unrecorded skill has zero counts and zero efficiency."""
        self.assertEqual(calculate_stats([E] * MAX_ATTEMPTS), (0, 0, 0.0))

    def test_mixed_attempts(self):
        """Test the documented example with two successes and one error."""
        attempts = [ScoreValue.EXCELLENT, ScoreValue.GOOD, ScoreValue.ERROR] + [E] * 7
        success_count, error_count, efficiency = calculate_stats(attempts)

        self.assertEqual(success_count, 2)
        self.assertEqual(error_count, 1)
        self.assertAlmostEqual(efficiency, 500 / 9)
        self.assertEqual(format_efficiency(efficiency), '55.6')

    def test_poor_counts_as_neither(self):
        """Test that POOR attempts are neither successes nor errors."""
        attempts = [ScoreValue.POOR, ScoreValue.POOR] + [E] * 8
        success_count, error_count, efficiency = calculate_stats(attempts)

        self.assertEqual(success_count, 0)
        self.assertEqual(error_count, 0)
        self.assertAlmostEqual(efficiency, 100 / 3)

    def test_gaps_are_ignored(self):
        """Test that EMPTY slots between recorded ones do not dilute efficiency."""
        attempts = [E, ScoreValue.EXCELLENT, E, E, ScoreValue.EXCELLENT] + [E] * 5
        self.assertEqual(calculate_stats(attempts), (2, 0, 100.0))

    def test_all_errors(self):
        """Test that a full sheet of errors gives zero efficiency."""
        self.assertEqual(calculate_stats([ScoreValue.ERROR] * MAX_ATTEMPTS), (0, 10, 0.0))

    def test_random_sequences_respect_bounds(self):
        """Test efficiency bounds and count bounds over random attempt sheets."""
        rng = random.Random(20240501)
        values = list(ScoreValue)
        for _ in range(500):
            attempts = [rng.choice(values) for _ in range(MAX_ATTEMPTS)]
            success_count, error_count, efficiency = calculate_stats(attempts)

            self.assertGreaterEqual(efficiency, 0.0)
            self.assertLessEqual(efficiency, 100.0)
            self.assertLessEqual(success_count + error_count, recorded_count(attempts))

    def test_apply_stats_overwrites_stale_aggregates(self):
        """Test that cached aggregates are always recomputed from attempts."""
        stats = SkillStats(attempts=[ScoreValue.GOOD] + [E] * 9, success_count=7, error_count=3, efficiency=12.0)
        apply_stats(stats)

        self.assertEqual(stats.success_count, 1)
        self.assertEqual(stats.error_count, 0)
        self.assertAlmostEqual(stats.efficiency, 200 / 3)


class TestChartData(unittest.TestCase):
    """Test cases for derived display values."""

    def test_bar_chart_data_order_and_rounding(self):
        """Test that every skill appears in order with one-decimal efficiency."""
        match_data = create_empty_match_data()
        match_data['Attack'].attempts[:3] = [ScoreValue.EXCELLENT, ScoreValue.GOOD, ScoreValue.ERROR]
        apply_stats(match_data['Attack'])

        data = bar_chart_data(match_data)

        self.assertEqual([bar['skill'] for bar in data], list(SKILL_NAMES))
        attack = data[SKILL_NAMES.index('Attack')]
        self.assertEqual(attack['efficiency'], 55.6)
        self.assertEqual(attack['band'], 'medium')
        self.assertEqual(data[0]['efficiency'], 0.0)
        self.assertEqual(data[0]['band'], 'low')

    def test_efficiency_bands(self):
        """Test chart colour thresholds."""
        self.assertEqual(efficiency_band(70), 'high')
        self.assertEqual(efficiency_band(69.9), 'medium')
        self.assertEqual(efficiency_band(40), 'medium')
        self.assertEqual(efficiency_band(39.9), 'low')

    def test_overall_efficiency_skips_unrecorded_skills(self):
        """Test that the overall figure averages only recorded skills."""
        match_data = create_empty_match_data()
        self.assertEqual(overall_efficiency(match_data), 0.0)

        match_data['Serve'].attempts[0] = ScoreValue.EXCELLENT
        match_data['Pass'].attempts[0] = ScoreValue.ERROR
        apply_stats(match_data['Serve'])
        apply_stats(match_data['Pass'])

        self.assertAlmostEqual(overall_efficiency(match_data), 50.0)


if __name__ == '__main__':
    unittest.main()
