#!/usr/bin/env python3
"""
Test runner script for VolleyStats system.

This script runs all test suites, or a single category of them.
"""

import unittest
import sys
import os
import time

# Add current directory to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

TEST_CATEGORIES = {
    'stats': 'test_stats_calculator.py',
    'tracking': 'test_attempt_tracking.py',
    'roster': 'test_athlete_roster.py',
    'storage': 'test_snapshot_store.py',
    'analysis': 'test_coach_analysis.py',
    'comprehensive': 'test_volleystats_comprehensive.py'
}


def _load_module_tests(loader, test_file):
    module_name = test_file.replace('.py', '')
    module = __import__(module_name)
    return loader.loadTestsFromModule(module)


def discover_and_run_tests():
    """Load and run every test module."""
    print("=" * 80)
    print("VOLLEYSTATS TEST SUITE")
    print("=" * 80)
    print()

    start_time = time.time()
    loader = unittest.TestLoader()
    all_tests = unittest.TestSuite()

    for test_file in TEST_CATEGORIES.values():
        if not os.path.exists(test_file):
            print(f"  - Skipping {test_file} (file not found)")
            continue

        print(f"Loading tests from: {test_file}")
        try:
            tests = _load_module_tests(loader, test_file)
            all_tests.addTests(tests)
            print(f"  + Loaded {tests.countTestCases()} test cases")
        except ImportError as e:
            print(f"  x Error loading {test_file}: {e}")

    print()
    print(f"Total test cases: {all_tests.countTestCases()}")
    print("-" * 80)

    runner = unittest.TextTestRunner(verbosity=2, stream=sys.stdout)
    result = runner.run(all_tests)

    duration = time.time() - start_time

    print()
    print("-" * 80)
    print("TEST SUMMARY")
    print("-" * 80)
    print(f"Tests run: {result.testsRun}")
    print(f"Failures: {len(result.failures)}")
    print(f"Errors: {len(result.errors)}")
    print(f"Skipped: {len(result.skipped)}")
    print(f"Duration: {duration:.2f} seconds")
    print()

    if result.wasSuccessful():
        print("ALL TESTS PASSED")
        return 0

    print("SOME TESTS FAILED - review the failures and errors above.")
    return 1


def run_specific_test_category(category):
    """Run tests for a specific category."""
    if category not in TEST_CATEGORIES:
        print(f"Unknown test category: {category}")
        print(f"Available categories: {', '.join(TEST_CATEGORIES.keys())}")
        return 1

    test_file = TEST_CATEGORIES[category]
    if not os.path.exists(test_file):
        print(f"Test file not found: {test_file}")
        return 1

    print(f"Running {category} tests from {test_file}...")
    print()

    tests = _load_module_tests(unittest.TestLoader(), test_file)
    result = unittest.TextTestRunner(verbosity=2).run(tests)

    return 0 if result.wasSuccessful() else 1


def show_test_coverage():
    """Show what areas are covered by tests."""
    print("TEST COVERAGE OVERVIEW")
    print("=" * 50)
    print()

    coverage_areas = {
        'Stats': [
            'Success/error/efficiency reduction',
            'EMPTY slot exclusion',
            'Chart data and efficiency bands'
        ],
        'Tracking': [
            'Set and clear single slots',
            'Quick add into the lowest empty slot',
            'Undo of the highest recorded slot',
            'Per-athlete reset'
        ],
        'Roster': [
            'Default athlete',
            'Add, edit and remove',
            'Stats key-set invariant',
            'Last athlete guard'
        ],
        'Storage': [
            'SQLite key-value store',
            'Snapshot round trip and normalization',
            'Parse failure handling',
            'Theme preference',
            'Configuration loading and fallback'
        ],
        'Analysis': [
            'Prompt rendering',
            'Fallback texts on failure',
            'Background execution'
        ],
        'Integration': [
            'Session workflows',
            'Superseded analysis results',
            'CSV reports',
            'Entry script wiring'
        ]
    }

    for area, features in coverage_areas.items():
        print(f"{area}:")
        for feature in features:
            print(f"  + {feature}")
        print()


def main():
    """Main entry point."""
    if len(sys.argv) <= 1:
        return discover_and_run_tests()

    command = sys.argv[1].lower()

    if command == 'all':
        return discover_and_run_tests()
    elif command == 'coverage':
        show_test_coverage()
        return 0
    elif command in TEST_CATEGORIES:
        return run_specific_test_category(command)
    elif command == 'help':
        print("VolleyStats Test Runner Usage:")
        print()
        print("  python run_all_tests.py [command]")
        print()
        print("Commands:")
        print("  all           - Run all tests (default)")
        for category, test_file in TEST_CATEGORIES.items():
            print(f"  {category:<13} - Run {test_file} only")
        print("  coverage      - Show test coverage overview")
        print("  help          - Show this help message")
        print()
        return 0
    else:
        print(f"Unknown command: {command}")
        print("Use 'python run_all_tests.py help' for usage information.")
        return 1


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nTest run interrupted by user.")
        sys.exit(1)
