#!/usr/bin/env python3
"""
Test runner for Terminal Trivia.
Runs the unit and headless app tests and prints a summary report.

Usage:
    python tests/run_all_tests.py [category]
"""
import sys
import time
import unittest
from pathlib import Path

# Make the project root importable when run as a script
sys.path.insert(0, str(Path(__file__).parent.parent))

TEST_MODULES = [
    'tests.test_models',
    'tests.test_question_source',
    'tests.test_game',
    'tests.test_ui',
    'tests.test_input_dispatcher',
    'tests.test_config_manager',
    'tests.test_app',
    'tests.test_main',
]

CATEGORIES = {
    'unit': TEST_MODULES[:6],
    'app': ['tests.test_app', 'tests.test_main'],
    'models': ['tests.test_models'],
    'source': ['tests.test_question_source'],
    'game': ['tests.test_game', 'tests.test_input_dispatcher'],
    'ui': ['tests.test_ui'],
    'config': ['tests.test_config_manager'],
}


def load_suite(module_names):
    """Load the given test modules into one suite, reporting load failures."""
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()

    for module_name in module_names:
        try:
            suite.addTest(loader.loadTestsFromName(module_name))
            print(f"✓ Loaded tests from {module_name}")
        except Exception as e:
            print(f"✗ Failed to load {module_name}: {e}")

    return suite


def run_test_suite(module_names=TEST_MODULES, title="Terminal Trivia - Test Suite"):
    """Run a suite and generate a summary report."""
    print("=" * 70)
    print(title)
    print("=" * 70)

    suite = load_suite(module_names)

    print("\n" + "=" * 70)
    print("Running Tests...")
    print("=" * 70)

    runner = unittest.TextTestRunner(
        verbosity=2,
        stream=sys.stdout,
        buffer=True
    )

    start_time = time.time()
    result = runner.run(suite)
    end_time = time.time()

    print("\n" + "=" * 70)
    print("Test Summary Report")
    print("=" * 70)

    total_tests = result.testsRun
    failures = len(result.failures)
    errors = len(result.errors)
    skipped = len(result.skipped)
    passed = total_tests - failures - errors - skipped

    print(f"Total Tests Run: {total_tests}")
    print(f"Passed: {passed}")
    print(f"Failed: {failures}")
    print(f"Errors: {errors}")
    print(f"Skipped: {skipped}")
    print(f"Success Rate: {(passed/total_tests)*100:.1f}%" if total_tests > 0 else "N/A")
    print(f"Execution Time: {end_time - start_time:.2f} seconds")

    for label, problems in (("FAILURES", result.failures), ("ERRORS", result.errors)):
        if problems:
            print("\n" + "-" * 50)
            print(f"{label}:")
            print("-" * 50)
            for test, traceback in problems:
                print(f"\n{test}:")
                print(traceback)

    print("\n" + "=" * 70)

    return result.wasSuccessful()


def run_specific_test_category(category):
    """Run tests for a specific category."""
    if category not in CATEGORIES:
        print(f"Unknown category: {category}")
        print(f"Available categories: {', '.join(CATEGORIES.keys())}")
        return False

    return run_test_suite(CATEGORIES[category], title=f"Terminal Trivia - {category} tests")


if __name__ == '__main__':
    if len(sys.argv) > 1:
        success = run_specific_test_category(sys.argv[1])
    else:
        success = run_test_suite()

    sys.exit(0 if success else 1)
