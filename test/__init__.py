import os
import unittest


def load_tests(
    loader: unittest.TestLoader,
    standard_tests: unittest.TestSuite,
    pattern: None | str,
) -> unittest.TestSuite:
    this_dir = os.path.dirname(__file__)
    standard_tests.addTests(loader.discover(
        start_dir=this_dir,
        pattern=pattern or "test_*.py",
        top_level_dir=os.path.dirname(this_dir),
    ))
    return standard_tests
