"""
picotest - A minimal xUnit style unit testing library.

Tests are registered at import time with the TEST and TEST_F decorators,
run in registration order by run_all(), and reported as a colored summary.
"""

__version__ = "0.1.0"

from picotest import assertions
from picotest.assertions import *  # noqa: F401,F403
from picotest.case import TestCase
from picotest.colored_output import Color, print_colored
from picotest.context import NoCurrentTestError, TestState
from picotest.exit_status import ExitStatus
from picotest.failure import Failure
from picotest.fixture import TestFixture
from picotest.registration import TEST, TEST_F
from picotest.registry import RUN_ALL_TESTS, Registry, register_test, run_all
from picotest.unit_test import FatalFailure, Test

__all__ = [
    "TEST",
    "TEST_F",
    "RUN_ALL_TESTS",
    "run_all",
    "register_test",
    "Registry",
    "TestCase",
    "Test",
    "TestFixture",
    "TestState",
    "Failure",
    "FatalFailure",
    "NoCurrentTestError",
    "ExitStatus",
    "Color",
    "print_colored",
] + assertions.__all__
