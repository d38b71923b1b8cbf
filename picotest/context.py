"""
Module holding the ambient "currently running" test context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from picotest.case import TestCase
    from picotest.unit_test import Test


class NoCurrentTestError(RuntimeError):
    """
    Raised when an assertion fails outside of a running test.
    """


class TestState:
    """
    Process-wide pair of the running test case and test.

    The references point into the Registry's storage and are only written by
    the execution harness.
    """
    __test__ = False

    _instance: TestState | None = None

    def __init__(self) -> None:
        self.testcase: TestCase | None = None
        self.test: Test | None = None


    @classmethod
    def get_instance(cls) -> TestState:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance


    @classmethod
    def reset_instance(cls) -> None:
        """
        Drop the singleton; the next access creates an empty state.
        """
        cls._instance = None


def get_current_test_case() -> TestCase | None:
    return TestState.get_instance().testcase


def get_current_test() -> Test | None:
    return TestState.get_instance().test


def set_current_test_case(testcase: TestCase | None) -> None:
    TestState.get_instance().testcase = testcase


def set_current_test(test: Test | None) -> None:
    TestState.get_instance().test = test


def require_current_test() -> Test:
    """
    Return the running test.

    Raises
    ------
    NoCurrentTestError
        If no test is running, e.g. an assertion used outside a test body
    """
    current: Test | None = get_current_test()
    if current is None:
        raise NoCurrentTestError(
            "assertion evaluated outside of a running test"
        )
    return current
