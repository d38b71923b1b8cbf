"""
Tests for picotest/context.py
"""
import pytest

from picotest import context
from picotest.case import TestCase
from picotest.unit_test import Test


def test_state_is_singleton():
    assert context.TestState.get_instance() is context.TestState.get_instance()


def test_state_starts_empty():
    assert context.get_current_test() is None
    assert context.get_current_test_case() is None


def test_set_and_get_current():
    testcase = TestCase("A")
    test = Test("t", lambda: None)
    context.set_current_test_case(testcase)
    context.set_current_test(test)
    assert context.get_current_test_case() is testcase
    assert context.get_current_test() is test


def test_require_current_test_without_test():
    with pytest.raises(context.NoCurrentTestError):
        context.require_current_test()


def test_reset_instance():
    context.set_current_test(Test("t", lambda: None))
    context.TestState.reset_instance()
    assert context.get_current_test() is None
