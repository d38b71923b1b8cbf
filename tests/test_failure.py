"""
Tests for picotest/failure.py
"""
import dataclasses

import pytest

from picotest.failure import Failure


def test_failure_container():
    failure = Failure("m.py", 10, "Expected:a, Actual:b")
    assert failure.file == "m.py"
    assert failure.line == 10
    assert failure.message == "Expected:a, Actual:b"


def test_from_comparison_message():
    """
    Test Failure.from_comparison.
    Verify that the message has no space after the colons.
    """
    failure = Failure.from_comparison("m.x", 10, "3 == 1+1", "3 == 2")
    assert failure.message == "Expected:3 == 1+1, Actual:3 == 2"


def test_failure_is_immutable():
    failure = Failure("m.py", 1, "msg")
    with pytest.raises(dataclasses.FrozenInstanceError):
        failure.line = 2
