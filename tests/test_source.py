"""
Tests for picotest/source.py
"""
import sys
from pathlib import Path

import pytest

from picotest.source import CallSite, capture_call_site


def fake_helper(expected, actual):
    """
    Stand-in for an assertion helper.
    """
    return capture_call_site(0, ("expected", "actual"))


def test_capture_file_and_line():
    site = fake_helper(1, 2)
    assert Path(site.file).name == Path(__file__).name
    assert site.line == test_capture_file_and_line.__code__.co_firstlineno + 1


def test_capture_argument_text():
    site = fake_helper(len("abc"), 1 + 2)
    assert site.arguments == ('len("abc")', "1 + 2")


def test_capture_keyword_arguments():
    site = fake_helper(actual="b", expected="a")
    assert site.arguments == ('"a"', '"b"')


def test_call_site_fallback():
    site = CallSite("m.x", 3)
    assert site.argument(0, "fallback") == "fallback"
    assert CallSite("m.x", 3, ("a",)).argument(0, "fallback") == "a"
    assert CallSite("m.x", 3, ("a",)).argument(1, "fallback") == "fallback"


def test_capture_without_source():
    """
    Test capture_call_site for code compiled from a string.
    Verify that the location is kept and the argument text is absent.
    """
    namespace = {"fake_helper": fake_helper}
    exec(compile("site = fake_helper(1, 2)\n", "<generated>", "exec"), namespace)
    site = namespace["site"]
    assert site.file == "<generated>"
    assert site.line == 1
    assert site.arguments is None


@pytest.mark.skipif(
    sys.version_info < (3, 11),
    reason="instruction positions need Python 3.11",
)
def test_capture_two_calls_on_one_line():
    """
    Test capture_call_site with two calls on the same line.
    Verify that each call gets its own argument text.
    """
    first = fake_helper(1, 2); second = fake_helper(3, 4)  # noqa: E702
    assert first.arguments == ("1", "2")
    assert second.arguments == ("3", "4")
