"""
Tests of picotest/formatter.py
"""
import sys

from picotest.formatter import has_text_form, render


class Opaque:
    __slots__ = ("a",)


class Named:
    def __str__(self) -> str:
        return "named"


class Reprd:
    def __repr__(self) -> str:
        return "Reprd()"


def test_render_primitives():
    assert render(3) == "3"
    assert render(2.5) == "2.5"
    assert render("foo") == "foo"
    assert render(b"bar") == "bar"


def test_render_bool():
    assert render(True) == "true"
    assert render(False) == "false"


def test_render_containers_use_their_text_form():
    assert render([1, 2]) == "[1, 2]"
    assert render(None) == "None"


def test_render_custom_text_form():
    assert render(Named()) == "named"
    assert render(Reprd()) == "Reprd()"


def test_render_fallback():
    """
    Test render with an object without a textual form.
    Verify that it falls back to the byte size.
    """
    value = Opaque()
    assert not has_text_form(value)
    assert render(value) == f"({sys.getsizeof(value)}-byte object)"
