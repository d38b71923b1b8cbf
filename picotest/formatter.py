"""
Module rendering arbitrary values for assertion diagnostics.
"""

import sys
from typing import Any


def has_text_form(value: Any) -> bool:
    """
    Check whether the type of ``value`` defines its own textual form.

    Parameters
    ----------
    value : Any
        Value to inspect

    Returns
    -------
    bool
        True if the class overrides ``__str__`` or ``__repr__`` of ``object``
    """
    kind: type = type(value)
    return kind.__str__ is not object.__str__ or kind.__repr__ is not object.__repr__


def render(value: Any) -> str:
    """
    Render a value for an ``Actual:`` message.

    Booleans render as ``true``/``false`` and bytes are decoded as Latin-1.
    Values without a textual form fall back to ``(<N>-byte object)``.

    Parameters
    ----------
    value : Any
        Value to render

    Returns
    -------
    str
        Text used in diagnostic output
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    if has_text_form(value):
        return str(value)
    return f"({sys.getsizeof(value)}-byte object)"
