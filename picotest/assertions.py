"""
Assertion engine and the user-facing EXPECT/ASSERT helpers.

EXPECT helpers record a failure against the running test and return False.
ASSERT helpers record the same failure and then raise FatalFailure, which
ends the test body; the next test is unaffected.
"""

from typing import Any

from picotest import comparators
from picotest.comparators import Comparator
from picotest.context import require_current_test
from picotest.formatter import render
from picotest.source import CallSite, capture_call_site
from picotest.unit_test import FatalFailure, Test

BOOL_PARAMETERS: tuple[str, ...] = ("condition",)
BINARY_PARAMETERS: tuple[str, ...] = ("expected", "actual")


def assert_bool(
    expected: bool,
    actual: bool,
    cond_text: str,
    file: str,
    line: int,
) -> bool:
    """
    Check a boolean condition against its expected truth value.

    Parameters
    ----------
    expected : bool
        Expected truth value
    actual : bool
        Evaluated condition
    cond_text : str
        Source text of the condition, e.g. ``true == my_expr``
    file : str
        Source file of the assertion
    line : int
        Line number of the assertion

    Returns
    -------
    bool
        True if the check passed

    Raises
    ------
    NoCurrentTestError
        If the check failed and no test is running
    """
    if expected != actual:
        current: Test = require_current_test()
        current.record_failure(file, line, cond_text, render(actual))
    return expected == actual


def assert_binary(
    left: Any,
    right: Any,
    op: Comparator,
    cond_text: str,
    file: str,
    line: int,
) -> bool:
    """
    Check ``op(left, right)``.

    On failure the ``Actual`` part of the message is both operands rendered
    around the comparator symbol.

    Parameters
    ----------
    left : Any
        Left operand (expected value)
    right : Any
        Right operand (actual value)
    op : Comparator
        Comparison to apply
    cond_text : str
        Source text of the comparison, e.g. ``3 == 1+1``
    file : str
        Source file of the assertion
    line : int
        Line number of the assertion

    Returns
    -------
    bool
        True if the check passed

    Raises
    ------
    NoCurrentTestError
        If the check failed and no test is running
    """
    passed: bool = bool(op(left, right))
    if not passed:
        _record_binary(left, right, op, cond_text, file, line)
    return passed


def _record_binary(
    left: Any,
    right: Any,
    op: Comparator,
    cond_text: str,
    file: str,
    line: int,
) -> None:
    current: Test = require_current_test()
    actual: str = f"{render(left)} {op.symbol()} {render(right)}"
    current.record_failure(file, line, cond_text, actual)


def _raise_fatal() -> None:
    raise FatalFailure(require_current_test().failures[-1])


def _check_bool(expected: bool, condition: Any, fatal: bool) -> bool:
    actual: bool = bool(condition)
    if actual == expected:
        return True

    # Frame layout: _check_bool <- EXPECT/ASSERT helper <- user code
    site: CallSite = capture_call_site(1, BOOL_PARAMETERS)
    cond_text: str = f"{render(expected)} == {site.argument(0, repr(condition))}"
    assert_bool(expected, actual, cond_text, site.file, site.line)
    if fatal:
        _raise_fatal()
    return False


def _check_binary(left: Any, right: Any, op: Comparator, fatal: bool) -> bool:
    if op(left, right):
        return True

    site: CallSite = capture_call_site(1, BINARY_PARAMETERS)
    cond_text: str = (
        f"{site.argument(0, repr(left))} {op.symbol()} {site.argument(1, repr(right))}"
    )
    _record_binary(left, right, op, cond_text, site.file, site.line)
    if fatal:
        _raise_fatal()
    return False


# non-fatal

def expect_true(condition: Any) -> bool:
    return _check_bool(True, condition, fatal=False)


def expect_false(condition: Any) -> bool:
    return _check_bool(False, condition, fatal=False)


def expect_eq(expected: Any, actual: Any) -> bool:
    return _check_binary(expected, actual, comparators.EQ(), fatal=False)


def expect_ne(expected: Any, actual: Any) -> bool:
    return _check_binary(expected, actual, comparators.NE(), fatal=False)


def expect_lt(expected: Any, actual: Any) -> bool:
    return _check_binary(expected, actual, comparators.LT(), fatal=False)


def expect_le(expected: Any, actual: Any) -> bool:
    return _check_binary(expected, actual, comparators.LE(), fatal=False)


def expect_gt(expected: Any, actual: Any) -> bool:
    return _check_binary(expected, actual, comparators.GT(), fatal=False)


def expect_ge(expected: Any, actual: Any) -> bool:
    return _check_binary(expected, actual, comparators.GE(), fatal=False)


def expect_streq(expected: comparators.CString, actual: comparators.CString) -> bool:
    return _check_binary(expected, actual, comparators.STREQ(), fatal=False)


def expect_strne(expected: comparators.CString, actual: comparators.CString) -> bool:
    return _check_binary(expected, actual, comparators.STRNE(), fatal=False)


def expect_strcaseeq(expected: comparators.CString, actual: comparators.CString) -> bool:
    """
    Expect two strings to be equal ignoring ASCII case.
    """
    return _check_binary(expected, actual, comparators.STRCASEEQ(), fatal=False)


def expect_strcasene(expected: comparators.CString, actual: comparators.CString) -> bool:
    return _check_binary(expected, actual, comparators.STRCASENE(), fatal=False)


def expect_float_eq(expected: float, actual: float) -> bool:
    """
    Expect two values to be within four ULPs at single precision.
    """
    return _check_binary(expected, actual, comparators.FLOATEQ(), fatal=False)


def expect_float_ne(expected: float, actual: float) -> bool:
    return _check_binary(expected, actual, comparators.FLOATNE(), fatal=False)


def expect_double_eq(expected: float, actual: float) -> bool:
    """
    Expect two values to be within four ULPs at double precision.
    """
    return _check_binary(expected, actual, comparators.DOUBLEEQ(), fatal=False)


def expect_double_ne(expected: float, actual: float) -> bool:
    return _check_binary(expected, actual, comparators.DOUBLENE(), fatal=False)


# fatal

def assert_true(condition: Any) -> bool:
    return _check_bool(True, condition, fatal=True)


def assert_false(condition: Any) -> bool:
    return _check_bool(False, condition, fatal=True)


def assert_eq(expected: Any, actual: Any) -> bool:
    return _check_binary(expected, actual, comparators.EQ(), fatal=True)


def assert_ne(expected: Any, actual: Any) -> bool:
    return _check_binary(expected, actual, comparators.NE(), fatal=True)


def assert_lt(expected: Any, actual: Any) -> bool:
    return _check_binary(expected, actual, comparators.LT(), fatal=True)


def assert_le(expected: Any, actual: Any) -> bool:
    return _check_binary(expected, actual, comparators.LE(), fatal=True)


def assert_gt(expected: Any, actual: Any) -> bool:
    return _check_binary(expected, actual, comparators.GT(), fatal=True)


def assert_ge(expected: Any, actual: Any) -> bool:
    return _check_binary(expected, actual, comparators.GE(), fatal=True)


def assert_streq(expected: comparators.CString, actual: comparators.CString) -> bool:
    return _check_binary(expected, actual, comparators.STREQ(), fatal=True)


def assert_strne(expected: comparators.CString, actual: comparators.CString) -> bool:
    return _check_binary(expected, actual, comparators.STRNE(), fatal=True)


def assert_strcaseeq(expected: comparators.CString, actual: comparators.CString) -> bool:
    return _check_binary(expected, actual, comparators.STRCASEEQ(), fatal=True)


def assert_strcasene(expected: comparators.CString, actual: comparators.CString) -> bool:
    return _check_binary(expected, actual, comparators.STRCASENE(), fatal=True)


def assert_float_eq(expected: float, actual: float) -> bool:
    return _check_binary(expected, actual, comparators.FLOATEQ(), fatal=True)


def assert_float_ne(expected: float, actual: float) -> bool:
    return _check_binary(expected, actual, comparators.FLOATNE(), fatal=True)


def assert_double_eq(expected: float, actual: float) -> bool:
    return _check_binary(expected, actual, comparators.DOUBLEEQ(), fatal=True)


def assert_double_ne(expected: float, actual: float) -> bool:
    return _check_binary(expected, actual, comparators.DOUBLENE(), fatal=True)


# xUnit spellings
EXPECT_TRUE = expect_true
EXPECT_FALSE = expect_false
EXPECT_EQ = expect_eq
EXPECT_NE = expect_ne
EXPECT_LT = expect_lt
EXPECT_LE = expect_le
EXPECT_GT = expect_gt
EXPECT_GE = expect_ge
EXPECT_STREQ = expect_streq
EXPECT_STRNE = expect_strne
EXPECT_STRCASEEQ = expect_strcaseeq
EXPECT_STRCASENE = expect_strcasene
EXPECT_FLOAT_EQ = expect_float_eq
EXPECT_FLOAT_NE = expect_float_ne
EXPECT_DOUBLE_EQ = expect_double_eq
EXPECT_DOUBLE_NE = expect_double_ne

ASSERT_TRUE = assert_true
ASSERT_FALSE = assert_false
ASSERT_EQ = assert_eq
ASSERT_NE = assert_ne
ASSERT_LT = assert_lt
ASSERT_LE = assert_le
ASSERT_GT = assert_gt
ASSERT_GE = assert_ge
ASSERT_STREQ = assert_streq
ASSERT_STRNE = assert_strne
ASSERT_STRCASEEQ = assert_strcaseeq
ASSERT_STRCASENE = assert_strcasene
ASSERT_FLOAT_EQ = assert_float_eq
ASSERT_FLOAT_NE = assert_float_ne
ASSERT_DOUBLE_EQ = assert_double_eq
ASSERT_DOUBLE_NE = assert_double_ne

__all__ = [
    name for name in list(globals())
    if name.startswith(("expect_", "assert_", "EXPECT_", "ASSERT_"))
]
