"""
Module providing the binary predicates used by assertions.

Each comparator is stateless, callable with two operands and exposes the
symbol used to spell the comparison in failure messages.
"""

from typing import Any, ClassVar

from picotest.floating import FloatingPoint, FloatingPoint32, FloatingPoint64


class Comparator:
    """
    Base class of binary comparators.
    """
    SYMBOL: ClassVar[str] = ""

    def __call__(self, v1: Any, v2: Any) -> bool:
        raise NotImplementedError


    def symbol(self) -> str:
        """
        Symbolic spelling of the comparison, e.g. ``==``.
        """
        return self.SYMBOL


    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EQ(Comparator):
    SYMBOL: ClassVar[str] = "=="

    def __call__(self, v1: Any, v2: Any) -> bool:
        return v1 == v2


class NE(Comparator):
    SYMBOL: ClassVar[str] = "!="

    def __call__(self, v1: Any, v2: Any) -> bool:
        return v1 != v2


class LT(Comparator):
    SYMBOL: ClassVar[str] = "<"

    def __call__(self, v1: Any, v2: Any) -> bool:
        return v1 < v2


class LE(Comparator):
    SYMBOL: ClassVar[str] = "<="

    def __call__(self, v1: Any, v2: Any) -> bool:
        return v1 <= v2


class GT(Comparator):
    SYMBOL: ClassVar[str] = ">"

    def __call__(self, v1: Any, v2: Any) -> bool:
        return v1 > v2


class GE(Comparator):
    SYMBOL: ClassVar[str] = ">="

    def __call__(self, v1: Any, v2: Any) -> bool:
        return v1 >= v2


CString = str | bytes | bytearray | None


def _as_bytes(value: CString) -> bytes | None:
    """
    Normalize a C-string operand to bytes, keeping ``None`` as the null string.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def _ascii_fold(value: bytes) -> bytes:
    # bytes.lower() only folds A-Z
    return value.lower()


def strings_equal(v1: CString, v2: CString, ignore_case: bool = False) -> bool:
    """
    Compare two C-strings byte by byte.

    Two null strings are equal; a null string never equals a non-null one.

    Parameters
    ----------
    v1 : str | bytes | None
        First string
    v2 : str | bytes | None
        Second string
    ignore_case : bool, optional
        Fold ASCII letters before comparing, by default False

    Returns
    -------
    bool
        True if the strings are equal
    """
    b1: bytes | None = _as_bytes(v1)
    b2: bytes | None = _as_bytes(v2)
    if b1 is None or b2 is None:
        return b1 is None and b2 is None
    if ignore_case:
        return _ascii_fold(b1) == _ascii_fold(b2)
    return b1 == b2


class STREQ(Comparator):
    SYMBOL: ClassVar[str] = "=="

    def __call__(self, v1: CString, v2: CString) -> bool:
        return strings_equal(v1, v2)


class STRNE(Comparator):
    SYMBOL: ClassVar[str] = "!="

    def __call__(self, v1: CString, v2: CString) -> bool:
        return not strings_equal(v1, v2)


class STRCASEEQ(Comparator):
    SYMBOL: ClassVar[str] = "=="

    def __call__(self, v1: CString, v2: CString) -> bool:
        return strings_equal(v1, v2, ignore_case=True)


class STRCASENE(Comparator):
    SYMBOL: ClassVar[str] = "!="

    def __call__(self, v1: CString, v2: CString) -> bool:
        return not strings_equal(v1, v2, ignore_case=True)


class FLOATEQ(Comparator):
    """
    ULP equality at binary32 precision.
    """
    SYMBOL: ClassVar[str] = "=="
    KIND: ClassVar[type[FloatingPoint]] = FloatingPoint32

    def __call__(self, v1: float, v2: float) -> bool:
        return self.KIND(v1).almost_equals(self.KIND(v2))


class FLOATNE(FLOATEQ):
    SYMBOL: ClassVar[str] = "!="

    def __call__(self, v1: float, v2: float) -> bool:
        return not super().__call__(v1, v2)


class DOUBLEEQ(FLOATEQ):
    """
    ULP equality at binary64 precision.
    """
    KIND: ClassVar[type[FloatingPoint]] = FloatingPoint64


class DOUBLENE(FLOATNE):
    KIND: ClassVar[type[FloatingPoint]] = FloatingPoint64
