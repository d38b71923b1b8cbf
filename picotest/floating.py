"""
ULP based equality for IEEE-754 binary32 and binary64 values.
"""

import math
import struct
from typing import ClassVar


class FloatingPoint:
    """
    Bit-level view of an IEEE-754 value of a fixed width.

    Two values are almost equal when their bit patterns, mapped onto a
    monotonic unsigned scale, are at most ``MAX_ULPS`` apart.
    """
    # Maximum distance in units in the last place for two values to be equal
    MAX_ULPS: ClassVar[int] = 4

    BITS: ClassVar[int] = 64
    PACK_FORMAT: ClassVar[str] = "<d"
    UNPACK_FORMAT: ClassVar[str] = "<Q"

    def __init__(self, value: float) -> None:
        self.value: float = self.narrow(value)


    @classmethod
    def narrow(cls, value: float) -> float:
        """
        Round ``value`` to the precision of this width.
        """
        return float(value)


    @classmethod
    def sign_bit(cls) -> int:
        return 1 << (cls.BITS - 1)


    @classmethod
    def mask(cls) -> int:
        return (1 << cls.BITS) - 1


    @property
    def bits(self) -> int:
        """
        Raw bit pattern of the value as an unsigned integer.
        """
        packed: bytes = struct.pack(self.PACK_FORMAT, self.value)
        return struct.unpack(self.UNPACK_FORMAT, packed)[0]


    def is_nan(self) -> bool:
        return math.isnan(self.value)


    def biased(self) -> int:
        """
        Map the sign-and-magnitude bit pattern onto a monotonic scale.

        Negative values become their two's complement negation, positive
        values get the sign bit set, so +0.0 and -0.0 land on the same point.

        Returns
        -------
        int
            Unsigned biased representation
        """
        bits: int = self.bits
        sign_bit: int = self.sign_bit()
        if bits & sign_bit:
            return (~bits + 1) & self.mask()
        return bits | sign_bit


    def distance(self, other: "FloatingPoint") -> int:
        """
        Number of representable values between ``self`` and ``other``.
        """
        return abs(self.biased() - other.biased())


    def almost_equals(self, other: "FloatingPoint") -> bool:
        """
        Check ULP equality with another value of the same width.

        NaN never compares equal, not even to itself.

        Parameters
        ----------
        other : FloatingPoint
            Value to compare against

        Returns
        -------
        bool
            True if the values are at most ``MAX_ULPS`` apart
        """
        if self.is_nan() or other.is_nan():
            return False
        return self.distance(other) <= self.MAX_ULPS


class FloatingPoint32(FloatingPoint):
    """
    Single precision (binary32) view.
    """
    BITS: ClassVar[int] = 32
    PACK_FORMAT: ClassVar[str] = "<f"
    UNPACK_FORMAT: ClassVar[str] = "<I"

    @classmethod
    def narrow(cls, value: float) -> float:
        """
        Round ``value`` to binary32.

        Finite values outside the binary32 range become a signed infinity.
        """
        try:
            return struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)


class FloatingPoint64(FloatingPoint):
    """
    Double precision (binary64) view.
    """


def almost_equal(v1: float, v2: float, width: int = 64) -> bool:
    """
    Compare two floating point values by ULP distance.

    Parameters
    ----------
    v1 : float
        First value
    v2 : float
        Second value
    width : int, optional
        Precision in bits, 32 or 64, by default 64

    Returns
    -------
    bool
        True if the values are at most four ULPs apart at the given width
    """
    if width == 32:
        kind: type[FloatingPoint] = FloatingPoint32
    elif width == 64:
        kind = FloatingPoint64
    else:
        raise ValueError(f"Unsupported floating point width: {width}")
    return kind(v1).almost_equals(kind(v2))
