"""Integer helpers: gcd/lcm and fixed-width range checks."""

import math
from functools import reduce

from ..errors import CoordinateOverflowError


def gcd(*values: int) -> int:
    """Greatest common divisor of all values (always >= 0, 0 if all are zero)."""
    return math.gcd(*values)


def lcm(a: int, b: int) -> int:
    """Least common multiple of two integers (always >= 0)."""
    return math.lcm(a, b)


def lcm_all(values: list[int]) -> int:
    return reduce(lcm, values, 1)


def signed_bounds(bits: int) -> tuple[int, int]:
    """Inclusive (min, max) of a signed two's complement integer of ``bits`` width."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def fits_signed(value: int, bits: int) -> bool:
    lo, hi = signed_bounds(bits)
    return lo <= value <= hi


def check_signed(value: int, bits: int) -> int:
    """Return ``value`` unchanged if it fits ``bits``, otherwise raise.

    Raises:
        CoordinateOverflowError: If the value is out of range
    """
    if not fits_signed(value, bits):
        raise CoordinateOverflowError(value, bits)
    return value
