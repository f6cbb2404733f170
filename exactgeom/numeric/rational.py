"""Canonical reduced fractions over integers.

A ``Rational`` is always stored reduced (``gcd(numerator, denominator) == 1``)
with a strictly positive denominator, so cross-multiplication gives correct
equality and ordering.
"""

from __future__ import annotations

import numbers
import operator
from typing import Any, Optional, Union

import numpy as np

from ..errors import ZeroDivisorError
from .number_theory import gcd
from .traits import NonZero, Sign

IntoRational = Union["Rational", int]


def _reduce(numerator: int, denominator: int) -> tuple[int, int]:
    div = gcd(numerator, denominator)
    if denominator < 0:
        div = -div
    return numerator // div, denominator // div


class Rational:
    """Rational number ``numerator/denominator``.

    Args:
        numerator: Integer numerator
        denominator: Integer (or ``NonZero``) denominator, defaults to 1

    Raises:
        ZeroDivisorError: If the denominator is zero. Use ``Rational.new`` for
            a non-raising constructor.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: Union[int, NonZero[int]] = 1):
        if isinstance(denominator, NonZero):
            denominator = denominator.get()
        numerator = operator.index(numerator)
        denominator = operator.index(denominator)
        if denominator == 0:
            raise ZeroDivisorError("Rational denominator cannot be zero")
        self._numerator, self._denominator = _reduce(numerator, denominator)

    @classmethod
    def new(cls, numerator: int, denominator: int) -> Optional["Rational"]:
        """Reduced rational, or None if ``denominator`` is zero."""
        if denominator == 0:
            return None
        return cls(numerator, denominator)

    @classmethod
    def new_nonzero(cls, numerator: int, denominator: NonZero[int]) -> "Rational":
        return cls(numerator, denominator)

    @classmethod
    def coerce(cls, value: Any) -> "Rational":
        """Convert ints, ``fractions.Fraction`` and rationals to ``Rational``.

        Raises:
            TypeError: For floats and other inexact values
        """
        if isinstance(value, Rational):
            return value
        if isinstance(value, numbers.Rational):
            return cls(value.numerator, value.denominator)
        raise TypeError(f"Cannot convert {type(value).__name__} to Rational exactly")

    @classmethod
    def zero(cls) -> "Rational":
        return cls(0)

    @classmethod
    def one(cls) -> "Rational":
        return cls(1)

    @classmethod
    def from_int(cls, value: int) -> "Rational":
        return cls(value)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == 1 and self._denominator == 1

    def trunc(self) -> int:
        """Integral part, rounded toward zero."""
        q = abs(self._numerator) // self._denominator
        return q if self._numerator >= 0 else -q

    def abs(self) -> "Rational":
        return Rational(abs(self._numerator), self._denominator)

    def get_sign(self) -> Sign:
        return Sign.of(self._numerator)

    def get_abs(self) -> "Rational":
        return self.abs()

    def as_f64(self) -> float:
        return float(self._numerator) / float(self._denominator)

    def as_f32(self) -> float:
        return float(np.float32(self._numerator) / np.float32(self._denominator))

    # Arithmetic

    @staticmethod
    def _operand(value: Any) -> Optional["Rational"]:
        if isinstance(value, Rational):
            return value
        if isinstance(value, int):
            return Rational(value)
        return None

    def __add__(self, other: Any) -> "Rational":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator + rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    def __radd__(self, other: Any) -> "Rational":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Rational":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator - rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    def __rsub__(self, other: Any) -> "Rational":
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Any) -> "Rational":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._numerator,
            self._denominator * rhs._denominator,
        )

    def __rmul__(self, other: Any) -> "Rational":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Rational":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        if rhs._numerator == 0:
            raise ZeroDivisorError("Rational division by zero")
        return Rational(
            self._numerator * rhs._denominator,
            self._denominator * rhs._numerator,
        )

    def __rtruediv__(self, other: Any) -> "Rational":
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __mod__(self, other: Any) -> "Rational":
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self - Rational((self / rhs).trunc()) * rhs

    def __rmod__(self, other: Any) -> "Rational":
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return lhs % self

    def __neg__(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return self.abs()

    # Comparisons

    def _cmp(self, other: Any) -> Optional[int]:
        rhs = self._operand(other)
        if rhs is None:
            return None
        lhs_cross = self._numerator * rhs._denominator
        rhs_cross = rhs._numerator * self._denominator
        return (lhs_cross > rhs_cross) - (lhs_cross < rhs_cross)

    def __eq__(self, other: Any) -> bool:
        result = self._cmp(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __lt__(self, other: Any) -> bool:
        result = self._cmp(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: Any) -> bool:
        result = self._cmp(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._cmp(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._cmp(other)
        if result is None:
            return NotImplemented
        return result >= 0

    def __hash__(self) -> int:
        # Integral values hash like the equal int
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    # Conversions

    def __float__(self) -> float:
        return self.as_f64()

    def __trunc__(self) -> int:
        return self.trunc()

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"
