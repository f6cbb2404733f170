"""Numeric kernel: capability protocols and helpers shared by both coordinate domains.

The geometry code never branches on ``int`` vs ``float`` directly. It relies on
the operator protocols below plus a handful of helpers (``zero``, ``one``,
``from_int``, ``get_sign`` ...) that work for built-in numbers and for
``Rational`` alike.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

import numpy as np

from ..errors import ZeroDivisorError

T = TypeVar("T")

# Range accepted by from_int (signed 8-bit)
SMALL_INT_MIN = -128
SMALL_INT_MAX = 127


class Sign(Enum):
    """Sign of a numeric value."""

    NEGATIVE = -1
    NEUTRAL = 0
    POSITIVE = 1

    def __neg__(self) -> "Sign":
        return Sign(-self.value)

    @classmethod
    def of(cls, value: Any) -> "Sign":
        """Sign of any value comparable with 0. NaN is NEUTRAL."""
        if value > 0:
            return cls.POSITIVE
        if value < 0:
            return cls.NEGATIVE
        return cls.NEUTRAL


@dataclass(frozen=True)
class NonZero(Generic[T]):
    """A value guaranteed to differ from zero. Used only as a divisor."""

    value: T

    def __post_init__(self):
        if self.value == 0:
            raise ZeroDivisorError("NonZero value cannot be zero")

    @classmethod
    def new(cls, value: T) -> Optional["NonZero[T]"]:
        """Wrap ``value``, or return None if it is zero."""
        if value == 0:
            return None
        return cls(value)

    def get(self) -> T:
        return self.value

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return str(self.value)


@runtime_checkable
class Numeric(Protocol):
    """Values supporting ``+ - * / %`` and ordering."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __mod__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


@runtime_checkable
class Signed(Numeric, Protocol):
    """Numeric values with negation and absolute value."""

    def __neg__(self) -> Any: ...

    def __abs__(self) -> Any: ...


@runtime_checkable
class Integer(Numeric, Protocol):
    """Exact integers. ``nonzero_type`` gives their divisor type."""

    def __floordiv__(self, other: Any) -> Any: ...

    def __index__(self) -> int: ...


@runtime_checkable
class Float(Signed, Protocol):
    """Approximate values that can take a square root."""

    def __float__(self) -> float: ...


def nonzero_type(kind: type) -> type:
    """Divisor type associated with an integer ``kind``.

    Raises:
        TypeError: If ``kind`` is not an integer type
    """
    if not hasattr(kind, "__index__"):
        raise TypeError(f"{kind.__name__} is not an integer type and has no NonZero divisor")
    return NonZero


def _wrap_small_int(value: int) -> int:
    """Truncate ``value`` into the signed 8-bit range (two's complement wrap)."""
    span = SMALL_INT_MAX - SMALL_INT_MIN + 1
    return (value - SMALL_INT_MIN) % span + SMALL_INT_MIN


def zero(kind: type) -> Any:
    """Additive identity of ``kind``."""
    if hasattr(kind, "zero"):
        return kind.zero()
    return kind(0)


def one(kind: type) -> Any:
    """Multiplicative identity of ``kind``."""
    if hasattr(kind, "one"):
        return kind.one()
    return kind(1)


def is_zero(value: Any) -> bool:
    return value == 0


def is_one(value: Any) -> bool:
    return value == 1


def from_int(kind: type, value: int) -> Any:
    """Best-effort conversion of a small integer to ``kind``.

    Values outside the signed 8-bit range are wrapped into it rather than
    rejected.
    """
    value = _wrap_small_int(int(value))
    if hasattr(kind, "from_int"):
        return kind.from_int(value)
    return kind(value)


def as_f64(value: Any) -> float:
    """Convert to a double-precision float."""
    if hasattr(value, "as_f64"):
        return value.as_f64()
    return float(value)


def as_f32(value: Any) -> float:
    """Convert to single precision (returned as a Python float)."""
    return float(np.float32(as_f64(value)))


def get_sign(value: Any) -> Sign:
    if hasattr(value, "get_sign"):
        return value.get_sign()
    return Sign.of(value)


def get_abs(value: Any) -> Any:
    return abs(value)


def get_sqrt(value: Any) -> float:
    """Square root of a floating value.

    Raises:
        TypeError: If ``value`` is not a float (exact types have no exact root)
    """
    if not isinstance(value, float):
        raise TypeError(f"Square root is only defined for floats, got {type(value).__name__}")
    return math.sqrt(value)
