"""Coordinate strategies: raw homogeneous storage <-> logical coordinates.

A point or line stores raw values plus (for points) a shared divisor. The
strategy attached to the primitive class decides how those raw values are
normalized and how they map to logical coordinates:

- ``IntegerCoordinates``: fixed-width integers, ``NonZero[int]`` divisor,
  ``Rational`` coordinates. Exact.
- ``FloatCoordinates``: floats, ``Unit`` divisor, ``float`` coordinates.
  Approximate.
"""

from __future__ import annotations

import math
import operator
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Final, Generic, Optional, TypeVar

from ..errors import UnitArithmeticError
from ..numeric import NonZero, Rational, check_signed, gcd, lcm_all, nonzero_type, signed_bounds

if TYPE_CHECKING:
    from ..models.settings import GeometrySettings

R = TypeVar("R")  # raw storage
D = TypeVar("D")  # divisor
C = TypeVar("C")  # logical coordinate

# Width of raw integer storage
DEFAULT_INTEGER_BITS: Final[int] = 64

# Float line coefficients smaller than this are skipped when picking the
# coefficient to rescale to 1
DEFAULT_LINE_TOLERANCE: Final[float] = 1e-6


class Unit:
    """Divisor of the float domain. Always logically equal to 1."""

    __slots__ = ()
    _instance: Optional["Unit"] = None

    def __new__(cls) -> "Unit":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def one(cls) -> "Unit":
        return cls()

    @classmethod
    def zero(cls) -> "Unit":
        raise UnitArithmeticError("Unit cannot be zero")

    @classmethod
    def from_int(cls, value: int) -> "Unit":
        raise UnitArithmeticError("Unit cannot be created from an integer")

    def as_f64(self) -> float:
        return 1.0

    def __mul__(self, other: Any) -> Any:
        # Unit * Unit stays Unit, Unit * x is x
        return other

    def __rmul__(self, other: Any) -> Any:
        return other

    def __truediv__(self, other: Any) -> "Unit":
        if isinstance(other, Unit):
            return self
        return NotImplemented

    def __add__(self, other: Any) -> Any:
        raise UnitArithmeticError("Units cannot be added")

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        raise UnitArithmeticError("Units cannot be subtracted")

    __rsub__ = __sub__

    def __mod__(self, other: Any) -> Any:
        raise UnitArithmeticError("Units have no remainder")

    __rmod__ = __mod__

    def __float__(self) -> float:
        return 1.0

    def __int__(self) -> int:
        return 1

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Unit) or other == 1

    def __hash__(self) -> int:
        return hash(1)

    def __repr__(self) -> str:
        return "Unit()"

    def __str__(self) -> str:
        return "1"


UNIT: Final[Unit] = Unit()


class CoordinateStrategy(ABC, Generic[R, D, C]):
    """Bridge between raw homogeneous values and logical coordinates."""

    name: str = "abstract"
    coordinate_type: type = object
    divisor_type: type = object

    @abstractmethod
    def try_normalize(self, values: Sequence[R], last: R) -> Optional[tuple[tuple[R, ...], D]]:
        """Treat ``last`` as an unreduced divisor and normalize ``values`` by it.

        Returns:
            (normalized values, divisor), or None if ``last`` cannot become
            a valid divisor
        """

    @abstractmethod
    def normalize(self, values: Sequence[R]) -> tuple[R, ...]:
        """Canonicalize values that are only defined up to a scalar factor."""

    @abstractmethod
    def normalize_with_divisor(self, values: Sequence[R], divisor: D) -> tuple[tuple[R, ...], D]:
        """Canonicalize values sharing ``divisor``."""

    @abstractmethod
    def from_coordinates(self, coordinates: Sequence[Any]) -> tuple[tuple[R, ...], D]:
        """Raw values and shared divisor representing ``coordinates``."""

    @abstractmethod
    def to_coordinates(self, values: Sequence[R], divisor: D) -> tuple[C, ...]:
        """Logical coordinates of raw values over ``divisor``."""

    @abstractmethod
    def as_divisor(self, value: Any) -> D:
        """Coerce a user-supplied divisor (None means 1)."""

    @abstractmethod
    def divisor_value(self, divisor: D) -> R:
        """The divisor as a raw value, for homogeneous arithmetic."""

    def check(self, *values: R) -> tuple[R, ...]:
        """Validate raw values. The default accepts everything."""
        return values

    def is_zero(self, value: R) -> bool:
        return value == 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IntegerCoordinates(CoordinateStrategy[int, NonZero[int], Rational]):
    """Exact strategy over signed integers of a fixed width.

    Raw values are checked against the width whenever they are stored;
    values that do not fit raise ``CoordinateOverflowError``.
    """

    name = "exact"
    coordinate_type = Rational
    divisor_type = nonzero_type(int)

    def __init__(self, bits: int = DEFAULT_INTEGER_BITS):
        if bits < 2:
            raise ValueError(f"bits must be at least 2, got {bits}")
        self.bits = bits

    @classmethod
    def from_settings(cls, settings: "GeometrySettings") -> "IntegerCoordinates":
        return cls(bits=settings.exact.integer_bits)

    @property
    def bounds(self) -> tuple[int, int]:
        return signed_bounds(self.bits)

    def check(self, *values: int) -> tuple[int, ...]:
        return tuple(check_signed(operator.index(v), self.bits) for v in values)

    def try_normalize(
        self, values: Sequence[int], last: int
    ) -> Optional[tuple[tuple[int, ...], NonZero[int]]]:
        divisor = self.divisor_type.new(operator.index(last))
        if divisor is None:
            return None
        return self.normalize_with_divisor(values, divisor)

    def normalize(self, values: Sequence[int]) -> tuple[int, ...]:
        values = tuple(operator.index(v) for v in values)
        div = gcd(*values)
        if div != 0:
            values = tuple(v // div for v in values)
        # Width applies to the reduced form only
        return self.check(*values)

    def normalize_with_divisor(
        self, values: Sequence[int], divisor: NonZero[int]
    ) -> tuple[tuple[int, ...], NonZero[int]]:
        values = tuple(operator.index(v) for v in values)
        z = divisor.get()
        div = gcd(*values, z)
        # Divisor is kept positive
        if z < 0:
            div = -div
        *values, z = self.check(*(v // div for v in values), z // div)
        return tuple(values), self.divisor_type(z)

    def from_coordinates(self, coordinates: Sequence[Any]) -> tuple[tuple[int, ...], NonZero[int]]:
        coordinates = [Rational.coerce(c) for c in coordinates]
        div = lcm_all([c.denominator for c in coordinates])
        values = self.check(*(c.numerator * (div // c.denominator) for c in coordinates))
        (div,) = self.check(div)
        return values, self.divisor_type(div)

    def to_coordinates(self, values: Sequence[int], divisor: NonZero[int]) -> tuple[Rational, ...]:
        return tuple(Rational.new_nonzero(v, divisor) for v in values)

    def as_divisor(self, value: Any) -> NonZero[int]:
        if value is None:
            return self.divisor_type(1)
        if isinstance(value, self.divisor_type):
            return value
        return self.divisor_type(operator.index(value))

    def divisor_value(self, divisor: NonZero[int]) -> int:
        return divisor.get()

    def __repr__(self) -> str:
        return f"IntegerCoordinates(bits={self.bits})"


class FloatCoordinates(CoordinateStrategy[float, Unit, float]):
    """Approximate strategy over floats with a unit divisor."""

    name = "float"
    coordinate_type = float
    divisor_type = Unit

    def __init__(self, tolerance: float = DEFAULT_LINE_TOLERANCE):
        if not tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {tolerance}")
        self.tolerance = tolerance

    @classmethod
    def from_settings(cls, settings: "GeometrySettings") -> "FloatCoordinates":
        return cls(tolerance=settings.approx.line_tolerance)

    def try_normalize(self, values: Sequence[float], last: float) -> Optional[tuple[tuple[float, ...], Unit]]:
        last = float(last)
        if last == 0.0 or not math.isfinite(last):
            return None
        normalizer = 1.0 / last
        scaled = tuple(float(v) * normalizer for v in values)
        # NaN or infinite results have no finite position
        if not all(math.isfinite(v) for v in scaled):
            return None
        return scaled, UNIT

    def normalize(self, values: Sequence[float]) -> tuple[float, ...]:
        values = tuple(float(v) for v in values)
        for value in values:
            if abs(value) > self.tolerance:
                multiplier = 1.0 / value
                return tuple(v * multiplier for v in values)
        return values

    def normalize_with_divisor(self, values: Sequence[float], divisor: Unit) -> tuple[tuple[float, ...], Unit]:
        return tuple(float(v) for v in values), divisor

    def from_coordinates(self, coordinates: Sequence[Any]) -> tuple[tuple[float, ...], Unit]:
        return tuple(float(c) for c in coordinates), UNIT

    def to_coordinates(self, values: Sequence[float], divisor: Unit) -> tuple[float, ...]:
        return tuple(values)

    def as_divisor(self, value: Any) -> Unit:
        if value is None or isinstance(value, Unit):
            return UNIT
        raise TypeError(
            f"Float points take a Unit divisor, got {value!r}; use try_new for raw homogeneous values"
        )

    def divisor_value(self, divisor: Unit) -> float:
        return 1.0

    def __repr__(self) -> str:
        return f"FloatCoordinates(tolerance={self.tolerance})"
