"""Points in homogeneous coordinates and the orientation predicate."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Optional, TypeVar

from ..numeric import NonZero, Rational, Sign, as_f32, as_f64, get_sign
from .coordinates import CoordinateStrategy, FloatCoordinates, IntegerCoordinates, Unit

if TYPE_CHECKING:
    from .segment import Segment

R = TypeVar("R")
D = TypeVar("D")
C = TypeVar("C")

P = TypeVar("P", bound="Point")


class Ordering(Enum):
    """Turn direction of three points."""

    COUNTERCLOCKWISE = "counterclockwise"
    COLLINEAR = "collinear"
    CLOCKWISE = "clockwise"


class Point(Generic[R, D, C]):
    """A point stored as ``(x, y, divisor)``; its position is ``(x/divisor, y/divisor)``.

    Points are normalized on construction and never mutated. Several raw
    triples may describe the same position, so equality compares by
    cross-multiplication.

    Use a concrete domain class (``ExactPoint`` or ``FloatPoint``) to
    construct points; this base class only carries the shared logic.
    """

    coords: ClassVar[CoordinateStrategy]
    segment_cls: ClassVar[type["Segment"]]

    __slots__ = ("_x", "_y", "_z")

    def __init__(self, x: R, y: R, divisor: Any = None):
        coords = self._strategy()
        (x, y), z = coords.normalize_with_divisor((x, y), coords.as_divisor(divisor))
        self._x = x
        self._y = y
        self._z = z

    @classmethod
    def _strategy(cls) -> CoordinateStrategy:
        try:
            return cls.coords
        except AttributeError:
            raise TypeError(
                f"{cls.__name__} has no coordinate strategy, use ExactPoint or FloatPoint"
            ) from None

    @classmethod
    def _from_raw(cls: type[P], x: R, y: R, z: D) -> P:
        """Build a point from values that are already normalized."""
        point = cls.__new__(cls)
        point._x = x
        point._y = y
        point._z = z
        return point

    @classmethod
    def new(cls: type[P], x: R, y: R, divisor: Any = None) -> P:
        return cls(x, y, divisor)

    @classmethod
    def try_new(cls: type[P], x: R, y: R, z: R) -> Optional[P]:
        """Point from raw homogeneous values, or None if ``z`` is not a valid divisor."""
        normalized = cls._strategy().try_normalize((x, y), z)
        if normalized is None:
            return None
        (x, y), z = normalized
        return cls._from_raw(x, y, z)

    @classmethod
    def from_pair(cls: type[P], x: Any, y: Any) -> P:
        """Point at logical position ``(x, y)``."""
        (x, y), z = cls._strategy().from_coordinates((x, y))
        return cls(x, y, z)

    @classmethod
    def coerce(cls: type[P], value: Any) -> P:
        """Accept a point of the same domain or an ``(x, y)`` pair.

        Raises:
            TypeError: If ``value`` cannot be interpreted as a point of this domain
        """
        if isinstance(value, Point):
            if value.coords.coordinate_type is not cls._strategy().coordinate_type:
                raise TypeError(f"Cannot use {type(value).__name__} as {cls.__name__}")
            return value
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls.from_pair(value[0], value[1])
        raise TypeError(f"Cannot interpret {value!r} as {cls.__name__}")

    @classmethod
    def _accept(cls, value: Any) -> "Point":
        if isinstance(value, Point):
            return value
        return cls.coerce(value)

    @property
    def raw_x(self) -> R:
        return self._x

    @property
    def raw_y(self) -> R:
        return self._y

    @property
    def divisor(self) -> D:
        return self._z

    @property
    def raw(self) -> tuple[R, R, R]:
        """Raw ``(x, y, z)`` with the divisor as a plain value."""
        return self._x, self._y, self.coords.divisor_value(self._z)

    @property
    def x(self) -> C:
        return self.coords.to_coordinates((self._x,), self._z)[0]

    @property
    def y(self) -> C:
        return self.coords.to_coordinates((self._y,), self._z)[0]

    def normalized(self: P) -> P:
        return type(self)(self._x, self._y, self._z)

    def to_f64_pair(self) -> tuple[float, float]:
        return as_f64(self.x), as_f64(self.y)

    def to_f32_pair(self) -> tuple[float, float]:
        return as_f32(self.x), as_f32(self.y)

    def to_float_point(self) -> "FloatPoint":
        return FloatPoint.from_pair(*self.to_f64_pair())

    @classmethod
    def ordering(cls, p0: Any, p1: Any, p2: Any) -> Ordering:
        """Orientation of the turn ``p0 -> p1 -> p2``.

        Sign of the cross product ``(p1 - p0) x (p2 - p0)`` on logical
        coordinates; exact in the exact domain.
        """
        p0, p1, p2 = cls._accept(p0), cls._accept(p1), cls._accept(p2)
        dx1 = p1.x - p0.x
        dy1 = p1.y - p0.y
        dx2 = p2.x - p0.x
        dy2 = p2.y - p0.y
        sign = get_sign(dx1 * dy2 - dx2 * dy1)
        if sign is Sign.NEGATIVE:
            return Ordering.CLOCKWISE
        if sign is Sign.POSITIVE:
            return Ordering.COUNTERCLOCKWISE
        return Ordering.COLLINEAR

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if self.coords.coordinate_type is not other.coords.coordinate_type:
            return False
        self_z = self.coords.divisor_value(self._z)
        other_z = other.coords.divisor_value(other._z)
        return other_z * self._x == self_z * other._x and other_z * self._y == self_z * other._y

    def __hash__(self) -> int:
        return hash(self.raw)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._x}/{self._z}, {self._y}/{self._z})"

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class ExactPoint(Point[int, NonZero[int], Rational]):
    """Point with 64-bit integer homogeneous storage and rational coordinates."""

    __slots__ = ()
    coords = IntegerCoordinates()


class FloatPoint(Point[float, Unit, float]):
    """Point with float coordinates."""

    __slots__ = ()
    coords = FloatCoordinates()
