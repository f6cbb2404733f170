"""Lines ``ax + by + c = 0`` computed directly on homogeneous point fields."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, Optional, TypeVar

from ..errors import GeometryInvariantError, UnexpectedIntersectionError
from .coordinates import CoordinateStrategy
from .point import ExactPoint, FloatPoint, Point

R = TypeVar("R")
L = TypeVar("L", bound="Line")


class Line(Generic[R]):
    """The set of points satisfying ``ax + by + c = 0``.

    Coefficients are normalized on construction: divided by their gcd in the
    exact domain, rescaled so the leading significant coefficient is 1 in the
    float domain. Two lines are equal when their coefficient vectors are
    proportional.
    """

    point_cls: ClassVar[type[Point]]

    __slots__ = ("_a", "_b", "_c")

    def __init__(self, a: R, b: R, c: R):
        self._a, self._b, self._c = self.coords().normalize((a, b, c))

    @classmethod
    def coords(cls) -> CoordinateStrategy:
        return cls.point_cls.coords

    @classmethod
    def spanned_by(cls: type[L], p1: Any, p2: Any) -> L:
        """Line through two points.

        Works on raw fields, so the points may carry different divisors.
        """
        p1 = cls.point_cls.coerce(p1)
        p2 = cls.point_cls.coerce(p2)
        x1, y1, z1 = p1.raw
        x2, y2, z2 = p2.raw

        a = z2 * y1 - z1 * y2
        b = z1 * x2 - z2 * x1
        c = x1 * y2 - x2 * y1

        return cls(a, b, c)

    @property
    def a(self) -> R:
        return self._a

    @property
    def b(self) -> R:
        return self._b

    @property
    def c(self) -> R:
        return self._c

    @property
    def coefficients(self) -> tuple[R, R, R]:
        return self._a, self._b, self._c

    def normalized(self: L) -> L:
        return type(self)(self._a, self._b, self._c)

    def contains(self, p: Any) -> bool:
        x, y, z = self.point_cls.coerce(p).raw
        return self.coords().is_zero(self._a * x + self._b * y + self._c * z)

    def intersect(self, other: "Line") -> "LineIntersection":
        """Intersection with another line of the same domain.

        Returns:
            POINT for crossing lines, LINE (this line) for identical lines,
            NONE for distinct parallel lines
        """
        coords = self.coords()
        x = other._c * self._b - self._c * other._b
        y = self._c * other._a - other._c * self._a
        z = self._a * other._b - other._a * self._b

        p = self.point_cls.try_new(x, y, z)
        if p is not None:
            return LineIntersection.of_point(p)
        if coords.is_zero(x) and coords.is_zero(y):
            return LineIntersection.of_line(self)
        return LineIntersection.none()

    def closest_point_to(self, p: Any) -> Point:
        """Orthogonal projection of ``p`` onto this line.

        Raises:
            GeometryInvariantError: If the projection cannot be normalized,
                which only happens for a degenerate line
        """
        px, py, pz = self.point_cls.coerce(p).raw
        a, b, c = self._a, self._b, self._c

        # c is scaled by pz so points with any divisor project correctly
        x = b * (b * px - a * py) - a * c * pz
        y = a * (a * py - b * px) - b * c * pz
        z = (a * a + b * b) * pz

        normalized = self.coords().try_normalize((x, y), z)
        if normalized is None:
            raise GeometryInvariantError(f"Projection onto {self!r} is not normalizable")
        (x, y), z = normalized
        return self.point_cls._from_raw(x, y, z)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        a1, b1, c1 = self.coefficients
        a2, b2, c2 = other.coefficients
        return a1 * c2 == a2 * c1 and b1 * c2 == b2 * c1 and a1 * b2 == a2 * b1

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(a={self._a}, b={self._b}, c={self._c})"


class IntersectionKind(Enum):
    """Kind of an intersection result."""

    NONE = "none"
    POINT = "point"
    LINE = "line"
    SEGMENT = "segment"


@dataclass(frozen=True)
class LineIntersection:
    """Result of intersecting two lines."""

    kind: IntersectionKind
    point: Optional[Point] = None
    line: Optional[Line] = None

    @classmethod
    def none(cls) -> "LineIntersection":
        return cls(IntersectionKind.NONE)

    @classmethod
    def of_point(cls, point: Point) -> "LineIntersection":
        return cls(IntersectionKind.POINT, point=point)

    @classmethod
    def of_line(cls, line: Line) -> "LineIntersection":
        return cls(IntersectionKind.LINE, line=line)

    @property
    def is_none(self) -> bool:
        return self.kind == IntersectionKind.NONE

    def unwrap_none(self) -> None:
        if self.kind != IntersectionKind.NONE:
            raise UnexpectedIntersectionError(f"expected none but was {self.kind.value}")

    def unwrap_point(self) -> Point:
        if self.kind != IntersectionKind.POINT:
            raise UnexpectedIntersectionError(f"expected point but was {self.kind.value}")
        return self.point

    def unwrap_line(self) -> Line:
        if self.kind != IntersectionKind.LINE:
            raise UnexpectedIntersectionError(f"expected line but was {self.kind.value}")
        return self.line


class ExactLine(Line[int]):
    __slots__ = ()
    point_cls = ExactPoint


class FloatLine(Line[float]):
    __slots__ = ()
    point_cls = FloatPoint
