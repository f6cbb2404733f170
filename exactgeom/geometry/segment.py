"""Line segments and segment intersection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Optional, TypeVar

from ..errors import DegenerateSegmentError, GeometryInvariantError, UnexpectedIntersectionError
from ..numeric import get_sqrt
from .line import ExactLine, FloatLine, IntersectionKind, Line
from .point import ExactPoint, FloatPoint, Ordering, Point

S = TypeVar("S", bound="Segment")

# Both endpoints strictly on the same side
_SAME_SIDE = {
    (Ordering.COUNTERCLOCKWISE, Ordering.COUNTERCLOCKWISE),
    (Ordering.CLOCKWISE, Ordering.CLOCKWISE),
}


def _order_points_by(
    p1: Point, p2: Point, key: Callable[[Point], Any]
) -> Optional[tuple[Point, Point]]:
    """Order two points by ``key``; None if the keys are equal or incomparable."""
    k1 = key(p1)
    k2 = key(p2)
    if k1 < k2:
        return p1, p2
    if k1 > k2:
        return p2, p1
    return None


class Segment:
    """Closed segment between two distinct points. Endpoint order is irrelevant for equality."""

    point_cls: ClassVar[type[Point]]
    line_cls: ClassVar[type[Line]]

    __slots__ = ("_start", "_end")

    def __init__(self, start: Any, end: Any):
        start = self.point_cls.coerce(start)
        end = self.point_cls.coerce(end)
        if start == end:
            raise DegenerateSegmentError(f"Segment endpoints must differ, got {start!r} twice")
        self._start = start
        self._end = end

    @classmethod
    def between(cls: type[S], p1: Any, p2: Any) -> Optional[S]:
        """Segment from ``p1`` to ``p2``, or None if the points coincide."""
        p1 = cls.point_cls.coerce(p1)
        p2 = cls.point_cls.coerce(p2)
        if p1 == p2:
            return None
        return cls(p1, p2)

    @property
    def start(self) -> Point:
        return self._start

    @property
    def end(self) -> Point:
        return self._end

    @property
    def endpoints(self) -> tuple[Point, Point]:
        return self._start, self._end

    def to_line(self) -> Line:
        return self.line_cls.spanned_by(self._start, self._end)

    def intersect(self, other: "Segment") -> "SegmentIntersection":
        """Intersection with another segment of the same domain.

        Returns:
            NONE, POINT (crossing or touching at an endpoint), or SEGMENT
            (collinear overlap)
        """
        ordering = self.point_cls.ordering

        sides = (
            ordering(self._start, self._end, other._start),
            ordering(self._start, self._end, other._end),
        )
        if sides in _SAME_SIDE:
            return SegmentIntersection.none()

        if sides == (Ordering.COLLINEAR, Ordering.COLLINEAR):
            return self._intersect_collinear(other)

        # Check the sides from the other segment's perspective
        sides = (
            ordering(other._start, other._end, self._start),
            ordering(other._start, other._end, self._end),
        )
        if sides in _SAME_SIDE:
            return SegmentIntersection.none()
        if sides == (Ordering.COLLINEAR, Ordering.COLLINEAR):
            raise GeometryInvariantError("Segments are both collinear and not collinear")

        # Exactly one crossing point exists
        return SegmentIntersection.of_point(self.to_line().intersect(other.to_line()).unwrap_point())

    def _intersect_collinear(self, other: "Segment") -> "SegmentIntersection":
        # Project on x, or on y for vertical segments
        for key in (lambda p: p.x, lambda p: p.y):
            ordered = _order_points_by(self._start, self._end, key)
            if ordered is None:
                continue
            start1, end1 = ordered
            ordered = _order_points_by(other._start, other._end, key)
            if ordered is None:
                raise GeometryInvariantError(f"Degenerate projection of {other!r}")
            start2, end2 = ordered

            start = start2 if key(start1) < key(start2) else start1
            end = end2 if key(end1) > key(end2) else end1
            if key(start) < key(end):
                return SegmentIntersection.of_segment(type(self)(start, end))
            if key(start) == key(end):
                return SegmentIntersection.of_point(start)
            return SegmentIntersection.none()

        return SegmentIntersection.none()

    def sq_len(self) -> Any:
        """Squared length, in the logical coordinate type."""
        dx = self._end.x - self._start.x
        dy = self._end.y - self._start.y
        return dx * dx + dy * dy

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return (self._start == other._start and self._end == other._end) or (
            self._start == other._end and self._end == other._start
        )

    def __hash__(self) -> int:
        return hash(frozenset((self._start, self._end)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._start!r}, {self._end!r})"


@dataclass(frozen=True)
class SegmentIntersection:
    """Result of intersecting two segments."""

    kind: IntersectionKind
    point: Optional[Point] = None
    segment: Optional[Segment] = None

    @classmethod
    def none(cls) -> "SegmentIntersection":
        return cls(IntersectionKind.NONE)

    @classmethod
    def of_point(cls, point: Point) -> "SegmentIntersection":
        return cls(IntersectionKind.POINT, point=point)

    @classmethod
    def of_segment(cls, segment: Segment) -> "SegmentIntersection":
        return cls(IntersectionKind.SEGMENT, segment=segment)

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

    def unwrap_segment(self) -> Segment:
        if self.kind != IntersectionKind.SEGMENT:
            raise UnexpectedIntersectionError(f"expected segment but was {self.kind.value}")
        return self.segment


class ExactSegment(Segment):
    """Segment with rational endpoints. Has no ``len()``: roots are not exact."""

    __slots__ = ()
    point_cls = ExactPoint
    line_cls = ExactLine


class FloatSegment(Segment):
    __slots__ = ()
    point_cls = FloatPoint
    line_cls = FloatLine

    def len(self) -> float:
        return get_sqrt(self.sq_len())


ExactPoint.segment_cls = ExactSegment
FloatPoint.segment_cls = FloatSegment
