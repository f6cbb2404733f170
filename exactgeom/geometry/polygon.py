"""Polygons as ordered point sequences with an implicit closing edge."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Union, overload

from ..errors import EmptyPolygonError
from ..numeric import from_int, zero
from .point import Point
from .segment import Segment


class PolygonSegments(Sequence):
    """The ``n`` edges of a polygon, starting with the closing edge ``last -> first``.

    A read-only sequence: iterating twice yields the same edges, and
    ``reversed()`` walks them backwards.

    Raises:
        DegenerateSegmentError: When an edge joins two equal consecutive vertices
    """

    def __init__(self, points: tuple[Point, ...]):
        self._points = points
        self._segment_cls = type(points[0]).segment_cls

    def __len__(self) -> int:
        return len(self._points)

    @overload
    def __getitem__(self, index: int) -> Segment: ...

    @overload
    def __getitem__(self, index: slice) -> list[Segment]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Segment, list[Segment]]:
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        n = len(self._points)
        if not -n <= index < n:
            raise IndexError("polygon segment index out of range")
        index %= n
        return self._segment_cls(self._points[index - 1], self._points[index])

    def __repr__(self) -> str:
        return f"PolygonSegments({len(self)} edges)"


class Polygon:
    """Ordered vertices; the edge from the last vertex back to the first is implicit.

    Args:
        points: At least one point, all of the same domain

    Raises:
        EmptyPolygonError: If no points are given
        TypeError: If points from different domains are mixed
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Point]):
        points = tuple(points)
        if not points:
            raise EmptyPolygonError("Polygon must have at least one point")
        if not isinstance(points[0], Point):
            raise TypeError(f"Polygon vertices must be points, got {points[0]!r}")
        point_type = points[0].coords.coordinate_type
        for p in points:
            if not isinstance(p, Point) or p.coords.coordinate_type is not point_type:
                raise TypeError(f"All polygon points must share a domain, got {p!r}")
        self._points = points

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "Polygon":
        return cls(points)

    def points(self) -> tuple[Point, ...]:
        return self._points

    def segments(self) -> PolygonSegments:
        return PolygonSegments(self._points)

    def area(self) -> Any:
        """Signed area (shoelace formula), positive for counter-clockwise vertices."""
        kind = self._points[0].coords.coordinate_type
        area = zero(kind)
        prev = self._points[-1]
        for point in self._points:
            area = area + (prev.x * point.y - point.x * prev.y)
            prev = point
        return area / from_int(kind, 2)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._points == other._points

    __hash__ = None

    def __repr__(self) -> str:
        return f"Polygon({list(self._points)!r})"
