"""Convex hull via Andrew's monotone chain.

The convex hull of a point set is the smallest convex polygon containing all
of the points: the shape a rubber band stretched around nails on a board
would take.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Optional

from ..errors import GeometryInvariantError, IncomparableCoordinatesError
from .point import Ordering, Point
from .polygon import Polygon

logger = logging.getLogger(__name__)


def _sort_key(point: Point) -> tuple[Any, Any]:
    x, y = point.x, point.y
    # NaN is the only value not equal to itself
    if x != x or y != y:
        raise IncomparableCoordinatesError(f"Cannot order {point!r}: coordinates are not comparable")
    return x, y


def _dedupe_sorted(points: list[Point]) -> list[Point]:
    """Drop repeated points from a sorted list (equal points are adjacent)."""
    unique = [points[0]]
    for point in points[1:]:
        if point != unique[-1]:
            unique.append(point)
    return unique


def convex_hull(points: Iterable[Point]) -> Optional[Polygon]:
    """Compute the convex hull of a set of points.

    The hull is returned in counter-clockwise order and includes every input
    point lying on its boundary (collinear points are kept). Duplicate input
    points appear once.

    Args:
        points: Points of a single domain

    Returns:
        Hull polygon, or None if fewer than two distinct points are given

    Raises:
        IncomparableCoordinatesError: If a coordinate is NaN
    """
    points = list(points)
    if len(points) <= 1:
        logger.debug(f"Convex hull of {len(points)} point(s) is undefined")
        return None

    points.sort(key=_sort_key)
    points = _dedupe_sorted(points)
    if len(points) == 1:
        logger.debug("Convex hull input has no second distinct point")
        return None

    ordering = type(points[0]).ordering

    lower = points[:2]
    upper = points[:2]

    # One sweep builds both chains
    for point in points[2:]:
        while len(lower) >= 2 and ordering(lower[-2], lower[-1], point) == Ordering.CLOCKWISE:
            lower.pop()
        lower.append(point)

        while len(upper) >= 2 and ordering(upper[-2], upper[-1], point) == Ordering.COUNTERCLOCKWISE:
            upper.pop()
        upper.append(point)

    if lower[0] != upper[0] or lower[-1] != upper[-1] or lower[0] == lower[-1]:
        raise GeometryInvariantError("Hull chains must share two distinct endpoints")

    upper.reverse()
    hull = lower + upper[1:-1]

    logger.debug(f"Convex hull: {len(points)} distinct points -> {len(hull)} vertices")
    return Polygon(hull)
