"""Conversion between exactgeom primitives and Shapely geometries.

Shapely works in double precision, so every conversion out of the exact
domain goes through ``Point.to_f64_pair``. Conversions into exactgeom take
plain coordinate pairs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from fractions import Fraction

from shapely.geometry import LineString
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from .point import ExactPoint, FloatPoint, Point
from .polygon import Polygon
from .segment import Segment

logger = logging.getLogger(__name__)

# Type aliases
Coords = list[tuple[float, float]]


def point_to_shapely(point: Point) -> ShapelyPoint:
    """Convert a point to a Shapely Point."""
    return ShapelyPoint(point.to_f64_pair())


def segment_to_shapely(segment: Segment) -> LineString:
    """Convert a segment to a two-vertex Shapely LineString."""
    return LineString([p.to_f64_pair() for p in segment.endpoints])


def polygon_to_coords(polygon: Polygon, close: bool = False) -> Coords:
    """Extract float coordinates from a polygon.

    Args:
        polygon: Polygon to convert
        close: Repeat the first vertex at the end (GeoJSON ring style)

    Returns:
        List of (x, y) tuples
    """
    coords = [p.to_f64_pair() for p in polygon.points()]
    if close:
        coords.append(coords[0])
    return coords


def polygon_to_shapely(polygon: Polygon) -> ShapelyPolygon:
    """Convert a polygon to a Shapely Polygon.

    Args:
        polygon: Polygon with at least three vertices

    Returns:
        Shapely Polygon

    Raises:
        ValueError: If the polygon has fewer than three vertices
    """
    if len(polygon) < 3:
        raise ValueError(f"Shapely polygons need at least 3 vertices, got {len(polygon)}")
    return ShapelyPolygon(polygon_to_coords(polygon))


def points_from_coords(coords: Iterable[tuple], exact: bool = True) -> list[Point]:
    """Build points from coordinate pairs.

    Float inputs are converted to exact rationals without rounding when
    ``exact`` is True, so ``0.1`` becomes ``3602879701896397/36028797018963968``.

    Args:
        coords: Iterable of (x, y) pairs (ints, floats, Fractions or Rationals)
        exact: Build ``ExactPoint``s if True, ``FloatPoint``s otherwise

    Returns:
        List of points in input order
    """
    if not exact:
        return [FloatPoint.from_pair(x, y) for x, y in coords]

    points = []
    for x, y in coords:
        if isinstance(x, float):
            x = Fraction(x)
        if isinstance(y, float):
            y = Fraction(y)
        points.append(ExactPoint.from_pair(x, y))
    logger.debug(f"Built {len(points)} exact points from coordinates")
    return points


def shapely_to_points(geometry: ShapelyPolygon | LineString, exact: bool = True) -> list[Point]:
    """Points of a Shapely polygon exterior or line string.

    The closing vertex of a polygon ring is dropped.
    """
    if isinstance(geometry, ShapelyPolygon):
        coords = list(geometry.exterior.coords)[:-1]
    else:
        coords = list(geometry.coords)
    return points_from_coords([(c[0], c[1]) for c in coords], exact=exact)
