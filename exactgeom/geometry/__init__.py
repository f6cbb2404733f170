"""Planar geometry primitives over exact and float coordinate domains."""

from .coordinates import (
    DEFAULT_INTEGER_BITS,
    DEFAULT_LINE_TOLERANCE,
    UNIT,
    CoordinateStrategy,
    FloatCoordinates,
    IntegerCoordinates,
    Unit,
)
from .domain import Domain, build_domain
from .hull import convex_hull
from .interop import (
    point_to_shapely,
    points_from_coords,
    polygon_to_coords,
    polygon_to_shapely,
    segment_to_shapely,
    shapely_to_points,
)
from .line import ExactLine, FloatLine, IntersectionKind, Line, LineIntersection
from .point import ExactPoint, FloatPoint, Ordering, Point
from .polygon import Polygon, PolygonSegments
from .segment import ExactSegment, FloatSegment, Segment, SegmentIntersection

__all__ = [
    # Coordinate strategies
    "CoordinateStrategy",
    "IntegerCoordinates",
    "FloatCoordinates",
    "Unit",
    "UNIT",
    "DEFAULT_INTEGER_BITS",
    "DEFAULT_LINE_TOLERANCE",
    # Primitives
    "Point",
    "ExactPoint",
    "FloatPoint",
    "Ordering",
    "Line",
    "ExactLine",
    "FloatLine",
    "LineIntersection",
    "IntersectionKind",
    "Segment",
    "ExactSegment",
    "FloatSegment",
    "SegmentIntersection",
    "Polygon",
    "PolygonSegments",
    # Configured domains
    "Domain",
    "build_domain",
    # Algorithms
    "convex_hull",
    # Shapely interop
    "point_to_shapely",
    "segment_to_shapely",
    "polygon_to_shapely",
    "polygon_to_coords",
    "points_from_coords",
    "shapely_to_points",
]
