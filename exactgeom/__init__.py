"""exactgeom - Exact-arithmetic planar geometry primitives.

This package provides:
- Points, lines, segments and polygons over an exact rational domain and a
  float domain, sharing one algorithmic core
- Robust orientation, intersection and convex hull algorithms
- Shapely interop and GeoJSON export

Typical use:
    from exactgeom import ExactPoint, convex_hull
    hull = convex_hull([ExactPoint.from_pair(x, y) for x, y in coords])
"""

__version__ = "0.1.0"

from .errors import (
    CoordinateOverflowError,
    DegenerateSegmentError,
    EmptyPolygonError,
    GeometryError,
    GeometryInvariantError,
    IncomparableCoordinatesError,
    UnexpectedIntersectionError,
    UnitArithmeticError,
    ZeroDivisorError,
)
from .geometry import (
    Domain,
    ExactLine,
    ExactPoint,
    ExactSegment,
    FloatCoordinates,
    FloatLine,
    FloatPoint,
    FloatSegment,
    IntegerCoordinates,
    IntersectionKind,
    Line,
    LineIntersection,
    Ordering,
    Point,
    Polygon,
    PolygonSegments,
    Segment,
    SegmentIntersection,
    Unit,
    build_domain,
    convex_hull,
)
from .numeric import NonZero, Rational, Sign

__all__ = [
    "__version__",
    # Numbers
    "Rational",
    "NonZero",
    "Sign",
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
    "convex_hull",
    # Coordinate strategies
    "IntegerCoordinates",
    "FloatCoordinates",
    "Unit",
    "Domain",
    "build_domain",
    # Errors
    "GeometryError",
    "ZeroDivisorError",
    "CoordinateOverflowError",
    "UnitArithmeticError",
    "IncomparableCoordinatesError",
    "EmptyPolygonError",
    "UnexpectedIntersectionError",
    "GeometryInvariantError",
    "DegenerateSegmentError",
]
