"""Exception hierarchy for exactgeom.

Recoverable construction failures are reported as ``None`` by the fallible
constructors (``try_new``, ``new``, ``between``, ``convex_hull``). The
exceptions below cover direct construction with invalid values, contract
violations and internal errors.
"""


class GeometryError(Exception):
    """Base class for all exactgeom errors."""


class ZeroDivisorError(GeometryError, ZeroDivisionError):
    """A zero value was used where a non-zero divisor is required."""


class CoordinateOverflowError(GeometryError, OverflowError):
    """A raw homogeneous value does not fit the configured integer width."""

    def __init__(self, value: int, bits: int):
        self.value = value
        self.bits = bits
        super().__init__(f"Value {value} does not fit in a signed {bits}-bit integer")


class UnitArithmeticError(GeometryError, ArithmeticError):
    """An operation that is undefined for the unit divisor was attempted."""


class IncomparableCoordinatesError(GeometryError, ValueError):
    """Coordinates cannot be ordered (e.g. NaN)."""


class EmptyPolygonError(GeometryError, ValueError):
    """A polygon was constructed without points."""


class UnexpectedIntersectionError(GeometryError, ValueError):
    """An intersection result was unwrapped as the wrong kind."""


class GeometryInvariantError(GeometryError, AssertionError):
    """An internal invariant was violated. Indicates a bug, not bad input."""


class DegenerateSegmentError(GeometryError, ValueError):
    """A segment was constructed from two coincident points."""
