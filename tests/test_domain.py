"""Tests for primitive class families built around a configured strategy."""

import pytest

from exactgeom.errors import CoordinateOverflowError
from exactgeom.geometry.coordinates import FloatCoordinates, IntegerCoordinates
from exactgeom.geometry.domain import Domain, build_domain
from exactgeom.geometry.hull import convex_hull
from exactgeom.geometry.line import ExactLine, FloatLine
from exactgeom.geometry.point import ExactPoint, FloatPoint
from exactgeom.geometry.polygon import Polygon
from exactgeom.geometry.segment import ExactSegment, FloatSegment
from exactgeom.numeric import Rational


@pytest.fixture
def narrow() -> Domain:
    return build_domain(IntegerCoordinates(bits=16))


class TestBuildDomain:
    """Test class construction."""

    def test_exact_family(self, narrow):
        assert narrow.point.coords is narrow.coords
        assert issubclass(narrow.point, ExactPoint)
        assert issubclass(narrow.line, ExactLine)
        assert issubclass(narrow.segment, ExactSegment)
        assert narrow.line.point_cls is narrow.point
        assert narrow.segment.point_cls is narrow.point
        assert narrow.segment.line_cls is narrow.line
        assert narrow.point.segment_cls is narrow.segment

    def test_names(self, narrow):
        assert narrow.point.__name__ == "Exact16Point"
        assert build_domain(FloatCoordinates(), name="Coarse").line.__name__ == "CoarseLine"

    def test_float_family(self):
        domain = build_domain(FloatCoordinates(tolerance=0.5))
        assert issubclass(domain.point, FloatPoint)
        assert issubclass(domain.line, FloatLine)
        assert issubclass(domain.segment, FloatSegment)
        assert domain.segment.between((0.0, 0.0), (3.0, 4.0)).len() == 5.0

    def test_builtin_classes_untouched(self, narrow):
        assert ExactPoint.coords.bits == 64
        assert ExactPoint.segment_cls is ExactSegment


class TestDomainPrimitives:
    """Test that primitives of a built domain use its strategy."""

    def test_point_width(self, narrow):
        assert narrow.point.from_pair(2**15 - 1, -(2**15)).raw == (2**15 - 1, -(2**15), 1)
        with pytest.raises(CoordinateOverflowError):
            narrow.point.from_pair(2**15, 0)
        with pytest.raises(CoordinateOverflowError):
            narrow.point.from_pair(Rational(1, 2**8), Rational(1, 2**8 - 1))

    def test_line_results_use_domain(self, narrow):
        l1 = narrow.line.spanned_by((0, 0), (2, 2))
        l2 = narrow.line.spanned_by((0, 2), (2, 0))
        p = l1.intersect(l2).unwrap_point()
        assert type(p) is narrow.point
        assert p == ExactPoint.from_pair(1, 1)
        assert type(l1.closest_point_to((2, 0))) is narrow.point

    def test_segment_intersection(self, narrow):
        s1 = narrow.segment((0, 0), (4, 4))
        s2 = narrow.segment((0, 4), (4, 0))
        assert s1.intersect(s2).unwrap_point() == narrow.point.from_pair(2, 2)
        assert type(s1.to_line()) is narrow.line

    def test_polygon_segments(self, narrow):
        polygon = Polygon([narrow.point.from_pair(x, y) for x, y in [(0, 0), (2, 0), (0, 2)]])
        segments = list(polygon.segments())
        assert len(segments) == 3
        assert all(type(s) is narrow.segment for s in segments)

    def test_convex_hull(self, narrow):
        points = [narrow.point.from_pair(x, y) for x, y in [(0, 0), (3, 0), (1, 1), (3, 3), (0, 3)]]
        hull = convex_hull(points)
        assert hull.area() == 9
        assert narrow.point.from_pair(1, 1) not in hull.points()
