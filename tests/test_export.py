"""Tests for Shapely interop and GeoJSON export."""

import pytest
from pydantic import ValidationError

from exactgeom.export.geojson import (
    hull_to_feature_collection,
    point_to_geojson,
    polygon_to_geojson,
    segment_to_geojson,
)
from exactgeom.geometry.hull import convex_hull
from exactgeom.geometry.interop import (
    point_to_shapely,
    points_from_coords,
    polygon_to_coords,
    polygon_to_shapely,
    segment_to_shapely,
    shapely_to_points,
)
from exactgeom.geometry.point import ExactPoint, FloatPoint
from exactgeom.geometry.polygon import Polygon
from exactgeom.geometry.segment import ExactSegment
from exactgeom.models.geojson import GeoJSONPolygon
from exactgeom.numeric import Rational


def square() -> Polygon:
    return Polygon(points_from_coords([(0, 0), (2, 0), (2, 2), (0, 2)]))


class TestInterop:
    """Test conversions to and from Shapely."""

    def test_points_from_coords_exact(self):
        points = points_from_coords([(1, 2), (0.5, 0.25)])
        assert all(isinstance(p, ExactPoint) for p in points)
        assert points[1].x == Rational(1, 2)
        assert points[1].y == Rational(1, 4)

    def test_points_from_coords_float(self):
        points = points_from_coords([(1, 2)], exact=False)
        assert isinstance(points[0], FloatPoint)
        assert points[0].raw == (1.0, 2.0, 1.0)

    def test_point_to_shapely(self):
        p = point_to_shapely(ExactPoint.from_pair(Rational(1, 2), 3))
        assert (p.x, p.y) == (0.5, 3.0)

    def test_segment_to_shapely(self):
        line = segment_to_shapely(ExactSegment((0, 0), (3, 4)))
        assert line.length == pytest.approx(5.0)

    def test_polygon_coords(self):
        assert polygon_to_coords(square()) == [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]
        assert polygon_to_coords(square(), close=True)[-1] == (0.0, 0.0)

    def test_polygon_to_shapely_area(self):
        polygon = square()
        assert polygon_to_shapely(polygon).area == float(polygon.area())

    def test_polygon_to_shapely_needs_three_vertices(self):
        with pytest.raises(ValueError):
            polygon_to_shapely(Polygon(points_from_coords([(0, 0), (1, 1)])))

    def test_shapely_round_trip(self):
        shape = polygon_to_shapely(square())
        assert Polygon(shapely_to_points(shape)) == square()


class TestGeoJSONExport:
    """Test GeoJSON feature export."""

    def test_point_feature(self):
        feature = point_to_geojson(ExactPoint.from_pair(Rational(1, 4), 2), {"id": "p1"})
        assert feature == {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [0.25, 2.0]},
            "properties": {"id": "p1"},
        }

    def test_segment_feature(self):
        feature = segment_to_geojson(ExactSegment((0, 0), (1, 1)))
        assert feature["geometry"] == {"type": "LineString", "coordinates": [[0.0, 0.0], [1.0, 1.0]]}
        assert feature["properties"] == {}

    def test_polygon_ring_closed(self):
        feature = polygon_to_geojson(square())
        ring = feature["geometry"]["coordinates"][0]
        assert feature["geometry"]["type"] == "Polygon"
        assert len(ring) == 5
        assert ring[0] == ring[-1]

    def test_small_polygons(self):
        one = polygon_to_geojson(Polygon(points_from_coords([(1, 1)])))
        two = polygon_to_geojson(Polygon(points_from_coords([(0, 0), (1, 1)])))
        assert one["geometry"]["type"] == "Point"
        assert two["geometry"]["type"] == "LineString"

    def test_open_ring_rejected(self):
        with pytest.raises(ValidationError):
            GeoJSONPolygon(coordinates=[[(0, 0), (1, 0), (1, 1), (0, 1)]])

    def test_hull_feature_collection(self):
        points = points_from_coords([(0, 0), (2, 0), (2, 2), (0, 2), (1, 1)])
        hull = convex_hull(points)
        collection = hull_to_feature_collection(points, hull)

        assert collection["type"] == "FeatureCollection"
        assert collection["properties"] == {"point_count": 5, "hull_vertices": 4}
        hull_feature = collection["features"][0]
        assert hull_feature["properties"]["kind"] == "hull"
        assert hull_feature["properties"]["area"] == 4.0
        inputs = collection["features"][1:]
        assert len(inputs) == 5
        assert [f["properties"]["on_hull"] for f in inputs] == [True, True, True, True, False]

    def test_degenerate_hull_collection(self):
        points = points_from_coords([(3, 3)])
        collection = hull_to_feature_collection(points, convex_hull(points), include_points=False)
        assert collection["features"] == []
        assert collection["properties"] == {"point_count": 1, "hull_vertices": 0}
