"""GeoJSON export utilities for geometry primitives.

Every feature is validated through the pydantic GeoJSON models before it
is returned, so the output is always well-formed GeoJSON.
"""

from collections.abc import Iterable
from typing import Any, Optional

from ..geometry.interop import polygon_to_coords
from ..geometry.point import Point
from ..geometry.polygon import Polygon
from ..geometry.segment import Segment
from ..models.geojson import (
    GeoJSONFeature,
    GeoJSONFeatureCollection,
    GeoJSONLineString,
    GeoJSONPoint,
    GeoJSONPolygon,
)


def _feature(geometry: Any, properties: dict[str, Any] | None) -> dict[str, Any]:
    feature = GeoJSONFeature(geometry=geometry, properties=properties or {})
    return feature.model_dump(mode="json")


def point_to_geojson(point: Point, properties: dict[str, Any] | None = None) -> dict[str, Any]:
    """Convert a point to a GeoJSON Point feature.

    Args:
        point: Point of either domain
        properties: Optional feature properties

    Returns:
        GeoJSON Feature dict
    """
    return _feature(GeoJSONPoint(coordinates=point.to_f64_pair()), properties)


def segment_to_geojson(segment: Segment, properties: dict[str, Any] | None = None) -> dict[str, Any]:
    """Convert a segment to a GeoJSON LineString feature."""
    coords = [p.to_f64_pair() for p in segment.endpoints]
    return _feature(GeoJSONLineString(coordinates=coords), properties)


def polygon_to_geojson(polygon: Polygon, properties: dict[str, Any] | None = None) -> dict[str, Any]:
    """Convert a polygon to a GeoJSON feature.

    Polygons with fewer than three vertices have no valid GeoJSON ring: a
    single vertex is exported as a Point and two vertices as a LineString.

    Args:
        polygon: Polygon to export
        properties: Optional feature properties

    Returns:
        GeoJSON Feature dict
    """
    coords = polygon_to_coords(polygon)
    if len(coords) == 1:
        geometry = GeoJSONPoint(coordinates=coords[0])
    elif len(coords) == 2:
        geometry = GeoJSONLineString(coordinates=coords)
    else:
        # GeoJSON rings are closed
        geometry = GeoJSONPolygon(coordinates=[coords + [coords[0]]])
    return _feature(geometry, properties)


def hull_to_feature_collection(
    points: Iterable[Point],
    hull: Optional[Polygon],
    include_points: bool = True,
) -> dict[str, Any]:
    """Export input points and their convex hull as a FeatureCollection.

    Args:
        points: Input points of the hull computation
        hull: Hull polygon, or None for a degenerate input
        include_points: Add one Point feature per input point

    Returns:
        GeoJSON FeatureCollection dict
    """
    features = []

    if hull is not None:
        features.append(polygon_to_geojson(hull, {
            "kind": "hull",
            "vertices": len(hull),
            "area": float(hull.area()),
        }))

    count = 0
    for point in points:
        count += 1
        if include_points:
            features.append(point_to_geojson(point, {
                "kind": "input",
                "on_hull": hull is not None and point in hull.points(),
            }))

    collection = GeoJSONFeatureCollection(
        features=features,
        properties={
            "point_count": count,
            "hull_vertices": len(hull) if hull is not None else 0,
        },
    )
    return collection.model_dump(mode="json")
