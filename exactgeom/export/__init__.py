"""Export utilities for geometry primitives."""

from .geojson import (
    hull_to_feature_collection,
    point_to_geojson,
    polygon_to_geojson,
    segment_to_geojson,
)

__all__ = [
    "point_to_geojson",
    "segment_to_geojson",
    "polygon_to_geojson",
    "hull_to_feature_collection",
]
