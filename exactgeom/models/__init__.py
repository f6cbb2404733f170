"""Pydantic models for exactgeom."""

from .geojson import (
    GeoJSONFeature,
    GeoJSONFeatureCollection,
    GeoJSONLineString,
    GeoJSONPoint,
    GeoJSONPolygon,
)
from .settings import ApproxSettings, ExactSettings, GeometrySettings

__all__ = [
    # Settings
    "GeometrySettings",
    "ExactSettings",
    "ApproxSettings",
    # GeoJSON
    "GeoJSONPoint",
    "GeoJSONLineString",
    "GeoJSONPolygon",
    "GeoJSONFeature",
    "GeoJSONFeatureCollection",
]
