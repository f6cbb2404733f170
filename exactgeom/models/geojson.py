"""GeoJSON geometry and feature models."""

from typing import Any, Literal, Union

from pydantic import BaseModel, Field, field_validator


class GeoJSONPoint(BaseModel):
    """GeoJSON Point geometry."""

    type: Literal["Point"] = "Point"
    coordinates: tuple[float, float] = Field(..., description="[x, y] coordinates")


class GeoJSONLineString(BaseModel):
    """GeoJSON LineString geometry."""

    type: Literal["LineString"] = "LineString"
    coordinates: list[tuple[float, float]] = Field(
        ..., description="List of [x, y] coordinates, at least two"
    )

    @field_validator("coordinates")
    @classmethod
    def validate_length(cls, v: list[tuple[float, float]]) -> list[tuple[float, float]]:
        if len(v) < 2:
            raise ValueError("LineString must have at least 2 points")
        return v


class GeoJSONPolygon(BaseModel):
    """GeoJSON Polygon geometry.

    Coordinates are a list of linear rings (first is exterior, rest are holes).
    Each ring is a list of [x, y] coordinate pairs.
    """

    type: Literal["Polygon"] = "Polygon"
    coordinates: list[list[tuple[float, float]]] = Field(
        ..., description="List of rings, each ring is a list of [x, y] coordinates"
    )

    @field_validator("coordinates")
    @classmethod
    def validate_rings(cls, v: list[list[tuple[float, float]]]) -> list[list[tuple[float, float]]]:
        """Validate that at least one ring exists and rings are closed."""
        if not v:
            raise ValueError("Polygon must have at least one ring (exterior)")
        for ring in v:
            if len(ring) < 4:
                raise ValueError("Ring must have at least 4 points (closed polygon)")
            if ring[0] != ring[-1]:
                raise ValueError("Ring must be closed (first point == last point)")
        return v

    @property
    def exterior(self) -> list[tuple[float, float]]:
        """Get exterior ring coordinates."""
        return self.coordinates[0]


Geometry = Union[GeoJSONPoint, GeoJSONLineString, GeoJSONPolygon]


class GeoJSONFeature(BaseModel):
    """GeoJSON Feature wrapping one geometry."""

    type: Literal["Feature"] = "Feature"
    geometry: Geometry = Field(..., discriminator="type", description="Feature geometry")
    properties: dict[str, Any] = Field(default_factory=dict, description="Free-form properties")


class GeoJSONFeatureCollection(BaseModel):
    """GeoJSON FeatureCollection."""

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[GeoJSONFeature] = Field(default_factory=list, description="Member features")
    properties: dict[str, Any] = Field(
        default_factory=dict, description="Collection-level properties (non-standard, widely accepted)"
    )
