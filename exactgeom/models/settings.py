"""Numeric settings for the coordinate domains."""

from typing import Dict, Literal

from pydantic import BaseModel, Field


class ExactSettings(BaseModel):
    """Settings of the exact integer domain."""

    integer_bits: Literal[32, 64, 128] = Field(
        default=64, description="Signed width of raw homogeneous integers"
    )


class ApproxSettings(BaseModel):
    """Settings of the approximate float domain."""

    line_tolerance: float = Field(
        default=1e-6,
        gt=0,
        description="Line coefficients at or below this magnitude are skipped when rescaling",
    )


class GeometrySettings(BaseModel):
    """Settings used to build coordinate strategies and domains.

    Settings can be overridden at load time via JSON merge patch.
    """

    exact: ExactSettings = Field(default_factory=ExactSettings, description="Exact domain settings")
    approx: ApproxSettings = Field(default_factory=ApproxSettings, description="Float domain settings")

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "GeometrySettings":
        """Load settings from YAML string. An empty document gives the defaults."""
        import yaml
        data = yaml.safe_load(yaml_content) or {}
        return cls(**data)

    def merge_override(self, override: Dict) -> "GeometrySettings":
        """Merge override dict into these settings (JSON merge patch semantics)."""
        import json
        base = json.loads(self.model_dump_json())
        _deep_merge(base, override)
        return GeometrySettings(**base)


def _deep_merge(base: Dict, override: Dict) -> None:
    """Deep merge override into base dict (modifies base in place)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
