"""Settings loading and management."""

from .loader import (
    build_domains,
    build_strategies,
    get_settings_path,
    list_settings,
    load_settings,
    validate_settings_yaml,
)

__all__ = [
    "load_settings",
    "list_settings",
    "get_settings_path",
    "validate_settings_yaml",
    "build_strategies",
    "build_domains",
]
