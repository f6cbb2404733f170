"""YAML settings loading.

Provides functions to:
- List available settings files
- Load settings from YAML files
- Merge overrides into settings
- Build coordinate strategies and primitive domains from settings
"""

from pathlib import Path

import structlog
import yaml

from ..geometry.coordinates import FloatCoordinates, IntegerCoordinates
from ..geometry.domain import Domain, build_domain
from ..models.settings import GeometrySettings

logger = structlog.get_logger(__name__)

# Settings files shipped inside the package
SETTINGS_DIR = Path(__file__).parent


def get_settings_path(name: str = "default") -> Path:
    """Get the path to a settings file.

    Args:
        name: Settings name (without .yaml extension)

    Returns:
        Path to the settings YAML file

    Raises:
        FileNotFoundError: If the settings file doesn't exist
    """
    path = SETTINGS_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Settings '{name}' not found at {path}")
    return path


def list_settings() -> list[dict[str, str]]:
    """List all available settings files.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    entries = []
    for yaml_file in SETTINGS_DIR.glob("*.yaml"):
        entries.append({
            "name": yaml_file.stem,
            "description": _extract_description(yaml_file),
        })
    return sorted(entries, key=lambda e: e["name"])


def _extract_description(yaml_path: Path) -> str:
    """Extract description from first comment line of YAML file."""
    try:
        with open(yaml_path) as f:
            first_line = f.readline().strip()
    except OSError as e:
        logger.warning("settings_description_unreadable", path=str(yaml_path), error=str(e))
        return f"Settings from {yaml_path.name}"
    if first_line.startswith("#"):
        return first_line.lstrip("#").strip()
    return f"Settings from {yaml_path.name}"


def load_settings(
    name: str = "default",
    override: dict | None = None,
) -> GeometrySettings:
    """Load settings from a YAML file with optional overrides.

    Args:
        name: Settings name (without .yaml extension)
        override: Optional dict of values to override

    Returns:
        GeometrySettings instance with merged overrides
    """
    path = get_settings_path(name)

    with open(path) as f:
        yaml_content = f.read()

    settings = GeometrySettings.from_yaml(yaml_content)

    if override:
        settings = settings.merge_override(override)
        logger.debug("settings_override_applied", name=name, keys=sorted(override))

    logger.info(
        "settings_loaded",
        name=name,
        integer_bits=settings.exact.integer_bits,
        line_tolerance=settings.approx.line_tolerance,
    )
    return settings


def validate_settings_yaml(yaml_content: str) -> tuple[bool, str | None]:
    """Validate YAML content as valid settings.

    Args:
        yaml_content: YAML string to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        GeometrySettings.from_yaml(yaml_content)
    except (yaml.YAMLError, ValueError, TypeError) as e:
        logger.warning("settings_invalid", error=str(e))
        return False, str(e)
    return True, None


def build_strategies(settings: GeometrySettings) -> tuple[IntegerCoordinates, FloatCoordinates]:
    """Exact and float coordinate strategies configured by ``settings``."""
    return IntegerCoordinates.from_settings(settings), FloatCoordinates.from_settings(settings)


def build_domains(settings: GeometrySettings) -> tuple[Domain, Domain]:
    """Exact and float primitive classes configured by ``settings``.

    Example:
        exact, approx = build_domains(load_settings(override={"exact": {"integer_bits": 32}}))
        exact.point.from_pair(2**40, 0)  # raises CoordinateOverflowError
    """
    exact_coords, float_coords = build_strategies(settings)
    exact = build_domain(exact_coords)
    approx = build_domain(float_coords)
    logger.debug("domains_built", exact=exact.point.__name__, approx=approx.point.__name__)
    return exact, approx
