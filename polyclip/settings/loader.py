"""YAML settings profile loading.

Provides functions to:
- List available profiles
- Load a profile with optional overrides
"""

import logging
from pathlib import Path

from ..models.settings import SessionSettings

logger = logging.getLogger(__name__)

# Profiles directory (inside the package for wheel packaging)
PROFILES_DIR = Path(__file__).parent.parent / "profiles"


def get_profile_path(name: str = "default") -> Path:
    """Get the path to a settings profile.

    Args:
        name: Profile name (without .yaml extension)

    Returns:
        Path to the profile YAML file

    Raises:
        FileNotFoundError: If the profile doesn't exist
    """
    path = PROFILES_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Profile '{name}' not found at {path}")
    return path


def list_profiles() -> list[dict[str, str]]:
    """List all available profiles.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    profiles = []

    if not PROFILES_DIR.exists():
        logger.warning(f"Profiles directory not found: {PROFILES_DIR}")
        return profiles

    for yaml_file in PROFILES_DIR.glob("*.yaml"):
        profiles.append({
            "name": yaml_file.stem,
            "description": _extract_description(yaml_file),
        })

    return sorted(profiles, key=lambda p: p["name"])


def _extract_description(yaml_path: Path) -> str:
    """Extract description from first comment line of YAML file."""
    with open(yaml_path, encoding="utf-8") as f:
        first_line = f.readline().strip()
    if first_line.startswith("#"):
        return first_line.lstrip("#").strip()
    return f"Settings from {yaml_path.name}"


def load_settings(
    name: str = "default",
    override: dict | None = None,
) -> SessionSettings:
    """Load a settings profile with optional overrides.

    Args:
        name: Profile name (without .yaml extension)
        override: Optional dict of values to override

    Returns:
        SessionSettings instance with merged overrides
    """
    path = get_profile_path(name)

    with open(path, encoding="utf-8") as f:
        yaml_content = f.read()

    settings = SessionSettings.from_yaml(yaml_content)

    if override:
        settings = settings.merge_override(override)
        logger.debug(f"Applied overrides to profile '{name}'")

    return settings
