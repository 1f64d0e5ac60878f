"""Settings profile loading."""

from .loader import get_profile_path, list_profiles, load_settings

__all__ = ["get_profile_path", "list_profiles", "load_settings"]
