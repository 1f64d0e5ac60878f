"""Export utilities for clip results."""

from .geojson import clip_result_to_geojson, contours_to_features

__all__ = [
    "clip_result_to_geojson",
    "contours_to_features",
]
