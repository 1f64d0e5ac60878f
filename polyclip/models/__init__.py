"""Pydantic models for polyclip."""

from .polygon import ClipMetrics, ClipRequest, ClipResponse, PolygonInput
from .settings import SessionSettings, StatusMessages

__all__ = [
    # Polygons
    "PolygonInput",
    "ClipRequest",
    "ClipResponse",
    "ClipMetrics",
    # Settings
    "SessionSettings",
    "StatusMessages",
]
