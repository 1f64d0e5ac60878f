"""Planar geometry: primitives, polygon validation, Shapely conversions."""

from .polygon_ops import contour_to_geometry, is_closed, polygon_area, round_polygon
from .primitives import (
    Contour,
    Crossing,
    Orientation,
    Point,
    Polygon,
    Segment,
    SegmentIntersection,
    intersect,
    orientation,
)
from .validator import (
    PolygonBuildError,
    PolygonBuilder,
    PolygonFinishedError,
    SelfIntersectionError,
    TooFewVerticesError,
    begin_polygon,
    polygon_from_contours,
)

__all__ = [
    # Primitives
    "Point",
    "Segment",
    "Contour",
    "Polygon",
    "Orientation",
    "Crossing",
    "SegmentIntersection",
    "orientation",
    "intersect",
    # Validation
    "PolygonBuilder",
    "begin_polygon",
    "polygon_from_contours",
    "PolygonBuildError",
    "SelfIntersectionError",
    "TooFewVerticesError",
    "PolygonFinishedError",
    # Shapely conversions
    "contour_to_geometry",
    "is_closed",
    "polygon_area",
    "round_polygon",
]
