"""Conversions between contour lists and Shapely geometry.

Used for metrics and export; the clipping engine itself works on plain
coordinate lists.
"""

from __future__ import annotations

from shapely.geometry import LineString
from shapely.geometry import Polygon as ShapelyPolygon

from .primitives import Contour, Point, Polygon

# Type aliases
ContourGeometry = ShapelyPolygon | LineString


def is_closed(contour: Contour) -> bool:
    """Check if a contour ends where it starts and encloses an area."""
    return len(contour) >= 4 and tuple(contour[0]) == tuple(contour[-1])


def contour_to_geometry(contour: Contour) -> ContourGeometry:
    """Convert a contour to a Shapely Polygon (closed) or LineString (open).

    Args:
        contour: List of (x, y) tuples

    Returns:
        Shapely Polygon or LineString
    """
    if is_closed(contour):
        return ShapelyPolygon(contour)
    return LineString(contour)


def polygon_area(polygon: Polygon) -> float:
    """Total area enclosed by the closed contours of a polygon."""
    return sum(ShapelyPolygon(c).area for c in polygon if is_closed(c))


def round_point(point: Point, precision: int | None) -> Point:
    if precision is None:
        return (point[0], point[1])
    return (round(point[0], precision), round(point[1], precision))


def round_polygon(polygon: Polygon, precision: int | None) -> Polygon:
    """Round every coordinate to `precision` decimal places (None = unchanged)."""
    return [[round_point(p, precision) for p in contour] for contour in polygon]
