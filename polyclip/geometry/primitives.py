"""Planar primitives shared by the validator and the clipping engine.

Provides the contour orientation test and exact segment-segment intersection
with parametric position and crossing classification.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Type aliases
Point = tuple[float, float]
Segment = tuple[Point, Point]
Contour = list[Point]
Polygon = list[Contour]


class Orientation(Enum):
    """Winding of a closed contour."""
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


class Crossing(Enum):
    """Direction in which a subject edge crosses a clip edge."""
    ENTERING = "entering"
    EXITING = "exiting"


@dataclass(frozen=True)
class SegmentIntersection:
    """Hit between two segments."""

    point: Point
    s: float  # Position along the first segment, 0..1
    t: float  # Position along the second segment, 0..1
    crossing: Crossing


def orientation(contour: Contour) -> Orientation:
    """Classify the winding of a closed contour.

    Sums (x[i+1] - x[i]) * (y[i+1] + y[i]) over consecutive points. A positive
    sum is counter-clockwise with the y axis pointing down (screen space).

    Args:
        contour: Closed contour (first point repeated at the end)

    Returns:
        Orientation of the contour
    """
    total = 0.0
    for (x0, y0), (x1, y1) in zip(contour, contour[1:]):
        total += (x1 - x0) * (y1 + y0)
    return Orientation.COUNTER_CLOCKWISE if total > 0 else Orientation.CLOCKWISE


def cross(u: Point, v: Point) -> float:
    """2-D cross product u x v."""
    return u[0] * v[1] - u[1] * v[0]


def intersect(l1: Segment, l2: Segment) -> SegmentIntersection | None:
    """Intersect two segments, endpoints inclusive.

    Parallel and collinear segments never intersect: the determinant is
    compared to zero exactly.

    Args:
        l1: First segment (subject edge when clipping)
        l2: Second segment (clip edge when clipping)

    Returns:
        SegmentIntersection, or None if the segments do not meet
    """
    (ax, ay), (bx, by) = l1
    (cx, cy), (dx, dy) = l2
    dir1 = (bx - ax, by - ay)
    dir2 = (dx - cx, dy - cy)

    det = cross(dir1, dir2)
    if det == 0:
        return None

    offset = (cx - ax, cy - ay)
    s = cross(offset, dir2) / det
    t = cross(offset, dir1) / det
    if not (0.0 <= s <= 1.0 and 0.0 <= t <= 1.0):
        return None

    crossing = Crossing.EXITING if det > 0 else Crossing.ENTERING
    point = (ax + s * dir1[0], ay + s * dir1[1])
    return SegmentIntersection(point=point, s=s, t=t, crossing=crossing)
