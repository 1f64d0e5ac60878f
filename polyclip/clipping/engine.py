"""Weiler-Atherton clipping of one polygon by another."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..geometry.primitives import Polygon
from .intersections import insert_intersections
from .table import build_vertex_table
from .walker import walk_leftover_clip, walk_leftover_subject, walk_result

logger = logging.getLogger(__name__)


@dataclass
class ClipResult:
    """Output of a clip operation."""

    result: Polygon = field(default_factory=list)
    leftover_subject: Polygon = field(default_factory=list)
    leftover_clip: Polygon = field(default_factory=list)
    num_intersections: int = 0
    num_records: int = 0

    @property
    def is_empty(self) -> bool:
        """True if the polygons do not overlap along any edge."""
        return not self.result


def clip(subject: Polygon, clip_polygon: Polygon) -> ClipResult:
    """Clip `subject` by `clip_polygon`.

    Both inputs must be simple (see PolygonBuilder). With the y axis pointing
    up, counter-clockwise contours yield their overlap; the opposite winding
    yields the outline around both. Polygons that meet at no edge are returned
    unchanged as leftovers, whether disjoint or nested.

    Args:
        subject: Closed contours of the polygon being clipped
        clip_polygon: Closed contours of the clipping polygon

    Returns:
        ClipResult with the clipped contours and both leftover boundaries
    """
    table = build_vertex_table(subject, clip_polygon)
    num_intersections = insert_intersections(table)

    result = walk_result(table)
    leftover_subject = walk_leftover_subject(table)
    leftover_clip = walk_leftover_clip(table)

    logger.debug(
        f"Clipped {len(subject)} subject / {len(clip_polygon)} clip contour(s): "
        f"{num_intersections} intersections, {len(result)} result contour(s)"
    )

    return ClipResult(
        result=result,
        leftover_subject=leftover_subject,
        leftover_clip=leftover_clip,
        num_intersections=num_intersections,
        num_records=len(table),
    )
