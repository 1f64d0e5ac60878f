"""Vertex table shared by the subject and clip traversals.

Records live in one list and refer to each other by index. Every record sits
on the subject chain (next_subject), the clip chain (next_clip), or, for
intersections, both.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum

from ..geometry.primitives import Crossing, Point, Polygon

# Parameter carried by original vertices. Intersections carry their position
# on the split edge instead, so they sort ahead of the edge's end vertex.
ORIGINAL_PARAM = 1.0


class ClipTraversalError(RuntimeError):
    """A chain walk did not return to its starting record."""


class VertexOrigin(Enum):
    """Where a vertex record came from."""
    SUBJECT = "subject"
    CLIP = "clip"
    INTERSECTION = "intersection"


@dataclass
class VertexRecord:
    """One entry of the vertex table."""

    point: Point
    origin: VertexOrigin
    crossing: Crossing | None = None  # Set only for intersections
    param_subject: float = ORIGINAL_PARAM
    param_clip: float = ORIGINAL_PARAM
    next_subject: int = 0
    next_clip: int = 0
    visited: bool = False

    @property
    def is_intersection(self) -> bool:
        return self.origin is VertexOrigin.INTERSECTION


@dataclass
class VertexTable:
    """Record arena plus the index ranges of the original vertices.

    Subject originals occupy [0, subject_end), clip originals
    [subject_end, clip_end); intersections are appended after clip_end.
    """

    records: list[VertexRecord] = field(default_factory=list)
    subject_end: int = 0
    clip_end: int = 0

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> VertexRecord:
        return self.records[index]

    def snapshot(self) -> list[VertexRecord]:
        """Frozen copy of the current records."""
        return copy.deepcopy(self.records)

    def chain(self, start: int, *, subject: bool) -> list[int]:
        """Indices along one circular chain, starting at `start`."""
        indices = [start]
        current = self._next(start, subject)
        while current != start:
            if len(indices) > len(self.records):
                raise ClipTraversalError(f"Chain from record {start} does not close")
            indices.append(current)
            current = self._next(current, subject)
        return indices

    def _next(self, index: int, subject: bool) -> int:
        record = self.records[index]
        return record.next_subject if subject else record.next_clip


def _append_polygon(table: VertexTable, polygon: Polygon, origin: VertexOrigin) -> None:
    for contour in polygon:
        points = contour[:-1]
        head = len(table.records)
        for i, point in enumerate(points):
            next_index = len(table.records) + 1 if i < len(points) - 1 else head
            record = VertexRecord(point=point, origin=origin)
            if origin is VertexOrigin.SUBJECT:
                record.next_subject = next_index
            else:
                record.next_clip = next_index
            table.records.append(record)


def build_vertex_table(subject: Polygon, clip: Polygon) -> VertexTable:
    """Build the initial table from two finished polygons.

    Args:
        subject: Closed contours of the polygon being clipped
        clip: Closed contours of the clipping polygon

    Returns:
        VertexTable with one record per original vertex and each contour
        linked into a circular chain
    """
    table = VertexTable()
    _append_polygon(table, subject, VertexOrigin.SUBJECT)
    table.subject_end = len(table.records)
    _append_polygon(table, clip, VertexOrigin.CLIP)
    table.clip_end = len(table.records)
    return table
