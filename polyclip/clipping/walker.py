"""Traversals of a completed vertex table.

Three passes, run in order on the same table:
1. Result: loops through intersection records, following the subject chain
   after an entering crossing and the clip chain after an exiting one.
2. Leftover subject: the subject boundary outside the clip region.
3. Leftover clip: the clip boundary outside the subject region.

The visited flags set by earlier passes steer the later ones.
"""

from __future__ import annotations

from collections.abc import Callable

from ..geometry.primitives import Contour, Crossing, Polygon
from .table import ClipTraversalError, VertexOrigin, VertexRecord, VertexTable


def _next_on_result(record: VertexRecord) -> int:
    if record.origin is VertexOrigin.SUBJECT:
        return record.next_subject
    if record.origin is VertexOrigin.CLIP:
        return record.next_clip
    if record.crossing is Crossing.ENTERING:
        return record.next_subject
    return record.next_clip


def _find_unvisited(table: VertexTable, origin: VertexOrigin, start: int, stop: int) -> int | None:
    for i in range(start, stop):
        record = table[i]
        if record.origin is origin and not record.visited:
            return i
    return None


def walk_result(table: VertexTable) -> Polygon:
    """Collect the clipped region as closed contours.

    Args:
        table: Table with intersections inserted; visited flags are set

    Returns:
        One closed contour per loop through the intersections

    Raises:
        ClipTraversalError: If a loop does not return to its seed
    """
    contours: Polygon = []
    while True:
        start = _find_unvisited(table, VertexOrigin.INTERSECTION, 0, len(table))
        if start is None:
            break

        contour: Contour = []
        cur = start
        while True:
            record = table[cur]
            record.visited = True
            contour.append(record.point)
            if len(contour) > len(table):
                raise ClipTraversalError(f"Result loop from record {start} does not close")
            cur = _next_on_result(record)
            if cur == start:
                contour.append(table[start].point)
                break
        contours.append(contour)
    return contours


def _walk_leftover(
    table: VertexTable,
    origin: VertexOrigin,
    kept_crossing: Crossing,
    next_of: Callable[[VertexRecord], int],
    start: int,
    stop: int,
) -> Polygon:
    chains: Polygon = []
    while True:
        seed = _find_unvisited(table, origin, start, stop)
        if seed is None:
            break

        partial: Contour = []
        cur = seed
        steps = 0
        while True:
            record = table[cur]
            if record.is_intersection:
                is_edge = record.crossing is kept_crossing
            else:
                is_edge = not record.visited
            record.visited = True
            nxt = next_of(record)

            if is_edge:
                if not partial:
                    partial.append(record.point)
                partial.append(table[nxt].point)
            elif partial:
                chains.append(partial)
                partial = []

            steps += 1
            if steps > len(table):
                raise ClipTraversalError(f"Leftover chain from record {seed} does not close")
            cur = nxt
            if cur == seed:
                if partial:
                    chains.append(partial)
                break
    return chains


def walk_leftover_subject(table: VertexTable) -> Polygon:
    """Subject boundary pieces not consumed by the result pass.

    Closed when a whole subject contour is untouched, open otherwise.
    """
    return _walk_leftover(
        table,
        VertexOrigin.SUBJECT,
        Crossing.EXITING,
        lambda record: record.next_subject,
        0,
        table.subject_end,
    )


def walk_leftover_clip(table: VertexTable) -> Polygon:
    """Clip boundary pieces not consumed by the result pass."""
    return _walk_leftover(
        table,
        VertexOrigin.CLIP,
        Crossing.ENTERING,
        lambda record: record.next_clip,
        table.subject_end,
        table.clip_end,
    )
