"""Insertion of subject x clip edge intersections into the vertex table."""

from __future__ import annotations

import logging

from ..geometry.primitives import intersect
from .table import VertexOrigin, VertexRecord, VertexTable

logger = logging.getLogger(__name__)


def _splice_subject(table: VertexTable, start: int, record: VertexRecord, index: int) -> None:
    cur = start
    while table[table[cur].next_subject].param_subject < record.param_subject:
        cur = table[cur].next_subject
    record.next_subject = table[cur].next_subject
    table[cur].next_subject = index


def _splice_clip(table: VertexTable, start: int, record: VertexRecord, index: int) -> None:
    cur = start
    while table[table[cur].next_clip].param_clip < record.param_clip:
        cur = table[cur].next_clip
    record.next_clip = table[cur].next_clip
    table[cur].next_clip = index


def insert_intersections(table: VertexTable) -> int:
    """Split every subject and clip edge at their mutual intersections.

    Edges are always taken from a snapshot of the original table, so an
    edge already split by an earlier insertion is still tested whole.
    Intersections on one edge end up ordered by increasing parameter.

    Args:
        table: Table from build_vertex_table; mutated in place

    Returns:
        Number of intersection records appended
    """
    original = table.snapshot()
    inserted = 0

    for i1 in range(table.subject_end):
        item1 = original[i1]
        l1 = (item1.point, original[item1.next_subject].point)
        for i2 in range(table.subject_end, table.clip_end):
            item2 = original[i2]
            l2 = (item2.point, original[item2.next_clip].point)

            hit = intersect(l1, l2)
            if hit is None:
                continue

            record = VertexRecord(
                point=hit.point,
                origin=VertexOrigin.INTERSECTION,
                crossing=hit.crossing,
                param_subject=hit.s,
                param_clip=hit.t,
            )
            index = len(table.records)
            _splice_subject(table, i1, record, index)
            _splice_clip(table, i2, record, index)
            table.records.append(record)
            inserted += 1

            logger.debug(
                f"Intersection {index} at ({hit.point[0]:.3f}, {hit.point[1]:.3f}): "
                f"{hit.crossing.value}, s={hit.s:.3f}, t={hit.t:.3f}"
            )

    return inserted
