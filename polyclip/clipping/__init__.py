"""Weiler-Atherton clipping engine."""

from .engine import ClipResult, clip
from .intersections import insert_intersections
from .table import (
    ClipTraversalError,
    VertexOrigin,
    VertexRecord,
    VertexTable,
    build_vertex_table,
)
from .walker import walk_leftover_clip, walk_leftover_subject, walk_result

__all__ = [
    # Engine
    "clip",
    "ClipResult",
    # Vertex table
    "build_vertex_table",
    "insert_intersections",
    "VertexTable",
    "VertexRecord",
    "VertexOrigin",
    "ClipTraversalError",
    # Traversals
    "walk_result",
    "walk_leftover_subject",
    "walk_leftover_clip",
]
