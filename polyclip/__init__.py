"""polyclip - Weiler-Atherton polygon clipping with interactive authoring.

This package provides:
- Segment intersection and orientation primitives
- An incremental builder that rejects self-intersecting contours
- The Weiler-Atherton clipping engine (result plus leftover boundaries)
- An MCP server driving a draw-subject / draw-clip / view-result session

Core functionality can be imported without MCP server dependencies:
    from polyclip import begin_polygon, clip

To get the MCP server instance:
    from polyclip import get_mcp
    mcp = get_mcp()
"""

from .clipping import ClipResult, clip
from .geometry.primitives import Crossing, Orientation, intersect, orientation
from .geometry.validator import (
    PolygonBuildError,
    PolygonBuilder,
    SelfIntersectionError,
    TooFewVerticesError,
    begin_polygon,
)

__version__ = "0.1.0"


def get_mcp():
    """Get the MCP server instance (lazy import to avoid coupling).

    Returns:
        FastMCP: The configured MCP server instance.
    """
    from .server import mcp
    return mcp


__all__ = [
    "clip",
    "ClipResult",
    "begin_polygon",
    "PolygonBuilder",
    "PolygonBuildError",
    "SelfIntersectionError",
    "TooFewVerticesError",
    "orientation",
    "Orientation",
    "intersect",
    "Crossing",
    "get_mcp",
    "__version__",
]
