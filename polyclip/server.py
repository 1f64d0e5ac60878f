"""FastMCP server for polygon authoring and clipping.

Exposes the authoring session (draw subject, draw clip polygon, view result)
and a stateless clip tool over MCP.
"""

import logging
import sys
from typing import Any

import structlog
from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from .export.geojson import clip_result_to_geojson
from .geometry.primitives import orientation
from .geometry.validator import PolygonBuildError
from .models.polygon import ClipRequest
from .pipeline import clip_polygons
from .session import ActionOutcome, AuthoringSession
from .settings.loader import list_profiles, load_settings

# Configure logging to stderr (required for MCP stdio transport)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
# Route structlog through the stdlib handler above so it stays off stdout
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.processors.KeyValueRenderer(key_order=["event"]),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
)
logger = logging.getLogger(__name__)

mcp = FastMCP(
    name="polyclip_mcp",
    instructions="Draw two polygons point by point and clip one by the other "
    "(Weiler-Atherton). Use session_create, then session_add_point / "
    "session_close_path / session_advance for each polygon, and session_get "
    "for the result. clip_polygons clips two complete polygons in one call.",
)

# In-memory storage for sessions
_sessions: dict[str, AuthoringSession] = {}


def _session_not_found(session_id: str) -> dict[str, Any]:
    return {
        "isError": True,
        "error": f"Session {session_id} not found",
        "suggestion": "Use session_create to start a session",
    }


def _session_state(session: AuthoringSession, outcome: ActionOutcome | None = None) -> dict[str, Any]:
    state: dict[str, Any] = {
        "session_id": session.id,
        "stage": session.stage.value,
        "status": session.status_message,
        "polygons": session.polygons(),
    }
    if outcome is not None:
        state["outcome"] = outcome.to_dict()
        if not outcome.ok:
            state["isError"] = True
            state["error"] = outcome.message
    return state


@mcp.tool(
    annotations={
        "readOnlyHint": False,  # Creates a session
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": False,
    }
)
async def session_create(
    profile: str = "default",
    settings_override: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Start a new authoring session.

    Args:
        profile: Settings profile name (see profile_list), default 'default'
        settings_override: Optional overrides merged into the profile

    Returns:
        Dict with session_id, stage, status and (empty) polygons
    """
    try:
        settings = load_settings(profile, settings_override)
    except (FileNotFoundError, ValidationError) as e:
        return {
            "isError": True,
            "error": str(e),
            "suggestion": "Use profile_list to get valid profile names",
        }

    session = AuthoringSession(settings)
    _sessions[session.id] = session
    logger.info(f"Created session {session.id} with profile '{profile}'")
    return _session_state(session)


@mcp.tool(
    annotations={
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": False,
    }
)
async def session_add_point(session_id: str, x: float, y: float) -> dict[str, Any]:
    """Add a point to the contour being drawn.

    The point is refused if the new edge would cross an existing edge.

    Args:
        session_id: Session ID from session_create
        x: X coordinate
        y: Y coordinate

    Returns:
        Session state with the outcome of the action
    """
    session = _sessions.get(session_id)
    if session is None:
        return _session_not_found(session_id)
    return _session_state(session, session.add_point((x, y)))


@mcp.tool(
    annotations={
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": False,
    }
)
async def session_close_path(session_id: str) -> dict[str, Any]:
    """Close the contour being drawn and report its orientation.

    Args:
        session_id: Session ID from session_create

    Returns:
        Session state with the outcome (including orientation on success)
    """
    session = _sessions.get(session_id)
    if session is None:
        return _session_not_found(session_id)
    return _session_state(session, session.close_path())


@mcp.tool(
    annotations={
        "readOnlyHint": False,
        "destructiveHint": False,
        "idempotentHint": False,
        "openWorldHint": False,
    }
)
async def session_advance(session_id: str) -> dict[str, Any]:
    """Finish the current polygon and move to the next stage.

    subject -> clip -> result; from result, starts a new round.

    Args:
        session_id: Session ID from session_create

    Returns:
        Session state with the outcome of the action
    """
    session = _sessions.get(session_id)
    if session is None:
        return _session_not_found(session_id)
    return _session_state(session, session.advance())


@mcp.tool(
    annotations={
        "readOnlyHint": False,
        "destructiveHint": True,  # Discards drawn contours
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def session_clear(session_id: str) -> dict[str, Any]:
    """Clear the polygon being drawn (from result: start a new round).

    Args:
        session_id: Session ID from session_create

    Returns:
        Session state with the outcome of the action
    """
    session = _sessions.get(session_id)
    if session is None:
        return _session_not_found(session_id)
    return _session_state(session, session.clear())


@mcp.tool(
    annotations={
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def session_get(session_id: str, include_geojson: bool = True) -> dict[str, Any]:
    """Get session state, with the clip result once both polygons are finished.

    Args:
        session_id: Session ID from session_create
        include_geojson: Include the result as a GeoJSON FeatureCollection

    Returns:
        Session state; in the result stage also 'result' and optionally 'geojson'
    """
    session = _sessions.get(session_id)
    if session is None:
        return _session_not_found(session_id)

    state = _session_state(session)
    result = session.clip_result
    if result is not None:
        settings = session.settings
        state["result"] = {
            "num_intersections": result.num_intersections,
            "contours": result.result,
        }
        if settings.include_leftovers:
            state["result"]["leftover_subject"] = result.leftover_subject
            state["result"]["leftover_clip"] = result.leftover_clip
        if include_geojson:
            state["geojson"] = clip_result_to_geojson(
                result,
                precision=settings.output_precision,
                include_leftovers=settings.include_leftovers,
            )
    return state


@mcp.tool(
    name="clip_polygons",
    annotations={
        "readOnlyHint": True,  # Pure computation
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def clip_polygons_tool(
    subject: list[list[list[float]]],
    clip: list[list[list[float]]],
    validate_input: bool = True,
    precision: int | None = None,
) -> dict[str, Any]:
    """Clip a subject polygon by a clip polygon.

    Args:
        subject: Subject contours, each a closed list of [x, y] points
        clip: Clip contours, each a closed list of [x, y] points
        validate_input: Reject self-intersecting input (default True)
        precision: Optional decimal places for output coordinates

    Returns:
        Dict with result, leftover_subject, leftover_clip and metrics
    """
    try:
        request = ClipRequest(
            subject={"contours": subject},
            clip={"contours": clip},
            validate_input=validate_input,
            precision=precision,
        )
        response = clip_polygons(request)
        return response.model_dump()

    except (ValidationError, PolygonBuildError) as e:
        return {
            "isError": True,
            "error": str(e),
            "suggestion": "Each contour must be closed (first point == last point), "
            "have at least 3 vertices, and cross no other edge",
        }
    except Exception as e:
        logger.exception("Clip failed")
        return {
            "isError": True,
            "error": str(e),
            "suggestion": "Check that both polygons are simple",
        }


@mcp.tool(
    annotations={
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def contour_orientation(contour: list[list[float]]) -> dict[str, Any]:
    """Report whether a closed contour is clockwise or counter-clockwise.

    Uses screen coordinates (y axis pointing down).

    Args:
        contour: Closed list of [x, y] points

    Returns:
        Dict with orientation
    """
    if len(contour) < 4 or contour[0] != contour[-1]:
        return {
            "isError": True,
            "error": "Contour must be closed and have at least 3 vertices",
            "suggestion": "Repeat the first point at the end",
        }
    points = [(float(x), float(y)) for x, y in contour]
    return {"orientation": orientation(points).value}


@mcp.tool(
    annotations={
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }
)
async def profile_list() -> dict[str, Any]:
    """List available settings profiles.

    Returns:
        Dict with profiles (name, description)
    """
    return {"profiles": list_profiles()}


def run_server():
    """Run the MCP server (stdio transport)."""
    mcp.run()


def main():
    """Main entry point."""
    run_server()


if __name__ == "__main__":
    main()
