"""Interactive authoring session: draw a subject polygon, then a clip polygon,
then inspect the clipped result.

The session owns both PolygonBuilders and turns builder errors into
ActionOutcome messages for whatever front end drives it.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .clipping import ClipResult, ClipTraversalError, clip
from .geometry.primitives import Orientation, Point, Polygon, orientation
from .geometry.validator import (
    PolygonBuildError,
    PolygonBuilder,
    SelfIntersectionError,
    TooFewVerticesError,
    begin_polygon,
)
from .models.settings import SessionSettings

logger = logging.getLogger(__name__)


class SessionStage(Enum):
    """Which polygon is being edited."""
    SUBJECT = "subject"
    CLIP = "clip"
    RESULT = "result"


@dataclass
class ActionOutcome:
    """Outcome of one session action."""

    ok: bool
    message: str
    error_code: str | None = None
    orientation: Orientation | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"ok": self.ok, "message": self.message}
        if self.error_code:
            data["error_code"] = self.error_code
        if self.orientation:
            data["orientation"] = self.orientation.value
        return data


class AuthoringSession:
    """State of one authoring session."""

    def __init__(self, settings: SessionSettings | None = None, session_id: str | None = None):
        self.id = session_id or str(uuid.uuid4())[:8]
        self.settings = settings or SessionSettings()
        self.stage = SessionStage.SUBJECT
        self.subject = begin_polygon()
        self.clip_polygon = begin_polygon()
        self._result: ClipResult | None = None

    @property
    def status_message(self) -> str:
        messages = self.settings.messages
        if self.stage is SessionStage.SUBJECT:
            return messages.subject_prompt
        if self.stage is SessionStage.CLIP:
            return messages.clip_prompt
        return messages.result_prompt

    def _active_builder(self) -> PolygonBuilder | None:
        if self.stage is SessionStage.SUBJECT:
            return self.subject
        if self.stage is SessionStage.CLIP:
            return self.clip_polygon
        return None

    def _error_outcome(self, error: PolygonBuildError, closing: bool = False) -> ActionOutcome:
        messages = self.settings.messages
        if isinstance(error, TooFewVerticesError):
            message = messages.too_few_vertices
        elif isinstance(error, SelfIntersectionError):
            message = messages.closing_self_intersection if closing else messages.self_intersection
        else:
            message = str(error)
        return ActionOutcome(ok=False, message=message, error_code=error.code)

    def _not_editable(self) -> ActionOutcome:
        return ActionOutcome(
            ok=False, message=self.settings.messages.not_editable, error_code="not_editable"
        )

    def add_point(self, point: Point) -> ActionOutcome:
        """Add a point to the open contour of the polygon being drawn."""
        builder = self._active_builder()
        if builder is None:
            return self._not_editable()
        try:
            builder.add_point(point)
        except PolygonBuildError as e:
            return self._error_outcome(e)
        return ActionOutcome(ok=True, message=self.status_message)

    def close_path(self) -> ActionOutcome:
        """Close the open contour and report its orientation."""
        builder = self._active_builder()
        if builder is None:
            return self._not_editable()
        try:
            contour = builder.close_path()
        except PolygonBuildError as e:
            return self._error_outcome(e, closing=True)

        winding = orientation(contour)
        messages = self.settings.messages
        prefix = (
            messages.closed_counter_clockwise
            if winding is Orientation.COUNTER_CLOCKWISE
            else messages.closed_clockwise
        )
        return ActionOutcome(
            ok=True, message=f"{prefix} {self.status_message}", orientation=winding
        )

    def advance(self) -> ActionOutcome:
        """Finish the current polygon and move on; from the result, start over."""
        builder = self._active_builder()
        if builder is None:
            self.reset()
            return ActionOutcome(ok=True, message=self.status_message)

        try:
            builder.finish()
        except PolygonBuildError as e:
            return self._error_outcome(e, closing=True)

        if self.stage is SessionStage.SUBJECT:
            self.stage = SessionStage.CLIP
            return ActionOutcome(ok=True, message=self.status_message)

        try:
            result = clip(self.subject.contours, self.clip_polygon.contours)
        except ClipTraversalError as e:
            logger.warning(f"[{self.id}] Clip failed: {e}")
            self.clip_polygon = begin_polygon()
            return ActionOutcome(
                ok=False, message=self.settings.messages.clip_failed, error_code="clip_failed"
            )

        self._result = result
        self.stage = SessionStage.RESULT
        logger.info(
            f"[{self.id}] Clipped: {result.num_intersections} intersections, "
            f"{len(result.result)} result contour(s)"
        )
        return ActionOutcome(ok=True, message=self.status_message)

    def clear(self) -> ActionOutcome:
        """Discard the polygon being drawn; from the result, start over."""
        messages = self.settings.messages
        if self.stage is SessionStage.SUBJECT:
            self.subject = begin_polygon()
            return ActionOutcome(ok=True, message=messages.subject_cleared)
        if self.stage is SessionStage.CLIP:
            self.clip_polygon = begin_polygon()
            return ActionOutcome(ok=True, message=messages.clip_cleared)
        self.reset()
        return ActionOutcome(ok=True, message=self.status_message)

    def reset(self) -> None:
        """Drop both polygons and return to drawing the subject."""
        self.stage = SessionStage.SUBJECT
        self.subject = begin_polygon()
        self.clip_polygon = begin_polygon()
        self._result = None

    @property
    def clip_result(self) -> ClipResult | None:
        """Clip result, available once both polygons are finished."""
        return self._result

    def polygons(self) -> dict[str, Polygon]:
        """Contours of both polygons as currently drawn (open contours included)."""
        return {
            "subject": [c for c in self.subject.contours if c],
            "clip": [c for c in self.clip_polygon.contours if c],
        }
