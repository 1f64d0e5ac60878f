"""Authoring session settings, loadable from YAML profiles."""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class StatusMessages(BaseModel):
    """User-facing texts for the authoring session."""

    subject_prompt: str = Field(
        default="Draw the subject polygon. Close a contour to finish it, advance when done, clear to restart.",
        description="Shown while the subject polygon is being drawn",
    )
    clip_prompt: str = Field(
        default="Draw the clip polygon. Close a contour to finish it, advance when done, clear to restart.",
        description="Shown while the clip polygon is being drawn",
    )
    result_prompt: str = Field(
        default="Showing the result. Advance to start over.",
        description="Shown once both polygons are finished",
    )
    closed_clockwise: str = Field(default="Contour closed (clockwise).")
    closed_counter_clockwise: str = Field(default="Contour closed (counter-clockwise).")
    self_intersection: str = Field(
        default="The new edge would cross an existing edge. Pick another point."
    )
    closing_self_intersection: str = Field(
        default="Cannot close here: the closing edge would cross an existing edge."
    )
    too_few_vertices: str = Field(
        default="A contour needs at least 3 points. The contour was cleared, start it again."
    )
    subject_cleared: str = Field(default="Subject polygon cleared.")
    clip_cleared: str = Field(default="Clip polygon cleared.")
    not_editable: str = Field(default="Nothing to edit while the result is shown.")
    clip_failed: str = Field(
        default="These polygons could not be clipped. The clip polygon was cleared, draw it again."
    )


class SessionSettings(BaseModel):
    """Settings for an authoring session.

    Settings can be overridden at session creation via JSON merge patch.
    """

    messages: StatusMessages = Field(default_factory=StatusMessages)
    output_precision: Optional[int] = Field(
        default=None, ge=0, le=15, description="Decimal places for exported coordinates"
    )
    include_leftovers: bool = Field(
        default=True, description="Include leftover boundaries in session results"
    )

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "SessionSettings":
        """Load settings from YAML string."""
        import yaml
        data = yaml.safe_load(yaml_content) or {}
        return cls(**data)

    def merge_override(self, override: Dict) -> "SessionSettings":
        """Return a copy with override merged in; nested dicts merge key by key."""
        data = self.model_dump(mode="json")
        _deep_merge(data, override)
        return SessionSettings(**data)


def _deep_merge(base: Dict, override: Dict) -> None:
    """Deep merge override into base dict (modifies base in place)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
