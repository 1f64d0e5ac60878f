"""Polygon payloads and clip request/response models."""

from pydantic import BaseModel, Field, field_validator


class PolygonInput(BaseModel):
    """Polygon given as a list of closed contours.

    Each contour is a list of [x, y] pairs whose first and last entries are
    equal.
    """

    contours: list[list[tuple[float, float]]] = Field(
        default_factory=list,
        description="Closed contours, each a list of [x, y] coordinates",
    )

    @field_validator("contours")
    @classmethod
    def validate_contours(
        cls, v: list[list[tuple[float, float]]]
    ) -> list[list[tuple[float, float]]]:
        """Validate that every contour is closed and has at least 3 distinct points."""
        for i, contour in enumerate(v):
            if len(contour) < 4:
                raise ValueError(
                    f"Contour {i} must have at least 4 points (3 vertices plus closing point)"
                )
            if contour[0] != contour[-1]:
                raise ValueError(f"Contour {i} must be closed (first point == last point)")
        return v

    @property
    def num_vertices(self) -> int:
        """Vertex count, not counting closing points."""
        return sum(len(c) - 1 for c in self.contours)


class ClipRequest(BaseModel):
    """Request to clip a subject polygon by a clip polygon."""

    subject: PolygonInput = Field(..., description="Polygon being clipped")
    clip: PolygonInput = Field(..., description="Polygon defining the clipping region")
    validate_input: bool = Field(
        default=True,
        description="Reject self-intersecting or mutually crossing contours before clipping",
    )
    precision: int | None = Field(
        default=None, ge=0, le=15, description="Decimal places for output coordinates"
    )


class ClipMetrics(BaseModel):
    """Summary numbers for one clip operation."""

    num_intersections: int = Field(..., ge=0, description="Subject x clip edge intersections")
    num_records: int = Field(..., ge=0, description="Vertex table size after insertion")
    result_contours: int = Field(..., ge=0)
    leftover_subject_contours: int = Field(..., ge=0)
    leftover_clip_contours: int = Field(..., ge=0)
    result_area: float = Field(..., ge=0, description="Area enclosed by the result contours")
    elapsed_ms: float = Field(..., ge=0)


class ClipResponse(BaseModel):
    """Clipped contours plus leftovers of both inputs."""

    result: list[list[tuple[float, float]]] = Field(default_factory=list)
    leftover_subject: list[list[tuple[float, float]]] = Field(default_factory=list)
    leftover_clip: list[list[tuple[float, float]]] = Field(default_factory=list)
    metrics: ClipMetrics
