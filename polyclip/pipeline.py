"""Stateless clip pipeline.

Runs one request end to end:
1. Validate both polygons through the PolygonBuilder
2. Build the vertex table and insert intersections
3. Walk the result and leftover chains
4. Compute metrics and round the output
"""

import logging
import time
import uuid
from typing import Callable, Optional

from .clipping import clip
from .geometry.polygon_ops import polygon_area, round_polygon
from .geometry.primitives import Polygon
from .geometry.validator import polygon_from_contours
from .models.polygon import ClipMetrics, ClipRequest, ClipResponse, PolygonInput

logger = logging.getLogger(__name__)


# Progress callback type
ProgressCallback = Callable[[str, float], None]


def _as_polygon(polygon: PolygonInput, validate: bool) -> Polygon:
    contours = [[(float(x), float(y)) for x, y in c] for c in polygon.contours]
    if validate:
        return polygon_from_contours(contours)
    return contours


def clip_polygons(
    request: ClipRequest,
    progress_callback: Optional[ProgressCallback] = None,
) -> ClipResponse:
    """Clip request.subject by request.clip.

    Args:
        request: ClipRequest with both polygons and output options
        progress_callback: Optional callback for progress updates (message, percent)

    Returns:
        ClipResponse with contours and metrics

    Raises:
        PolygonBuildError: If validation is on and either polygon is not simple
    """
    job_id = str(uuid.uuid4())[:8]
    start_time = time.time()

    def report_progress(message: str, percent: float):
        if progress_callback:
            progress_callback(message, percent)
        logger.info(f"[{job_id}] {message} ({percent:.0f}%)")

    report_progress("Validating polygons...", 10)
    subject = _as_polygon(request.subject, request.validate_input)
    clip_polygon = _as_polygon(request.clip, request.validate_input)

    report_progress(
        f"Clipping {request.subject.num_vertices} x {request.clip.num_vertices} vertices...", 40
    )
    result = clip(subject, clip_polygon)

    elapsed_ms = (time.time() - start_time) * 1000.0
    metrics = ClipMetrics(
        num_intersections=result.num_intersections,
        num_records=result.num_records,
        result_contours=len(result.result),
        leftover_subject_contours=len(result.leftover_subject),
        leftover_clip_contours=len(result.leftover_clip),
        result_area=polygon_area(result.result),
        elapsed_ms=elapsed_ms,
    )
    report_progress(
        f"Done: {metrics.num_intersections} intersections, "
        f"{metrics.result_contours} result contour(s)",
        100,
    )

    return ClipResponse(
        result=round_polygon(result.result, request.precision),
        leftover_subject=round_polygon(result.leftover_subject, request.precision),
        leftover_clip=round_polygon(result.leftover_clip, request.precision),
        metrics=metrics,
    )
