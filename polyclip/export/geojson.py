"""GeoJSON export utilities for clip results."""

from typing import Any

from shapely.geometry import mapping

from ..clipping import ClipResult
from ..geometry.polygon_ops import contour_to_geometry, round_polygon
from ..geometry.primitives import Polygon


def contours_to_features(
    polygon: Polygon,
    kind: str,
    precision: int | None = None,
) -> list[dict[str, Any]]:
    """Convert contours to GeoJSON features.

    Closed contours become Polygon features, open chains LineString features.

    Args:
        polygon: List of contours
        kind: Value for the 'kind' property (e.g. 'result')
        precision: Optional decimal places for coordinates

    Returns:
        List of GeoJSON Feature dicts
    """
    features = []
    for i, contour in enumerate(round_polygon(polygon, precision)):
        if len(contour) < 2:
            continue
        geometry = contour_to_geometry(contour)
        features.append({
            "type": "Feature",
            "geometry": mapping(geometry),
            "properties": {
                "kind": kind,
                "index": i,
                "closed": geometry.geom_type == "Polygon",
            },
        })
    return features


def clip_result_to_geojson(
    result: ClipResult,
    precision: int | None = None,
    include_leftovers: bool = True,
) -> dict[str, Any]:
    """Convert a clip result to a GeoJSON FeatureCollection.

    Args:
        result: ClipResult to export
        precision: Optional decimal places for coordinates
        include_leftovers: Include leftover subject/clip boundaries

    Returns:
        GeoJSON FeatureCollection dict
    """
    features = contours_to_features(result.result, "result", precision)

    if include_leftovers:
        features.extend(contours_to_features(result.leftover_subject, "leftover_subject", precision))
        features.extend(contours_to_features(result.leftover_clip, "leftover_clip", precision))

    return {
        "type": "FeatureCollection",
        "features": features,
        "properties": {
            "num_intersections": result.num_intersections,
            "result_contours": len(result.result),
        },
    }
