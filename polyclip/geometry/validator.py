"""Incremental self-intersection validation for interactively built polygons.

A PolygonBuilder accepts points one at a time and refuses any edge that would
cross an edge already accepted, either in the contour being drawn or in an
earlier closed contour. The clipping engine assumes simple input, so every
polygon handed to it should be built through here.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from .primitives import Contour, Point, Polygon, Segment, intersect

logger = structlog.get_logger(__name__)


class PolygonBuildError(ValueError):
    """Base class for rejected polygon edits."""

    code = "polygon_build_error"


class SelfIntersectionError(PolygonBuildError):
    """New edge crosses existing geometry; the edit was rolled back."""

    code = "self_intersection"


class TooFewVerticesError(PolygonBuildError):
    """Contour closed with two points or fewer; the contour was cleared."""

    code = "too_few_vertices"


class PolygonFinishedError(PolygonBuildError):
    """Edit attempted on a polygon that was already finished."""

    code = "polygon_finished"


def _edges(contour: Sequence[Point], start: int = 0, stop: int | None = None) -> Iterable[Segment]:
    stop = len(contour) - 1 if stop is None else stop
    for i in range(start, stop):
        yield (contour[i], contour[i + 1])


class PolygonBuilder:
    """Polygon under construction: closed contours plus one open trailing contour."""

    def __init__(self) -> None:
        self._contours: Polygon = [[]]
        self._finished = False

    @property
    def contours(self) -> Polygon:
        """All contours, including the open trailing one while unfinished."""
        return self._contours

    @property
    def closed_contours(self) -> Polygon:
        if self._finished:
            return self._contours
        return self._contours[:-1]

    @property
    def open_contour(self) -> Contour:
        if self._finished:
            return []
        return self._contours[-1]

    @property
    def is_finished(self) -> bool:
        return self._finished

    def _check_editable(self) -> None:
        if self._finished:
            raise PolygonFinishedError("Polygon is already finished")

    def _last_edge_is_valid(self, closing: bool) -> bool:
        path = self._contours[-1]
        if len(path) < 2:
            return True
        new_edge = (path[-2], path[-1])

        for contour in self._contours[:-1]:
            for edge in _edges(contour):
                if intersect(edge, new_edge) is not None:
                    return False

        # The preceding edge shares an endpoint with the new one; when closing,
        # so does the first edge.
        start = 1 if closing else 0
        for edge in _edges(path, start, len(path) - 3):
            if intersect(edge, new_edge) is not None:
                return False
        return True

    def add_point(self, point: Point) -> None:
        """Append a point to the open contour.

        Args:
            point: (x, y) coordinates

        Raises:
            SelfIntersectionError: If the new edge crosses an accepted edge.
                The point is not kept.
            PolygonFinishedError: If the polygon was already finished
        """
        self._check_editable()
        path = self._contours[-1]
        path.append((float(point[0]), float(point[1])))

        if not self._last_edge_is_valid(closing=False):
            path.pop()
            logger.info("edge_rejected", contour=len(self._contours) - 1, point=point)
            raise SelfIntersectionError(
                f"Edge to {point} crosses an existing edge"
            )

    def close_path(self) -> Contour:
        """Close the open contour back to its first point.

        Returns:
            The closed contour

        Raises:
            TooFewVerticesError: If the open contour has 2 points or fewer.
                The contour is cleared.
            SelfIntersectionError: If the closing edge crosses an accepted
                edge. The contour stays open.
            PolygonFinishedError: If the polygon was already finished
        """
        self._check_editable()
        path = self._contours[-1]

        if len(path) <= 2:
            count = len(path)
            path.clear()
            logger.info("contour_cleared", contour=len(self._contours) - 1, points=count)
            raise TooFewVerticesError(
                f"Cannot close a contour with {count} point(s); at least 3 are required"
            )

        path.append(path[0])
        if not self._last_edge_is_valid(closing=True):
            path.pop()
            logger.info("closing_edge_rejected", contour=len(self._contours) - 1)
            raise SelfIntersectionError("Closing edge crosses an existing edge")

        self._contours.append([])
        logger.debug("contour_closed", contour=len(self._contours) - 2, points=len(path))
        return path

    def finish(self) -> Polygon:
        """Close any open contour and return the completed polygon.

        An empty trailing contour is not an error.

        Returns:
            List of closed contours

        Raises:
            TooFewVerticesError: See close_path
            SelfIntersectionError: See close_path
            PolygonFinishedError: If the polygon was already finished
        """
        self._check_editable()
        if self._contours[-1]:
            self.close_path()

        self._contours.pop()
        self._finished = True
        logger.info("polygon_finished", contours=len(self._contours))
        return [list(c) for c in self._contours]


def begin_polygon() -> PolygonBuilder:
    """Start a new, empty polygon."""
    return PolygonBuilder()


def polygon_from_contours(contours: Iterable[Sequence[Point]]) -> Polygon:
    """Validate closed contours by replaying them through a PolygonBuilder.

    Args:
        contours: Closed contours (first point repeated at the end)

    Returns:
        The validated polygon

    Raises:
        PolygonBuildError: If any contour is too small or crosses another edge
    """
    builder = begin_polygon()
    for contour in contours:
        points = list(contour)
        if len(points) > 1 and tuple(points[0]) == tuple(points[-1]):
            points = points[:-1]
        for point in points:
            builder.add_point(point)
        builder.close_path()
    return builder.finish()
