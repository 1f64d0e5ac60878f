"""Tests for the MCP tool functions."""

import pytest

from polyclip.server import (
    clip_polygons_tool,
    contour_orientation,
    profile_list,
    session_add_point,
    session_advance,
    session_clear,
    session_close_path,
    session_create,
    session_get,
)


async def draw(session_id, points):
    for x, y in points:
        state = await session_add_point(session_id, x, y)
        assert not state.get("isError"), state
    return await session_close_path(session_id)


class TestSessionTools:
    """Test the authoring session over MCP tools."""

    @pytest.mark.asyncio
    async def test_full_round(self):
        created = await session_create()
        session_id = created["session_id"]
        assert created["stage"] == "subject"

        closed = await draw(session_id, [(0, 0), (2, 0), (2, 2), (0, 2)])
        assert closed["outcome"]["orientation"] == "clockwise"
        await session_advance(session_id)

        await draw(session_id, [(1, 1), (3, 1), (3, 3), (1, 3)])
        advanced = await session_advance(session_id)
        assert advanced["stage"] == "result"

        state = await session_get(session_id)
        assert state["result"]["num_intersections"] == 2
        assert len(state["result"]["contours"]) == 1
        assert state["geojson"]["type"] == "FeatureCollection"

    @pytest.mark.asyncio
    async def test_refused_point_reported_as_error(self):
        session_id = (await session_create())["session_id"]
        for x, y in [(0, 0), (10, 0), (5, -5)]:
            await session_add_point(session_id, x, y)

        state = await session_add_point(session_id, 5, 5)

        assert state["isError"]
        assert state["outcome"]["error_code"] == "self_intersection"
        assert len(state["polygons"]["subject"][0]) == 3

    @pytest.mark.asyncio
    async def test_clear(self):
        session_id = (await session_create())["session_id"]
        await draw(session_id, [(0, 0), (2, 0), (2, 2)])

        state = await session_clear(session_id)

        assert state["polygons"]["subject"] == []

    @pytest.mark.asyncio
    async def test_leftovers_hidden_by_settings(self):
        created = await session_create(settings_override={"include_leftovers": False})
        session_id = created["session_id"]
        await draw(session_id, [(0, 0), (2, 0), (2, 2), (0, 2)])
        await session_advance(session_id)
        await draw(session_id, [(1, 1), (3, 1), (3, 3), (1, 3)])
        await session_advance(session_id)

        state = await session_get(session_id, include_geojson=False)

        assert "leftover_subject" not in state["result"]
        assert "geojson" not in state

    @pytest.mark.asyncio
    async def test_clip_failure_reported_as_error(self):
        session_id = (await session_create())["session_id"]
        await draw(session_id, [(0, 0), (4, 0), (4, 4), (0, 4)])
        await session_advance(session_id)
        await draw(session_id, [(2, 2), (4, 0), (6, 2), (4, 4)])

        state = await session_advance(session_id)

        assert state["isError"]
        assert state["outcome"]["error_code"] == "clip_failed"
        assert state["stage"] == "clip"

    @pytest.mark.asyncio
    async def test_invalid_override_rejected(self):
        state = await session_create(settings_override={"output_precision": -1})
        assert state["isError"]

    @pytest.mark.asyncio
    async def test_unknown_session(self):
        state = await session_get("missing")
        assert state["isError"]

    @pytest.mark.asyncio
    async def test_unknown_profile(self):
        state = await session_create(profile="missing")
        assert state["isError"]


class TestStatelessTools:
    """Test tools that do not use sessions."""

    @pytest.mark.asyncio
    async def test_clip_polygons(self):
        response = await clip_polygons_tool(
            subject=[[[0, 0], [2, 0], [2, 2], [0, 2], [0, 0]]],
            clip=[[[1, 1], [3, 1], [3, 3], [1, 3], [1, 1]]],
        )
        assert not response.get("isError")
        assert response["metrics"]["num_intersections"] == 2
        assert response["metrics"]["result_area"] == pytest.approx(1.0)

    @pytest.mark.asyncio
    async def test_clip_polygons_rejects_open_contour(self):
        response = await clip_polygons_tool(
            subject=[[[0, 0], [2, 0], [2, 2], [0, 2]]],
            clip=[[[1, 1], [3, 1], [3, 3], [1, 3], [1, 1]]],
        )
        assert response["isError"]

    @pytest.mark.asyncio
    async def test_clip_polygons_rejects_bowtie(self):
        response = await clip_polygons_tool(
            subject=[[[0, 0], [2, 2], [2, 0], [0, 2], [0, 0]]],
            clip=[[[1, 1], [3, 1], [3, 3], [1, 3], [1, 1]]],
        )
        assert response["isError"]

    @pytest.mark.asyncio
    async def test_contour_orientation(self):
        result = await contour_orientation([[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]])
        assert result["orientation"] == "counter_clockwise"

        result = await contour_orientation([[0, 0], [1, 0], [1, 1]])
        assert result["isError"]

    @pytest.mark.asyncio
    async def test_profile_list(self):
        result = await profile_list()
        assert {p["name"] for p in result["profiles"]} >= {"default", "zh"}
