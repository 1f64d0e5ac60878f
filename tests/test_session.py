"""Tests for the interactive authoring session."""

import pytest

from polyclip.geometry.primitives import Orientation
from polyclip.models.settings import SessionSettings
from polyclip.session import AuthoringSession, SessionStage
from polyclip.settings.loader import load_settings


def draw(session, points, close=True):
    for p in points:
        assert session.add_point(p).ok
    if close:
        assert session.close_path().ok


@pytest.fixture
def session() -> AuthoringSession:
    return AuthoringSession(SessionSettings())


class TestStages:
    """Test moving through subject -> clip -> result."""

    def test_starts_drawing_subject(self, session):
        assert session.stage == SessionStage.SUBJECT
        assert session.status_message == session.settings.messages.subject_prompt
        assert session.clip_result is None

    def test_full_round_produces_overlap(self, session):
        draw(session, [(0, 0), (2, 0), (2, 2), (0, 2)])
        assert session.advance().ok
        assert session.stage == SessionStage.CLIP

        draw(session, [(1, 1), (3, 1), (3, 3), (1, 3)])
        assert session.advance().ok
        assert session.stage == SessionStage.RESULT

        result = session.clip_result
        assert result is not None
        assert result.num_intersections == 2
        assert len(result.result) == 1

    def test_advance_closes_open_contour(self, session):
        draw(session, [(0, 0), (2, 0), (2, 2)], close=False)
        assert session.advance().ok
        assert session.subject.contours == [[(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 0.0)]]

    def test_advance_from_result_starts_over(self, session):
        draw(session, [(0, 0), (2, 0), (2, 2)])
        session.advance()
        draw(session, [(5, 5), (6, 5), (6, 6)])
        session.advance()

        outcome = session.advance()

        assert outcome.ok
        assert session.stage == SessionStage.SUBJECT
        assert session.clip_result is None
        assert session.polygons() == {"subject": [], "clip": []}

    def test_clip_failure_reported(self, session):
        draw(session, [(0, 0), (4, 0), (4, 4), (0, 4)])
        session.advance()
        draw(session, [(2, 2), (4, 0), (6, 2), (4, 4)])

        outcome = session.advance()

        assert not outcome.ok
        assert outcome.error_code == "clip_failed"
        assert outcome.message == session.settings.messages.clip_failed
        assert session.stage == SessionStage.CLIP
        assert session.clip_result is None
        assert session.polygons()["clip"] == []

    def test_clip_polygon_redrawn_after_failure(self, session):
        draw(session, [(0, 0), (4, 0), (4, 4), (0, 4)])
        session.advance()
        draw(session, [(2, 2), (4, 0), (6, 2), (4, 4)])
        session.advance()

        draw(session, [(2, 2), (6, 2), (6, 6), (2, 6)])
        outcome = session.advance()

        assert outcome.ok
        assert session.stage == SessionStage.RESULT
        assert session.clip_result.num_intersections == 2

    def test_advance_with_too_few_points_stays(self, session):
        draw(session, [(0, 0), (2, 0)], close=False)

        outcome = session.advance()

        assert not outcome.ok
        assert outcome.error_code == "too_few_vertices"
        assert session.stage == SessionStage.SUBJECT


class TestEditing:
    """Test point and contour edits through the session."""

    def test_close_reports_orientation(self, session):
        draw(session, [(0, 0), (10, 0), (10, 10)], close=False)

        outcome = session.close_path()

        assert outcome.ok
        assert outcome.orientation == Orientation.CLOCKWISE
        assert outcome.message.startswith(session.settings.messages.closed_clockwise)

    def test_close_reports_counter_clockwise(self, session):
        draw(session, [(0, 0), (0, 10), (10, 10)], close=False)
        outcome = session.close_path()
        assert outcome.orientation == Orientation.COUNTER_CLOCKWISE

    def test_crossing_point_refused(self, session):
        draw(session, [(0, 0), (10, 0), (5, -5)], close=False)

        outcome = session.add_point((5, 5))

        assert not outcome.ok
        assert outcome.error_code == "self_intersection"
        assert outcome.message == session.settings.messages.self_intersection
        assert len(session.subject.open_contour) == 3

    def test_crossing_close_refused(self, session):
        draw(session, [(0, 0), (10, 0), (0, 10), (10, 10)], close=False)

        outcome = session.close_path()

        assert not outcome.ok
        assert outcome.message == session.settings.messages.closing_self_intersection

    def test_close_with_too_few_points(self, session):
        draw(session, [(0, 0), (1, 1)], close=False)

        outcome = session.close_path()

        assert outcome.error_code == "too_few_vertices"
        assert session.subject.open_contour == []

    def test_no_edits_in_result_stage(self, session):
        draw(session, [(0, 0), (2, 0), (2, 2)])
        session.advance()
        draw(session, [(5, 5), (6, 5), (6, 6)])
        session.advance()

        assert session.add_point((1, 1)).error_code == "not_editable"
        assert session.close_path().error_code == "not_editable"

    def test_clear_subject(self, session):
        draw(session, [(0, 0), (2, 0), (2, 2)])

        outcome = session.clear()

        assert outcome.message == session.settings.messages.subject_cleared
        assert session.polygons()["subject"] == []
        assert session.stage == SessionStage.SUBJECT

    def test_clear_clip_keeps_subject(self, session):
        draw(session, [(0, 0), (2, 0), (2, 2)])
        session.advance()
        draw(session, [(5, 5), (6, 5)], close=False)

        outcome = session.clear()

        assert outcome.message == session.settings.messages.clip_cleared
        assert session.polygons()["clip"] == []
        assert len(session.polygons()["subject"]) == 1

    def test_clear_in_result_starts_over(self, session):
        draw(session, [(0, 0), (2, 0), (2, 2)])
        session.advance()
        draw(session, [(5, 5), (6, 5), (6, 6)])
        session.advance()

        session.clear()

        assert session.stage == SessionStage.SUBJECT


class TestProfiles:
    """Test sessions configured from settings profiles."""

    def test_chinese_messages(self):
        session = AuthoringSession(load_settings("zh"))
        assert session.status_message.startswith("请输入主多边形")

        session.add_point((0, 0))
        session.add_point((1, 0))
        outcome = session.close_path()
        assert outcome.message == "已点选的点数小于3，无法构成回路！请重新输入！"
