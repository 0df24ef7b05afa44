from datetime import datetime, timedelta

import pytest

from src.assessment.session_manager import AssessmentSessionManager, SessionLimitError, SessionNotFoundError


def test_create_and_get_session():
    manager = AssessmentSessionManager()
    session = manager.create_session()

    assert manager.get_session(session.session_id) is session
    assert manager.active_count == 1


def test_sessions_are_independent():
    manager = AssessmentSessionManager()
    first = manager.create_session()
    second = manager.create_session()

    first.answer("psych_1", "structured")

    assert first.session_id != second.session_id
    assert second.answers == {}


def test_unknown_session():
    manager = AssessmentSessionManager()
    with pytest.raises(SessionNotFoundError):
        manager.get_session("missing")


def test_discard_session():
    manager = AssessmentSessionManager()
    session = manager.create_session()

    assert manager.discard_session(session.session_id) is True
    assert manager.discard_session(session.session_id) is False
    assert manager.active_count == 0


def test_session_limit():
    manager = AssessmentSessionManager(max_sessions=2)
    manager.create_session()
    manager.create_session()

    with pytest.raises(SessionLimitError):
        manager.create_session()


def test_completed_sessions_do_not_count_toward_limit(best_answer):
    manager = AssessmentSessionManager(max_sessions=2)
    for _ in range(2):
        session = manager.create_session()
        for question in session.bank:
            session.answer(question.id, best_answer(question))
            session.advance()
        assert session.is_completed

    assert manager.in_progress_count == 0
    assert manager.create_session().is_completed is False
    assert manager.active_count == 3


def test_idle_sessions_expire():
    manager = AssessmentSessionManager(session_ttl=timedelta(minutes=30))
    stale = manager.create_session()
    fresh = manager.create_session()
    stale.last_activity = datetime.now() - timedelta(hours=1)

    assert manager.expire_idle_sessions() == 1
    assert fresh.session_id in manager.sessions
    with pytest.raises(SessionNotFoundError):
        manager.get_session(stale.session_id)


def test_expired_sessions_free_capacity():
    manager = AssessmentSessionManager(max_sessions=1, session_ttl=timedelta(minutes=30))
    manager.create_session().last_activity = datetime.now() - timedelta(hours=1)

    session = manager.create_session()
    assert manager.active_count == 1
    assert manager.get_session(session.session_id) is session


def test_sessions_never_expire_without_ttl():
    manager = AssessmentSessionManager()
    manager.create_session().last_activity = datetime.now() - timedelta(days=30)
    assert manager.expire_idle_sessions() == 0
    assert manager.active_count == 1
