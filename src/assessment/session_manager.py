"""
In-memory registry of live assessment sessions.

Sessions live only as long as the process; nothing is written to disk.
Idle sessions are dropped once they pass the configured time-to-live.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, Optional

from .questions import QuestionBank
from .scoring_engine import ScoringEngine
from .session import AssessmentSession

logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    """No live session with the requested id"""


class SessionLimitError(ValueError):
    """Too many in-progress sessions to start another"""


class AssessmentSessionManager:
    """
    Creates and tracks assessment sessions by id.

    Each session is owned exclusively by the manager; callers look it up
    by id for every action. Only in-progress sessions count toward
    max_sessions, so finished sessions stay readable until they expire
    or are discarded.
    """

    def __init__(
        self,
        bank: Optional[QuestionBank] = None,
        engine: Optional[ScoringEngine] = None,
        max_sessions: Optional[int] = None,
        session_ttl: Optional[timedelta] = None
    ):
        self.bank = bank
        self.engine = engine
        self.max_sessions = max_sessions
        self.session_ttl = session_ttl
        self.sessions: Dict[str, AssessmentSession] = {}

    def create_session(self) -> AssessmentSession:
        """Start a new session at the first question."""
        self.expire_idle_sessions()

        if self.max_sessions is not None and self.in_progress_count >= self.max_sessions:
            raise SessionLimitError(f"Session limit reached ({self.max_sessions})")

        session = AssessmentSession(bank=self.bank, engine=self.engine)
        self.sessions[session.session_id] = session

        logger.info(f"Created assessment session {session.session_id}")
        return session

    def get_session(self, session_id: str) -> AssessmentSession:
        session = self.sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def discard_session(self, session_id: str) -> bool:
        """Drop a session; returns False if it was not live"""
        session = self.sessions.pop(session_id, None)
        if session is None:
            return False

        logger.info(f"Discarded assessment session {session_id}")
        return True

    def expire_idle_sessions(self, now: Optional[datetime] = None) -> int:
        """Drop sessions idle for longer than session_ttl; returns how many"""
        if self.session_ttl is None:
            return 0

        cutoff = (now or datetime.now()) - self.session_ttl
        expired = [
            session_id for session_id, session in self.sessions.items()
            if session.last_activity < cutoff
        ]
        for session_id in expired:
            del self.sessions[session_id]

        if expired:
            logger.info(f"Expired {len(expired)} idle assessment sessions")
        return len(expired)

    @property
    def active_count(self) -> int:
        return len(self.sessions)

    @property
    def in_progress_count(self) -> int:
        return sum(1 for session in self.sessions.values() if not session.is_completed)
