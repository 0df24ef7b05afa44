"""
Assessment Session

Walks a single user through the question bank one question at a time.
The session owns the answer map and the current position, and hands an
immutable AssessmentResults to its consumer when the last question is
confirmed.
"""

import uuid
import logging
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional

from .questions import Question, QuestionBank, get_question_bank
from .scoring_engine import AssessmentResults, ScoringEngine, get_scoring_engine

logger = logging.getLogger(__name__)


class SessionError(ValueError):
    """Raised when an operation does not apply to the session"""


class SessionState(Enum):
    """Where the session is in its lifecycle"""
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class Navigation(Enum):
    """Outcome of an advance/retreat request"""
    MOVED = "moved"
    BLOCKED = "blocked"
    COMPLETED = "completed"
    EXITED = "exited"


@dataclass(frozen=True)
class QuestionView:
    """What the presentation layer needs to render the current question"""
    question: Question
    answer: Optional[str]
    index: int
    total: int
    progress: float
    section: str
    can_proceed: bool

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.total - 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question": self.question.to_dict(),
            "answer": self.answer,
            "index": self.index,
            "number": self.index + 1,
            "total": self.total,
            "progress": round(self.progress, 1),
            "section": self.section,
            "can_proceed": self.can_proceed,
            "is_first": self.is_first,
            "is_last": self.is_last
        }


class AssessmentSession:
    """
    State machine for one pass through the assessment.

    States are "at question i" (0 <= i < N) and "completed". Only
    `advance()` past an answered last question completes the session;
    `restart()` returns to the first question from anywhere.

    Example:
        session = AssessmentSession(on_complete=show_report, on_exit=show_landing)
        session.answer("psych_1", "structured")
        session.advance()
    """

    def __init__(
        self,
        bank: Optional[QuestionBank] = None,
        engine: Optional[ScoringEngine] = None,
        on_complete: Optional[Callable[[AssessmentResults], None]] = None,
        on_exit: Optional[Callable[[], None]] = None,
        session_id: Optional[str] = None
    ):
        self.bank = bank if bank is not None else get_question_bank()
        if len(self.bank) == 0:
            raise ValueError("Question bank is empty")

        self.engine = engine if engine is not None else get_scoring_engine()
        self.on_complete = on_complete
        self.on_exit = on_exit
        self.session_id = session_id or str(uuid.uuid4())

        self.answers: Dict[str, str] = {}
        self.position = 0
        self.state = SessionState.IN_PROGRESS
        self.results: Optional[AssessmentResults] = None
        self.created_at = datetime.now()
        self.last_activity = self.created_at

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def total_questions(self) -> int:
        return len(self.bank)

    @property
    def current_question(self) -> Question:
        return self.bank[self.position]

    @property
    def current_section(self) -> str:
        return self.current_question.section

    @property
    def is_completed(self) -> bool:
        return self.state is SessionState.COMPLETED

    @property
    def can_proceed(self) -> bool:
        """True when the current question has a non-empty answer"""
        if self.is_completed:
            return False
        return bool(self.answers.get(self.current_question.id))

    @property
    def progress(self) -> float:
        """Percentage through the bank, counting the current question"""
        if self.is_completed:
            return 100.0
        return (self.position + 1) / self.total_questions * 100

    def current_view(self) -> QuestionView:
        question = self.current_question
        return QuestionView(
            question=question,
            answer=self.answers.get(question.id),
            index=self.position,
            total=self.total_questions,
            progress=self.progress,
            section=question.section,
            can_proceed=self.can_proceed
        )

    # =========================================================================
    # Transitions
    # =========================================================================

    def answer(self, question_id: str, token: Any) -> None:
        """Record (or replace) the answer for a question"""
        if self.is_completed:
            raise SessionError("Assessment already completed; restart to answer again")
        if question_id not in self.bank:
            raise SessionError(f"Unknown question: {question_id}")

        self.answers[question_id] = token if isinstance(token, str) else str(token)
        self._touch()

    def advance(self) -> Navigation:
        """Move to the next question, or finish after the last one"""
        if not self.can_proceed:
            return Navigation.BLOCKED

        self._touch()

        if self.position < self.total_questions - 1:
            self.position += 1
            return Navigation.MOVED

        results = self.engine.compute_results(self.answers, self.bank)
        self.results = replace(results, assessment_id=str(uuid.uuid4()), completed_at=datetime.now())
        self.state = SessionState.COMPLETED
        # Results keep their own snapshot of the answers
        self.answers = {}
        logger.info(
            f"Session {self.session_id} completed: score {self.results.overall_score}, "
            f"recommendation {self.results.recommendation.value}"
        )

        if self.on_complete is not None:
            self.on_complete(self.results)
        return Navigation.COMPLETED

    def retreat(self) -> Navigation:
        """Go back one question, or leave the assessment from the first one"""
        if self.is_completed:
            return Navigation.BLOCKED

        self._touch()

        if self.position > 0:
            self.position -= 1
            return Navigation.MOVED

        if self.on_exit is not None:
            self.on_exit()
        return Navigation.EXITED

    def restart(self) -> None:
        """Discard answers and results and start over at the first question"""
        self.answers = {}
        self.position = 0
        self.results = None
        self.state = SessionState.IN_PROGRESS
        self._touch()
        logger.info(f"Session {self.session_id} restarted")

    def _touch(self) -> None:
        self.last_activity = datetime.now()

    def _answer_source(self):
        if self.results is not None:
            return self.results.answers
        return self.answers

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        data = {
            "session_id": self.session_id,
            "state": self.state.value,
            "position": self.position,
            "total_questions": self.total_questions,
            "answered_count": sum(1 for value in self._answer_source().values() if value),
            "progress": round(self.progress, 1),
            "created_at": self.created_at.isoformat(),
            "last_activity": self.last_activity.isoformat()
        }
        if self.is_completed:
            data["results"] = self.results.to_dict()
        else:
            data["current"] = self.current_view().to_dict()
        return data
