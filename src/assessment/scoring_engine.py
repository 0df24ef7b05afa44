"""
Cyber Law Readiness Scoring Engine

Scores assessment answers and produces the readiness result:
- Psychometric and technical section scores (0-100)
- Six WISCAR dimension scores
- Overall readiness score and recommendation tier (Yes / Maybe / No)
"""

import math
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from .questions import Question, QuestionType, get_question_bank

logger = logging.getLogger(__name__)


class Recommendation(Enum):
    """Answer to "should you pursue cyber law?" derived from the overall score"""
    YES = "Yes"
    MAYBE = "Maybe"
    NO = "No"


# Category labels matched against question sections
PSYCHOMETRIC_CATEGORY = "Psychometric Evaluation"
TECHNICAL_CATEGORY = "Technical & Aptitude Readiness"

WISCAR_CATEGORIES = {
    "will": "WISCAR: Will",
    "interest": "WISCAR: Interest",
    "skill": "WISCAR: Skill",
    "cognitive": "WISCAR: Cognitive",
    "ability": "WISCAR: Ability",
    "real_world": "WISCAR: Real-World"
}

# Choice tokens that earn the higher choice score, regardless of question
PREFERRED_ANSWERS = frozenset({
    "structured",
    "notify_authority",
    "collect_necessary",
    "jurisdiction",
    "legal_precedent",
    "stricter_rule"
})

PREFERRED_CHOICE_SCORE = 85
OTHER_CHOICE_SCORE = 60
TEXT_ANSWER_SCORE = 70

# Recommendation thresholds on the overall score
RECOMMENDATION_THRESHOLDS = {
    80: Recommendation.YES,
    50: Recommendation.MAYBE,
    0: Recommendation.NO
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)"""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class AssessmentResults:
    """
    Complete, immutable assessment result.

    assessment_id and completed_at stay None when scoring is called
    directly; the completing session stamps them.
    """
    psychometric_score: int
    technical_score: int
    wiscar_scores: Mapping[str, int]
    overall_score: int
    recommendation: Recommendation
    confidence: int
    answers: Mapping[str, str]
    assessment_id: Optional[str] = None
    completed_at: Optional[datetime] = None

    @property
    def wiscar_average(self) -> int:
        """Mean of the six WISCAR scores, rounded"""
        if not self.wiscar_scores:
            return 0
        return round_half_up(sum(self.wiscar_scores.values()) / len(self.wiscar_scores))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "assessment_id": self.assessment_id,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "psychometric_score": self.psychometric_score,
            "technical_score": self.technical_score,
            "wiscar_scores": dict(self.wiscar_scores),
            "wiscar_average": self.wiscar_average,
            "overall_score": self.overall_score,
            "recommendation": self.recommendation.value,
            "confidence": self.confidence,
            "answers": dict(self.answers)
        }


class ScoringEngine:
    """
    Engine for scoring readiness assessments.

    Scoring is a pure function of the answers and the question list:
    no state is kept between calls and nothing is raised for missing or
    odd answers, they only lower the scores.

    Example:
        engine = ScoringEngine()

        answers = {
            "psych_1": "structured",
            "psych_2": "4",
            "tech_1": "notify_authority",
            ...
        }

        results = engine.compute_results(answers, get_question_bank())
        print(f"Overall Score: {results.overall_score}")
        print(f"Recommendation: {results.recommendation.value}")
    """

    def compute_results(
        self,
        answers: Mapping[str, str],
        questions: Optional[Iterable[Question]] = None
    ) -> AssessmentResults:
        """
        Calculate the readiness result from answers.

        Args:
            answers: Dict mapping question_id to raw answer token
            questions: Question list to score against (default bank if omitted)

        Returns:
            AssessmentResults with section, WISCAR and overall scores
        """
        question_list = list(questions) if questions is not None else list(get_question_bank())

        psychometric_score = self.section_score(answers, question_list, PSYCHOMETRIC_CATEGORY)
        technical_score = self.section_score(answers, question_list, TECHNICAL_CATEGORY)
        wiscar_scores = {
            key: self.section_score(answers, question_list, category)
            for key, category in WISCAR_CATEGORIES.items()
        }

        # Two section scores plus the WISCAR mean, halved
        wiscar_mean = sum(wiscar_scores.values()) / len(wiscar_scores)
        raw_overall = round_half_up((psychometric_score + technical_score + wiscar_mean) / 2)
        overall_score = max(0, min(100, raw_overall))

        if raw_overall != overall_score:
            logger.debug(f"Overall score {raw_overall} clamped to {overall_score}")

        recommendation = self.get_recommendation(overall_score)

        return AssessmentResults(
            psychometric_score=psychometric_score,
            technical_score=technical_score,
            wiscar_scores=MappingProxyType(wiscar_scores),
            overall_score=overall_score,
            recommendation=recommendation,
            confidence=overall_score,
            answers=MappingProxyType(dict(answers))
        )

    def section_score(
        self,
        answers: Mapping[str, str],
        questions: Iterable[Question],
        category: str
    ) -> int:
        """
        Score one category as the rounded mean of its answered questions.

        A question belongs to the category when either label contains the
        other, so "WISCAR: Will" picks up "WISCAR: Will (Persistence)".
        """
        total = 0.0
        count = 0

        for question in questions:
            if category not in question.section and question.section not in category:
                continue

            answer = answers.get(question.id)
            if not answer:
                continue

            total += self._question_score(question, answer)
            count += 1

        if count == 0:
            return 0
        return max(0, min(100, round_half_up(total / count)))

    def _question_score(self, question: Question, answer: str) -> float:
        """Points for a single answered question"""
        if question.type is QuestionType.SCALE:
            try:
                value = int(str(answer).strip())
            except ValueError:
                logger.debug(f"Unparseable scale answer for {question.id}: {answer!r}")
                return 0.0
            # Divides by scale_max rather than the range
            return value / question.scale_max * 100

        if question.type.is_choice:
            if answer in PREFERRED_ANSWERS:
                return PREFERRED_CHOICE_SCORE
            return OTHER_CHOICE_SCORE

        return TEXT_ANSWER_SCORE

    def get_recommendation(self, overall_score: float) -> Recommendation:
        """Map an overall score onto the recommendation tier"""
        for threshold, recommendation in sorted(
            RECOMMENDATION_THRESHOLDS.items(), reverse=True
        ):
            if overall_score >= threshold:
                return recommendation
        return Recommendation.NO

    def validate_answers(
        self,
        answers: Mapping[str, str],
        questions: Optional[Iterable[Question]] = None
    ) -> Dict[str, Any]:
        """
        Validate an answer set.

        Returns dict with:
        - valid: bool
        - missing_questions: list of unanswered question IDs
        - unknown_questions: list of answer keys not in the question list
        - invalid_values: list of questions with out-of-range or unknown tokens
        - completion_percentage: float
        """
        question_list = list(questions) if questions is not None else list(get_question_bank())
        known_ids = {q.id for q in question_list}

        missing = []
        invalid = []

        for question in question_list:
            answer = answers.get(question.id)
            if not answer:
                missing.append(question.id)
            elif not is_valid_answer(question, answer):
                invalid.append(question.id)

        unknown = [q_id for q_id in answers if q_id not in known_ids]

        total = len(question_list)
        answered = total - len(missing)

        return {
            "valid": not missing and not invalid and not unknown,
            "missing_questions": missing,
            "unknown_questions": unknown,
            "invalid_values": invalid,
            "completion_percentage": (answered / total * 100) if total > 0 else 0,
            "answered_count": answered,
            "total_count": total
        }


def is_valid_answer(question: Question, answer: str) -> bool:
    """Whether a raw token is acceptable for the question"""
    if question.type is QuestionType.SCALE:
        return str(answer).strip() in question.scale_values()
    if question.type.is_choice:
        return answer in question.option_values()
    return bool(str(answer).strip())


# Singleton instance
_engine: Optional[ScoringEngine] = None


def get_scoring_engine() -> ScoringEngine:
    """Get or create singleton scoring engine"""
    global _engine
    if _engine is None:
        _engine = ScoringEngine()
    return _engine


def compute_results(
    answers: Mapping[str, str],
    questions: Optional[Iterable[Question]] = None
) -> AssessmentResults:
    """Score answers with the shared engine"""
    return get_scoring_engine().compute_results(answers, questions)
