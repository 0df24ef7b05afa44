import pytest

from config.settings import TestingConfig
from src.assessment.questions import ASSESSMENT_QUESTIONS, QuestionBank, QuestionType
from src.assessment.scoring_engine import ScoringEngine
from src.assessment.session import AssessmentSession
from web.app import create_app


# Highest-scoring answer available for every question in the default bank
MAX_ANSWERS = {
    "psych_1": "structured",
    "psych_2": "5",
    "psych_3": "protection",
    "tech_1": "notify_authority",
    "tech_2": "collect_necessary",
    "tech_3": "jurisdiction",
    "will_1": "5",
    "interest_1": "5",
    "skill_1": "expert",
    "cognitive_1": "legal_precedent",
    "ability_1": "5",
    "realworld_1": "Reviewing breach notifications and advising on GDPR compliance."
}


def max_answer_for(question):
    """Best token for any question: scale max, allow-listed choice if offered, else first option."""
    if question.type is QuestionType.SCALE:
        return str(question.scale_max)
    if question.type is QuestionType.TEXT:
        return "Drafting data protection policies."
    preferred = MAX_ANSWERS.get(question.id)
    return preferred or question.options[0].value


@pytest.fixture
def bank():
    return QuestionBank(ASSESSMENT_QUESTIONS)


@pytest.fixture
def engine():
    return ScoringEngine()


@pytest.fixture
def session(bank, engine):
    return AssessmentSession(bank=bank, engine=engine)


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def max_answers():
    return dict(MAX_ANSWERS)


@pytest.fixture
def best_answer():
    return max_answer_for
