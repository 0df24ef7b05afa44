"""
Cyber Law Readiness Assessment Module

Career readiness quiz with:
- Fixed, sectioned questionnaire
- Step-by-step assessment sessions
- Section, WISCAR and overall scoring
- Readiness report and recommendations
"""

from .questions import ASSESSMENT_QUESTIONS, SECTIONS, Question, QuestionBank, QuestionType, get_question_bank
from .scoring_engine import AssessmentResults, Recommendation, ScoringEngine, compute_results
from .session import AssessmentSession, Navigation, SessionError, SessionState
from .session_manager import AssessmentSessionManager, SessionLimitError, SessionNotFoundError
from .report import ReadinessReport, build_report

__all__ = [
    'ASSESSMENT_QUESTIONS', 'SECTIONS', 'Question', 'QuestionBank', 'QuestionType', 'get_question_bank',
    'AssessmentResults', 'Recommendation', 'ScoringEngine', 'compute_results',
    'AssessmentSession', 'Navigation', 'SessionError', 'SessionState',
    'AssessmentSessionManager', 'SessionLimitError', 'SessionNotFoundError',
    'ReadinessReport', 'build_report'
]
