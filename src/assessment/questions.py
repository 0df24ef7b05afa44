"""
Cyber Law Readiness Assessment Questions

Fixed questionnaire organized by section:
1. Psychometric Evaluation
2. Technical & Aptitude Readiness
3. WISCAR framework (Will, Interest, Skill, Cognitive, Ability, Real-World)

Each question has:
- ID and section assignment
- Question type (multiple-choice, scenario, scale, text)
- Question text and optional description
- Answer options (choice questions) or scale bounds and labels (scale questions)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple


class QuestionType(Enum):
    """Answer kinds a question can take"""
    MULTIPLE_CHOICE = "multiple-choice"
    SCENARIO = "scenario"
    SCALE = "scale"
    TEXT = "text"

    @property
    def is_choice(self) -> bool:
        return self in (QuestionType.MULTIPLE_CHOICE, QuestionType.SCENARIO)


@dataclass(frozen=True)
class AnswerOption:
    """A selectable answer for a choice question"""
    value: str
    label: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "value": self.value,
            "label": self.label,
            "description": self.description
        }


@dataclass(frozen=True)
class Question:
    """A single assessment question"""
    id: str
    section: str
    type: QuestionType
    question: str
    description: Optional[str] = None
    options: Tuple[AnswerOption, ...] = ()
    scale_min: Optional[int] = None
    scale_max: Optional[int] = None
    scale_labels: Optional[Tuple[str, str]] = None  # (min label, max label)

    def option_values(self) -> List[str]:
        """Tokens accepted by a choice question"""
        return [option.value for option in self.options]

    def scale_values(self) -> List[str]:
        """Tokens accepted by a scale question, lowest first"""
        if self.scale_min is None or self.scale_max is None:
            return []
        return [str(value) for value in range(self.scale_min, self.scale_max + 1)]

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization"""
        data = {
            "id": self.id,
            "section": self.section,
            "type": self.type.value,
            "question": self.question,
            "description": self.description
        }
        if self.type.is_choice:
            data["options"] = [option.to_dict() for option in self.options]
        if self.type is QuestionType.SCALE:
            data["scale_min"] = self.scale_min
            data["scale_max"] = self.scale_max
            if self.scale_labels:
                data["scale_labels"] = {
                    "min": self.scale_labels[0],
                    "max": self.scale_labels[1]
                }
        return data


class QuestionBank:
    """
    Ordered, read-only collection of assessment questions.

    Question ids must be unique across the whole bank. Scale questions
    need both bounds and choice questions need at least one option;
    anything else is rejected at construction.
    """

    def __init__(self, questions: Sequence[Question]):
        self._questions: Tuple[Question, ...] = tuple(questions)
        self._by_id: Dict[str, Question] = {}

        for question in self._questions:
            if question.id in self._by_id:
                raise ValueError(f"Duplicate question id: {question.id}")
            self._validate_question(question)
            self._by_id[question.id] = question

    @staticmethod
    def _validate_question(question: Question) -> None:
        if question.type is QuestionType.SCALE:
            if question.scale_min is None or question.scale_max is None:
                raise ValueError(f"Scale question {question.id} needs scale_min and scale_max")
            if question.scale_max <= 0 or question.scale_min > question.scale_max:
                raise ValueError(f"Scale question {question.id} has invalid bounds")
        elif question.type.is_choice and not question.options:
            raise ValueError(f"Choice question {question.id} has no options")

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __getitem__(self, index: int) -> Question:
        return self._questions[index]

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id

    @property
    def sections(self) -> List[str]:
        """Distinct section labels in question order"""
        seen: List[str] = []
        for question in self._questions:
            if question.section not in seen:
                seen.append(question.section)
        return seen

    def get(self, question_id: str) -> Optional[Question]:
        return self._by_id.get(question_id)

    def questions_for_section(self, section: str) -> List[Question]:
        """Questions whose section label is exactly `section`"""
        return [q for q in self._questions if q.section == section]

    def to_list(self) -> List[Dict]:
        return [q.to_dict() for q in self._questions]


# Section labels in presentation order
SECTIONS = [
    "Psychometric Evaluation",
    "Technical & Aptitude Readiness",
    "WISCAR: Will (Persistence)",
    "WISCAR: Interest",
    "WISCAR: Skill Assessment",
    "WISCAR: Cognitive Readiness",
    "WISCAR: Ability to Learn",
    "WISCAR: Real-World Alignment"
]

# Assessment questions in the order they are asked
ASSESSMENT_QUESTIONS: Tuple[Question, ...] = (
    # =========================================================================
    # PSYCHOMETRIC EVALUATION
    # =========================================================================
    Question(
        id="psych_1",
        section="Psychometric Evaluation",
        type=QuestionType.MULTIPLE_CHOICE,
        question="When facing a complex legal problem, what's your natural approach?",
        description="This helps us understand your problem-solving style",
        options=(
            AnswerOption("structured", "Break it down systematically", "Analyze step-by-step"),
            AnswerOption("intuitive", "Trust my instincts first", "Go with gut feeling"),
            AnswerOption("research", "Research similar cases extensively", "Find precedents"),
            AnswerOption("collaborate", "Discuss with colleagues immediately", "Seek multiple perspectives")
        )
    ),
    Question(
        id="psych_2",
        section="Psychometric Evaluation",
        type=QuestionType.SCALE,
        question="How comfortable are you with constantly changing regulations?",
        description="Cyber law evolves rapidly with new technologies",
        scale_min=1,
        scale_max=5,
        scale_labels=("Very uncomfortable", "Thrive on change")
    ),
    Question(
        id="psych_3",
        section="Psychometric Evaluation",
        type=QuestionType.MULTIPLE_CHOICE,
        question="What motivates you most in professional work?",
        options=(
            AnswerOption("rules", "Ensuring rules are followed correctly"),
            AnswerOption("innovation", "Creating new solutions to problems"),
            AnswerOption("protection", "Protecting people's rights and privacy"),
            AnswerOption("challenge", "Solving complex technical puzzles")
        )
    ),

    # =========================================================================
    # TECHNICAL & APTITUDE READINESS
    # =========================================================================
    Question(
        id="tech_1",
        section="Technical & Aptitude Readiness",
        type=QuestionType.SCENARIO,
        question="A company suffers a data breach affecting EU citizens. What's the FIRST legal priority?",
        description="This tests your understanding of GDPR requirements",
        options=(
            AnswerOption("notify_police", "Notify local law enforcement"),
            AnswerOption("fix_breach", "Fix the security vulnerability"),
            AnswerOption("notify_authority", "Notify supervisory authority within 72 hours"),
            AnswerOption("notify_customers", "Inform all affected customers immediately")
        )
    ),
    Question(
        id="tech_2",
        section="Technical & Aptitude Readiness",
        type=QuestionType.MULTIPLE_CHOICE,
        question="Which of these best describes 'data minimization'?",
        options=(
            AnswerOption("encrypt", "Encrypting all personal data"),
            AnswerOption("collect_necessary", "Collecting only data necessary for the purpose"),
            AnswerOption("delete_old", "Deleting data after one year"),
            AnswerOption("anonymize", "Making all data anonymous")
        )
    ),
    Question(
        id="tech_3",
        section="Technical & Aptitude Readiness",
        type=QuestionType.SCENARIO,
        question="A client asks about storing customer data in the cloud. What's your primary legal concern?",
        options=(
            AnswerOption("cost", "The cost of cloud storage"),
            AnswerOption("jurisdiction", "Data jurisdiction and transfer restrictions"),
            AnswerOption("speed", "Data access speed for users"),
            AnswerOption("backup", "Backup and recovery procedures")
        )
    ),

    # =========================================================================
    # WISCAR FRAMEWORK
    # =========================================================================
    Question(
        id="will_1",
        section="WISCAR: Will (Persistence)",
        type=QuestionType.SCALE,
        question="When learning complex legal concepts, how do you typically respond to initial confusion?",
        scale_min=1,
        scale_max=5,
        scale_labels=("Give up quickly", "Persist until mastery")
    ),
    Question(
        id="interest_1",
        section="WISCAR: Interest",
        type=QuestionType.SCALE,
        question="How much do you enjoy staying updated on new technology trends?",
        scale_min=1,
        scale_max=5,
        scale_labels=("Not at all", "Extremely interested")
    ),
    Question(
        id="skill_1",
        section="WISCAR: Skill Assessment",
        type=QuestionType.MULTIPLE_CHOICE,
        question="How would you rate your current understanding of cybersecurity basics?",
        options=(
            AnswerOption("beginner", "Beginner - Basic awareness only"),
            AnswerOption("intermediate", "Intermediate - Some practical knowledge"),
            AnswerOption("advanced", "Advanced - Strong technical understanding"),
            AnswerOption("expert", "Expert - Could teach others")
        )
    ),
    Question(
        id="cognitive_1",
        section="WISCAR: Cognitive Readiness",
        type=QuestionType.SCENARIO,
        question="You're reviewing a contract with conflicting clauses about data retention. How do you resolve this?",
        options=(
            AnswerOption("legal_precedent", "Research legal precedents for similar conflicts"),
            AnswerOption("client_intent", "Determine the client's original intent"),
            AnswerOption("stricter_rule", "Apply the stricter data protection rule"),
            AnswerOption("expert_consult", "Consult with a senior legal expert")
        )
    ),
    Question(
        id="ability_1",
        section="WISCAR: Ability to Learn",
        type=QuestionType.SCALE,
        question="How quickly do you typically adapt to new legal frameworks or regulations?",
        scale_min=1,
        scale_max=5,
        scale_labels=("Very slowly", "Very quickly")
    ),
    Question(
        id="realworld_1",
        section="WISCAR: Real-World Alignment",
        type=QuestionType.TEXT,
        question="Describe how you would spend a typical day as a Cyber Law Specialist.",
        description="Help us understand your expectations vs. reality of the role"
    )
)


_default_bank: Optional[QuestionBank] = None


def get_question_bank() -> QuestionBank:
    """Get or create the default question bank"""
    global _default_bank
    if _default_bank is None:
        _default_bank = QuestionBank(ASSESSMENT_QUESTIONS)
    return _default_bank

