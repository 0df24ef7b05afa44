"""
Readiness Report Builder

Turns scored results into the content of the readiness report:
- Headline verdict and message
- Score interpretations
- Career path fit
- Skill gap roadmap
- Learning journey and alternative paths
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
import logging

from .scoring_engine import AssessmentResults, Recommendation

logger = logging.getLogger(__name__)


ROLE_TITLE = "Cyber Law Specialist"

ROLE_OVERVIEW = {
    "title": ROLE_TITLE,
    "summary": (
        "Navigate the intersection of law and technology, ensuring organizations comply with "
        "evolving cyber regulations while protecting digital rights and assets."
    ),
    "responsibilities": [
        "Cybersecurity legal framework compliance",
        "Data protection and privacy law advisory",
        "Digital contract and e-commerce law",
        "Cybercrime legislation and incident response"
    ],
    "associated_roles": [
        "Cyber Law Specialist / Advisor",
        "Information Security Legal Advisor",
        "Data Privacy Lawyer",
        "Compliance and Cyber Regulators",
        "E-commerce Legal Consultant"
    ],
    "success_traits": [
        {"label": "Analytical Thinking", "description": "Structure complex legal problems"},
        {"label": "Ethical Orientation", "description": "Strong rule-based decision making"},
        {"label": "Legal-Tech Fluency", "description": "Bridge law and technology"},
        {"label": "Communication Skills", "description": "Negotiate in legal contexts"},
        {"label": "Attention to Detail", "description": "Precise compliance work"},
        {"label": "Adaptability", "description": "Navigate evolving regulations"}
    ],
    "estimated_minutes": "20-30"
}

RECOMMENDATION_MESSAGES = {
    Recommendation.YES: (
        "Excellent alignment! You show strong potential for a cyber law career.",
        "Your analytical profile and ethical orientation make you well-suited for this field."
    ),
    Recommendation.MAYBE: (
        "Good potential with targeted development needed.",
        "Focus on building technical knowledge and legal reasoning skills."
    ),
    Recommendation.NO: (
        "Consider alternative paths that better match your profile.",
        "Your skills may be better suited for related roles in compliance or policy."
    )
}

# (threshold, label) pairs, highest first
PSYCHOMETRIC_INTERPRETATIONS = [
    (80, "Strong alignment"),
    (50, "Moderate fit"),
    (0, "Potential mismatch")
]

TECHNICAL_INTERPRETATIONS = [
    (80, "Ready for advanced training"),
    (50, "Needs targeted upskilling"),
    (0, "Foundational building needed")
]

WISCAR_LABELS = {
    "will": "Will",
    "interest": "Interest",
    "skill": "Skill",
    "cognitive": "Cognitive",
    "ability": "Ability",
    "real_world": "Real-World Alignment"
}

# Career path -> (score source, high threshold, medium threshold)
CAREER_PATHS = [
    {
        "title": "Cyber Law Specialist",
        "description": "Legal governance in cyber operations",
        "source": "overall",
        "thresholds": (80, 60)
    },
    {
        "title": "Data Privacy Lawyer",
        "description": "Advise on privacy rights and legal compliance",
        "source": "psychometric",
        "thresholds": (75, 60)
    },
    {
        "title": "Cybersecurity Legal Advisor",
        "description": "Bridge legal and security frameworks",
        "source": "technical",
        "thresholds": (75, 60)
    },
    {
        "title": "E-commerce Legal Consultant",
        "description": "Support online business compliance",
        "source": "real_world",
        "thresholds": (70, 50)
    },
    {
        "title": "Compliance Officer (Tech Sector)",
        "description": "Monitor and enforce cyber policies",
        "source": "skill",
        "thresholds": (60, 40)
    }
]

LEARNING_JOURNEY = [
    {
        "level": "Beginner",
        "courses": ["Intro to Cyber Law", "Data Protection Acts", "Legal Research Methods"],
        "duration": "2-3 months"
    },
    {
        "level": "Intermediate",
        "courses": ["GDPR Deep Dive", "Breach Reporting Protocols", "Cybercrime Investigation"],
        "duration": "3-4 months"
    },
    {
        "level": "Job-Ready",
        "courses": ["Compliance Strategy", "Cyber Policy Drafting", "Jurisdiction Case Studies"],
        "duration": "2-3 months"
    }
]

ALTERNATIVE_PATHS = [
    "Compliance Administrator",
    "Policy Researcher",
    "IT Governance Associate",
    "Legal Technology Specialist"
]


@dataclass
class CareerPathFit:
    """How well the candidate fits one career path"""
    title: str
    description: str
    fit: str  # High, Medium, Low

    def to_dict(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "fit": self.fit
        }


@dataclass
class SkillGap:
    """Current vs. target level for one skill"""
    skill: str
    target: int
    current: int
    suggestion: str

    @property
    def gap(self) -> int:
        return max(0, self.target - self.current)

    @property
    def target_met(self) -> bool:
        return self.current >= self.target

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skill": self.skill,
            "target": self.target,
            "current": self.current,
            "gap": self.gap,
            "target_met": self.target_met,
            "suggestion": self.suggestion
        }


@dataclass
class ReadinessReport:
    """Everything shown on the readiness report"""
    results: AssessmentResults
    headline: str
    message: str
    interpretations: Dict[str, str]
    career_paths: List[CareerPathFit]
    skill_gaps: List[SkillGap]
    learning_journey: List[Dict[str, Any]] = field(default_factory=list)
    alternative_paths: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "role": ROLE_TITLE,
            "results": self.results.to_dict(),
            "headline": self.headline,
            "message": self.message,
            "interpretations": self.interpretations,
            "wiscar_breakdown": [
                {"dimension": key, "label": WISCAR_LABELS.get(key, key), "score": score}
                for key, score in self.results.wiscar_scores.items()
            ],
            "career_paths": [path.to_dict() for path in self.career_paths],
            "skill_gaps": [gap.to_dict() for gap in self.skill_gaps],
            "learning_journey": self.learning_journey,
            "alternative_paths": self.alternative_paths
        }


def _interpret(score: int, table: List[Tuple[int, str]]) -> str:
    for threshold, label in table:
        if score >= threshold:
            return label
    return table[-1][1]


def _fit_level(score: int, high: int, medium: int) -> str:
    if score >= high:
        return "High"
    if score >= medium:
        return "Medium"
    return "Low"


def _score_sources(results: AssessmentResults) -> Dict[str, int]:
    sources = {
        "overall": results.overall_score,
        "psychometric": results.psychometric_score,
        "technical": results.technical_score
    }
    sources.update(results.wiscar_scores)
    return sources


def build_career_paths(results: AssessmentResults) -> List[CareerPathFit]:
    """Fit level for each career path from the score it depends on"""
    sources = _score_sources(results)
    paths = []
    for path in CAREER_PATHS:
        high, medium = path["thresholds"]
        paths.append(CareerPathFit(
            title=path["title"],
            description=path["description"],
            fit=_fit_level(sources.get(path["source"], 0), high, medium)
        ))
    return paths


def build_skill_gaps(results: AssessmentResults) -> List[SkillGap]:
    """Skill roadmap with current levels estimated from section scores"""
    technical = results.technical_score
    real_world = results.wiscar_scores.get("real_world", 0)

    return [
        SkillGap(
            skill="Cybersecurity Fundamentals",
            target=85,
            current=max(20, technical - 20),
            suggestion="Take IT Security Basics course"
        ),
        SkillGap(
            skill="Cyber Law Frameworks (GDPR, etc.)",
            target=90,
            current=max(15, technical - 25),
            suggestion="Enroll in Cyber Law 101"
        ),
        SkillGap(
            skill="Analytical & Legal Reasoning",
            target=80,
            current=results.psychometric_score,
            suggestion="Practice case study analysis"
        ),
        SkillGap(
            skill="Policy Drafting & Reporting",
            target=85,
            current=max(30, real_world),
            suggestion="Practice drafting compliance docs"
        )
    ]


def build_report(results: AssessmentResults) -> ReadinessReport:
    """
    Build the readiness report for a completed assessment.

    Args:
        results: Scored assessment results

    Returns:
        ReadinessReport ready for rendering
    """
    recommendation = results.recommendation
    headline, message = RECOMMENDATION_MESSAGES[recommendation]

    interpretations = {
        "psychometric": _interpret(results.psychometric_score, PSYCHOMETRIC_INTERPRETATIONS),
        "technical": _interpret(results.technical_score, TECHNICAL_INTERPRETATIONS),
        "wiscar": "Six-dimensional career readiness"
    }

    alternative_paths = list(ALTERNATIVE_PATHS) if recommendation is Recommendation.NO else []

    logger.debug(f"Built report for assessment {results.assessment_id} ({recommendation.value})")

    return ReadinessReport(
        results=results,
        headline=headline,
        message=message,
        interpretations=interpretations,
        career_paths=build_career_paths(results),
        skill_gaps=build_skill_gaps(results),
        learning_journey=[dict(level, courses=list(level["courses"])) for level in LEARNING_JOURNEY],
        alternative_paths=alternative_paths
    )
