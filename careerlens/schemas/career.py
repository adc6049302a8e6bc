"""
Request bodies for the AI routes and the expected shapes of model output.

Request fields are optional at the pydantic level so the routes can answer
missing fields with the 400 bodies the frontend already understands.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from careerlens.services.scoring import VALIDATION_STATUSES
from careerlens.services.structured_prompt import ExpectedShape


class CamelModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ========== Requests ==========
class DeepDiveRequest(CamelModel):
    role: Optional[str] = None
    personaContext: Optional[str] = None


class GenerateQuestionsRequest(CamelModel):
    roleId: Optional[str] = None
    roleName: Optional[str] = None
    domainId: Optional[str] = None


class AnalyzeSkillsRequest(CamelModel):
    roleId: Optional[str] = None
    roleName: Optional[str] = None
    domainId: Optional[str] = None
    questions: Optional[List[Dict[str, Any]]] = None
    answers: Optional[Dict[str, Any]] = None
    openResponse: Optional[str] = None


class GoalInputRequest(CamelModel):
    userGoal: Optional[str] = None


class GoalValidationRequest(CamelModel):
    userGoal: Optional[str] = None
    answers: Optional[Dict[str, Any]] = None


QUIZ_ANSWER_FIELDS = (
    "primaryDrive",
    "tenYearVision",
    "problemSolvingApproach",
    "preferredLearningStyle",
    "confidenceRating",
)

QUESTION_CATEGORIES = frozenset({"technical", "soft", "experience", "education"})
QUESTION_DIFFICULTIES = frozenset({"beginner", "intermediate", "advanced"})


# ========== Model output shapes ==========
DEEP_DIVE_SHAPE = ExpectedShape(
    name="deep_dive",
    required_fields=(
        "role",
        "description",
        "dailyResponsibilities",
        "salaryRange",
        "careerPath",
        "requiredSkills",
        "education",
        "jobMarket",
    ),
)

SKILL_QUESTIONS_SHAPE = ExpectedShape(
    name="skill_questions",
    required_fields=("questions",),
    enum_fields={"category": QUESTION_CATEGORIES, "difficulty": QUESTION_DIFFICULTIES},
)

SKILL_ANALYSIS_SHAPE = ExpectedShape(
    name="skill_analysis",
    required_fields=("skillLevel", "analysisSummary", "strengths", "learningOpportunities"),
)

GOAL_LEGITIMACY_SHAPE = ExpectedShape(
    name="goal_legitimacy",
    required_fields=("isValid",),
)

GOAL_ALIGNMENT_SHAPE = ExpectedShape(
    name="goal_alignment",
    required_fields=("validationStatus", "validationSummary", "actionableInsights"),
    enum_fields={"validationStatus": VALIDATION_STATUSES},
)
