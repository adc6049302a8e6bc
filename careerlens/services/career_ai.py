"""Career AI Service - the five AI call sites behind the onboarding screens"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from careerlens.schemas.career import (
    DEEP_DIVE_SHAPE,
    GOAL_ALIGNMENT_SHAPE,
    GOAL_LEGITIMACY_SHAPE,
    SKILL_ANALYSIS_SHAPE,
    SKILL_QUESTIONS_SHAPE,
)
from careerlens.services import fallbacks
from careerlens.services.prompts import PromptRequest, render_prompt
from careerlens.services.question_builder import build_questions
from careerlens.services.structured_prompt import StructuredPromptInvoker
from careerlens.utils.logger import get_logger

logger = get_logger("career_ai")

MIN_GOAL_LENGTH = 3
DEFAULT_INVALID_REASON = "This does not appear to be a valid career goal."


@dataclass(frozen=True)
class LegitimacyVerdict:
    is_valid: bool
    reason: str = ""


class CareerAIService:

    def __init__(self, invoker: StructuredPromptInvoker, deep_dive_fallback_uses_requested_role: bool = False):
        self.invoker = invoker
        self.deep_dive_fallback_uses_requested_role = deep_dive_fallback_uses_requested_role

    async def generate_deep_dive(self, role: str, persona_context: str = "") -> Dict[str, Any]:
        """Responsibilities, salary bands and career path for a role."""
        prompt = render_prompt(PromptRequest("deep_dive", {
            "role": role,
            "persona_context": persona_context or "No additional context provided.",
        }))

        fallback = fallbacks.deep_dive_fallback(
            role if self.deep_dive_fallback_uses_requested_role else None
        )
        result, used_fallback = await self.invoker.invoke_with_fallback(prompt, DEEP_DIVE_SHAPE, fallback)

        if used_fallback and result["role"] != role:
            logger.warning(f"[DeepDive] Fallback profile is for '{result['role']}', requested '{role}'")
        return result

    async def generate_skill_questions(
        self,
        role_id: str,
        role_name: str,
        domain_id: Optional[str] = None,
    ) -> List[Dict[str, str]]:
        """
        Ten yes/no questions gauging a beginner's footing in a role.

        Every failure (missing key, model error, unusable output) falls back to
        the role-specific default set, not the generic "default" set.
        """
        logger.info(f"[Skills] Generating questions for role_id={role_id}, domain_id={domain_id}")
        prompt = render_prompt(PromptRequest("skill_questions", {"role_name": role_name}))

        fallback = {"questions": fallbacks.questions_fallback(role_id, role_name)}
        result, used_fallback = await self.invoker.invoke_with_fallback(prompt, SKILL_QUESTIONS_SHAPE, fallback)
        if used_fallback:
            return result["questions"]

        raw = result["questions"]
        questions = build_questions(raw) if isinstance(raw, list) else []
        if not questions:
            logger.warning(f"[Skills] Model returned no usable questions for {role_name}, using defaults")
            return fallback["questions"]

        logger.info(f"[Skills] Built {len(questions)} questions for {role_name}")
        return questions

    async def analyze_skills(
        self,
        role_name: str,
        questions: List[Mapping[str, Any]],
        answers: Mapping[str, Any],
        open_response: str = "",
    ) -> Dict[str, Any]:
        """Skill level (0-4), summary, strengths and learning opportunities."""
        yes_count = sum(1 for v in answers.values() if v)
        logger.info(
            f"[Skills] Analyzing {len(questions)} questions, {len(answers)} answers ({yes_count} yes) for {role_name}"
        )

        formatted_answers = "\n".join(
            f'* "{q.get("text", "")}": {"Yes" if answers.get(q.get("id")) else "No"}'
            for q in questions
        )
        prompt = render_prompt(PromptRequest("skill_analysis", {
            "role_name": role_name,
            "formatted_answers": formatted_answers,
            "open_response": open_response or "No response provided",
        }))

        result, _ = await self.invoker.invoke_with_fallback(
            prompt, SKILL_ANALYSIS_SHAPE, fallbacks.skill_analysis_fallback()
        )
        return result

    async def check_goal_legitimacy(self, user_goal: str) -> LegitimacyVerdict:
        """Whether the text names a career at all. Short input never reaches the model."""
        trimmed = (user_goal or "").strip()

        if not trimmed:
            return LegitimacyVerdict(False, "Career goal cannot be empty.")
        if len(trimmed) < MIN_GOAL_LENGTH:
            return LegitimacyVerdict(
                False, "Career goal is too short. Please provide a valid career or profession."
            )

        prompt = render_prompt(PromptRequest("goal_legitimacy", {"user_goal": trimmed}))
        result, used_fallback = await self.invoker.invoke_with_fallback(
            prompt, GOAL_LEGITIMACY_SHAPE, fallbacks.goal_legitimacy_fallback()
        )
        if used_fallback:
            logger.warning("[Goal] Legitimacy check unavailable, allowing goal through")

        if result["isValid"]:
            return LegitimacyVerdict(True)
        return LegitimacyVerdict(False, result.get("reason") or DEFAULT_INVALID_REASON)

    async def validate_goal_alignment(self, user_goal: str, answers: Mapping[str, Any]) -> Dict[str, Any]:
        """Genuine-interest versus external-pressure verdict for a goal."""
        prompt = render_prompt(PromptRequest("goal_alignment", {
            "user_goal": user_goal,
            "primary_drive": answers["primaryDrive"],
            "ten_year_vision": answers["tenYearVision"],
            "problem_solving_approach": answers["problemSolvingApproach"],
            "preferred_learning_style": answers["preferredLearningStyle"],
            "confidence_rating": answers["confidenceRating"],
        }))

        result, _ = await self.invoker.invoke_with_fallback(
            prompt, GOAL_ALIGNMENT_SHAPE, fallbacks.goal_alignment_fallback(user_goal, answers)
        )
        return result
