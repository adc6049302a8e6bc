"""Skill Assessment Routes - question generation and answer analysis"""

from fastapi import APIRouter, Depends, Request

from careerlens.dependencies import get_career_ai
from careerlens.errors import bad_request
from careerlens.middleware.rate_limit import ai_rate_limit, limiter
from careerlens.schemas.career import AnalyzeSkillsRequest, GenerateQuestionsRequest
from careerlens.services import fallbacks
from careerlens.services.career_ai import CareerAIService
from careerlens.utils.logger import get_logger

router = APIRouter(prefix="/api/ai-skill-assessment", tags=["Skill Assessment"])
logger = get_logger("routes.skill_assessment")


@router.post("/generate-questions")
@limiter.limit(ai_rate_limit)
async def generate_questions(
    request: Request,
    body: GenerateQuestionsRequest,
    career_ai: CareerAIService = Depends(get_career_ai),
):
    """Ten role-specific yes/no questions, tagged by category and difficulty."""
    if not body.roleId or not body.roleName:
        logger.warning("[Skills] Missing roleId/roleName")
        raise bad_request("Missing required fields: roleId, roleName")

    try:
        questions = await career_ai.generate_skill_questions(body.roleId, body.roleName, body.domainId)
    except Exception as e:
        logger.error(f"[Skills] Question generation failed: {e}", exc_info=True)
        questions = fallbacks.questions_fallback(body.roleId, body.roleName)
    return {"questions": questions}


@router.post("/analyze-skills")
@limiter.limit(ai_rate_limit)
async def analyze_skills(
    request: Request,
    body: AnalyzeSkillsRequest,
    career_ai: CareerAIService = Depends(get_career_ai),
):
    """Skill level 0-4 with strengths and learning opportunities."""
    missing = {
        "roleId": not body.roleId,
        "roleName": not body.roleName,
        "questions": body.questions is None,
        "answers": body.answers is None,
    }
    if any(missing.values()):
        logger.warning(f"[Skills] Missing fields: {[k for k, v in missing.items() if v]}")
        raise bad_request("Missing required fields: roleId, roleName, questions, answers")

    try:
        return await career_ai.analyze_skills(
            role_name=body.roleName,
            questions=body.questions,
            answers=body.answers,
            open_response=body.openResponse or "",
        )
    except Exception as e:
        logger.error(f"[Skills] Analysis failed: {e}", exc_info=True)
        return fallbacks.skill_analysis_fallback()
