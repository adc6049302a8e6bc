"""Goal Validation Routes - legitimacy check and goal/motivation alignment"""

from fastapi import APIRouter, Depends, Request

from careerlens.dependencies import get_career_ai
from careerlens.errors import ApiError, UnhandledRouteError, bad_request
from careerlens.middleware.rate_limit import ai_rate_limit, limiter
from careerlens.schemas.career import QUIZ_ANSWER_FIELDS, GoalInputRequest, GoalValidationRequest
from careerlens.services.career_ai import CareerAIService, LegitimacyVerdict
from careerlens.services.scoring import score_from_status
from careerlens.utils.logger import get_logger

router = APIRouter(prefix="/api", tags=["Goal Validation"])
logger = get_logger("routes.goals")

INVALID_GOAL_SUGGESTION = (
    "Please enter a valid career or profession (e.g., Software Developer, Doctor, Teacher, Engineer, etc.)"
)


def invalid_goal(verdict: LegitimacyVerdict) -> ApiError:
    return bad_request("Invalid career goal", message=verdict.reason, suggestion=INVALID_GOAL_SUGGESTION)


@router.post("/validate-goal-input")
@limiter.limit(ai_rate_limit)
async def validate_goal_input(
    request: Request,
    body: GoalInputRequest,
    career_ai: CareerAIService = Depends(get_career_ai),
):
    """Reject text that is not a career before the user moves on."""
    if not body.userGoal:
        raise bad_request(
            "Missing required field: userGoal",
            message="Please provide a career goal to validate.",
        )

    try:
        verdict = await career_ai.check_goal_legitimacy(body.userGoal)
    except Exception as e:
        raise UnhandledRouteError("Failed to validate career goal", e)

    if not verdict.is_valid:
        logger.warning(f"[Goal] Invalid career goal: {verdict.reason}")
        raise invalid_goal(verdict)

    logger.info("[Goal] Career goal is valid")
    return {"success": True, "message": "Career goal is valid"}


@router.post("/validate-goal")
@limiter.limit(ai_rate_limit)
async def validate_goal(
    request: Request,
    body: GoalValidationRequest,
    career_ai: CareerAIService = Depends(get_career_ai),
):
    """
    Score how genuine a goal is against the 5-question quiz.

    Returns the model's verdict plus the derived pressure score
    (20 / 50 / 80, lower means more genuine interest).
    """
    if not body.userGoal or body.answers is None:
        raise bad_request("Missing required fields: userGoal and answers")

    for field in QUIZ_ANSWER_FIELDS:
        if not body.answers.get(field):
            logger.warning(f"[Goal] Missing quiz answer: {field}")
            raise bad_request(f"Missing required field in answers: {field}")

    try:
        verdict = await career_ai.check_goal_legitimacy(body.userGoal)
        if not verdict.is_valid:
            logger.warning(f"[Goal] Invalid career goal: {verdict.reason}")
            raise invalid_goal(verdict)

        validation_response = await career_ai.validate_goal_alignment(body.userGoal, body.answers)
    except ApiError:
        raise
    except Exception as e:
        raise UnhandledRouteError("Failed to validate goal with AI", e)

    status = validation_response.get("validationStatus")
    logger.info(f"[Goal] Validation status: {status}")
    return {
        "validationResponse": validation_response,
        "pressureScore": score_from_status(status),
    }
