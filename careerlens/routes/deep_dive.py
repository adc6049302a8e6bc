"""Role Deep Dive Route - AI-generated responsibilities, salary bands and career path"""

from fastapi import APIRouter, Depends, Request

from careerlens.dependencies import get_career_ai
from careerlens.errors import bad_request
from careerlens.middleware.rate_limit import ai_rate_limit, limiter
from careerlens.schemas.career import DeepDiveRequest
from careerlens.services import fallbacks
from careerlens.services.career_ai import CareerAIService
from careerlens.utils.logger import get_logger

router = APIRouter(prefix="/api", tags=["Deep Dive"])
logger = get_logger("routes.deep_dive")


@router.post("/ai-deep-dive")
@limiter.limit(ai_rate_limit)
async def ai_deep_dive(
    request: Request,
    body: DeepDiveRequest,
    career_ai: CareerAIService = Depends(get_career_ai),
):
    """Generate deep dive content for a specific role. Never fails once `role` is given."""
    if not body.role:
        logger.warning("[DeepDive] Missing role in request body")
        raise bad_request("Missing role in request body")

    logger.info(f"[DeepDive] Generating deep dive for role={body.role}")
    try:
        return await career_ai.generate_deep_dive(body.role, body.personaContext or "")
    except Exception as e:
        logger.error(f"[DeepDive] Generation failed: {e}", exc_info=True)
        return fallbacks.deep_dive_fallback(
            body.role if career_ai.deep_dive_fallback_uses_requested_role else None
        )
