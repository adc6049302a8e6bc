from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from careerlens.config import Settings, get_settings
from careerlens.errors import register_exception_handlers
from careerlens.middleware.correlation import CorrelationMiddleware
from careerlens.middleware.rate_limit import configure_rate_limits
from careerlens.routes import auth, deep_dive, goals, skill_assessment
from careerlens.services.career_ai import CareerAIService
from careerlens.services.model_client import GeminiClient, ModelConfig, TextModelClient
from careerlens.services.structured_prompt import StructuredPromptInvoker, get_extractor
from careerlens.services.supabase_auth import SupabaseAuthClient
from careerlens.utils.logger import logger
from careerlens.utils.metrics import get_snapshot


def create_app(
    settings: Optional[Settings] = None,
    model_client: Optional[TextModelClient] = None,
    auth_client: Optional[SupabaseAuthClient] = None,
) -> FastAPI:
    """
    Build the application with its collaborators constructed exactly once.

    Tests pass their own model/auth clients; production builds them from settings.
    """
    settings = settings or get_settings()
    model_config = ModelConfig.from_settings(settings)
    model_client = model_client or GeminiClient(model_config)
    auth_client = auth_client or SupabaseAuthClient.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name} backend...")
        logger.info(
            f"Model: {model_config.model}, API key configured: {model_config.has_credential}, "
            f"timeout: {model_config.timeout_seconds}s, extraction: {settings.json_extraction}"
        )
        if not auth_client.configured:
            logger.warning("Supabase credentials are missing. Sign-in will be unavailable.")
        yield
        close = getattr(model_client, "close", None)
        if close is not None:
            await close()
        await auth_client.close()

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

    invoker = StructuredPromptInvoker(model_client, model_config, get_extractor(settings.json_extraction))
    app.state.settings = settings
    app.state.career_ai = CareerAIService(
        invoker,
        deep_dive_fallback_uses_requested_role=settings.deep_dive_fallback_uses_requested_role,
    )
    app.state.auth_client = auth_client
    app.state.limiter = configure_rate_limits(settings)

    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    register_exception_handlers(app)

    # CORS - Explicit origins for security
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Correlation-ID"],
    )
    app.add_middleware(CorrelationMiddleware)

    # Health check endpoint (minimal response to prevent information disclosure)
    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    @app.get("/")
    async def root():
        return {"status": "ok"}

    @app.get("/metrics")
    async def metrics():
        return get_snapshot()

    app.include_router(deep_dive.router)
    app.include_router(skill_assessment.router)
    app.include_router(goals.router)
    app.include_router(auth.router, tags=["Authentication"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "careerlens.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        reload=settings.debug
    )
