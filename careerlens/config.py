from pydantic_settings import BaseSettings
from functools import lru_cache
import os


class Settings(BaseSettings):
    # Hosted model (Gemini via its OpenAI-compatible endpoint)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    ai_timeout_seconds: float = 30.0
    ai_temperature: float = 0.7

    # "first_last_brace" keeps the legacy extraction, "balanced" scans for a balanced span
    json_extraction: str = "first_last_brace"

    # Legacy fallback always reports "Software Engineer"; flip to echo the requested role
    deep_dive_fallback_uses_requested_role: bool = False

    # Supabase (credential sign-in + session token verification)
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_jwt_secret: str = ""
    auth_timeout_seconds: float = 10.0

    # App Settings
    app_name: str = "CareerLens"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # API Settings
    backend_host: str = "0.0.0.0"
    backend_port: int = int(os.getenv("PORT", "8000"))
    allowed_origins: str = "http://localhost:3000"

    # Rate limiting
    rate_limit_enabled: bool = True
    ai_rate_limit: str = "30/minute"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
