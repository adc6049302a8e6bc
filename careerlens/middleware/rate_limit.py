"""Shared slowapi limiter; AI routes are limited per client IP.

Route decorators bind to the module-level ``limiter`` at import time, so
create_app() applies its Settings here through configure_rate_limits().
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from careerlens.config import Settings

limiter = Limiter(key_func=get_remote_address)

_ai_limit = Settings.model_fields["ai_rate_limit"].default


def configure_rate_limits(settings: Settings) -> Limiter:
    """Enable/disable the limiter, set the AI-route limit and clear hit counts."""
    global _ai_limit
    _ai_limit = settings.ai_rate_limit
    limiter.enabled = settings.rate_limit_enabled
    limiter.reset()
    return limiter


def ai_rate_limit() -> str:
    return _ai_limit
