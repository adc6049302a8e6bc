"""Request-scoped access to the clients built once in create_app()."""

from fastapi import Request

from careerlens.services.career_ai import CareerAIService
from careerlens.services.supabase_auth import SupabaseAuthClient


def get_career_ai(request: Request) -> CareerAIService:
    return request.app.state.career_ai


def get_auth_client(request: Request) -> SupabaseAuthClient:
    return request.app.state.auth_client
