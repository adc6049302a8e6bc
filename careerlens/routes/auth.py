from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Header, Request
from pydantic import BaseModel

from careerlens.dependencies import get_auth_client
from careerlens.errors import ApiError, bad_request
from careerlens.middleware.auth import bearer_token, get_session, session_from_token
from careerlens.middleware.rate_limit import limiter
from careerlens.services.supabase_auth import SupabaseAuthClient
from careerlens.utils.logger import logger

router = APIRouter()


class SignInRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


@router.post("/api/auth/sign-in")
@limiter.limit("10/minute")
async def sign_in(
    request: Request,
    body: SignInRequest,
    auth_client: SupabaseAuthClient = Depends(get_auth_client),
):
    """
    Email/password sign-in against Supabase.

    Returns:
        - user: {id, email, name}
        - accessToken: Supabase access token (send as Bearer for /api/auth/session)
    """
    if not body.email or not body.password:
        raise bad_request("Email and password are required")

    try:
        result = await auth_client.sign_in_with_password(body.email, body.password)
    except httpx.HTTPError as e:
        logger.error(f"[Auth] Supabase sign-in failed: {type(e).__name__}: {e}")
        raise ApiError(502, "Authentication service unavailable")

    if result is None:
        raise ApiError(401, "Invalid email or password")

    logger.info(f"[Auth] Signed in user {result.user.id}")
    return {
        "user": result.user.to_dict(),
        "accessToken": result.access_token,
        "expiresIn": result.expires_in,
    }


@router.get("/api/auth/session")
async def read_session(request: Request, authorization: Optional[str] = Header(None)):
    """Current session, or null when unauthenticated."""
    try:
        return await get_session(request, authorization)
    except Exception as e:
        logger.error(f"[Auth] Session lookup failed: {type(e).__name__}: {e}", exc_info=True)
        raise ApiError(500, "Failed to get session")


@router.get("/profile")
async def read_profile(request: Request):
    """Session info for client-side hooks; null on any failure."""
    try:
        token = bearer_token(request.headers.get("authorization"))
        if token is None:
            return None
        return session_from_token(token, request.app.state.settings.supabase_jwt_secret)
    except Exception as e:
        logger.error(f"[Auth] Profile lookup failed: {e}")
        return None


@router.api_route("/api/auth/_log", methods=["GET", "POST", "PUT", "DELETE"])
async def auth_log(request: Request):
    """Client-side auth logging sink; accepted and ignored."""
    if request.method == "GET":
        return {"message": "Auth logging endpoint"}
    return {"message": "OK"}
