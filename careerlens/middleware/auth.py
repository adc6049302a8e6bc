from datetime import datetime, timezone
from typing import Optional

import jwt
from fastapi import Header, Request

from careerlens.config import Settings
from careerlens.utils.logger import logger


def session_from_token(token: str, jwt_secret: str) -> Optional[dict]:
    """
    Verify a Supabase access token (HS256, shared secret) and build the
    session object the frontend expects:

        {"user": {"id", "email", "name"}, "accessToken": str, "expires": iso8601}

    Returns None for expired, invalid or unverifiable tokens.
    """
    if not jwt_secret:
        logger.warning("[Auth] SUPABASE_JWT_SECRET not set; sessions cannot be verified")
        return None

    try:
        payload = jwt.decode(
            token,
            jwt_secret,
            algorithms=["HS256"],
            options={"verify_exp": True, "verify_aud": False},
        )
    except jwt.ExpiredSignatureError:
        logger.info("[Auth] Session token expired")
        return None
    except jwt.InvalidTokenError as e:
        logger.info(f"[Auth] Invalid session token: {e}")
        return None

    user_id = payload.get("sub")
    if not user_id:
        return None

    email = payload.get("email")
    metadata = payload.get("user_metadata") or {}
    expires = payload.get("exp")

    return {
        "user": {
            "id": user_id,
            "email": email,
            "name": metadata.get("full_name") or (email.split("@")[0] if email else None),
        },
        "accessToken": token,
        "expires": datetime.fromtimestamp(expires, tz=timezone.utc).isoformat() if expires else None,
    }


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


async def get_session(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> Optional[dict]:
    """
    Optional session dependency: the verified session, or None.

    Usage:
        @router.get("/endpoint")
        async def endpoint(session: Optional[dict] = Depends(get_session)):
            ...
    """
    token = bearer_token(authorization)
    if token is None:
        return None
    settings: Settings = request.app.state.settings
    return session_from_token(token, settings.supabase_jwt_secret)
