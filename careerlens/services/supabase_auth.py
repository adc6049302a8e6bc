"""Supabase auth REST client used for email/password sign-in."""

from dataclasses import dataclass
from typing import Optional

import httpx

from careerlens.config import Settings
from careerlens.utils.logger import get_logger

logger = get_logger("auth")


@dataclass(frozen=True)
class AuthUser:
    id: str
    email: Optional[str]
    name: Optional[str]

    def to_dict(self) -> dict:
        return {"id": self.id, "email": self.email, "name": self.name}


@dataclass(frozen=True)
class SignInResult:
    user: AuthUser
    access_token: str
    expires_in: Optional[int] = None


class SupabaseAuthClient:
    """
    Built once from the project URL + anon key and handed to the routes.

    sign_in_with_password returns None for rejected credentials and when the
    client is not configured; transport failures propagate.
    """

    def __init__(self, url: str, anon_key: str, timeout_seconds: float = 10.0,
                 http_client: Optional[httpx.AsyncClient] = None):
        self.url = (url or "").rstrip("/")
        self.anon_key = anon_key or ""
        self._http = http_client or httpx.AsyncClient(timeout=timeout_seconds)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseAuthClient":
        return cls(settings.supabase_url, settings.supabase_anon_key, settings.auth_timeout_seconds)

    @property
    def configured(self) -> bool:
        return bool(self.url and self.anon_key)

    async def sign_in_with_password(self, email: str, password: str) -> Optional[SignInResult]:
        if not self.configured:
            logger.warning("[Auth] Supabase credentials are missing; sign-in unavailable")
            return None

        response = await self._http.post(
            f"{self.url}/auth/v1/token",
            params={"grant_type": "password"},
            headers={"apikey": self.anon_key, "Content-Type": "application/json"},
            json={"email": email, "password": password},
        )

        if response.status_code in (400, 401, 422):
            logger.info(f"[Auth] Sign-in rejected (status {response.status_code})")
            return None
        response.raise_for_status()

        data = response.json()
        user = data.get("user") or {}
        if not user.get("id") or not data.get("access_token"):
            return None

        user_email = user.get("email")
        metadata = user.get("user_metadata") or {}
        name = metadata.get("full_name") or (user_email.split("@")[0] if user_email else None)

        return SignInResult(
            user=AuthUser(id=user["id"], email=user_email, name=name),
            access_token=data["access_token"],
            expires_in=data.get("expires_in"),
        )

    async def close(self) -> None:
        await self._http.aclose()
