import time

import httpx
import jwt

from careerlens.services.supabase_auth import SupabaseAuthClient
from tests.conftest import JWT_SECRET, FakeAuthClient, UnreachableModelClient


def make_token(secret=JWT_SECRET, expires_in=3600, **claims):
    payload = {
        "sub": "user-123",
        "email": "asha@example.com",
        "user_metadata": {"full_name": "Asha Rao"},
        "exp": int(time.time()) + expires_in,
    }
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


class TestSession:

    def test_no_header_is_null(self, make_client):
        client = make_client(UnreachableModelClient())

        response = client.get("/api/auth/session")

        assert response.status_code == 200
        assert response.json() is None

    def test_valid_token_returns_user(self, make_client):
        client = make_client(UnreachableModelClient())
        token = make_token()

        response = client.get("/api/auth/session", headers={"Authorization": f"Bearer {token}"})

        session = response.json()
        assert session["user"] == {"id": "user-123", "email": "asha@example.com", "name": "Asha Rao"}
        assert session["accessToken"] == token
        assert session["expires"]

    def test_name_defaults_to_email_local_part(self, make_client):
        client = make_client(UnreachableModelClient())
        token = make_token(user_metadata={})

        response = client.get("/api/auth/session", headers={"Authorization": f"Bearer {token}"})

        assert response.json()["user"]["name"] == "asha"

    def test_expired_token_is_null(self, make_client):
        client = make_client(UnreachableModelClient())
        token = make_token(expires_in=-60)

        response = client.get("/api/auth/session", headers={"Authorization": f"Bearer {token}"})

        assert response.json() is None

    def test_wrong_secret_is_null(self, make_client):
        client = make_client(UnreachableModelClient())
        token = make_token(secret="some-other-secret-that-is-also-long-enough")

        response = client.get("/api/auth/session", headers={"Authorization": f"Bearer {token}"})

        assert response.json() is None

    def test_lookup_failure_is_500(self, make_client, monkeypatch):
        client = make_client(UnreachableModelClient())

        async def broken_session(request, authorization):
            raise RuntimeError("jwks unavailable")

        monkeypatch.setattr("careerlens.routes.auth.get_session", broken_session)

        response = client.get("/api/auth/session", headers={"Authorization": f"Bearer {make_token()}"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to get session"}

    def test_profile_mirrors_session(self, make_client):
        client = make_client(UnreachableModelClient())
        token = make_token()

        response = client.get("/profile", headers={"Authorization": f"Bearer {token}"})

        assert response.json()["user"]["id"] == "user-123"
        assert client.get("/profile").json() is None
        assert client.get("/profile", headers={"Authorization": "Basic abc"}).json() is None


class TestSignIn:

    def test_success(self, make_client, signed_in_result):
        auth = FakeAuthClient(result=signed_in_result)
        client = make_client(UnreachableModelClient(), auth_client=auth)

        response = client.post("/api/auth/sign-in", json={"email": "asha@example.com", "password": "pw"})

        assert response.status_code == 200
        assert response.json() == {
            "user": {"id": "user-123", "email": "asha@example.com", "name": "Asha"},
            "accessToken": "access-token",
            "expiresIn": 3600,
        }
        assert auth.calls == [("asha@example.com", "pw")]

    def test_rejected_credentials(self, make_client):
        client = make_client(UnreachableModelClient(), auth_client=FakeAuthClient(result=None))

        response = client.post("/api/auth/sign-in", json={"email": "asha@example.com", "password": "bad"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid email or password"}

    def test_missing_password(self, make_client):
        auth = FakeAuthClient()
        client = make_client(UnreachableModelClient(), auth_client=auth)

        response = client.post("/api/auth/sign-in", json={"email": "asha@example.com"})

        assert response.status_code == 400
        assert auth.calls == []

    def test_supabase_down(self, make_client):
        auth = FakeAuthClient(error=httpx.ConnectError("connection refused"))
        client = make_client(UnreachableModelClient(), auth_client=auth)

        response = client.post("/api/auth/sign-in", json={"email": "asha@example.com", "password": "pw"})

        assert response.status_code == 502
        assert response.json() == {"error": "Authentication service unavailable"}


def test_auth_log_sink(make_client):
    client = make_client(UnreachableModelClient())

    assert client.get("/api/auth/_log").json() == {"message": "Auth logging endpoint"}
    assert client.post("/api/auth/_log", json={"level": "info"}).json() == {"message": "OK"}


class TestSupabaseAuthClient:

    def client_with(self, handler, url="https://example.supabase.co", anon_key="anon-key"):
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return SupabaseAuthClient(url, anon_key, http_client=http)

    async def test_password_grant(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["apikey"] = request.headers["apikey"]
            return httpx.Response(200, json={
                "access_token": "tok",
                "expires_in": 3600,
                "user": {"id": "u1", "email": "ravi@example.com", "user_metadata": {}},
            })

        auth = self.client_with(handler)
        result = await auth.sign_in_with_password("ravi@example.com", "pw")
        await auth.close()

        assert seen["url"] == "https://example.supabase.co/auth/v1/token?grant_type=password"
        assert seen["apikey"] == "anon-key"
        assert result.user.name == "ravi"
        assert result.access_token == "tok"

    async def test_rejection_is_none(self):
        auth = self.client_with(lambda request: httpx.Response(400, json={"error": "invalid_grant"}))

        assert await auth.sign_in_with_password("ravi@example.com", "bad") is None
        await auth.close()

    async def test_unconfigured_never_calls_out(self):
        def handler(request):
            raise AssertionError("no request expected")

        auth = self.client_with(handler, url="", anon_key="")

        assert auth.configured is False
        assert await auth.sign_in_with_password("ravi@example.com", "pw") is None
        await auth.close()
