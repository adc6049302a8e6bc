import pytest
from fastapi.testclient import TestClient

from careerlens.config import Settings
from careerlens.main import create_app
from careerlens.services.supabase_auth import AuthUser, SignInResult
from careerlens.utils import metrics

JWT_SECRET = "test-jwt-secret-with-at-least-32-bytes!!"


class FakeModelClient:
    """Replays canned responses in order; the last one repeats. Exceptions are raised."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.prompts = []

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, BaseException):
            raise response
        return response


class UnreachableModelClient:
    """Fails the test outright if anything tries to call the model."""

    async def generate_text(self, prompt: str) -> str:
        pytest.fail(f"model must not be called (prompt: {prompt[:60]!r})")


class FakeAuthClient:
    configured = True

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def sign_in_with_password(self, email, password):
        self.calls.append((email, password))
        if self.error is not None:
            raise self.error
        return self.result

    async def close(self):
        pass


@pytest.fixture(autouse=True)
def _isolate():
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        gemini_api_key="test-key",
        supabase_url="https://example.supabase.co",
        supabase_anon_key="anon-key",
        supabase_jwt_secret=JWT_SECRET,
        rate_limit_enabled=False,
    )


@pytest.fixture
def make_client(settings):
    def _make(model_client, auth_client=None, **overrides):
        app_settings = settings.model_copy(update=overrides) if overrides else settings
        app = create_app(app_settings, model_client=model_client, auth_client=auth_client or FakeAuthClient())
        return TestClient(app)
    return _make


@pytest.fixture
def signed_in_result():
    return SignInResult(
        user=AuthUser(id="user-123", email="asha@example.com", name="Asha"),
        access_token="access-token",
        expires_in=3600,
    )
