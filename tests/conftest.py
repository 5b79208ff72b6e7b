import json
import pytest
import httpx
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.dependencies import get_auth_context
from app.core.session import AuthContext
from app.main import app
from app.services.auth_api_client import AuthApiClient

TEST_API_BASE_URL = "http://auth.test"


class AuthApiStub:
    """
    Scripted stand-in for the auth REST API, served through httpx.MockTransport.

    Every request is recorded as (path, json body). Unscripted paths answer 200 with an empty body.
    """

    def __init__(self):
        self.calls: list[tuple[str, dict]] = []
        self._outcomes: dict[str, tuple[int, dict | None] | Exception] = {}

    def respond(self, path: str, status_code: int = 200, body: dict | None = None):
        self._outcomes[path] = (status_code, body)

    def fail(self, path: str, error: Exception):
        self._outcomes[path] = error

    def calls_to(self, path: str) -> list[dict]:
        return [payload for called, payload in self.calls if called == path]

    def handler(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content) if request.content else {}
        self.calls.append((request.url.path, payload))
        outcome = self._outcomes.get(request.url.path, (200, None))
        if isinstance(outcome, Exception):
            raise outcome
        status_code, body = outcome
        return httpx.Response(status_code, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture(scope="function")
def test_settings():
    """Provide test settings pointing at the stubbed auth API."""
    return Settings(AUTH_API_BASE_URL=TEST_API_BASE_URL, BACKEND_CORS_ORIGINS="")


@pytest.fixture(scope="function")
def auth_api():
    """Provide a fresh auth API stub."""
    return AuthApiStub()


@pytest.fixture(scope="function")
def auth_context(test_settings, auth_api):
    """Provide an AuthContext whose client talks to the stub."""
    api = AuthApiClient(base_url=TEST_API_BASE_URL, transport=auth_api.transport)
    return AuthContext(settings=test_settings, api=api)


@pytest.fixture(scope="function")
def client(auth_context):
    """Create a test client with the auth context bound to the stub."""
    app.dependency_overrides[get_auth_context] = lambda: auth_context
    yield TestClient(app)
    app.dependency_overrides.clear()
