import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.error_handlers import register_exception_handlers
from app.exceptions import (
    AppException,
    AuthApiError,
    FormClosedError,
    ValidationError,
)
from app.main import app


@pytest.fixture
def plain_client():
    """Create a test client without dependency overrides."""
    return TestClient(app)


class TestAppConfiguration:
    """Test FastAPI app configuration."""

    def test_app_title(self):
        assert app.title == "ElectroProject Password Recovery"

    def test_app_has_lifespan(self):
        assert app.router.lifespan_context is not None

    def test_cors_middleware_configured(self):
        middleware_types = [m.cls.__name__ for m in app.user_middleware]
        assert "CORSMiddleware" in middleware_types

    def test_auth_routes_registered(self):
        paths = {route.path for route in app.routes}
        assert "/auth/reset-password" in paths
        assert "/auth/forgot-password" in paths
        assert "/auth/forgot-password/resend" in paths
        assert "/auth/password-strength" in paths


class TestHealthCheck:
    def test_health_check(self, plain_client):
        response = plain_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestExceptionHandlers:
    """Errors that escape a route are mapped to HTTP statuses."""

    @pytest.fixture
    def failing_client(self):
        failing_app = FastAPI()
        register_exception_handlers(failing_app)

        @failing_app.get("/validation")
        async def raise_validation():
            raise ValidationError("Email is required", field="email")

        @failing_app.get("/validation-no-field")
        async def raise_validation_without_field():
            raise ValidationError("Bad input")

        @failing_app.get("/closed")
        async def raise_closed():
            raise FormClosedError()

        @failing_app.get("/upstream")
        async def raise_upstream():
            raise AuthApiError(503)

        @failing_app.get("/internal")
        async def raise_internal():
            raise AppException("boom")

        return TestClient(failing_app)

    def test_validation_error_is_422_with_field(self, failing_client):
        response = failing_client.get("/validation")
        assert response.status_code == 422
        assert response.json() == {"detail": "Email is required", "field": "email"}

    def test_validation_error_without_field(self, failing_client):
        response = failing_client.get("/validation-no-field")
        assert response.status_code == 422
        assert response.json() == {"detail": "Bad input"}

    @pytest.mark.parametrize("path", ["/closed", "/upstream", "/internal"])
    def test_other_app_exceptions_are_500(self, failing_client, path):
        response = failing_client.get(path)
        assert response.status_code == 500
        assert response.json() == {"detail": "An internal error occurred"}
