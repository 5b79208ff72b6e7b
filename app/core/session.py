"""Auth context threaded explicitly through the password-recovery controllers."""

from dataclasses import dataclass

from app.core.config import Settings
from app.services.auth_api_client import AuthApiClient


@dataclass(frozen=True)
class AuthContext:
    """
    Everything a controller needs to reach the auth API.

    Built once per request and handed to each controller's constructor,
    instead of being looked up from global state.

    Attributes:
        settings (Settings): Application settings in effect for the request.
        api (AuthApiClient): Client bound to the auth API.
        access_token (str | None): Bearer token of the signed-in user, if any.
    """

    settings: Settings
    api: AuthApiClient
    access_token: str | None = None


def build_auth_context(settings: Settings, access_token: str | None = None) -> AuthContext:
    """
    Create an AuthContext whose API client is configured from the settings.

    Parameters:
        settings (Settings): Source of the auth API base URL and timeout.
        access_token (str | None): Optional bearer token forwarded on every call.

    Returns:
        AuthContext: A context ready to be passed to controllers.
    """
    api = AuthApiClient(
        base_url=settings.AUTH_API_BASE_URL,
        timeout=settings.AUTH_API_TIMEOUT_SECONDS,
        access_token=access_token,
    )
    return AuthContext(settings=settings, api=api, access_token=access_token)
