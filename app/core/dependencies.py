from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings, get_settings
from app.core.session import AuthContext, build_auth_context

bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_context(
    settings: Annotated[Settings, Depends(get_settings)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> AuthContext:
    """
    Build the AuthContext for the current request.

    The password-recovery screens are reachable signed out; when the caller
    does send a bearer token it is forwarded to the auth API.

    Returns:
        AuthContext: Context holding the settings and a configured AuthApiClient.
    """
    access_token = credentials.credentials if credentials else None
    return build_auth_context(settings, access_token=access_token)
