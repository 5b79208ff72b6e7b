"""
Auth API Client Module.

This module provides the low-level HTTP client responsible for communicating
with the ElectroProject auth REST API. It handles request formatting, bearer
authentication, and the translation of failed responses into AuthApiError.

Technological Context:
- Leverages HTTPX for asynchronous, non-blocking network calls.
- Every call is a single attempt; callers decide what a failure means.
"""

import logging
from typing import Any, Optional

import httpx

from app.exceptions import AuthApiError

logger = logging.getLogger(__name__)

VALIDATE_RESET_TOKEN_PATH = "/api/auth/validate-reset-token"
RESET_PASSWORD_PATH = "/api/auth/reset-password"
FORGOT_PASSWORD_PATH = "/api/auth/forgot-password"


def _error_message(response: httpx.Response) -> Optional[str]:
    """
    Extract the human-readable message from a failed API response.

    Looks for a string `message` field first, then a string `detail` field.

    Returns:
        Optional[str]: The message, or None when the body is not JSON or carries neither field.
    """
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    for key in ("message", "detail"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return None


class AuthApiClient:
    """
    Client for the password-recovery endpoints of the auth API.

    Attributes:
        base_url (str): Root URL of the auth API.
        timeout (Optional[float]): Network timeout in seconds; None waits indefinitely.
        access_token (Optional[str]): Bearer token forwarded when the user is signed in.
        transport (Optional[httpx.AsyncBaseTransport]): Custom transport, used by tests to stub the API.
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        access_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.access_token = access_token
        self.transport = transport

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Executes a POST request with a JSON body against the auth API.

        Args:
            path (str): Endpoint path, e.g. "/api/auth/reset-password".
            payload (dict[str, Any]): JSON body.

        Returns:
            dict[str, Any]: The decoded JSON body, or an empty dict when the
                response has no JSON object body.

        Raises:
            AuthApiError: On a non-2xx status (with the API's message when
                present) or on any transport failure (without a message).
        """
        headers = {}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        ) as client:
            try:
                response = await client.post(path, json=payload, headers=headers)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                logger.warning(f"Auth API returned error {status_code} for {path}")
                raise AuthApiError(status_code, _error_message(e.response)) from e
            except httpx.RequestError as e:
                logger.error(f"Auth API request to {path} failed: {e!r}")
                raise AuthApiError() from e

        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    async def validate_reset_token(self, token: str) -> dict[str, Any]:
        return await self._post(VALIDATE_RESET_TOKEN_PATH, {"token": token})

    async def reset_password(self, token: str, new_password: str) -> dict[str, Any]:
        return await self._post(
            RESET_PASSWORD_PATH, {"token": token, "newPassword": new_password}
        )

    async def forgot_password(self, email: str) -> dict[str, Any]:
        return await self._post(FORGOT_PASSWORD_PATH, {"email": email})
