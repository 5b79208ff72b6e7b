"""Reset-token validation against the auth API."""

from loguru import logger

from app.exceptions import AuthApiError
from app.models.password_reset import TokenValidationOutcome
from app.services.auth_api_client import AuthApiClient
from app.utils.validation import mask_token

MISSING_TOKEN_REASON = "Invalid or missing reset token"
REJECTED_TOKEN_REASON = "Invalid or expired reset token"


class ResetTokenValidator:
    """Single-shot check of a deep-link reset token."""

    def __init__(self, api: AuthApiClient):
        self.api = api

    async def validate(self, token: str | None) -> TokenValidationOutcome:
        """
        Ask the auth API whether a reset token is still usable.

        A missing token is rejected without contacting the API. Otherwise one
        request is made; any failure, whatever its cause, is reported as an
        invalid or expired token.

        Parameters:
            token (str | None): Token extracted from the deep link.

        Returns:
            TokenValidationOutcome: `ok()` on a 2xx answer, `invalid(reason)` otherwise.
        """
        if not token:
            logger.info("Reset link opened without a token")
            return TokenValidationOutcome.invalid(MISSING_TOKEN_REASON)

        try:
            await self.api.validate_reset_token(token)
        except AuthApiError as e:
            logger.info(f"Reset token {mask_token(token)} rejected: {e}")
            return TokenValidationOutcome.invalid(REJECTED_TOKEN_REASON)

        logger.debug(f"Reset token {mask_token(token)} accepted")
        return TokenValidationOutcome.ok()
