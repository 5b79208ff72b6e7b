"""Controller for the "forgot password" screen that requests a reset link."""

from loguru import logger

from app.core.session import AuthContext
from app.exceptions import (
    AuthApiError,
    FormClosedError,
    SubmissionInProgressError,
    ValidationError,
)
from app.models.enums import SubmissionStatus
from app.models.forgot_password import (
    ForgotFormScreen,
    ForgotPasswordState,
    ForgotScreenState,
    RequestSentScreen,
)
from app.utils.validation import mask_email, validate_forgot_form

SEND_FAILED_FALLBACK = "Failed to send reset email"


class ForgotPasswordController:
    def __init__(self, context: AuthContext):
        self.context = context
        self.form = ForgotPasswordState()
        self.error: str | None = None
        self.is_submitted = False

    @classmethod
    def from_sent_request(
        cls, context: AuthContext, email: str
    ) -> "ForgotPasswordController":
        """
        Rebuild the controller on the confirmation screen for an already requested link.

        Parameters:
            context (AuthContext): Auth context for the request.
            email (str): Address the first link was sent to.

        Returns:
            ForgotPasswordController: A controller showing `RequestSentScreen`, ready for resend().

        Raises:
            ValidationError: If the address is missing or malformed.
        """
        email = email.strip()
        errors = validate_forgot_form(email)
        if errors:
            raise ValidationError(errors["email"], field="email")

        controller = cls(context)
        controller.form.email = email
        controller.form.submission_status = SubmissionStatus.SUCCEEDED
        controller.is_submitted = True
        return controller

    @property
    def screen(self) -> ForgotScreenState:
        if self.is_submitted:
            return RequestSentScreen(email=self.form.email, error=self.error)
        return ForgotFormScreen(form=self.form.model_copy(deep=True), error=self.error)

    @property
    def is_submitting(self) -> bool:
        return self.form.submission_status == SubmissionStatus.SUBMITTING

    def set_email(self, value: str) -> dict[str, str]:
        if self.is_submitting:
            raise SubmissionInProgressError()
        if self.is_submitted:
            raise FormClosedError()
        self.form.email = value.strip()
        self.form.validation_errors = validate_forgot_form(self.form.email)
        return self.form.validation_errors

    async def _send(self) -> ForgotScreenState:
        self.form.submission_status = SubmissionStatus.SUBMITTING
        self.error = None
        try:
            await self.context.api.forgot_password(self.form.email)
        except AuthApiError as e:
            self.form.submission_status = SubmissionStatus.FAILED
            self.error = e.api_message or SEND_FAILED_FALLBACK
            logger.warning(
                f"Reset link request failed for {mask_email(self.form.email)}: {self.error}"
            )
            return self.screen

        self.form.submission_status = SubmissionStatus.SUCCEEDED
        self.is_submitted = True
        logger.info(f"Reset link requested for {mask_email(self.form.email)}")
        return self.screen

    async def submit(self) -> ForgotScreenState:
        """
        Ask the auth API to email a reset link.

        Returns:
            ForgotScreenState: `RequestSentScreen` on success, the form screen
                with field errors or the API's message otherwise.

        Raises:
            SubmissionInProgressError: If a request is already in flight.
            FormClosedError: If the link was already sent; use resend() instead.
        """
        if self.is_submitting:
            raise SubmissionInProgressError()
        if self.is_submitted:
            raise FormClosedError()

        errors = validate_forgot_form(self.form.email)
        self.form.validation_errors = errors
        if errors:
            return self.screen
        return await self._send()

    async def resend(self) -> ForgotScreenState:
        """
        Send the reset link again from the confirmation screen.

        A failed resend keeps the confirmation screen; the error is kept on the
        controller for the caller to surface.
        """
        if self.is_submitting:
            raise SubmissionInProgressError()
        if not self.form.email:
            return self.screen
        return await self._send()
