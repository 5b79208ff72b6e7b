"""Reset-password form controller.

The controller owns the form state of one reset page: it validates the
deep-link token once, re-validates fields on every change, and drives a single
submission at a time against the auth API. The screen it exposes is derived
from three flags, checked as success first, then invalid token, then form.
"""

from loguru import logger

from app.core.password import evaluate
from app.core.session import AuthContext
from app.exceptions import AuthApiError, FormClosedError, SubmissionInProgressError
from app.models.enums import SubmissionStatus
from app.models.password_reset import (
    FormFields,
    FormScreen,
    FormState,
    InvalidTokenScreen,
    ResetRequest,
    ScreenState,
    SuccessScreen,
)
from app.models.strength import PasswordStrengthResult
from app.services.token_validator import ResetTokenValidator
from app.utils.validation import mask_token, validate_reset_form

MISSING_TOKEN_ON_SUBMIT = "Invalid reset token"
RESET_FAILED_FALLBACK = "Failed to reset password"

FORM_FIELDS = ("password", "confirm_password")


class ResetPasswordController:
    def __init__(self, request: ResetRequest, context: AuthContext):
        self.request = request
        self.context = context
        self.validator = ResetTokenValidator(context.api)
        self.form = FormState()
        self.error: str | None = None
        # Assumed valid until load() says otherwise
        self.is_valid_token = True
        self.is_success = False
        self.token_checked = False

    @property
    def screen(self) -> ScreenState:
        if self.is_success:
            return SuccessScreen()
        if not self.is_valid_token:
            return InvalidTokenScreen(reason=self.error or "")
        return FormScreen(form=self.form.model_copy(deep=True), error=self.error)

    @property
    def is_submitting(self) -> bool:
        return self.form.submission_status == SubmissionStatus.SUBMITTING

    @property
    def strength(self) -> PasswordStrengthResult:
        return evaluate(self.form.fields.password)

    async def load(self) -> ScreenState:
        """
        Validate the deep-link token once.

        Later calls return the current screen without contacting the API again.
        """
        if self.token_checked:
            return self.screen

        outcome = await self.validator.validate(self.request.token)
        self.token_checked = True
        if not outcome.valid:
            self.is_valid_token = False
            self.error = outcome.reason
        return self.screen

    def _ensure_editable(self) -> None:
        if self.is_submitting:
            raise SubmissionInProgressError()
        if not isinstance(self.screen, FormScreen):
            raise FormClosedError()

    def set_field(self, name: str, value: str) -> dict[str, str]:
        """
        Update one form field and re-run validation.

        Parameters:
            name (str): "password" or "confirm_password".
            value (str): New field value.

        Returns:
            dict[str, str]: The validation errors after the change.

        Raises:
            SubmissionInProgressError: While a submission is in flight.
            FormClosedError: Once the page shows a terminal screen.
            ValueError: If `name` is not a form field.
        """
        if name not in FORM_FIELDS:
            raise ValueError(f"Unknown form field '{name}'")
        self._ensure_editable()

        setattr(self.form.fields, name, value)
        self.form.validation_errors = validate_reset_form(self.form.fields)
        return self.form.validation_errors

    def set_fields(self, password: str, confirm_password: str) -> dict[str, str]:
        self.set_field("password", password)
        return self.set_field("confirm_password", confirm_password)

    async def submit(self) -> ScreenState:
        """
        Submit the new password to the auth API.

        Field errors and a missing token stop the submission before any network
        call. Otherwise exactly one reset request is made; a failure keeps the
        form open with the API's message (or a generic one) as visible error.

        Returns:
            ScreenState: The screen after the attempt.

        Raises:
            SubmissionInProgressError: If a submission is already in flight.
            FormClosedError: If the page already shows a terminal screen.
        """
        self._ensure_editable()

        errors = validate_reset_form(self.form.fields)
        self.form.validation_errors = errors
        if errors:
            return self.screen

        token = self.request.token
        if not token:
            self.error = MISSING_TOKEN_ON_SUBMIT
            return self.screen

        self.form.submission_status = SubmissionStatus.SUBMITTING
        self.error = None
        try:
            await self.context.api.reset_password(token, self.form.fields.password)
        except AuthApiError as e:
            self.form.submission_status = SubmissionStatus.FAILED
            self.error = e.api_message or RESET_FAILED_FALLBACK
            logger.warning(
                f"Password reset failed for token {mask_token(token)}: {self.error}"
            )
            return self.screen

        self.form.submission_status = SubmissionStatus.SUCCEEDED
        self.is_success = True
        logger.info(f"Password reset completed for token {mask_token(token)}")
        return self.screen
