"""Projection of controller screens onto the view models the front end draws."""

from app.core.password import evaluate, is_strong, strength_color, strength_label
from app.models.enums import SubmissionStatus
from app.models.forgot_password import (
    ForgotScreenState,
    RequestSentScreen,
)
from app.models.password_reset import (
    InvalidTokenScreen,
    ScreenState,
    SuccessScreen,
)
from app.models.view import (
    ForgotFormView,
    FormView,
    InvalidTokenView,
    RequestSentView,
    StrengthIndicator,
    SuccessView,
    ViewAction,
)

LOGIN_HREF = "/auth/login"
FORGOT_PASSWORD_HREF = "/auth/forgot-password"
FORGOT_PASSWORD_RESEND_HREF = "/auth/forgot-password/resend"

BACK_TO_LOGIN = ViewAction(label="Back to Login", href=LOGIN_HREF)


def strength_indicator(password: str) -> StrengthIndicator | None:
    """Build the strength indicator for a password; None while the field is empty."""
    if not password:
        return None
    result = evaluate(password)
    return StrengthIndicator(
        score=result.score,
        label=strength_label(result.score),
        color=strength_color(result.score),
        feedback=list(result.feedback),
        is_strong=is_strong(result),
    )


def form_description(email: str | None) -> str:
    if email:
        return f"Enter a new password for {email}"
    return "Choose a strong new password for your account"


def project(
    screen: ScreenState, email: str | None = None
) -> SuccessView | InvalidTokenView | FormView:
    """
    Map a reset-password screen to exactly one view.

    Parameters:
        screen (ScreenState): Current screen of the reset controller.
        email (str | None): Address from the deep link, only used in the form copy.

    Returns:
        SuccessView | InvalidTokenView | FormView: The view for the screen.
    """
    if isinstance(screen, SuccessScreen):
        return SuccessView(
            actions=[ViewAction(label="Continue to Login", href=LOGIN_HREF)]
        )
    if isinstance(screen, InvalidTokenScreen):
        return InvalidTokenView(
            error=screen.reason,
            actions=[
                ViewAction(label="Request New Reset Link", href=FORGOT_PASSWORD_HREF),
                BACK_TO_LOGIN,
            ],
        )

    form = screen.form
    is_loading = form.submission_status == SubmissionStatus.SUBMITTING
    return FormView(
        description=form_description(email),
        error=screen.error,
        field_errors=dict(form.validation_errors),
        strength=strength_indicator(form.fields.password),
        is_loading=is_loading,
        submit_label="Resetting Password..." if is_loading else "Reset Password",
        actions=[BACK_TO_LOGIN],
    )


def project_forgot(screen: ForgotScreenState) -> RequestSentView | ForgotFormView:
    """Map a forgot-password screen to its view."""
    if isinstance(screen, RequestSentScreen):
        return RequestSentView(
            email=screen.email,
            error=screen.error,
            resend=ViewAction(
                label="Resend Email", href=FORGOT_PASSWORD_RESEND_HREF, method="POST"
            ),
            actions=[BACK_TO_LOGIN],
        )

    form = screen.form
    is_loading = form.submission_status == SubmissionStatus.SUBMITTING
    return ForgotFormView(
        error=screen.error,
        field_errors=dict(form.validation_errors),
        is_loading=is_loading,
        submit_label="Sending..." if is_loading else "Send Reset Link",
        actions=[BACK_TO_LOGIN],
    )
