from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.dependencies import get_auth_context
from app.core.password import evaluate, is_strong, strength_color, strength_label
from app.core.session import AuthContext
from app.models.forgot_password import ForgotPasswordSubmit
from app.models.password_reset import (
    FormFields,
    FormScreen,
    ResetFormErrors,
    ResetPasswordSubmit,
    ResetRequest,
)
from app.models.strength import PasswordStrengthRequest, PasswordStrengthResponse
from app.models.view import ForgotView, ResetView
from app.services.forgot_password import ForgotPasswordController
from app.services.presentation import project, project_forgot
from app.services.reset_password import ResetPasswordController
from app.utils.validation import validate_reset_form

router = APIRouter(prefix="/auth", tags=["auth"])

AuthContextDep = Annotated[AuthContext, Depends(get_auth_context)]


@router.get("/reset-password", response_model=ResetView)
async def reset_password_page(
    context: AuthContextDep,
    token: str | None = None,
    email: str | None = None,
):
    """
    Open a reset deep link.

    The token is validated before any view is returned, so a client never
    sees the form for a link the auth API rejects.
    """
    request = ResetRequest.from_query({"token": token, "email": email})
    controller = ResetPasswordController(request, context)
    screen = await controller.load()
    return project(screen, request.email)


@router.post("/reset-password", response_model=ResetView)
async def submit_reset_password(
    payload: ResetPasswordSubmit,
    context: AuthContextDep,
    token: str | None = None,
    email: str | None = None,
):
    """
    Submit a new password for the deep link's token.

    Runs the same token check as the page load, then the form rules, then a
    single reset call. Every outcome is returned as a view; field errors and
    API failures come back on the form view.
    """
    request = ResetRequest.from_query({"token": token, "email": email})
    controller = ResetPasswordController(request, context)
    screen = await controller.load()
    if not isinstance(screen, FormScreen):
        return project(screen, request.email)

    controller.set_fields(payload.password, payload.confirm_password)
    screen = await controller.submit()
    return project(screen, request.email)


@router.post("/reset-password/validate", response_model=ResetFormErrors)
async def validate_reset_password_form(payload: ResetPasswordSubmit):
    fields = FormFields(
        password=payload.password, confirm_password=payload.confirm_password
    )
    return ResetFormErrors(errors=validate_reset_form(fields))


@router.post("/password-strength", response_model=PasswordStrengthResponse)
async def password_strength(payload: PasswordStrengthRequest):
    result = evaluate(payload.password)
    return PasswordStrengthResponse(
        score=result.score,
        feedback=list(result.feedback),
        label=strength_label(result.score),
        color=strength_color(result.score),
        is_strong=is_strong(result),
    )


@router.get("/forgot-password", response_model=ForgotView)
async def forgot_password_page(context: AuthContextDep):
    return project_forgot(ForgotPasswordController(context).screen)


@router.post("/forgot-password", response_model=ForgotView)
async def submit_forgot_password(payload: ForgotPasswordSubmit, context: AuthContextDep):
    """Ask the auth API to email a reset link to the given address."""
    controller = ForgotPasswordController(context)
    controller.set_email(payload.email)
    screen = await controller.submit()
    return project_forgot(screen)


@router.post("/forgot-password/resend", response_model=ForgotView)
async def resend_forgot_password(payload: ForgotPasswordSubmit, context: AuthContextDep):
    """
    Send the reset link again from the "Check Your Email" screen.

    A malformed address is answered with 422; an auth API failure keeps the
    confirmation view and carries the error.
    """
    controller = ForgotPasswordController.from_sent_request(context, payload.email)
    screen = await controller.resend()
    return project_forgot(screen)
