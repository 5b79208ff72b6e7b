"""View models returned to the front end, one per screen."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from app.models.enums import StrengthColor, StrengthLabel


class ViewAction(BaseModel):
    label: str
    href: str
    method: Literal["GET", "POST"] = "GET"


class InvalidTokenView(BaseModel):
    kind: Literal["invalid_token"] = "invalid_token"
    title: str = "Invalid Reset Link"
    description: str = (
        "This password reset link is invalid or has expired. Please request a new one."
    )
    error: str
    actions: list[ViewAction] = Field(default_factory=list)


class SuccessView(BaseModel):
    kind: Literal["success"] = "success"
    title: str = "Password Reset Complete"
    description: str = (
        "Your password has been successfully updated. "
        "You can now login with your new password."
    )
    actions: list[ViewAction] = Field(default_factory=list)


class StrengthIndicator(BaseModel):
    score: int
    label: StrengthLabel
    color: StrengthColor
    feedback: list[str]
    is_strong: bool


class FormView(BaseModel):
    kind: Literal["form"] = "form"
    title: str = "Reset Your Password"
    description: str
    error: str | None = None
    field_errors: dict[str, str] = Field(default_factory=dict)
    # None hides the indicator while the password field is empty
    strength: StrengthIndicator | None = None
    is_loading: bool = False
    submit_label: str = "Reset Password"
    footer: str = "Make sure to use a strong password that you haven't used before."
    actions: list[ViewAction] = Field(default_factory=list)


class ForgotFormView(BaseModel):
    kind: Literal["forgot_form"] = "forgot_form"
    title: str = "Forgot Password?"
    description: str = (
        "No worries! Enter your email address and we'll send you a link to reset your password."
    )
    error: str | None = None
    field_errors: dict[str, str] = Field(default_factory=dict)
    is_loading: bool = False
    submit_label: str = "Send Reset Link"
    actions: list[ViewAction] = Field(default_factory=list)


class RequestSentView(BaseModel):
    kind: Literal["request_sent"] = "request_sent"
    title: str = "Check Your Email"
    description: str = "We've sent password reset instructions to:"
    email: str
    error: str | None = None
    notice: str = (
        "If you don't receive an email within a few minutes, "
        "check your spam folder or try again."
    )
    # POSTs {"email": email} to send the link again
    resend: ViewAction
    actions: list[ViewAction] = Field(default_factory=list)


ResetView = Annotated[
    InvalidTokenView | SuccessView | FormView, Field(discriminator="kind")
]

ForgotView = Annotated[ForgotFormView | RequestSentView, Field(discriminator="kind")]
