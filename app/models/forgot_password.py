"""Forgot-password form and screen models."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field
from sqlmodel import SQLModel

from app.models.enums import SubmissionStatus


class ForgotPasswordState(BaseModel):
    email: str = ""
    validation_errors: dict[str, str] = Field(default_factory=dict)
    submission_status: SubmissionStatus = SubmissionStatus.IDLE


class ForgotFormScreen(BaseModel):
    kind: Literal["forgot_form"] = "forgot_form"
    form: ForgotPasswordState
    error: str | None = None


class RequestSentScreen(BaseModel):
    kind: Literal["request_sent"] = "request_sent"
    email: str
    error: str | None = None


ForgotScreenState = Annotated[
    ForgotFormScreen | RequestSentScreen, Field(discriminator="kind")
]


class ForgotPasswordSubmit(SQLModel):
    """Request body for asking a reset link."""

    email: str = ""
