"""Password reset request, form and screen models."""

from typing import Annotated, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import SQLModel

from app.models.enums import SubmissionStatus


class ResetRequest(BaseModel):
    """Token and optional email carried by a password reset deep link."""

    model_config = ConfigDict(frozen=True)

    token: str | None = None
    email: str | None = None

    @classmethod
    def from_query(cls, params: Mapping[str, str | None]) -> "ResetRequest":
        """
        Build a ResetRequest from deep-link query parameters.

        Empty values count as absent, so `?token=` behaves like a link without a token.
        """
        return cls(
            token=params.get("token") or None,
            email=params.get("email") or None,
        )


class FormFields(BaseModel):
    password: str = ""
    confirm_password: str = ""


class FormState(BaseModel):
    fields: FormFields = Field(default_factory=FormFields)
    validation_errors: dict[str, str] = Field(default_factory=dict)
    submission_status: SubmissionStatus = SubmissionStatus.IDLE


class InvalidTokenScreen(BaseModel):
    kind: Literal["invalid_token"] = "invalid_token"
    reason: str


class SuccessScreen(BaseModel):
    kind: Literal["success"] = "success"


class FormScreen(BaseModel):
    kind: Literal["form"] = "form"
    form: FormState
    error: str | None = None


ScreenState = Annotated[
    InvalidTokenScreen | SuccessScreen | FormScreen, Field(discriminator="kind")
]


class TokenValidationOutcome(BaseModel):
    """Result of checking a reset token against the auth API."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    reason: str | None = None

    @classmethod
    def ok(cls) -> "TokenValidationOutcome":
        return cls(valid=True)

    @classmethod
    def invalid(cls, reason: str) -> "TokenValidationOutcome":
        return cls(valid=False, reason=reason)


class ResetPasswordSubmit(SQLModel):
    """Request body for submitting the reset form."""

    password: str = ""
    confirm_password: str = ""


class ResetFormErrors(SQLModel):
    """Response model for eager form validation."""

    errors: dict[str, str]
