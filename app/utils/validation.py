"""Declarative form schemas and helpers for safe logging."""

from pydantic import BaseModel, EmailStr, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from app.core.password import PASSWORD_MIN_LENGTH, PASSWORD_PATTERN, password_length
from app.models.password_reset import FormFields

_EMAIL_ADAPTER = TypeAdapter(EmailStr)

PASSWORD_MISMATCH = "Passwords don't match"


class ResetPasswordForm(BaseModel):
    """Rules for the new-password form."""

    password: str
    confirm_password: str

    @field_validator("password")
    @classmethod
    def password_is_strong(cls, value: str) -> str:
        if password_length(value) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                "password_too_short", "Password must be at least 8 characters"
            )
        if not PASSWORD_PATTERN.match(value):
            raise PydanticCustomError(
                "password_pattern",
                "Password must contain lowercase, uppercase, number, and special character",
            )
        return value

    @field_validator("confirm_password")
    @classmethod
    def confirmation_present(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError(
                "confirmation_required", "Please confirm your password"
            )
        return value


class ForgotPasswordForm(BaseModel):
    """Rules for the reset-link request form."""

    email: str

    @field_validator("email")
    @classmethod
    def email_is_valid(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("email_required", "Email is required")
        try:
            _EMAIL_ADAPTER.validate_python(value)
        except PydanticValidationError:
            raise PydanticCustomError(
                "email_invalid", "Please enter a valid email address"
            )
        return value


def _collect_errors(exc: PydanticValidationError) -> dict[str, str]:
    """
    Flatten a pydantic ValidationError into a field -> message mapping.

    Only the first message of each field is kept, the one a form displays.
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else "__root__"
        errors.setdefault(field, error["msg"])
    return errors


def validate_reset_form(fields: FormFields) -> dict[str, str]:
    """
    Validate the reset-password form fields.

    The match rule is checked independently of the password rules, so a short
    password and a differing confirmation both get a message. A confirmation
    that fails its own rule keeps that message instead.

    Parameters:
        fields (FormFields): Current password and confirmation values.

    Returns:
        dict[str, str]: Error message per failing field; empty when the form is valid.
    """
    try:
        ResetPasswordForm(
            password=fields.password, confirm_password=fields.confirm_password
        )
    except PydanticValidationError as exc:
        errors = _collect_errors(exc)
    else:
        errors = {}

    if "confirm_password" not in errors and fields.password != fields.confirm_password:
        errors["confirm_password"] = PASSWORD_MISMATCH
    return errors


def validate_forgot_form(email: str) -> dict[str, str]:
    """Validate the reset-link request form; returns field -> message."""
    try:
        ForgotPasswordForm(email=email)
    except PydanticValidationError as exc:
        return _collect_errors(exc)
    return {}


def mask_email(email: str) -> str:
    """
    Mask an email address for safe logging.
    Example: 'user@example.com' -> 'u***r@example.com'
    """
    try:
        user_part, domain = email.split("@")
        if len(user_part) <= 2:
            return f"{user_part[0]}***@{domain}"
        return f"{user_part[0]}***{user_part[-1]}@{domain}"
    except Exception:
        return "***@***.***"


def mask_token(token: str | None) -> str:
    """
    Mask a reset token for safe logging.
    Example: 'abcdef123456' -> 'abcd***'
    """
    if not token:
        return "<none>"
    if len(token) <= 4:
        return "***"
    return f"{token[:4]}***"
