"""Password strength value objects."""

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import StrengthColor, StrengthLabel


class PasswordStrengthResult(BaseModel):
    """Score and remediation hints for one candidate password."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    feedback: tuple[str, ...] = ()


class PasswordStrengthRequest(BaseModel):
    password: str = ""


class PasswordStrengthResponse(BaseModel):
    score: int
    feedback: list[str]
    label: StrengthLabel
    color: StrengthColor
    is_strong: bool
