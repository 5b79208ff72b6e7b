"""Password strength scoring and the password rules shared with form validation."""

import re

from app.models.enums import StrengthColor, StrengthLabel
from app.models.strength import PasswordStrengthResult

PASSWORD_MIN_LENGTH = 8
# Lowercase, uppercase, digit and non-alphanumeric, in any order
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[^a-zA-Z0-9])")

CRITERION_POINTS = 20
MAX_SCORE = 100

_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(r"[^a-zA-Z0-9]")


def password_length(password: str) -> int:
    """
    Length of a password in UTF-16 code units.

    Characters outside the Basic Multilingual Plane (most emoji) count as two,
    the same way browsers count the length of an input value.
    """
    return len(password.encode("utf-16-le")) // 2


# (check, remediation message), in feedback order
_CRITERIA = (
    (lambda p: password_length(p) >= PASSWORD_MIN_LENGTH, "Use at least 8 characters"),
    (lambda p: _LOWERCASE.search(p) is not None, "Add lowercase letters"),
    (lambda p: _UPPERCASE.search(p) is not None, "Add uppercase letters"),
    (lambda p: _DIGIT.search(p) is not None, "Add numbers"),
    (lambda p: _SPECIAL.search(p) is not None, "Add special characters (!@#$%^&*)"),
)


def evaluate(password: str) -> PasswordStrengthResult:
    """
    Score a candidate password against the five strength criteria.

    Each satisfied criterion (length >= 8, lowercase, uppercase, digit, special
    character) is worth 20 points. Every unsatisfied criterion contributes one
    remediation message, in the fixed criteria order. An empty password
    short-circuits to a score of 0 with a single "Password is required" message.

    Parameters:
        password (str): The candidate password.

    Returns:
        PasswordStrengthResult: The capped score and the ordered feedback.
    """
    if not password:
        return PasswordStrengthResult(score=0, feedback=("Password is required",))

    score = 0
    feedback: list[str] = []
    for check, message in _CRITERIA:
        if check(password):
            score += CRITERION_POINTS
        else:
            feedback.append(message)

    return PasswordStrengthResult(score=min(score, MAX_SCORE), feedback=tuple(feedback))


def strength_label(score: int) -> StrengthLabel:
    """Map a score to its band; each band is closed on its lower bound."""
    if score == 0:
        return StrengthLabel.EMPTY
    if score < 40:
        return StrengthLabel.WEAK
    if score < 60:
        return StrengthLabel.FAIR
    if score < 80:
        return StrengthLabel.GOOD
    return StrengthLabel.STRONG


def strength_color(score: int) -> StrengthColor:
    if score == 0:
        return StrengthColor.GRAY
    if score < 40:
        return StrengthColor.DESTRUCTIVE
    if score < 60:
        return StrengthColor.WARNING
    if score < 80:
        return StrengthColor.YELLOW
    return StrengthColor.SECONDARY


def is_strong(result: PasswordStrengthResult) -> bool:
    return result.score == MAX_SCORE
