from enum import Enum


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class StrengthLabel(str, Enum):
    EMPTY = "Enter password"
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"


class StrengthColor(str, Enum):
    GRAY = "gray"
    DESTRUCTIVE = "destructive"
    WARNING = "warning"
    YELLOW = "yellow"
    SECONDARY = "secondary"
