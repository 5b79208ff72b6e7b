"""Form lifecycle exceptions."""

from app.exceptions.base import AppException


class ValidationError(AppException):
    """Field-level validation failed."""

    def __init__(self, message: str, field: str | None = None):
        """
        Create a ValidationError representing a field validation failure.

        Parameters:
            message (str): Human-readable error message describing the validation failure.
            field (str | None): Optional name of the field associated with the error.
        """
        self.field = field
        super().__init__(message)


class FormStateError(AppException):
    """The form cannot accept the requested operation in its current state."""

    pass


class SubmissionInProgressError(FormStateError):
    """A submission is already in flight for this form."""

    def __init__(self, message: str = "A submission is already in progress"):
        super().__init__(message)


class FormClosedError(FormStateError):
    """The form reached a terminal screen and accepts no more input."""

    def __init__(self, message: str = "This form is no longer active"):
        super().__init__(message)
