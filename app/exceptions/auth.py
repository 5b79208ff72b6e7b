"""External auth API exceptions."""

from app.exceptions.base import AppException


class AuthApiError(AppException):
    """The external auth API answered with a non-2xx status or could not be reached."""

    def __init__(self, status_code: int | None = None, message: str | None = None):
        """
        Record the failure of a call to the auth API.

        Parameters:
            status_code (int | None): HTTP status of the response, or None for transport failures.
            message (str | None): The `message` reported by the API, or None when the response carried none.
                The exception text falls back to a generic description so logs stay readable.
        """
        self.status_code = status_code
        self.api_message = message
        if message:
            text = message
        elif status_code is not None:
            text = f"Auth API returned status {status_code}"
        else:
            text = "Auth API unreachable"
        super().__init__(text)
