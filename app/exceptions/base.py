"""Base exception for the application."""


class AppException(Exception):
    """Root of every exception raised by the application layer."""

    def __init__(self, message: str = "An application error occurred"):
        """
        Initialize the exception with a human-readable message.

        Parameters:
            message (str): Description of the failure, exposed through `str(exc)`.
        """
        self.message = message
        super().__init__(message)
