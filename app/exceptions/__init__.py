"""
Application exceptions module.

This module provides a clean separation of concerns for error handling:
- Base exceptions define the hierarchy
- Auth exceptions cover failures of the external auth API
- Form exceptions cover field validation and the submission lifecycle
- HTTP mapping is handled separately in app/core/error_handlers.py
"""

from app.exceptions.base import AppException
from app.exceptions.auth import AuthApiError
from app.exceptions.form import (
    ValidationError,
    FormStateError,
    SubmissionInProgressError,
    FormClosedError,
)

__all__ = [
    # Base
    "AppException",
    # Auth
    "AuthApiError",
    # Form
    "ValidationError",
    "FormStateError",
    "SubmissionInProgressError",
    "FormClosedError",
]
