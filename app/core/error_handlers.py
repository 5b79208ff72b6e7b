"""HTTP error handlers for FastAPI application.

This module provides the bridge between application exceptions and HTTP responses.
It maps domain-level exceptions to appropriate HTTP status codes and response formats.

Purpose:
    - Keep HTTP concerns separate from the password-recovery controllers
    - Provide consistent error response format across the API
    - Allow easy modification of HTTP responses without changing domain logic
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from app.exceptions import AppException, ValidationError


async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """
    Convert a ValidationError into an HTTP 422 Unprocessable Entity JSON response.

    Parameters:
        request (Request): The incoming HTTP request.
        exc (ValidationError): The validation error; if `exc.field` is set, the response will include a `field` key indicating the related field.

    Returns:
        JSONResponse: Response with status 422 and a JSON body containing a `detail` message and, when available, a `field` key.
    """
    content = {"detail": str(exc)}
    if exc.field:
        content["field"] = exc.field
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, content=content
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handle unhandled application-level exceptions and produce a standardized 500 Internal Server Error response.

    Parameters:
        request (Request): The incoming HTTP request.
        exc (AppException): The unhandled application-level exception.

    Returns:
        JSONResponse: HTTP 500 response with content {"detail": "An internal error occurred"}.
    """
    logger.opt(exception=exc).error(
        f"Unhandled application error on {request.url.path}: {exc}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An internal error occurred"},
    )


def register_exception_handlers(app) -> None:
    """
    Register the application's domain-to-HTTP exception handlers on a FastAPI app.

    Registers handlers from most specific to most general so that subclassed
    exceptions are matched before their parent types: ValidationError -> 422
    (includes optional `field`) and AppException -> 500.

    Parameters:
        app: The FastAPI application instance to which the exception handlers will be attached.
    """
    # Form exception handlers
    app.add_exception_handler(ValidationError, validation_error_handler)

    # Catch-all for unhandled application exceptions
    app.add_exception_handler(AppException, app_exception_handler)
