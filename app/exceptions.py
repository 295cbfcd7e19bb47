# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error body has the same shape: {"is_success": false, "error": "..."}.
# Internal details are logged, never returned to the caller.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_DATA_MESSAGE = "Invalid input: 'data' must be an array"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class TokenClassifierException(Exception):
    """
    Base exception for the Token Classifier API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "TOKEN_CLASSIFIER_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {
            "is_success": False,
            "error": self.message,
        }


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidInputError(TokenClassifierException):
    """Raised when the request body has no `data` array."""

    def __init__(self, message: str = INVALID_DATA_MESSAGE):
        super().__init__(
            message=message,
            code="INVALID_INPUT",
            status_code=400,
        )


class InternalServerError(TokenClassifierException):
    """Raised for unexpected failures; the message is always generic."""

    def __init__(self):
        super().__init__(
            message=INTERNAL_ERROR_MESSAGE,
            code="INTERNAL_ERROR",
            status_code=500,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def token_classifier_exception_handler(
    request: Request,
    exc: TokenClassifierException
) -> JSONResponse:
    """Convert TokenClassifierException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body validation errors.

    Missing `data`, non-array `data`, malformed JSON and non-object bodies
    all surface as the same 400 error.
    """
    problems = [(error.get("loc"), error.get("type")) for error in exc.errors()]
    logger.warning(f"Rejected {request.method} {request.url.path}: {problems}")
    return await token_classifier_exception_handler(request, InvalidInputError())


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Log unexpected exceptions and return a generic 500."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content=InternalServerError().to_dict()
    )
