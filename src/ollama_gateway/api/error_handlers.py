"""
FastAPI exception handlers for structured error responses.

Outcomes of the ask pipeline are mapped by RequestHandler itself; these
handlers cover what fails before or around it.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ollama_gateway.api.models import ErrorResponse

logger = logging.getLogger(__name__)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle missing or malformed query parameters (e.g., no `prompt`).
    
    Maps to 400 Bad Request with a generic message.
    
    Args:
        request: FastAPI request
        exc: RequestValidationError instance
    
    Returns:
        JSON error response
    """
    logger.warning(
        "Invalid request parameters",
        extra={"errors": exc.errors(), "path": request.url.path},
    )
    
    body = ErrorResponse(
        error="Invalid parameter",
        message="Please check your input parameters",
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.
    
    Maps to 500 Internal Server Error.
    
    Args:
        request: FastAPI request
        exc: Exception instance
    
    Returns:
        JSON error response
    """
    logger.exception(
        "Unexpected error",
        extra={"error_type": type(exc).__name__},
    )
    
    body = ErrorResponse(
        error="Error processing your request",
        message=str(exc) or "An unexpected error occurred",
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    RequestValidationError: request_validation_error_handler,
    Exception: generic_error_handler,
}
