"""Error handling for the HTTP layer."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from agentstudio.models.errors import (
    ConfigurationError,
    ErrorResponse,
    StudioError,
    ValidationError,
)

logger = logging.getLogger(__name__)


async def studio_error_handler(request: Request, exc: StudioError) -> JSONResponse:
    """Handle StudioError exceptions raised outside a pipeline run."""
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    response = ErrorResponse.from_exception(exc, guidance=get_guidance(type(exc).__name__))
    return JSONResponse(
        status_code=get_status_code(type(exc).__name__),
        content=response.model_dump(),
    )


def get_status_code(error_type: str | None) -> int:
    """Map error type name to HTTP status code."""
    if error_type == ValidationError.__name__:
        return 400
    return 500


def get_guidance(error_type: str | None) -> str:
    if error_type == ValidationError.__name__:
        return "Check the request fields and their length limits."
    if error_type == ConfigurationError.__name__:
        return "Set the missing credentials in the environment and restart."
    return "Please try again or contact support."
