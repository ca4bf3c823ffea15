"""Utility functions for endpoint handlers."""

from typing import Any

from fastapi import HTTPException, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

import constants
from configuration import AppConfig
from errors import ProxyError, ValidationError
from log import get_logger

logger = get_logger(__name__)


def check_configuration_loaded(config: AppConfig) -> None:
    """
    Ensure the application configuration is loaded.

    Raises:
        HTTPException: HTTP 503 Service Unavailable with detail `{"response":
        "Configuration is not loaded"}` when configuration has not been loaded.
    """
    if config is None or not config.is_loaded():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"response": "Configuration is not loaded"},
        )


def proxy_error_response(error: ProxyError) -> JSONResponse:
    """Turn error raised by a proxy service into JSON response."""
    return JSONResponse(status_code=error.status_code, content=error.to_response())


def unexpected_error_response(error: Exception) -> JSONResponse:
    """Turn any other exception into generic failure response."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": constants.UNABLE_TO_PROCESS_RESPONSE, "detail": str(error)},
    )


def _concerns_text(error: dict[str, Any]) -> bool:
    """Check if validation error is about the body as a whole or its text."""
    loc = error.get("loc", ())
    return len(loc) < 2 or not isinstance(loc[1], str) or loc[1] == "text"


def request_body_error(exc: RequestValidationError) -> ValidationError:
    """Describe request body that could not be parsed as proxy error.

    Missing body, malformed JSON or a body that is not a JSON object is
    reported the same way as missing text.
    """
    errors = list(exc.errors())
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in errors
    )
    if all(_concerns_text(error) for error in errors):
        return ValidationError("Missing 'text'", detail=detail)
    return ValidationError("Invalid request body", detail=detail)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed bodies of proxy endpoints with 400 and error body.

    Other endpoints keep the default FastAPI validation response.
    """
    if request.url.path not in constants.PROXY_ENDPOINT_PATHS:
        return await request_validation_exception_handler(request, exc)
    error = request_body_error(exc)
    logger.warning("Invalid request to %s: %s", request.url.path, error.detail)
    return proxy_error_response(error)
