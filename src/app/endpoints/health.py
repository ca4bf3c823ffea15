"""Handlers for health REST API endpoints.

These endpoints are used to check if service is live and prepared to accept
requests. Note that these endpoints can be accessed using GET or HEAD HTTP
methods. For HEAD HTTP method, just the HTTP response code is used.
"""

import logging
from typing import Any

from fastapi import APIRouter, status, Response

from client import ProxyHolder
from configuration import configuration
from models.responses import LivenessResponse, ReadinessResponse

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["health"])


def check_readiness() -> tuple[bool, str]:
    """
    Check that configuration is loaded and proxy services are initialised.

    Returns:
        tuple[bool, str]: (is_ready, detailed_reason)
    """
    if not configuration.is_loaded():
        return False, "Configuration not loaded"
    if not ProxyHolder().is_loaded():
        return False, "Proxy services not initialized"
    return True, "Service is ready"


get_readiness_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Service is ready",
        "model": ReadinessResponse,
    },
    503: {
        "description": "Service is not ready",
        "model": ReadinessResponse,
    },
}


@router.get("/readiness", responses=get_readiness_responses)
async def readiness_probe_get_method(
    response: Response,
) -> ReadinessResponse:
    """
    Return the readiness status of the service.

    Upstream services are not contacted; they are checked lazily by the
    proxy endpoints, which report their failures on their own.

    Returns 200 when ready, 503 otherwise.
    """
    logger.info("Response to /readiness endpoint")

    ready, reason = check_readiness()
    if not ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(ready=ready, reason=reason)


get_liveness_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Service is alive",
        "model": LivenessResponse,
    },
    # HTTP_503_SERVICE_UNAVAILABLE will never be returned when unreachable
}


@router.get("/liveness", responses=get_liveness_responses)
async def liveness_probe_get_method() -> LivenessResponse:
    """
    Return the liveness status of the service.

    Returns:
        LivenessResponse: Indicates that the service is alive.
    """
    logger.info("Response to /liveness endpoint")

    return LivenessResponse(alive=True)
