"""Handler for REST API call to render talking avatar video."""

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from client import ProxyHolder
from errors import ProxyError
from models.requests import TalkRequest
from models.responses import ErrorResponse, TalkResponse
from utils.endpoints import proxy_error_response, unexpected_error_response

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["talk"])


talk_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Video rendered",
        "model": TalkResponse,
    },
    400: {
        "description": "Missing or empty text",
        "model": ErrorResponse,
    },
    500: {
        "description": "Missing credentials or unexpected failure",
        "model": ErrorResponse,
    },
    502: {
        "description": "Avatar video service failed to create or render the video",
        "model": ErrorResponse,
    },
    504: {
        "description": "Video was not rendered in time",
        "model": ErrorResponse,
    },
}


@router.post("/talk", response_model=TalkResponse, responses=talk_responses)
async def talk_endpoint_handler(
    talk_request: TalkRequest,
) -> TalkResponse | JSONResponse:
    """
    Handle request to the /talk endpoint.

    Process POST requests with text to be spoken by the avatar. A rendering
    job is created and polled until the video is available.

    Returns:
        TalkResponse: Identifier of the rendering job and URL of the video.
    """
    logger.info("Request to /v1/talk endpoint")

    try:
        proxy = ProxyHolder().get_avatar_video_proxy()
        return await proxy.synthesize_video(
            talk_request.text,
            source_url=talk_request.source_url,
            voice_id=talk_request.voice_id,
        )
    except ProxyError as e:
        logger.warning("Unable to render video: %s", e)
        return proxy_error_response(e)
    # pylint: disable=broad-exception-caught
    except Exception as e:
        logger.exception("Request failed: %s", e)
        return unexpected_error_response(e)
