"""Handler for REST API call to generate reply to user utterance."""

import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from client import ProxyHolder
from errors import ProxyError
from models.requests import GenerateRequest
from models.responses import ErrorResponse, GenerateResponse
from utils.endpoints import proxy_error_response, unexpected_error_response

logger = logging.getLogger("app.endpoints.handlers")
router = APIRouter(tags=["generate"])


generate_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "description": "Reply generated by the model or served from cache",
        "model": GenerateResponse,
    },
    400: {
        "description": "Missing or empty text",
        "model": ErrorResponse,
    },
    500: {
        "description": "Missing API key or unexpected failure",
        "model": ErrorResponse,
    },
    502: {
        "description": "Generative language API responded with error",
        "model": ErrorResponse,
    },
}


@router.post("/generate", response_model=GenerateResponse, responses=generate_responses)
async def generate_endpoint_handler(
    generate_request: GenerateRequest,
) -> GenerateResponse | JSONResponse:
    """
    Handle request to the /generate endpoint.

    Process POST requests with user utterance and return reply generated by
    the language model. Replies to utterances seen recently are served from
    cache without calling the model.

    Returns:
        GenerateResponse: The generated reply.
    """
    logger.info("Request to /v1/generate endpoint")

    try:
        proxy = ProxyHolder().get_text_generation_proxy()
        return await proxy.generate(generate_request.text)
    except ProxyError as e:
        logger.warning("Unable to generate reply: %s", e)
        return proxy_error_response(e)
    # pylint: disable=broad-exception-caught
    except Exception as e:
        logger.exception("Request failed: %s", e)
        return unexpected_error_response(e)
