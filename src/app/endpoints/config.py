"""Handler for REST API call to retrieve service configuration."""

import logging
from typing import Any

from fastapi import APIRouter, Request

from configuration import configuration
from models.config import Configuration
from utils.endpoints import check_configuration_loaded

logger = logging.getLogger(__name__)
router = APIRouter(tags=["config"])


get_config_responses: dict[int | str, dict[str, Any]] = {
    200: {
        "name": "foo bar baz",
        "service": {
            "host": "localhost",
            "port": 8080,
            "workers": 1,
            "color_log": True,
            "access_log": True,
            "tls_config": {
                "tls_certificate_path": None,
                "tls_key_path": None,
                "tls_key_password": None,
            },
        },
        "generation": {
            "url": "https://generativelanguage.googleapis.com/v1beta",
            "model": "gemini-2.0-flash-001",
            "api_key": "**********",
            "api_key_env": "GOOGLE_GENERATIVE_API_KEY",
        },
        "reply_cache": {
            "ttl": 300,
            "max_entries": None,
        },
        "avatar": {
            "url": "https://api.d-id.com/",
            "api_key": None,
            "basic_auth": "**********",
            "poll_interval": 1.2,
            "poll_timeout": 30,
        },
    },
    503: {
        "detail": {
            "response": "Configuration is not loaded",
        }
    },
}


@router.get("/config", responses=get_config_responses)
async def config_endpoint_handler(request: Request) -> Configuration:
    """
    Handle requests to the /config endpoint.

    Process GET requests to the /config endpoint and returns the
    current service configuration. Secrets are masked.

    Returns:
        Configuration: The loaded service configuration object.
    """
    # Nothing interesting in the request
    _ = request

    # ensure that configuration is loaded
    check_configuration_loaded(configuration)

    return configuration.configuration
