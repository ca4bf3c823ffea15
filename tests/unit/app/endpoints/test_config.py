"""Unit tests for the /config REST API endpoint."""

from typing import Any

import pytest
from fastapi import HTTPException, Request, status
from pytest_mock import MockerFixture

from app.endpoints.config import config_endpoint_handler
from configuration import AppConfig


@pytest.mark.asyncio
async def test_config_endpoint_handler_configuration_not_loaded(
    mocker: MockerFixture,
) -> None:
    """Test the config endpoint handler when configuration is not loaded."""
    # mock for missing configuration
    mocker.patch("app.endpoints.config.configuration", None)

    # HTTP request mock required by URL endpoint handler
    request = Request(
        scope={
            "type": "http",
        }
    )

    with pytest.raises(HTTPException) as exc_info:
        await config_endpoint_handler(request=request)
    assert exc_info.value.status_code == status.HTTP_503_SERVICE_UNAVAILABLE

    detail = exc_info.value.detail
    assert isinstance(detail, dict)
    assert detail["response"] == "Configuration is not loaded"


@pytest.mark.asyncio
async def test_config_endpoint_handler_configuration_loaded(
    mocker: MockerFixture,
) -> None:
    """Test the config endpoint handler when configuration is loaded."""
    # configuration to be loaded
    config_dict: dict[Any, Any] = {
        "name": "foo",
        "generation": {
            "api_key": "gemini-secret",
        },
        "avatar": {
            "basic_auth": "did-secret",
        },
    }
    cfg = AppConfig()
    cfg.init_from_dict(config_dict)
    mocker.patch("app.endpoints.config.configuration", cfg)

    request = Request(
        scope={
            "type": "http",
        }
    )
    response = await config_endpoint_handler(request=request)
    assert response is not None
    assert response == cfg.configuration

    dumped = response.model_dump_json()
    assert "gemini-secret" not in dumped
    assert "did-secret" not in dumped
