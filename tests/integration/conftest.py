"""Shared fixtures for integration tests."""

from pathlib import Path
from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

import constants
from client import ProxyHolder
from configuration import configuration


@pytest.fixture(autouse=True)
def reset_configuration_state() -> Generator:
    """Reset configuration state before each integration test.

    This autouse fixture ensures test independence by resetting the
    singleton configuration state before each test runs. This allows
    tests to verify both loaded and unloaded configuration states
    regardless of execution order.
    """
    # pylint: disable=protected-access
    configuration._configuration = None
    yield


@pytest.fixture(name="test_config", scope="function")
def test_config_fixture(monkeypatch: pytest.MonkeyPatch) -> Generator:
    """Load real configuration for integration tests.

    Credentials from the environment are removed so only the values from
    the configuration file are used.
    """
    for name in (
        "GOOGLE_GENERATIVE_API_KEY",
        "DID_API_KEY",
        "NEXT_PUBLIC_DID_API_KEY",
        "DID_BASIC_AUTH",
        constants.CONFIG_PATH_ENV,
    ):
        monkeypatch.delenv(name, raising=False)

    config_path = (
        Path(__file__).parent.parent / "configuration" / "voice-avatar-proxy.yaml"
    )
    assert config_path.exists(), f"Config file not found: {config_path}"

    # Load configuration
    configuration.load_configuration(str(config_path))

    yield configuration
    # Note: Cleanup is handled by the autouse reset_configuration_state fixture


@pytest.fixture(name="test_client")
def test_client_fixture(test_config: Any) -> Generator[TestClient, None, None]:
    """Run the application with its lifespan so proxy services are created."""
    _ = test_config
    from app.main import app  # pylint: disable=import-outside-toplevel

    with TestClient(app) as client:
        yield client


@pytest.fixture(name="fresh_reply_cache")
def fresh_reply_cache_fixture(test_client: TestClient) -> None:
    """Drop replies cached by previous tests."""
    _ = test_client
    # pylint: disable=protected-access
    cache = ProxyHolder()._reply_cache
    assert cache is not None
    cache.clear()


@pytest.fixture(name="upstream")
def upstream_fixture(mocker: MockerFixture) -> Any:
    """Replace outbound HTTP session; tests script post/get side effects."""
    session_class = mocker.patch("aiohttp.ClientSession")
    session = mocker.AsyncMock()
    session.__aenter__ = mocker.AsyncMock(return_value=session)
    session.__aexit__ = mocker.AsyncMock(return_value=None)
    session.post = mocker.MagicMock()
    session.get = mocker.MagicMock()
    session_class.return_value = session
    return session
