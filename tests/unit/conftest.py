"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import pytest

from models.config import AvatarConfiguration, GenerationConfiguration
from tests.unit.utils.http_helpers import FakeClock, FakeSleeper


@pytest.fixture(name="fake_clock", scope="function")
def fake_clock_fixture():
    """Clock that is moved explicitly by tests."""
    return FakeClock(now=1000.0)


@pytest.fixture(name="fake_sleeper", scope="function")
def fake_sleeper_fixture(fake_clock):
    """Sleeper that advances the fake clock instead of waiting."""
    return FakeSleeper(fake_clock)


@pytest.fixture(name="generation_config", scope="function")
def generation_config_fixture(monkeypatch):
    """Generative language configuration with explicit API key."""
    monkeypatch.delenv("GOOGLE_GENERATIVE_API_KEY", raising=False)
    return GenerationConfiguration(
        url="http://gemini.test.com/v1beta",
        model="test-model",
        api_key="test-key",
    )


@pytest.fixture(name="avatar_config", scope="function")
def avatar_config_fixture(monkeypatch):
    """Avatar service configuration with explicit API key and no env credentials."""
    for name in ("DID_API_KEY", "NEXT_PUBLIC_DID_API_KEY", "DID_BASIC_AUTH"):
        monkeypatch.delenv(name, raising=False)
    return AvatarConfiguration(
        url="http://did.test.com",
        api_key="did-key",
    )
