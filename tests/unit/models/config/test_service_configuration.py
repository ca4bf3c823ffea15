"""Unit tests for ServiceConfiguration, TLSConfiguration and CORSConfiguration models."""

from pathlib import Path

import pytest

from pydantic import ValidationError

from models.config import CORSConfiguration, ServiceConfiguration, TLSConfiguration


def test_service_configuration_constructor() -> None:
    """
    Verify that the ServiceConfiguration constructor sets default
    values for all fields.
    """
    s = ServiceConfiguration()
    assert s is not None

    assert s.host == "localhost"
    assert s.port == 8080
    assert s.workers == 1
    assert s.color_log is True
    assert s.access_log is True
    assert s.tls_config == TLSConfiguration()
    assert s.cors == CORSConfiguration()


def test_service_configuration_port_value() -> None:
    """Test the ServiceConfiguration port value validation."""
    with pytest.raises(ValidationError, match="Input should be greater than 0"):
        ServiceConfiguration(port=-1)

    with pytest.raises(ValueError, match="Port value should be less than 65536"):
        ServiceConfiguration(port=100000)


def test_service_configuration_workers_value() -> None:
    """Test the ServiceConfiguration workers value validation."""
    with pytest.raises(ValidationError, match="Input should be greater than 0"):
        ServiceConfiguration(workers=-1)


def test_service_configuration_unknown_field() -> None:
    """Test that unknown fields are rejected."""
    with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
        ServiceConfiguration(auth_enabled=True)


def test_tls_configuration(tmp_path: Path) -> None:
    """Test the TLS configuration with existing files."""
    certificate = tmp_path / "server.crt"
    key = tmp_path / "server.key"
    certificate.write_text("certificate")
    key.write_text("key")

    cfg = ServiceConfiguration(
        tls_config=TLSConfiguration(tls_certificate_path=certificate, tls_key_path=key)
    )
    assert cfg.tls_config.tls_certificate_path == certificate
    assert cfg.tls_config.tls_key_path == key
    assert cfg.tls_config.tls_key_password is None


def test_tls_configuration_wrong_certificate_path(tmp_path: Path) -> None:
    """Test the TLS configuration loading when some path is broken."""
    with pytest.raises(ValidationError, match="Path does not point to a file"):
        TLSConfiguration(
            tls_certificate_path=tmp_path / "missing.crt",
            tls_key_path=tmp_path / "missing.key",
        )


def test_tls_configuration_key_without_certificate(tmp_path: Path) -> None:
    """Test that key and certificate must be configured together."""
    key = tmp_path / "server.key"
    key.write_text("key")
    with pytest.raises(ValueError, match="Both tls_certificate_path and tls_key_path"):
        TLSConfiguration(tls_key_path=key)


def test_cors_default_configuration() -> None:
    """Test the CORS configuration."""
    cfg = CORSConfiguration()
    assert cfg.allow_origins == ["*"]
    assert cfg.allow_credentials is False
    assert cfg.allow_methods == ["*"]
    assert cfg.allow_headers == ["*"]


def test_cors_custom_configuration() -> None:
    """Test the CORS configuration with explicit origins and credentials."""
    cfg = CORSConfiguration(
        allow_origins=["http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["POST"],
        allow_headers=["Content-Type"],
    )
    assert cfg.allow_origins == ["http://localhost:3000"]
    assert cfg.allow_credentials is True


def test_cors_improper_configuration() -> None:
    """Test that credentials can not be allowed for wildcard origin."""
    with pytest.raises(ValueError, match="Invalid CORS configuration"):
        CORSConfiguration(allow_origins=["*"], allow_credentials=True)
