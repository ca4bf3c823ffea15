"""Model with service configuration."""

import os
from typing import Optional

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    FilePath,
    PositiveFloat,
    PositiveInt,
    SecretStr,
    confloat,
    model_validator,
)
from typing_extensions import Self

import constants


def _first_env_value(names: list[str]) -> Optional[str]:
    """Return the first non-blank value of the named environment variables."""
    for name in names:
        value = os.environ.get(name)
        if value and value.strip():
            return value.strip()
    return None


def _secret_value(secret: Optional[SecretStr]) -> Optional[str]:
    """Return stripped secret value or None when it is not set or blank."""
    if secret is None:
        return None
    value = secret.get_secret_value().strip()
    return value or None


class ConfigurationBase(BaseModel):
    """Base class for all configuration models that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class TLSConfiguration(ConfigurationBase):
    """TLS configuration."""

    tls_certificate_path: Optional[FilePath] = None
    tls_key_path: Optional[FilePath] = None
    tls_key_password: Optional[FilePath] = None

    @model_validator(mode="after")
    def check_tls_configuration(self) -> Self:
        """Check that certificate and key are configured together."""
        if (self.tls_certificate_path is None) != (self.tls_key_path is None):
            raise ValueError(
                "Both tls_certificate_path and tls_key_path must be set to enable TLS"
            )
        return self


class CORSConfiguration(ConfigurationBase):
    """CORS configuration."""

    allow_origins: list[str] = [
        "*"
    ]  # not AnyHttpUrl: we need to support "*" that is not valid URL
    allow_credentials: bool = False
    allow_methods: list[str] = ["*"]
    allow_headers: list[str] = ["*"]

    @model_validator(mode="after")
    def check_cors_configuration(self) -> Self:
        """Check CORS configuration."""
        # credentials are not allowed with wildcard origins per CORS/Fetch spec.
        # see https://fastapi.tiangolo.com/tutorial/cors/
        if self.allow_credentials and "*" in self.allow_origins:
            raise ValueError(
                "Invalid CORS configuration: allow_credentials can not be set to true when "
                "allow origins contains '*' wildcard."
                "Use explicit origins or disable credential."
            )
        return self


class ServiceConfiguration(ConfigurationBase):
    """Service configuration."""

    host: str = "localhost"
    port: PositiveInt = 8080
    workers: PositiveInt = 1
    color_log: bool = True
    access_log: bool = True
    tls_config: TLSConfiguration = Field(default_factory=TLSConfiguration)
    cors: CORSConfiguration = Field(default_factory=CORSConfiguration)

    @model_validator(mode="after")
    def check_service_configuration(self) -> Self:
        """Check service configuration."""
        if self.port > 65535:
            raise ValueError("Port value should be less than 65536")
        return self


class GenerationConfiguration(ConfigurationBase):
    """Generative language service configuration.

    The API key can be set directly or read from the environment at call
    time. The explicit value has precedence over the environment variable.
    """

    url: AnyHttpUrl = AnyHttpUrl(constants.DEFAULT_GENERATION_URL)
    model: str = constants.DEFAULT_GENERATION_MODEL
    api_key: Optional[SecretStr] = None
    api_key_env: str = constants.DEFAULT_GENERATION_API_KEY_ENV
    system_prompt: Optional[str] = None
    temperature: confloat(ge=0.0, le=2.0) = constants.DEFAULT_TEMPERATURE  # type: ignore
    top_k: PositiveInt = constants.DEFAULT_TOP_K
    top_p: confloat(gt=0.0, le=1.0) = constants.DEFAULT_TOP_P  # type: ignore
    max_output_tokens: PositiveInt = constants.DEFAULT_MAX_OUTPUT_TOKENS
    timeout: PositiveInt = constants.DEFAULT_GENERATION_TIMEOUT

    def resolve_api_key(self) -> Optional[str]:
        """Return the API key to be used for the next call, if any."""
        return _secret_value(self.api_key) or _first_env_value([self.api_key_env])


class ReplyCacheConfiguration(ConfigurationBase):
    """Generated replies cache configuration.

    Entries are dropped only when they expire. Setting ``max_entries`` bounds
    the cache size, the least recently used entry is evicted then.
    """

    ttl: PositiveFloat = constants.DEFAULT_REPLY_CACHE_TTL
    max_entries: Optional[PositiveInt] = None


class AvatarConfiguration(ConfigurationBase):
    """Talking avatar video service configuration.

    Two authentication modes are supported: API key (sent in ``x-api-key``
    header) and Basic auth (sent in ``Authorization`` header). Both can be
    set directly or read from the environment at call time.
    """

    url: AnyHttpUrl = AnyHttpUrl(constants.DEFAULT_AVATAR_URL)
    api_key: Optional[SecretStr] = None
    api_key_env: list[str] = Field(
        default_factory=lambda: list(constants.DEFAULT_AVATAR_API_KEY_ENVS)
    )
    basic_auth: Optional[SecretStr] = None
    basic_auth_env: list[str] = Field(
        default_factory=lambda: list(constants.DEFAULT_AVATAR_BASIC_AUTH_ENVS)
    )
    default_source_url: str = constants.DEFAULT_SOURCE_URL
    default_voice_id: str = constants.DEFAULT_VOICE_ID
    voice_provider: str = constants.DEFAULT_VOICE_PROVIDER
    poll_interval: PositiveFloat = constants.DEFAULT_POLL_INTERVAL
    poll_timeout: PositiveFloat = constants.DEFAULT_POLL_TIMEOUT
    request_timeout: PositiveInt = constants.DEFAULT_AVATAR_REQUEST_TIMEOUT

    def resolve_api_key(self) -> Optional[str]:
        """Return the API key to be used for the next call, if any."""
        return _secret_value(self.api_key) or _first_env_value(self.api_key_env)

    def resolve_basic_auth(self) -> Optional[str]:
        """Return the Basic auth credential to be used for the next call, if any."""
        return _secret_value(self.basic_auth) or _first_env_value(
            self.basic_auth_env
        )


class Configuration(ConfigurationBase):
    """Global service configuration."""

    name: str
    service: ServiceConfiguration = Field(default_factory=ServiceConfiguration)
    generation: GenerationConfiguration = Field(
        default_factory=GenerationConfiguration
    )
    reply_cache: ReplyCacheConfiguration = Field(
        default_factory=ReplyCacheConfiguration
    )
    avatar: AvatarConfiguration = Field(default_factory=AvatarConfiguration)

    def dump(self, filename: str = "configuration.json") -> None:
        """Dump actual configuration into JSON file."""
        with open(filename, "w", encoding="utf-8") as fout:
            fout.write(self.model_dump_json(indent=4))
