"""Configuration loader."""

import logging
from typing import Any, Optional

import yaml
from models.config import (
    AvatarConfiguration,
    Configuration,
    GenerationConfiguration,
    ReplyCacheConfiguration,
    ServiceConfiguration,
)


logger = logging.getLogger(__name__)


class LogicError(Exception):
    """Error in application logic."""


class AppConfig:
    """Singleton class to load and store the configuration."""

    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "AppConfig":
        """Create a new instance of the class."""
        if not isinstance(cls._instance, cls):
            cls._instance = super().__new__(cls, *args, **kwargs)
        return cls._instance

    def __init__(self) -> None:
        """Initialize the class instance."""
        self._configuration: Optional[Configuration] = None

    def load_configuration(self, filename: str) -> None:
        """Load configuration from YAML file."""
        with open(filename, encoding="utf-8") as fin:
            config_dict = yaml.safe_load(fin)
            self.init_from_dict(config_dict)
            # pydantic masks secrets in the representation
            logger.info("Loaded configuration: %s", self._configuration)

    def init_from_dict(self, config_dict: dict[Any, Any]) -> None:
        """Initialize configuration from a dictionary."""
        self._configuration = Configuration(**config_dict)

    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._configuration is not None

    @property
    def configuration(self) -> Configuration:
        """Return the whole configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration

    @property
    def service_configuration(self) -> ServiceConfiguration:
        """Return service configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.service

    @property
    def generation_configuration(self) -> GenerationConfiguration:
        """Return generative language service configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.generation

    @property
    def reply_cache_configuration(self) -> ReplyCacheConfiguration:
        """Return reply cache configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.reply_cache

    @property
    def avatar_configuration(self) -> AvatarConfiguration:
        """Return avatar video service configuration."""
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.avatar


configuration: AppConfig = AppConfig()
