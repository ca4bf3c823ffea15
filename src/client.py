"""Proxy services retrieval."""

import logging

from typing import Optional

from cache.reply_cache import ReplyCache
from models.config import Configuration
from services.avatar_video import AvatarVideoProxy
from services.text_generation import TextGenerationProxy
from utils.types import Singleton


logger = logging.getLogger(__name__)


class ProxyHolder(metaclass=Singleton):
    """Container for initialised proxy services.

    The reply cache lives here so it is shared by all requests handled by
    the process.
    """

    _reply_cache: Optional[ReplyCache] = None
    _text_generation: Optional[TextGenerationProxy] = None
    _avatar_video: Optional[AvatarVideoProxy] = None

    def load(self, config: Configuration) -> None:
        """Create proxy services according to configuration."""
        logger.info(
            "Using generation model %s, replies cached for %s seconds",
            config.generation.model,
            config.reply_cache.ttl,
        )
        self._reply_cache = ReplyCache(
            ttl=config.reply_cache.ttl, max_entries=config.reply_cache.max_entries
        )
        self._text_generation = TextGenerationProxy(
            config.generation, self._reply_cache
        )
        logger.info("Using avatar video service at %s", config.avatar.url)
        self._avatar_video = AvatarVideoProxy(config.avatar)

    def is_loaded(self) -> bool:
        """Check if proxy services have been initialised."""
        return self._text_generation is not None and self._avatar_video is not None

    def get_text_generation_proxy(self) -> TextGenerationProxy:
        """Return an initialised TextGenerationProxy."""
        if not self._text_generation:
            raise RuntimeError(
                "TextGenerationProxy has not been initialised. Ensure 'load(..)' has been called."
            )
        return self._text_generation

    def get_avatar_video_proxy(self) -> AvatarVideoProxy:
        """Return an initialised AvatarVideoProxy."""
        if not self._avatar_video:
            raise RuntimeError(
                "AvatarVideoProxy has not been initialised. Ensure 'load(..)' has been called."
            )
        return self._avatar_video
