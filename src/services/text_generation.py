"""Proxy for the generative language API with reply caching."""

from typing import Any, Optional

import aiohttp

import metrics
from cache.reply_cache import ReplyCache, normalize_key
from constants import DEFAULT_SYSTEM_PROMPT
from errors import ConfigurationError, UpstreamError, ValidationError
from log import get_logger
from models.config import GenerationConfiguration
from models.responses import GenerateResponse

logger = get_logger(__name__)


def build_prompt(user_text: str, system_prompt: Optional[str] = None) -> str:
    """Concatenate the system instruction with the user utterance."""
    instruction = system_prompt or DEFAULT_SYSTEM_PROMPT
    return f"{instruction} User said: '{user_text}'"


def build_request_payload(
    prompt: str, config: GenerationConfiguration
) -> dict[str, Any]:
    """Build request body for the generateContent call."""
    return {
        "contents": [
            {
                "role": "user",
                "parts": [{"text": prompt}],
            }
        ],
        "generationConfig": {
            "temperature": config.temperature,
            "topK": config.top_k,
            "topP": config.top_p,
            "maxOutputTokens": config.max_output_tokens,
        },
    }


def extract_reply(data: Any) -> str:
    """Return text of the first candidate, or empty string if there is none.

    Never raises: missing or malformed parts of the response are treated as
    an empty reply.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


class TextGenerationProxy:
    """Generate replies to user utterances, serving repeated ones from cache."""

    def __init__(self, config: GenerationConfiguration, cache: ReplyCache) -> None:
        """Initialize the proxy with service configuration and shared cache."""
        self.config = config
        self.cache = cache

    @property
    def endpoint(self) -> str:
        """URL of the generateContent call for the configured model."""
        base_url = str(self.config.url).rstrip("/")
        return f"{base_url}/models/{self.config.model}:generateContent"

    async def generate(self, user_text: Any) -> GenerateResponse:
        """Return reply to the user utterance.

        Raises:
            ValidationError: The utterance is missing, blank or not a string.
            ConfigurationError: No API key is available.
            UpstreamError: The model responded with a non-success status.
        """
        text = user_text.strip() if isinstance(user_text, str) else ""
        if not text:
            raise ValidationError("Missing 'text'")

        api_key = self.config.resolve_api_key()
        if not api_key:
            logger.error(
                "Missing generative language API key, set %s", self.config.api_key_env
            )
            raise ConfigurationError(f"Missing {self.config.api_key_env}")

        key = normalize_key(text)
        cached = self.cache.entry(key)
        if cached is not None:
            logger.debug(
                "Reply cache hit, reply is %.1f seconds old",
                self.cache.clock() - cached.created_at,
            )
            metrics.reply_cache_hits_total.inc()
            return GenerateResponse(reply=cached.value)
        metrics.reply_cache_misses_total.inc()

        reply = await self._call_model(text, api_key)
        self.cache.put(key, reply)
        return GenerateResponse(reply=reply)

    async def _call_model(self, text: str, api_key: str) -> str:
        """Submit the prompt to the model and return the generated text."""
        payload = build_request_payload(
            build_prompt(text, self.config.system_prompt), self.config
        )
        metrics.llm_calls_total.labels(self.config.model).inc()
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(
                self.endpoint, params={"key": api_key}, json=payload
            ) as resp:
                if not 200 <= resp.status < 300:
                    body = await resp.text()
                    logger.error("Gemini API error: %s %s", resp.status, body)
                    metrics.llm_calls_failures_total.inc()
                    raise UpstreamError(
                        "Gemini API error", detail=body, upstream_status=resp.status
                    )
                data = await resp.json(content_type=None)
        return extract_reply(data)
