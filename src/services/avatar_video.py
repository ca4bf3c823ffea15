"""Proxy for the talking avatar video API.

A video is rendered by a remote job. The job is created by the first
successful call of a submission cascade: deployments of the rendering
service differ both in the endpoint they expose and in the payload schema
they accept, so the cheapest and most likely combinations are tried first.
Once created, the job is polled until it is done, fails, or the deadline
passes.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import aiohttp

import constants
import metrics
from errors import ConfigurationError, JobTimeoutError, UpstreamError, ValidationError
from log import get_logger
from models.config import AvatarConfiguration
from models.responses import TalkResponse
from models.talk import AvatarCredentials, TalkJob, TalkStatus
from utils.timers import Sleeper

logger = get_logger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True)
class SubmissionAttempt:
    """One tier of the submission cascade."""

    tier: int
    name: str
    endpoint: str
    payload: dict[str, Any] = field(hash=False)


def build_minimal_payload(text: str, source_url: str) -> dict[str, Any]:
    """Build talk payload with script text and avatar image only."""
    return {
        "script": {
            "type": "text",
            "input": text,
        },
        "source_url": source_url,
    }


def build_voice_payload(
    text: str, source_url: str, voice_provider: str, voice_id: str
) -> dict[str, Any]:
    """Build talk payload with explicit voice provider block."""
    return {
        "script": {
            "type": "text",
            "input": text,
            "provider": {"type": voice_provider, "voice_id": voice_id},
        },
        "source_url": source_url,
    }


def build_submission_attempts(
    base_url: str,
    text: str,
    source_url: str,
    voice_id: str,
    voice_provider: str = constants.DEFAULT_VOICE_PROVIDER,
) -> list[SubmissionAttempt]:
    """Return the submission cascade in the order it has to be tried."""
    base_url = base_url.rstrip("/")
    modern = f"{base_url}{constants.TALKS_MODERN_PATH}"
    legacy = f"{base_url}{constants.TALKS_LEGACY_PATH}"
    minimal = build_minimal_payload(text, source_url)
    with_voice = build_voice_payload(text, source_url, voice_provider, voice_id)
    return [
        SubmissionAttempt(1, "modern endpoint, minimal payload", modern, minimal),
        SubmissionAttempt(2, "modern endpoint, voice payload", modern, with_voice),
        SubmissionAttempt(3, "legacy endpoint, minimal payload", legacy, minimal),
        SubmissionAttempt(4, "legacy endpoint, voice payload", legacy, with_voice),
    ]


def _is_success(status: int) -> bool:
    return 200 <= status < 300


class AvatarVideoProxy:
    """Render talking avatar videos.

    The clock and the sleeper factory are injectable, so the poll loop can
    be driven in tests without real elapsed time.
    """

    def __init__(
        self,
        config: AvatarConfiguration,
        clock: Clock = time.monotonic,
        sleeper_factory: Callable[[], Sleeper] = Sleeper,
    ) -> None:
        """Initialize the proxy with service configuration."""
        self.config = config
        self.clock = clock
        self.sleeper_factory = sleeper_factory

    @property
    def base_url(self) -> str:
        """Base URL of the rendering service."""
        return str(self.config.url).rstrip("/")

    def resolve_credentials(self) -> AvatarCredentials:
        """Read credentials from configuration.

        Raises:
            ConfigurationError: Neither API key nor Basic auth is available.
        """
        credentials = AvatarCredentials(
            api_key=self.config.resolve_api_key(),
            basic_auth=self.config.resolve_basic_auth(),
        )
        logger.info("D-ID auth present: %s", credentials.configured)
        if not credentials.configured:
            logger.error(
                "Missing D-ID credentials: set %s (API key) or %s (Basic auth)",
                " or ".join(self.config.api_key_env),
                " or ".join(self.config.basic_auth_env),
            )
            raise ConfigurationError(
                "Missing D-ID credentials",
                detail="Set DID_API_KEY or DID_BASIC_AUTH",
            )
        if credentials.api_key and credentials.basic_auth:
            logger.warning("Both D-ID API key and Basic auth are set, using Basic auth")
        return credentials

    async def synthesize_video(
        self,
        text: Any,
        source_url: Optional[str] = None,
        voice_id: Optional[str] = None,
    ) -> TalkResponse:
        """Create a talk job and wait until the video is rendered.

        Raises:
            ValidationError: The text is missing, blank or not a string.
            ConfigurationError: No credentials are available.
            UpstreamError: All submission tiers failed, a status poll failed,
                or the job finished with error.
            JobTimeoutError: The job was not finished before the deadline.
        """
        text = text.strip() if isinstance(text, str) else ""
        if not text:
            raise ValidationError("Missing 'text'")
        source_url = (source_url or "").strip() or self.config.default_source_url
        voice_id = (voice_id or "").strip() or self.config.default_voice_id

        headers = self.resolve_credentials().headers()
        attempts = build_submission_attempts(
            self.base_url, text, source_url, voice_id, self.config.voice_provider
        )

        started_at = self.clock()
        timeout = aiohttp.ClientTimeout(total=self.config.request_timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            logger.info(
                "Creating D-ID talk with text: %s...",
                text[: constants.LOGGED_TEXT_PREFIX_LENGTH],
            )
            job_id = await self.submit(session, headers, attempts)
            logger.info("D-ID talk created with ID: %s", job_id)
            job = await self.wait_for_result(session, headers, job_id, started_at)

        # wait_for_result returns only finished jobs with result URL
        return TalkResponse(id=job_id, videoUrl=job.result_url or "")

    async def submit(
        self,
        session: aiohttp.ClientSession,
        headers: dict[str, str],
        attempts: list[SubmissionAttempt],
    ) -> str:
        """Create the talk job using the first tier that succeeds.

        Failures of all but the last tier are only logged.
        """
        last_status: Optional[int] = None
        last_detail = ""
        for attempt in attempts:
            async with session.post(
                attempt.endpoint, headers=headers, json=attempt.payload
            ) as resp:
                if _is_success(resp.status):
                    data = await resp.json(content_type=None)
                    job_id = data.get("id") if isinstance(data, dict) else None
                    if job_id:
                        metrics.talk_submission_attempts_total.labels(
                            attempt.tier, "success"
                        ).inc()
                        return str(job_id)
                    last_status = resp.status
                    last_detail = f"response without job id: {data}"
                else:
                    last_status = resp.status
                    last_detail = await resp.text()
            metrics.talk_submission_attempts_total.labels(
                attempt.tier, "failure"
            ).inc()
            logger.warning(
                "D-ID %s failed (tier %d, status %s): %s",
                attempt.name,
                attempt.tier,
                last_status,
                last_detail,
            )

        raise UpstreamError(
            "D-ID create error", detail=last_detail, upstream_status=last_status
        )

    async def fetch_status(
        self, session: aiohttp.ClientSession, headers: dict[str, str], job_id: str
    ) -> TalkJob:
        """Poll job status once, retrying immediately on the legacy endpoint."""
        endpoints = [
            ("modern", f"{self.base_url}{constants.TALKS_MODERN_PATH}/{job_id}"),
            ("legacy", f"{self.base_url}{constants.TALKS_LEGACY_PATH}/{job_id}"),
        ]
        status: Optional[int] = None
        detail = ""
        for name, url in endpoints:
            async with session.get(url, headers=headers) as resp:
                status = resp.status
                if _is_success(status):
                    data = await resp.json(content_type=None)
                    metrics.talk_status_polls_total.labels(name, "success").inc()
                    return TalkJob.from_payload(
                        job_id, data if isinstance(data, dict) else {}
                    )
                detail = await resp.text()
            metrics.talk_status_polls_total.labels(name, "failure").inc()
            logger.warning("D-ID %s status failed (%s): %s", name, status, detail)

        raise UpstreamError(
            "D-ID status error", detail=detail, upstream_status=status, job_id=job_id
        )

    async def wait_for_result(
        self,
        session: aiohttp.ClientSession,
        headers: dict[str, str],
        job_id: str,
        started_at: float,
    ) -> TalkJob:
        """Poll the job until it is done, fails, or the deadline passes."""
        sleeper = self.sleeper_factory()
        last_status = constants.TALK_STATUS_PENDING
        deadline = started_at + self.config.poll_timeout
        while self.clock() < deadline:
            job = await self.fetch_status(session, headers, job_id)
            last_status = job.raw_status or last_status
            if job.status is TalkStatus.DONE and job.result_url:
                metrics.talk_jobs_total.labels("done").inc()
                return job
            if job.status is TalkStatus.ERROR:
                metrics.talk_jobs_total.labels("error").inc()
                logger.error("D-ID processing error of talk %s: %s", job_id, job.error)
                raise UpstreamError(
                    "D-ID processing error", detail=job.error, job_id=job_id
                )
            remaining = deadline - self.clock()
            if remaining <= 0:
                break
            # never sleep past the deadline
            await sleeper.sleep(min(self.config.poll_interval, remaining))

        metrics.talk_jobs_total.labels("timeout").inc()
        logger.warning(
            "Timeout waiting for talk %s, last status: %s", job_id, last_status
        )
        raise JobTimeoutError(
            "Timeout waiting for video", job_id=job_id, last_status=last_status
        )
