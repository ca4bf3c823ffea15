"""Models for talking avatar rendering jobs."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

import constants
from log import get_logger

logger = get_logger(__name__)


class TalkStatus(str, Enum):
    """Status of a rendering job as observed by the poller."""

    PENDING = constants.TALK_STATUS_PENDING
    DONE = constants.TALK_STATUS_DONE
    ERROR = constants.TALK_STATUS_ERROR


class TalkJob(BaseModel):
    """Read-through view of a remote rendering job.

    Attributes:
        id: Identifier assigned by the rendering service.
        status: Normalized job status.
        raw_status: Status exactly as reported by the rendering service.
        result_url: URL of the rendered video, set only when done.
        error: Error detail, set only on error.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    status: TalkStatus = TalkStatus.PENDING
    raw_status: str = constants.TALK_STATUS_PENDING
    result_url: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def from_payload(cls, job_id: str, payload: dict[str, Any]) -> "TalkJob":
        """Build job view from status response payload.

        Statuses outside of the known vocabulary (e.g. ``created`` or
        ``started``) are treated as pending.
        """
        raw_status = str(payload.get("status") or "")
        try:
            status = TalkStatus(raw_status)
        except ValueError:
            logger.warning(
                "Unrecognized status '%s' of talk %s, treating it as pending",
                raw_status,
                job_id,
            )
            status = TalkStatus.PENDING

        error = payload.get("error")
        if error is not None and not isinstance(error, str):
            error = str(error)

        return cls(
            id=str(payload.get("id") or job_id),
            status=status,
            raw_status=raw_status,
            result_url=payload.get("result_url") or None,
            error=error,
        )


class AvatarCredentials(BaseModel):
    """Credentials for the rendering service.

    Exactly one authentication mode is used for a request; when both are
    available Basic auth wins.
    """

    api_key: Optional[str] = None
    basic_auth: Optional[str] = None

    @property
    def configured(self) -> bool:
        """Check if at least one authentication mode is available."""
        return bool(self.api_key or self.basic_auth)

    def headers(self) -> dict[str, str]:
        """Build request headers for the selected authentication mode."""
        headers = {"Content-Type": "application/json"}
        if self.basic_auth:
            value = self.basic_auth.strip()
            headers["Authorization"] = (
                value if value.startswith("Basic ") else f"Basic {value}"
            )
        elif self.api_key:
            headers["x-api-key"] = self.api_key.strip()
        return headers
