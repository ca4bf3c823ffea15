"""Errors raised by the proxy services.

Every error knows the HTTP status code it maps to and how to render itself
as the JSON body returned to the caller. The services raise them where the
problem is detected; endpoint handlers turn them into responses.
"""

from typing import Any, Optional


class ProxyError(Exception):
    """Base class for all errors reported by the proxy services."""

    status_code: int = 500

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        """Initialize the error with summary and optional diagnostic detail."""
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_response(self) -> dict[str, Any]:
        """Render the error as a response body."""
        body: dict[str, Any] = {"error": self.message}
        if self.detail is not None:
            body["detail"] = self.detail
        return body


class ValidationError(ProxyError):
    """Caller-supplied input fails a precondition."""

    status_code = 400


class ConfigurationError(ProxyError):
    """Required credential or setting is absent."""

    status_code = 500


class UpstreamError(ProxyError):
    """Remote service responded with a non-success status.

    Attributes:
        upstream_status: HTTP status returned by the remote service, if any.
        job_id: Identifier of the remote job the error relates to, if any.
    """

    status_code = 502

    def __init__(
        self,
        message: str,
        detail: Optional[str] = None,
        upstream_status: Optional[int] = None,
        job_id: Optional[str] = None,
    ) -> None:
        """Initialize the error with upstream diagnostics."""
        super().__init__(message, detail)
        self.upstream_status = upstream_status
        self.job_id = job_id

    def to_response(self) -> dict[str, Any]:
        """Render the error as a response body."""
        body = super().to_response()
        if self.upstream_status is not None:
            body["status"] = self.upstream_status
        if self.job_id is not None:
            body["id"] = self.job_id
        return body


class JobTimeoutError(ProxyError):
    """Remote job did not reach a terminal status before the deadline."""

    status_code = 504

    def __init__(self, message: str, job_id: str, last_status: str) -> None:
        """Initialize the error with the last known job state."""
        super().__init__(message)
        self.job_id = job_id
        self.last_status = last_status

    def to_response(self) -> dict[str, Any]:
        """Render the error as a response body."""
        body = super().to_response()
        body["id"] = self.job_id
        body["status"] = self.last_status
        return body
