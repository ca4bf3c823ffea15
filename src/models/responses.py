"""Models for REST API responses."""

from typing import Optional, Union

from pydantic import BaseModel, Field


class GenerateResponse(BaseModel):
    """Model representing a generated reply.

    Attributes:
        reply: Text generated by the language model.

    Example:
        ```python
        generate_response = GenerateResponse(reply="Paris is the capital of France.")
        ```
    """

    reply: str = Field(
        description="Text generated by the language model",
        examples=["Paris is the capital of France."],
    )

    # provides examples for /docs endpoint
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "reply": "Paris is the capital of France.",
                }
            ]
        }
    }


class TalkResponse(BaseModel):
    """Model representing a rendered talking avatar video.

    Attributes:
        id: Identifier of the rendering job.
        videoUrl: URL of the rendered video.
    """

    id: str = Field(
        description="Identifier of the rendering job",
        examples=["tlk_B5ZXjhhBAGUB4zQJfSiSz"],
    )

    videoUrl: str = Field(  # pylint: disable=invalid-name
        description="URL of the rendered video",
        examples=["https://d-id-talks-prod.s3.us-west-2.amazonaws.com/result.mp4"],
    )

    # provides examples for /docs endpoint
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "tlk_B5ZXjhhBAGUB4zQJfSiSz",
                    "videoUrl": "https://d-id-talks-prod.s3.us-west-2.amazonaws.com/result.mp4",
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Model representing error response for the proxy endpoints."""

    error: str = Field(
        description="Human readable summary of the error",
        examples=["Missing 'text'", "Gemini API error", "Timeout waiting for video"],
    )

    detail: Optional[str] = Field(
        None,
        description="Diagnostic detail, like raw upstream error body",
        examples=['{"error": {"code": 429, "message": "Resource exhausted"}}'],
    )

    status: Optional[Union[int, str]] = Field(
        None,
        description="Upstream HTTP status or last seen job status",
        examples=[429, "pending"],
    )

    id: Optional[str] = Field(
        None,
        description="Identifier of the rendering job the error relates to",
        examples=["tlk_B5ZXjhhBAGUB4zQJfSiSz"],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"error": "Missing 'text'"},
                {
                    "error": "Gemini API error",
                    "detail": '{"error": {"code": 429}}',
                    "status": 429,
                },
                {
                    "error": "Timeout waiting for video",
                    "id": "tlk_B5ZXjhhBAGUB4zQJfSiSz",
                    "status": "started",
                },
            ]
        }
    }


class InfoResponse(BaseModel):
    """Model representing a response to an info request.

    Attributes:
        name: Service name.
        service_version: Service version.

    Example:
        ```python
        info_response = InfoResponse(
            name="Voice Avatar Proxy",
            service_version="0.1.0",
        )
        ```
    """

    name: str = Field(
        description="Service name",
        examples=["Voice Avatar Proxy"],
    )

    service_version: str = Field(
        description="Service version",
        examples=["0.1.0", "0.2.0", "1.0.0"],
    )

    # provides examples for /docs endpoint
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Voice Avatar Proxy",
                    "service_version": "0.1.0",
                }
            ]
        }
    }


class ReadinessResponse(BaseModel):
    """Model representing response to a readiness request.

    Attributes:
        ready: If service is ready.
        reason: The reason for the readiness.

    Example:
        ```python
        readiness_response = ReadinessResponse(
            ready=False,
            reason="Configuration not loaded",
        )
        ```
    """

    ready: bool = Field(
        ...,
        description="Flag indicating if service is ready",
        examples=[True, False],
    )

    reason: str = Field(
        ...,
        description="The reason for the readiness",
        examples=["Service is ready"],
    )

    # provides examples for /docs endpoint
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "ready": True,
                    "reason": "Service is ready",
                }
            ]
        }
    }


class LivenessResponse(BaseModel):
    """Model representing a response to a liveness request.

    Attributes:
        alive: If app is alive.

    Example:
        ```python
        liveness_response = LivenessResponse(alive=True)
        ```
    """

    alive: bool = Field(
        ...,
        description="Flag indicating that the app is alive",
        examples=[True, False],
    )

    # provides examples for /docs endpoint
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "alive": True,
                }
            ]
        }
    }
