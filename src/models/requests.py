"""Models for REST API requests."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """Model representing a request for a generated reply.

    Attributes:
        text: The user utterance, typically a speech transcript.

    The text accepts any JSON value so that a missing, blank or non-string
    utterance is reported by the service itself with its own error body.

    Example:
        ```python
        generate_request = GenerateRequest(text="What is the capital of France?")
        ```
    """

    text: Any = Field(
        None,
        description="The user utterance",
        examples=["What is the capital of France?"],
    )

    # provides examples for /docs endpoint
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "text": "What is the capital of France?",
                },
            ]
        },
    }


class TalkRequest(BaseModel):
    """Model representing a request for a talking avatar video.

    Attributes:
        text: The text the avatar should speak.
        source_url: The optional URL of the avatar image.
        voice_id: The optional voice identifier.

    Example:
        ```python
        talk_request = TalkRequest(text="Hello there", voice_id="en-US-JennyNeural")
        ```
    """

    text: Any = Field(
        None,
        description="The text the avatar should speak",
        examples=["Hello, nice to meet you!"],
    )

    source_url: Optional[str] = Field(
        None,
        description="The optional URL of the avatar image",
        examples=["https://create-images-results.d-id.com/DefaultImages/actor.jpg"],
    )

    voice_id: Optional[str] = Field(
        None,
        description="The optional voice identifier",
        examples=["en-US-JennyNeural", "en-GB-RyanNeural"],
    )

    # provides examples for /docs endpoint
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "text": "Hello, nice to meet you!",
                },
                {
                    "text": "Hello, nice to meet you!",
                    "source_url": "https://example.com/avatar.jpg",
                    "voice_id": "en-GB-RyanNeural",
                },
            ]
        },
    }
