"""Integration tests for the /v1/talk endpoint."""

from typing import Any

from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from tests.integration.http_helpers import scripted_response


def test_talk_renders_video(
    test_client: TestClient, upstream: Any, mocker: MockerFixture
) -> None:
    """Test the whole create and poll flow with fallback to legacy endpoint.

    This integration test verifies:
    - Configured defaults for image and voice are used
    - API key from configuration is sent in x-api-key header
    - Submission falls back through tiers until the job is created
    - Job is polled until video is available
    """
    upstream.post.side_effect = [
        scripted_response(mocker, 404, {"message": "not found"}),
        scripted_response(mocker, 404, {"message": "not found"}),
        scripted_response(mocker, 201, {"id": "job123"}),
    ]
    upstream.get.side_effect = [
        scripted_response(mocker, 200, {"status": "started"}),
        scripted_response(
            mocker, 200, {"status": "done", "result_url": "https://x/y.mp4"}
        ),
    ]

    response = test_client.post("/v1/talk", json={"text": "Hi"})

    assert response.status_code == 200
    assert response.json() == {"id": "job123", "videoUrl": "https://x/y.mp4"}

    endpoints = [call.args[0] for call in upstream.post.call_args_list]
    assert endpoints == [
        "http://did.integration.test/v1/talks",
        "http://did.integration.test/v1/talks",
        "http://did.integration.test/talks",
    ]
    legacy_minimal = upstream.post.call_args_list[2].kwargs
    assert legacy_minimal["headers"]["x-api-key"] == "integration-did-key"
    assert legacy_minimal["json"]["source_url"] == (
        "http://images.integration.test/actor.jpg"
    )
    voice_payload = upstream.post.call_args_list[1].kwargs["json"]
    assert voice_payload["script"]["provider"]["voice_id"] == "en-US-TestNeural"
    assert upstream.get.call_count == 2


def test_talk_missing_text(test_client: TestClient, upstream: Any) -> None:
    """Test that request without text is refused without calling the service."""
    response = test_client.post("/v1/talk", json={"source_url": "https://a/b.jpg"})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing 'text'"}
    upstream.post.assert_not_called()


def test_talk_non_string_text(test_client: TestClient, upstream: Any) -> None:
    """Test that text which is not a string is refused like a missing one."""
    response = test_client.post("/v1/talk", json={"text": 123})

    assert response.status_code == 400
    assert response.json() == {"error": "Missing 'text'"}
    upstream.post.assert_not_called()


def test_talk_malformed_body(test_client: TestClient, upstream: Any) -> None:
    """Test that body which is not JSON is refused with the proxy error body."""
    response = test_client.post(
        "/v1/talk",
        content="text=Hello",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Missing 'text'"
    upstream.post.assert_not_called()


def test_talk_invalid_voice_id(test_client: TestClient, upstream: Any) -> None:
    """Test that invalid optional field is refused with HTTP 400."""
    response = test_client.post("/v1/talk", json={"text": "Hi", "voice_id": 5})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid request body"
    assert "voice_id" in body["detail"]
    upstream.post.assert_not_called()


def test_talk_processing_error(
    test_client: TestClient, upstream: Any, mocker: MockerFixture
) -> None:
    """Test that failed rendering is reported with job identifier."""
    upstream.post.side_effect = [scripted_response(mocker, 201, {"id": "job123"})]
    upstream.get.side_effect = [
        scripted_response(
            mocker, 200, {"status": "error", "error": "face not detected"}
        ),
    ]

    response = test_client.post("/v1/talk", json={"text": "Hi"})

    assert response.status_code == 502
    assert response.json() == {
        "error": "D-ID processing error",
        "detail": "face not detected",
        "id": "job123",
    }
