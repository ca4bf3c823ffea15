"""Unit tests checking ability to dump configuration."""

import json

from models.config import (
    AvatarConfiguration,
    Configuration,
    GenerationConfiguration,
)


def test_dump_configuration(tmp_path) -> None:
    """
    Test that the Configuration object can be serialized to a JSON file and
    that the resulting file contains all expected sections with secrets
    masked.
    """
    cfg = Configuration(
        name="test_name",
        generation=GenerationConfiguration(api_key="gemini-secret"),
        avatar=AvatarConfiguration(basic_auth="did-secret"),
    )
    dump_file = tmp_path / "test.json"
    cfg.dump(dump_file)

    with open(dump_file, "r", encoding="utf-8") as fin:
        content = json.load(fin)

    assert content["name"] == "test_name"
    assert "service" in content
    assert "generation" in content
    assert "reply_cache" in content
    assert "avatar" in content
    assert content["generation"]["api_key"] == "**********"
    assert content["avatar"]["basic_auth"] == "**********"
    assert content["avatar"]["api_key"] is None
    assert content["reply_cache"] == {"ttl": 300.0, "max_entries": None}

    raw = dump_file.read_text(encoding="utf-8")
    assert "gemini-secret" not in raw
    assert "did-secret" not in raw
