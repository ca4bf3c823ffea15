"""Unit tests."""

from configuration import configuration  # noqa: F401

config_dict = {
    "name": "test",
    "service": {
        "host": "localhost",
        "port": 8080,
        "workers": 1,
        "color_log": True,
        "access_log": True,
    },
    "generation": {
        "api_key": "test-key",
        "url": "http://gemini.test.com:1234/v1beta",
        "model": "test-model",
    },
    "reply_cache": {
        "ttl": 300,
        "max_entries": 10,
    },
    "avatar": {
        "api_key": "did-test-key",
        "url": "http://did.test.com:1234",
    },
}

# NOTE: Configuration must be initialized before importing the app, since
# app.main reads service name and CORS settings during import time
configuration.init_from_dict(config_dict)
