"""
Shared test fixtures for inngest-ctl tests.
Isolates config from the real .env and process environment.
"""

import json
from unittest.mock import MagicMock

import pytest

from inngest_ctl import config

_ENV_VARS = [
    config.SIGNING_KEY_VAR,
    config.EVENT_KEY_VAR,
    config.DEV_URL_VAR,
    "INNGEST_HTTP_LOG",
    "INNGEST_HTTP_LOG_SAMPLE_RATE",
    "INNGEST_MCP_RESPONSE_MODE",
]


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Every test starts with no credentials, no .env, and logging off."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "RUNTIME_VERBOSE", False)
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.setattr(config, "HTTP_LOG_SAMPLE_RATE", 1.0)
    monkeypatch.setattr(config, "MCP_RESPONSE_MODE", "legacy")


@pytest.fixture
def signing_key(monkeypatch):
    monkeypatch.setenv(config.SIGNING_KEY_VAR, "signkey-prod-abcdef123456")
    return "signkey-prod-abcdef123456"


@pytest.fixture
def event_key(monkeypatch):
    monkeypatch.setenv(config.EVENT_KEY_VAR, "evt-key-123")
    return "evt-key-123"


def _fake_response(payload, status=200, content_type="application/json"):
    raw = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
    resp = MagicMock()
    resp.status = status
    resp.headers = {"Content-Type": content_type}
    resp.read.return_value = raw
    resp.__enter__ = MagicMock(return_value=resp)
    resp.__exit__ = MagicMock(return_value=False)
    return resp


@pytest.fixture
def fake_response():
    """Factory for urlopen() context-manager results carrying a payload."""
    return _fake_response
