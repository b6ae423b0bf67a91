"""Tests for MCP server tool wrappers.

Mocks at InngestClient level. Verifies each tool calls the correct
client method and that errors are converted to contract dicts.
"""

import pytest

mcp_mod = pytest.importorskip("inngest_ctl.mcp_server", reason="mcp package not installed")

import importlib  # noqa: E402
from unittest.mock import MagicMock, patch  # noqa: E402

from inngest_ctl import config  # noqa: E402
from inngest_ctl.exceptions import CliError, NotFoundError, SetupError  # noqa: E402

_core = importlib.import_module("inngest_ctl.mcp_server._core")


@pytest.fixture(autouse=True)
def _reset_client_cache():
    """Reset the cached InngestClient instances between tests."""
    _core._clients.clear()
    yield
    _core._clients.clear()


def _mock_client(**method_returns):
    """Return a mock InngestClient whose methods return given values."""
    client = MagicMock()
    for name, val in method_returns.items():
        getattr(client, name).return_value = val
    return client


# ---------------------------------------------------------------------------
# Read tools
# ---------------------------------------------------------------------------


class TestReadTools:
    @patch("inngest_ctl.mcp_server._core.InngestClient")
    def test_get_event(self, MockClient):
        client = _mock_client(get_event={"id": "e1", "name": "a", "receivedAt": "x"})
        MockClient.return_value = client
        result = mcp_mod.get_event("e1")
        assert result["id"] == "e1"
        assert result["ok"] is True
        client.get_event.assert_called_once_with(event_id="e1")

    @patch("inngest_ctl.mcp_server._core.InngestClient")
    def test_list_events(self, MockClient):
        client = _mock_client(list_events={"events": [], "meta": {"total": 0}})
        MockClient.return_value = client
        result = mcp_mod.list_events(name="user.signup", limit=5)
        assert result["events"] == []
        client.list_events.assert_called_once_with(name="user.signup", limit=5)

    def test_list_events_bad_limit(self):
        result = mcp_mod.list_events(limit=0)
        assert result["ok"] is False
        assert "positive integer" in result["error"]

    @patch("inngest_ctl.mcp_server._core.InngestClient")
    def test_get_event_runs_list_passes_through(self, MockClient):
        MockClient.return_value = _mock_client(get_event_runs=[{"runId": "r1"}])
        assert mcp_mod.get_event_runs("e1") == [{"runId": "r1"}]

    @patch("inngest_ctl.mcp_server._core.InngestClient")
    def test_get_run(self, MockClient):
        client = _mock_client(get_run={"runId": "r1", "status": "Running", "functionId": "f"})
        MockClient.return_value = client
        assert mcp_mod.get_run("r1")["status"] == "Running"

    @patch("inngest_ctl.mcp_server._core.InngestClient")
    def test_get_run_jobs(self, MockClient):
        client = _mock_client(get_run_jobs=[])
        MockClient.return_value = client
        assert mcp_mod.get_run_jobs("r1") == []
        client.get_run_jobs.assert_called_once_with(run_id="r1")

    @pytest.mark.parametrize("bad", ["", "   ", "a/b"])
    def test_invalid_ids_rejected(self, bad):
        result = mcp_mod.get_run(bad)
        assert result["ok"] is False
        assert "run_id" in result["error"]

    @patch("inngest_ctl.mcp_server._core.InngestClient")
    def test_dev_mode_client(self, MockClient):
        MockClient.return_value = _mock_client(get_run_jobs=[])
        mcp_mod.get_run_jobs("r1", dev=True)
        MockClient.assert_called_once_with(dev=True)


# ---------------------------------------------------------------------------
# Write tools
# ---------------------------------------------------------------------------


class TestWriteTools:
    @patch("inngest_ctl.mcp_server._core.InngestClient")
    def test_send_event(self, MockClient):
        client = _mock_client(send_event={"ids": ["e1"], "status": 200})
        MockClient.return_value = client
        result = mcp_mod.send_event("user.signup", {"userId": "1"}, id="d1")
        assert result["ids"] == ["e1"]
        client.send_event.assert_called_once_with(
            name="user.signup", data={"userId": "1"}, id="d1", env=None
        )

    def test_send_event_requires_name(self):
        result = mcp_mod.send_event("", {})
        assert result["ok"] is False

    @patch("inngest_ctl.mcp_server._core.InngestClient")
    def test_cancel_runs(self, MockClient):
        client = _mock_client(cancel_runs={"cancelled": 3})
        MockClient.return_value = client
        result = mcp_mod.cancel_runs("app", "fn", "1h", "now")
        assert result["cancelled"] == 3
        client.cancel_runs.assert_called_once_with(
            app_id="app",
            function_id="fn",
            started_after="1h",
            started_before="now",
            if_expr=None,
        )

    @patch("inngest_ctl.mcp_server._core.InngestClient")
    def test_cancel_runs_bad_window_never_calls_client(self, MockClient):
        result = mcp_mod.cancel_runs("app", "fn", "yesterday", "now")
        assert result["ok"] is False
        assert "Invalid time format" in result["error"]
        MockClient.assert_not_called()


# ---------------------------------------------------------------------------
# Error conversion and response contract
# ---------------------------------------------------------------------------


class TestErrorHandling:
    @patch("inngest_ctl.mcp_server._core.InngestClient")
    def test_setup_error(self, MockClient):
        client = MagicMock()
        client.list_events.side_effect = SetupError("INNGEST_SIGNING_KEY missing")
        MockClient.return_value = client
        result = mcp_mod.list_events()
        assert result["ok"] is False
        assert result["type"] == "setup"
        assert result["error_detail"] == {"type": "setup", "message": "INNGEST_SIGNING_KEY missing"}

    @patch("inngest_ctl.mcp_server._core.InngestClient")
    def test_not_found(self, MockClient):
        client = MagicMock()
        client.get_run.side_effect = NotFoundError("Run not found: r1")
        MockClient.return_value = client
        result = mcp_mod.get_run("r1")
        assert result["type"] == "error"
        assert result["error"] == "Run not found: r1"

    @patch("inngest_ctl.mcp_server._core.InngestClient")
    def test_unexpected_error(self, MockClient):
        client = MagicMock()
        client.get_run.side_effect = RuntimeError("boom")
        MockClient.return_value = client
        assert mcp_mod.get_run("r1")["error"] == "Unexpected error: boom"

    def test_disallowed_method(self):
        result = mcp_mod._call("__init__")
        assert result["ok"] is False
        assert "Unknown method" in result["error"]

    def test_contract_error_shape(self):
        err = mcp_mod._contract_error("bad", "error")
        assert err == {
            "ok": False,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "type": "error",
            "error": "bad",
            "error_detail": {"type": "error", "message": "bad"},
        }

    def test_client_cached_per_mode(self):
        with patch("inngest_ctl.mcp_server._core.InngestClient") as MockClient:
            MockClient.side_effect = lambda dev: MagicMock(dev=dev)
            assert mcp_mod._get_client() is mcp_mod._get_client()
            assert mcp_mod._get_client(True) is not mcp_mod._get_client(False)
            assert MockClient.call_count == 2

    def test_validate_id(self):
        assert mcp_mod._validate_id(" r1 ", "run_id") == "r1"
        with pytest.raises(CliError):
            mcp_mod._validate_id("", "run_id")


class TestEnvelopeMode:
    def test_dict_wrapped(self, monkeypatch):
        monkeypatch.setattr(config, "MCP_RESPONSE_MODE", "envelope")
        result = mcp_mod._finalize_tool_result({"cancelled": 1})
        assert result == {
            "ok": True,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "data": {"cancelled": 1},
        }

    def test_list_wrapped(self, monkeypatch):
        monkeypatch.setattr(config, "MCP_RESPONSE_MODE", "envelope")
        assert mcp_mod._finalize_tool_result([])["data"] == []

    def test_errors_not_wrapped(self, monkeypatch):
        monkeypatch.setattr(config, "MCP_RESPONSE_MODE", "envelope")
        result = mcp_mod._finalize_tool_result(mcp_mod._contract_error("bad"))
        assert result["ok"] is False
        assert "data" not in result

    def test_legacy_adds_metadata(self):
        result = mcp_mod._finalize_tool_result({"cancelled": 1})
        assert result["ok"] is True
        assert result["schema_version"] == config.CONTRACT_SCHEMA_VERSION
        assert result["cancelled"] == 1


def test_tools_registered():
    assert mcp_mod.mcp.name == "inngest"
