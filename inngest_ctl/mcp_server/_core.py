"""Core helpers: client caching, _call dispatcher, response contract, ID validation."""

from __future__ import annotations

from inngest_ctl import CliError, InngestClient, SetupError, config

_clients: dict[bool, InngestClient] = {}


def _get_client(dev: bool = False) -> InngestClient:
    """Return a cached InngestClient for the mode, creating one on first use."""
    if dev not in _clients:
        _clients[dev] = InngestClient(dev=dev)
    return _clients[dev]


def _contract_error(message: str, error_type: str = "error") -> dict:
    """Return a stable MCP error envelope with legacy compatibility fields."""
    return {
        "ok": False,
        "schema_version": config.CONTRACT_SCHEMA_VERSION,
        "type": error_type,  # legacy
        "error": message,  # legacy
        "error_detail": {
            "type": error_type,
            "message": message,
        },
    }


def _ensure_contract_dict(payload: dict) -> dict:
    """Add stable contract metadata to dict responses."""
    out = dict(payload)
    out.setdefault("schema_version", config.CONTRACT_SCHEMA_VERSION)
    if out.get("ok") is False:
        error_type = str(out.get("type", "error"))
        error_message = out.get("error", "Unknown error")
        if not isinstance(error_message, str):
            error_message = str(error_message)
            out["error"] = error_message
        out.setdefault("error_detail", {"type": error_type, "message": error_message})
        return out
    out.setdefault("ok", True)
    return out


def _finalize_tool_result(result):
    """Finalize tool response based on configured MCP response mode.

    Modes:
        - legacy (default): preserve existing top-level shapes; dicts gain
          contract metadata (ok/schema_version).
        - envelope: always return {"ok", "schema_version", "data"} for success.
    """
    if isinstance(result, dict):
        normalized = _ensure_contract_dict(result)
        if normalized.get("ok") is False:
            return normalized
        if config.MCP_RESPONSE_MODE == "envelope":
            data = dict(normalized)
            data.pop("ok", None)
            data.pop("schema_version", None)
            return {"ok": True, "schema_version": config.CONTRACT_SCHEMA_VERSION, "data": data}
        return normalized
    if config.MCP_RESPONSE_MODE == "envelope":
        return {"ok": True, "schema_version": config.CONTRACT_SCHEMA_VERSION, "data": result}
    return result


_ALLOWED_METHODS = {
    "send_event",
    "get_event",
    "list_events",
    "get_event_runs",
    "get_run",
    "get_run_jobs",
    "cancel_runs",
}


def _validate_id(value: str, field: str) -> str:
    """Validate that an ID is a non-empty string without path separators."""
    if not isinstance(value, str) or not value.strip() or "/" in value:
        raise CliError(f"{field} must be a non-empty ID string, got: {value!r}")
    return value.strip()


def _call(method_name: str, dev: bool = False, **kwargs):
    """Call an InngestClient method, converting exceptions to error dicts."""
    if method_name not in _ALLOWED_METHODS:
        return _contract_error(f"Unknown method: {method_name}", "error")
    try:
        client = _get_client(dev)
        return getattr(client, method_name)(**kwargs)
    except SetupError as e:
        return _contract_error(str(e), "setup")
    except CliError as e:
        return _contract_error(str(e), "error")
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}", "error")
