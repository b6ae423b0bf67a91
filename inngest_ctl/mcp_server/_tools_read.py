"""Read tools: event and run queries (5 tools)."""

from __future__ import annotations

from inngest_ctl import CliError
from inngest_ctl.mcp_server._core import (
    _call,
    _contract_error,
    _finalize_tool_result,
    _validate_id,
)


def get_event(event_id: str, dev: bool = False) -> dict:
    """Get one event by ID.

    Returns:
        Dict with id, name, receivedAt, and optional data/user.
    """
    try:
        event_id = _validate_id(event_id, "event_id")
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), "error"))
    return _finalize_tool_result(_call("get_event", dev=dev, event_id=event_id))


def list_events(name: str | None = None, limit: int = 20, dev: bool = False) -> dict:
    """List recent events, newest first.

    Args:
        name: Only events with this exact name.
        limit: Max events to return (default 20).

    Returns:
        Dict with events (list) and meta ({fetchedAt, total}).
    """
    if limit <= 0:
        return _finalize_tool_result(_contract_error("limit must be a positive integer"))
    return _finalize_tool_result(_call("list_events", dev=dev, name=name, limit=limit))


def get_event_runs(event_id: str, dev: bool = False) -> dict:
    """List the function runs an event triggered (runId, status, functionId, timings)."""
    try:
        event_id = _validate_id(event_id, "event_id")
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), "error"))
    return _finalize_tool_result(_call("get_event_runs", dev=dev, event_id=event_id))


def get_run(run_id: str, dev: bool = False) -> dict:
    """Get run status: status, function, event, start/end timestamps, and output."""
    try:
        run_id = _validate_id(run_id, "run_id")
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), "error"))
    return _finalize_tool_result(_call("get_run", dev=dev, run_id=run_id))


def get_run_jobs(run_id: str, dev: bool = False) -> dict:
    """List a run's jobs (steps) with status, timings, output, and error."""
    try:
        run_id = _validate_id(run_id, "run_id")
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), "error"))
    return _finalize_tool_result(_call("get_run_jobs", dev=dev, run_id=run_id))


def register(mcp):
    """Register all read tools with the FastMCP instance."""
    mcp.tool()(get_event)
    mcp.tool()(list_events)
    mcp.tool()(get_event_runs)
    mcp.tool()(get_run)
    mcp.tool()(get_run_jobs)
