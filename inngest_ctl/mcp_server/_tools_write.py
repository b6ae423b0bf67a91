"""Write tools: send events and cancel runs (2 tools)."""

from __future__ import annotations

from typing import Any

from inngest_ctl import CliError
from inngest_ctl.cancel import parse_time
from inngest_ctl.mcp_server._core import _call, _contract_error, _finalize_tool_result


def send_event(
    name: str,
    data: dict[str, Any],
    id: str | None = None,
    env: str | None = None,
    dev: bool = False,
) -> dict:
    """Send an event.

    Args:
        name: Event name, e.g. "user.signup".
        data: Event payload (JSON object).
        id: Optional deduplication ID.
        env: Optional branch environment name.

    Returns:
        Dict with ids (list of created event IDs) and status.
    """
    if not name or not name.strip():
        return _finalize_tool_result(_contract_error("name is required"))
    return _finalize_tool_result(_call("send_event", dev=dev, name=name, data=data, id=id, env=env))


def cancel_runs(
    app_id: str,
    function_id: str,
    started_after: str,
    started_before: str,
    if_expr: str | None = None,
    dev: bool = False,
) -> dict:
    """Cancel all runs of a function started inside a time window. Irreversible.

    Args:
        started_after/started_before: ISO timestamp, "now", or relative
            duration (30m, 1h, 2d).
        if_expr: Optional expression selecting which runs to cancel.

    Returns:
        Dict with cancelled (number of runs cancelled).
    """
    for field, value in (("app_id", app_id), ("function_id", function_id)):
        if not value:
            return _finalize_tool_result(_contract_error(f"{field} is required"))
    try:
        for bound in (started_after, started_before):
            parse_time(bound)
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e)))
    return _finalize_tool_result(
        _call(
            "cancel_runs",
            dev=dev,
            app_id=app_id,
            function_id=function_id,
            started_after=started_after,
            started_before=started_before,
            if_expr=if_expr,
        )
    )


def register(mcp):
    """Register all write tools with the FastMCP instance."""
    mcp.tool()(send_event)
    mcp.tool()(cancel_runs)
