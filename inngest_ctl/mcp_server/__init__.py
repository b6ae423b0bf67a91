"""MCP server exposing InngestClient methods as tools.

Package structure:
  __init__.py     — FastMCP init, register() calls, re-exports
  __main__.py     — ``python -m inngest_ctl.mcp_server`` entry point
  _core.py        — Client caching, _call dispatcher, response contract, ID validation
  _tools_read.py  — 5 event/run query tools
  _tools_write.py — 2 tools that send events or cancel runs

Run: python -m inngest_ctl.mcp_server
Requires: pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from inngest_ctl.mcp_server import _tools_read, _tools_write

mcp = FastMCP(
    "inngest",
    instructions=(
        "Inngest event and run tools. "
        "Pass dev=True to target the local dev server (no signing key needed). "
        "Cancellation windows accept ISO timestamps, 'now', or relative "
        "durations such as 30m, 1h, 2d. "
        "cancel_runs is irreversible; confirm the window with the user first."
    ),
)

for _mod in [_tools_read, _tools_write]:
    _mod.register(mcp)

# ---------------------------------------------------------------------------
# Re-exports (tests import via mcp_mod.xxx)
# ---------------------------------------------------------------------------

from inngest_ctl.mcp_server._core import (  # noqa: E402, F401
    _call,
    _contract_error,
    _ensure_contract_dict,
    _finalize_tool_result,
    _get_client,
    _validate_id,
)
from inngest_ctl.mcp_server._tools_read import (  # noqa: E402, F401
    get_event,
    get_event_runs,
    get_run,
    get_run_jobs,
    list_events,
)
from inngest_ctl.mcp_server._tools_write import (  # noqa: E402, F401
    cancel_runs,
    send_event,
)


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()
