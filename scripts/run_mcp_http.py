"""Serve the inngest-ctl MCP tools over streamable HTTP instead of stdio."""

import os

from inngest_ctl.mcp_server import mcp

if __name__ == "__main__":
    mcp.settings.host = os.environ.get("INNGEST_MCP_HTTP_HOST", "127.0.0.1")
    mcp.settings.port = int(os.environ.get("INNGEST_MCP_HTTP_PORT", "8809"))
    mcp.run(transport="streamable-http")
