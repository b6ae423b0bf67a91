"""Entry point for ``python -m inngest_ctl.mcp_server``."""

from inngest_ctl.mcp_server import main

main()
