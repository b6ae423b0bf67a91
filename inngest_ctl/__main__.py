"""Entry point for ``python -m inngest_ctl``."""

from inngest_ctl.cli import main

main()
