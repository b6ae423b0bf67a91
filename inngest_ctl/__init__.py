"""inngest-ctl — CLI tool for sending and inspecting Inngest events and runs."""

from inngest_ctl.client import InngestClient
from inngest_ctl.config import VERSION
from inngest_ctl.exceptions import CliError, NotFoundError, SetupError
from inngest_ctl.types import (
    CancelResult,
    EventDetails,
    EventListResult,
    EventResult,
    EventRun,
    RunJob,
    RunStatus,
)

__all__ = [
    "VERSION",
    "InngestClient",
    "CliError",
    "NotFoundError",
    "SetupError",
    "CancelResult",
    "EventDetails",
    "EventListResult",
    "EventResult",
    "EventRun",
    "RunJob",
    "RunStatus",
]
