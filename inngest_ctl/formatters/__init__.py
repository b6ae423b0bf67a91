"""Output formatting package for inngest-ctl.

Re-exports all public names so consumers can do:
    from inngest_ctl.formatters import format_run_status
"""

from inngest_ctl.formatters._core import (
    emit_error,
    output,
    render_pretty,
)
from inngest_ctl.formatters._events import (
    format_event_details,
    format_event_line,
    format_event_list,
    format_event_result,
    format_event_runs,
)
from inngest_ctl.formatters._runs import (
    format_cancel_result,
    format_run_jobs,
    format_run_status,
)
from inngest_ctl.formatters._style import (
    _trunc,
    calculate_duration,
    format_data_preview,
    format_duration,
    format_event_name,
    format_relative_time,
    format_status_badge,
    format_timestamp,
)

__all__ = [
    "_trunc",
    "calculate_duration",
    "emit_error",
    "format_cancel_result",
    "format_data_preview",
    "format_duration",
    "format_event_details",
    "format_event_line",
    "format_event_list",
    "format_event_name",
    "format_event_result",
    "format_event_runs",
    "format_relative_time",
    "format_run_jobs",
    "format_run_status",
    "format_status_badge",
    "format_timestamp",
    "output",
    "render_pretty",
]
