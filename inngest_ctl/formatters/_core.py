"""Core output dispatchers: JSON, file, and ANSI text, plus error emission."""

import json
import sys
from pathlib import Path

from inngest_ctl.exceptions import CliError
from inngest_ctl.formatters._events import (
    format_event_details,
    format_event_list,
    format_event_result,
    format_event_runs,
)
from inngest_ctl.formatters._runs import format_cancel_result, format_run_jobs, format_run_status
from inngest_ctl.formatters._style import BOLD, RED, indented_json, paint

# ---------------------------------------------------------------------------
# Structural classification
# ---------------------------------------------------------------------------


def _is_event_result(r):
    return isinstance(r, dict) and "status" in r and isinstance(r.get("ids"), list)


def _is_event_list(r):
    return isinstance(r, dict) and "meta" in r and isinstance(r.get("events"), list)


def _is_event_details(r):
    return (
        isinstance(r, dict)
        and {"id", "name", "receivedAt"} <= r.keys()
        and "events" not in r
    )


def _is_event_run_list(r):
    return isinstance(r, list) and (
        not r or (isinstance(r[0], dict) and {"runId", "functionId"} <= r[0].keys())
    )


def _is_run_status(r):
    return isinstance(r, dict) and {"runId", "status", "functionId"} <= r.keys()


def _is_run_job_list(r):
    return (
        isinstance(r, list)
        and bool(r)
        and isinstance(r[0], dict)
        and {"jobId", "stepId"} <= r[0].keys()
    )


def _is_cancel_result(r):
    cancelled = r.get("cancelled") if isinstance(r, dict) else None
    return isinstance(cancelled, int) and not isinstance(cancelled, bool)


_CLASSIFIERS = [
    (_is_event_result, format_event_result),
    (_is_event_list, format_event_list),
    (_is_event_details, format_event_details),
    (_is_event_run_list, format_event_runs),
    (_is_run_status, format_run_status),
    (_is_run_job_list, format_run_jobs),
    (_is_cancel_result, format_cancel_result),
]


def render_pretty(result):
    """Pick a text report by inspecting the result's shape; JSON otherwise."""
    for matches, formatter in _CLASSIFIERS:
        if matches(result):
            return formatter(result)
    return indented_json(result)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def _write_json_file(path, content):
    try:
        Path(path).write_text(content + "\n", encoding="utf-8")
    except OSError as e:
        raise CliError(f"Cannot write output file {path}: {e.strerror or e}") from e


def output(data, formatter=None, pretty=False, output_path=None):
    """Output data in the requested mode.

    A file path wins over pretty mode. Pretty mode uses *formatter* when
    given, else picks one from the data's shape.
    """
    if output_path:
        _write_json_file(output_path, indented_json(data))
        print(f"Output written to {output_path}")
    elif pretty:
        print(formatter(data) if formatter else render_pretty(data))
    else:
        print(indented_json(data))


def emit_error(message, pretty=False):
    """Print an error to stderr as {"error": ...} JSON or a red one-liner."""
    if pretty:
        print(f"{paint('Error:', RED, BOLD)} {message}", file=sys.stderr)
    else:
        print(json.dumps({"error": message}, ensure_ascii=False), file=sys.stderr)
