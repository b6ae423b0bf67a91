"""
Command implementations for inngest-ctl.
Each cmd_*() function receives the tokens after its (sub)command plus the
GlobalFlags, and handles one CLI command.

Business logic lives in client.py (InngestClient). These thin wrappers
handle flag parsing → keyword args, validation, and formatter dispatch.
"""

from inngest_ctl._utils import parse_named_args
from inngest_ctl.client import InngestClient
from inngest_ctl.exceptions import CliError
from inngest_ctl.formatters import (
    format_event_details,
    format_event_list,
    format_event_result,
    format_event_runs,
    format_run_jobs,
    format_run_status,
    output,
)
from inngest_ctl.models import CancelSpec, ListEventsSpec, SendEventSpec


def _client(flags):
    return InngestClient(dev=flags.dev, port=flags.port)


def _emit(result, formatter, flags):
    output(result, formatter, pretty=flags.pretty, output_path=flags.output)


def _require_id(args, message):
    """Return the leading positional token, or fail with *message*."""
    if args and not args[0].startswith("--"):
        return args[0]
    raise CliError(message)


# ---------------------------------------------------------------------------
# events
# ---------------------------------------------------------------------------


def cmd_events_list(args, flags):
    spec = ListEventsSpec.from_flags(parse_named_args(args))
    result = _client(flags).list_events(name=spec.name, limit=spec.limit)
    _emit(result, format_event_list, flags)


def cmd_events_send(args, flags):
    spec = SendEventSpec.from_flags(parse_named_args(args))
    result = _client(flags).send_event(name=spec.name, data=spec.data, id=spec.id, env=spec.env)
    _emit(result, format_event_result, flags)


def cmd_events_get(args, flags):
    event_id = _require_id(args, "Event ID is required")
    _emit(_client(flags).get_event(event_id=event_id), format_event_details, flags)


def cmd_events_runs(args, flags):
    event_id = _require_id(args, "Event ID is required")
    _emit(_client(flags).get_event_runs(event_id=event_id), format_event_runs, flags)


# ---------------------------------------------------------------------------
# runs
# ---------------------------------------------------------------------------


def cmd_runs_status(args, flags):
    run_id = _require_id(args, "Run ID is required")
    _emit(_client(flags).get_run(run_id=run_id), format_run_status, flags)


def cmd_runs_get(args, flags):
    run_id = _require_id(args, "Run ID is required")
    _emit(_client(flags).get_run_jobs(run_id=run_id), format_run_jobs, flags)


def cmd_runs_list(args, flags):
    event_id = parse_named_args(args).get("event")
    if not event_id:
        raise CliError("--event is required")
    _emit(_client(flags).get_event_runs(event_id=event_id), format_event_runs, flags)


# ---------------------------------------------------------------------------
# cancel
# ---------------------------------------------------------------------------


def cmd_cancel(args, flags):
    spec = CancelSpec.from_flags(parse_named_args(args))
    result = _client(flags).cancel_runs(
        app_id=spec.app_id,
        function_id=spec.function_id,
        started_after=spec.started_after,
        started_before=spec.started_before,
        if_expr=spec.if_expr,
    )
    # Unrecognized response shapes fall back to JSON in pretty mode.
    _emit(result, None, flags)
