"""
inngest-ctl — command-line interface for Inngest events, runs, and cancellations
"""

import sys

from inngest_ctl import config
from inngest_ctl.commands import (
    cmd_cancel,
    cmd_events_get,
    cmd_events_list,
    cmd_events_runs,
    cmd_events_send,
    cmd_runs_get,
    cmd_runs_list,
    cmd_runs_status,
)
from inngest_ctl.exceptions import CliError
from inngest_ctl.formatters import emit_error
from inngest_ctl.models import GlobalFlags

HELP_TEXT = """\
inngest-ctl - Command-line interface for Inngest

Usage:
  inngest-ctl <command> [options]

Commands:
  events    Send and query events
  runs      Query function runs
  cancel    Cancel running functions

Global Options:
  --pretty          Human-readable output with colors
  --output <file>   Write JSON output to file
  --dev             Use local dev server (default: localhost:8288)
  --port <port>     Dev server port (default: 8288)
  --verbose         Log HTTP requests to stderr
  --help, -h        Show this help message
  --version, -v     Show version

Environment Variables:
  INNGEST_EVENT_KEY     Required for sending events (not needed with --dev)
  INNGEST_SIGNING_KEY   Required for API queries (not needed with --dev)
  INNGEST_DEV_URL       Override dev server URL (e.g., http://localhost:9000)
  INNGEST_HTTP_LOG      Set to 1 to log HTTP requests (same as --verbose)

Examples:
  inngest-ctl events send --name "user.signup" --data '{"userId": "123"}'
  inngest-ctl events get <event-id> --pretty
  inngest-ctl runs get <run-id>
  inngest-ctl cancel --app my-app --function my-func --started-after 1h --started-before now
"""

EVENTS_HELP = """\
Events Commands:

Usage:
  inngest-ctl events <subcommand> [options]

Subcommands:
  list    List recent events
  send    Send an event
  get     Get event details
  runs    List runs triggered by an event

List Options:
  --name <name>     Filter by event name (optional)
  --limit <n>       Max events to return (optional)

Send Options:
  --name <name>         Event name (required)
  --data <json>         Event data as inline JSON (required unless --data-file)
  --data-file <path>    Read event data from a JSON file (required unless --data)
  --id <id>             Deduplication ID (optional)
  --env <env>           Branch environment name (optional)

Examples:
  inngest-ctl events list --pretty
  inngest-ctl events list --name "user.signup" --limit 10 --pretty
  inngest-ctl events send --name "user.signup" --data '{"userId": "123"}'
  inngest-ctl events send --name "test.event" --data-file /tmp/event.json --dev
  inngest-ctl events send --name "test.event" --data '{}' --env "feature/my-branch"
  inngest-ctl events get 01H08W4TMBNKMEWFD0TYC532GG --pretty
  inngest-ctl events runs 01H08W4TMBNKMEWFD0TYC532GG --pretty
"""

RUNS_HELP = """\
Runs Commands:

Usage:
  inngest-ctl runs <subcommand> [options]

Subcommands:
  status  Get run status and duration
  get     Get run details (jobs/steps)
  list    List runs for an event

List Options:
  --event <id>    Event ID to list runs for

Examples:
  inngest-ctl runs status 01H08W5TMBNKMEWFD0TYC532GH --pretty
  inngest-ctl runs get 01H08W5TMBNKMEWFD0TYC532GH --pretty
  inngest-ctl runs list --event 01H08W4TMBNKMEWFD0TYC532GG
"""

CANCEL_HELP = """\
Cancel Command:

Usage:
  inngest-ctl cancel --app <id> --function <id> --started-after <t> --started-before <t>

Options:
  --app <id>              App ID (required)
  --function <id>         Function ID (required)
  --started-after <t>     Window start: ISO timestamp, "now", or relative (30m, 1h, 2d)
  --started-before <t>    Window end: ISO timestamp, "now", or relative (30m, 1h, 2d)
  --if <expr>             Only cancel runs matching this expression (optional)

Examples:
  inngest-ctl cancel --app my-app --function my-func --started-after 1h --started-before now
  inngest-ctl cancel --app my-app --function my-func --started-after 2024-01-01T00:00:00Z \\
    --started-before 2024-01-02T00:00:00Z --if "event.data.userId == '123'"
"""

HELP_WORDS = {"help", "--help", "-h"}
VERSION_WORDS = {"version", "--version", "-v"}

# command -> (usage text, {subcommand: handler})
GROUPS = {
    "events": (
        EVENTS_HELP,
        {
            "list": cmd_events_list,
            "send": cmd_events_send,
            "get": cmd_events_get,
            "runs": cmd_events_runs,
        },
    ),
    "runs": (
        RUNS_HELP,
        {
            "status": cmd_runs_status,
            "get": cmd_runs_get,
            "list": cmd_runs_list,
        },
    ),
}


# ---------------------------------------------------------------------------
# Global flag extraction (flags are accepted anywhere in argv)
# ---------------------------------------------------------------------------
# Routing is hand-rolled instead of argparse: global flags may appear anywhere,
# and a `--key` with no value or an unknown `--key` is ignored, not rejected.


def _parse_port(raw):
    try:
        return int(raw)
    except ValueError:
        raise CliError("--port must be an integer") from None


def _extract_global_flags(argv):
    """Split argv into GlobalFlags and the remaining positional tokens."""
    pretty = False
    dev = False
    verbose = False
    port = None
    output_path = None
    remaining = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--pretty":
            pretty = True
        elif arg == "--dev":
            dev = True
        elif arg == "--verbose":
            verbose = True
        elif arg == "--port" and i + 1 < len(argv):
            port = _parse_port(argv[i + 1])
            i += 1
        elif arg.startswith("--port="):
            port = _parse_port(arg[len("--port=") :])
        elif arg == "--output" and i + 1 < len(argv):
            output_path = argv[i + 1]
            i += 1
        elif arg.startswith("--output="):
            output_path = arg[len("--output=") :]
        else:
            remaining.append(arg)
        i += 1
    flags = GlobalFlags(pretty=pretty, output=output_path, dev=dev, port=port, verbose=verbose)
    return flags, remaining


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _run_group(usage, handlers, name, args, flags):
    """Dispatch a subcommand. Returns the exit code."""
    if not args:
        print(usage)
        return 1
    sub, sub_args = args[0], args[1:]
    if sub in HELP_WORDS:
        print(usage)
        return 0
    handler = handlers.get(sub)
    if handler is None:
        emit_error(f"Unknown {name} subcommand: {sub}", flags.pretty)
        print(usage)
        return 1
    handler(sub_args, flags)
    return 0


def run(argv):
    """Run one CLI invocation. Returns the process exit code."""
    pretty = "--pretty" in argv
    try:
        flags, positional = _extract_global_flags(argv)
        config.RUNTIME_VERBOSE = flags.verbose

        if not positional:
            print(HELP_TEXT)
            return 1

        command, args = positional[0], positional[1:]
        if command in HELP_WORDS:
            print(HELP_TEXT)
            return 0
        if command in VERSION_WORDS:
            print(config.VERSION)
            return 0
        if command == "cancel":
            if args and args[0] in HELP_WORDS:
                print(CANCEL_HELP)
                return 0
            cmd_cancel(args, flags)
            return 0
        if command in GROUPS:
            usage, handlers = GROUPS[command]
            return _run_group(usage, handlers, command, args, flags)

        emit_error(f"Unknown command: {command}", flags.pretty)
        print(HELP_TEXT)
        return 1
    except CliError as e:
        emit_error(str(e), pretty)
        return e.exit_code


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.exit(run(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    main()
