"""
Shared pure-utility functions for inngest-ctl.

These helpers have no business logic and no side effects.
They are used across events.py, runs.py, cancel.py, and the formatters.
"""

from datetime import datetime, timezone


def _get_field(d, snake, camel, default=None):
    """Get a value from a dict trying snake_case then camelCase key.

    Empty values fall through to the next key, so a payload that sends
    ``run_id: ""`` alongside ``runId: "abc"`` still resolves.
    """
    value = d.get(snake)
    if value in (None, ""):
        value = d.get(camel)
    if value in (None, ""):
        return default
    return value


def _compact(d, keep=()):
    """Drop None-valued keys, except those listed in *keep*."""
    return {k: v for k, v in d.items() if v is not None or k in keep}


def _parse_iso_timestamp(ts):
    """Parse an ISO timestamp from the API into an aware datetime."""
    if not ts:
        return None
    try:
        # Handle both "2026-01-15T10:30:00Z" and "2026-01-15T10:30:00.000Z"
        clean = ts.replace("Z", "+00:00")
        parsed = datetime.fromisoformat(clean)
    except (ValueError, TypeError, AttributeError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _iso_utc(dt):
    """Format a datetime as UTC ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _utc_now():
    return datetime.now(timezone.utc)


def _epoch_ms_to_iso(ms):
    """Convert epoch milliseconds to an ISO string (0 when missing)."""
    return _iso_utc(datetime.fromtimestamp((ms or 0) / 1000, tz=timezone.utc))


def parse_named_args(args):
    """Parse ``--key value`` / ``--key=value`` pairs into a dict.

    A flag followed by another flag (or by nothing) is ignored; bare
    positional tokens are skipped.
    """
    result = {}
    i = 0
    while i < len(args):
        arg = args[i]
        if arg.startswith("--"):
            if "=" in arg:
                key, value = arg[2:].split("=", 1)
                result[key] = value
            elif i + 1 < len(args) and not args[i + 1].startswith("--"):
                result[arg[2:]] = args[i + 1]
                i += 1
        i += 1
    return result
