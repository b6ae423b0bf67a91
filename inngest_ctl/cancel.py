"""
Bulk cancellation of function runs within a start-time window.
"""

import re
from datetime import timedelta

from inngest_ctl._utils import _iso_utc, _utc_now
from inngest_ctl.api import api_request, create_client
from inngest_ctl.exceptions import CliError

_RELATIVE_RE = re.compile(r"^(\d+)([smhd])$")

_UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 24 * 60 * 60,
}


def parse_time(value, now=None):
    """Resolve a cancellation window bound to an ISO timestamp.

    Accepts an ISO literal (returned unchanged), ``now``, or a relative
    duration like ``30m`` / ``2d`` which is subtracted from *now*.
    """
    if "T" in value or "-" in value:
        return value
    now = now or _utc_now()
    if value.strip().lower() == "now":
        return _iso_utc(now)
    match = _RELATIVE_RE.match(value)
    if not match:
        raise CliError(
            f"Invalid time format: {value}. Use ISO format or relative time (e.g., 1h, 30m, 2d)"
        )
    amount, unit = int(match.group(1)), match.group(2)
    return _iso_utc(now - timedelta(seconds=amount * _UNIT_SECONDS[unit]))


def cancel_runs(
    app_id, function_id, started_after, started_before, if_expr=None, dev=False, port=None
):
    """Cancel runs of one function started inside the window. Returns {cancelled}."""
    client = create_client(dev=dev, port=port)
    now = _utc_now()
    body = {
        "app_id": app_id,
        "function_id": function_id,
        "started_after": parse_time(started_after, now=now),
        "started_before": parse_time(started_before, now=now),
    }
    if if_expr:
        body["if"] = if_expr

    response = api_request(client, "POST", "/v1/cancellations", body) or {}
    cancelled = response.get("cancelled")
    if isinstance(cancelled, int) and not isinstance(cancelled, bool):
        return {"cancelled": cancelled}
    return response
