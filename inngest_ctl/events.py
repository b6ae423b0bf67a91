"""
Event operations: send, get, list, and the runs an event triggered.
Each function makes one request and returns camelCase result dicts.
"""

import urllib.parse

from inngest_ctl import config
from inngest_ctl._utils import _compact, _epoch_ms_to_iso, _get_field, _iso_utc, _utc_now
from inngest_ctl.api import (
    _expect_object_response,
    api_request,
    create_client,
    gateway_request,
    get_event_gateway_url,
    validate_event_key,
)
from inngest_ctl.exceptions import NotFoundError

# ---------------------------------------------------------------------------
# Normalizers
# ---------------------------------------------------------------------------


def normalize_event(raw):
    """Rename a wire event to {id, name, receivedAt, data?, user?}."""
    received_at = _get_field(raw, "received_at", "receivedAt") or _epoch_ms_to_iso(raw.get("ts"))
    return _compact(
        {
            "id": raw.get("id") or "",
            "name": raw.get("name") or "",
            "receivedAt": received_at,
            "data": raw.get("data"),
            "user": raw.get("user"),
        }
    )


def normalize_event_run(raw):
    run = _compact(
        {
            "runId": _get_field(raw, "run_id", "runId", ""),
            "status": raw.get("status") or "",
            "functionId": _get_field(raw, "function_id", "functionId", ""),
            "functionVersion": _get_field(raw, "function_version", "functionVersion"),
            "startedAt": _get_field(raw, "started_at", "startedAt"),
            "endedAt": _get_field(raw, "ended_at", "endedAt"),
        }
    )
    if "output" in raw:
        run["output"] = raw["output"]
    return run


def _data_list(response):
    """Return the ``data`` array of a list response, tolerating null/absent."""
    data = (response or {}).get("data")
    return data if isinstance(data, list) else []


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


def send_event(name, data, id=None, env=None, dev=False, port=None):
    """Submit an event through the gateway. Returns {ids, status}."""
    client = create_client(dev=dev, port=port)
    if dev:
        # The dev server accepts any event key.
        event_key = client.event_key or config.DEV_EVENT_KEY
    else:
        event_key = validate_event_key(client.event_key)

    payload = {"name": name, "data": data}
    if id:
        payload["id"] = id

    url = get_event_gateway_url(event_key, dev=dev, port=port)
    status, result = gateway_request(url, payload, env=env)
    return {"ids": (result or {}).get("ids") or [], "status": status}


def get_event(event_id, dev=False, port=None):
    client = create_client(dev=dev, port=port)
    response = api_request(client, "GET", f"/v1/events/{urllib.parse.quote(event_id)}") or {}
    raw = response.get("data")
    if "id" in response and "name" in response:
        # Dev server may return the event without the data wrapper.
        raw = response
    if not raw:
        raise NotFoundError(f"Event not found: {event_id}")
    return normalize_event(_expect_object_response(raw, "event"))


def get_event_runs(event_id, dev=False, port=None):
    client = create_client(dev=dev, port=port)
    response = api_request(client, "GET", f"/v1/events/{urllib.parse.quote(event_id)}/runs")
    return [normalize_event_run(r) for r in _data_list(response)]


def list_events(name=None, limit=None, dev=False, port=None):
    """List recent events, optionally filtered by name."""
    client = create_client(dev=dev, port=port)

    params = {}
    if limit:
        params["limit"] = str(limit)
    if name:
        params["name"] = name
    query = urllib.parse.urlencode(params)
    path = "/v1/events" + (f"?{query}" if query else "")

    response = api_request(client, "GET", path) or {}
    events = [normalize_event(e) for e in _data_list(response)]
    metadata = response.get("metadata") or {}
    return {
        "events": events,
        "meta": {
            "fetchedAt": metadata.get("fetched_at") or _iso_utc(_utc_now()),
            "total": len(events),
        },
    }
