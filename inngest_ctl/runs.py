"""
Run operations: run status and the jobs (steps) of a run.
"""

import urllib.parse

from inngest_ctl._utils import _compact, _get_field
from inngest_ctl.api import _expect_object_response, api_request, create_client
from inngest_ctl.exceptions import NotFoundError


def normalize_run(raw):
    """Rename a wire run to the RunStatus shape.

    The REST API sends ``run_started_at``; ``started_at`` and camelCase
    variants are accepted too.
    """
    run = _compact(
        {
            "runId": _get_field(raw, "run_id", "runId", ""),
            "status": raw.get("status") or "",
            "functionId": _get_field(raw, "function_id", "functionId", ""),
            "functionVersion": _get_field(raw, "function_version", "functionVersion"),
            "eventId": _get_field(raw, "event_id", "eventId"),
            "startedAt": _get_field(raw, "run_started_at", "runStartedAt")
            or _get_field(raw, "started_at", "startedAt"),
            "endedAt": _get_field(raw, "ended_at", "endedAt"),
        }
    )
    if "output" in raw:
        run["output"] = raw["output"]
    return run


def normalize_job(raw):
    job = _compact(
        {
            "jobId": _get_field(raw, "job_id", "jobId", ""),
            "stepId": _get_field(raw, "step_id", "stepId", ""),
            "status": raw.get("status") or "",
            "startedAt": _get_field(raw, "started_at", "startedAt"),
            "endedAt": _get_field(raw, "ended_at", "endedAt"),
            "error": raw.get("error"),
        }
    )
    if "output" in raw:
        job["output"] = raw["output"]
    return job


def get_run(run_id, dev=False, port=None):
    client = create_client(dev=dev, port=port)
    response = api_request(client, "GET", f"/v1/runs/{urllib.parse.quote(run_id)}") or {}
    raw = response.get("data")
    if not raw:
        raise NotFoundError(f"Run not found: {run_id}")
    return normalize_run(_expect_object_response(raw, "run"))


def get_run_jobs(run_id, dev=False, port=None):
    client = create_client(dev=dev, port=port)
    response = api_request(client, "GET", f"/v1/runs/{urllib.parse.quote(run_id)}/jobs") or {}
    data = response.get("data")
    return [normalize_job(j) for j in data] if isinstance(data, list) else []
