"""Typed response definitions for InngestClient methods.

These TypedDicts document the shape of dicts returned by public API methods.
They are optional — runtime behavior is unchanged (plain dicts).
Optional keys are omitted when the server did not send a value.
"""

from __future__ import annotations

from typing import Any, TypedDict

# ---------------------------------------------------------------------------
# Event types
# ---------------------------------------------------------------------------


class EventResult(TypedDict):
    """Return type of InngestClient.send_event()."""

    ids: list[str]
    status: int


class _EventDetailsBase(TypedDict):
    id: str
    name: str
    receivedAt: str


class EventDetails(_EventDetailsBase, total=False):
    """Return type of InngestClient.get_event()."""

    data: dict[str, Any]
    user: dict[str, Any]


class EventListMeta(TypedDict, total=False):
    fetchedAt: str
    total: int


class EventListResult(TypedDict):
    """Return type of InngestClient.list_events()."""

    events: list[EventDetails]
    meta: EventListMeta


class _EventRunBase(TypedDict):
    runId: str
    status: str
    functionId: str


class EventRun(_EventRunBase, total=False):
    """One item of InngestClient.get_event_runs()."""

    functionVersion: str | int
    startedAt: str
    endedAt: str
    output: Any


# ---------------------------------------------------------------------------
# Run types
# ---------------------------------------------------------------------------


class RunStatus(_EventRunBase, total=False):
    """Return type of InngestClient.get_run()."""

    functionVersion: int
    eventId: str
    startedAt: str
    endedAt: str
    output: Any


class _RunJobBase(TypedDict):
    jobId: str
    stepId: str
    status: str


class RunJob(_RunJobBase, total=False):
    """One item of InngestClient.get_run_jobs()."""

    startedAt: str
    endedAt: str
    output: Any
    error: str


# ---------------------------------------------------------------------------
# Cancellation
# ---------------------------------------------------------------------------


class CancelResult(TypedDict):
    """Return type of InngestClient.cancel_runs()."""

    cancelled: int
