"""
InngestClient — public Python API for sending and inspecting Inngest events.

Single entry point for programmatic use and the MCP server.
All methods return plain dicts/lists suitable for JSON serialization.
"""

from __future__ import annotations

# TypedDict return types live in inngest_ctl.types for documentation.
# Method signatures use plain dict[str, Any] for mypy compatibility.
from typing import Any

from inngest_ctl import cancel, events, runs


class InngestClient:
    """Public API surface for the Inngest REST and event APIs.

    All methods use keyword-only arguments and return plain dicts
    suitable for JSON serialization. Raises CliError/SetupError on failure.
    """

    def __init__(self, *, dev: bool = False, port: int | None = None):
        """Initialize the client.

        Args:
            dev: Target the local dev server instead of Inngest Cloud.
                The signing key is not required in this mode.
            port: Dev server port (ignored when INNGEST_DEV_URL is set).
        """
        self.dev = dev
        self.port = port

    @property
    def _conn(self) -> dict[str, Any]:
        return {"dev": self.dev, "port": self.port}

    # -------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------

    def send_event(
        self,
        *,
        name: str,
        data: Any,
        id: str | None = None,
        env: str | None = None,
    ) -> dict[str, Any]:
        """Send an event.

        Args:
            name: Event name, e.g. ``user.signup``.
            data: JSON-serializable event payload.
            id: Optional deduplication ID.
            env: Optional branch environment name.

        Returns:
            dict with keys: ids, status.
        """
        return events.send_event(name, data, id=id, env=env, **self._conn)

    def get_event(self, *, event_id: str) -> dict[str, Any]:
        """Get a single event. Raises NotFoundError if it does not exist."""
        return events.get_event(event_id, **self._conn)

    def list_events(self, *, name: str | None = None, limit: int | None = None) -> dict[str, Any]:
        """List recent events.

        Returns:
            dict with keys: events (list), meta ({fetchedAt, total}).
        """
        return events.list_events(name=name, limit=limit, **self._conn)

    def get_event_runs(self, *, event_id: str) -> list[dict[str, Any]]:
        """List the function runs an event triggered."""
        return events.get_event_runs(event_id, **self._conn)

    # -------------------------------------------------------------------
    # Runs
    # -------------------------------------------------------------------

    def get_run(self, *, run_id: str) -> dict[str, Any]:
        """Get run status. Raises NotFoundError if it does not exist."""
        return runs.get_run(run_id, **self._conn)

    def get_run_jobs(self, *, run_id: str) -> list[dict[str, Any]]:
        """List the jobs (steps) of a run."""
        return runs.get_run_jobs(run_id, **self._conn)

    # -------------------------------------------------------------------
    # Cancellation
    # -------------------------------------------------------------------

    def cancel_runs(
        self,
        *,
        app_id: str,
        function_id: str,
        started_after: str,
        started_before: str,
        if_expr: str | None = None,
    ) -> dict[str, Any]:
        """Cancel runs of a function started within a time window.

        Args:
            started_after/started_before: ISO timestamps, ``now``, or
                relative durations like ``1h``, ``30m``, ``2d``.
            if_expr: Optional expression filtering which runs to cancel.

        Returns:
            dict with key: cancelled.
        """
        return cancel.cancel_runs(
            app_id,
            function_id,
            started_after,
            started_before,
            if_expr=if_expr,
            **self._conn,
        )
