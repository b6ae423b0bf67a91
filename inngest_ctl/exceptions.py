"""
inngest-ctl exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1 — validation, not-found, network, remote API errors."""

    exit_code = 1


class SetupError(CliError):
    """Exit code 1 — a credential required by the selected mode is missing."""

    exit_code = 1


class NotFoundError(CliError):
    """A by-id lookup returned no payload."""


class HTTPError(Exception):
    """Raised by _http_request for non-2xx responses that callers translate."""

    def __init__(self, code, reason, body, headers=None):
        self.code = code
        self.reason = reason
        self.body = body
        self.headers = headers or {}
