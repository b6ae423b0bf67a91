"""
Client factory, HTTP request layer, and credential validation for inngest-ctl.
"""

import hashlib
import http.client
import json
import re
import sys
import time
import urllib.error
import urllib.parse
import urllib.request
import uuid
from dataclasses import dataclass

from inngest_ctl import config
from inngest_ctl.exceptions import CliError, HTTPError, SetupError

# ---------------------------------------------------------------------------
# Client factory
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClientConfig:
    """Resolved connection settings for one invocation."""

    base_url: str
    signing_key: str = ""
    event_key: str = ""
    dev: bool = False


def get_dev_url(port=None):
    """Dev server URL: INNGEST_DEV_URL, then explicit port, then default port."""
    env_url = config.get_env(config.DEV_URL_VAR)
    if env_url:
        return env_url.rstrip("/")
    actual_port = port if port is not None else config.DEFAULT_DEV_PORT
    return f"http://localhost:{actual_port}"


def create_client(dev=False, port=None):
    base_url = get_dev_url(port) if dev else config.PROD_API_URL
    return ClientConfig(
        base_url=base_url,
        signing_key=config.get_env(config.SIGNING_KEY_VAR),
        event_key=config.get_env(config.EVENT_KEY_VAR),
        dev=bool(dev),
    )


def get_event_gateway_url(event_key, dev=False, port=None):
    """Event submission URL; the event key is part of the path."""
    if dev:
        return f"{get_dev_url(port)}/e/{event_key}"
    return f"{config.EVENT_GATEWAY_URL}/e/{event_key}"


def validate_event_key(event_key):
    if not event_key:
        raise SetupError(
            f"{config.EVENT_KEY_VAR} environment variable is required for sending events"
        )
    return event_key


def validate_signing_key(signing_key):
    if not signing_key:
        raise SetupError(
            f"{config.SIGNING_KEY_VAR} environment variable is required for API requests"
        )
    return signing_key


# ---------------------------------------------------------------------------
# Security helpers
# ---------------------------------------------------------------------------


def _mask_token(token):
    """Show only first 6 chars of a token for safe logging."""
    return token[:6] + "..." if len(token) > 6 else token


_EVENT_KEY_PATH_RE = re.compile(r"(/e/)[^/?#]+")


def _sanitize_url_for_log(url):
    """Mask the event key path segment and sensitive query params."""
    parsed = urllib.parse.urlsplit(url)
    path = _EVENT_KEY_PATH_RE.sub(r"\1***", parsed.path)
    query = parsed.query
    if query:
        pairs = urllib.parse.parse_qsl(query, keep_blank_values=True)
        masked = [(k, "***") if k.lower() in {"token", "key"} else (k, v) for k, v in pairs]
        query = urllib.parse.urlencode(masked, doseq=True)
    return urllib.parse.urlunsplit((parsed.scheme, parsed.netloc, path, query, parsed.fragment))


def _api_error_message(body):
    """Prefer the server's ``{"error": "..."}`` message, else the raw body."""
    try:
        parsed = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        return body
    if isinstance(parsed, dict) and isinstance(parsed.get("error"), str) and parsed["error"]:
        return parsed["error"]
    return body


# ---------------------------------------------------------------------------
# HTTP logging
# ---------------------------------------------------------------------------


def _log_enabled():
    return config.HTTP_LOG_ENABLED or config.RUNTIME_VERBOSE


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not _log_enabled():
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _is_sampled_request(request_id):
    """Decide if a request should be logged based on sample rate."""
    rate = config.HTTP_LOG_SAMPLE_RATE
    if rate <= 0:
        return False
    if rate >= 1:
        return True
    if not request_id:
        return False
    digest = hashlib.sha256(request_id.encode("utf-8")).digest()
    bucket = int.from_bytes(digest[:4], "big") / 4294967295.0
    return bucket < rate


# ---------------------------------------------------------------------------
# HTTP request layer
# ---------------------------------------------------------------------------


def _http_request(url, data=None, headers=None, method="POST"):
    """Make a single HTTP request.
    Returns (status, parsed JSON or None for an empty body).
    Raises HTTPError for non-2xx responses (caller builds the message).
    Raises CliError on network or parse errors."""
    body = json.dumps(data).encode("utf-8") if data is not None else None
    headers = dict(headers or {})
    request_id = headers.get("X-Request-Id")
    safe_url = _sanitize_url_for_log(url)
    sampled = _is_sampled_request(request_id)
    start = time.perf_counter()
    req = urllib.request.Request(url, data=body, headers=headers, method=method)
    if sampled:
        auth = headers.get("Authorization", "")
        _log_http_event(
            phase="request",
            method=method,
            url=safe_url,
            request_id=request_id,
            auth=_mask_token(auth.removeprefix("Bearer ")) if auth else None,
        )
    try:
        with urllib.request.urlopen(req) as resp:
            status = getattr(resp, "status", 200)
            content_type = resp.headers.get("Content-Type", "")
            raw = resp.read(config.HTTP_MAX_RESPONSE_BYTES + 1)
    except urllib.error.HTTPError as e:
        error_body = (
            e.read(config.HTTP_MAX_RESPONSE_BYTES).decode("utf-8", errors="replace")
            if e.fp
            else ""
        )
        if sampled:
            _log_http_event(
                phase="response",
                method=method,
                url=safe_url,
                status=e.code,
                latency_ms=round((time.perf_counter() - start) * 1000, 2),
                request_id=request_id,
            )
        raise HTTPError(e.code, e.reason, error_body, headers=e.headers) from e
    except TimeoutError as e:
        if sampled:
            _log_http_event(
                phase="network_error",
                method=method,
                url=safe_url,
                error="timeout",
                request_id=request_id,
            )
        raise CliError("Connection failed: request timed out") from e
    except urllib.error.URLError as e:
        if sampled:
            _log_http_event(
                phase="network_error",
                method=method,
                url=safe_url,
                error=f"url_error: {e.reason}",
                request_id=request_id,
            )
        raise CliError(f"Connection failed: {e.reason}") from e
    except (OSError, http.client.HTTPException) as e:
        if sampled:
            _log_http_event(
                phase="network_error",
                method=method,
                url=safe_url,
                error=f"{type(e).__name__}: {e}",
                request_id=request_id,
            )
        raise CliError(f"Connection failed: {str(e) or type(e).__name__}") from e

    if len(raw) > config.HTTP_MAX_RESPONSE_BYTES:
        raise CliError(f"Response too large (>{config.HTTP_MAX_RESPONSE_BYTES} bytes).")
    if sampled:
        _log_http_event(
            phase="response",
            method=method,
            url=safe_url,
            status=status,
            content_type=content_type,
            bytes=len(raw),
            latency_ms=round((time.perf_counter() - start) * 1000, 2),
            request_id=request_id,
        )
    if not raw.strip():
        return status, None
    try:
        return status, json.loads(raw.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        if content_type and "json" not in content_type.lower():
            raise CliError(
                f"Unexpected Content-Type from server ({content_type}). "
                "This may be a proxy or network issue."
            ) from None
        raise CliError("Unexpected response from Inngest API (not valid JSON).") from None


def _expect_object_response(result, operation):
    """Ensure a parsed body is a JSON object (dict); None passes for empty bodies."""
    if result is None or isinstance(result, dict):
        return result
    raise CliError(
        f"Unexpected {operation} response shape: "
        f"expected JSON object, got {type(result).__name__}."
    )


def _base_headers():
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "X-Request-Id": str(uuid.uuid4()),
    }


def api_request(client, method, path, body=None):
    """Authenticated request against the REST API. Returns parsed JSON."""
    if not client.dev:
        validate_signing_key(client.signing_key)
    headers = _base_headers()
    if client.signing_key:
        headers["Authorization"] = f"Bearer {client.signing_key}"
    try:
        _, payload = _http_request(client.base_url + path, body, headers, method)
    except HTTPError as e:
        raise CliError(f"API request failed ({e.code}): {_api_error_message(e.body)}") from e
    return _expect_object_response(payload, "API")


def gateway_request(url, payload, env=None):
    """Unauthenticated event submission. Returns (status, parsed JSON)."""
    headers = _base_headers()
    if env:
        headers["x-inngest-env"] = env
    try:
        status, result = _http_request(url, payload, headers, "POST")
    except HTTPError as e:
        raise CliError(f"Failed to send event ({e.code}): {e.body}") from e
    return status, _expect_object_response(result, "event send")
