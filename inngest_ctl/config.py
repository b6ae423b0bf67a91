"""
inngest-ctl shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

ENV_PATH = os.path.join(os.getcwd(), ".env")


def load_env():
    """Read KEY=VALUE pairs from the .env file, if one exists."""
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    return env


def get_env(key, default=""):
    """Look up a setting: exported environment first, then the .env file."""
    value = os.environ.get(key)
    if value:
        return value
    return env.get(key) or default


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = get_env(key, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = get_env(key, None)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key, default):
    """Parse float env values with fallback."""
    raw = get_env(key, None)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.2.0"
CONTRACT_SCHEMA_VERSION = "1.0"

PROD_API_URL = "https://api.inngest.com"
EVENT_GATEWAY_URL = "https://inn.gs"
DEFAULT_DEV_PORT = 8288

SIGNING_KEY_VAR = "INNGEST_SIGNING_KEY"
EVENT_KEY_VAR = "INNGEST_EVENT_KEY"
DEV_URL_VAR = "INNGEST_DEV_URL"

# Placeholder event key accepted by the local dev server.
DEV_EVENT_KEY = "test"

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env, overridden by the process environment)
# ---------------------------------------------------------------------------

env = load_env()

HTTP_MAX_RESPONSE_BYTES = _env_int("INNGEST_HTTP_MAX_RESPONSE_BYTES", 5_000_000)
HTTP_LOG_ENABLED = _env_bool("INNGEST_HTTP_LOG", False)
HTTP_LOG_SAMPLE_RATE = min(1.0, max(0.0, _env_float("INNGEST_HTTP_LOG_SAMPLE_RATE", 1.0)))

_mcp_mode = get_env("INNGEST_MCP_RESPONSE_MODE", "legacy").strip().lower()
MCP_RESPONSE_MODE = _mcp_mode if _mcp_mode in {"legacy", "envelope"} else "legacy"

# ---------------------------------------------------------------------------
# Runtime flags (set by cli.main)
# ---------------------------------------------------------------------------

RUNTIME_VERBOSE = False
