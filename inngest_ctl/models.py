"""
Typed, validated input contracts built from parsed command flags.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from inngest_ctl.exceptions import CliError


def _require(flags, key):
    value = flags.get(key)
    if not value:
        raise CliError(f"--{key} is required")
    return value


def _positive_int(value, flag):
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise CliError(f"--{flag} must be a positive integer") from None
    if parsed <= 0:
        raise CliError(f"--{flag} must be a positive integer")
    return parsed


@dataclass(frozen=True)
class GlobalFlags:
    """Flags accepted anywhere on the command line."""

    pretty: bool = False
    output: str | None = None
    dev: bool = False
    port: int | None = None
    verbose: bool = False


@dataclass(frozen=True)
class SendEventSpec:
    """Validated input for `events send`."""

    name: str
    data: Any
    id: str | None = None
    env: str | None = None

    @staticmethod
    def _load_data(data_str, data_file):
        """Parse event data from --data-file (preferred) or --data."""
        source = f"--data-file ({data_file})" if data_file else "--data"
        try:
            raw = Path(data_file).read_text(encoding="utf-8") if data_file else data_str
            return json.loads(raw)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            raise CliError(f"{source} must be valid JSON") from None

    @classmethod
    def from_flags(cls, flags):
        name = _require(flags, "name")
        data_str = flags.get("data")
        data_file = flags.get("data-file")
        if not data_str and not data_file:
            raise CliError("--data or --data-file is required")
        return cls(
            name=name,
            data=cls._load_data(data_str, data_file),
            id=flags.get("id") or None,
            env=flags.get("env") or None,
        )


@dataclass(frozen=True)
class ListEventsSpec:
    """Validated input for `events list`."""

    name: str | None = None
    limit: int | None = None

    @classmethod
    def from_flags(cls, flags):
        limit = flags.get("limit")
        return cls(
            name=flags.get("name") or None,
            limit=_positive_int(limit, "limit") if limit else None,
        )


@dataclass(frozen=True)
class CancelSpec:
    """Validated input for `cancel`. Time bounds are resolved later."""

    app_id: str
    function_id: str
    started_after: str
    started_before: str
    if_expr: str | None = None

    @classmethod
    def from_flags(cls, flags):
        return cls(
            app_id=_require(flags, "app"),
            function_id=_require(flags, "function"),
            started_after=_require(flags, "started-after"),
            started_before=_require(flags, "started-before"),
            if_expr=flags.get("if") or None,
        )
