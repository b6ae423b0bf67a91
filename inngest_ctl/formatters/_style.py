"""ANSI styling, status badges, and time/duration helpers for text output."""

import json

from inngest_ctl._utils import _parse_iso_timestamp, _utc_now

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
BLACK = "\x1b[30m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"
GRAY = "\x1b[90m"
BG_RED = "\x1b[41m"
BG_GREEN = "\x1b[42m"
BG_YELLOW = "\x1b[43m"
BG_BLUE = "\x1b[44m"


def paint(text, *codes):
    """Wrap *text* in the given ANSI codes followed by a reset."""
    return f"{''.join(codes)}{text}{RESET}"


def _badge(text, bg):
    return paint(text, bg, BLACK, BOLD)


def _trunc(s, maxlen):
    """Truncate string with a trailing '...'."""
    if not s:
        return ""
    return s[: maxlen - 3] + "..." if len(s) > maxlen else s


def compact_json(value):
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def indented_json(value):
    return json.dumps(value, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Badges
# ---------------------------------------------------------------------------


def format_event_name(name):
    """Color an event name by keyword: error/fail, warn, success/complete."""
    lower = name.lower()
    if "error" in lower or "fail" in lower:
        bg = BG_RED
    elif "warn" in lower:
        bg = BG_YELLOW
    elif "success" in lower or "complete" in lower:
        bg = BG_GREEN
    else:
        bg = BG_BLUE
    return _badge(f" {name} ", bg)


def format_status_badge(status):
    s = (status or "").lower()
    if s in ("completed", "success"):
        return _badge(" OK  ", BG_GREEN)
    if s in ("failed", "error"):
        return _badge(" ERR ", BG_RED)
    if s in ("running", "pending"):
        return _badge(" RUN ", BG_YELLOW)
    if s == "cancelled":
        return paint("[CXL]", DIM)
    return paint(f"[{(status or '')[:3].upper()}]", DIM)


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


def format_timestamp(ts):
    """Local wall-clock time as HH:MM:SS.mmm in gray."""
    if not ts:
        return ""
    dt = _parse_iso_timestamp(ts)
    if dt is None:
        return paint(ts, GRAY)
    local = dt.astimezone()
    return paint(f"{local:%H:%M:%S}.{local.microsecond // 1000:03d}", GRAY)


def _elapsed_ms(start, end):
    start_dt = _parse_iso_timestamp(start)
    end_dt = _parse_iso_timestamp(end)
    if start_dt is None or end_dt is None:
        return None
    return round((end_dt - start_dt).total_seconds() * 1000)


def format_relative_time(ts, now=None):
    then = _parse_iso_timestamp(ts)
    if then is None:
        return ts or ""
    diff = ((now or _utc_now()) - then).total_seconds() * 1000
    if diff < 1000:
        return "just now"
    if diff < 60_000:
        return f"{int(diff // 1000)}s ago"
    if diff < 3_600_000:
        return f"{int(diff // 60_000)}m ago"
    if diff < 86_400_000:
        return f"{int(diff // 3_600_000)}h ago"
    return f"{int(diff // 86_400_000)}d ago"


def format_duration(start, end):
    """Elapsed time between two timestamps for list rows."""
    ms = _elapsed_ms(start, end)
    if ms is None:
        return ""
    if ms < 1:
        text = "<1ms"
    elif ms < 1000:
        text = f"{ms}ms"
    elif ms < 60_000:
        text = f"{ms / 1000:.2f}s"
    else:
        text = f"{ms / 60_000:.2f}m"
    return paint(text, YELLOW)


def calculate_duration(start, end=None, now=None):
    """Elapsed run time; an open interval is measured to *now* and marked running."""
    if not start:
        return paint("not started", DIM)
    running = not end
    if running:
        end_dt = now or _utc_now()
        start_dt = _parse_iso_timestamp(start)
        ms = round((end_dt - start_dt).total_seconds() * 1000) if start_dt else None
    else:
        ms = _elapsed_ms(start, end)
    if ms is None:
        text = "unknown"
    elif ms < 1000:
        text = f"{ms}ms"
    elif ms < 60_000:
        text = f"{ms / 1000:.2f}s"
    elif ms < 3_600_000:
        text = f"{ms / 60_000:.2f}m"
    else:
        text = f"{ms / 3_600_000:.2f}h"
    if running:
        return paint(f"{text} (running)", YELLOW)
    return paint(text, GREEN)


def format_data_preview(data):
    """First three key=value pairs of an event payload, plus a +N remainder."""
    if not isinstance(data, dict) or not data:
        return ""
    keys = list(data)
    parts = []
    for k in keys[:3]:
        v = data[k]
        val = _trunc(v, 20) if isinstance(v, str) else compact_json(v)
        parts.append(f"{k}={val}")
    suffix = f" +{len(keys) - 3}" if len(keys) > 3 else ""
    return paint(" ".join(parts) + suffix, DIM)
