"""Text reports for sent events, event details, event lists, and event runs."""

from inngest_ctl.formatters._style import (
    BOLD,
    CYAN,
    DIM,
    GREEN,
    WHITE,
    YELLOW,
    _trunc,
    compact_json,
    format_data_preview,
    format_duration,
    format_event_name,
    format_relative_time,
    format_status_badge,
    format_timestamp,
    indented_json,
    paint,
)


def format_event_result(result):
    lines = [
        f"{paint('✓', GREEN)} Event sent successfully",
        f"  {paint('Status:', DIM)} {result['status']}",
        f"  {paint('IDs:', DIM)}",
    ]
    for event_id in result["ids"]:
        lines.append(f"    {paint(event_id, CYAN)}")
    return "\n".join(lines)


def format_event_line(event):
    ts = format_timestamp(event.get("receivedAt"))
    name = format_event_name(event.get("name", ""))
    short_id = paint(event.get("id", "")[:12], DIM)
    preview = format_data_preview(event.get("data"))
    return f"{ts} {name} {short_id} {preview}"


def format_event_list(result, now=None):
    meta = result.get("meta") or {}
    events = result["events"]
    total = meta.get("total")
    if total is None:
        total = len(events)
    fetched = format_relative_time(meta.get("fetchedAt"), now=now)
    lines = [f"{paint(f'Events ({total})', BOLD)} {paint(f'fetched {fetched}', DIM)}", ""]
    if not events:
        lines.append(paint("No events found", YELLOW))
        return "\n".join(lines)
    lines.extend(format_event_line(e) for e in events)
    return "\n".join(lines)


def format_event_details(event):
    lines = [
        paint("Event", BOLD),
        "",
        f"{paint('ID:', DIM)}       {paint(event['id'], CYAN)}",
        f"{paint('Name:', DIM)}     {format_event_name(event['name'])}",
        f"{paint('Received:', DIM)} {format_timestamp(event['receivedAt'])}",
    ]
    user = event.get("user")
    if user:
        lines.append(f"{paint('User:', DIM)}     {compact_json(user)}")
    data = event.get("data")
    if data:
        lines.append("")
        lines.append(paint("Data:", DIM))
        for line in indented_json(data).split("\n"):
            lines.append(f"  {paint(line, WHITE)}")
    return "\n".join(lines)


def format_event_runs(runs):
    if not runs:
        return paint("No runs found for this event", YELLOW)
    lines = [paint(f"Runs ({len(runs)})", BOLD), ""]
    for run in runs:
        started, ended = run.get("startedAt"), run.get("endedAt")
        duration = format_duration(started, ended) if started and ended else ""
        ts = format_timestamp(started) if started else ""
        func = paint(_trunc(run["functionId"], 40), CYAN)
        short_id = paint(run["runId"][:12], DIM)
        lines.append(f"{ts} {format_status_badge(run['status'])} {func} {short_id} {duration}")
    return "\n".join(lines)
