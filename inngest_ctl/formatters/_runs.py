"""Text reports for run status, run jobs, and cancellation results."""

from inngest_ctl.formatters._style import (
    BOLD,
    CYAN,
    DIM,
    GREEN,
    MAGENTA,
    RED,
    WHITE,
    YELLOW,
    _trunc,
    calculate_duration,
    compact_json,
    format_duration,
    format_status_badge,
    format_timestamp,
    indented_json,
    paint,
)


def format_run_status(run, now=None):
    """Detailed run view. A run without an end timestamp shows '(running)'."""
    version = run.get("functionVersion")
    version_suffix = f" v{version}" if version else ""
    lines = [
        paint("Run Status", BOLD),
        "",
        f"{paint('Run ID:', DIM)}     {paint(run['runId'], CYAN)}",
        f"{paint('Status:', DIM)}     {format_status_badge(run['status'])}",
        f"{paint('Function:', DIM)}   {paint(run['functionId'], MAGENTA)}{version_suffix}",
    ]
    if run.get("eventId"):
        lines.append(f"{paint('Event ID:', DIM)}   {run['eventId']}")
    if run.get("startedAt"):
        lines.append(f"{paint('Started:', DIM)}    {format_timestamp(run['startedAt'])}")
    if run.get("endedAt"):
        lines.append(f"{paint('Ended:', DIM)}      {format_timestamp(run['endedAt'])}")
    duration = calculate_duration(run.get("startedAt"), run.get("endedAt"), now=now)
    lines.append(f"{paint('Duration:', DIM)}   {duration}")

    if "output" in run:
        lines.append("")
        lines.append(paint("Output:", DIM))
        for line in indented_json(run["output"]).split("\n"):
            lines.append(f"  {paint(line, WHITE)}")
    return "\n".join(lines)


def format_run_jobs(jobs):
    if not jobs:
        return paint("No jobs found for this run", YELLOW)
    lines = [paint(f"Jobs ({len(jobs)})", BOLD), ""]
    for job in jobs:
        started, ended = job.get("startedAt"), job.get("endedAt")
        duration = format_duration(started, ended) if started and ended else ""
        ts = format_timestamp(started) if started else ""
        step = paint(_trunc(job["stepId"], 30), MAGENTA)
        short_id = paint(job["jobId"][:12], DIM)
        lines.append(f"{ts} {format_status_badge(job['status'])} {step} {short_id} {duration}")
        error = job.get("error")
        if error:
            lines.append("  " + paint(f"Error: {error}", RED))
        if "output" in job:
            lines.append("  " + paint(f"Output: {compact_json(job['output'])}", DIM))
    return "\n".join(lines)


def format_cancel_result(result):
    return "\n".join(
        [
            f"{paint('✓', GREEN)} Cancellation complete",
            f"  {paint('Runs cancelled:', DIM)} {result['cancelled']}",
        ]
    )
