"""Run lint, format, type and test checks; print one JSON report.

Usage:
    python scripts/quality_gate.py              # everything
    python scripts/quality_gate.py --skip-tests # static checks only
    python scripts/quality_gate.py --fix        # let ruff fix what it can first
"""

from __future__ import annotations

import argparse
import json
import re
import subprocess
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

MYPY_TARGETS = ["inngest_ctl/"]


def _run(cmd: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", *cmd],
        capture_output=True,
        text=True,
        cwd=str(ROOT),
        timeout=300,
    )


def _timed(fn):
    t0 = time.monotonic()
    result = fn()
    result["duration_s"] = round(time.monotonic() - t0, 1)
    return result


def check_ruff_lint(fix: bool = False) -> dict:
    if fix:
        _run(["ruff", "check", "--fix", "."])
    r = _run(["ruff", "check", "."])
    errors = sum(1 for line in r.stdout.splitlines() if re.match(r"^\S+:\d+:\d+:", line))
    return {
        "status": "pass" if r.returncode == 0 else "fail",
        "errors": errors,
        "output": r.stdout.strip(),
    }


def check_ruff_format() -> dict:
    r = _run(["ruff", "format", "--check", "."])
    lines = r.stderr.splitlines() + r.stdout.splitlines()
    return {
        "status": "pass" if r.returncode == 0 else "fail",
        "files_to_reformat": sum(1 for line in lines if line.startswith("Would reformat")),
        "output": r.stdout.strip(),
    }


def check_mypy() -> dict:
    r = _run(["mypy", *MYPY_TARGETS])
    return {
        "status": "pass" if r.returncode == 0 else "fail",
        "errors": sum(1 for line in r.stdout.splitlines() if ": error:" in line),
        "output": r.stdout.strip(),
    }


def check_pytest() -> dict:
    r = _run(["pytest", "tests/", "-q", "--no-header", "--tb=short"])
    summary = r.stdout.strip().splitlines()[-1:] or [""]
    passed = re.search(r"(\d+)\s+passed", summary[0])
    failed = re.search(r"(\d+)\s+failed", summary[0])
    return {
        "status": "pass" if r.returncode == 0 else "fail",
        "passed": int(passed.group(1)) if passed else 0,
        "failed": int(failed.group(1)) if failed else 0,
        # Tail only; full pytest logs are noisy.
        "output": r.stdout.strip()[-2000:],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Run all quality checks")
    parser.add_argument("--skip-tests", action="store_true", help="Skip pytest")
    parser.add_argument("--fix", action="store_true", help="Auto-fix ruff issues first")
    args = parser.parse_args()

    t0 = time.monotonic()
    checks: dict[str, dict] = {
        "ruff_lint": _timed(lambda: check_ruff_lint(fix=args.fix)),
        "ruff_format": _timed(check_ruff_format),
        "mypy": _timed(check_mypy),
    }
    if args.skip_tests:
        checks["pytest"] = {"status": "skip", "reason": "--skip-tests"}
    else:
        checks["pytest"] = _timed(check_pytest)

    for check in checks.values():
        if check["status"] != "fail":
            check.pop("output", None)

    ok = all(c["status"] in ("pass", "skip") for c in checks.values())
    report = {
        "overall": "pass" if ok else "fail",
        "checks": checks,
        "total_duration_s": round(time.monotonic() - t0, 1),
    }
    print(json.dumps(report, indent=2))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
