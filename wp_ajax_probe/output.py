"""Rendering of results and error reports."""

import json
import sys
from typing import TextIO

from .probe import ProbeResult


def _dump(obj) -> str:
    return json.dumps(obj, indent=2, ensure_ascii=False, default=str)


def format_human(result: ProbeResult) -> str:
    status_text = "OK" if result.status_code == 200 else "ERROR"
    body = "  " + _dump(result.response).replace("\n", "\n  ")
    return "\n".join([
        "",
        f"✓ AJAX Test: {result.action}",
        f"  URL: {result.url}",
        f"  Status: {result.status_code} {status_text}",
        f"  Response Time: {result.response_time_ms}ms",
        "",
        "  Response:",
        body,
        "",
    ])


def format_human_error(report: dict) -> str:
    lines = ["", f"✗ Error: {report['error']['message']}"]
    if report["suggestions"]:
        lines += ["", "  Suggestions:"]
        lines += [f"  - {s}" for s in report["suggestions"]]
    lines.append("")
    return "\n".join(lines)


def print_result(result: ProbeResult, fmt: str, stream: TextIO | None = None) -> None:
    stream = stream or sys.stdout
    text = _dump(result.to_dict()) if fmt == "json" else format_human(result)
    print(text, file=stream)


def print_error(report: dict, fmt: str, stream: TextIO | None = None) -> None:
    stream = stream or sys.stderr
    text = _dump(report) if fmt == "json" else format_human_error(report)
    print(text, file=stream)
