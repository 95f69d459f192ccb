#!/usr/bin/env python3
"""
hardinspect CLI Display Module

Console rendering of hardening reports.
"""

from rich.console import Console
from rich.markup import escape

from ..domain.results import UNKNOWN_PATH
from ..schemas.hardening import HardeningReport
from .presenter import CheckStatus, PresentedCheck

STATUS_STYLES = {
    CheckStatus.GOOD: "green",
    CheckStatus.UNKNOWN: "yellow",
    CheckStatus.BAD: "red",
}

IGNORED_SUFFIX = " (ignored)"


def format_check_line(check: PresentedCheck, color: bool = False) -> str:
    """Build the rich markup for one check line."""
    text = escape(check.result.text)
    if color:
        style = STATUS_STYLES[check.result.status]
        text = f"[{style}]{text}[/{style}]"
    ignored = IGNORED_SUFFIX if check.ignored else ""
    return f" {check.title}: {text}{escape(check.result.comment)}{ignored}"


def display_report(
    console: Console,
    report: HardeningReport,
    checks: list[PresentedCheck],
    color: bool = False,
) -> None:
    console.print(f"{escape(report.filename)}:")
    for check in checks:
        console.print(format_check_line(check, color))
    for entry in report.search_paths:
        path = entry.path if entry.path is not None else UNKNOWN_PATH
        console.print(f" {entry.kind.value}: {escape(path)}")


def display_failure(console: Console, filename: str, error: str, color: bool = False) -> None:
    message = f"{escape(filename)}: error: {escape(error)}"
    console.print(f"[red]{message}[/red]" if color else message)
