#!/usr/bin/env python3
"""
hardinspect CLI Package

Command-line interface for the hardinspect hardening checker.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from .presenter import CheckResult, CheckStatus, PresentedCheck, present_report, report_failed

__all__ = [
    "main",
    "CheckResult",
    "CheckStatus",
    "PresentedCheck",
    "present_report",
    "report_failed",
]


def main() -> None:
    """Console script entry point."""
    from ..cli_main import cli

    cli()
