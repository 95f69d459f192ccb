#!/usr/bin/env python3
"""
hardinspect CLI Commands - Analyze Command

Runs the hardening checks over every FILE argument and reports the results.

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

from pathlib import Path
from typing import Any

from ...config import Config
from ...config_schemas import CHECK_NAMES
from ...core import HardeningInspector
from ...exceptions import HardInspectError
from ...schemas.hardening import HardeningFailure, HardeningReport
from ...utils.output_json import JsonOutputFormatter
from ..display import display_failure, display_report
from ..presenter import present_report, report_failed
from .base import (
    EXIT_CHECK_FAILED,
    EXIT_ERROR,
    EXIT_OK,
    Command,
    configure_logging_levels,
    create_console,
)


def build_check_overrides(args: dict[str, Any]) -> dict[str, Any]:
    """Translate CLI ignore flags and --color into config overrides."""
    checks = {f"ignore_{name}": True for name in CHECK_NAMES if args.get(f"ignore_{name}")}
    overrides: dict[str, Any] = {}
    if checks:
        overrides["checks"] = checks
    if args.get("color"):
        overrides["output"] = {"color": True}
    return overrides


class AnalyzeCommand(Command):
    """
    Command for checking the hardening of one or more files.

    Every file is analyzed even if an earlier one fails. The exit code is the
    worst outcome seen: 2 if any file could not be analyzed, otherwise 1 if
    any non-ignored check is bad, otherwise 0.
    """

    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute hardening analysis.

        Args:
            args: Dictionary containing:
                - files: Paths of ELF binaries or static archives
                - config: Optional config file path
                - output_json: JSON output flag
                - output: JSON output file path
                - color: Colourize console output
                - ignore_<check>: Do not fail on a bad <check>

        Returns:
            Exit code
        """
        try:
            config = self._get_config(args.get("config"))
            config.apply_overrides(build_check_overrides(args))
        except (ValueError, TypeError) as e:
            self.context.logger.error(f"Invalid configuration: {e}")
            return EXIT_ERROR

        general = config.typed_config.general
        if not (self.context.verbose or self.context.quiet) and (general.verbose or general.quiet):
            configure_logging_levels(general.verbose, general.quiet)

        color = config.typed_config.output.color
        if color and not self.context.color:
            self.context.console = create_console(color=True)
            self.context.color = True

        output_file = args.get("output")
        emit_json = bool(args.get("output_json") or output_file)
        show_console = not args.get("output_json")

        exit_code = EXIT_OK
        entries: list[HardeningReport | HardeningFailure] = []

        for filename in args["files"]:
            try:
                report = self._analyze_file(filename, config)
            except (HardInspectError, ValueError, OSError) as e:
                self.context.logger.debug(f"Analysis of {filename} failed: {e}")
                entries.append(HardeningFailure(filename=filename, error=str(e) or type(e).__name__))
                if show_console:
                    display_failure(self.context.console, filename, str(e), color)
                exit_code = max(exit_code, EXIT_ERROR)
                continue

            checks = present_report(report, config.ignored_checks)
            if report_failed(checks):
                exit_code = max(exit_code, EXIT_CHECK_FAILED)

            entries.append(report)
            if show_console:
                display_report(self.context.console, report, checks, color)

        if emit_json:
            self._output_json(entries, config, output_file)

        return exit_code

    def _analyze_file(self, filename: str, config: Config) -> HardeningReport:
        with HardeningInspector(filename, config=config) as inspector:
            return inspector.analyze()

    def _output_json(
        self,
        entries: list[HardeningReport | HardeningFailure],
        config: Config,
        output_file: str | Path | None,
    ) -> None:
        """Write the JSON report to the output file, or stdout."""
        formatter = JsonOutputFormatter(entries)
        indent = config.typed_config.output.json_indent

        if output_file:
            formatter.write(output_file, indent=indent)
        else:
            print(formatter.to_json(indent=indent))
