#!/usr/bin/env python3
"""
hardinspect - Command Line Interface

Usage: hardinspect [OPTIONS] FILE...

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

import sys
from dataclasses import dataclass
from typing import Any

import click

from .cli.commands import EXIT_ERROR, AnalyzeCommand, CommandContext, VersionCommand
from .cli.validators import display_validation_errors, validate_inputs


@dataclass
class CLIArgs:
    files: tuple[str, ...]
    color: bool
    output_json: bool
    output: str | None
    verbose: bool
    quiet: bool
    config: str | None
    ignore_pie: bool
    ignore_nx_stack: bool
    ignore_stack_protector: bool
    ignore_fortify: bool
    ignore_relro: bool
    ignore_bind_now: bool
    version: bool


def main(**kwargs: Any):
    """hardinspect - Check ELF binaries and static archives for hardening features."""
    args = CLIArgs(**kwargs)
    run_cli(args)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, type=click.Path())
@click.option("-c", "--color", is_flag=True, help="Colorize check results")
@click.option("-j", "--json", "output_json", is_flag=True, help="Output results in JSON format")
@click.option("-o", "--output", help="Write JSON results to this file")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("-q", "--quiet", is_flag=True, help="Only log errors")
@click.option("--config", help="Custom config file path")
@click.option("-p", "--nopie", "ignore_pie", is_flag=True, help="Do not fail on missing PIE")
@click.option(
    "-n", "--nonxstack", "ignore_nx_stack", is_flag=True, help="Do not fail on executable stack"
)
@click.option(
    "-s",
    "--nostackprotector",
    "ignore_stack_protector",
    is_flag=True,
    help="Do not fail on missing stack protector",
)
@click.option(
    "-f", "--nofortify", "ignore_fortify", is_flag=True, help="Do not fail on missing Fortify Source"
)
@click.option("-r", "--norelro", "ignore_relro", is_flag=True, help="Do not fail on missing RelRO")
@click.option(
    "-b", "--nobindnow", "ignore_bind_now", is_flag=True, help="Do not fail on lazy binding"
)
@click.option("--version", is_flag=True, help="Show version information and exit")
def cli(**kwargs: Any):
    """Check ELF binaries and static archives for hardening features."""
    main(**kwargs)


def run_cli(args: CLIArgs) -> None:
    """Primary CLI workflow separated for clarity and testability."""
    if args.version:
        _execute_version()

    validation_errors = validate_inputs(args.files, args.output, args.config)
    if validation_errors:
        display_validation_errors(validation_errors)
        sys.exit(EXIT_ERROR)

    if args.verbose and args.quiet:
        display_validation_errors(["--verbose and --quiet are mutually exclusive"])
        sys.exit(EXIT_ERROR)

    context = CommandContext.create(verbose=args.verbose, quiet=args.quiet, color=args.color)
    command = AnalyzeCommand(context)
    sys.exit(command.execute(vars(args)))


def _execute_version() -> None:
    """Run the VersionCommand and exit."""
    version_cmd = VersionCommand()
    sys.exit(version_cmd.execute({}))


if __name__ == "__main__":
    cli()
