#!/usr/bin/env python3
"""
hardinspect CLI Validators Module

Provides input validation functions for CLI arguments.

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

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

console = Console(stderr=True)


def validate_inputs(
    files: Sequence[str],
    output: str | None,
    config: str | None,
) -> list[str]:
    """
    Validate all user inputs.

    Per-file problems (missing, unreadable, not ELF) are reported during
    analysis so that the remaining files are still checked.

    Args:
        files: Files to analyze
        output: JSON output file path
        config: Config file path

    Returns:
        List of validation error messages (empty if all valid)
    """
    errors: list[str] = []

    errors.extend(validate_files_input(files))
    errors.extend(validate_output_input(output))
    errors.extend(validate_config_input(config))

    return errors


def validate_files_input(files: Sequence[str]) -> list[str]:
    if not files:
        return ["At least one FILE argument is required"]
    return []


def validate_output_input(output: str | None) -> list[str]:
    """
    Validate output path input.

    Args:
        output: Output file path

    Returns:
        List of validation error messages (empty if valid)
    """
    errors: list[str] = []
    if output:
        output_path = Path(output)
        if output_path.is_dir():
            errors.append(f"Output path is a directory: {output}")
        elif output_path.exists():
            try:
                # Append mode checks permissions without truncating
                with open(output_path, "a"):
                    pass
            except PermissionError:
                errors.append(f"Cannot write to output file: {output}")
        else:
            parent = output_path.parent
            if not parent.is_dir():
                errors.append(f"Output directory does not exist: {parent}")
    return errors


def validate_config_input(config: str | None) -> list[str]:
    """
    Validate config file input.

    Args:
        config: Config file path

    Returns:
        List of validation error messages (empty if valid)
    """
    errors: list[str] = []
    if config:
        config_path = Path(config)
        if not config_path.exists():
            errors.append(f"Config file does not exist: {config}")
        elif not config_path.is_file():
            errors.append(f"Config path is not a file: {config}")
        elif config_path.suffix.lower() != ".json":
            errors.append(f"Config file must be JSON: {config}")
    return errors


def display_validation_errors(validation_errors: list[str]) -> None:
    """
    Display validation errors.

    Args:
        validation_errors: List of error messages
    """
    for error in validation_errors:
        console.print(f"[red]Error: {error}[/red]")
