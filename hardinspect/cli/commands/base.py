#!/usr/bin/env python3
"""
hardinspect CLI Commands - Base Abstractions

Command Pattern implementation for hardinspect CLI commands.

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

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from rich.console import Console

from ...config import Config
from ...utils.logger import setup_logger

EXIT_OK = 0
EXIT_CHECK_FAILED = 1
EXIT_ERROR = 2


def configure_logging_levels(verbose: bool, quiet: bool) -> None:
    """Configure logging levels based on verbosity settings."""
    if quiet:
        logging.getLogger("hardinspect").setLevel(logging.ERROR)
        logging.getLogger("elftools").setLevel(logging.CRITICAL)
        return

    level = logging.INFO if verbose else logging.WARNING
    logging.getLogger("hardinspect").setLevel(level)
    logging.getLogger("hardinspect.modules").setLevel(level)


def create_console(color: bool = False) -> Console:
    """Console for report output; colour is forced on only when requested."""
    if color:
        return Console(force_terminal=True, soft_wrap=True, highlight=False)
    return Console(no_color=True, soft_wrap=True, highlight=False)


@dataclass
class CommandContext:
    """
    Shared context for all commands.

    Attributes:
        console: Rich console for formatted output
        logger: Logger instance for command execution logging
        config: Application configuration object
        verbose: Flag for verbose output mode
        quiet: Flag for suppressing non-critical output
        color: Whether report text is colourized
    """

    console: Console
    logger: Any
    config: Config | None = None
    verbose: bool = False
    quiet: bool = False
    color: bool = False

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        verbose: bool = False,
        quiet: bool = False,
        color: bool = False,
    ) -> "CommandContext":
        """
        Factory method to create a CommandContext with proper initialization.

        Args:
            config: Optional configuration object
            verbose: Enable verbose output
            quiet: Suppress non-critical output
            color: Colourize check results

        Returns:
            Configured CommandContext instance
        """
        logger = setup_logger()
        configure_logging_levels(verbose, quiet)

        return cls(
            console=create_console(color),
            logger=logger,
            config=config,
            verbose=verbose,
            quiet=quiet,
            color=color,
        )


class Command(ABC):
    """
    Abstract base class for all CLI commands.

    Each command encapsulates one CLI operation and returns the process exit
    code from execute().
    """

    def __init__(self, context: CommandContext | None = None):
        self._context = context

    @abstractmethod
    def execute(self, args: dict[str, Any]) -> int:
        """
        Execute the command with provided arguments.

        Args:
            args: Dictionary of command arguments (from Click)

        Returns:
            Exit code
        """

    @property
    def context(self) -> CommandContext:
        """Get command context, creating a default if not set."""
        if self._context is None:
            self._context = CommandContext.create()
        return self._context

    @context.setter
    def context(self, value: CommandContext) -> None:
        self._context = value

    def _get_config(self, config_path: str | None = None) -> Config:
        """
        Load configuration from path or use context config.

        Args:
            config_path: Optional path to custom config file

        Returns:
            Config object instance
        """
        if config_path:
            return Config(config_path)
        if self.context.config is None:
            return Config()
        return self.context.config
