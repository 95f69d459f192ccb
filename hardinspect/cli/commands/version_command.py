#!/usr/bin/env python3
"""
hardinspect CLI Commands - Version Command

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

from typing import Any

from ...__version__ import __author__, __license__, __url__, __version__
from ..presenter import CHECK_TITLES
from .base import EXIT_OK, Command

SUPPORTED_INPUTS = (
    "ELF executables",
    "shared libraries",
    "relocatable objects",
    "ar archives of relocatable objects",
)


class VersionCommand(Command):
    """
    Command for displaying version information.

    Besides version, author, license and repository, lists the hardening
    checks in report order under the names the config file uses for
    ignore_<check>, and the kinds of input that can be analyzed.
    """

    def execute(self, _args: dict[str, Any]) -> int:
        console = self.context.console
        console.print(
            f"[bold cyan]hardinspect[/bold cyan] version [bold green]{__version__}[/bold green]"
        )
        console.print(f"Author: {__author__}")
        console.print(f"License: {__license__}")
        console.print(f"Repository: {__url__}")
        self._display_checks()
        console.print(f"Inputs: {', '.join(SUPPORTED_INPUTS)}")
        return EXIT_OK

    def _display_checks(self) -> None:
        self.context.console.print("Checks:")
        for name, title in CHECK_TITLES.items():
            self.context.console.print(f"  {name:<16} {title}")
