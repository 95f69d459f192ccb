#!/usr/bin/env python3
"""
hardinspect Configuration Schemas - Typed Dataclasses
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

from dataclasses import asdict, dataclass, field
from typing import Any

CHECK_NAMES = ("pie", "nx_stack", "stack_protector", "fortify", "relro", "bind_now")


@dataclass(frozen=True)
class GeneralConfig:
    """General configuration settings"""

    verbose: bool = False
    quiet: bool = False

    def __post_init__(self):
        """Validate configuration values"""
        if self.verbose and self.quiet:
            raise ValueError("verbose and quiet are mutually exclusive")


@dataclass(frozen=True)
class OutputConfig:
    """Output formatting configuration"""

    json_indent: int = 2
    color: bool = False

    def __post_init__(self):
        """Validate configuration values"""
        if self.json_indent < 0:
            raise ValueError("json_indent must be non-negative")


@dataclass(frozen=True)
class ChecksConfig:
    """Checks whose failure does not affect the exit status"""

    ignore_pie: bool = False
    ignore_nx_stack: bool = False
    ignore_stack_protector: bool = False
    ignore_fortify: bool = False
    ignore_relro: bool = False
    ignore_bind_now: bool = False

    def is_ignored(self, check: str) -> bool:
        """Check if a failing result for the named check is ignored"""
        if check not in CHECK_NAMES:
            raise KeyError(f"unknown check: {check}")
        return bool(getattr(self, f"ignore_{check}"))


@dataclass(frozen=True)
class AnalysisConfig:
    """Analysis limits configuration"""

    max_file_size_mb: int = 512

    def __post_init__(self):
        """Validate configuration values"""
        if self.max_file_size_mb < 1:
            raise ValueError("max_file_size_mb must be at least 1")


@dataclass(frozen=True)
class HardInspectConfig:
    """Main hardinspect configuration container"""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    checks: ChecksConfig = field(default_factory=ChecksConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "HardInspectConfig":
        """Create configuration from dictionary"""
        if not isinstance(config_dict, dict):
            raise TypeError("config_dict must be a dictionary")

        kwargs: dict[str, Any] = {}

        if "general" in config_dict:
            kwargs["general"] = GeneralConfig(**config_dict["general"])

        if "output" in config_dict:
            kwargs["output"] = OutputConfig(**config_dict["output"])

        if "checks" in config_dict:
            kwargs["checks"] = ChecksConfig(**config_dict["checks"])

        if "analysis" in config_dict:
            kwargs["analysis"] = AnalysisConfig(**config_dict["analysis"])

        return cls(**kwargs)
