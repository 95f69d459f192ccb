#!/usr/bin/env python3
"""
hardinspect Configuration Management
"""

import copy
import os
from pathlib import Path
from typing import Any

from .config_schemas import CHECK_NAMES, HardInspectConfig
from .config_store import ConfigStore


class Config:
    """Configuration manager for hardinspect"""

    DEFAULT_CONFIG: dict[str, dict[str, Any]] = HardInspectConfig().to_dict()

    def __init__(self, config_path: str | None = None):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path or self._get_default_config_path()

        # Load configuration if exists
        if os.path.exists(self.config_path):
            self.load_config()

        self.validate()

    @staticmethod
    def _get_default_config_path() -> str:
        """Get default configuration file path"""
        return str(Path.home() / ".hardinspect" / "config.json")

    def load_config(self) -> None:
        """Load configuration from file"""
        user_config = ConfigStore.load(self.config_path)
        if user_config:
            self._merge_config(user_config)

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if section in self.config and isinstance(settings, dict):
                self.config[section].update(settings)
            else:
                self.config[section] = settings

    def apply_overrides(self, overrides: dict[str, Any]) -> None:
        """Apply command line overrides on top of file and default values"""
        self._merge_config(overrides)
        self.validate()

    @property
    def typed_config(self) -> HardInspectConfig:
        """Validated, immutable view of the current settings"""
        known = {
            section: values
            for section, values in self.config.items()
            if section in self.DEFAULT_CONFIG
        }
        return HardInspectConfig.from_dict(known)

    def validate(self) -> HardInspectConfig:
        """Raise ValueError or TypeError if any setting is invalid"""
        return self.typed_config

    @property
    def ignored_checks(self) -> list[str]:
        checks = self.typed_config.checks
        return [name for name in CHECK_NAMES if checks.is_ignored(name)]
