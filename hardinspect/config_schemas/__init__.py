#!/usr/bin/env python3
"""
hardinspect Configuration Schemas

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .schemas import (
    CHECK_NAMES,
    AnalysisConfig,
    ChecksConfig,
    GeneralConfig,
    HardInspectConfig,
    OutputConfig,
)

__all__ = [
    "HardInspectConfig",
    "GeneralConfig",
    "OutputConfig",
    "ChecksConfig",
    "AnalysisConfig",
    "CHECK_NAMES",
]
