#!/usr/bin/env python3
"""
hardinspect Core Module

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .file_validator import FileValidator
from .inspector import HardeningInspector, analyze_bytes, detect_input_type

__all__ = ["FileValidator", "HardeningInspector", "analyze_bytes", "detect_input_type"]
