#!/usr/bin/env python3
"""
hardinspect Pydantic Schemas

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .base import AnalysisResultBase
from .hardening import HardeningFailure, HardeningReport, InputType, SearchPathEntry

__all__ = [
    "AnalysisResultBase",
    "HardeningFailure",
    "HardeningReport",
    "InputType",
    "SearchPathEntry",
]
