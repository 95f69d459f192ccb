#!/usr/bin/env python3
"""
hardinspect Analysis Modules

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .archive_security import analyze_archive, member_protection
from .elf_security import analyze_object
from .protected_calls import CallProtection, classify

__all__ = [
    "CallProtection",
    "analyze_archive",
    "analyze_object",
    "classify",
    "member_protection",
]
