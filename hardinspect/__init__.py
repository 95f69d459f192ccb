#!/usr/bin/env python3
"""
hardinspect - ELF binary hardening checker
Reports PIE, NX stack, stack protector, Fortify Source, RelRO, BindNow and
library search paths for ELF images and static archives.

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __url__, __version__

__description__ = "ELF binary hardening checker"

from .core import HardeningInspector, analyze_bytes
from .exceptions import ExtractionError, HardInspectError, ParseError, UnsupportedFormatError

__all__ = [
    "HardeningInspector",
    "analyze_bytes",
    "HardInspectError",
    "ExtractionError",
    "ParseError",
    "UnsupportedFormatError",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
]
