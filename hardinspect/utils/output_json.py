#!/usr/bin/env python3
"""
JSON report writer.

The JSON report is always an array with one object per input file, in the
order the files were given. Successful files serialize as HardeningReport,
files that could not be analyzed as HardeningFailure.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from ..schemas.base import AnalysisResultBase
from .logger import get_logger

logger = get_logger(__name__)


class JsonOutputFormatter:
    """Serialize per-file analysis entries as a JSON array."""

    def __init__(self, entries: Sequence[AnalysisResultBase]):
        self.entries = list(entries)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps([entry.model_dump_safe() for entry in self.entries], indent=indent)

    def write(self, path: str | Path, indent: int = 2) -> None:
        """Write the report to ``path``, replacing any existing file."""
        with open(path, "w") as handle:
            handle.write(self.to_json(indent=indent))
            handle.write("\n")
        logger.info(f"JSON results saved to: {path} ({len(self.entries)} entries)")
