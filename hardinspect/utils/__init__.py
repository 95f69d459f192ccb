#!/usr/bin/env python3
"""Utility helpers for hardinspect."""

from .logger import get_logger, setup_logger
from .output_json import JsonOutputFormatter

__all__ = ["JsonOutputFormatter", "get_logger", "setup_logger"]
