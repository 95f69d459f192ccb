#!/usr/bin/env python3
"""
Logging utilities for hardinspect
"""

import logging
import sys
from pathlib import Path

LOG_DIR = Path.home() / ".hardinspect" / "logs"


def setup_logger(name: str = "hardinspect", level: int = logging.INFO) -> logging.Logger:
    """Setup logger with console and file handlers"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    # Console handler (stderr keeps report output clean)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    # File handler (optional)
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(LOG_DIR / "hardinspect.log")
        file_handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

        console_handler.setFormatter(formatter)
        file_handler.setFormatter(formatter)

        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

    except OSError:
        # Fallback to console only
        formatter = logging.Formatter("%(levelname)s - %(message)s")
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = "hardinspect") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
