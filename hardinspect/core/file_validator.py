#!/usr/bin/env python3
"""
hardinspect File Validator - File validation logic for hardening analysis

This module provides the FileValidator class which handles all file validation
operations before analysis begins.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from pathlib import Path

from ..utils.logger import get_logger
from .constants import MIN_ARCHIVE_SIZE_BYTES

logger = get_logger(__name__)

BYTES_PER_MB = 1024 * 1024


class FileValidator:
    """
    Validates files before hardening analysis.

    This class encapsulates all file validation logic including:
    - File existence checks
    - Size validation (minimum and maximum)
    - File readability checks

    Attributes:
        file_path: Pathlib Path object for the file
        filename: String representation of the file path
        max_size_mb: Largest file accepted for in-memory analysis
    """

    def __init__(self, filename: str | Path, max_size_mb: int = 512):
        self.filename = str(filename)
        self.file_path = Path(filename)
        self.max_size_mb = max_size_mb

    def validate(self) -> bool:
        """
        Perform complete file validation.

        Returns:
            True if all validations pass, False otherwise
        """
        try:
            if not self._file_exists():
                return False

            if not self._is_size_valid(self._file_size_bytes()):
                return False

            return self._is_readable()

        except OSError as e:
            logger.error(f"Error validating file {self.filename}: {e}")
            return False

    def _file_exists(self) -> bool:
        if self.file_path.is_file():
            return True

        logger.error(f"File does not exist or is not a regular file: {self.filename}")
        return False

    def _file_size_bytes(self) -> int:
        return self.file_path.stat().st_size

    def _is_size_valid(self, file_size: int) -> bool:
        """
        Check if the file size is valid for analysis.

        Args:
            file_size: Size of the file in bytes

        Returns:
            True if size is valid, False otherwise
        """
        if file_size == 0:
            logger.error(f"File is empty: {self.filename}")
            return False

        if file_size < MIN_ARCHIVE_SIZE_BYTES:
            logger.error(f"File too small for analysis ({file_size} bytes): {self.filename}")
            return False

        if file_size > self.max_size_mb * BYTES_PER_MB:
            logger.error(
                f"File exceeds size limit ({file_size / BYTES_PER_MB:.1f}MB > "
                f"{self.max_size_mb}MB): {self.filename}"
            )
            return False

        return True

    def _is_readable(self) -> bool:
        try:
            with open(self.file_path, "rb") as handle:
                handle.read(1)
            return True
        except OSError as e:
            logger.error(f"File is not readable: {self.filename}: {e}")
            return False
