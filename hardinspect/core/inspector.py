#!/usr/bin/env python3
"""Core inspector dispatching ELF images and static archives to the hardening checks."""

import time
from pathlib import Path
from types import TracebackType
from typing import Literal

from ..adapters.archive_adapter import AR_MAGIC, ArpyArchiveSource
from ..adapters.elf_adapter import ELF_MAGIC, parse_elf
from ..config import Config
from ..domain.results import HardeningVerdict
from ..exceptions import ParseError, UnsupportedFormatError
from ..modules.archive_security import analyze_archive
from ..modules.elf_security import analyze_object
from ..schemas.hardening import HardeningReport, InputType
from ..utils.logger import get_logger
from .constants import MIN_ELF_SIZE_BYTES, MIN_HEADER_SIZE_BYTES
from .file_validator import FileValidator

logger = get_logger(__name__)


def detect_input_type(data: bytes) -> InputType:
    """
    Identify the input by its magic bytes.

    Raises:
        UnsupportedFormatError: For anything other than ELF or ar
    """
    header = data[:MIN_HEADER_SIZE_BYTES]
    if header.startswith(ELF_MAGIC):
        return InputType.ELF
    if header.startswith(AR_MAGIC):
        return InputType.ARCHIVE
    raise UnsupportedFormatError("not an ELF file or ar archive")


def analyze_bytes(data: bytes, name: str = "<memory>") -> tuple[InputType, HardeningVerdict]:
    """
    Analyze an in-memory ELF image or static archive.

    Raises:
        ExtractionError: An archive member could not be read
        ParseError: The bytes (or an archive member) are not valid ELF
    """
    input_type = detect_input_type(data)
    logger.debug(f"Analyzing {name} as {input_type.value}")

    if input_type is InputType.ARCHIVE:
        return input_type, analyze_archive(ArpyArchiveSource(data))

    if len(data) < MIN_ELF_SIZE_BYTES:
        raise ParseError(f"truncated ELF header ({len(data)} bytes)")
    return input_type, analyze_object(parse_elf(data))


class HardeningInspector:
    """Hardening analysis facade for one file on disk."""

    def __init__(self, filename: str, config: Config | None = None):
        """
        Initialize HardeningInspector with file and configuration.

        Args:
            filename: Path to the ELF binary or static archive
            config: Configuration object (uses default if None)

        Raises:
            ValueError: If file validation fails
        """
        self.filename = filename
        self.file_path = Path(filename)
        self.config = config if config is not None else Config()

        max_size_mb = self.config.typed_config.analysis.max_file_size_mb
        if not FileValidator(filename, max_size_mb=max_size_mb).validate():
            logger.error(f"File validation failed for: {filename}")
            raise ValueError(f"File validation failed: {filename}")

        self._data: bytes | None = None

    def __enter__(self) -> "HardeningInspector":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> Literal[False]:
        self.close()
        return False

    def close(self) -> None:
        """Release the file contents held for analysis."""
        self._data = None

    def _read(self) -> bytes:
        if self._data is None:
            self._data = self.file_path.read_bytes()
        return self._data

    def analyze(self) -> HardeningReport:
        """
        Run every hardening check on the file.

        Raises:
            ExtractionError: An archive member could not be read
            ParseError: The file (or an archive member) is not valid ELF
        """
        start = time.perf_counter()
        input_type, verdict = analyze_bytes(self._read(), self.filename)
        elapsed = time.perf_counter() - start
        logger.debug(f"Analysis of {self.filename} finished in {elapsed:.3f}s")

        return HardeningReport.from_verdict(
            verdict,
            filename=self.filename,
            input_type=input_type,
            execution_time=elapsed,
        )
