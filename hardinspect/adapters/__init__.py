#!/usr/bin/env python3
"""
hardinspect Adapters Module

Adapters translate between third-party binary parsers and the library-neutral
models in hardinspect.domain, so the hardening checks never touch a parser
API directly.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)

Key Components:
    parse_elf: pyelftools-backed ELF image parser
    ArpyArchiveSource: arpy-backed static archive reader

Example:
    >>> from hardinspect.adapters import ArpyArchiveSource, parse_elf
    >>> obj = parse_elf(open("/bin/true", "rb").read())
    >>> obj.kind
    <ObjectKind.SHARED: 'shared'>
"""

from .archive_adapter import AR_MAGIC, ArpyArchiveSource
from .elf_adapter import ELF_MAGIC, parse_elf

__all__ = ["AR_MAGIC", "ELF_MAGIC", "ArpyArchiveSource", "parse_elf"]
