#!/usr/bin/env python3
"""
pyelftools adapter

Translates an in-memory ELF image into the read-only ParsedObject view used by
the hardening checks. All ELF decoding is delegated to pyelftools; this module
only picks out program headers, dynamic entries, symbol tables and the dynamic
string table.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import io
from typing import Any

from elftools.common.exceptions import ELFError
from elftools.elf.dynamic import DynamicSection, DynamicSegment
from elftools.elf.elffile import ELFFile
from elftools.elf.sections import SymbolTableSection

from ..domain.parsed_object import (
    DynamicEntry,
    ObjectKind,
    ParsedObject,
    ProgramHeader,
    StringTable,
    Symbol,
)
from ..exceptions import ParseError
from ..utils.logger import get_logger

logger = get_logger(__name__)

ELF_MAGIC = b"\x7fELF"


def parse_elf(data: bytes) -> ParsedObject:
    """
    Parse ELF bytes into a ParsedObject.

    Raises:
        ParseError: If the bytes are not a valid ELF object
    """
    if not data.startswith(ELF_MAGIC):
        raise ParseError("not an ELF object (bad magic)")

    try:
        elffile = ELFFile(io.BytesIO(data))
        return _build_parsed_object(elffile)
    except ELFError as exc:
        raise ParseError(f"invalid ELF object: {exc}") from exc
    except Exception as exc:
        raise ParseError(f"malformed ELF object: {exc}") from exc


def _build_parsed_object(elffile: ELFFile) -> ParsedObject:
    program_headers = tuple(
        ProgramHeader(type=segment["p_type"], flags=segment["p_flags"])
        for segment in elffile.iter_segments()
    )

    dynamic_symbols: tuple[Symbol, ...] = ()
    symbols: tuple[Symbol, ...] = ()
    dynamic_section = None
    for section in elffile.iter_sections():
        if isinstance(section, DynamicSection) and dynamic_section is None:
            dynamic_section = section
        elif isinstance(section, SymbolTableSection):
            if section["sh_type"] == "SHT_DYNSYM":
                dynamic_symbols = _read_symbols(section)
            elif section["sh_type"] == "SHT_SYMTAB":
                symbols = _read_symbols(section)

    dynamic, dynamic_strings, segment_symbols = _read_dynamic(elffile, dynamic_section)
    if not dynamic_symbols:
        dynamic_symbols = segment_symbols

    return ParsedObject(
        kind=ObjectKind.from_e_type(elffile["e_type"]),
        program_headers=program_headers,
        dynamic=dynamic,
        dynamic_symbols=dynamic_symbols,
        symbols=symbols,
        dynamic_strings=dynamic_strings,
    )


def _read_symbols(section: SymbolTableSection) -> tuple[Symbol, ...]:
    if section["sh_entsize"] == 0:
        logger.debug(f"Skipping symbol table {section.name} with zero entry size")
        return ()
    return tuple(Symbol(symbol.name or None) for symbol in section.iter_symbols())


def _read_dynamic(
    elffile: ELFFile, section: DynamicSection | None
) -> tuple[tuple[DynamicEntry, ...] | None, StringTable, tuple[Symbol, ...]]:
    """
    Read dynamic entries and the dynamic string table.

    Section-less images fall back to PT_DYNAMIC, where the string table is
    located through DT_STRTAB/DT_STRSZ and the dynamic symbols through
    DT_SYMTAB. Images with a .dynamic section take their symbols from .dynsym.
    """
    if section is not None:
        entries = _dynamic_entries(section)
        return entries, StringTable(_linked_string_data(elffile, section)), ()

    for segment in elffile.iter_segments():
        if isinstance(segment, DynamicSegment):
            entries = _dynamic_entries(segment)
            strings = StringTable(_strtab_from_tags(elffile, entries))
            return entries, strings, _segment_symbols(segment, entries)

    return None, StringTable(), ()


def _segment_symbols(
    segment: DynamicSegment, entries: tuple[DynamicEntry, ...]
) -> tuple[Symbol, ...]:
    if not any(entry.tag == "DT_SYMTAB" for entry in entries):
        return ()
    return tuple(Symbol(symbol.name or None) for symbol in segment.iter_symbols())


def _dynamic_entries(container: Any) -> tuple[DynamicEntry, ...]:
    return tuple(
        DynamicEntry(tag=tag.entry.d_tag, value=tag.entry.d_val) for tag in container.iter_tags()
    )


def _linked_string_data(elffile: ELFFile, section: DynamicSection) -> bytes:
    link = section["sh_link"]
    if not link or link >= elffile.num_sections():
        return b""
    return elffile.get_section(link).data()


def _strtab_from_tags(elffile: ELFFile, entries: tuple[DynamicEntry, ...]) -> bytes:
    address = next((entry.value for entry in entries if entry.tag == "DT_STRTAB"), None)
    size = next((entry.value for entry in entries if entry.tag == "DT_STRSZ"), None)
    if address is None or not size:
        return b""

    offsets = list(elffile.address_offsets(address, size))
    if not offsets:
        return b""
    elffile.stream.seek(offsets[0])
    return elffile.stream.read(size)
