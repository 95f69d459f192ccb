#!/usr/bin/env python3
"""
Parsed ELF Object Model

Read-only, library-neutral view of one ELF image as handed to the hardening
checks by the parsing adapters. Everything here is frozen: an object is built
once per analysis call and never mutated afterwards.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Program header types, named as the ELF gABI and GNU extensions name them
PT_PHDR = "PT_PHDR"
PT_GNU_STACK = "PT_GNU_STACK"
PT_GNU_RELRO = "PT_GNU_RELRO"

# Dynamic section tags
DT_BIND_NOW = "DT_BIND_NOW"
DT_RPATH = "DT_RPATH"
DT_RUNPATH = "DT_RUNPATH"

# Segment permission bits
PF_X = 0x1
PF_W = 0x2
PF_R = 0x4


class ObjectKind(str, Enum):
    """ELF object type (e_type)"""

    EXECUTABLE = "executable"  # ET_EXEC
    SHARED = "shared"  # ET_DYN
    RELOCATABLE = "relocatable"  # ET_REL
    OTHER = "other"

    @classmethod
    def from_e_type(cls, e_type: str | int) -> ObjectKind:
        return _E_TYPE_KINDS.get(e_type, cls.OTHER)


_E_TYPE_KINDS: dict[str | int, ObjectKind] = {
    "ET_EXEC": ObjectKind.EXECUTABLE,
    "ET_DYN": ObjectKind.SHARED,
    "ET_REL": ObjectKind.RELOCATABLE,
    2: ObjectKind.EXECUTABLE,
    3: ObjectKind.SHARED,
    1: ObjectKind.RELOCATABLE,
}


@dataclass(frozen=True)
class ProgramHeader:
    """One program header record: segment type and permission flags."""

    type: str | int
    flags: int = 0

    @property
    def executable(self) -> bool:
        return bool(self.flags & PF_X)


@dataclass(frozen=True)
class DynamicEntry:
    """One dynamic section entry (d_tag, d_val)."""

    tag: str | int
    value: int = 0


@dataclass(frozen=True)
class Symbol:
    """
    Symbol table entry.

    ``name`` is the name already resolved through the symbol table's linked
    string table, or ``None`` when the name offset could not be resolved.
    """

    name: str | None


@dataclass(frozen=True)
class StringTable:
    """
    Raw NUL-terminated string table (e.g. ``.dynstr``).

    Lookups never raise: an offset outside the table, a string without a
    terminator or bytes that are not valid UTF-8 all resolve to ``None``.
    """

    data: bytes = b""

    def get(self, offset: int) -> str | None:
        if offset < 0 or offset >= len(self.data):
            return None
        end = self.data.find(b"\x00", offset)
        if end < 0:
            return None
        try:
            return self.data[offset:end].decode("utf-8")
        except UnicodeDecodeError:
            return None


@dataclass(frozen=True)
class ParsedObject:
    """
    Read-only view of one ELF image.

    Attributes:
        kind: Object type from the ELF header
        program_headers: Program headers in file order
        dynamic: Dynamic section entries, or None when there is no dynamic section
        dynamic_symbols: Entries of the dynamic symbol table (.dynsym)
        symbols: Entries of the full symbol table (.symtab)
        dynamic_strings: String table referenced by dynamic entry values
    """

    kind: ObjectKind
    program_headers: tuple[ProgramHeader, ...] = ()
    dynamic: tuple[DynamicEntry, ...] | None = None
    dynamic_symbols: tuple[Symbol, ...] = ()
    symbols: tuple[Symbol, ...] = ()
    dynamic_strings: StringTable = field(default_factory=StringTable)

    @property
    def is_relocatable(self) -> bool:
        return self.kind is ObjectKind.RELOCATABLE

    def find_program_header(self, header_type: str | int) -> ProgramHeader | None:
        """Return the first program header of the given type, if any."""
        for header in self.program_headers:
            if header.type == header_type:
                return header
        return None

    def has_program_header(self, header_type: str | int) -> bool:
        return self.find_program_header(header_type) is not None

    def has_dynamic_entry(self, tag: str | int) -> bool:
        if self.dynamic is None:
            return False
        return any(entry.tag == tag for entry in self.dynamic)


@dataclass(frozen=True)
class ArchiveMember:
    """A named byte range inside a static archive's backing bytes."""

    name: str
    offset: int
    size: int
