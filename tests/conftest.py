"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import struct
from pathlib import Path

import pytest

from hardinspect.config import Config
from hardinspect.domain import (
    ArchiveMember,
    DynamicEntry,
    ObjectKind,
    ParsedObject,
    ProgramHeader,
    StringTable,
    Symbol,
)
from hardinspect.exceptions import ExtractionError


def make_object(
    kind: ObjectKind = ObjectKind.SHARED,
    headers: tuple[tuple[str, int], ...] = (),
    dynamic: tuple[tuple[str, int], ...] | None = None,
    dynsyms: tuple[str | None, ...] = (),
    symbols: tuple[str | None, ...] = (),
    dynstr: bytes = b"",
) -> ParsedObject:
    return ParsedObject(
        kind=kind,
        program_headers=tuple(ProgramHeader(type=t, flags=f) for t, f in headers),
        dynamic=None if dynamic is None else tuple(DynamicEntry(t, v) for t, v in dynamic),
        dynamic_symbols=tuple(Symbol(name) for name in dynsyms),
        symbols=tuple(Symbol(name) for name in symbols),
        dynamic_strings=StringTable(dynstr),
    )


def _ar_header(name: str, size: int) -> bytes:
    header = (
        f"{name:<16}"
        f"{'0':<12}"
        f"{'0':<6}"
        f"{'0':<6}"
        f"{'644':<8}"
        f"{size:<10}"
        "`\n"
    ).encode("ascii")
    assert len(header) == 60
    return header


def build_ar_archive(members: list[tuple[str, bytes]]) -> bytes:
    """Build a GNU-style ar archive with short member names."""
    out = bytearray(b"!<arch>\n")
    for name, data in members:
        out += _ar_header(f"{name}/", len(data))
        out += data
        if len(data) % 2:
            out += b"\n"
    return bytes(out)


ELF_TYPES = {"ET_REL": 1, "ET_EXEC": 2, "ET_DYN": 3}
SEGMENT_TYPES = {
    "PT_LOAD": 1,
    "PT_DYNAMIC": 2,
    "PT_PHDR": 6,
    "PT_GNU_STACK": 0x6474E551,
    "PT_GNU_RELRO": 0x6474E552,
}
DYNAMIC_TAGS = {
    "DT_NULL": 0,
    "DT_NEEDED": 1,
    "DT_HASH": 4,
    "DT_STRTAB": 5,
    "DT_SYMTAB": 6,
    "DT_STRSZ": 10,
    "DT_SYMENT": 11,
    "DT_RPATH": 15,
    "DT_BIND_NOW": 24,
    "DT_RUNPATH": 29,
    "DT_FLAGS": 30,
    "DT_FLAGS_1": 0x6FFFFFFB,
}
SHT_SYMTAB, SHT_STRTAB, SHT_DYNAMIC, SHT_DYNSYM = 2, 3, 6, 11
BASE_ADDRESS = 0x400000
EHDR_SIZE, PHDR_SIZE, SHDR_SIZE, SYM_SIZE, DYN_SIZE = 64, 56, 64, 24, 16


def _string_table(strings) -> tuple[bytes, dict[str, int]]:
    data = bytearray(b"\x00")
    offsets = {"": 0}
    for string in strings:
        if string not in offsets:
            offsets[string] = len(data)
            data += string.encode("utf-8") + b"\x00"
    return bytes(data), offsets


def _symbol_table(names, offsets: dict[str, int]) -> bytes:
    # Index 0 is the reserved null symbol; the rest are undefined global functions.
    table = struct.pack("<IBBHQQ", 0, 0, 0, 0, 0, 0)
    for name in names:
        table += struct.pack("<IBBHQQ", offsets[name], 0x12, 0, 0, 0, 0)
    return table


def build_elf(
    e_type: str = "ET_REL",
    segments: tuple[tuple[str, int], ...] = (),
    dynamic: tuple[tuple[str, int | str], ...] | None = None,
    dynsyms: tuple[str, ...] = (),
    symbols: tuple[str, ...] = (),
    sections: bool = True,
) -> bytes:
    """
    Build a minimal little-endian x86-64 ELF64 image.

    ``segments`` lists extra program headers as (type, flags). When ``dynamic``
    is given, a PT_LOAD covering the whole file and a PT_DYNAMIC are appended,
    and the dynamic table gets DT_HASH, DT_STRTAB, DT_SYMTAB, DT_STRSZ,
    DT_SYMENT and DT_NULL after the caller's entries. String values in
    ``dynamic`` are placed in .dynstr and replaced by their offset. With
    ``sections=False`` no section header table is written at all.
    """
    phnum = len(segments) + (2 if dynamic is not None else 0)
    data_start = EHDR_SIZE + phnum * PHDR_SIZE
    body = bytearray()

    def place(blob: bytes) -> int:
        while (data_start + len(body)) % 8:
            body.append(0)
        offset = data_start + len(body)
        body.extend(blob)
        return offset

    # (name, type, offset, size, link, info, entsize)
    section_headers = [("", 0, 0, 0, 0, 0, 0)]

    dynamic_offset = dynamic_size = 0
    if dynamic is not None:
        strings = list(dynsyms) + [value for _, value in dynamic if isinstance(value, str)]
        dynstr, dynstr_offsets = _string_table(strings)
        dynstr_offset = place(dynstr)
        dynsym_offset = place(_symbol_table(dynsyms, dynstr_offsets))
        nsyms = len(dynsyms) + 1
        hash_offset = place(struct.pack(f"<II{nsyms + 1}I", 1, nsyms, 0, *([0] * nsyms)))

        entries = [
            (tag, dynstr_offsets[value] if isinstance(value, str) else value)
            for tag, value in dynamic
        ]
        entries += [
            ("DT_HASH", BASE_ADDRESS + hash_offset),
            ("DT_STRTAB", BASE_ADDRESS + dynstr_offset),
            ("DT_SYMTAB", BASE_ADDRESS + dynsym_offset),
            ("DT_STRSZ", len(dynstr)),
            ("DT_SYMENT", SYM_SIZE),
            ("DT_NULL", 0),
        ]
        dynamic_blob = b"".join(
            struct.pack("<qQ", DYNAMIC_TAGS[tag], value) for tag, value in entries
        )
        dynamic_offset = place(dynamic_blob)
        dynamic_size = len(dynamic_blob)

        dynstr_index = len(section_headers)
        section_headers += [
            (".dynstr", SHT_STRTAB, dynstr_offset, len(dynstr), 0, 0, 0),
            (".dynsym", SHT_DYNSYM, dynsym_offset, nsyms * SYM_SIZE, dynstr_index, 1, SYM_SIZE),
            (".dynamic", SHT_DYNAMIC, dynamic_offset, dynamic_size, dynstr_index, 0, DYN_SIZE),
        ]

    if symbols:
        strtab, strtab_offsets = _string_table(symbols)
        strtab_offset = place(strtab)
        symtab_offset = place(_symbol_table(symbols, strtab_offsets))
        strtab_index = len(section_headers)
        section_headers += [
            (".strtab", SHT_STRTAB, strtab_offset, len(strtab), 0, 0, 0),
            (
                ".symtab",
                SHT_SYMTAB,
                symtab_offset,
                (len(symbols) + 1) * SYM_SIZE,
                strtab_index,
                1,
                SYM_SIZE,
            ),
        ]

    shoff = shnum = shstrndx = 0
    if sections:
        shstrndx = len(section_headers)
        names = [header[0] for header in section_headers] + [".shstrtab"]
        shstrtab, name_offsets = _string_table(names)
        shstrtab_offset = place(shstrtab)
        section_headers.append((".shstrtab", SHT_STRTAB, shstrtab_offset, len(shstrtab), 0, 0, 0))
        shnum = len(section_headers)
        shoff = place(
            b"".join(
                struct.pack(
                    "<IIQQQQIIQQ",
                    name_offsets[name],
                    sh_type,
                    0,
                    0,
                    offset,
                    size,
                    link,
                    info,
                    1,
                    entsize,
                )
                for name, sh_type, offset, size, link, info, entsize in section_headers
            )
        )

    file_size = data_start + len(body)
    program_headers = []
    for segment_type, flags in segments:
        if segment_type == "PT_PHDR":
            offset, size = EHDR_SIZE, phnum * PHDR_SIZE
        else:
            offset, size = 0, 0
        program_headers.append((SEGMENT_TYPES[segment_type], flags, offset, size))
    if dynamic is not None:
        program_headers.append((SEGMENT_TYPES["PT_LOAD"], 0x5, 0, file_size))
        program_headers.append((SEGMENT_TYPES["PT_DYNAMIC"], 0x6, dynamic_offset, dynamic_size))

    ident = b"\x7fELF" + bytes([2, 1, 1, 0]) + bytes(8)
    header = struct.pack(
        "<16sHHIQQQIHHHHHH",
        ident,
        ELF_TYPES[e_type],
        62,
        1,
        0,
        EHDR_SIZE if phnum else 0,
        shoff,
        0,
        EHDR_SIZE,
        PHDR_SIZE,
        phnum,
        SHDR_SIZE,
        shnum,
        shstrndx,
    )
    phdr_table = b"".join(
        struct.pack(
            "<IIQQQQQQ",
            p_type,
            flags,
            offset,
            BASE_ADDRESS + offset,
            BASE_ADDRESS + offset,
            size,
            size,
            8,
        )
        for p_type, flags, offset, size in program_headers
    )
    return header + phdr_table + bytes(body)


class FakeArchiveSource:
    """In-memory archive whose members map straight to prebuilt payloads."""

    def __init__(self, payloads: list[tuple[str, object]], fail_on: str | None = None):
        self._payloads = dict(payloads)
        self._members = [ArchiveMember(name, index, 0) for index, (name, _) in enumerate(payloads)]
        self.fail_on = fail_on
        self.extracted: list[str] = []

    def members(self):
        return list(self._members)

    def extract(self, member: ArchiveMember):
        self.extracted.append(member.name)
        if member.name == self.fail_on:
            raise ExtractionError("truncated member", member=member.name)
        return self._payloads[member.name]


@pytest.fixture(autouse=True)
def isolated_default_config(tmp_path, monkeypatch):
    """Keep a user's ~/.hardinspect/config.json out of the tests."""
    default_path = str(tmp_path / "default-config.json")
    monkeypatch.setattr(Config, "_get_default_config_path", staticmethod(lambda: default_path))


@pytest.fixture
def elf_executable() -> Path:
    """A real ELF executable from the running system."""
    import sys

    candidates = [Path(sys.executable).resolve(), Path("/bin/ls"), Path("/usr/bin/env")]
    for candidate in candidates:
        try:
            with open(candidate, "rb") as handle:
                if handle.read(4) == b"\x7fELF":
                    return candidate
        except OSError:
            continue
    pytest.skip("no ELF executable available on this system")


@pytest.fixture
def parsed_object():
    return make_object


@pytest.fixture
def ar_archive():
    return build_ar_archive


@pytest.fixture
def fake_archive():
    return FakeArchiveSource


@pytest.fixture(autouse=True)
def reset_logger_handlers():
    """Handlers bind the stderr of the test that created them; drop them afterwards."""
    yield
    import logging

    logger = logging.getLogger("hardinspect")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def elf_image():
    return build_elf
