#!/usr/bin/env python3
"""ELF security domain helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..domain.lattice import FortificationLevel, StackProtection
from ..domain.parsed_object import (
    DT_BIND_NOW,
    DT_RPATH,
    DT_RUNPATH,
    PT_GNU_RELRO,
    PT_GNU_STACK,
    PT_PHDR,
    ObjectKind,
    ParsedObject,
    Symbol,
)
from ..domain.results import (
    HasBindNow,
    HasNXStack,
    HasRelRO,
    IsPIE,
    LibrarySearchPath,
    SearchPathKind,
)
from .protected_calls import CallProtection, classify

STACK_CHK_FAIL = "__stack_chk_fail"

_SEARCH_PATH_TAGS = {
    DT_RPATH: SearchPathKind.RPATH,
    DT_RUNPATH: SearchPathKind.RUNPATH,
}


def is_pie(obj: ParsedObject) -> IsPIE:
    if obj.kind is ObjectKind.SHARED:
        if obj.has_program_header(PT_PHDR):
            return IsPIE.PIE
        return IsPIE.SHARED_LIBRARY
    return IsPIE.NOT_PIE


def has_nx_stack(obj: ParsedObject) -> HasNXStack:
    # A missing PT_GNU_STACK counts as non-executable, while a missing
    # PT_GNU_RELRO counts as no RelRO. Keep the asymmetry.
    header = obj.find_program_header(PT_GNU_STACK)
    if header is not None and header.executable:
        return HasNXStack.NO
    return HasNXStack.YES


def has_relro(obj: ParsedObject) -> HasRelRO:
    return HasRelRO.YES if obj.has_program_header(PT_GNU_RELRO) else HasRelRO.NO


def has_bindnow(obj: ParsedObject) -> HasBindNow:
    # Only DT_BIND_NOW is consulted. BIND_NOW in DT_FLAGS and NOW in
    # DT_FLAGS_1 are not considered, so such objects report NO.
    return HasBindNow.YES if obj.has_dynamic_entry(DT_BIND_NOW) else HasBindNow.NO


@dataclass(frozen=True)
class ProtectionScan:
    """Latches collected while walking a symbol table; each only ever turns on."""

    stack_protector: bool = False
    protected: bool = False
    unprotected: bool = False

    @property
    def complete(self) -> bool:
        return self.stack_protector and self.protected and self.unprotected

    def observe(self, name: str) -> ProtectionScan:
        stack_protector = self.stack_protector or name == STACK_CHK_FAIL
        protection = classify(name)
        protected = self.protected or protection is CallProtection.PROTECTED
        unprotected = self.unprotected or protection is CallProtection.UNPROTECTED
        if (stack_protector, protected, unprotected) == (
            self.stack_protector,
            self.protected,
            self.unprotected,
        ):
            return self
        return ProtectionScan(stack_protector, protected, unprotected)

    @property
    def stack_protection(self) -> StackProtection:
        return StackProtection.from_bool(self.stack_protector)

    @property
    def fortification(self) -> FortificationLevel:
        return FortificationLevel.from_latches(self.protected, self.unprotected)


def scan_symbol_names(names: Iterable[str | None]) -> ProtectionScan:
    """Fold symbol names into a ProtectionScan, stopping once every latch is set."""
    scan = ProtectionScan()
    for name in names:
        if name is None:
            continue
        scan = scan.observe(name)
        if scan.complete:
            break
    return scan


def protection_symbols(obj: ParsedObject) -> tuple[Symbol, ...]:
    """Unlinked objects carry no .dynsym, so the full symbol table is used for them."""
    if obj.is_relocatable:
        return obj.symbols
    return obj.dynamic_symbols


def has_protection(obj: ParsedObject) -> tuple[StackProtection, FortificationLevel]:
    scan = scan_symbol_names(symbol.name for symbol in protection_symbols(obj))
    return scan.stack_protection, scan.fortification


def library_search_paths(obj: ParsedObject) -> tuple[LibrarySearchPath, ...]:
    if obj.dynamic is None:
        return ()

    paths = []
    for entry in obj.dynamic:
        kind = _SEARCH_PATH_TAGS.get(entry.tag)
        if kind is None:
            continue
        paths.append(LibrarySearchPath(kind, obj.dynamic_strings.get(entry.value)))
    return tuple(paths)
