"""Domain models for hardening analysis."""

from .lattice import (
    FortificationLevel,
    StackProtection,
    join_all_fortification,
    join_all_stack_protection,
    join_fortification,
    join_stack_protection,
)
from .parsed_object import (
    ArchiveMember,
    DynamicEntry,
    ObjectKind,
    ParsedObject,
    ProgramHeader,
    StringTable,
    Symbol,
)
from .results import (
    UNKNOWN_PATH,
    HardeningVerdict,
    HasBindNow,
    HasNXStack,
    HasRelRO,
    IsPIE,
    LibrarySearchPath,
    SearchPathKind,
)

__all__ = [
    "ArchiveMember",
    "DynamicEntry",
    "FortificationLevel",
    "HardeningVerdict",
    "HasBindNow",
    "HasNXStack",
    "HasRelRO",
    "IsPIE",
    "LibrarySearchPath",
    "ObjectKind",
    "ParsedObject",
    "ProgramHeader",
    "SearchPathKind",
    "StackProtection",
    "StringTable",
    "Symbol",
    "UNKNOWN_PATH",
    "join_all_fortification",
    "join_all_stack_protection",
    "join_fortification",
    "join_stack_protection",
]
