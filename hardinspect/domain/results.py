"""Typed verdict models for hardening analysis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .lattice import FortificationLevel, StackProtection

UNKNOWN_PATH = "Unknown path"


class IsPIE(str, Enum):
    PIE = "pie"
    NOT_PIE = "not_pie"
    SHARED_LIBRARY = "shared_library"
    ARCHIVE = "archive"


class HasNXStack(str, Enum):
    YES = "yes"
    NO = "no"
    NOT_APPLICABLE = "not_applicable"


class HasRelRO(str, Enum):
    YES = "yes"
    NO = "no"
    NOT_APPLICABLE = "not_applicable"


class HasBindNow(str, Enum):
    YES = "yes"
    NO = "no"
    NOT_APPLICABLE = "not_applicable"


class SearchPathKind(str, Enum):
    RPATH = "RPATH"
    RUNPATH = "RUNPATH"


@dataclass(frozen=True)
class LibrarySearchPath:
    """One DT_RPATH or DT_RUNPATH entry; ``path`` is None when unresolvable."""

    kind: SearchPathKind
    path: str | None = None

    @property
    def display_path(self) -> str:
        return self.path if self.path is not None else UNKNOWN_PATH

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.display_path}"


@dataclass(frozen=True)
class HardeningVerdict:
    """Hardening properties of one object or one archive, produced whole."""

    pie: IsPIE
    nx_stack: HasNXStack
    stack_protector: StackProtection
    fortify: FortificationLevel
    relro: HasRelRO
    bind_now: HasBindNow
    search_paths: tuple[LibrarySearchPath, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "pie": self.pie.value,
            "nx_stack": self.nx_stack.value,
            "stack_protector": self.stack_protector.value,
            "fortify": self.fortify.value,
            "relro": self.relro.value,
            "bind_now": self.bind_now.value,
            "search_paths": [
                {"kind": entry.kind.value, "path": entry.path} for entry in self.search_paths
            ],
        }
