#!/usr/bin/env python3
"""
Archive Source Protocol Interface

Structural interface for anything that can enumerate and extract the members
of a static archive. The arpy-backed adapter implements it for real files;
tests can hand in any object with the same two methods.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from ..domain.parsed_object import ArchiveMember


@runtime_checkable
class ArchiveSourceInterface(Protocol):
    """
    Protocol for static archive readers.

    Implementations must yield members in archive order and must raise
    ExtractionError, never return partial data, when a member cannot be read.
    """

    def members(self) -> Iterable[ArchiveMember]:
        """Return the object-file members of the archive, in archive order."""
        ...

    def extract(self, member: ArchiveMember) -> bytes:
        """Return the bytes of one member."""
        ...


__all__ = ["ArchiveSourceInterface"]
