#!/usr/bin/env python3
"""
arpy adapter

Enumerates the object-file members of a Unix ``ar`` archive held in memory
and hands out their bytes on demand.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import io

import arpy

from ..domain.parsed_object import ArchiveMember
from ..exceptions import ExtractionError
from ..utils.logger import get_logger

logger = get_logger(__name__)

AR_MAGIC = b"!<arch>\n"

# Symbol index members written by BSD ar; GNU indexes are filtered by arpy
_INDEX_MEMBER_PREFIXES = ("__.SYMDEF",)


def _member_name(raw_name: bytes | str) -> str:
    name = raw_name.decode("utf-8", errors="replace") if isinstance(raw_name, bytes) else raw_name
    name = name.strip()
    # GNU ar terminates short names with "/"
    if name.endswith("/") and name != "/":
        name = name[:-1]
    return name


class ArpyArchiveSource:
    """ArchiveSourceInterface implementation backed by arpy."""

    def __init__(self, data: bytes):
        self.data = data
        self._members: list[ArchiveMember] | None = None

    def members(self) -> list[ArchiveMember]:
        """
        Read every member header, in archive order.

        Raises:
            ExtractionError: If the archive index cannot be read
        """
        if self._members is None:
            self._members = self._read_members()
        return list(self._members)

    def extract(self, member: ArchiveMember) -> bytes:
        """
        Return the bytes of one member.

        Raises:
            ExtractionError: If the member range lies outside the archive
        """
        end = member.offset + member.size
        if member.offset < 0 or member.size < 0 or end > len(self.data):
            raise ExtractionError(
                f"member data out of range ({member.offset}+{member.size} > {len(self.data)})",
                member=member.name,
            )
        return self.data[member.offset : end]

    def _read_members(self) -> list[ArchiveMember]:
        members: list[ArchiveMember] = []
        try:
            with arpy.Archive(fileobj=io.BytesIO(self.data)) as archive:
                for entry in archive:
                    header = entry.header
                    name = _member_name(header.name)
                    if name.startswith(_INDEX_MEMBER_PREFIXES):
                        logger.debug(f"Skipping archive index member {name}")
                        continue
                    members.append(ArchiveMember(name, header.file_offset, header.size))
        except (arpy.ArchiveFormatError, arpy.ArchiveAccessError) as exc:
            raise ExtractionError(f"cannot read archive: {exc}") from exc
        except (OSError, ValueError) as exc:
            raise ExtractionError(f"cannot read archive: {exc}") from exc

        logger.debug(f"Archive contains {len(members)} object members")
        return members
