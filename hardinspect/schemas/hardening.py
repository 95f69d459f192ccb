#!/usr/bin/env python3
"""
Hardening Report Pydantic Schemas

Serializable form of a HardeningVerdict, consumed by the console and JSON
reporters.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain.lattice import FortificationLevel, StackProtection
from ..domain.results import (
    HardeningVerdict,
    HasBindNow,
    HasNXStack,
    HasRelRO,
    IsPIE,
    SearchPathKind,
)
from .base import AnalysisResultBase

ANALYZER_NAME = "hardening"


class InputType(str, Enum):
    """Kind of file that was analyzed"""

    ELF = "elf"
    ARCHIVE = "archive"


class SearchPathEntry(BaseModel):
    """
    An embedded library search path.

    Attributes:
        kind: RPATH or RUNPATH
        path: Resolved path, None if the string table offset was invalid
    """

    model_config = ConfigDict(frozen=True)

    kind: SearchPathKind = Field(..., description="Dynamic tag the path came from")

    path: str | None = Field(None, description="Resolved search path")


class HardeningReport(AnalysisResultBase):
    """
    Hardening verdict for one input file.

    Attributes:
        filename: Path of the analyzed file as given by the caller
        input_type: ELF image or static archive
        pie: Position independence
        nx_stack: Non-executable stack
        stack_protector: Stack smashing protector presence
        fortify: Fortify Source level
        relro: Read-only relocations
        bind_now: Immediate binding
        search_paths: RPATH/RUNPATH entries in encounter order
    """

    available: bool = Field(True, description="Whether the analyzer executed successfully")

    filename: str = Field(..., min_length=1, description="Analyzed file")

    input_type: InputType = Field(..., description="ELF image or static archive")

    pie: IsPIE
    nx_stack: HasNXStack
    stack_protector: StackProtection
    fortify: FortificationLevel
    relro: HasRelRO
    bind_now: HasBindNow

    search_paths: list[SearchPathEntry] = Field(default_factory=list)

    @classmethod
    def from_verdict(
        cls,
        verdict: HardeningVerdict,
        filename: str,
        input_type: InputType,
        execution_time: float | None = None,
    ) -> "HardeningReport":
        return cls(
            filename=filename,
            input_type=input_type,
            pie=verdict.pie,
            nx_stack=verdict.nx_stack,
            stack_protector=verdict.stack_protector,
            fortify=verdict.fortify,
            relro=verdict.relro,
            bind_now=verdict.bind_now,
            search_paths=[
                SearchPathEntry(kind=entry.kind, path=entry.path) for entry in verdict.search_paths
            ],
            execution_time=execution_time,
            analyzer_name=ANALYZER_NAME,
        )


class HardeningFailure(AnalysisResultBase):
    """Report entry for a file that could not be analyzed."""

    available: bool = Field(False, description="Always False for failures")

    filename: str = Field(..., min_length=1, description="File that failed")

    error: str = Field(..., description="Why analysis failed")

    @field_validator("error")
    @classmethod
    def validate_error(cls, v: str) -> str:
        """Validate error is not empty"""
        if not v or not v.strip():
            raise ValueError("error cannot be empty")
        return v.strip()
