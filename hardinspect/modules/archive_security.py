#!/usr/bin/env python3
"""Static archive hardening checks aggregated across member objects."""

from __future__ import annotations

from collections.abc import Callable

from ..adapters.elf_adapter import parse_elf
from ..domain.lattice import FortificationLevel, StackProtection
from ..domain.parsed_object import ParsedObject
from ..domain.results import HardeningVerdict, HasBindNow, HasNXStack, HasRelRO, IsPIE
from ..exceptions import ParseError
from ..interfaces import ArchiveSourceInterface
from ..utils.logger import get_logger
from .elf_security_domain import scan_symbol_names

logger = get_logger(__name__)

ObjectParser = Callable[[bytes], ParsedObject]


def member_protection(obj: ParsedObject) -> tuple[StackProtection, FortificationLevel]:
    """Protection fold for an unlinked member, always over its full symbol table."""
    scan = scan_symbol_names(symbol.name for symbol in obj.symbols)
    return scan.stack_protection, scan.fortification


def analyze_archive(
    source: ArchiveSourceInterface,
    parse_object: ObjectParser = parse_elf,
) -> HardeningVerdict:
    """
    Fold the stack protector and fortification verdicts of every archive member.

    Position independence, NX stack, RelRO and BindNow only mean something for
    linked images, so the archive verdict carries fixed sentinels for them.

    Raises:
        ExtractionError: A member could not be read
        ParseError: A member is not a valid ELF object
    """
    stack_protector = StackProtection.NO
    fortify = FortificationLevel.UNKNOWN
    count = 0

    for member in source.members():
        data = source.extract(member)
        try:
            obj = parse_object(data)
        except ParseError as exc:
            if exc.member is not None:
                raise
            raise ParseError(str(exc), member=member.name) from exc

        member_stack_protector, member_fortify = member_protection(obj)
        logger.debug(
            f"Archive member {member.name}: stack_protector={member_stack_protector.value}, "
            f"fortify={member_fortify.value}"
        )
        stack_protector = stack_protector.join(member_stack_protector)
        fortify = fortify.join(member_fortify)
        count += 1

    logger.debug(f"Aggregated {count} archive members")
    return HardeningVerdict(
        pie=IsPIE.ARCHIVE,
        nx_stack=HasNXStack.NOT_APPLICABLE,
        stack_protector=stack_protector,
        fortify=fortify,
        relro=HasRelRO.NOT_APPLICABLE,
        bind_now=HasBindNow.NOT_APPLICABLE,
    )
