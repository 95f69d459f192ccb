#!/usr/bin/env python3
"""ELF security feature checks for a single linked or unlinked object."""

from __future__ import annotations

from ..domain.parsed_object import ParsedObject
from ..domain.results import HardeningVerdict
from ..utils.logger import get_logger
from .elf_security_domain import (
    has_bindnow,
    has_nx_stack,
    has_protection,
    has_relro,
    is_pie,
    library_search_paths,
)

logger = get_logger(__name__)


def analyze_object(obj: ParsedObject) -> HardeningVerdict:
    """Compute every hardening property of one parsed ELF object."""
    stack_protector, fortify = has_protection(obj)
    verdict = HardeningVerdict(
        pie=is_pie(obj),
        nx_stack=has_nx_stack(obj),
        stack_protector=stack_protector,
        fortify=fortify,
        relro=has_relro(obj),
        bind_now=has_bindnow(obj),
        search_paths=library_search_paths(obj),
    )
    logger.debug(f"Hardening verdict for {obj.kind.value} object: {verdict.to_dict()}")
    return verdict
