#!/usr/bin/env python3
"""Map hardening verdict values to display status, text and pass/fail."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from ..domain.lattice import FortificationLevel, StackProtection
from ..domain.results import HasBindNow, HasNXStack, HasRelRO, IsPIE
from ..schemas.hardening import HardeningReport


class CheckStatus(str, Enum):
    GOOD = "good"
    BAD = "bad"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CheckResult:
    status: CheckStatus
    text: str
    comment: str = ""


def _good(text: str, comment: str = "") -> CheckResult:
    return CheckResult(CheckStatus.GOOD, text, comment)


def _bad(text: str) -> CheckResult:
    return CheckResult(CheckStatus.BAD, text)


def _unknown(text: str) -> CheckResult:
    return CheckResult(CheckStatus.UNKNOWN, text)


NOT_FOUND = "no, not found!"
NON_ELF_IGNORED = ", non-ELF (ignored)"

CHECK_TITLES: dict[str, str] = {
    "pie": "Position Independent Executable",
    "stack_protector": "Stack protected",
    "fortify": "Fortify Source functions",
    "relro": "Read-only relocations",
    "bind_now": "Immediate binding",
    "nx_stack": "Non-executable stack",
}

CHECK_RESULTS: dict[str, dict[Enum, CheckResult]] = {
    "pie": {
        IsPIE.PIE: _good("yes"),
        IsPIE.NOT_PIE: _bad("no, normal executable!"),
        IsPIE.SHARED_LIBRARY: _good("no, regular shared library (ignored)"),
        IsPIE.ARCHIVE: _good("no, object archive (ignored)"),
    },
    "nx_stack": {
        HasNXStack.YES: _good("yes"),
        HasNXStack.NO: _bad("no, stack is executable!"),
        HasNXStack.NOT_APPLICABLE: _good("no", NON_ELF_IGNORED),
    },
    "stack_protector": {
        StackProtection.YES: _good("yes"),
        StackProtection.NO: _bad(NOT_FOUND),
    },
    "fortify": {
        FortificationLevel.ALL: _good("yes"),
        FortificationLevel.SOME: _good("yes", " (some protected functions found)"),
        FortificationLevel.UNKNOWN: _unknown("unknown, no protectable libc functions used"),
        FortificationLevel.ONLY_UNPROTECTED: _bad("no, only unprotected functions found!"),
    },
    "relro": {
        HasRelRO.YES: _good("yes"),
        HasRelRO.NO: _bad(NOT_FOUND),
        HasRelRO.NOT_APPLICABLE: _good("no", NON_ELF_IGNORED),
    },
    "bind_now": {
        HasBindNow.YES: _good("yes"),
        HasBindNow.NO: _bad(NOT_FOUND),
        HasBindNow.NOT_APPLICABLE: _good("no", NON_ELF_IGNORED),
    },
}


@dataclass(frozen=True)
class PresentedCheck:
    name: str
    title: str
    result: CheckResult
    ignore: bool = False

    @property
    def ignored(self) -> bool:
        """A bad result the user asked not to fail on"""
        return self.ignore and self.result.status is CheckStatus.BAD

    @property
    def failed(self) -> bool:
        return self.result.status is CheckStatus.BAD and not self.ignore


def present_report(
    report: HardeningReport, ignored_checks: Collection[str] = ()
) -> list[PresentedCheck]:
    checks = []
    for name, title in CHECK_TITLES.items():
        value = getattr(report, name)
        checks.append(
            PresentedCheck(
                name=name,
                title=title,
                result=CHECK_RESULTS[name][value],
                ignore=name in ignored_checks,
            )
        )
    return checks


def report_failed(checks: Collection[PresentedCheck]) -> bool:
    return any(check.failed for check in checks)
