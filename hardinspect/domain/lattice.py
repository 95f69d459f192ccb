#!/usr/bin/env python3
"""
Fortification Lattice

Join operators used to fold protection observations, first symbol by symbol
inside one object and then member by member across a static archive.

FortificationLevel is a join semilattice with UNKNOWN as identity and SOME as
the absorbing element: whenever two observations disagree on protection
status the joined answer is "mixed" (SOME), never the optimistic one.
StackProtection joins by Boolean OR.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from functools import reduce


class FortificationLevel(str, Enum):
    """Fortify Source verdict for an object or an archive"""

    UNKNOWN = "unknown"  # no protectable libc functions seen
    ONLY_UNPROTECTED = "only_unprotected"
    SOME = "some"  # both protected and unprotected variants seen
    ALL = "all"  # only protected variants seen

    def join(self, other: FortificationLevel) -> FortificationLevel:
        return _FORTIFICATION_JOIN[(self, other)]

    @classmethod
    def from_latches(cls, protected_seen: bool, unprotected_seen: bool) -> FortificationLevel:
        if protected_seen and unprotected_seen:
            return cls.SOME
        if protected_seen:
            return cls.ALL
        if unprotected_seen:
            return cls.ONLY_UNPROTECTED
        return cls.UNKNOWN


class StackProtection(str, Enum):
    """Presence of the stack smashing protector"""

    YES = "yes"
    NO = "no"

    def join(self, other: StackProtection) -> StackProtection:
        if self is StackProtection.YES or other is StackProtection.YES:
            return StackProtection.YES
        return StackProtection.NO

    @classmethod
    def from_bool(cls, present: bool) -> StackProtection:
        return cls.YES if present else cls.NO


_U = FortificationLevel.UNKNOWN
_O = FortificationLevel.ONLY_UNPROTECTED
_S = FortificationLevel.SOME
_A = FortificationLevel.ALL

_FORTIFICATION_JOIN: dict[tuple[FortificationLevel, FortificationLevel], FortificationLevel] = {
    (_U, _U): _U,
    (_U, _O): _O,
    (_U, _S): _S,
    (_U, _A): _A,
    (_O, _U): _O,
    (_O, _O): _O,
    (_O, _S): _S,
    (_O, _A): _S,
    (_S, _U): _S,
    (_S, _O): _S,
    (_S, _S): _S,
    (_S, _A): _S,
    (_A, _U): _A,
    (_A, _O): _S,
    (_A, _S): _S,
    (_A, _A): _A,
}


def join_fortification(left: FortificationLevel, right: FortificationLevel) -> FortificationLevel:
    """Join two fortification levels."""
    return _FORTIFICATION_JOIN[(left, right)]


def join_stack_protection(left: StackProtection, right: StackProtection) -> StackProtection:
    """Join two stack protection states (Boolean OR)."""
    return left.join(right)


def join_all_fortification(levels: Iterable[FortificationLevel]) -> FortificationLevel:
    """Fold any number of levels, starting from the UNKNOWN identity."""
    return reduce(join_fortification, levels, FortificationLevel.UNKNOWN)


def join_all_stack_protection(states: Iterable[StackProtection]) -> StackProtection:
    """Fold any number of states, starting from the NO identity."""
    return reduce(join_stack_protection, states, StackProtection.NO)
