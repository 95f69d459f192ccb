#!/usr/bin/env python3
"""Fortified libc entry points and their unprotected counterparts."""

from __future__ import annotations

from enum import Enum

# glibc functions that _FORTIFY_SOURCE can replace with a __<name>_chk variant
LIBC_FORTIFIABLE_FUNCTIONS = (
    "asprintf",
    "confstr",
    "dprintf",
    "fgets",
    "fgets_unlocked",
    "fgetws",
    "fgetws_unlocked",
    "fprintf",
    "fread",
    "fread_unlocked",
    "fwprintf",
    "getcwd",
    "getdomainname",
    "getgroups",
    "gethostname",
    "getlogin_r",
    "gets",
    "getwd",
    "longjmp",
    "mbsnrtowcs",
    "mbsrtowcs",
    "mbstowcs",
    "memcpy",
    "memmove",
    "mempcpy",
    "memset",
    "obstack_printf",
    "obstack_vprintf",
    "pread64",
    "pread",
    "printf",
    "ptsname_r",
    "read",
    "readlink",
    "readlinkat",
    "realpath",
    "recv",
    "recvfrom",
    "snprintf",
    "sprintf",
    "stpcpy",
    "stpncpy",
    "strcat",
    "strcpy",
    "strncat",
    "strncpy",
    "swprintf",
    "syslog",
    "ttyname_r",
    "vasprintf",
    "vdprintf",
    "vfprintf",
    "vfwprintf",
    "vprintf",
    "vsnprintf",
    "vsprintf",
    "vswprintf",
    "vsyslog",
    "vwprintf",
    "wcpcpy",
    "wcpncpy",
    "wcrtomb",
    "wcscat",
    "wcscpy",
    "wcsncat",
    "wcsncpy",
    "wcsnrtombs",
    "wcsrtombs",
    "wcstombs",
    "wctomb",
    "wmemcpy",
    "wmemmove",
    "wmempcpy",
    "wmemset",
    "wprintf",
)


def protected_name(name: str) -> str:
    """Return the fortified variant name, e.g. memcpy -> __memcpy_chk."""
    return f"__{name}_chk"


UNPROTECTED_FUNCTIONS: frozenset[str] = frozenset(LIBC_FORTIFIABLE_FUNCTIONS)
PROTECTED_FUNCTIONS: frozenset[str] = frozenset(
    protected_name(name) for name in LIBC_FORTIFIABLE_FUNCTIONS
)


class CallProtection(Enum):
    PROTECTED = "protected"
    UNPROTECTED = "unprotected"
    NEITHER = "neither"


def classify(name: str) -> CallProtection:
    if name in PROTECTED_FUNCTIONS:
        return CallProtection.PROTECTED
    if name in UNPROTECTED_FUNCTIONS:
        return CallProtection.UNPROTECTED
    return CallProtection.NEITHER


def is_protected_function(name: str) -> bool:
    return name in PROTECTED_FUNCTIONS


def is_unprotected_function(name: str) -> bool:
    return name in UNPROTECTED_FUNCTIONS
