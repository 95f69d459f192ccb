#!/usr/bin/env python3
"""
hardinspect exceptions

Malformed structural input is fatal and surfaces as one of these errors.
Merely absent optional data (a missing header, an unresolvable string) is an
ordinary negative result and never raises.
"""


class HardInspectError(Exception):
    """Base class for analysis errors"""

    pass


class ExtractionError(HardInspectError):
    """Raised when an archive member (or the archive index) cannot be read"""

    def __init__(self, message: str, member: str | None = None):
        self.member = member
        if member is not None:
            message = f"{member}: {message}"
        super().__init__(message)


class ParseError(HardInspectError):
    """Raised when bytes are not a valid ELF object"""

    def __init__(self, message: str, member: str | None = None):
        self.member = member
        if member is not None:
            message = f"{member}: {message}"
        super().__init__(message)


class UnsupportedFormatError(ParseError):
    """Raised when input is neither an ELF image nor an ar archive"""

    pass
