#!/usr/bin/env python3
"""
hardinspect - ELF binary and static archive hardening checker

Usage:
    python hardinspect.py <file>...
    python hardinspect.py -j <file>
    python hardinspect.py -p -b <archive.a>
"""

from hardinspect.cli import main

if __name__ == "__main__":
    main()
