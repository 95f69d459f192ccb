#!/usr/bin/env python3
"""Allow ``python -m hardinspect``."""

from .cli import main

if __name__ == "__main__":
    main()
