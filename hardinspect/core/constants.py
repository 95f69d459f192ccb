#!/usr/bin/env python3
"""
hardinspect Core Constants - File validation thresholds

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# =============================================================================
# File Validation Constants
# =============================================================================
MIN_ELF_SIZE_BYTES = 52  # Size of an ELF32 header
MIN_ARCHIVE_SIZE_BYTES = 8  # "!<arch>\n" global header alone (an empty archive)
MIN_HEADER_SIZE_BYTES = 8  # Bytes needed to tell ELF from ar
