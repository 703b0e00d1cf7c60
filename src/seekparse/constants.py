"""Shared constants for seekparse.

Centralized configuration constants used by the source, cursor, and
entry-point layers. Placing them here avoids circular imports and gives
a single source of truth.

Constants are grouped by domain:
- Encoding: UTF-8 decoding bounds
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Encoding
    "MAX_RUNE_BYTES",
    "NEWLINE",
    "REPLACEMENT_RUNE",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# ENCODING
# ============================================================================

# Longest UTF-8 encoding of a single code point (U+10000..U+10FFFF).
# read_rune() never probes a window wider than this.
MAX_RUNE_BYTES: int = 4

# Line delimiter for line/column computation. CRLF sources work because the
# \n is still present; CR-only sources report everything on line 1.
NEWLINE: bytes = b"\n"

# Rune produced for a byte that cannot start or continue a valid sequence.
# Decoding it consumes exactly one byte so repetition still makes progress.
REPLACEMENT_RUNE: str = "\ufffd"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in bytes (10 MB).
# Line/column lookups scan from the start of the source, so unbounded inputs
# turn every diagnostic into an O(n) read of the whole file.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
