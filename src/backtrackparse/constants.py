"""Shared constants for backtrackparse.

This module provides centralized limits used by the driver. Placing
constants here avoids circular imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ASCII_DIGITS",
    "ASCII_LOWER",
    "ASCII_UPPER",
    "MAX_SOURCE_SIZE",
    "WHITESPACE_CHARS",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source length accepted by the driver, in characters (10 MiB).
# Callers override per call via max_source_size=; 0 disables the check.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# ASCII only. str.isdigit() accepts Unicode digits like "²" that int() rejects.
ASCII_DIGITS: str = "0123456789"
ASCII_UPPER: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ASCII_LOWER: str = "abcdefghijklmnopqrstuvwxyz"

WHITESPACE_CHARS: str = " \t\r\n"
