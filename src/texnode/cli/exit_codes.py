"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — every input file was processed."""

BROKEN_PIPE: int = SUCCESS
"""Downstream reader closed stdout early; not an error for a pipeline producer."""

GENERAL_ERROR: int = 1
"""A known TexNodeError was caught. User-facing message was displayed."""

USAGE_ERROR: int = 1
"""Missing or unrecognized command id.  No input file was touched."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""SIGINT received.  Follows POSIX convention (128 + SIGINT=2)."""
