"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: every address in the file was submitted."""

CONFIGURATION_ERROR: int = 1
"""A required credential was missing or a setting failed validation."""

RUN_FAILED: int = 69
"""Any other failure: prompt, zone listing, file read, or API call."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
