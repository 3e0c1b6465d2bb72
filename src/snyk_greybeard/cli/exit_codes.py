"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  A
normal run exits with whatever code snyk itself returned; these values
cover the paths where snyk never ran to completion.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — ``--version`` or a passing doctor run."""

GENERAL_ERROR: int = 1
"""A known GreybeardError was caught, e.g. a missing API key or snyk binary."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
