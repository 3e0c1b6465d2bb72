"""Infrastructure: Snyk CLI detection and install guidance.

This module is responsible for locating the ``snyk`` executable on the
system PATH and providing installation guidance when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No permanent PATH modification.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from snyk_greybeard.exceptions import SnykNotFoundError

SNYK_EXECUTABLE: str = "snyk"
SNYK_INSTALL_DOCS: str = "https://docs.snyk.io/snyk-cli/install-the-snyk-cli"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SnykStatus:
    """Result of a Snyk CLI detection probe.

    Attributes
    ----------
    found : bool
        Whether ``snyk`` was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the Snyk CLI on the
        current platform.  Empty when it is already present.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_snyk() -> SnykStatus:
    """Probe the system for a ``snyk`` executable.

    Returns a :class:`SnykStatus` regardless of whether snyk is present;
    the caller decides whether to abort or merely warn.
    """
    result = shutil.which(SNYK_EXECUTABLE)

    if result is not None:
        return SnykStatus(found=True, path=Path(result), install_commands=())

    return SnykStatus(
        found=False,
        path=None,
        install_commands=_platform_install_commands(),
    )


def require_snyk() -> Path:
    """Locate snyk or raise :class:`SnykNotFoundError`."""
    status = detect_snyk()
    if not status.found or status.path is None:
        hint_lines = [
            f"Visit {SNYK_INSTALL_DOCS} for installation instructions.",
        ]
        if status.install_commands:
            hint_lines.append("Or install it with one of:")
            hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise SnykNotFoundError(
            "'snyk' command not found. Please install the Snyk CLI.",
            hint="\n".join(hint_lines),
        )
    return status.path


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "scoop install snyk",
            "npm install -g snyk",
        )
    if system == "darwin":
        return (
            "brew tap snyk/tap && brew install snyk",
            "npm install -g snyk",
        )
    return ("npm install -g snyk",)
