"""Build information for snyk-greybeard.

Release tooling may overwrite ``__build_time__`` when packaging.
"""

from __future__ import annotations

__version__: str = "1.0.0"

__build_time__: str = "unknown"


def version_string() -> str:
    """Return the human-readable version banner."""
    return f"Snyk CLI Greybeard v{__version__} (built {__build_time__})"
