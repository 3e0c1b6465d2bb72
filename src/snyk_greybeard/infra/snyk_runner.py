"""Subprocess-backed implementation of :class:`~snyk_greybeard.core.protocols.ScanRunner`.

This module is the **only** place in the codebase that spawns a
process.  stdout and stderr are read as two separate pipes and joined
after the process exits, so relative ordering between the two streams
is not preserved.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from snyk_greybeard.core.models import ScanResult
from snyk_greybeard.exceptions import SnykExecutionError
from snyk_greybeard.infra.snyk_detector import SNYK_EXECUTABLE
from snyk_greybeard.logger import get_logger

logger = get_logger(__name__)


class SnykRunner:
    """Concrete :class:`ScanRunner` that shells out to the Snyk CLI.

    Parameters
    ----------
    executable:
        Path (or bare name) of the snyk binary.  Normally the value
        returned by :func:`~snyk_greybeard.infra.snyk_detector.require_snyk`.
    """

    def __init__(self, executable: Path | str = SNYK_EXECUTABLE) -> None:
        self._executable = str(executable)

    def run(self, args: Sequence[str]) -> ScanResult:
        """Run snyk with *args* and wait for it to exit.

        Raises
        ------
        SnykExecutionError
            When the process cannot be started.
        """
        command = (self._executable, *args)
        logger.info("running snyk", command=list(command))

        try:
            completed = subprocess.run(  # noqa: S603
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise SnykExecutionError(
                f"Failed to run {self._executable}: {exc}",
                hint="Check that the Snyk CLI is installed and executable.",
            ) from exc

        return ScanResult(
            output=(completed.stdout or "") + (completed.stderr or ""),
            exit_code=normalize_exit_code(completed.returncode),
            command=command,
        )


def normalize_exit_code(returncode: int) -> int:
    """Map a signal-terminated return code (``-N``) to ``128 + N``."""
    if returncode < 0:
        return 128 - returncode
    return returncode
