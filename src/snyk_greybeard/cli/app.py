"""CLI application entry point for snyk-greybeard.

This module is the **sole error boundary** for the entire application.
It catches :class:`~snyk_greybeard.exceptions.GreybeardError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* Snyk owns argument parsing.  Only a leading wrapper flag
  (``-v``/``--version`` or ``--greybeard-doctor``) is consumed here;
  every other argument is forwarded to snyk untouched.
* A normal run exits with snyk's own exit code, even when the chat
  request fails.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from snyk_greybeard.cli import exit_codes
from snyk_greybeard.cli.console import console, err_console
from snyk_greybeard.config import Settings, load_settings
from snyk_greybeard.exceptions import GreybeardError, TransformationError
from snyk_greybeard.logger import get_logger
from snyk_greybeard.version import version_string

logger = get_logger(__name__)

VERSION_FLAGS: frozenset[str] = frozenset({"-v", "--version"})
DOCTOR_FLAG: str = "--greybeard-doctor"


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_scan(args: Sequence[str], settings: Settings, snyk_path: Path) -> int:
    """Run snyk, show its output, then show the greybeard's take on it.

    Flow:
    1. Run snyk with *args* and capture its output and exit code.
    2. Print the raw output and a separator.
    3. Send the output to the chat model and print the reply, or the
       error in its place.
    """
    from snyk_greybeard.cli.report import (
        print_commentary,
        print_raw_output,
        print_separator,
        print_transformation_error,
    )
    from snyk_greybeard.core.greybeard_service import GreybeardService
    from snyk_greybeard.infra.openai_client import OpenAIChatClient
    from snyk_greybeard.infra.snyk_runner import SnykRunner

    service = GreybeardService(
        SnykRunner(snyk_path),
        OpenAIChatClient(settings),
        model=settings.model,
        temperature=settings.temperature,
    )

    scan = service.scan(args)
    print_raw_output(scan)
    print_separator()

    try:
        commentary = service.explain(scan)
    except TransformationError as exc:
        logger.info("transformation failed", error=str(exc), exit_code=scan.exit_code)
        print_transformation_error(exc)
        return scan.exit_code

    print_commentary(commentary)
    return scan.exit_code


def _handle_doctor(environ: Mapping[str, str] | None) -> int:
    """Dispatch the ``--greybeard-doctor`` diagnostics command."""
    from snyk_greybeard.cli.doctor import run_doctor

    return run_doctor(environ)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run the snyk-greybeard CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    environ:
        Environment mapping to read the API key from.  When ``None``
        (default), ``os.environ`` is used.

    Returns
    -------
    int
        OS process exit code: snyk's own exit code for a completed run.

    Raises
    ------
    MissingCredentialError, SnykNotFoundError, SnykExecutionError
        Precondition failures; no chat request has been made.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if args and args[0] in VERSION_FLAGS:
        console.print(version_string(), markup=False)
        return exit_codes.SUCCESS

    if args and args[0] == DOCTOR_FLAG:
        return _handle_doctor(environ)

    from snyk_greybeard.infra.snyk_detector import require_snyk

    settings = load_settings(environ)
    snyk_path = require_snyk()
    return _handle_scan(args, settings, snyk_path)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except GreybeardError as exc:
        err_console.print(f"Error: {exc}", markup=False, style="bold red")
        if exc.hint:
            err_console.print(exc.hint, markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print("[bold red]Unexpected error.[/bold red] Please report this issue.")
        err_console.print(f"  {type(exc).__name__}: {exc}", markup=False)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
