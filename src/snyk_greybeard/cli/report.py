"""Rendering of the scan report on stdout.

Snyk's output and the model's reply are printed verbatim: no markup
interpretation, no highlighting, no re-wrapping.  Only the headings
use Rich styling.
"""

from __future__ import annotations

from snyk_greybeard.cli.console import console
from snyk_greybeard.core.models import ScanResult

RAW_OUTPUT_HEADING: str = "Raw Snyk CLI Output:"
GREYBEARD_HEADING: str = "Security Greybeard says:"
SEPARATOR: str = "-" * 59


def _print_verbatim(text: str) -> None:
    console.write(text)


def print_raw_output(scan: ScanResult) -> None:
    console.print()
    console.print(f"[bold]{RAW_OUTPUT_HEADING}[/bold]")
    _print_verbatim(scan.output)


def print_separator() -> None:
    console.print()
    console.print(SEPARATOR, markup=False)
    console.print()


def _print_greybeard_heading() -> None:
    console.print(f"🧔‍♂️ [bold]{GREYBEARD_HEADING}[/bold]")
    console.print()


def print_commentary(text: str) -> None:
    """Print the transformed findings under the greybeard heading."""
    _print_greybeard_heading()
    _print_verbatim(text)


def print_transformation_error(error: Exception) -> None:
    """Print the remote-call failure in place of the commentary."""
    _print_greybeard_heading()
    _print_verbatim(f"Error calling OpenAI API: {error}")
