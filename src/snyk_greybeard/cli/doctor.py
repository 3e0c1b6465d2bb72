"""``snyk-greybeard --greybeard-doctor`` — environment diagnostics.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies snyk-greybeard's
requirements.  Neither snyk nor the chat API is contacted.
"""

from __future__ import annotations

import os
import platform
import sys
from collections.abc import Mapping

from snyk_greybeard.cli import exit_codes
from snyk_greybeard.cli.console import err_console
from snyk_greybeard.config import API_KEY_ENV_VAR
from snyk_greybeard.infra.snyk_detector import SNYK_INSTALL_DOCS, detect_snyk
from snyk_greybeard.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _snyk_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the snyk executable row."""
    status_obj = detect_snyk()
    if status_obj.found:
        return "snyk", str(status_obj.path), "[green]OK[/green]"
    return "snyk", "not found", "[red]FAIL[/red]"


def _api_key_check(environ: Mapping[str, str]) -> tuple[str, str, str]:
    """Return (label, value, status) for the API key row.

    The key itself is never displayed.
    """
    if environ.get(API_KEY_ENV_VAR):
        return API_KEY_ENV_VAR, "set", "[green]OK[/green]"
    return API_KEY_ENV_VAR, "not set", "[red]FAIL[/red]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _greybeard_version_check() -> tuple[str, str, str]:
    return "snyk-greybeard", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nsnyk-greybeard doctor", file=sys.stderr)
    print("=" * 62, file=sys.stderr)
    print(f"{'Component':<16} {'Value':<34} {'Status':<8}", file=sys.stderr)
    print("-" * 62, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<16} {value:<34} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_doctor_table(table_class: type, checks: list[tuple[str, str, str]]) -> None:
    table = table_class(
        title="snyk-greybeard doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=16)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    err_console.print()
    err_console.print(table)
    err_console.print()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(environ: Mapping[str, str] | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all checks pass,
        :data:`exit_codes.GENERAL_ERROR` if any check fails.
    """
    env = os.environ if environ is None else environ
    checks = [
        _greybeard_version_check(),
        _python_version_check(),
        _snyk_check(),
        _api_key_check(env),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        Table = None  # noqa: N806

    if Table is not None:
        _print_rich_doctor_table(Table, checks)
    else:
        _print_plain_doctor_table(checks)

    snyk_status = detect_snyk()
    if not snyk_status.found:
        err_console.print("[yellow]The Snyk CLI is not installed.[/yellow]")
        err_console.print(f"See {SNYK_INSTALL_DOCS}, or use one of:\n", markup=False)
        for cmd in snyk_status.install_commands:
            err_console.print(f"  {cmd}", markup=False)
        err_console.print()

    if not env.get(API_KEY_ENV_VAR):
        err_console.print(
            f"Set the API key with: export {API_KEY_ENV_VAR}='your-api-key'",
            markup=False,
        )
        err_console.print()

    if has_failure:
        err_console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    err_console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
