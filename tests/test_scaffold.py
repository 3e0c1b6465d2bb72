"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from snyk_greybeard import __build_time__, __version__
from snyk_greybeard.cli import exit_codes
from snyk_greybeard.cli.app import main
from snyk_greybeard.exceptions import (
    EnvironmentError,
    GreybeardError,
    MissingCredentialError,
    SnykExecutionError,
    SnykNotFoundError,
    TransformationError,
)
from snyk_greybeard.version import version_string


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    def test_version_string(self) -> None:
        assert version_string() == f"Snyk CLI Greybeard v{__version__} (built {__build_time__})"


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            EnvironmentError,
            MissingCredentialError,
            SnykNotFoundError,
            SnykExecutionError,
            TransformationError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[GreybeardError]
    ) -> None:
        assert issubclass(exc_class, GreybeardError)

    @pytest.mark.parametrize("exc_class", [MissingCredentialError, SnykNotFoundError])
    def test_preconditions_are_environment_errors(
        self, exc_class: type[GreybeardError]
    ) -> None:
        assert issubclass(exc_class, EnvironmentError)

    def test_transformation_error_is_not_a_precondition(self) -> None:
        assert not issubclass(TransformationError, EnvironmentError)

    def test_hint_is_stored(self) -> None:
        err = GreybeardError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert GreybeardError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    @pytest.mark.parametrize("flag", ["-v", "--version"])
    @patch("snyk_greybeard.infra.snyk_runner.subprocess.run")
    def test_version_flag(
        self,
        mock_run: MagicMock,
        flag: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main([flag], environ={})
        assert code == exit_codes.SUCCESS
        assert version_string() in capsys.readouterr().out
        mock_run.assert_not_called()

    @patch("snyk_greybeard.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_flag(self, mock_doc: MagicMock) -> None:
        code = main(["--greybeard-doctor"], environ={})
        assert code == exit_codes.SUCCESS
        mock_doc.assert_called_once_with({})

    def test_scan_dispatch(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from pathlib import Path

        from snyk_greybeard.cli import app as app_module

        calls: list[tuple[object, ...]] = []
        monkeypatch.setattr(
            app_module,
            "_handle_scan",
            lambda args, settings, path: calls.append((args, settings.api_key, path)) or 3,
        )
        monkeypatch.setattr(
            "snyk_greybeard.infra.snyk_detector.shutil.which", lambda _name: "/usr/bin/snyk",
        )

        code = main(["test", "--json"], environ={"OPENAI_API_KEY": "k"})

        assert code == 3
        assert calls == [(["test", "--json"], "k", Path("/usr/bin/snyk"))]
