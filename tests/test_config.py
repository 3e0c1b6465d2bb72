"""Tests for settings loading (config.py)."""

from __future__ import annotations

import pytest

from snyk_greybeard.config import (
    API_KEY_ENV_VAR,
    DEFAULT_MODEL,
    OPENAI_CHAT_COMPLETIONS_URL,
    REQUEST_TIMEOUT_SECONDS,
    Settings,
    load_settings,
)
from snyk_greybeard.exceptions import MissingCredentialError


class TestLoadSettings:
    def test_reads_api_key(self) -> None:
        settings = load_settings({API_KEY_ENV_VAR: "sk-abc"})
        assert settings.api_key == "sk-abc"

    def test_defaults(self) -> None:
        settings = load_settings({API_KEY_ENV_VAR: "sk-abc"})
        assert settings.model == DEFAULT_MODEL == "gpt-4o"
        assert settings.endpoint == OPENAI_CHAT_COMPLETIONS_URL
        assert settings.temperature == 0.7
        assert settings.timeout == REQUEST_TIMEOUT_SECONDS == 30.0

    @pytest.mark.parametrize("environ", [{}, {API_KEY_ENV_VAR: ""}])
    def test_missing_key_raises(self, environ: dict[str, str]) -> None:
        with pytest.raises(MissingCredentialError, match=API_KEY_ENV_VAR) as exc_info:
            load_settings(environ)
        assert exc_info.value.hint is not None
        assert "export OPENAI_API_KEY=" in exc_info.value.hint

    def test_defaults_to_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(API_KEY_ENV_VAR, "sk-from-env")
        assert load_settings().api_key == "sk-from-env"


class TestSettings:
    def test_repr_hides_key(self) -> None:
        assert "sk-secret" not in repr(Settings(api_key="sk-secret"))

    def test_frozen(self) -> None:
        settings = Settings(api_key="k")
        with pytest.raises(AttributeError):
            settings.api_key = "other"  # type: ignore[misc]
