"""Runtime configuration for snyk-greybeard.

Settings are read from the process environment exactly once by the CLI
layer and then passed explicitly to whatever needs them.  Nothing else
in the package reads ``os.environ`` for the API key.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from snyk_greybeard.exceptions import MissingCredentialError

API_KEY_ENV_VAR: str = "OPENAI_API_KEY"
LOG_LEVEL_ENV_VAR: str = "SNYK_GREYBEARD_LOG_LEVEL"

OPENAI_CHAT_COMPLETIONS_URL: str = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL: str = "gpt-4o"
DEFAULT_TEMPERATURE: float = 0.7
REQUEST_TIMEOUT_SECONDS: float = 30.0


@dataclass(frozen=True, slots=True)
class Settings:
    """Everything the chat client needs to issue its single request."""

    api_key: str
    """Bearer token for the chat-completion API."""

    model: str = DEFAULT_MODEL
    endpoint: str = OPENAI_CHAT_COMPLETIONS_URL
    temperature: float = DEFAULT_TEMPERATURE

    timeout: float = REQUEST_TIMEOUT_SECONDS
    """Upper bound in seconds for connecting and reading the response."""

    def __repr__(self) -> str:
        # Never leak the key into logs or tracebacks.
        return (
            f"Settings(api_key='***', model={self.model!r}, "
            f"endpoint={self.endpoint!r}, temperature={self.temperature!r}, "
            f"timeout={self.timeout!r})"
        )


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``).

    Raises
    ------
    MissingCredentialError
        When the API key variable is unset or empty.
    """
    env = os.environ if environ is None else environ
    api_key = env.get(API_KEY_ENV_VAR, "")
    if not api_key:
        raise MissingCredentialError(
            f"{API_KEY_ENV_VAR} environment variable is not set.",
            hint=f"Please set it with: export {API_KEY_ENV_VAR}='your-api-key'",
        )
    return Settings(api_key=api_key)
