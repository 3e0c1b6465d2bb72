"""Shared pytest fixtures and configuration for the snyk-greybeard test suite.

Guidelines
----------
* No internet access in any test.
* ``subprocess.run`` and ``requests.Session`` are mocked at the infra
  boundary; no real snyk binary is needed.
* Tests must not depend on the developer's environment variables.
"""

from __future__ import annotations

import json
import subprocess
from typing import Any
from unittest.mock import MagicMock

import pytest

from snyk_greybeard.config import API_KEY_ENV_VAR, Settings

TEST_API_KEY = "sk-test-key"


@pytest.fixture()
def settings() -> Settings:
    return Settings(api_key=TEST_API_KEY)


@pytest.fixture()
def environ() -> dict[str, str]:
    """An environment with only the API key set."""
    return {API_KEY_ENV_VAR: TEST_API_KEY}


@pytest.fixture(autouse=True)
def _no_ambient_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)


def completed(
    *,
    stdout: str = "",
    stderr: str = "",
    returncode: int = 0,
) -> subprocess.CompletedProcess[str]:
    """Build the value a mocked ``subprocess.run`` should return."""
    return subprocess.CompletedProcess(
        args=["snyk"], returncode=returncode, stdout=stdout, stderr=stderr,
    )


def chat_payload(*contents: str, error: str | None = None) -> dict[str, Any]:
    """Build a chat-completion response body with one choice per content."""
    payload: dict[str, Any] = {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1_700_000_000,
        "choices": [
            {"index": i, "message": {"role": "assistant", "content": content}}
            for i, content in enumerate(contents)
        ],
    }
    if error is not None:
        payload["error"] = {"message": error}
    return payload


def mock_session_class(
    *,
    body: str | dict[str, Any] | None = None,
    exc: Exception | None = None,
    status_code: int = 200,
) -> tuple[MagicMock, MagicMock]:
    """Return ``(session_class, session)`` mocks for ``requests.Session``.

    ``session.post`` either raises *exc* or yields a response whose
    streamed content is *body* (dicts are JSON-encoded).
    """
    session = MagicMock(name="session")
    session_class = MagicMock(name="Session")
    session_class.return_value.__enter__.return_value = session

    if exc is not None:
        session.post.side_effect = exc
    else:
        response = MagicMock(name="response")
        response.status_code = status_code
        text = body if isinstance(body, str) else json.dumps(body or {})
        response.iter_content.return_value = [text.encode("utf-8")]
        session.post.return_value.__enter__.return_value = response

    return session_class, session


def posted_payload(session: MagicMock) -> dict[str, Any]:
    """Decode the JSON body passed to the single ``session.post`` call."""
    _, kwargs = session.post.call_args
    data = kwargs["data"]
    return json.loads(data.decode("utf-8") if isinstance(data, bytes) else data)
