"""``requests``-backed implementation of :class:`~snyk_greybeard.core.protocols.ChatClient`.

This module is the **only** place in the codebase that touches the
network.  Every ``requests`` and JSON failure is caught here and
re-raised as :class:`~snyk_greybeard.exceptions.TransformationError`.
"""

from __future__ import annotations

import json
import time

import requests

from snyk_greybeard.config import Settings
from snyk_greybeard.core.models import ChatRequest, ChatResponse
from snyk_greybeard.exceptions import TransformationError
from snyk_greybeard.logger import get_logger

logger = get_logger(__name__)

# A larger read blocks until that many bytes arrive, so a trickling body
# would only be checked against the deadline at EOF.
_READ_CHUNK_BYTES = 1


class OpenAIChatClient:
    """Concrete :class:`ChatClient` for the OpenAI chat-completions endpoint.

    One :class:`requests.Session` is opened per call and closed before
    returning, whatever the outcome.  There are no retries.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._settings.api_key}",
        }

    def _timeout_error(self) -> TransformationError:
        return TransformationError(f"request timed out after {self._settings.timeout:g}s")

    def _read_body(self, response: requests.Response, deadline: float) -> bytes:
        """Read the whole body, giving up once *deadline* has passed."""
        chunks: list[bytes] = []
        for chunk in response.iter_content(chunk_size=_READ_CHUNK_BYTES):
            chunks.append(chunk)
            if time.monotonic() > deadline:
                raise self._timeout_error()
        return b"".join(chunks)

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def complete(self, request: ChatRequest) -> ChatResponse:
        """POST *request* and decode the reply.

        ``settings.timeout`` bounds the whole exchange, body included.
        The HTTP status is not inspected: error responses from the API
        carry an ``error`` object in the body, which the caller checks.

        Raises
        ------
        TransformationError
            On serialization, connection, timeout, read, or parse
            failure.
        """
        try:
            body = json.dumps(request.to_payload())
        except (TypeError, ValueError) as exc:
            raise TransformationError(f"error marshaling JSON: {exc}") from exc

        logger.info("posting chat request", endpoint=self._settings.endpoint, model=request.model)

        deadline = time.monotonic() + self._settings.timeout
        try:
            with requests.Session() as session:
                with session.post(
                    self._settings.endpoint,
                    data=body.encode("utf-8"),
                    headers=self._headers(),
                    timeout=self._settings.timeout,
                    stream=True,
                ) as response:
                    status = response.status_code
                    content = self._read_body(response, deadline)
        except requests.Timeout as exc:
            raise self._timeout_error() from exc
        except requests.RequestException as exc:
            # requests reports a stalled body read as ConnectionError.
            if time.monotonic() >= deadline:
                raise self._timeout_error() from exc
            raise TransformationError(f"request failed: {exc}") from exc

        text = content.decode("utf-8", errors="replace")
        logger.info("chat response received", status=status, body_chars=len(text))

        try:
            payload = json.loads(text)
            return ChatResponse.from_payload(payload, raw_body=text)
        except (TypeError, ValueError) as exc:
            raise TransformationError(
                f"error parsing API response: {exc} (response: {text})",
            ) from exc
