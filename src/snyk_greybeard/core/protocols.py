"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from snyk_greybeard.core.models import ChatRequest, ChatResponse, ScanResult


class ScanRunner(Protocol):
    """Contract for the external scanner backend."""

    def run(self, args: Sequence[str]) -> ScanResult:
        """Run the scanner with *args* and block until it exits.

        A non-zero exit status must be reported in the returned
        :class:`ScanResult`, not raised.

        Raises
        ------
        SnykExecutionError
            When the scanner process could not be started.
        """
        ...  # pragma: no cover


class ChatClient(Protocol):
    """Contract for chat-completion backends.

    Implementations perform exactly one round trip per call and must map
    all transport and decoding failures to
    :class:`~snyk_greybeard.exceptions.TransformationError`.
    """

    def complete(self, request: ChatRequest) -> ChatResponse:
        """Send *request* and return the decoded response.

        Raises
        ------
        TransformationError
            On serialization, connection, timeout or parse failure.
        """
        ...  # pragma: no cover
