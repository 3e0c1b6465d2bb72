"""Domain models for snyk-greybeard.

All models are **frozen** dataclasses — immutable, call-scoped value
objects.  The chat models know how to convert to and from the plain
dict shape of the wire format, but do no I/O themselves.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Scan result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of one ``snyk`` invocation."""

    output: str
    """Captured stdout followed by captured stderr."""

    exit_code: int
    """Process exit status; non-zero when snyk found issues or failed."""

    command: tuple[str, ...] = ()
    """The argument vector that was executed."""


# ---------------------------------------------------------------------------
# Chat request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ChatMessage:
    """One turn of a chat-completion conversation."""

    role: str
    content: str

    def to_payload(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True, slots=True)
class ChatRequest:
    """Body of a chat-completion request."""

    model: str
    messages: tuple[ChatMessage, ...]
    temperature: float

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready dict ``{model, messages, temperature}``."""
        return {
            "model": self.model,
            "messages": [message.to_payload() for message in self.messages],
            "temperature": self.temperature,
        }


# ---------------------------------------------------------------------------
# Chat response
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ChatChoice:
    """A single candidate answer."""

    index: int
    role: str
    content: str


@dataclass(frozen=True, slots=True)
class ChatResponse:
    """Parsed chat-completion response.

    A response either carries an ``error_message`` or one or more
    :class:`ChatChoice` entries.  Missing fields default to empty values
    rather than failing, so that the caller can decide what "usable"
    means.
    """

    id: str
    object: str
    created: int
    choices: tuple[ChatChoice, ...]
    error_message: str = ""

    raw_body: str = field(default="", repr=False)
    """Undecoded response text, kept for error reporting."""

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
        *,
        raw_body: str = "",
    ) -> ChatResponse:
        """Build a response from a decoded JSON object.

        Raises
        ------
        ValueError
            If *payload* or its ``choices`` / ``error`` members have the
            wrong JSON type.
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")

        raw_choices = payload.get("choices") or []
        if not isinstance(raw_choices, list):
            raise ValueError("'choices' is not a list")

        raw_error = payload.get("error") or {}
        if isinstance(raw_error, str):
            error_message = raw_error
        elif isinstance(raw_error, Mapping):
            error_message = str(raw_error.get("message") or "")
        else:
            raise ValueError("'error' is neither an object nor a string")

        raw_created = payload.get("created")
        return cls(
            id=str(payload.get("id") or ""),
            object=str(payload.get("object") or ""),
            created=int(raw_created) if isinstance(raw_created, (int, float)) else 0,
            choices=tuple(
                cls._parse_choice(position, entry)
                for position, entry in enumerate(raw_choices)
            ),
            error_message=error_message,
            raw_body=raw_body,
        )

    @staticmethod
    def _parse_choice(position: int, raw: object) -> ChatChoice:
        if not isinstance(raw, Mapping):
            raise ValueError(f"choice {position} is not an object")
        message = raw.get("message") or {}
        if not isinstance(message, Mapping):
            message = {}
        raw_index = raw.get("index")
        return ChatChoice(
            index=raw_index if isinstance(raw_index, int) else position,
            role=str(message.get("role") or ""),
            content=str(message.get("content") or ""),
        )
