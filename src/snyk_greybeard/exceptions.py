"""Custom exception hierarchy for snyk-greybeard.

All exceptions that cross layer boundaries must inherit from
:class:`GreybeardError`.  Raw third-party exceptions (``requests``,
``json``, ``OSError`` from ``subprocess``) must NEVER propagate beyond
the infrastructure layer — they are caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
GreybeardError
├── EnvironmentError
│   ├── MissingCredentialError
│   └── SnykNotFoundError
├── SnykExecutionError
└── TransformationError
"""

from __future__ import annotations


class GreybeardError(Exception):
    """Base exception for all snyk-greybeard errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Environment / preconditions -------------------------------------------

class EnvironmentError(GreybeardError):
    """Raised when a required runtime precondition is not available."""


class MissingCredentialError(EnvironmentError):
    """Raised when the chat API key is absent from the environment."""


class SnykNotFoundError(EnvironmentError):
    """Raised when the ``snyk`` executable cannot be located on PATH."""


# --- Scan --------------------------------------------------------------------

class SnykExecutionError(GreybeardError):
    """Raised when the ``snyk`` process could not be launched at all.

    A non-zero exit status from a process that did run is *not* an
    error — it is reported through the scan result instead.
    """


# --- Remote transformation ---------------------------------------------------

class TransformationError(GreybeardError):
    """Raised when the chat-completion round trip fails for any reason."""
