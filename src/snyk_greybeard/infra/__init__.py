"""Infrastructure layer — external system integration.

This layer wraps all interaction with the Snyk CLI process, the
operating system, and the chat-completion HTTP API.  Every raw
third-party exception must be caught here and re-raised as a
:class:`~snyk_greybeard.exceptions.GreybeardError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from snyk_greybeard.infra.openai_client import OpenAIChatClient
from snyk_greybeard.infra.snyk_detector import SnykStatus, detect_snyk, require_snyk
from snyk_greybeard.infra.snyk_runner import SnykRunner

__all__: list[str] = [
    "OpenAIChatClient",
    "SnykRunner",
    "SnykStatus",
    "detect_snyk",
    "require_snyk",
]
