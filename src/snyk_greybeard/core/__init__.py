"""Core / service layer — prompt construction and run orchestration.

Rules
-----
* No ``print()`` calls.
* No subprocess or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from snyk_greybeard.core.greybeard_service import GreybeardService
from snyk_greybeard.core.models import ChatChoice, ChatMessage, ChatRequest, ChatResponse, ScanResult
from snyk_greybeard.core.protocols import ChatClient, ScanRunner

__all__: list[str] = [
    "ChatChoice",
    "ChatClient",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "GreybeardService",
    "ScanResult",
    "ScanRunner",
]
