"""Prompt construction for the greybeard transformation.

Every function in this module is a **pure** transformation: captured
scan text in, :class:`~snyk_greybeard.core.models.ChatRequest` out.
"""

from __future__ import annotations

from snyk_greybeard.core.models import ChatMessage, ChatRequest

SYSTEM_PROMPT: str = (
    "You are a grumpy, experienced security 'greybeard' with decades of "
    "experience. You're tired of seeing the same security mistakes over and "
    "over again. Transform the Snyk CLI output into a response that sounds "
    "like it's coming from an irritated, knowledgeable security expert who's "
    "seen it all. Be condescending yet educational, frustrated yet helpful. "
    "Use colorful language (but keep it professional), analogies, and "
    "references that an old-school sysadmin might use. FOCUS ONLY ON THE "
    "IMPORTANT SECURITY FINDINGS AND VULNERABILITIES - ignore any trivial "
    "warnings, licensing issues, or boilerplate messages unless they have "
    "actual security implications. Provide context on why the "
    "vulnerabilities matter and what could happen if they're exploited. "
    "Keep it concise but impactful."
)

USER_PREFIX: str = "Here is the Snyk CLI output:\n"

EMPTY_OUTPUT_PLACEHOLDER: str = (
    "No output returned from Snyk CLI. This could be due to a successful "
    "run with no findings or an error."
)


def scan_text_for_prompt(output: str) -> str:
    """Return *output* unchanged, or the placeholder when it is blank."""
    if not output.strip():
        return EMPTY_OUTPUT_PLACEHOLDER
    return output


def build_chat_request(output: str, *, model: str, temperature: float) -> ChatRequest:
    """Build the two-turn request: persona instruction, then the scan text."""
    return ChatRequest(
        model=model,
        messages=(
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=USER_PREFIX + scan_text_for_prompt(output)),
        ),
        temperature=temperature,
    )
