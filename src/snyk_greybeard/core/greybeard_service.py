"""Core greybeard service — scan, then restate the findings.

The service drives the two halves of a run through injected
:class:`~snyk_greybeard.core.protocols.ScanRunner` and
:class:`~snyk_greybeard.core.protocols.ChatClient` implementations.
The halves are separate methods so that the CLI can show the raw scan
output before waiting on the remote call.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct subprocess or network
  access.
* :meth:`GreybeardService.explain` only ever raises
  :class:`~snyk_greybeard.exceptions.TransformationError`.
"""

from __future__ import annotations

from collections.abc import Sequence

from snyk_greybeard.config import DEFAULT_MODEL, DEFAULT_TEMPERATURE
from snyk_greybeard.core.models import ChatRequest, ChatResponse, ScanResult
from snyk_greybeard.core.prompt import build_chat_request
from snyk_greybeard.core.protocols import ChatClient, ScanRunner
from snyk_greybeard.exceptions import TransformationError
from snyk_greybeard.logger import get_logger

logger = get_logger(__name__)


class GreybeardService:
    """Stateless service wiring a scanner to a chat model.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`ScanRunner` protocol.
    client:
        Any object satisfying the :class:`ChatClient` protocol.
    model, temperature:
        Chat-completion parameters placed in every request.
    """

    def __init__(
        self,
        runner: ScanRunner,
        client: ChatClient,
        *,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        self._runner: ScanRunner = runner
        self._client: ChatClient = client
        self._model = model
        self._temperature = temperature

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scan(self, args: Sequence[str]) -> ScanResult:
        """Run the scanner with *args* passed through unmodified."""
        result = self._runner.run(list(args))
        logger.info("scan finished", exit_code=result.exit_code, output_chars=len(result.output))
        return result

    def explain(self, scan: ScanResult) -> str:
        """Return the greybeard's restatement of *scan*'s output.

        Raises
        ------
        TransformationError
            When the round trip fails, the response carries an embedded
            error, or the response has no candidates.
        """
        request = build_chat_request(
            scan.output,
            model=self._model,
            temperature=self._temperature,
        )
        response = self._complete(request)
        return self.first_candidate(response)

    # ------------------------------------------------------------------
    # Response validation (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def first_candidate(response: ChatResponse) -> str:
        """Return the first choice's text verbatim, or raise."""
        if response.error_message:
            raise TransformationError(f"API error: {response.error_message}")
        if not response.choices:
            raise TransformationError(
                f"no response content returned from API (response: {response.raw_body})",
            )
        return response.choices[0].content

    # ------------------------------------------------------------------
    # Client delegation (safe boundary)
    # ------------------------------------------------------------------

    def _complete(self, request: ChatRequest) -> ChatResponse:
        """Call the client and ensure only our exceptions escape."""
        try:
            return self._client.complete(request)
        except TransformationError:
            raise
        except Exception as exc:
            raise TransformationError(f"Unexpected chat client error: {exc}") from exc
