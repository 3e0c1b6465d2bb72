"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--version``) and the scan report itself keep working
even when Rich is not installed.

Two proxies are exported: :data:`console` writes the scan report to
stdout, :data:`err_console` writes errors and diagnostics to stderr.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from snyk_greybeard.exceptions import EnvironmentError

_MARKUP_TAG = re.compile(r"\[/?[a-z][a-z ]*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = False) -> None:
		self._stderr = stderr

	def print(self, *objects: object, markup: bool = True, **kwargs: Any) -> None:
		"""Render with Rich when available, else plain print.

		Extra keyword arguments are forwarded to ``rich.Console.print``
		and ignored by the plain fallback.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			stream = sys.stderr if self._stderr else sys.stdout
			if markup:
				objects = tuple(_MARKUP_TAG.sub("", str(obj)) for obj in objects)
			print(*objects, file=stream)
			return
		rich_console.print(*objects, markup=markup, **kwargs)

	def write(self, text: str) -> None:
		"""Write *text* and a newline to the stream unchanged.

		Bypasses Rich, which strips control characters and expands tabs.
		"""
		stream = sys.stderr if self._stderr else sys.stdout
		stream.write(text + "\n")
		stream.flush()


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)
