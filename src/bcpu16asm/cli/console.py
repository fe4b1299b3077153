"""CLI console helpers with optional Rich support.

All human-readable output of the tool goes to stderr through the
``console`` proxy; only the source listing is written to stdout.  Rich is
imported lazily so that the tool keeps working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from bcpu16asm.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object, markup: bool = True) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects, markup=markup, highlight=markup)


class _DiagnosticChannel:
	"""Parser diagnostic sink; messages are printed without markup."""

	def print(self, message: str) -> None:
		console.print(message, markup=False)


console = _ConsoleProxy()
diagnostics = _DiagnosticChannel()
