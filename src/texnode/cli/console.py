"""Diagnostic console helpers with optional Rich support.

Everything written here goes to **stderr**; stdout is reserved for
command results.  Rich is imported lazily so that bootstrap paths
(``--help``, ``--version``) and plain diagnostics keep working when it
is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from texnode.exceptions import DependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``DependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise DependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich markup when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except DependencyError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def echo(self, text: str) -> None:
		"""Write *text* as one verbatim stderr line.

		Bypasses Rich rendering entirely: file names and notices must
		reach stderr byte-for-byte, tabs and control characters included.
		"""
		sys.stderr.write(text + "\n")
		sys.stderr.flush()


console = _ConsoleProxy()


def escape_markup(text: str) -> str:
	"""Escape Rich markup in user-controlled text (paths, parser messages)."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)
