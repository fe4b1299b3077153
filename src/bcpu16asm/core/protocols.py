"""Protocols (interfaces) consumed by the core layer.

Core code depends only on these contracts — never on the console or
on filesystem adapters — so it stays free of I/O.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receiver for human-readable parser diagnostics.

    The format of the messages is not a stable contract.
    """

    def print(self, message: str) -> None:
        ...  # pragma: no cover


@runtime_checkable
class SourceLoader(Protocol):
    """A loaded, random-access sequence of numbered text lines."""

    def load(self, path: str) -> bool:
        """Load *path*; return ``False`` when it cannot be opened.

        Implementations must not raise for missing or unreadable files.
        """
        ...  # pragma: no cover

    def __len__(self) -> int:
        ...  # pragma: no cover

    def __iter__(self) -> Iterator[object]:
        ...  # pragma: no cover
