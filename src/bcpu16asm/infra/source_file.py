"""Infrastructure: line-oriented source file loading.

A :class:`SourceFile` reads a text file into numbered
:class:`SourceLine` records so later stages can report positions as
``file:line``.  Loading never raises for an unreadable file — callers
check the boolean result and report "cannot open" themselves.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SourceLine:
    """One line of source text without its line terminator."""

    path: str
    """Path of the file the line was read from."""

    line_number: int
    """1-based line number."""

    text: str


class SourceFile:
    """Ordered, random-access lines of one source file.

    *included_from* records the line of an including file, when this
    file was pulled in by an include directive.
    """

    def __init__(
        self,
        path: str = "",
        included_from: SourceLine | None = None,
    ) -> None:
        self.path = path
        self.included_from = included_from
        self._lines: list[SourceLine] = []

    def load(self, path: str) -> bool:
        """Read *path*, replacing any previously loaded lines.

        Returns ``False`` when the file cannot be opened or decoded.
        """
        try:
            with Path(path).open(encoding="utf-8", newline="") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError):
            return False
        self.clear()
        self.path = path
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        for number, line in enumerate(lines, start=1):
            self._lines.append(SourceLine(path, number, line))
        return True

    def clear(self) -> None:
        self._lines.clear()

    def line(self, index: int) -> SourceLine | None:
        """Return the line at 0-based *index*, or ``None`` if out of range."""
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def dump_lines(self) -> list[str]:
        """Render every line as ``"<number padded to 8> <text>"``."""
        return [f"{line.line_number:<8d} {line.text}" for line in self._lines]

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[SourceLine]:
        return iter(self._lines)
