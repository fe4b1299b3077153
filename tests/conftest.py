"""Shared pytest fixtures and configuration for the bcpu16-asm test suite.

Guidelines
----------
* Core tests must be pure — diagnostics go to a recording sink.
* Files are only created under ``tmp_path``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from pathlib import Path

import pytest


class RecordingSink:
    """Diagnostic sink that keeps every message in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def print(self, message: str) -> None:
        self.lines.append(message)


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def source_path(tmp_path: Path) -> Path:
    path = tmp_path / "input.s"
    path.write_text("start:\n    mov r1, r2\n    jmp start\n", encoding="utf-8")
    return path
