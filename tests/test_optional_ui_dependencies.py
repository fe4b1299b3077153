"""Regression tests for the optional Rich console dependency.

The tool must keep parsing, reporting and dumping when Rich is not
importable; output then falls back to plain stderr prints.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from bcpu16asm.cli import exit_codes
from bcpu16asm.cli.app import main
from bcpu16asm.cli.console import console, diagnostics, get_rich_console
from bcpu16asm.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


def test_get_rich_console_raises_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_console_falls_back_to_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print("plain message")
    diagnostics.print("param: out = [a].bin")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "plain message\nparam: out = [a].bin\n"


def test_diagnostics_keep_brackets_with_rich(capsys: pytest.CaptureFixture[str]) -> None:
    diagnostics.print("simple param: [weird].s")
    assert "simple param: [weird].s" in capsys.readouterr().err


def test_main_works_without_rich(
    source_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.chdir(source_path.parent)

    code = main(["-o", "a.out", source_path.name])
    assert code == exit_codes.SUCCESS
    captured = capsys.readouterr()
    assert "param: out = a.out" in captured.err
    assert captured.out.splitlines()[:2] == ["Dumping source file", "1        start:"]


def test_parse_failure_reported_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["--bogus"]) == exit_codes.GENERAL_ERROR
    assert "unknown parameter bogus" in capsys.readouterr().err
