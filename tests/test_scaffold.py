"""Smoke tests — verify package wiring.

These tests prove that:
* Version is accessible.
* The exception hierarchy is correctly structured.
* Exit codes are defined.
* ``python -m bcpu16asm`` delegates to the CLI entry point.
"""

from __future__ import annotations

import pytest

from bcpu16asm import __version__
from bcpu16asm.cli import exit_codes
from bcpu16asm.exceptions import (
    Bcpu16AsmError,
    CommandLineError,
    EnvironmentError,
    InvalidValueError,
    MalformedArgumentError,
    MissingMandatoryError,
    MissingValueError,
    SourceFileError,
    UnexpectedValueError,
    UnknownParameterError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            MalformedArgumentError,
            UnknownParameterError,
            UnexpectedValueError,
            InvalidValueError,
            MissingValueError,
            MissingMandatoryError,
        ],
    )
    def test_command_line_errors(self, exc_class: type[CommandLineError]) -> None:
        assert issubclass(exc_class, CommandLineError)
        assert issubclass(exc_class, Bcpu16AsmError)

    @pytest.mark.parametrize("exc_class", [SourceFileError, EnvironmentError])
    def test_other_errors_inherit_from_base(
        self, exc_class: type[Bcpu16AsmError],
    ) -> None:
        assert issubclass(exc_class, Bcpu16AsmError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(Bcpu16AsmError, Exception)

    def test_hint_is_stored(self) -> None:
        err = Bcpu16AsmError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert Bcpu16AsmError("boom").hint is None

    def test_command_line_error_context(self) -> None:
        err = UnknownParameterError("unknown parameter x", param_name="x", token="-x")
        assert err.param_name == "x"
        assert err.token == "-x"
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# Module entry point
# ---------------------------------------------------------------------------

class TestModuleEntryPoint:
    def test_main_module_exposes_cli(self) -> None:
        import bcpu16asm.__main__ as entry
        from bcpu16asm.cli.app import cli

        assert entry.cli is cli
