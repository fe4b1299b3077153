"""Custom exception hierarchy for bcpu16-asm.

All exceptions that cross module boundaries inherit from
:class:`Bcpu16AsmError`.  Command-line violations are raised inside the
parser's transition functions and converted to a boolean outcome by
:meth:`~bcpu16asm.core.cmdline.CommandLine.parse` — they never escape it.

Hierarchy
---------
Bcpu16AsmError
├── CommandLineError
│   ├── MalformedArgumentError
│   ├── UnknownParameterError
│   ├── UnexpectedValueError
│   ├── InvalidValueError
│   ├── MissingValueError
│   └── MissingMandatoryError
├── SourceFileError
└── EnvironmentError
"""

from __future__ import annotations


class Bcpu16AsmError(Exception):
    """Base exception for all bcpu16-asm errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class CommandLineError(Bcpu16AsmError):
    """Raised when the argument vector violates the declared parameters."""

    def __init__(
        self,
        message: str,
        *,
        param_name: str | None = None,
        token: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.param_name: str | None = param_name
        """Name of the parameter involved, when one is known."""
        self.token: str | None = token
        """The offending raw argument, when one is known."""


class MalformedArgumentError(CommandLineError):
    """Raised for a dash-led token with an empty or dash-led remainder."""


class UnknownParameterError(CommandLineError):
    """Raised when an option names no registered parameter."""


class UnexpectedValueError(CommandLineError):
    """Raised when a presence flag is given an inline value."""


class InvalidValueError(CommandLineError):
    """Raised when a value fails kind-specific decoding."""


class MissingValueError(CommandLineError):
    """Raised when a value-needing option is not followed by its value."""


class MissingMandatoryError(CommandLineError):
    """Raised when a mandatory parameter was never supplied."""


# --- Source files ----------------------------------------------------------

class SourceFileError(Bcpu16AsmError):
    """Raised when a source file cannot be opened or read."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(Bcpu16AsmError):
    """Raised when a required runtime dependency is not available."""
