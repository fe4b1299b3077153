"""Command-line argument parser.

The parser is a two-state machine driven one token at a time:

* :class:`Idle` — no option is waiting for a value.
* :class:`AwaitingValue` — the previous token named a value-needing
  option without an inline value; the next token supplies it.

:func:`push_arg` is the transition function and :func:`finish` the final
validation pass.  Both are pure apart from mutating the value cell of the
parameter being assigned and appending to the positional list, and both
raise :class:`~bcpu16asm.exceptions.CommandLineError` subclasses on the
first violation.  :class:`CommandLine` wraps them for the driver and
turns those errors into a boolean outcome plus diagnostic lines.

Accepted token shapes::

    -v            short presence flag
    -ofoo.bin     short option with inline value
    -o foo.bin    short option, value in the next token
    --out=foo.bin long option with inline value
    --out foo.bin long option, value in the next token
    input.s       positional argument
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from bcpu16asm.core.params import Param, ParamKind, encode_value
from bcpu16asm.core.protocols import DiagnosticSink
from bcpu16asm.core.registry import ParamRegistry
from bcpu16asm.exceptions import (
    CommandLineError,
    MalformedArgumentError,
    MissingMandatoryError,
    MissingValueError,
    UnexpectedValueError,
    UnknownParameterError,
)

Trace = Callable[[str], None]


# ---------------------------------------------------------------------------
# Parser states
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Idle:
    """No option is pending."""


@dataclass(frozen=True, slots=True)
class AwaitingValue:
    """*param* was named without a value; the next token is its value."""

    param: Param


ParserState = Idle | AwaitingValue

IDLE = Idle()


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def _option_prefix(arg: str) -> int:
    """Number of leading dashes that make *arg* an option token (0-2)."""
    if len(arg) < 2 or arg[0] != "-":
        return 0
    return 2 if arg[1] == "-" else 1


def split_option(arg: str, prefix: int) -> tuple[str, str]:
    """Split an option token into ``(name, inline_value)``.

    Short form takes the first character as the name and the rest as
    the value; long form splits on the first ``=``.  The inline value
    is ``""`` when absent.
    """
    body = arg[prefix:]
    if prefix == 1:
        return body[:1], body[1:]
    name, _, value = body.partition("=")
    return name, value


def assign(param: Param, value: str, trace: Trace | None = None) -> None:
    """Set *value* on *param*; :class:`InvalidValueError` propagates with its hint."""
    param.store(value)
    if trace is not None:
        trace(f"param: {param.name} = {param.raw}")


def push_arg(
    state: ParserState,
    arg: str,
    registry: ParamRegistry,
    positionals: list[str],
    trace: Trace | None = None,
) -> ParserState:
    """Consume one token and return the next parser state.

    Raises
    ------
    CommandLineError
        On the first malformed token, unknown name, unexpected or
        invalid value, or option found where a value was expected.
    """
    prefix = _option_prefix(arg)
    if prefix and isinstance(state, AwaitingValue):
        raise MissingValueError(
            f"expected value for argument {state.param.name} but found {arg}",
            param_name=state.param.name,
            token=arg,
        )

    body = arg[prefix:]
    if not body or body.startswith("-"):
        raise MalformedArgumentError(
            f"invalid commandline argument {arg}", token=arg,
        )

    if not prefix:
        if isinstance(state, AwaitingValue):
            assign(state.param, arg, trace)
            return IDLE
        positionals.append(arg)
        if trace is not None:
            trace(f"simple param: {arg}")
        return IDLE

    name, inline = split_option(arg, prefix)
    param = registry.find(name)
    if param is None:
        raise UnknownParameterError(
            f"unknown parameter {name}", param_name=name, token=arg,
        )

    if param.needs_value:
        if not inline:
            return AwaitingValue(param)
        assign(param, inline, trace)
        return IDLE

    if inline:
        raise UnexpectedValueError(
            f"unexpected value for parameter {name}",
            param_name=name,
            token=arg,
        )
    assign(param, "", trace)
    return IDLE


def finish(state: ParserState, registry: ParamRegistry) -> None:
    """Final validation once every token has been consumed."""
    if isinstance(state, AwaitingValue):
        raise MissingValueError(
            f"value for parameter {state.param.name} is missing",
            param_name=state.param.name,
        )
    missing = registry.mandatory_unset()
    if missing:
        raise MissingMandatoryError(
            f"mandatory parameter {missing[0].name} is not specified",
            param_name=missing[0].name,
        )


# ---------------------------------------------------------------------------
# Driver-facing parser
# ---------------------------------------------------------------------------

class CommandLine:
    """Registry plus parse session, as used by a program's ``main``.

    Typical use::

        cmdline = CommandLine(sink=diagnostics)
        cmdline.register(out_file)
        if not cmdline.parse(sys.argv):
            return exit_codes.GENERAL_ERROR

    Values assigned before a failure are left in place; callers must not
    trust any parameter after :meth:`parse` returns ``False``.
    """

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self.registry = ParamRegistry()
        self.positionals: list[str] = []
        self.messages: list[str] = []
        self.error: CommandLineError | None = None
        self._sink = sink

    @property
    def params(self) -> list[Param]:
        return list(self.registry)

    def register(self, param: Param) -> None:
        self.registry.register(param)

    def register_all(self, params: Iterable[Param]) -> None:
        for param in params:
            self.registry.register(param)

    def find(self, name: str) -> Param | None:
        return self.registry.find(name)

    def parse(self, argv: Sequence[str]) -> bool:
        """Parse a full ``argv``; element 0 is the program name and skipped."""
        return self.parse_args(argv[1:])

    def parse_args(self, args: Iterable[str]) -> bool:
        """Parse *args* (no program name) and run the final validation."""
        self.positionals = []
        self.error = None
        state: ParserState = IDLE
        try:
            for arg in args:
                state = push_arg(
                    state, arg, self.registry, self.positionals, self._trace,
                )
            finish(state, self.registry)
        except CommandLineError as exc:
            self.error = exc
            self._trace(str(exc))
            return False
        return True

    def format_help(self) -> list[str]:
        """One usage line per registered parameter, in registration order."""
        rows: list[tuple[str, str]] = []
        for param in self.registry:
            names = ", ".join(
                n for n in (
                    f"-{param.short_name}" if param.short_name else "",
                    f"--{param.long_name}" if param.long_name else "",
                ) if n
            )
            if param.needs_value:
                names += " INT" if param.kind is ParamKind.INTEGER else " VALUE"
            notes: list[str] = []
            if param.mandatory:
                notes.append("required")
            if param.range_active:
                notes.append(f"{param.min_value}..{param.max_value}")
            default = encode_value(param.kind, param.default)
            if param.needs_value and default:
                notes.append(f"default {default}")
            text = param.description
            if notes:
                text += f" ({', '.join(notes)})"
            rows.append((names, text))
        width = max((len(names) for names, _ in rows), default=0)
        return [f"  {names:<{width}}  {text}" for names, text in rows]

    def _trace(self, message: str) -> None:
        self.messages.append(message)
        if self._sink is not None:
            self._sink.print(message)
