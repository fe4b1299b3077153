"""Core layer — parameter declarations and the argument parser.

Rules
-----
* No ``print()`` calls; diagnostics go through a :class:`DiagnosticSink`.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from bcpu16asm.core.cmdline import AwaitingValue, CommandLine, Idle, finish, push_arg
from bcpu16asm.core.params import (
    Param,
    ParamKind,
    bool_param,
    int_param,
    string_param,
)
from bcpu16asm.core.protocols import DiagnosticSink, SourceLoader
from bcpu16asm.core.registry import ParamRegistry

__all__: list[str] = [
    "AwaitingValue",
    "CommandLine",
    "DiagnosticSink",
    "Idle",
    "Param",
    "ParamKind",
    "ParamRegistry",
    "SourceLoader",
    "bool_param",
    "finish",
    "int_param",
    "push_arg",
    "string_param",
]
