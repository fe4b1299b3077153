"""CLI application entry point for bcpu16-asm.

This module is the **sole error boundary** for the entire application.
It catches :class:`~bcpu16asm.exceptions.Bcpu16AsmError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* Parameter declarations live here; parsing is delegated to
  :class:`~bcpu16asm.core.cmdline.CommandLine`.
* Diagnostics are written to stderr; the source listing goes to stdout.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from bcpu16asm.cli import exit_codes
from bcpu16asm.cli.console import console, diagnostics
from bcpu16asm.core.cmdline import CommandLine
from bcpu16asm.core.params import Param, bool_param, int_param, string_param
from bcpu16asm.exceptions import Bcpu16AsmError, SourceFileError
from bcpu16asm.infra.source_file import SourceFile

PROG = "bcpu16asm"


# ---------------------------------------------------------------------------
# Parameter declarations
# ---------------------------------------------------------------------------

def _declare_params() -> dict[str, Param]:
    """Declare the assembler's parameters, keyed by long name."""
    return {
        "verbose": bool_param("v", "verbose", "turn on diagnostic messages"),
        "out": string_param("o", "out", "output file", mandatory=True),
        "lst": string_param("l", "lst", "list file"),
        "threads": int_param(
            "j", "threads", "number of threads",
            default=1, min_value=1, max_value=16,
        ),
    }


def _build_command_line(params: dict[str, Param]) -> CommandLine:
    cmdline = CommandLine(sink=diagnostics)
    cmdline.register_all(params.values())
    return cmdline


def _print_usage(cmdline: CommandLine) -> None:
    console.print(f"Usage: {PROG} [options] SOURCE", markup=False)
    for line in cmdline.format_help():
        console.print(line, markup=False)


def _print_summary(cmdline: CommandLine) -> None:
    console.print("[bold]Parameters:[/bold]")
    for param in cmdline.params:
        console.print(f"{param.name} = {param.raw}", markup=False)
    console.print("[bold]Simple strings:[/bold]")
    for arg in cmdline.positionals:
        console.print(arg, markup=False)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the bcpu16asm CLI.

    Parameters
    ----------
    argv:
        Explicit argument list without the program name.  When ``None``
        (default), ``sys.argv[1:]`` is used.

    Returns
    -------
    int
        OS process exit code.
    """
    args = sys.argv[1:] if argv is None else list(argv)

    params = _declare_params()
    cmdline = _build_command_line(params)
    if not cmdline.parse_args(args):
        console.print(
            "[bold red]Error while parsing commandline - exiting[/bold red]"
        )
        if cmdline.error is not None and cmdline.error.hint:
            console.print(f"[yellow]Hint:[/yellow] {cmdline.error.hint}")
        _print_usage(cmdline)
        return exit_codes.GENERAL_ERROR

    if params["verbose"].get_bool():
        _print_summary(cmdline)

    if len(cmdline.positionals) != 1:
        console.print("[bold red]No source file specified.[/bold red]")
        _print_usage(cmdline)
        return exit_codes.GENERAL_ERROR

    path = cmdline.positionals[0]
    source = SourceFile()
    if not source.load(path):
        raise SourceFileError(
            f"Cannot open source file {path}",
            hint="Check that the path exists and is readable.",
        )

    print("Dumping source file")
    for line in source.dump_lines():
        print(line)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except Bcpu16AsmError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
