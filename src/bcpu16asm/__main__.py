"""Allow ``python -m bcpu16asm`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m bcpu16asm`` behaves identically to the ``bcpu16asm``
console script.
"""

from __future__ import annotations

from bcpu16asm.cli.app import cli

if __name__ == "__main__":
    cli()
