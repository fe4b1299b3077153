"""Infrastructure layer — filesystem access.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* ``OSError`` and decoding errors never escape; failures are reported
  through return values.
"""

from bcpu16asm.infra.source_file import SourceFile, SourceLine

__all__: list[str] = [
    "SourceFile",
    "SourceLine",
]
