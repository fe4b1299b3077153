"""bcpu16-asm — command-line front end for the BCPU16 assembler.

Parses process arguments into typed, named parameters and hands the
source file to the assembler pipeline.
"""

from bcpu16asm.version import __version__

__all__: list[str] = ["__version__"]
