"""Process exit statuses returned by :func:`bcpu16asm.cli.app.main`.

``main`` returns these for outcomes it reports itself; ``cli`` uses the
rest when an exception reaches the error boundary.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Arguments parsed and the source listing was written."""

GENERAL_ERROR: int = 1
"""The command line was rejected, the source-file count was wrong, or the
source file could not be opened."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""A programming error escaped ``main``; the traceback is summarised."""
