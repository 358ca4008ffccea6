"""
hexpass Console Interface
==========================

Stream abstraction for the hexpass entry point.

Everything hexpass prints is part of its output contract (secrets,
``NAME=value`` lines, JSON, ``Error: ...`` lines), so text is written
verbatim through :func:`click.echo`: tabs, control characters and escape
sequences are passed through untouched.
"""

from __future__ import annotations

from typing import IO, Optional

import click


class HexConsole:
    """Paired stdout / stderr writers.

    Usage::

        con = HexConsole()
        con.out("3f9a...")
        con.error("Length must be a positive integer.")
    """

    def __init__(
        self,
        *,
        stdout: Optional[IO[str]] = None,
        stderr: Optional[IO[str]] = None,
    ) -> None:
        """Initialise the console.

        Args:
            stdout: Stream for regular output. ``None`` follows ``sys.stdout``.
            stderr: Stream for errors. ``None`` follows ``sys.stderr``.
        """
        self._stdout = stdout
        self._stderr = stderr

    def out(self, text: str) -> None:
        """Write *text* followed by exactly one newline to stdout."""
        # color=True keeps click from stripping escape sequences off a non-tty
        click.echo(text, file=self._stdout, color=True)

    def error(self, message: str) -> None:
        """Write ``Error: <message>`` to stderr."""
        click.echo(
            f"Error: {message}",
            file=self._stderr,
            err=self._stderr is None,
            color=True,
        )
