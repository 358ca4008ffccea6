"""
Clipboard Bridge
================

Best-effort copy of a secret to the OS clipboard by piping it into the
platform's clipboard tool:

    - macOS   : ``pbcopy``
    - Windows : ``clip``
    - other   : ``xclip -selection clipboard``, then ``xsel --clipboard --input``

Calls block until the tool exits; no timeout is imposed.
"""

from __future__ import annotations

import subprocess
import sys
from typing import Optional, Protocol, Sequence

from shared.logger import HexLogger

from hexpass.core.errors import ClipboardError

DEFAULT_LINUX_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)


class ClipboardWriter(Protocol):
    """Anything that can place text on a clipboard."""

    def copy(self, text: str) -> None:
        """Copy *text*, raising :class:`ClipboardError` on failure."""
        ...


class SystemClipboard:
    """Clipboard writer that shells out to the platform tool.

    Attributes:
        platform: ``sys.platform``-style identifier used to pick the tool.
        linux_commands: argv lists tried in order on non-macOS/Windows hosts.
    """

    def __init__(
        self,
        platform: Optional[str] = None,
        linux_commands: Optional[Sequence[Sequence[str]]] = None,
        logger: Optional[HexLogger] = None,
    ) -> None:
        self.platform = platform or sys.platform
        self.linux_commands = [
            list(cmd) for cmd in (linux_commands or DEFAULT_LINUX_COMMANDS)
        ]
        self.logger = logger or HexLogger("clipboard")

    def copy(self, text: str) -> None:
        if self.platform == "darwin":
            self._run_single(["pbcopy"], text)
            return

        if self.platform == "win32":
            self._run_single(["clip"], text)
            return

        for command in self.linux_commands:
            if self._try(command, text):
                return

        raise ClipboardError(
            "Clipboard copy not supported on this system. Install xclip or xsel."
        )

    def _run_single(self, command: list[str], text: str) -> None:
        if not self._try(command, text):
            raise ClipboardError(f"Failed to copy to clipboard using {command[0]}.")

    def _try(self, command: list[str], text: str) -> bool:
        """Pipe *text* into *command*; ``True`` when it exits with status 0."""
        try:
            result = subprocess.run(
                command,
                input=text,
                text=True,
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            self.logger.debug("Clipboard tool %s unavailable: %s", command[0], exc)
            return False

        if result.returncode != 0:
            self.logger.debug(
                "Clipboard tool %s exited with status %d",
                command[0],
                result.returncode,
            )
            return False

        self.logger.debug("Copied secret to clipboard with %s", command[0])
        return True


class NullClipboard:
    """Clipboard writer that only records what it was asked to copy."""

    def __init__(self) -> None:
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        self.copied.append(text)
