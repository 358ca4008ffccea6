"""
hexpass CLI
===========

Click entry point for hexpass.

Click is only used as the process shell: every token is forwarded
unprocessed to :func:`hexpass.parsers.args.parse_args`, which owns the
option grammar (``-h`` and ``-v`` short-circuit, repeated options are
rejected, unknown options are reported in hexpass' own words).

Usage::

    hexpass                     # 32 hex characters
    hexpass 64                  # 64 hex characters
    hexpass --bytes 32          # 32 random bytes, 64 hex characters
    hexpass -n 5                # five secrets
    hexpass 48 --env JWT_SECRET # JWT_SECRET=<secret>
    hexpass --json              # {"length":32,"bytes":16,"hex":"..."}
    python -m hexpass --copy

Exit codes:
    0 - success, help, or version
    1 - invalid input or clipboard failure
"""

from __future__ import annotations

from typing import Optional, Sequence

import click

from shared.config import HexpassConfig, get_config
from shared.console import HexConsole
from shared.logger import HexLogger

from hexpass import __version__
from hexpass.core.engine import HexpassEngine
from hexpass.core.errors import HexpassError
from hexpass.core.models import ErrorRequest, HelpRequest, VersionRequest
from hexpass.output.clipboard import ClipboardWriter, SystemClipboard
from hexpass.output.formatter import render
from hexpass.output.help import get_help
from hexpass.parsers.args import parse_args

_RAW_TOKENS_KEY = "hexpass.raw_tokens"


def run(
    tokens: Sequence[str],
    *,
    config: Optional[HexpassConfig] = None,
    console: Optional[HexConsole] = None,
    clipboard: Optional[ClipboardWriter] = None,
    engine: Optional[HexpassEngine] = None,
) -> int:
    """Execute one hexpass invocation and return the process exit code.

    Args:
        tokens: Command-line arguments without the program name.
        config: Configuration; loaded from the default path when omitted.
        console: Output streams; the process stdout / stderr when omitted.
        clipboard: Clipboard writer used for ``--copy``.
        engine: Engine override, mainly for tests.
    """
    console = console or HexConsole()
    request = parse_args(tokens)

    if isinstance(request, HelpRequest):
        console.out(get_help())
        return 0

    if isinstance(request, VersionRequest):
        console.out(__version__)
        return 0

    if isinstance(request, ErrorRequest):
        console.error(request.message)
        return 1

    try:
        config = config or get_config()
        engine = engine or HexpassEngine(config)
        result = engine.run(request)
    except HexpassError as exc:
        console.error(str(exc))
        return 1

    console.out(render(result))

    if result.spec.copy_secret:
        if clipboard is None:
            clipboard = SystemClipboard(
                linux_commands=config.clipboard.linux_commands,
                logger=HexLogger.from_config("clipboard", config),
            )
        try:
            clipboard.copy(result.secrets[0])
        except HexpassError as exc:
            console.error(str(exc))
            return 1

    return 0


class RawTokenCommand(click.Command):
    """Click command that keeps the argv exactly as given.

    Click's own parser drops a bare ``--``; the hexpass grammar treats it
    as an unknown option, so the untouched list is stored in ``ctx.meta``.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[_RAW_TOKENS_KEY] = list(args)
        return super().parse_args(ctx, args)


@click.command(
    cls=RawTokenCommand,
    context_settings={"ignore_unknown_options": True},
    add_help_option=False,
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    """Generate cryptographically secure hex secrets."""
    ctx.exit(run(ctx.meta[_RAW_TOKENS_KEY]))


def main() -> None:
    """Main entry point for the hexpass CLI."""
    cli()


if __name__ == "__main__":
    main()
