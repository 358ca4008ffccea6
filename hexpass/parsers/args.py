"""
Command-Line Argument Parser
=============================

Turns the raw token sequence into a :data:`~hexpass.core.models.ParsedRequest`.

The scanner only captures values; the numeric checks for the positional
length and ``--bytes`` live in :func:`parse_character_length` and
:func:`parse_byte_length` and are applied by the engine, so that the
length-limit messages can name the right unit.  ``--count`` and ``--env``
values are checked as soon as they are captured.

Recognised tokens::

    -h, --help            short-circuit to HelpRequest
    -v, --version         short-circuit to VersionRequest
    --bytes <n>           byte length
    -c, --copy            copy to clipboard
    -n, --count <n>       number of secrets
    -e, --env <NAME>      NAME=secret output
    -j, --json            JSON output
    <length>              positional character length
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

from hexpass.core.errors import UsageError
from hexpass.core.models import (
    MAX_COUNT,
    ErrorRequest,
    GenerateRequest,
    HelpRequest,
    ParsedRequest,
    VersionRequest,
)

_HELP_FLAGS = frozenset({"--help", "-h"})
_VERSION_FLAGS = frozenset({"--version", "-v"})
_COPY_FLAGS = frozenset({"--copy", "-c"})
_JSON_FLAGS = frozenset({"--json", "-j"})
_COUNT_FLAGS = frozenset({"--count", "-n"})
_ENV_FLAGS = frozenset({"--env", "-e"})

# Plain decimal integers only: no fractions, exponents, underscores or
# radix prefixes.
_INTEGER_RE = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


# ===================================================================== #
#  Value Parsers
# ===================================================================== #


def _parse_integer(value: str) -> Optional[int]:
    if not _INTEGER_RE.fullmatch(value):
        return None
    try:
        return int(value)
    except ValueError:
        # Beyond the interpreter's integer string conversion limit
        return None


def parse_character_length(value: str) -> int:
    """Parse a positional length.  No upper bound is applied here."""
    num = _parse_integer(value)
    if num is None:
        raise UsageError(f"Invalid length: '{value}'. Must be a positive integer.")
    if num <= 0:
        raise UsageError("Length must be a positive integer.")
    return num


def parse_byte_length(value: str) -> int:
    """Parse a ``--bytes`` value.  No upper bound is applied here."""
    num = _parse_integer(value)
    if num is None:
        raise UsageError(
            f"Invalid byte length: '{value}'. Must be a positive integer."
        )
    if num <= 0:
        raise UsageError("Byte length must be a positive integer.")
    return num


def parse_count(value: str) -> int:
    """Parse a ``--count`` value in ``1..MAX_COUNT``."""
    num = _parse_integer(value)
    if num is None:
        raise UsageError(f"Invalid count: '{value}'. Must be a positive integer.")
    if num <= 0:
        raise UsageError("Count must be a positive integer.")
    if num > MAX_COUNT:
        raise UsageError(f"Count exceeds maximum of {MAX_COUNT}.")
    return num


def parse_env_name(value: str) -> str:
    """Validate an ``--env`` variable name and return it unchanged."""
    if not value or value.strip() == "":
        raise UsageError("Environment variable name cannot be empty.")
    if " " in value:
        raise UsageError("Environment variable name cannot contain spaces.")
    return value


# ===================================================================== #
#  Token Scanner
# ===================================================================== #


def _take_value(tokens: Sequence[str], index: int, option: str) -> str:
    """Return the token after *index*, which must be a non-flag value."""
    if index + 1 >= len(tokens):
        raise UsageError(f"Missing value for {option}.")
    value = tokens[index + 1]
    if not value or value.startswith("-"):
        raise UsageError(f"Missing value for {option}.")
    return value


def _scan(tokens: Sequence[str]) -> ParsedRequest:
    length_value: Optional[str] = None
    bytes_value: Optional[str] = None
    count: Optional[int] = None
    env_name: Optional[str] = None
    copy_secret = False
    json_output = False

    i = 0
    while i < len(tokens):
        arg = tokens[i]

        if arg in _HELP_FLAGS:
            return HelpRequest()

        if arg in _VERSION_FLAGS:
            return VersionRequest()

        if arg == "--bytes":
            if bytes_value is not None:
                raise UsageError("The --bytes option can only be specified once.")
            bytes_value = _take_value(tokens, i, "--bytes")
            i += 2
            continue

        if arg in _COPY_FLAGS:
            copy_secret = True
        elif arg in _COUNT_FLAGS:
            if count is not None:
                raise UsageError("The --count option can only be specified once.")
            count = parse_count(_take_value(tokens, i, "--count"))
            i += 1
        elif arg in _ENV_FLAGS:
            if env_name is not None:
                raise UsageError("The --env option can only be specified once.")
            env_name = parse_env_name(_take_value(tokens, i, "--env"))
            i += 1
        elif arg in _JSON_FLAGS:
            json_output = True
        elif arg.startswith("-"):
            raise UsageError(f"Unknown option: {arg}")
        elif length_value is not None:
            raise UsageError("Multiple length values provided.")
        else:
            length_value = arg

        i += 1

    return GenerateRequest(
        length_value=length_value,
        bytes_value=bytes_value,
        copy_secret=copy_secret,
        count=count if count is not None else 1,
        env_name=env_name,
        json_output=json_output,
    )


def parse_args(tokens: Sequence[str]) -> ParsedRequest:
    """Parse *tokens* into a request.  Never raises for bad user input.

    Args:
        tokens: Command-line arguments without the program name.

    Returns:
        ``HelpRequest`` or ``VersionRequest`` if such a flag appears before
        any error, ``ErrorRequest`` describing the first problem found,
        otherwise a ``GenerateRequest`` with the raw captured values.
    """
    try:
        return _scan(list(tokens))
    except UsageError as exc:
        return ErrorRequest(message=str(exc))
