"""
hexpass Core Data Models
=========================

Limits and pydantic models shared by the parser, the engine, and the
output layer.

A command line is first captured as a :data:`ParsedRequest` (one of four
frozen variants), then resolved by the engine into a fully validated
:class:`GenerationSpec`.  The generated secrets travel together with that
spec in a :class:`GenerationResult`.
"""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Limits
# ===================================================================== #

DEFAULT_LENGTH: int = 32
MAX_LENGTH: int = 1024
MAX_BYTES: int = MAX_LENGTH // 2
MAX_COUNT: int = 100


# ===================================================================== #
#  Parsed Requests
# ===================================================================== #


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class HelpRequest(_Frozen):
    """``--help`` / ``-h`` was seen."""

    action: Literal["help"] = "help"


class VersionRequest(_Frozen):
    """``--version`` / ``-v`` was seen."""

    action: Literal["version"] = "version"


class GenerateRequest(_Frozen):
    """Raw option values captured from the command line.

    Attributes:
        length_value: Positional length token, not yet validated.
        bytes_value: ``--bytes`` token, not yet validated.
        copy_secret: Whether ``--copy`` was given.
        count: Number of secrets, already validated by the parser.
        env_name: ``--env`` name, already validated by the parser.
        json_output: Whether ``--json`` was given.
    """

    action: Literal["generate"] = "generate"
    length_value: Optional[str] = None
    bytes_value: Optional[str] = None
    copy_secret: bool = False
    count: int = Field(default=1, ge=1, le=MAX_COUNT)
    env_name: Optional[str] = None
    json_output: bool = False


class ErrorRequest(_Frozen):
    """The token sequence could not be parsed."""

    action: Literal["error"] = "error"
    message: str


ParsedRequest = Union[HelpRequest, VersionRequest, GenerateRequest, ErrorRequest]


# ===================================================================== #
#  Resolved Generation
# ===================================================================== #


class GenerationSpec(_Frozen):
    """Fully validated generation parameters.

    Attributes:
        char_length: Hex characters per secret.
        count: Number of independent secrets.
        copy_secret: Copy the secret to the clipboard after printing.
        env_name: Prefix each line with ``NAME=``.
        json_output: Emit a JSON object instead of plain text.
        byte_length: The ``--bytes`` value, when the length was given in bytes.
    """

    char_length: int = Field(ge=1, le=MAX_LENGTH)
    count: int = Field(default=1, ge=1, le=MAX_COUNT)
    copy_secret: bool = False
    env_name: Optional[str] = None
    json_output: bool = False
    byte_length: Optional[int] = Field(default=None, ge=1, le=MAX_BYTES)


class GenerationResult(_Frozen):
    """Secrets produced for one :class:`GenerationSpec`."""

    spec: GenerationSpec
    secrets: tuple[str, ...]


class SecretRecord(BaseModel):
    """JSON output shape. Field order is part of the output format."""

    length: int
    bytes: int
    hex: str
