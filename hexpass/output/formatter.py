"""
Output Formatter
================

Renders generated secrets as plain lines, ``NAME=value`` lines, or a
single-line JSON object.  Returned strings never carry a trailing newline;
the console adds exactly one.
"""

from __future__ import annotations

from typing import Optional, Sequence

from hexpass.core.models import GenerationResult, SecretRecord
from hexpass.generators.hex_generator import bytes_used


def format_plain(secrets: Sequence[str], env_name: Optional[str] = None) -> str:
    """Join *secrets* with newlines, prefixing ``NAME=`` when *env_name* is set."""
    if env_name is not None:
        return "\n".join(f"{env_name}={secret}" for secret in secrets)
    return "\n".join(secrets)


def format_json(secret: str, char_length: int, bytes_value: int) -> str:
    """Compact JSON with the keys ``length``, ``bytes`` and ``hex`` in that order."""
    return SecretRecord(length=char_length, bytes=bytes_value, hex=secret).model_dump_json()


def render(result: GenerationResult) -> str:
    """Format *result* according to its spec."""
    spec = result.spec
    if spec.json_output:
        return format_json(
            result.secrets[0],
            spec.char_length,
            bytes_used(spec.char_length, spec.byte_length),
        )
    return format_plain(result.secrets, spec.env_name)
