"""
hexpass Parsers
===============

Command-line token scanning and value parsing.
"""

from hexpass.parsers.args import (
    parse_args,
    parse_byte_length,
    parse_character_length,
    parse_count,
    parse_env_name,
)

__all__ = [
    "parse_args",
    "parse_byte_length",
    "parse_character_length",
    "parse_count",
    "parse_env_name",
]
