"""
hexpass Generators
==================

Secret generation backed by the operating system CSPRNG.
"""

from hexpass.generators.hex_generator import (
    HexGenerator,
    bytes_used,
    generate_hex,
    generate_many,
)

__all__ = [
    "HexGenerator",
    "bytes_used",
    "generate_hex",
    "generate_many",
]
