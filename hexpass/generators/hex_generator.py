"""
Random Hex Generator
=====================

Produces lowercase hexadecimal secrets from the operating system's
cryptographically secure random source (:func:`secrets.token_bytes`).

Algorithm for a secret of ``n`` characters::

    bytes_needed = ceil(n / 2)
    hex          = token_bytes(bytes_needed).hex()
    secret       = hex[:n]

For odd ``n`` only the high nibble of the last byte is kept, so the final
character carries 4 bits of entropy rather than 8.

References:
    - PEP 506 -- Adding A Secrets Module To The Standard Library.
    - NIST SP 800-90A Rev. 1 (2015). Recommendation for Random Number
      Generation Using Deterministic Random Bit Generators.
"""

from __future__ import annotations

import math
import secrets
from typing import Callable, Optional

ByteSource = Callable[[int], bytes]


class HexGenerator:
    """Generates hex secrets from a byte source.

    Attributes:
        source: Callable returning ``n`` random bytes.  Defaults to
            :func:`secrets.token_bytes`; tests may inject a deterministic
            source.
    """

    def __init__(self, source: Optional[ByteSource] = None) -> None:
        self.source: ByteSource = source or secrets.token_bytes

    def generate(self, char_length: int) -> str:
        """Return one secret of exactly *char_length* hex characters.

        Raises:
            ValueError: If *char_length* is not positive.
        """
        if char_length < 1:
            raise ValueError(f"char_length must be positive, got {char_length}")
        bytes_needed = math.ceil(char_length / 2)
        return self.source(bytes_needed).hex()[:char_length]

    def generate_many(self, char_length: int, count: int) -> list[str]:
        """Return *count* independently generated secrets."""
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        return [self.generate(char_length) for _ in range(count)]


_default = HexGenerator()


def generate_hex(char_length: int) -> str:
    """Generate one secret with the system CSPRNG."""
    return _default.generate(char_length)


def generate_many(char_length: int, count: int) -> list[str]:
    """Generate *count* secrets with the system CSPRNG."""
    return _default.generate_many(char_length, count)


def bytes_used(char_length: int, byte_length: Optional[int] = None) -> int:
    """Bytes reported for a secret: the ``--bytes`` value, else ``ceil(n/2)``."""
    if byte_length is not None:
        return byte_length
    return math.ceil(char_length / 2)
