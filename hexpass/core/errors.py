"""
hexpass Errors
==============

Every failure hexpass reports to the user is a :class:`HexpassError`.
The entry point prints ``str(error)`` verbatim after an ``Error:`` prefix,
so messages are complete sentences.
"""

from __future__ import annotations


class HexpassError(Exception):
    """Base class for user-facing hexpass failures."""


class UsageError(HexpassError):
    """Malformed, missing, conflicting, or out-of-range command-line input."""


class ClipboardError(HexpassError):
    """The platform clipboard tool is missing or failed."""


class ConfigError(HexpassError):
    """The configuration file could not be parsed."""
