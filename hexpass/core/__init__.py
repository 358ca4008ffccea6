"""
hexpass Core Module
===================

Data models, limits, and the error taxonomy.  The engine lives in
:mod:`hexpass.core.engine` and is imported from there directly.
"""

from hexpass.core.errors import (
    ClipboardError,
    ConfigError,
    HexpassError,
    UsageError,
)
from hexpass.core.models import (
    DEFAULT_LENGTH,
    MAX_BYTES,
    MAX_COUNT,
    MAX_LENGTH,
    ErrorRequest,
    GenerateRequest,
    GenerationResult,
    GenerationSpec,
    HelpRequest,
    ParsedRequest,
    SecretRecord,
    VersionRequest,
)

__all__ = [
    "ClipboardError",
    "ConfigError",
    "DEFAULT_LENGTH",
    "ErrorRequest",
    "GenerateRequest",
    "GenerationResult",
    "GenerationSpec",
    "HelpRequest",
    "HexpassError",
    "MAX_BYTES",
    "MAX_COUNT",
    "MAX_LENGTH",
    "ParsedRequest",
    "SecretRecord",
    "UsageError",
    "VersionRequest",
]
