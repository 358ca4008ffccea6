"""
hexpass Output Module
=====================

Formatting, help text, and clipboard support.
"""

from hexpass.output.clipboard import (
    ClipboardWriter,
    NullClipboard,
    SystemClipboard,
)
from hexpass.output.formatter import format_json, format_plain, render
from hexpass.output.help import get_help

__all__ = [
    "ClipboardWriter",
    "NullClipboard",
    "SystemClipboard",
    "format_json",
    "format_plain",
    "get_help",
    "render",
]
