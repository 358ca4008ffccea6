"""
hexpass -- Cryptographically Secure Hex Secrets
================================================

Command-line generator for random lowercase hexadecimal strings suitable
as passwords, tokens, and API keys.

Modules:
    - hexpass.core.engine: Request validation and generation orchestrator
    - hexpass.core.models: Limits and pydantic data models
    - hexpass.generators: CSPRNG-backed hex generation
    - hexpass.parsers: Command-line token parsing
    - hexpass.output: Formatting, help text, clipboard
    - hexpass.cli: Click-based command-line entry point
"""

__version__ = "1.0.0"
__tool_name__ = "hexpass"
