"""
hexpass Shared Module
=====================

Configuration, logging, and console helpers used by the hexpass package.
"""

from shared.config import HexpassConfig, get_config

__all__ = ["HexpassConfig", "get_config"]
