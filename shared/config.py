"""
hexpass Configuration Management
=================================

Optional user configuration for hexpass using Python dataclasses and
TOML-based persistence.

The configuration only covers ambient behaviour (logging and the clipboard
tool chain).  Output limits such as the maximum length are fixed constants
in :mod:`hexpass.core.models` and are never read from a file.

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
    - PEP 681 -- Data Class Transforms (2022).
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional

from hexpass.core.errors import ConfigError


# ---------------------------------------------------------------------------
# Default configuration file path in the user's config directory
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path.home() / ".config" / "hexpass" / "config.toml"


def _default_linux_commands() -> list[list[str]]:
    return [
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


# ============================ Sections =====================================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and destinations."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False


@dataclass(frozen=False, slots=True)
class ClipboardConfig:
    """Clipboard tool chain used on platforms other than macOS / Windows.

    Each entry is a full argv list; the tools are tried in order and the
    first one that accepts the input wins.
    """

    linux_commands: list[list[str]] = field(default_factory=_default_linux_commands)


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class HexpassConfig:
    """Master configuration aggregating every section.

    Usage:
        >>> config = HexpassConfig.load()                  # default path
        >>> config = HexpassConfig.load("custom.toml")     # custom path
        >>> config.global_settings.log_level
        'WARNING'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    clipboard: ClipboardConfig = field(default_factory=ClipboardConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> HexpassConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for
        ``~/.config/hexpass/config.toml``.  Missing keys fall back to
        dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`HexpassConfig` instance.

        Raises:
            FileNotFoundError: If an explicitly provided path does not exist.
            ConfigError: If the file is not valid TOML.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        try:
            with open(config_path, "rb") as fh:
                raw: dict[str, Any] = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(
                f"Invalid configuration file {config_path}: {exc}"
            ) from exc

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            clipboard=cls._build_section(ClipboardConfig, raw.get("clipboard", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys are ignored so that newer config files do not break
        older installs.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> HexpassConfig:
    """Module-level convenience wrapper around :meth:`HexpassConfig.load`.

    Caches the result so that repeated calls share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = HexpassConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
