"""Tests for TOML configuration loading and the structured logger."""
import json
import logging

import pytest

from hexpass.core.errors import ConfigError
from shared import config as config_module
from shared.config import HexpassConfig, get_config
from shared.logger import HexLogger


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "log_json = true\n"
        'unknown_key = "ignored"\n'
        "\n"
        "[clipboard]\n"
        'linux_commands = [["wl-copy"], ["xclip", "-selection", "clipboard"]]\n'
    )
    return path


class TestConfig:
    def test_defaults_when_default_file_absent(self):
        config = HexpassConfig.load()
        assert config.global_settings.log_level == "WARNING"
        assert config.global_settings.log_file is None
        assert config.clipboard.linux_commands[0][0] == "xclip"
        assert config.clipboard.linux_commands[1][0] == "xsel"

    def test_load_explicit_file(self, config_file):
        config = HexpassConfig.load(config_file)
        assert config.global_settings.log_level == "DEBUG"
        assert config.global_settings.log_json is True
        assert config.clipboard.linux_commands == [
            ["wl-copy"],
            ["xclip", "-selection", "clipboard"],
        ]

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            HexpassConfig.load(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("not = [valid")
        with pytest.raises(ConfigError):
            HexpassConfig.load(path)

    def test_default_path_is_used(self, config_file, monkeypatch):
        monkeypatch.setattr(config_module, "_DEFAULT_CONFIG_PATH", config_file)
        assert HexpassConfig.load().global_settings.log_level == "DEBUG"

    def test_get_config_caches(self):
        assert get_config() is get_config()

    def test_to_dict(self):
        data = HexpassConfig().to_dict()
        assert data["global_settings"]["log_level"] == "WARNING"
        assert "linux_commands" in data["clipboard"]

    def test_default_linux_commands_not_shared(self):
        first, second = HexpassConfig(), HexpassConfig()
        first.clipboard.linux_commands.append(["wl-copy"])
        assert len(second.clipboard.linux_commands) == 2


class TestLogger:
    def test_level_from_config(self, config_file):
        logger = HexLogger.from_config("engine", HexpassConfig.load(config_file))
        assert logger.underlying.level == logging.DEBUG
        assert logger.underlying.name == "hexpass.engine"
        assert logger.underlying.propagate is False

    def test_json_file_records_operation(self, tmp_path):
        log_file = tmp_path / "logs" / "hexpass.log"
        logger = HexLogger(
            "engine",
            log_level="DEBUG",
            log_file=log_file,
            json_logs=True,
            console_output=False,
        )
        with logger.operation("resolve"):
            logger.debug("Resolved %d characters", 32, count=1)
        logger.debug("outside")
        for handler in logger.underlying.handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert records[0]["message"] == "Resolved 32 characters"
        assert records[0]["component"] == "engine"
        assert records[0]["operation"] == "resolve"
        assert records[0]["extra"] == {"count": 1}
        assert "operation" not in records[1]

    def test_reinstantiation_does_not_duplicate_handlers(self):
        HexLogger("dup")
        logger = HexLogger("dup")
        assert len(logger.underlying.handlers) == 1
