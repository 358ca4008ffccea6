"""Shared fixtures for the hexpass test suite."""
import itertools

import pytest

from shared import config as config_module
from shared.config import HexpassConfig
from hexpass.core.engine import HexpassEngine
from hexpass.generators.hex_generator import HexGenerator
from hexpass.output.clipboard import NullClipboard


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the default config path at an empty temp dir and drop the cache."""
    monkeypatch.setattr(
        config_module, "_DEFAULT_CONFIG_PATH", tmp_path / "hexpass" / "config.toml"
    )
    if hasattr(config_module.get_config, "_cached"):
        monkeypatch.delattr(config_module.get_config, "_cached")
    yield


@pytest.fixture
def config():
    return HexpassConfig()


@pytest.fixture
def counting_source():
    """Deterministic byte source: 0x00, 0x01, 0x02, ... across calls."""
    counter = itertools.count()

    def source(n):
        return bytes(next(counter) % 256 for _ in range(n))

    return source


@pytest.fixture
def engine(config):
    return HexpassEngine(config)


@pytest.fixture
def deterministic_engine(config, counting_source):
    return HexpassEngine(config, generator=HexGenerator(counting_source))


@pytest.fixture
def clipboard():
    return NullClipboard()
