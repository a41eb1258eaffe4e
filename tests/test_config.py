"""Tests for environment configuration."""

from pathlib import Path

import pytest

from whitehouse.config import Config


def test_defaults(monkeypatch):
    for name in ("WHITEHOUSE_DATABASE_URL", "WHITEHOUSE_PORT", "WHITEHOUSE_WORLD_FILE"):
        monkeypatch.delenv(name, raising=False)
    config = Config.from_env()
    assert config.database_url == "sqlite:///./whitehouse.db"
    assert config.port == 1965
    assert config.world_file is None


def test_from_env(monkeypatch):
    monkeypatch.setenv("WHITEHOUSE_DATABASE_URL", "sqlite:///tmp/game.db")
    monkeypatch.setenv("WHITEHOUSE_PORT", "1966")
    monkeypatch.setenv("WHITEHOUSE_JSON_LOGS", "yes")
    monkeypatch.setenv("WHITEHOUSE_WORLD_FILE", "/srv/worlds/house.json")
    config = Config.from_env()
    assert config.database_url == "sqlite:///tmp/game.db"
    assert config.port == 1966
    assert config.json_logs is True
    assert config.world_file == Path("/srv/worlds/house.json")


@pytest.mark.parametrize(
    "value,expected",
    [("on", True), ("true", True), ("false", False), ("0", False), ("No", False)],
)
def test_hash_fingerprints_is_opt_out(monkeypatch, value, expected):
    monkeypatch.setenv("WHITEHOUSE_HASH_FINGERPRINTS", value)
    assert Config.from_env().hash_fingerprints is expected
