"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import SuaConfig
from core.constants import DEFAULT_CHUNK_SIZE, DEFAULT_TIMEOUT_SECONDS, SUA_FEED_URL
from core.errors import SuaConfigError


def test_from_env_defaults_match_fixed_endpoint() -> None:
    """Unset environment should produce the fixed feed settings."""
    config = SuaConfig.from_env()

    assert config.feed_url == SUA_FEED_URL
    assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
    assert config.chunk_size == DEFAULT_CHUNK_SIZE
    assert config.local_timezone is None
    assert config.log_level == "WARNING"


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should honor SUA_* overrides."""
    monkeypatch.setenv("SUA_FEED_URL", "https://example.test/sua.csv")
    monkeypatch.setenv("SUA_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("SUA_LOCAL_TIMEZONE", "America/Denver")
    monkeypatch.setenv("SUA_LOG_LEVEL", "debug")

    config = SuaConfig.from_env()

    assert config.feed_url == "https://example.test/sua.csv"
    assert config.timeout_seconds == 5
    assert str(config.local_timezone) == "America/Denver"
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("SUA_TIMEOUT_SECONDS", "soon"),
        ("SUA_CHUNK_SIZE", "0"),
        ("SUA_LOCAL_TIMEZONE", "Mars/Olympus_Mons"),
        ("SUA_LOG_LEVEL", "chatty"),
    ],
)
def test_from_env_raises_for_invalid_values(
    monkeypatch: pytest.MonkeyPatch,
    name: str,
    value: str,
) -> None:
    """Invalid overrides should fail with a config error."""
    monkeypatch.setenv(name, value)

    with pytest.raises(SuaConfigError):
        SuaConfig.from_env()
