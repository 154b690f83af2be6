"""Pytest configuration for repository test runs."""

from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest

from core.config import SuaConfig
from tests.fake_http import FakeResponse, FakeSession
from tests.fixture_paths import fixture_path


@pytest.fixture
def denver_config() -> SuaConfig:
    """Config pinned to a fixed local zone with small stream chunks."""
    return SuaConfig(chunk_size=16, local_timezone=ZoneInfo("America/Denver"))


@pytest.fixture
def sample_session() -> FakeSession:
    """Fake session serving the sample SUA export."""
    body = fixture_path("sua_sample.csv").read_bytes()
    return FakeSession(FakeResponse(body))


@pytest.fixture(autouse=True)
def _clear_sua_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host SUA_* variables out of config-dependent tests."""
    for name in (
        "SUA_FEED_URL",
        "SUA_TIMEOUT_SECONDS",
        "SUA_CHUNK_SIZE",
        "SUA_LOCAL_TIMEZONE",
        "SUA_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
