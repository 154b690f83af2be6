"""Runtime configuration model for the SUA feed.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from core.constants import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    SUA_FEED_URL,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import SuaConfigError


@dataclass(frozen=True)
class SuaConfig:
    """Validated runtime configuration.

    Attributes:
        feed_url: SUA export endpoint queried with a single GET.
        timeout_seconds: Connect and read timeout for the request.
        chunk_size: Byte chunk size used while streaming the body.
        local_timezone: Zone used for local timestamp rendering, or None
            to use the process-local zone.
        log_level: Minimum structured log level.
    """

    feed_url: str = SUA_FEED_URL
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    chunk_size: int = DEFAULT_CHUNK_SIZE
    local_timezone: ZoneInfo | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "SuaConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SuaConfigError: If environment values are invalid.
        """
        return cls(
            feed_url=os.getenv("SUA_FEED_URL", SUA_FEED_URL).strip() or SUA_FEED_URL,
            timeout_seconds=_parse_positive_int(
                "SUA_TIMEOUT_SECONDS", os.getenv("SUA_TIMEOUT_SECONDS"), DEFAULT_TIMEOUT_SECONDS
            ),
            chunk_size=_parse_positive_int(
                "SUA_CHUNK_SIZE", os.getenv("SUA_CHUNK_SIZE"), DEFAULT_CHUNK_SIZE
            ),
            local_timezone=_parse_timezone(os.getenv("SUA_LOCAL_TIMEZONE")),
            log_level=_parse_log_level(os.getenv("SUA_LOG_LEVEL")),
        )


def _parse_positive_int(name: str, raw_value: str | None, default: int) -> int:
    """Parse a positive integer environment value.

    Args:
        name: Environment variable name for error context.
        raw_value: Raw string from environment, if set.
        default: Value used when the variable is unset or blank.

    Returns:
        Parsed positive integer.

    Raises:
        SuaConfigError: If value is not a positive integer.
    """
    if raw_value is None or not raw_value.strip():
        return default
    try:
        value = int(raw_value)
    except ValueError as error:
        raise SuaConfigError(
            f"Invalid {name} value: expected integer, got '{raw_value}'. "
            f"Set {name} to a positive number."
        ) from error
    if value <= 0:
        raise SuaConfigError(
            f"Invalid {name} value: expected positive integer, got {value}. "
            f"Set {name} to a value greater than zero."
        )
    return value


def _parse_timezone(raw_value: str | None) -> ZoneInfo | None:
    """Resolve an IANA timezone name, or None when unset."""
    if raw_value is None or not raw_value.strip():
        return None
    try:
        return ZoneInfo(raw_value.strip())
    except (ZoneInfoNotFoundError, ValueError) as error:
        raise SuaConfigError(
            f"Invalid SUA_LOCAL_TIMEZONE value: unknown zone '{raw_value}'. "
            "Use an IANA zone name such as 'America/Denver'."
        ) from error


def _parse_log_level(raw_value: str | None) -> str:
    if raw_value is None or not raw_value.strip():
        return DEFAULT_LOG_LEVEL
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise SuaConfigError(
            f"Invalid SUA_LOG_LEVEL value: got '{raw_value}'. "
            f"Supported levels: {SUPPORTED_LOG_LEVELS}."
        )
    return level
