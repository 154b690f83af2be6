"""Record producer for the SUA feed pipeline.

This module composes the feed source, table parser, and row mapper
into one lazy, pull-driven sequence of normalized records.
"""

from __future__ import annotations

from typing import Any, Iterator

from core.config import SuaConfig
from core.errors import SuaFeedError
from core.logging_config import get_logger
from core.types import PipelineState, SuaRecord
from ingest.feed_source import open_feed_stream
from ingest.table_parser import parse_table
from transforms.record_mapping import map_row

_LOGGER = get_logger(__name__)


class SuaFeedRun:
    """Single-pass runner tracking the feed pipeline lifecycle."""

    def __init__(self, config: SuaConfig, session: Any | None = None) -> None:
        self._config = config
        self._session = session
        self._state = PipelineState.NOT_STARTED
        self._record_count = 0

    @property
    def state(self) -> PipelineState:
        """Current lifecycle state."""
        return self._state

    @property
    def record_count(self) -> int:
        """Number of records yielded so far."""
        return self._record_count

    def records(self) -> Iterator[SuaRecord]:
        """Fetch, parse, and map the feed one row per pull.

        Yields:
            Normalized records in source table order.

        Raises:
            SuaFeedError: If the run was already started.
            NetworkError: If the request or stream fails.
            SchemaError: If a row lacks an expected column.
            DateFormatError: If a date cell is malformed.
        """
        if self._state is not PipelineState.NOT_STARTED:
            raise SuaFeedError(
                f"SUA feed run cannot be restarted from state '{self._state.value}'. "
                "Create a new run to fetch the feed again."
            )
        self._state = PipelineState.FETCHING
        try:
            with open_feed_stream(self._config, self._session) as chunks:
                for raw_row in parse_table(chunks):
                    record = map_row(raw_row, self._config.local_timezone)
                    self._record_count += 1
                    yield record
        except Exception as error:
            self._state = PipelineState.FAILED
            _LOGGER.error(
                "sua_feed_run_failed",
                error_type=type(error).__name__,
                record_count=self._record_count,
            )
            raise
        self._state = PipelineState.COMPLETED
        _LOGGER.info("sua_feed_run_completed", record_count=self._record_count)


def iter_sua_records(config: SuaConfig, session: Any | None = None) -> Iterator[SuaRecord]:
    """Return a lazy sequence of normalized SUA records.

    Args:
        config: Runtime configuration.
        session: Optional ``requests.Session``-compatible object.

    Returns:
        Generator of records in source order.
    """
    return SuaFeedRun(config, session).records()
