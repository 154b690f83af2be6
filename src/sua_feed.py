"""Public SDK surface for the SUA feed.

This module provides a stable import path for library users.
It re-exports the record producer, output driver, and typed models.
"""

from __future__ import annotations

from cli.record_output import emit_records, notam_id_filter, serialize_record
from core.config import SuaConfig
from core.errors import (
    DateFormatError,
    NetworkError,
    SchemaError,
    SuaConfigError,
    SuaFeedError,
)
from core.types import PipelineState, SuaRecord
from ingest.pipeline import SuaFeedRun, iter_sua_records

__all__ = [
    "DateFormatError",
    "NetworkError",
    "PipelineState",
    "SchemaError",
    "SuaConfig",
    "SuaConfigError",
    "SuaFeedError",
    "SuaFeedRun",
    "SuaRecord",
    "emit_records",
    "iter_sua_records",
    "notam_id_filter",
    "serialize_record",
]
