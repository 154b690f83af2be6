"""Shared typed models.

This module defines the immutable record emitted by the feed pipeline
and the run state model used by the record producer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class SuaRecord:
    """Normalized Special Use Airspace record.

    Attributes:
        type: Airspace classification text.
        saa_notam_id: SAA or NOTAM identifier, used as the filter key.
        start_time_zulu: Start instant in ISO-8601 UTC form, or None.
        start_time_local: Start instant rendered in the local zone, or None.
        end_time_zulu: End instant in ISO-8601 UTC form, or None.
        end_time_local: End instant rendered in the local zone, or None.
        center_id: Controlling ARTCC identifier.
        state: State abbreviation text.
        min_alt: Floor altitude in hundreds of feet, as text.
        max_alt: Ceiling altitude in hundreds of feet, as text.
        group: Airspace group text.
    """

    type: str
    saa_notam_id: str
    start_time_zulu: str | None
    start_time_local: str | None
    end_time_zulu: str | None
    end_time_local: str | None
    center_id: str
    state: str
    min_alt: str
    max_alt: str
    group: str


class PipelineState(str, Enum):
    """Lifecycle states of one feed run."""

    NOT_STARTED = "not_started"
    FETCHING = "fetching"
    COMPLETED = "completed"
    FAILED = "failed"
