"""Record output driver.

This module filters normalized records and writes them as JSON lines
to an injected text sink.
"""

from __future__ import annotations

import json
from typing import Callable, Iterable, TextIO

from core.types import SuaRecord

RecordPredicate = Callable[[SuaRecord], bool]


def record_to_payload(record: SuaRecord) -> dict[str, str | None]:
    """Serialize a record into its camelCase JSON payload.

    Args:
        record: Normalized record.

    Returns:
        Ordered dictionary payload for JSON encoding.
    """
    return {
        "type": record.type,
        "saaNotamId": record.saa_notam_id,
        "startTimeZulu": record.start_time_zulu,
        "startTimeLocal": record.start_time_local,
        "endTimeZulu": record.end_time_zulu,
        "endTimeLocal": record.end_time_local,
        "centerId": record.center_id,
        "state": record.state,
        "minAlt": record.min_alt,
        "maxAlt": record.max_alt,
        "group": record.group,
    }


def serialize_record(record: SuaRecord) -> str:
    """Render a record as one compact JSON line (without newline)."""
    return json.dumps(record_to_payload(record), ensure_ascii=False, separators=(",", ":"))


def notam_id_filter(fragment: str) -> RecordPredicate:
    """Build a case-sensitive substring predicate on ``saa_notam_id``."""

    def matches(record: SuaRecord) -> bool:
        return fragment in record.saa_notam_id

    return matches


def emit_records(
    records: Iterable[SuaRecord],
    sink: TextIO,
    matches: RecordPredicate | None = None,
) -> int:
    """Write every matching record to the sink, one JSON line each.

    The sink is flushed and a generator source is closed on every exit
    path, so lines written before a failure stay written and the feed
    connection is released.

    Args:
        records: Record sequence, consumed in order.
        sink: Text output channel.
        matches: Optional predicate; None emits every record.

    Returns:
        Number of lines written.
    """
    written = 0
    try:
        for record in records:
            if matches is None or matches(record):
                sink.write(serialize_record(record) + "\n")
                written += 1
    finally:
        sink.flush()
        close = getattr(records, "close", None)
        if callable(close):
            close()
    return written
