"""Row-to-record mapping transform.

This module converts one raw table row into a normalized SuaRecord.
It validates column presence and delegates cell cleanup to the
field normalizer.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Mapping

from core.constants import (
    COLUMN_CENTER_ID,
    COLUMN_END_TIME,
    COLUMN_GROUP,
    COLUMN_MAX_ALT,
    COLUMN_MIN_ALT,
    COLUMN_SAA_NOTAM_ID,
    COLUMN_START_TIME,
    COLUMN_STATE,
    COLUMN_TYPE,
    EXPECTED_COLUMNS,
)
from core.errors import SchemaError
from core.types import SuaRecord
from transforms.field_normalizer import (
    format_local_timestamp,
    format_zulu_timestamp,
    parse_cell_date,
    trim_value,
)


def map_row(raw_row: Mapping[str, str], local_zone: tzinfo | None = None) -> SuaRecord:
    """Build a normalized record from one raw table row.

    Args:
        raw_row: Header name to raw cell mapping.
        local_zone: Zone for local timestamp rendering, or None for
            the process-local zone.

    Returns:
        Immutable normalized record.

    Raises:
        SchemaError: If any expected column is absent.
        DateFormatError: If a non-empty date cell is malformed.
    """
    _require_columns(raw_row)
    start_time_zulu, start_time_local = _map_time_pair(raw_row[COLUMN_START_TIME], local_zone)
    end_time_zulu, end_time_local = _map_time_pair(raw_row[COLUMN_END_TIME], local_zone)
    return SuaRecord(
        type=trim_value(raw_row[COLUMN_TYPE]),
        saa_notam_id=trim_value(raw_row[COLUMN_SAA_NOTAM_ID]),
        start_time_zulu=start_time_zulu,
        start_time_local=start_time_local,
        end_time_zulu=end_time_zulu,
        end_time_local=end_time_local,
        center_id=trim_value(raw_row[COLUMN_CENTER_ID]),
        state=trim_value(raw_row[COLUMN_STATE]),
        min_alt=trim_value(raw_row[COLUMN_MIN_ALT]),
        max_alt=trim_value(raw_row[COLUMN_MAX_ALT]),
        group=trim_value(raw_row[COLUMN_GROUP]),
    )


def _require_columns(raw_row: Mapping[str, str]) -> None:
    missing = [column for column in EXPECTED_COLUMNS if column not in raw_row]
    if missing:
        raise SchemaError(
            f"SUA row is missing expected columns {missing}: "
            f"found {sorted(raw_row)}. The export table format may have changed."
        )


def _map_time_pair(
    raw_value: str,
    local_zone: tzinfo | None,
) -> tuple[str | None, str | None]:
    """Map a date cell to its Zulu and local renderings.

    Empty cells, including an empty ``=""`` literal, map to ``(None, None)``.
    """
    if not trim_value(raw_value):
        return None, None
    instant = parse_cell_date(raw_value)
    return format_zulu_timestamp(instant), format_local_timestamp(instant, local_zone)
