"""Core constants used across SUA feed modules.

This module centralizes endpoint, column, and format literals.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

SUA_FEED_URL = (
    "https://sua.faa.gov/sua/download.app?"
    "colHead=%3Cbr%3E%3Cbr%3E|Type%3Cbr%3E%3Cbr%3E|Zoom%3Cbr%3E%3Cbr%3E"
    "|SAA%20/%20NOTAM%20ID%3Cbr%3E%3Cbr%3E|Start%20Time%3Cbr%3E%3Cbr%3E"
    "|End%20Time%3Cbr%3E%3Cbr%3E|Center%20ID%3Cbr%3E%3Cbr%3E|State%3Cbr%3E%3Cbr%3E"
    "|Min%20Alt%3Cbr%3E(100s%20ft)|Max%20Alt%3Cbr%3E(100s%20ft)|Group%3Cbr%3E%3Cbr%3E&"
)
HTTP_USER_AGENT = "sua-feed/0.1 (+https://sua.faa.gov)"
DEFAULT_TIMEOUT_SECONDS = 60
DEFAULT_CHUNK_SIZE = 8192
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
FEED_ENCODING = "utf-8"
TABLE_DELIMITER = ","
BYTE_ORDER_MARK = "\ufeff"

COLUMN_TYPE = "Type"
COLUMN_SAA_NOTAM_ID = "SAA / NOTAM ID"
COLUMN_START_TIME = "Start Time"
COLUMN_END_TIME = "End Time"
COLUMN_CENTER_ID = "Center ID"
COLUMN_STATE = "State"
COLUMN_MIN_ALT = "Min Alt(100s ft)"
COLUMN_MAX_ALT = "Max Alt(100s ft)"
COLUMN_GROUP = "Group"
EXPECTED_COLUMNS = (
    COLUMN_TYPE,
    COLUMN_SAA_NOTAM_ID,
    COLUMN_START_TIME,
    COLUMN_END_TIME,
    COLUMN_CENTER_ID,
    COLUMN_STATE,
    COLUMN_MIN_ALT,
    COLUMN_MAX_ALT,
    COLUMN_GROUP,
)

CELL_DATE_FORMAT = "%m/%d/%Y %H:%M"
CELL_DATE_PATTERN = r"\d{2}/\d{2}/\d{4} \d{2}:\d{2}"
SPREADSHEET_LITERAL_PREFIX = '="'
SPREADSHEET_LITERAL_SUFFIX = '"'
TRAILING_DELIMITER = ","
