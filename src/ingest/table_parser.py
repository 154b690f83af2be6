"""Streaming comma-delimited table parser.

This module turns body byte chunks into header-keyed row mappings.
Quotes are data, not syntax: the export escapes values with a
spreadsheet-literal convention handled by the field normalizer.
"""

from __future__ import annotations

import codecs
import re
from typing import Iterable, Iterator

from core.constants import BYTE_ORDER_MARK, FEED_ENCODING, TABLE_DELIMITER
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def parse_table(
    chunks: Iterable[bytes],
    encoding: str = FEED_ENCODING,
) -> Iterator[dict[str, str]]:
    """Lazily parse a delimited table with a header row.

    Args:
        chunks: Raw body byte chunks, consumed in order.
        encoding: Text encoding of the body.

    Yields:
        One mapping of header name to stripped cell per data row.
        Cells beyond the header width are dropped; short rows carry
        only the columns they reach. Blank lines are skipped, but a
        row made only of delimiters is kept.
    """
    header: list[str] | None = None
    for line in iter_text_lines(chunks, encoding):
        if not line.strip():
            continue
        cells = [cell.strip() for cell in line.split(TABLE_DELIMITER)]
        if header is None:
            header = cells
            _LOGGER.debug("sua_table_header_parsed", columns=header)
            continue
        yield dict(zip(header, cells))


def iter_text_lines(chunks: Iterable[bytes], encoding: str = FEED_ENCODING) -> Iterator[str]:
    """Decode byte chunks into lines, buffering only a partial line.

    Lines end at ``\\r\\n``, ``\\r``, or ``\\n``. A leading byte-order mark
    is removed, and undecodable bytes become U+FFFD.

    Args:
        chunks: Raw body byte chunks.
        encoding: Text encoding of the body.

    Yields:
        Text lines without terminators.
    """
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    pending = ""
    at_start = True
    for chunk in chunks:
        pending += decoder.decode(chunk)
        if at_start and pending:
            pending = pending.removeprefix(BYTE_ORDER_MARK)
            at_start = False
        # a trailing \r may be the first half of \r\n
        held = "\r" if pending.endswith("\r") else ""
        *lines, pending = _LINE_BREAK_RE.split(pending.removesuffix("\r"))
        pending += held
        yield from lines
    pending += decoder.decode(b"", final=True)
    if at_start:
        pending = pending.removeprefix(BYTE_ORDER_MARK)
    lines = _LINE_BREAK_RE.split(pending)
    if lines[-1] == "":
        lines.pop()
    yield from lines
