"""HTTP source for the SUA export table.

This module issues the single streaming GET against the export
endpoint and exposes the response body as byte chunks.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

import requests

from core.config import SuaConfig
from core.constants import HTTP_USER_AGENT
from core.errors import NetworkError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


@contextmanager
def open_feed_stream(
    config: SuaConfig,
    session: Any | None = None,
) -> Iterator[Iterator[bytes]]:
    """Open the export endpoint as a streamed body.

    The response is closed when the block exits, whether the body was
    exhausted, an error was raised, or the consumer stopped early.

    Args:
        config: Runtime config with URL, timeout, and chunk size.
        session: Optional ``requests.Session``-compatible object.

    Yields:
        Iterator of raw body byte chunks.

    Raises:
        NetworkError: If the request fails or the status is not 2xx.
    """
    http = session if session is not None else requests
    _LOGGER.info("sua_feed_request_started", url=config.feed_url)
    try:
        response = http.get(
            config.feed_url,
            headers={"User-Agent": HTTP_USER_AGENT, "Accept": "text/csv, */*"},
            stream=True,
            timeout=config.timeout_seconds,
        )
    except requests.RequestException as error:
        _LOGGER.error("sua_feed_request_failed", url=config.feed_url, status=None)
        raise NetworkError(
            f"Failed to fetch SUA feed from {config.feed_url}: {error}. "
            "Check network connectivity and retry."
        ) from error
    try:
        _raise_for_status(response, config.feed_url)
        yield _iter_body_chunks(response, config.chunk_size, config.feed_url)
    finally:
        response.close()


def _raise_for_status(response: Any, url: str) -> None:
    """Reject non-2xx responses before any body is parsed."""
    status = response.status_code
    if 200 <= status < 300:
        return
    _LOGGER.error("sua_feed_request_failed", url=url, status=status)
    raise NetworkError(
        f"Failed to fetch SUA feed from {url}: HTTP {status} {response.reason or ''}".rstrip()
        + ". The endpoint may be unavailable; retry later."
    )


def _iter_body_chunks(response: Any, chunk_size: int, url: str) -> Iterator[bytes]:
    """Yield non-empty body chunks, wrapping transport failures.

    Args:
        response: Open streaming response.
        chunk_size: Bytes requested per read.
        url: Request URL for error context.

    Yields:
        Raw body bytes.

    Raises:
        NetworkError: If the connection breaks mid-stream.
    """
    try:
        for chunk in response.iter_content(chunk_size=chunk_size):
            if chunk:
                yield chunk
    except requests.RequestException as error:
        raise NetworkError(
            f"SUA feed stream from {url} broke mid-transfer: {error}. Retry the run."
        ) from error
