"""In-process fakes for the requests session and streaming response."""

from __future__ import annotations

from typing import Any, Iterator

import requests


class FakeResponse:
    """Streaming response stand-in that serves a fixed body."""

    def __init__(
        self,
        body: bytes,
        status_code: int = 200,
        reason: str = "OK",
        fail_after_chunks: int | None = None,
    ) -> None:
        self.body = body
        self.status_code = status_code
        self.reason = reason
        self.closed = False
        self.chunks_served = 0
        self._fail_after_chunks = fail_after_chunks

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        for offset in range(0, len(self.body), chunk_size):
            if self._fail_after_chunks is not None and self.chunks_served >= self._fail_after_chunks:
                raise requests.ConnectionError("connection reset by peer")
            self.chunks_served += 1
            yield self.body[offset : offset + chunk_size]

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """Session stand-in recording each GET and returning a canned response."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response
