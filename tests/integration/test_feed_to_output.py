"""Integration tests for the fetch-to-output workflow."""

from __future__ import annotations

from dataclasses import replace
import io
import json
from zoneinfo import ZoneInfo

from sua_feed import PipelineState, SuaConfig, SuaFeedRun, emit_records, notam_id_filter
from tests.fake_http import FakeResponse, FakeSession
from tests.fixture_paths import fixture_path


def test_sample_export_streams_to_filtered_json_lines() -> None:
    """End-to-end flow should fetch, parse, normalize, filter, and emit."""
    body = fixture_path("sua_sample.csv").read_bytes()
    session = FakeSession(FakeResponse(body))
    config = replace(SuaConfig(), chunk_size=1, local_timezone=ZoneInfo("UTC"))
    run = SuaFeedRun(config, session)
    sink = io.StringIO()

    written = emit_records(run.records(), sink, notam_id_filter("R2508"))
    payload = json.loads(sink.getvalue())

    assert written == 1
    assert payload == {
        "type": "RESTRICTED",
        "saaNotamId": "R2508",
        "startTimeZulu": "2024-01-16T14:00:00.000Z",
        "startTimeLocal": "1/16/2024, 2:00:00 PM",
        "endTimeZulu": None,
        "endTimeLocal": None,
        "centerId": "ZLA",
        "state": "CA",
        "minAlt": "0",
        "maxAlt": "999",
        "group": "SOUTHWEST",
    }
    assert run.state is PipelineState.COMPLETED
    assert session.response.closed is True
