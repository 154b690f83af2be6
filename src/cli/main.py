"""SUA feed CLI entry point.

This module maps the single optional positional argument onto an
identifier filter and streams matching records to stdout.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence, TextIO

from cli.record_output import emit_records, notam_id_filter
from core.config import SuaConfig
from core.logging_config import configure_logging
from ingest.pipeline import iter_sua_records


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="sua-feed",
        description="Print FAA Special Use Airspace records as JSON lines",
    )
    parser.add_argument(
        "find",
        nargs="?",
        help="Only print records whose SAA / NOTAM ID contains this text",
    )
    return parser


def parse_find_argument(argv: Sequence[str] | None = None) -> str | None:
    """Parse the optional identifier fragment.

    A fragment that starts with ``-`` (e.g. ``-R25``) is accepted as the
    filter instead of being rejected as an unknown option.

    Args:
        argv: Optional argument vector.

    Returns:
        Filter fragment, or None when no argument was given.
    """
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)
    if not extras:
        return args.find
    if args.find is None and len(extras) == 1:
        return extras[0]
    parser.error(f"expected at most one filter argument, got {[args.find, *extras]}")
    return None


def main(
    argv: Sequence[str] | None = None,
    sink: TextIO | None = None,
    session: Any | None = None,
) -> int:
    """Run the SUA feed CLI.

    Args:
        argv: Optional argument vector.
        sink: Output channel; defaults to stdout.
        session: Optional ``requests.Session``-compatible object.

    Returns:
        Process exit code.
    """
    find = parse_find_argument(argv)
    config = SuaConfig.from_env()
    configure_logging(config.log_level)
    matches = notam_id_filter(find) if find else None
    emit_records(
        iter_sua_records(config, session),
        sink if sink is not None else sys.stdout,
        matches,
    )
    return 0
