"""SUA feed exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class SuaFeedError(Exception):
    """Base exception for all SUA feed failures."""


class SuaConfigError(SuaFeedError):
    """Raised for invalid runtime configuration."""


class NetworkError(SuaFeedError):
    """Raised when the feed request fails or returns a non-success status."""


class SchemaError(SuaFeedError):
    """Raised when a parsed row lacks an expected column."""


class DateFormatError(SuaFeedError):
    """Raised when a date cell does not match the feed's literal format."""
