"""
Utilities package for the Subber sideline tracker.

This package contains utility functions used throughout the application.
"""
from .time_utils import (
    fmt_mmss, fmt_clock, format_duration, parse_duration, now_ts, monotonic_ts
)
from .constants import (
    APP_TITLE, APP_DESCRIPTION, DEFAULT_HOST, DEFAULT_PORT,
    DEFAULT_CONFIG_FILE, POLL_INTERVAL_SECONDS
)

__all__ = [
    "fmt_mmss", "fmt_clock", "format_duration", "parse_duration",
    "now_ts", "monotonic_ts", "APP_TITLE", "APP_DESCRIPTION",
    "DEFAULT_HOST", "DEFAULT_PORT", "DEFAULT_CONFIG_FILE", "POLL_INTERVAL_SECONDS"
]
