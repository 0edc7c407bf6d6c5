"""
Time utilities for the Subber sideline tracker.

Wall-clock timestamps are only used for display. Anything that measures
elapsed time reads the monotonic clock so clock adjustments on the host do
not leak into playing time.
"""
import math
import re
import time
from datetime import datetime
from typing import Optional

_UNIT_SECONDS = {
    "h": 3600.0,
    "m": 60.0,
    "s": 1.0,
    "ms": 1e-3,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ns": 1e-9,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(h|ms|m|s|us|µs|μs|ns)")
_CLOCK_FORMAT = re.compile(r"^(?:(\d+):)?(\d+):([0-5]?\d(?:\.\d+)?)$")
_PLAIN_NUMBER = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")


def now_ts() -> float:
    """
    Get current timestamp in epoch seconds.

    Returns:
        Current time as floating point epoch seconds
    """
    return time.time()


def monotonic_ts() -> float:
    """Get a monotonic clock reading in seconds, for elapsed-time math."""
    return time.monotonic()


def fmt_mmss(seconds: float) -> str:
    """
    Format seconds as MM:SS string.

    Args:
        seconds: Number of seconds to format, fractions are truncated

    Returns:
        Formatted time string in MM:SS format

    Example:
        >>> fmt_mmss(90)
        '01:30'
        >>> fmt_mmss(3661)
        '61:01'
    """
    total = max(0, int(seconds))
    m = total // 60
    s = total % 60
    return f"{m:02d}:{s:02d}"


def fmt_clock(ts: Optional[float]) -> str:
    """Format an epoch timestamp as local HH:MM:SS, or a placeholder when unset."""
    if ts is None:
        return "--:--:--"
    return datetime.fromtimestamp(ts).strftime("%H:%M:%S")


def format_duration(seconds: float) -> str:
    """
    Format seconds the way Go prints a time.Duration, at millisecond precision.

    Example:
        >>> format_duration(90.5)
        '1m30.5s'
        >>> format_duration(3605)
        '1h0m5s'
        >>> format_duration(0.25)
        '250ms'
    """
    millis = int(round(seconds * 1000))
    if millis == 0:
        return "0s"

    sign = "-" if millis < 0 else ""
    millis = abs(millis)

    if millis < 1000:
        return f"{sign}{millis}ms"

    hours, millis = divmod(millis, 3600 * 1000)
    minutes, millis = divmod(millis, 60 * 1000)
    secs, millis = divmod(millis, 1000)

    text = f"{secs}.{millis:03d}".rstrip("0").rstrip(".") + "s"
    if hours:
        text = f"{hours}h{minutes}m{text}"
    elif minutes:
        text = f"{minutes}m{text}"
    return sign + text


def parse_duration(text: str) -> float:
    """
    Parse a duration string into seconds.

    Accepts Go-style durations ("1h2m3.5s", "300ms"), bare numbers as
    seconds ("90"), and clock notation ("01:30", "1:02:03").

    Args:
        text: Duration to parse

    Returns:
        Duration in seconds

    Raises:
        ValueError: If the text is empty, not a recognised duration, or too
            large to represent
    """
    value = (text or "").strip()
    if not value:
        raise ValueError("empty duration")

    sign = 1.0
    if value[0] in "+-":
        if value[0] == "-":
            sign = -1.0
        value = value[1:]

    clock = _CLOCK_FORMAT.match(value)
    if _PLAIN_NUMBER.match(value):
        total = float(value)
    elif clock:
        hours, minutes, secs = clock.groups()
        if hours is not None and float(minutes) >= 60:
            raise ValueError(f"invalid duration {text!r}")
        total = float(hours or 0) * 3600 + float(minutes) * 60 + float(secs)
    else:
        total = 0.0
        pos = 0
        for match in _DURATION_PART.finditer(value):
            if match.start() != pos:
                raise ValueError(f"invalid duration {text!r}")
            total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
            pos = match.end()

        if pos == 0 or pos != len(value):
            raise ValueError(f"invalid duration {text!r}")

    if not math.isfinite(total):
        raise ValueError(f"duration out of range {text[:20]!r}")

    return sign * total
