"""Timestamp helpers.

Review timestamps are integer milliseconds since the epoch; transcript
times are float seconds.
"""

import time

DAY_MS = 24 * 60 * 60 * 1000


def now_ms() -> int:
    """Return the current time in epoch milliseconds."""
    return int(time.time() * 1000)


def days_to_ms(days: float) -> int:
    """Convert a number of days to milliseconds."""
    return int(days * DAY_MS)


def format_clock(seconds: float) -> str:
    """Format seconds as ``m:ss`` for display.

    Args:
        seconds: Time position in seconds

    Returns:
        Clock string, e.g. ``"2:05"``
    """
    total = max(0, int(round(seconds)))
    return f"{total // 60}:{total % 60:02d}"
