"""
Duration calculation for time blocks.

Policy: lenient. Anything that is not a valid HH:MM pair yields a zero
duration instead of an error, and an end before the start clamps to zero
(no next-day wraparound).
"""

import re
from typing import Optional

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def parse_time(value: Optional[str]) -> Optional[int]:
    """
    Convert an HH:MM wall-clock string into minutes since midnight.

    Returns:
        Minutes since midnight, or None if the value is empty or malformed
    """
    if not value:
        return None
    match = _TIME_RE.match(value)
    if match is None:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def compute_duration(start_time: Optional[str], end_time: Optional[str]) -> int:
    """Elapsed minutes between two HH:MM strings, never negative"""
    start = parse_time(start_time)
    end = parse_time(end_time)
    if start is None or end is None:
        return 0
    return max(0, end - start)


def format_minutes(minutes: int) -> str:
    """Format minutes since midnight as HH:MM"""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"
