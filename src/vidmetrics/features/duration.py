"""Parse ISO-8601 video durations and bucket them by length."""
from __future__ import annotations

import re
from typing import Any, Optional

from ..models import is_missing

SHORT = "Short (<2 min)"
MEDIUM = "Medium (2–5 min)"
LONG = "Long (>5 min)"
UNKNOWN = "Unknown"

DURATION_CATEGORIES = (SHORT, MEDIUM, LONG, UNKNOWN)

# YouTube reports P#DT#H#M#S; the day part only shows up on very long uploads.
_DURATION_RE = re.compile(
    r"P(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?"
)


def parse_duration_minutes(value: Any) -> Optional[float]:
    """Convert a duration such as ``PT3M30S`` to minutes.

    Returns None when the value is missing, not a string, or does not match
    the pattern. ``PT`` without any component is treated as unparseable.
    """
    if not isinstance(value, str):
        return None
    match = _DURATION_RE.fullmatch(value.strip())
    if match is None:
        return None
    parts = match.groupdict()
    if all(v is None for v in parts.values()):
        return None
    days = int(parts["days"] or 0)
    hours = int(parts["hours"] or 0)
    minutes = int(parts["minutes"] or 0)
    seconds = float(parts["seconds"] or 0)
    return (days * 24 + hours) * 60 + minutes + seconds / 60


def categorize_duration(minutes: Optional[float]) -> str:
    """Bucket a length in minutes; 2 and 5 both fall in the medium bucket."""
    if is_missing(minutes):
        return UNKNOWN
    if minutes < 2:
        return SHORT
    if minutes <= 5:
        return MEDIUM
    return LONG
