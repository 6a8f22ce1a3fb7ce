"""Record type for one row of the music video table."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Tuple

import pandas as pd

VIDEO_COLUMNS: Tuple[str, ...] = (
    "video_id",
    "title",
    "channel_name",
    "publish_date",
    "duration",
    "like_count",
    "view_count",
    "category",
    "description",
)

COUNT_COLUMNS: Tuple[str, ...] = ("like_count", "view_count")


@dataclass(frozen=True)
class VideoRecord:
    video_id: str
    title: str = ""
    channel_name: Optional[str] = None
    publish_date: Optional[date] = None
    duration: Optional[str] = None  # ISO-8601, e.g. PT3M30S
    like_count: Optional[int] = None
    view_count: Optional[int] = None
    category: Optional[str] = None
    description: Optional[str] = None


def is_missing(value: Any) -> bool:
    """True for None, NaN, NaT and pd.NA scalars."""
    if value is None:
        return True
    if isinstance(value, (str, bytes)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False
