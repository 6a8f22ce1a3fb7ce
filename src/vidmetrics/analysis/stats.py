"""Aggregate helpers: null-aware summaries, correlation, grouping and top-N."""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Callable, Optional, Union

import pandas as pd

from ..models import is_missing

UNKNOWN_GROUP = "Unknown"
MIN_CORRELATION_POINTS = 3


class GroupingKey(str, Enum):
    YEAR = "publish_year"
    CHANNEL = "channel_name"
    DURATION_CATEGORY = "duration_category"
    CHANNEL_TYPE = "channel_type"
    MOOD = "mood_category"
    ENGAGEMENT_GROUP = "engagement_group"


KeySpec = Union[GroupingKey, str, Callable[[pd.Series], Any]]


def round_half_up(value: Any, places: int = 0):
    """Round like SQL ``ROUND`` on numerics; ``places=0`` returns an int."""
    if is_missing(value):
        return None
    if isinstance(value, float) and math.isinf(value):
        return None
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return int(rounded) if places == 0 else float(rounded)


@dataclass(frozen=True)
class Summary:
    count: int
    total: int
    mean: Optional[float]


def summarize(values: pd.Series) -> Summary:
    present = values.dropna()
    if present.empty:
        return Summary(count=0, total=0, mean=None)
    return Summary(count=int(len(present)), total=int(present.sum()), mean=float(present.mean()))


def pearson_correlation(x: pd.Series, y: pd.Series) -> Optional[float]:
    """Pearson r over rows where both values are present.

    Returns None for fewer than three pairs or when either side is constant.
    """
    pairs = pd.DataFrame({"x": pd.to_numeric(x, errors="coerce"), "y": pd.to_numeric(y, errors="coerce")})
    pairs = pairs.dropna().astype(float)
    if len(pairs) < MIN_CORRELATION_POINTS:
        return None
    if pairs["x"].nunique() < 2 or pairs["y"].nunique() < 2:
        return None
    r = pairs["x"].corr(pairs["y"])
    if pd.isna(r):
        return None
    return float(r)


def group_key(frame: pd.DataFrame, key: KeySpec) -> pd.Series:
    """Resolve ``key`` to a per-row label series; nulls map to ``Unknown``."""
    if isinstance(key, GroupingKey):
        series = frame[key.value]
    elif isinstance(key, str):
        series = frame[key]
    elif frame.empty:
        series = pd.Series([], index=frame.index, dtype=object)
    else:
        series = frame.apply(key, axis=1)
    series = series.astype(object)
    return series.map(lambda v: UNKNOWN_GROUP if is_missing(v) else v)


def aggregate_groups(frame: pd.DataFrame, key: KeySpec, name: str = "group") -> pd.DataFrame:
    """Per-group count, sum and mean of views and likes, in first-seen group order."""
    columns = [name, "total_videos", "total_views", "avg_views", "total_likes", "avg_likes"]
    if frame.empty:
        return pd.DataFrame(columns=columns)
    labels = group_key(frame, key)
    rows = []
    for label, group in frame.groupby(labels, sort=False):
        views = summarize(group["view_count"])
        likes = summarize(group["like_count"])
        rows.append({
            name: label,
            "total_videos": len(group),
            "total_views": views.total,
            "avg_views": views.mean,
            "total_likes": likes.total,
            "avg_likes": likes.mean,
        })
    return pd.DataFrame(rows, columns=columns)


def top_n(frame: pd.DataFrame, column: str, n: int) -> pd.DataFrame:
    """Highest ``n`` rows by ``column``; ties keep input order, null keys are dropped."""
    if n <= 0:
        return frame.iloc[0:0]
    eligible = frame[frame[column].notna()]
    ordered = eligible.sort_values(column, ascending=False, kind="mergesort")
    return ordered.head(n)
