"""Derive analysis columns from raw music video metadata."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

import pandas as pd

from ..config import DEFAULT_EMOTION_KEYWORDS
from ..models import is_missing
from .duration import categorize_duration, parse_duration_minutes
from .engagement import engagement_percentage, engagement_rate
from .text import channel_type, classify_mood

log = logging.getLogger(__name__)

FEATURE_COLUMNS = (
    "duration_minutes",
    "duration_category",
    "engagement_rate",
    "engagement_pct",
    "engagement_group",
    "publish_year",
    "channel_type",
    "mood_category",
)


def _publish_year(value: Any) -> Optional[int]:
    if is_missing(value):
        return None
    return pd.Timestamp(value).year


def engineer_features(
    record: Dict[str, Any],
    emotion_keywords: Sequence[Tuple[str, str]] = DEFAULT_EMOTION_KEYWORDS,
) -> Dict[str, Any]:
    """Compute duration, engagement, year, channel type and mood for one row."""
    minutes = parse_duration_minutes(record.get("duration"))
    rate = engagement_rate(record.get("like_count"), record.get("view_count"))
    return {
        "duration_minutes": minutes,
        "duration_category": categorize_duration(minutes),
        "engagement_rate": rate.value,
        "engagement_pct": engagement_percentage(record.get("like_count"), record.get("view_count")),
        "engagement_group": rate.label,
        "publish_year": _publish_year(record.get("publish_date")),
        "channel_type": channel_type(record.get("channel_name")),
        "mood_category": classify_mood(record.get("description"), emotion_keywords),
    }


def transform_dataframe(
    df: pd.DataFrame,
    emotion_keywords: Sequence[Tuple[str, str]] = DEFAULT_EMOTION_KEYWORDS,
) -> pd.DataFrame:
    """Return a copy of ``df`` with the derived columns appended."""
    rows: Iterable[Dict[str, Any]] = df.to_dict("records")
    features = pd.DataFrame(
        [engineer_features(row, emotion_keywords) for row in rows],
        columns=list(FEATURE_COLUMNS),
        index=df.index,
    )
    features["duration_minutes"] = features["duration_minutes"].astype(float)
    features["engagement_rate"] = features["engagement_rate"].astype(float)
    features["engagement_pct"] = features["engagement_pct"].astype(float)
    features["publish_year"] = features["publish_year"].astype("Int64")

    unparsed = int(features["duration_minutes"].isna().sum())
    if unparsed:
        log.warning("%d of %d videos have a missing or unparseable duration", unparsed, len(df))

    out = df.drop(columns=[c for c in FEATURE_COLUMNS if c in df.columns])
    return pd.concat([out, features], axis=1)
