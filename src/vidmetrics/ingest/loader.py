"""Load music video rows from files or memory into a normalized dataframe."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Iterable, List, Mapping, Union

import pandas as pd

from ..models import COUNT_COLUMNS, VIDEO_COLUMNS, VideoRecord, is_missing
from ..utils.io import read_table

log = logging.getLogger(__name__)

TEXT_COLUMNS = ("title", "channel_name", "duration", "category", "description")

RecordLike = Union[VideoRecord, Mapping[str, Any]]


def _to_text(series: pd.Series) -> pd.Series:
    """Object column of str values with None for missing entries."""
    values = [None if is_missing(v) else v if isinstance(v, str) else str(v) for v in series]
    # explicit object dtype; newer pandas would otherwise infer str and store NaN
    return pd.Series(values, index=series.index, dtype=object)


def _to_date(series: pd.Series) -> pd.Series:
    """Naive UTC timestamps; accepts mixed date-only and ISO timestamp values."""
    parsed = pd.to_datetime(series, errors="coerce", format="mixed", utc=True).dt.tz_convert(None)
    unparsed = int((parsed.isna() & series.notna()).sum())
    if unparsed:
        log.warning("%d of %d videos have an unparseable publish_date", unparsed, len(series))
    return parsed


def _to_count(series: pd.Series, name: str) -> pd.Series:
    numeric = pd.to_numeric(series, errors="coerce")
    present = numeric.dropna()
    if (present < 0).any():
        raise ValueError(f"{name} must be non-negative; found {int((present < 0).sum())} negative value(s)")
    if (present % 1 != 0).any():
        raise ValueError(f"{name} must hold whole numbers")
    return numeric.astype("Int64")


def normalize_videos_df(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of ``df`` with the canonical columns and dtypes.

    Missing optional columns are added as nulls. Counts become nullable
    integers, unparseable dates become NaT. Raises ``ValueError`` when the
    frame violates the table invariants (unique non-null ``video_id``,
    non-negative counts).
    """
    if "video_id" not in df.columns:
        raise ValueError("Input is missing the required 'video_id' column.")
    work = df.copy()
    for col in VIDEO_COLUMNS:
        if col not in work.columns:
            work[col] = None

    if work["video_id"].isna().any():
        raise ValueError(f"{int(work['video_id'].isna().sum())} row(s) have no video_id")
    work["video_id"] = work["video_id"].astype(str)
    dupes = work.loc[work["video_id"].duplicated(), "video_id"]
    if not dupes.empty:
        sample = ", ".join(dupes.unique()[:5])
        raise ValueError(f"Duplicate video_id values: {sample}")

    for col in TEXT_COLUMNS:
        work[col] = _to_text(work[col])
    for col in COUNT_COLUMNS:
        work[col] = _to_count(work[col], col)
    work["publish_date"] = _to_date(work["publish_date"])

    extra = [c for c in work.columns if c not in VIDEO_COLUMNS]
    return work[list(VIDEO_COLUMNS) + extra].reset_index(drop=True)


def records_to_frame(records: Iterable[RecordLike]) -> pd.DataFrame:
    """Build a normalized dataframe from ``VideoRecord`` objects or dict rows."""
    rows: List[Mapping[str, Any]] = []
    for record in records:
        if dataclasses.is_dataclass(record):
            rows.append(dataclasses.asdict(record))
        else:
            rows.append(dict(record))
    if not rows:
        return normalize_videos_df(pd.DataFrame(columns=list(VIDEO_COLUMNS)))
    return normalize_videos_df(pd.DataFrame(rows))


def load_videos(path: str) -> pd.DataFrame:
    """Read a CSV or Parquet export of the video table and normalize it."""
    df = normalize_videos_df(read_table(path))
    log.info("Loaded %d videos from %s", len(df), path)
    return df
