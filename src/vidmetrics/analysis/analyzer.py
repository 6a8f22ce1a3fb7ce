"""The 25 music video analyses, each returning a pandas DataFrame."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import pandas as pd

from ..config import AppConfig, get_config
from ..features.engagement import NO_LIKES, NO_VIEWS, engagement_rate
from ..features.feature_engineering import transform_dataframe
from ..features.text import contains_term, word_frequencies
from ..ingest.loader import RecordLike, normalize_videos_df, records_to_frame
from .stats import (
    UNKNOWN_GROUP,
    GroupingKey,
    aggregate_groups,
    group_key,
    pearson_correlation,
    round_half_up,
    summarize,
    top_n,
)

log = logging.getLogger(__name__)

REPORTS: Tuple[Tuple[str, str], ...] = (
    ("total_videos", "Count the total number of music videos"),
    ("average_views_likes", "Average views and likes per video"),
    ("top_viewed_videos", "Top 10 most viewed videos"),
    ("top_liked_videos", "Top 10 most liked videos"),
    ("top_engagement_videos", "Top 10 videos by likes-to-views engagement rate"),
    ("duration_categories", "Average views per duration category"),
    ("vevo_performance", "VEVO versus non-VEVO channel performance"),
    ("top_channels_by_views", "Top 5 channels by total views"),
    ("top_channels_by_engagement", "Top 5 high-traffic channels by engagement rate"),
    ("official_videos", "Videos with 'official' in the title"),
    ("live_videos", "Live performance videos"),
    ("remix_mashup_videos", "Remix or mashup videos"),
    ("engagement_outliers", "Extremely high engagement among high-traffic videos"),
    ("yearly_views_likes", "Average views and likes per publish year"),
    ("duration_view_correlation", "Correlation between duration and views"),
    ("recent_year_top_videos", "Top 10 videos from the most recent publish year"),
    ("top_uploading_channels", "Channels with the most uploads"),
    ("engagement_distribution", "Distribution of videos across engagement rates"),
    ("official_remix_channels", "Channels with both official and remix videos"),
    ("acoustic_videos", "Videos with 'acoustic' in the title"),
    ("yearly_engagement", "Average engagement rate per publish year"),
    ("trailer_teaser_videos", "Trailer or teaser videos"),
    ("prolific_channels", "Channels with many videos"),
    ("common_title_words", "Most common words in video titles"),
    ("mood_categories", "Videos per mood inferred from the description"),
)


def _table(rows: List[Dict[str, Any]], columns: Sequence[str], ints: Sequence[str] = ()) -> pd.DataFrame:
    df = pd.DataFrame(rows, columns=list(columns))
    for col in ints:
        df[col] = pd.to_numeric(df[col]).astype("Int64")
    return df


def _avg(series: pd.Series, places: int = 0):
    return round_half_up(summarize(series).mean, places)


def _mean_rate(series: pd.Series) -> Optional[float]:
    present = series.dropna()
    if present.empty:
        return None
    return round_half_up(float(present.mean()), 2)


class VideoMetricsAnalyzer:
    """Runs read-only analyses over one in-memory collection of videos.

    ``records`` is either a dataframe with the video table columns or an
    iterable of ``VideoRecord``/dict rows. The input is normalized and
    enriched once; no analysis modifies it.
    """

    def __init__(
        self,
        records: Union[pd.DataFrame, Iterable[RecordLike]],
        config: Optional[AppConfig] = None,
    ) -> None:
        self.config = config or get_config()
        if isinstance(records, pd.DataFrame):
            base = normalize_videos_df(records)
        else:
            base = records_to_frame(records)
        self.frame = transform_dataframe(base, self.config.emotion_keywords)
        log.debug("Prepared %d videos for analysis", len(self.frame))

    # -- helpers --------------------------------------------------------

    def _title_match(self, *terms: str) -> pd.Series:
        return self.frame["title"].map(lambda title: contains_term(title, *terms)).astype(bool)

    def _views_over(self, threshold: int) -> pd.Series:
        return (self.frame["view_count"].fillna(0) > threshold).astype(bool)

    def _videos(self, mask: pd.Series, columns: Sequence[str], by_views: bool = False) -> pd.DataFrame:
        subset = self.frame.loc[mask]
        if by_views:
            subset = subset.sort_values("view_count", ascending=False, kind="mergesort", na_position="last")
        return subset.loc[:, list(columns)].reset_index(drop=True)

    def _by_year(self) -> List[Tuple[Any, pd.DataFrame]]:
        """Year groups newest first, with undated videos last."""
        labels = group_key(self.frame, GroupingKey.YEAR)
        groups = list(self.frame.groupby(labels, sort=False))
        known = sorted((g for g in groups if g[0] != UNKNOWN_GROUP), key=lambda g: g[0], reverse=True)
        unknown = [g for g in groups if g[0] == UNKNOWN_GROUP]
        return known + unknown

    # -- analyses -------------------------------------------------------

    def total_videos(self) -> pd.DataFrame:
        return pd.DataFrame({"total_videos": [len(self.frame)]})

    def average_views_likes(self) -> pd.DataFrame:
        row = {
            "avg_views": _avg(self.frame["view_count"]),
            "avg_likes": _avg(self.frame["like_count"]),
        }
        return _table([row], ["avg_views", "avg_likes"], ints=["avg_views", "avg_likes"])

    def top_viewed_videos(self, n: int = 10) -> pd.DataFrame:
        top = top_n(self.frame, "view_count", n)
        return top.loc[:, ["title", "channel_name", "view_count"]].reset_index(drop=True)

    def top_liked_videos(self, n: int = 10) -> pd.DataFrame:
        top = top_n(self.frame, "like_count", n)
        return top.loc[:, ["title", "channel_name", "like_count"]].reset_index(drop=True)

    def top_engagement_videos(self, n: int = 10) -> pd.DataFrame:
        viewed = self.frame.loc[self._views_over(0)]
        top = top_n(viewed, "engagement_rate", n)
        return top.loc[:, ["title", "channel_name", "engagement_rate"]].reset_index(drop=True)

    def duration_categories(self) -> pd.DataFrame:
        rows = []
        for category, group in self.frame.groupby(GroupingKey.DURATION_CATEGORY.value, sort=False):
            minutes = group["duration_minutes"].dropna()
            rows.append({
                "duration_category": category,
                "total_videos": len(group),
                "avg_views": _avg(group["view_count"]),
                "min_duration": round_half_up(minutes.min(), 2) if not minutes.empty else None,
                "max_duration": round_half_up(minutes.max(), 2) if not minutes.empty else None,
            })
        table = _table(
            rows,
            ["duration_category", "total_videos", "avg_views", "min_duration", "max_duration"],
            ints=["total_videos", "avg_views"],
        )
        return table.sort_values("avg_views", ascending=False, kind="mergesort", na_position="last").reset_index(drop=True)

    def vevo_performance(self) -> pd.DataFrame:
        rows = []
        for kind, group in self.frame.groupby(GroupingKey.CHANNEL_TYPE.value, sort=False):
            rows.append({
                "channel_type": kind,
                "total_videos": len(group),
                "unique_channels": int(group["channel_name"].nunique()),
                "avg_views": _avg(group["view_count"]),
                "avg_likes": _avg(group["like_count"]),
                "avg_engagement_rate": _mean_rate(group["engagement_pct"]),
            })
        table = _table(
            rows,
            ["channel_type", "total_videos", "unique_channels", "avg_views", "avg_likes", "avg_engagement_rate"],
            ints=["total_videos", "unique_channels", "avg_views", "avg_likes"],
        )
        return table.sort_values("total_videos", ascending=False, kind="mergesort").reset_index(drop=True)

    def top_channels_by_views(self, n: int = 5) -> pd.DataFrame:
        channels = aggregate_groups(self.frame, GroupingKey.CHANNEL, "channel_name")
        top = top_n(channels, "total_views", n)
        return top.loc[:, ["channel_name", "total_views"]].reset_index(drop=True)

    def top_channels_by_engagement(self, n: int = 5) -> pd.DataFrame:
        channels = aggregate_groups(self.frame, GroupingKey.CHANNEL, "channel_name")
        busy = channels.loc[channels["total_views"] > self.config.high_view_threshold].copy()
        busy["engagement_rate"] = [
            engagement_rate(likes, views).value
            for likes, views in zip(busy["total_likes"], busy["total_views"])
        ]
        busy["engagement_rate"] = busy["engagement_rate"].astype(float)
        top = top_n(busy, "engagement_rate", n)
        return top.loc[:, ["channel_name", "engagement_rate"]].reset_index(drop=True)

    def official_videos(self) -> pd.DataFrame:
        return self._videos(self._title_match("official"), ["title", "channel_name", "view_count"], by_views=True)

    def live_videos(self) -> pd.DataFrame:
        return self._videos(self._title_match("live"), ["title", "channel_name"])

    def remix_mashup_videos(self) -> pd.DataFrame:
        return self._videos(self._title_match("remix", "mashup"), ["title", "channel_name"])

    def engagement_outliers(self, n: int = 10) -> pd.DataFrame:
        popular = self.frame.loc[self._views_over(self.config.high_view_threshold)]
        top = top_n(popular, "engagement_rate", n)
        return top.loc[:, ["title", "like_count", "view_count", "engagement_rate"]].reset_index(drop=True)

    def yearly_views_likes(self) -> pd.DataFrame:
        rows = [
            {"year": year, "avg_views": _avg(group["view_count"]), "avg_likes": _avg(group["like_count"])}
            for year, group in self._by_year()
        ]
        return _table(rows, ["year", "avg_views", "avg_likes"], ints=["avg_views", "avg_likes"])

    def duration_view_correlation(self) -> pd.DataFrame:
        r = pearson_correlation(self.frame["duration_minutes"], self.frame["view_count"])
        return pd.DataFrame({"correlation": [round_half_up(r, 2)]}, dtype=object)

    def recent_year_top_videos(self, n: int = 10) -> pd.DataFrame:
        latest = self.frame["publish_year"].max()
        if pd.isna(latest):
            return pd.DataFrame(columns=["title", "channel_name", "view_count"])
        recent = self.frame.loc[(self.frame["publish_year"] == latest).fillna(False).astype(bool)]
        top = top_n(recent, "view_count", n)
        return top.loc[:, ["title", "channel_name", "view_count"]].reset_index(drop=True)

    def top_uploading_channels(self, n: int = 10) -> pd.DataFrame:
        channels = aggregate_groups(self.frame, GroupingKey.CHANNEL, "channel_name")
        top = top_n(channels, "total_videos", n)
        return top.loc[:, ["channel_name", "total_videos"]].rename(
            columns={"total_videos": "total_uploads"}
        ).reset_index(drop=True)

    def engagement_distribution(self) -> pd.DataFrame:
        """Videos bucketed by exact rounded rate; No Likes then No Views sort last."""
        rows = []
        for bucket, group in self.frame.groupby(GroupingKey.ENGAGEMENT_GROUP.value, sort=False):
            titles = group["title"].dropna()
            rows.append({
                "engagement_rate_group": bucket,
                "num_videos": len(group),
                "avg_view_count": _avg(group["view_count"]),
                "avg_like_count": _avg(group["like_count"]),
                "sample_title": min(titles) if not titles.empty else None,
            })

        def rank(row: Dict[str, Any]) -> Tuple[int, float]:
            label = row["engagement_rate_group"]
            if label == NO_VIEWS:
                return (0, 0.0)
            if label == NO_LIKES:
                return (1, 0.0)
            return (2, float(label.rstrip("%")))

        rows.sort(key=rank, reverse=True)
        return _table(
            rows,
            ["engagement_rate_group", "num_videos", "avg_view_count", "avg_like_count", "sample_title"],
            ints=["num_videos", "avg_view_count", "avg_like_count"],
        )

    def official_remix_channels(self) -> pd.DataFrame:
        named = self.frame.loc[self.frame["channel_name"].notna()]
        official = named.loc[self._title_match("official").loc[named.index]].groupby("channel_name", sort=False).size()
        remix = named.loc[self._title_match("remix").loc[named.index]].groupby("channel_name", sort=False).size()
        both = pd.concat(
            [official.rename("official_count"), remix.rename("remix_count")], axis=1, join="inner"
        ).rename_axis("channel_name").reset_index()
        both["official_count"] = both["official_count"].astype(int)
        both["remix_count"] = both["remix_count"].astype(int)
        both["total_related_videos"] = both["official_count"] + both["remix_count"]
        return both.sort_values(
            ["total_related_videos", "channel_name"], ascending=[False, True]
        ).reset_index(drop=True)

    def acoustic_videos(self) -> pd.DataFrame:
        return self._videos(self._title_match("acoustic"), ["title", "channel_name", "view_count"], by_views=True)

    def yearly_engagement(self) -> pd.DataFrame:
        rows = [
            {"year": year, "avg_engagement": _mean_rate(group["engagement_pct"])}
            for year, group in self._by_year()
        ]
        return _table(rows, ["year", "avg_engagement"])

    def trailer_teaser_videos(self) -> pd.DataFrame:
        return self._videos(self._title_match("trailer", "teaser"), ["title", "channel_name"])

    def prolific_channels(self, min_videos: Optional[int] = None) -> pd.DataFrame:
        threshold = self.config.prolific_min_videos if min_videos is None else min_videos
        channels = aggregate_groups(self.frame, GroupingKey.CHANNEL, "channel_name")
        busy = channels.loc[channels["total_videos"] > threshold]
        busy = busy.sort_values("total_videos", ascending=False, kind="mergesort")
        return busy.loc[:, ["channel_name", "total_videos"]].reset_index(drop=True)

    def common_title_words(self, n: int = 15) -> pd.DataFrame:
        pairs = word_frequencies(self.frame["title"], self.config.stop_words, limit=n)
        return pd.DataFrame(pairs, columns=["word", "occurrences"])

    def mood_categories(self) -> pd.DataFrame:
        moods = aggregate_groups(self.frame, GroupingKey.MOOD, "mood_category")
        moods = moods.sort_values("total_videos", ascending=False, kind="mergesort")
        return moods.loc[:, ["mood_category", "total_videos"]].reset_index(drop=True)

    # -- registry -------------------------------------------------------

    def run(self, name: str) -> pd.DataFrame:
        """Run one analysis by registry name."""
        if name not in dict(REPORTS):
            raise KeyError(f"Unknown report: {name}")
        log.debug("Running report %s", name)
        return getattr(self, name)()

    def run_all(self) -> Dict[str, pd.DataFrame]:
        return {name: self.run(name) for name, _ in REPORTS}
