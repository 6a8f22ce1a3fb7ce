from datetime import date

import pandas as pd
import pytest

from vidmetrics.ingest.loader import load_videos, normalize_videos_df, records_to_frame
from vidmetrics.models import VIDEO_COLUMNS, VideoRecord

CSV_TEXT = """video_id,title,channel_name,publish_date,duration,like_count,view_count,category,description
abc,Song One,ChanVEVO,2021-04-02,PT3M10S,120,4500,Music,love song
def,Song Two,Indie,,PT1H,,,Music,
ghi,Song Three,Indie,not-a-date,oops,7,70,,party
"""


def test_records_to_frame_from_dataclasses():
    frame = records_to_frame([VideoRecord("a", "T", "C", date(2020, 1, 1), "PT1M", 1, 2)])
    assert list(frame.columns) == list(VIDEO_COLUMNS)
    assert frame["like_count"].dtype == "Int64"
    assert frame.loc[0, "publish_date"] == pd.Timestamp("2020-01-01")


def test_records_to_frame_from_dicts_fills_missing_columns():
    frame = records_to_frame([{"video_id": "x", "title": "Only title"}])
    assert frame.loc[0, "channel_name"] is None
    assert pd.isna(frame.loc[0, "view_count"])


def test_records_to_frame_empty():
    frame = records_to_frame([])
    assert frame.empty
    assert list(frame.columns) == list(VIDEO_COLUMNS)


def test_duplicate_video_id_rejected():
    with pytest.raises(ValueError, match="Duplicate video_id"):
        records_to_frame([VideoRecord("a"), VideoRecord("a")])


def test_negative_counts_rejected():
    with pytest.raises(ValueError, match="view_count must be non-negative"):
        records_to_frame([VideoRecord("a", view_count=-1)])


def test_missing_video_id_rejected():
    with pytest.raises(ValueError, match="video_id"):
        normalize_videos_df(pd.DataFrame({"title": ["x"]}))
    with pytest.raises(ValueError, match="no video_id"):
        records_to_frame([{"video_id": None, "title": "x"}])


def test_load_csv(tmp_path, caplog):
    path = tmp_path / "videos.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    with caplog.at_level("INFO"):
        frame = load_videos(str(path))
    assert frame["video_id"].tolist() == ["abc", "def", "ghi"]
    assert frame["view_count"].tolist()[0] == 4500
    assert pd.isna(frame.loc[1, "view_count"])
    assert pd.isna(frame.loc[2, "publish_date"])
    assert frame.loc[1, "description"] is None
    assert "Loaded 3 videos" in caplog.text


def test_load_parquet(tmp_path):
    path = tmp_path / "videos.parquet"
    records_to_frame([VideoRecord("a", "T", "C", date(2020, 1, 1), "PT1M", 1, 2)]).to_parquet(path, index=False)
    frame = load_videos(str(path))
    assert frame.loc[0, "video_id"] == "a"
    assert frame.loc[0, "view_count"] == 2


def test_unsupported_extension(tmp_path):
    path = tmp_path / "videos.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported file type"):
        load_videos(str(path))


def test_mixed_date_formats_all_parse(caplog):
    rows = [
        {"video_id": "a", "publish_date": "2021-04-02T10:00:00Z"},
        {"video_id": "b", "publish_date": "2022-05-01"},
        {"video_id": "c", "publish_date": "03/15/2020"},
    ]
    with caplog.at_level("WARNING"):
        frame = records_to_frame(rows)
    assert frame["publish_date"].notna().all()
    assert frame["publish_date"].dt.year.tolist() == [2021, 2022, 2020]
    assert frame.loc[0, "publish_date"] == pd.Timestamp("2021-04-02 10:00:00")
    assert "publish_date" not in caplog.text


def test_unparseable_dates_are_logged(caplog):
    rows = [
        {"video_id": "a", "publish_date": "2021-04-02"},
        {"video_id": "b", "publish_date": "someday"},
        {"video_id": "c", "publish_date": None},
    ]
    with caplog.at_level("WARNING"):
        frame = records_to_frame(rows)
    assert frame["publish_date"].isna().tolist() == [False, True, True]
    assert "1 of 3 videos have an unparseable publish_date" in caplog.text


def test_missing_text_is_none_in_object_column():
    frame = records_to_frame([{"video_id": "a", "title": "Song"}, {"video_id": "b"}])
    assert frame["title"].dtype == object
    assert frame["title"].tolist() == ["Song", None]
    assert frame.loc[1, "description"] is None
