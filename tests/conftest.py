from datetime import date

import pytest

from vidmetrics.analysis.analyzer import VideoMetricsAnalyzer
from vidmetrics.config import DEFAULT_EMOTION_KEYWORDS, DEFAULT_STOP_WORDS, AppConfig
from vidmetrics.models import VideoRecord


@pytest.fixture
def config():
    return AppConfig(
        data_dir="./data",
        log_level="INFO",
        stop_words=DEFAULT_STOP_WORDS,
        emotion_keywords=DEFAULT_EMOTION_KEYWORDS,
        high_view_threshold=100_000,
        prolific_min_videos=10,
    )


@pytest.fixture
def records():
    return [
        VideoRecord(
            video_id="v1",
            title="Official Video - Love Song (Official Video)",
            channel_name="ArtistVEVO",
            publish_date=date(2021, 3, 1),
            duration="PT3M30S",
            like_count=5000,
            view_count=100_000,
            description="a love ballad",
        ),
        VideoRecord(
            video_id="v2",
            title="Live at Wembley",
            channel_name="Band Live",
            publish_date=date(2020, 6, 15),
            duration="PT1H",
            like_count=300,
            view_count=200_000,
            description="party anthem",
        ),
        VideoRecord(
            video_id="v3",
            title="Summer Remix",
            channel_name="DJ Mix",
            publish_date=date(2021, 7, 1),
            duration="PT1M45S",
            like_count=0,
            view_count=5000,
            description="sad and motivational",
        ),
        VideoRecord(
            video_id="v4",
            title="Acoustic Session Official",
            channel_name="ArtistVEVO",
            publish_date=None,
            duration="garbage",
            like_count=None,
            view_count=0,
            description=None,
        ),
        VideoRecord(
            video_id="v5",
            title="Movie Trailer",
            channel_name="DJ Mix",
            publish_date=date(2019, 1, 10),
            duration="PT5M",
            like_count=50,
            view_count=1000,
            description="motivation daily",
        ),
        VideoRecord(
            video_id="v6",
            title="Official Remix",
            channel_name="DJ Mix",
            publish_date=date(2021, 12, 31),
            duration="PT2M",
            like_count=2000,
            view_count=400_000,
            description="Party LOVE",
        ),
    ]


@pytest.fixture
def analyzer(records, config):
    return VideoMetricsAnalyzer(records, config=config)


@pytest.fixture
def empty_analyzer(config):
    return VideoMetricsAnalyzer([], config=config)
