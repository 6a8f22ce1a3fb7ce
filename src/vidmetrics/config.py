"""Configuration loading via environment variables with sane defaults."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple
from dotenv import load_dotenv

load_dotenv()

DEFAULT_STOP_WORDS: Tuple[str, ...] = (
    "the", "a", "an", "and", "-", "|", "of", "in", "on", "official", "video",
)

# Checked in this order; the first keyword found in the description wins.
DEFAULT_EMOTION_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("love", "Romantic"),
    ("sad", "Sad"),
    ("party", "Party"),
    ("motiv", "Motivational"),
)


def _split_words(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_STOP_WORDS
    return tuple(word.strip().lower() for word in raw.split(",") if word.strip())


def _split_keywords(raw: Optional[str]) -> Tuple[Tuple[str, str], ...]:
    """Parse ``love=Romantic,sad=Sad`` into ordered (keyword, label) pairs."""
    if not raw:
        return DEFAULT_EMOTION_KEYWORDS
    pairs = []
    for item in raw.split(","):
        keyword, sep, label = item.partition("=")
        if not sep or not keyword.strip() or not label.strip():
            raise ValueError(f"Invalid EMOTION_KEYWORDS entry: {item!r}")
        pairs.append((keyword.strip().lower(), label.strip()))
    return tuple(pairs)


@dataclass(frozen=True)
class AppConfig:
    data_dir: str = os.getenv("DATA_DIR", "./data")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    stop_words: Tuple[str, ...] = _split_words(os.getenv("STOP_WORDS"))
    emotion_keywords: Tuple[Tuple[str, str], ...] = _split_keywords(os.getenv("EMOTION_KEYWORDS"))
    high_view_threshold: int = int(os.getenv("HIGH_VIEW_THRESHOLD", "100000"))
    prolific_min_videos: int = int(os.getenv("PROLIFIC_MIN_VIDEOS", "10"))


def get_config() -> AppConfig:
    """Return loaded app configuration."""
    return AppConfig()
