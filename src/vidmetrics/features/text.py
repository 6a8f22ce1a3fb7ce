"""Title and description heuristics: tokens, keyword matches, channel and mood labels."""
from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, List, Sequence, Tuple

from ..config import DEFAULT_EMOTION_KEYWORDS, DEFAULT_STOP_WORDS

VEVO = "VEVO"
NON_VEVO = "Non-VEVO"
OTHER_MOOD = "Other"


def contains_term(text: Any, *terms: str) -> bool:
    """Case-insensitive substring match against any of ``terms``."""
    if not isinstance(text, str):
        return False
    lowered = text.lower()
    return any(term.lower() in lowered for term in terms)


def tokenize_title(title: Any, stop_words: Iterable[str] = DEFAULT_STOP_WORDS) -> List[str]:
    if not isinstance(title, str):
        return []
    stop = set(stop_words)
    return [token for token in title.lower().split() if token not in stop]


def word_frequencies(
    titles: Iterable[Any],
    stop_words: Iterable[str] = DEFAULT_STOP_WORDS,
    limit: int = 15,
) -> List[Tuple[str, int]]:
    """Most common title words; equal counts keep first-seen order."""
    stop = set(stop_words)
    counts: Counter = Counter()
    for title in titles:
        counts.update(tokenize_title(title, stop))
    return counts.most_common(limit)


def channel_type(channel_name: Any) -> str:
    return VEVO if contains_term(channel_name, "vevo") else NON_VEVO


def classify_mood(
    description: Any,
    keywords: Sequence[Tuple[str, str]] = DEFAULT_EMOTION_KEYWORDS,
) -> str:
    for keyword, label in keywords:
        if contains_term(description, keyword):
            return label
    return OTHER_MOOD
