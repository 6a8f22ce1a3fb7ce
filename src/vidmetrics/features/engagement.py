"""Likes-to-views engagement rate with explicit sentinels for undefined ratios."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

from ..models import is_missing

NO_VIEWS = "No Views"
NO_LIKES = "No Likes"

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class EngagementRate:
    value: Optional[float]
    sentinel: Optional[str] = None

    @property
    def computable(self) -> bool:
        return self.sentinel is None

    @property
    def label(self) -> str:
        if self.sentinel is not None:
            return self.sentinel
        return f"{self.value:.2f}%"


def _count(value: Any) -> int:
    return 0 if is_missing(value) else int(value)


def engagement_percentage(like_count: Any, view_count: Any) -> Optional[float]:
    """Unrounded likes / views * 100, or None when there are no views."""
    views = _count(view_count)
    if views == 0:
        return None
    return _count(like_count) / views * 100


def engagement_rate(like_count: Any, view_count: Any) -> EngagementRate:
    """Rate rounded half-up to two decimals.

    No views yields the ``No Views`` sentinel with no value. No likes on a
    viewed video yields ``No Likes`` carrying a rate of 0.0.
    """
    views = _count(view_count)
    if views == 0:
        return EngagementRate(None, NO_VIEWS)
    likes = _count(like_count)
    if likes == 0:
        return EngagementRate(0.0, NO_LIKES)
    pct = (Decimal(likes) * 100 / Decimal(views)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return EngagementRate(float(pct))
