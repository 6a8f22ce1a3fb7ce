"""Centralized path helpers for input data and report output."""
from __future__ import annotations

import os
from dataclasses import dataclass
from ..config import get_config


@dataclass(frozen=True)
class DataPaths:
    base: str
    raw: str
    reports: str


def get_paths() -> DataPaths:
    cfg = get_config()
    base = os.path.abspath(cfg.data_dir)
    return DataPaths(
        base=base,
        raw=os.path.join(base, "raw"),
        reports=os.path.join(base, "reports"),
    )
