"""I/O helpers for CSV and Parquet tables."""
from __future__ import annotations

import os
import pandas as pd

SUPPORTED_SUFFIXES = (".csv", ".parquet")


def ensure_dir(path: str) -> None:
    """Create directory if it does not exist."""
    os.makedirs(path, exist_ok=True)


def _suffix(path: str) -> str:
    suffix = os.path.splitext(path)[1].lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported file type {suffix or '(none)'!r} for {path}; expected one of {SUPPORTED_SUFFIXES}")
    return suffix


def read_table(path: str) -> pd.DataFrame:
    """Read a CSV or Parquet file into a dataframe."""
    if _suffix(path) == ".parquet":
        return pd.read_parquet(path)
    # keep ids and free text as strings; numeric coercion happens in the loader
    return pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])


def write_table(df: pd.DataFrame, path: str) -> None:
    """Write dataframe to CSV or Parquet depending on the file suffix."""
    suffix = _suffix(path)
    ensure_dir(os.path.dirname(path) or ".")
    if suffix == ".parquet":
        df.to_parquet(path, index=False)
    else:
        df.to_csv(path, index=False)
