from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd
import yaml


def matrix_from_frame(
    df: pd.DataFrame,
    bucket_column: str = "bucket",
    value_column: str = "value",
    freq: str | None = None,
) -> list[list[Any]]:
    """Group a long-format frame into one sample list per bucket.

    Buckets are ordered by key. With ``freq`` the bucket column is parsed
    as timestamps, floored to that frequency, and every period between the
    first and last bucket is kept so gaps show up as empty buckets.
    """
    for column in (bucket_column, value_column):
        if column not in df.columns:
            raise ValueError(f"Sample table missing column: {column}")
    if df.empty:
        return []

    frame = df[[bucket_column, value_column]].copy()
    if freq is not None:
        frame[bucket_column] = pd.to_datetime(frame[bucket_column], errors="coerce").dt.floor(freq)
        frame = frame.dropna(subset=[bucket_column])
        if frame.empty:
            return []

    grouped = frame.groupby(bucket_column, sort=True)[value_column].agg(list)
    if freq is not None:
        full_index = pd.date_range(start=grouped.index.min(), end=grouped.index.max(), freq=freq)
        grouped = grouped.reindex(full_index)

    return [list(samples) if isinstance(samples, list) else [] for samples in grouped.tolist()]


def load_matrix(
    path: Path,
    bucket_column: str = "bucket",
    value_column: str = "value",
    freq: str | None = None,
) -> list[list[Any]]:
    if path.suffix == ".json":
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    if path.suffix in (".yaml", ".yml"):
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or []
    if path.suffix == ".csv":
        df = pd.read_csv(path, encoding="utf-8-sig")
        return matrix_from_frame(
            df,
            bucket_column=bucket_column,
            value_column=value_column,
            freq=freq,
        )
    raise ValueError(f"Unsupported sample file type: {path.suffix}")
