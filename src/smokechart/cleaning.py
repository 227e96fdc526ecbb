from __future__ import annotations

import logging
import numbers
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
import pandas as pd

from smokechart.exceptions import MalformedMatrixError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BucketErrors:
    invalid: int
    total: int

    @property
    def ratio(self) -> float:
        if self.total <= 0:
            return 0.0
        return self.invalid / self.total


@dataclass(frozen=True)
class CleanedData:
    rows: list[list[float]]
    errors: list[BucketErrors]
    padding: int = 0

    def __len__(self) -> int:
        return len(self.rows)


def _is_row(value: Any) -> bool:
    if isinstance(value, (str, bytes, Mapping)):
        return False
    return isinstance(value, Iterable)


def _screen_sample(value: Any) -> Any:
    # Complex and out-of-range integers have no finite float form.
    if isinstance(value, (numbers.Complex, np.complexfloating)) and not isinstance(
        value, numbers.Real
    ):
        return None
    if isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_)):
        try:
            float(value)
        except OverflowError:
            return None
    return value


def clean_row(row: Sequence[Any]) -> list[float]:
    """Drop entries that are not finite numbers and sort the rest ascending."""
    if len(row) == 0:
        return []
    screened = pd.Series([_screen_sample(value) for value in row], dtype=object)
    values = pd.to_numeric(screened, errors="coerce").to_numpy(dtype=float)
    finite = values[np.isfinite(values)]
    return np.sort(finite).tolist()


def clean_matrix(raw: Iterable[Sequence[Any]]) -> CleanedData:
    """Clean every bucket and record how many of its samples were dropped.

    Bucket order and count are preserved; rows may be ragged and may
    become empty.
    """
    if not _is_row(raw):
        raise MalformedMatrixError(f"Sample matrix must be a sequence of rows, got {type(raw).__name__}")

    rows: list[list[float]] = []
    errors: list[BucketErrors] = []
    for position, row in enumerate(raw):
        if not _is_row(row):
            raise MalformedMatrixError(
                f"Bucket {position} must be a sequence of samples, got {type(row).__name__}"
            )
        samples = list(row)
        cleaned = clean_row(samples)
        rows.append(cleaned)
        errors.append(BucketErrors(invalid=len(samples) - len(cleaned), total=len(samples)))

    LOGGER.debug(
        "Cleaned %d buckets, dropped %d invalid samples",
        len(rows),
        sum(err.invalid for err in errors),
    )
    return CleanedData(rows=rows, errors=errors)


def pad_stripes(cleaned: CleanedData, num_stripes: int) -> CleanedData:
    """Prepend empty buckets until there are at least ``num_stripes`` of them."""
    missing = int(num_stripes) - len(cleaned.rows)
    if missing <= 0:
        return cleaned
    return CleanedData(
        rows=[[] for _ in range(missing)] + list(cleaned.rows),
        errors=[BucketErrors(invalid=0, total=0) for _ in range(missing)] + list(cleaned.errors),
        padding=cleaned.padding + missing,
    )
