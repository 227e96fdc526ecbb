from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Sequence

from smokechart.cleaning import BucketErrors
from smokechart.scales import LinearScale, apply_scale


@dataclass(frozen=True)
class ErrorMarker:
    x: float
    err_pos: int

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["errPos"] = payload.pop("err_pos")
        return payload


def count_errors(errors: Sequence[BucketErrors]) -> list[int]:
    return [err.invalid for err in errors]


def error_ratios(errors: Sequence[BucketErrors]) -> list[float]:
    """Fraction of submitted samples that were invalid, 0 for empty buckets."""
    return [err.ratio for err in errors]


def resolve_target(rows: Sequence[Sequence[float]], target: int | None = None) -> int:
    if target is None:
        return max((len(row) for row in rows), default=0)
    if target < 0:
        raise ValueError(f"target must be >= 0, got {target}")
    return int(target)


def shortfall_counts(
    rows: Sequence[Sequence[float]],
    target: int | None = None,
    padding: int = 0,
) -> list[int]:
    """How many samples each bucket is missing against ``target``.

    ``target`` defaults to the largest cleaned bucket. The first ``padding``
    buckets are stripe filler rather than missing data and count as 0.
    """
    goal = resolve_target(rows, target)
    return [
        0 if index < padding else max(0, goal - len(row)) for index, row in enumerate(rows)
    ]


def shortfall_markers(
    rows: Sequence[Sequence[float]],
    target: int | None = None,
    scale_x: LinearScale | None = None,
    padding: int = 0,
) -> list[ErrorMarker]:
    markers: list[ErrorMarker] = []
    for index, shortfall in enumerate(shortfall_counts(rows, target, padding)):
        x = apply_scale(scale_x, index + 0.5)
        markers.extend(ErrorMarker(x=x, err_pos=pos) for pos in range(shortfall))
    return markers
