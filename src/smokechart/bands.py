from __future__ import annotations

from typing import Sequence, Union

from smokechart.quantile import quantile, validate_fraction

PercentilePair = tuple[float, float]
Bound = Union[tuple[float, float], None]
BandsArg = Union[int, Sequence[Sequence[float]]]

# Widest band first so layers stack from outermost to innermost.
SMOKE_BAND_PRESETS: tuple[tuple[PercentilePair, ...], ...] = (
    (),
    ((0.0, 1.0),),
    ((0.0, 1.0), (0.25, 0.75)),
    ((0.0, 1.0), (0.15, 0.85), (0.3, 0.7)),
    ((0.0, 1.0), (0.1, 0.9), (0.2, 0.8), (0.3, 0.7)),
    ((0.0, 1.0), (0.1, 0.9), (0.2, 0.8), (0.3, 0.7), (0.4, 0.6)),
)

DEFAULT_PERCENTILES: tuple[PercentilePair, ...] = ((0.0, 1.0), (0.1, 0.9), (0.25, 0.75))


def resolve_percentiles(bands: BandsArg) -> list[PercentilePair]:
    """Expand a preset band count or validate an explicit list of pairs."""
    if isinstance(bands, bool):
        raise ValueError(f"Unsupported band preset: {bands!r}")
    if isinstance(bands, int):
        if not 0 <= bands < len(SMOKE_BAND_PRESETS):
            raise ValueError(
                f"Unsupported band preset: {bands} (expected 0..{len(SMOKE_BAND_PRESETS) - 1})"
            )
        return list(SMOKE_BAND_PRESETS[bands])

    resolved: list[PercentilePair] = []
    for pair in bands:
        if isinstance(pair, (str, bytes)) or len(pair) != 2:
            raise ValueError(f"Percentile entry must be a (low, high) pair, got {pair!r}")
        low = validate_fraction(pair[0])
        high = validate_fraction(pair[1])
        if low > high:
            raise ValueError(f"Percentile pair low must be <= high, got {pair!r}")
        resolved.append((low, high))
    return resolved


def calculate_smoke_bands(samples: Sequence[float], bands: BandsArg) -> list[Bound]:
    """Return the (low, high) sample values for each percentile pair.

    ``samples`` must already be sorted ascending. An empty row has no
    bounds, so every pair maps to ``None``.
    """
    percentiles = resolve_percentiles(bands)
    if len(samples) == 0:
        return [None for _ in percentiles]
    return [(quantile(samples, low), quantile(samples, high)) for low, high in percentiles]


def calculate_matrix_bounds(rows: Sequence[Sequence[float]], bands: BandsArg) -> list[list[Bound]]:
    percentiles = resolve_percentiles(bands)
    return [calculate_smoke_bands(row, percentiles) for row in rows]
