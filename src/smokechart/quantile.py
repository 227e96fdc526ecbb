from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from smokechart.exceptions import InvalidQuantileError

# Fractional ranks closer than this to an index return the sample itself.
INTERPOLATION_EPSILON = 1e-3


def validate_fraction(q: float) -> float:
    if isinstance(q, (str, bytes, bool, np.bool_)):
        raise InvalidQuantileError(q)
    try:
        value = float(q)
    except (TypeError, ValueError) as exc:
        raise InvalidQuantileError(q) from exc
    if math.isnan(value) or value < 0.0 or value > 1.0:
        raise InvalidQuantileError(q)
    return value


def quantile(sorted_samples: Sequence[float], q: float) -> float | None:
    """Return the sample value at fraction ``q`` of an ascending sample list.

    Nearest-rank with interpolation: ``rank = (n - 1) * q``. When the rank
    lands within ``INTERPOLATION_EPSILON`` of an index the sample at that
    index is returned unchanged; otherwise the two neighbouring samples are
    blended linearly and the result is rounded half up to an integer.

    Returns ``None`` for an empty list. ``q`` is validated first, so a bad
    fraction raises even when there is nothing to rank.
    """
    fraction = validate_fraction(q)
    n = len(sorted_samples)
    if n == 0:
        return None

    rank = (n - 1) * fraction
    idx = math.floor(rank)
    frac = rank - idx
    if frac < INTERPOLATION_EPSILON:
        return float(sorted_samples[idx])

    blended = sorted_samples[idx] * (1.0 - frac) + sorted_samples[idx + 1] * frac
    return float(math.floor(blended + 0.5))
