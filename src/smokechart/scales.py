from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

LOGGER = logging.getLogger(__name__)


class LinearScale:
    """Linear map from a numeric domain onto an output range.

    Domain and range are mutable; the scale is shared by reference, so any
    holder sees the most recent fit.
    """

    def __init__(
        self,
        domain: Sequence[float] = (0.0, 1.0),
        range: Sequence[float] = (0.0, 1.0),
    ) -> None:
        self._domain = self._pair(domain, "domain")
        self._range = self._pair(range, "range")

    @staticmethod
    def _pair(values: Sequence[float], name: str) -> tuple[float, float]:
        if len(values) != 2:
            raise ValueError(f"{name} must have exactly two values, got {values!r}")
        return float(values[0]), float(values[1])

    @property
    def domain(self) -> tuple[float, float]:
        return self._domain

    @domain.setter
    def domain(self, values: Sequence[float]) -> None:
        self._domain = self._pair(values, "domain")

    @property
    def range(self) -> tuple[float, float]:
        return self._range

    @range.setter
    def range(self, values: Sequence[float]) -> None:
        self._range = self._pair(values, "range")

    def __call__(self, value: float) -> float:
        d0, d1 = self._domain
        r0, r1 = self._range
        if d1 == d0:
            return (r0 + r1) / 2.0
        return r0 + (float(value) - d0) * (r1 - r0) / (d1 - d0)

    def invert(self, value: float) -> float:
        d0, d1 = self._domain
        r0, r1 = self._range
        if r1 == r0:
            return (d0 + d1) / 2.0
        return d0 + (float(value) - r0) * (d1 - d0) / (r1 - r0)

    def copy(self) -> LinearScale:
        return LinearScale(domain=self._domain, range=self._range)

    def __repr__(self) -> str:
        return f"LinearScale(domain={self._domain!r}, range={self._range!r})"


def apply_scale(scale: LinearScale | None, value: float) -> float:
    if scale is None:
        return float(value)
    return float(scale(value))


def sample_extent(rows: Sequence[Sequence[float]]) -> tuple[float, float] | None:
    """Return (min, max) over sorted rows, skipping empty ones."""
    non_empty = [row for row in rows if len(row)]
    if not non_empty:
        return None
    return min(row[0] for row in non_empty), max(row[-1] for row in non_empty)


@dataclass
class ScaleAdapter:
    x: LinearScale | None = None
    y: LinearScale | None = None

    def fit_domains(self, rows: Sequence[Sequence[float]]) -> None:
        """Fit X to the bucket interval and Y to the extent of the samples."""
        if self.x is not None:
            self.x.domain = (0.0, float(len(rows)))
        if self.y is None:
            return

        extent = sample_extent(rows)
        if extent is None:
            LOGGER.debug("No samples to fit; keeping Y domain %s", self.y.domain)
            return
        self.y.domain = extent
        LOGGER.debug("Fitted X domain %s and Y domain %s", self.x.domain if self.x else None, extent)
