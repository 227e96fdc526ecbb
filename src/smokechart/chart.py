from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from matplotlib.colors import to_rgb

from smokechart import errors as error_accounting
from smokechart import paths
from smokechart.bands import Bound, BandsArg, calculate_matrix_bounds
from smokechart.cleaning import BucketErrors, CleanedData, clean_matrix, pad_stripes
from smokechart.config import SmokechartConfig, resolve_config
from smokechart.errors import ErrorMarker
from smokechart.quantile import quantile, validate_fraction
from smokechart.scales import LinearScale, ScaleAdapter

LOGGER = logging.getLogger(__name__)

_UNSET: Any = object()


class Smokechart:
    """Prepare a matrix of per-bucket samples for display as a smoke chart.

    The chart keeps the cleaned samples, their error statistics and the two
    scales. Every geometry method is a pure function of that state; only
    ``replace_data``, ``fit_domains``, the scale setters and
    ``update_config`` change it.

    Scales created here are owned by the chart and refitted after each data
    replacement when ``config.auto_fit`` is set. Scales passed in by the
    caller are left alone until ``fit_domains`` is called explicitly.
    """

    def __init__(
        self,
        data: Iterable[Sequence[Any]] | None = None,
        config: SmokechartConfig | Mapping[str, Any] | None = None,
        *,
        scale_x: LinearScale | None = _UNSET,
        scale_y: LinearScale | None = _UNSET,
    ) -> None:
        self.config = resolve_config(config)
        self._owns_x = scale_x is _UNSET
        self._owns_y = scale_y is _UNSET
        self._scales = ScaleAdapter(
            x=LinearScale(range=self.config.range_x) if self._owns_x else scale_x,
            y=LinearScale(range=self.config.range_y) if self._owns_y else scale_y,
        )
        self._cleaned = CleanedData(rows=[], errors=[])
        if data is not None:
            self.replace_data(data)

    # data

    @property
    def data(self) -> list[list[float]]:
        return self._cleaned.rows

    @property
    def errors(self) -> list[BucketErrors]:
        return self._cleaned.errors

    def replace_data(self, raw: Iterable[Sequence[Any]]) -> None:
        cleaned = clean_matrix(raw)
        self._cleaned = pad_stripes(cleaned, self.config.num_stripes)
        LOGGER.debug(
            "Loaded %d buckets (%d padded)",
            len(self._cleaned),
            len(self._cleaned) - len(cleaned),
        )
        if self.config.auto_fit and (self._owns_x or self._owns_y):
            ScaleAdapter(
                x=self._scales.x if self._owns_x else None,
                y=self._scales.y if self._owns_y else None,
            ).fit_domains(self._cleaned.rows)

    def update_config(self, **overrides: Any) -> None:
        self.config = SmokechartConfig.model_validate(
            {**self.config.model_dump(), **overrides}
        )

    # scales

    @property
    def scale_x(self) -> LinearScale | None:
        return self._scales.x

    @scale_x.setter
    def scale_x(self, scale: LinearScale | None) -> None:
        self._scales.x = scale
        self._owns_x = False

    @property
    def scale_y(self) -> LinearScale | None:
        return self._scales.y

    @scale_y.setter
    def scale_y(self, scale: LinearScale | None) -> None:
        self._scales.y = scale
        self._owns_y = False

    def fit_domains(self) -> None:
        self._scales.fit_domains(self._cleaned.rows)

    # geometry

    def bounds(self, bands: BandsArg | None = None) -> list[list[Bound]]:
        return calculate_matrix_bounds(
            self._cleaned.rows,
            self.config.percentiles if bands is None else bands,
        )

    def band_paths(self, bands: BandsArg | None = None) -> list[str]:
        return paths.band_paths(
            self.bounds(bands),
            self._scales.x,
            self._scales.y,
            self.config.coordinate_digits,
        )

    def quantile_values(self, q: float | None = None) -> list[float | None]:
        fraction = validate_fraction(self.config.line_quantile if q is None else q)
        return [quantile(row, fraction) for row in self._cleaned.rows]

    def line_path(self, q: float | None = None) -> str:
        return paths.line_path(
            self.quantile_values(q),
            self._scales.x,
            self._scales.y,
            self.config.coordinate_digits,
        )

    # errors

    def count_errors(self) -> list[int]:
        return error_accounting.count_errors(self._cleaned.errors)

    def error_ratios(self) -> list[float]:
        return error_accounting.error_ratios(self._cleaned.errors)

    def shortfall_counts(self, target: int | None = None) -> list[int]:
        return error_accounting.shortfall_counts(
            self._cleaned.rows,
            self.config.error_target if target is None else target,
            self._cleaned.padding,
        )

    def error_path(self, radius: float | None = None) -> str:
        return paths.error_path(
            self.error_ratios(),
            self.config.error_radius if radius is None else radius,
            self._scales.x,
            self.config.error_baseline,
            self.config.coordinate_digits,
        )

    def error_markers(self, target: int | None = None) -> list[ErrorMarker]:
        return error_accounting.shortfall_markers(
            self._cleaned.rows,
            self.config.error_target if target is None else target,
            self._scales.x,
            padding=self._cleaned.padding,
        )

    # styling

    def fill_color(self, layer: int) -> str:
        """rgba fill for a band layer; layers past the list reuse the last opacity."""
        opacities = self.config.band_opacity
        opacity = opacities[min(max(layer, 0), len(opacities) - 1)]
        red, green, blue = (round(channel * 255) for channel in to_rgb(self.config.bands_color))
        return f"rgba({red},{green},{blue},{opacity})"
