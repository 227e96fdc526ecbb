from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from smokechart.bands import DEFAULT_PERCENTILES, resolve_percentiles
from smokechart.quantile import validate_fraction

ErrorMode = Literal["invalid-fraction", "shortfall"]


class SmokechartConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    percentiles: list[tuple[float, float]] = Field(
        default_factory=lambda: list(DEFAULT_PERCENTILES)
    )
    line_quantile: float = 0.5
    line_color: str = "#ff0000"
    line_width: float = Field(default=1.0, gt=0.0)
    bands_color: str = "#000000"
    band_opacity: list[float] = Field(default_factory=lambda: [0.18], min_length=1)
    error_mode: ErrorMode = "invalid-fraction"
    error_radius: float = Field(default=0.0, ge=0.0)
    error_target: int | None = Field(default=None, ge=0)
    error_baseline: float | None = None
    error_color: str = "#ff3300"
    num_stripes: int = Field(default=0, ge=0)
    range_x: tuple[float, float] = (0.0, 1.0)
    range_y: tuple[float, float] = (0.0, 1.0)
    auto_fit: bool = True
    coordinate_digits: int = Field(default=3, ge=0, le=12)
    instance_id: str | None = None

    @field_validator("percentiles", mode="before")
    @classmethod
    def _expand_percentiles(cls, value: Any) -> Any:
        return resolve_percentiles(value)

    @field_validator("line_quantile")
    @classmethod
    def _check_line_quantile(cls, value: float) -> float:
        return validate_fraction(value)

    @field_validator("band_opacity")
    @classmethod
    def _check_opacity(cls, value: list[float]) -> list[float]:
        for opacity in value:
            if not 0.0 <= opacity <= 1.0:
                raise ValueError(f"band opacity must be in [0, 1], got {opacity!r}")
        return value


def resolve_config(
    config: SmokechartConfig | Mapping[str, Any] | None = None,
) -> SmokechartConfig:
    if config is None:
        return SmokechartConfig()
    if isinstance(config, SmokechartConfig):
        return config.model_copy(deep=True)
    return SmokechartConfig.model_validate(dict(config))


def load_config(path: Path) -> SmokechartConfig:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    return SmokechartConfig.model_validate(data)
