from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from smokechart.chart import Smokechart
from smokechart.errors import ErrorMarker

BAND_CLASS = "smokechart-band"
LINE_CLASS = "smokechart-line"
ERROR_CLASS = "smokechart-errs"


@dataclass(frozen=True)
class PathElement:
    css_class: str
    d: str
    fill: str
    stroke: str | None = None
    stroke_width: float | None = None
    shape_rendering: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class RenderPayload:
    bands: list[PathElement] = field(default_factory=list)
    lines: list[PathElement] = field(default_factory=list)
    errors: list[PathElement] = field(default_factory=list)
    markers: list[ErrorMarker] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "bands": [element.to_dict() for element in self.bands],
            "lines": [element.to_dict() for element in self.lines],
            "errors": [element.to_dict() for element in self.errors],
            "markers": [marker.to_dict() for marker in self.markers],
        }


def _class_name(base: str, instance_id: str | None) -> str:
    return f"{base}-{instance_id}" if instance_id else base


def build_render_payload(chart: Smokechart, q: float | None = None) -> RenderPayload:
    """Collect styled paths for the rendering layer, bands first."""
    config = chart.config
    bands = [
        PathElement(
            css_class=_class_name(BAND_CLASS, config.instance_id),
            d=path,
            fill=chart.fill_color(layer),
        )
        for layer, path in enumerate(chart.band_paths())
    ]
    line = PathElement(
        css_class=_class_name(LINE_CLASS, config.instance_id),
        d=chart.line_path(q),
        fill="transparent",
        stroke=config.line_color,
        stroke_width=config.line_width,
        shape_rendering="crispEdges",
    )

    error_elements: list[PathElement] = []
    markers: list[ErrorMarker] = []
    if config.error_mode == "shortfall":
        markers = chart.error_markers()
    else:
        error_d = chart.error_path()
        if error_d:
            error_elements.append(
                PathElement(
                    css_class=_class_name(ERROR_CLASS, config.instance_id),
                    d=error_d,
                    fill=config.error_color,
                )
            )

    return RenderPayload(bands=bands, lines=[line], errors=error_elements, markers=markers)
