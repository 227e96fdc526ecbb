from __future__ import annotations

import json

from smokechart import Smokechart
from smokechart.render import build_render_payload


def test_render_payload_styles_each_layer() -> None:
    chart = Smokechart(
        [[1, 2, 4, 10], [3, float("nan")]],
        {"percentiles": 2, "band_opacity": [0.1, 0.25], "error_radius": 3, "line_width": 1.5},
        scale_x=None,
        scale_y=None,
    )
    payload = build_render_payload(chart)

    assert [band.fill for band in payload.bands] == ["rgba(0,0,0,0.1)", "rgba(0,0,0,0.25)"]
    assert all(band.css_class == "smokechart-band" for band in payload.bands)
    assert payload.bands[1].d == "M0,2L0,6L1,6L1,2Z" + "M1,3L1,3L2,3L2,3Z"

    (line,) = payload.lines
    assert line.css_class == "smokechart-line"
    assert line.d == "M0,3L1,3L1,3L2,3"
    assert line.stroke == "#ff0000"
    assert line.stroke_width == 1.5
    assert line.fill == "transparent"

    (errors,) = payload.errors
    assert errors.css_class == "smokechart-errs"
    assert errors.fill == "#ff3300"
    assert errors.d.startswith("M1.5,4v-3A3,3 0,0,1 ")
    assert payload.markers == []


def test_render_payload_without_error_radius_has_no_error_path() -> None:
    payload = build_render_payload(Smokechart([[1, float("nan")]]))
    assert payload.errors == []


def test_render_payload_shortfall_mode_emits_markers() -> None:
    chart = Smokechart(
        [[1, 2, 3], [5]],
        {"error_mode": "shortfall", "error_radius": 3, "instance_id": "cpu"},
        scale_x=None,
    )
    payload = build_render_payload(chart)

    assert payload.errors == []
    assert [marker.err_pos for marker in payload.markers] == [0, 1]
    assert payload.lines[0].css_class == "smokechart-line-cpu"
    assert payload.bands[0].css_class == "smokechart-band-cpu"


def test_render_payload_is_json_ready() -> None:
    chart = Smokechart([[1, 2], [4]], {"error_mode": "shortfall"}, scale_x=None, scale_y=None)
    encoded = json.loads(json.dumps(build_render_payload(chart, q=1.0).to_dict()))

    assert encoded["lines"][0]["d"] == "M0,2L1,2L1,4L2,4"
    assert encoded["lines"][0]["shape_rendering"] == "crispEdges"
    assert "stroke" not in encoded["bands"][0]
    assert encoded["markers"] == [{"x": 1.5, "errPos": 0}]
