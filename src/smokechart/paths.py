from __future__ import annotations

import math
from functools import partial
from typing import Sequence

from smokechart.bands import Bound
from smokechart.scales import LinearScale, apply_scale

DEFAULT_DIGITS = 3


def format_number(value: float, digits: int = DEFAULT_DIGITS) -> str:
    text = f"{round(float(value), digits):.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def _point(
    x: float,
    y: float,
    scale_x: LinearScale | None,
    scale_y: LinearScale | None,
    digits: int,
) -> str:
    return (
        f"{format_number(apply_scale(scale_x, x), digits)},"
        f"{format_number(apply_scale(scale_y, y), digits)}"
    )


def band_quad(
    index: int,
    bound: tuple[float, float],
    scale_x: LinearScale | None = None,
    scale_y: LinearScale | None = None,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """Closed rectangle over bucket ``index`` between the two bound values."""
    low, high = bound
    x0, x1 = index, index + 1
    corners = [(x0, low), (x0, high), (x1, high), (x1, low)]
    head, *rest = (_point(x, y, scale_x, scale_y, digits) for x, y in corners)
    return "M" + head + "".join("L" + point for point in rest) + "Z"


def band_paths(
    bounds: Sequence[Sequence[Bound]],
    scale_x: LinearScale | None = None,
    scale_y: LinearScale | None = None,
    digits: int = DEFAULT_DIGITS,
) -> list[str]:
    """Return one path per percentile layer, outermost first.

    ``bounds[i][layer]`` is the bound of bucket ``i``; every bucket of a
    layer is concatenated so the layer can be filled in one call. Absent
    bounds draw nothing.
    """
    layer_count = max((len(row) for row in bounds), default=0)
    layers: list[list[str]] = [[] for _ in range(layer_count)]
    for index, row in enumerate(bounds):
        for layer, bound in enumerate(row):
            if bound is None:
                continue
            layers[layer].append(band_quad(index, bound, scale_x, scale_y, digits))
    return ["".join(parts) for parts in layers]


def line_path(
    values: Sequence[float | None],
    scale_x: LinearScale | None = None,
    scale_y: LinearScale | None = None,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """Stepped polyline through one value per bucket.

    Each bucket contributes a horizontal segment from ``index`` to
    ``index + 1``. A ``None`` value breaks the line so the next bucket with
    data starts a new subpath.
    """
    commands: list[str] = []
    connected = False
    for index, value in enumerate(values):
        if value is None:
            connected = False
            continue
        start = _point(index, value, scale_x, scale_y, digits)
        end = _point(index + 1, value, scale_x, scale_y, digits)
        commands.append(("L" if connected else "M") + start)
        commands.append("L" + end)
        connected = True
    return "".join(commands)


def error_wedge(
    center_x: float,
    ratio: float,
    radius: float,
    baseline: float | None = None,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """Pie wedge of angle ``2 * pi * ratio`` starting straight up from the centre."""
    r = float(radius)
    cy = r + 1.0 if baseline is None else float(baseline)
    fmt = partial(format_number, digits=digits)
    top = cy - r

    if ratio >= 1.0:
        bottom = cy + r
        return (
            f"M{fmt(center_x)},{fmt(top)}"
            f"A{fmt(r)},{fmt(r)} 0,1,1 {fmt(center_x)},{fmt(bottom)}"
            f"A{fmt(r)},{fmt(r)} 0,1,1 {fmt(center_x)},{fmt(top)}Z"
        )

    alpha = 2.0 * math.pi * ratio
    end_x = center_x + r * math.sin(alpha)
    end_y = cy - r * math.cos(alpha)
    large_arc = 1 if alpha > math.pi else 0
    return (
        f"M{fmt(center_x)},{fmt(cy)}v-{fmt(r)}"
        f"A{fmt(r)},{fmt(r)} 0,{large_arc},1 {fmt(end_x)},{fmt(end_y)}Z"
    )


def error_path(
    ratios: Sequence[float],
    radius: float,
    scale_x: LinearScale | None = None,
    baseline: float | None = None,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """Join one wedge per bucket with a non-zero error ratio."""
    if radius <= 0:
        return ""
    wedges = [
        error_wedge(apply_scale(scale_x, index + 0.5), ratio, radius, baseline, digits)
        for index, ratio in enumerate(ratios)
        if ratio > 0
    ]
    return " ".join(wedges)
