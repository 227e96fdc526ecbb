from __future__ import annotations

from smokechart.paths import band_paths, band_quad, error_path, error_wedge, format_number, line_path
from smokechart.scales import LinearScale


def test_format_number_trims_trailing_zeros() -> None:
    assert format_number(1.0) == "1"
    assert format_number(2.5) == "2.5"
    assert format_number(1 / 3) == "0.333"
    assert format_number(-0.0001) == "0"
    assert format_number(12.3456, digits=0) == "12"


def test_band_quad_is_closed_rectangle_over_bucket() -> None:
    assert band_quad(2, (1.0, 10.0)) == "M2,1L2,10L3,10L3,1Z"


def test_band_paths_join_buckets_per_layer() -> None:
    bounds = [
        [(1.0, 10.0), (2.0, 6.0)],
        [None, None],
        [(3.0, 5.0), (4.0, 4.0)],
    ]
    assert band_paths(bounds) == [
        "M0,1L0,10L1,10L1,1Z" + "M2,3L2,5L3,5L3,3Z",
        "M0,2L0,6L1,6L1,2Z" + "M2,4L2,4L3,4L3,4Z",
    ]


def test_band_paths_without_layers() -> None:
    assert band_paths([]) == []
    assert band_paths([[], []]) == []


def test_band_paths_apply_scales() -> None:
    scale_x = LinearScale(domain=(0, 2), range=(0, 100))
    scale_y = LinearScale(domain=(0, 10), range=(50, 0))
    assert band_paths([[(0.0, 10.0)]], scale_x, scale_y) == ["M0,50L0,0L50,0L50,50Z"]


def test_line_path_is_stepped() -> None:
    assert line_path([5.0, 7.0]) == "M0,5L1,5L1,7L2,7"


def test_line_path_breaks_on_empty_buckets() -> None:
    assert line_path([5.0, None, 3.0, 4.0]) == "M0,5L1,5M2,3L3,3L3,4L4,4"
    assert line_path([None, None]) == ""
    assert line_path([]) == ""


def test_error_wedge_quarter_circle() -> None:
    # centre (10, 5), radius 4, quarter turn ends to the right of the centre
    assert error_wedge(10.0, 0.25, 4.0, baseline=5.0) == "M10,5v-4A4,4 0,0,1 14,5Z"


def test_error_wedge_sets_large_arc_past_half() -> None:
    path = error_wedge(0.0, 0.75, 2.0)
    assert path.startswith("M0,3v-2A2,2 0,1,1 ")
    assert path.endswith("-2,3Z")


def test_error_wedge_full_ratio_draws_disc() -> None:
    assert error_wedge(0.0, 1.0, 2.0) == "M0,1A2,2 0,1,1 0,5A2,2 0,1,1 0,1Z"


def test_error_path_only_marks_buckets_with_errors() -> None:
    path = error_path([0.0, 0.5, 0.0], radius=3.0)
    assert path == "M1.5,4v-3A3,3 0,0,1 1.5,7Z"
    assert error_path([0.5], radius=0.0) == ""
    assert error_path([0.0, 0.0], radius=2.0) == ""


def test_error_path_joins_wedges_with_space() -> None:
    scale_x = LinearScale(domain=(0, 2), range=(0, 200))
    path = error_path([0.25, 0.25], radius=1.0, scale_x=scale_x, baseline=10.0)
    assert path == "M50,10v-1A1,1 0,0,1 51,10Z M150,10v-1A1,1 0,0,1 151,10Z"
