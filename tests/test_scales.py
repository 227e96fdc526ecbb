from __future__ import annotations

import pytest

from smokechart.scales import LinearScale, ScaleAdapter, apply_scale, sample_extent


def test_linear_scale_maps_and_inverts() -> None:
    scale = LinearScale(domain=(0, 10), range=(100, 0))
    assert scale(0) == 100.0
    assert scale(10) == 0.0
    assert scale(2.5) == pytest.approx(75.0)
    assert scale.invert(75.0) == pytest.approx(2.5)


def test_linear_scale_degenerate_domain_maps_to_range_middle() -> None:
    scale = LinearScale(domain=(4, 4), range=(0, 50))
    assert scale(4) == 25.0
    assert scale(123) == 25.0


def test_linear_scale_rejects_bad_pairs() -> None:
    with pytest.raises(ValueError, match="domain must have exactly two values"):
        LinearScale(domain=(0, 1, 2))
    scale = LinearScale()
    with pytest.raises(ValueError, match="range"):
        scale.range = (1,)


def test_copy_is_independent() -> None:
    scale = LinearScale(domain=(0, 2), range=(0, 20))
    clone = scale.copy()
    clone.domain = (0, 4)
    assert scale.domain == (0.0, 2.0)
    assert clone(4) == 20.0


def test_apply_scale_falls_back_to_raw_value() -> None:
    assert apply_scale(None, 3) == 3.0
    assert apply_scale(LinearScale(domain=(0, 1), range=(0, 10)), 0.5) == 5.0


def test_fit_domains_ignores_empty_buckets() -> None:
    adapter = ScaleAdapter(x=LinearScale(), y=LinearScale())
    adapter.fit_domains([[5.0], [1.0, 9.0], []])

    assert adapter.x is not None and adapter.y is not None
    assert adapter.x.domain == (0.0, 3.0)
    assert adapter.y.domain == (1.0, 9.0)


def test_fit_domains_keeps_previous_y_domain_when_all_buckets_empty() -> None:
    adapter = ScaleAdapter(x=LinearScale(), y=LinearScale(domain=(2, 8)))
    adapter.fit_domains([[], []])

    assert adapter.x is not None and adapter.y is not None
    assert adapter.x.domain == (0.0, 2.0)
    assert adapter.y.domain == (2.0, 8.0)


def test_fit_domains_skips_missing_scales() -> None:
    y_scale = LinearScale()
    adapter = ScaleAdapter(x=None, y=y_scale)
    adapter.fit_domains([[3.0, 4.0]])
    assert adapter.x is None
    assert y_scale.domain == (3.0, 4.0)


def test_sample_extent() -> None:
    assert sample_extent([]) is None
    assert sample_extent([[], [2.0, 7.0], [-1.0]]) == (-1.0, 7.0)
