from __future__ import annotations

import numpy as np
import pandas as pd

from smokechart.chart import Smokechart


def _percent_label(fraction: float) -> str:
    return f"p{round(fraction * 100):g}"


def build_bucket_summary(chart: Smokechart) -> pd.DataFrame:
    """Tabulate per-bucket counts, error rates and percentile bounds."""
    rows = chart.data
    bounds = chart.bounds()
    frame = pd.DataFrame(
        {
            "bucket": np.arange(len(rows), dtype=int),
            "n_total": [err.total for err in chart.errors],
            "n_valid": [len(row) for row in rows],
            "n_invalid": chart.count_errors(),
            "invalid_fraction": chart.error_ratios(),
            "shortfall": chart.shortfall_counts(),
            "min": [row[0] if row else np.nan for row in rows],
            "median": chart.quantile_values(0.5),
            "max": [row[-1] if row else np.nan for row in rows],
        }
    )
    frame["median"] = pd.to_numeric(frame["median"], errors="coerce")

    for layer, (low, high) in enumerate(chart.config.percentiles):
        prefix = f"{_percent_label(low)}_{_percent_label(high)}"
        frame[f"{prefix}_low"] = [
            row[layer][0] if row[layer] is not None else np.nan for row in bounds
        ]
        frame[f"{prefix}_high"] = [
            row[layer][1] if row[layer] is not None else np.nan for row in bounds
        ]
    return frame
