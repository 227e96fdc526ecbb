from __future__ import annotations

import json
from pathlib import Path

import typer

from smokechart.bands import resolve_percentiles
from smokechart.chart import Smokechart
from smokechart.config import SmokechartConfig, load_config
from smokechart.io import load_matrix
from smokechart.logging import configure_logging
from smokechart.render import build_render_payload
from smokechart.summary import build_bucket_summary

app = typer.Typer(no_args_is_help=True, add_completion=False)


def _load_app_config(config_path: Path | None) -> SmokechartConfig:
    if config_path is None:
        return SmokechartConfig()
    return load_config(config_path)


def _build_chart(
    input_path: Path,
    config_path: Path | None,
    bucket_column: str,
    value_column: str,
    freq: str | None,
) -> Smokechart:
    cfg = _load_app_config(config_path)
    try:
        matrix = load_matrix(
            input_path,
            bucket_column=bucket_column,
            value_column=value_column,
            freq=freq,
        )
        return Smokechart(matrix, cfg)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def render(
    input_path: Path = typer.Argument(..., exists=True, readable=True, resolve_path=True),
    config: Path | None = typer.Option(None, exists=True, readable=True, resolve_path=True),
    quantile: float | None = typer.Option(None, help="Quantile for the line (default from config)."),
    bucket_column: str = typer.Option("bucket", help="Bucket column for CSV input."),
    value_column: str = typer.Option("value", help="Sample column for CSV input."),
    freq: str | None = typer.Option(None, help="Floor CSV bucket timestamps to this frequency."),
) -> None:
    """Print band, line and error paths as JSON."""
    configure_logging()
    chart = _build_chart(input_path, config, bucket_column, value_column, freq)
    try:
        payload = build_render_payload(chart, q=quantile)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(json.dumps(payload.to_dict(), indent=2))


@app.command()
def summary(
    input_path: Path = typer.Argument(..., exists=True, readable=True, resolve_path=True),
    config: Path | None = typer.Option(None, exists=True, readable=True, resolve_path=True),
    bucket_column: str = typer.Option("bucket", help="Bucket column for CSV input."),
    value_column: str = typer.Option("value", help="Sample column for CSV input."),
    freq: str | None = typer.Option(None, help="Floor CSV bucket timestamps to this frequency."),
) -> None:
    """Print per-bucket counts, error rates and percentile bounds."""
    configure_logging()
    chart = _build_chart(input_path, config, bucket_column, value_column, freq)
    typer.echo(build_bucket_summary(chart).to_string(index=False))


@app.command()
def bands(
    input_path: Path = typer.Argument(..., exists=True, readable=True, resolve_path=True),
    count: int = typer.Option(2, "--bands", help="Band preset, 0 to 5."),
    bucket_column: str = typer.Option("bucket", help="Bucket column for CSV input."),
    value_column: str = typer.Option("value", help="Sample column for CSV input."),
    freq: str | None = typer.Option(None, help="Floor CSV bucket timestamps to this frequency."),
) -> None:
    """Print the sample values at each band boundary, one list per bucket."""
    configure_logging()
    try:
        percentiles = resolve_percentiles(count)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    chart = _build_chart(input_path, None, bucket_column, value_column, freq)
    bounds = chart.bounds(percentiles)
    typer.echo(json.dumps([[list(b) if b else None for b in row] for row in bounds]))


if __name__ == "__main__":
    app()
