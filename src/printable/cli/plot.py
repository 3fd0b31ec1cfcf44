"""
Heatmap and histogram commands for precomputed data files.
"""

from pathlib import Path

import typer

from printable.core.plots import (
    PlotConfig,
    parse_range,
    plot_heatmap,
    plot_histogram,
    save_or_show,
)
from printable.core.utils.io_utils import load_columns, load_matrix
from printable.core.utils.log_utils import log, set_verbosity


def _build_config(
    title: str,
    xlabel: str,
    ylabel: str,
    xrange: str | None,
    yrange: str | None,
    save: Path | None,
    cbrange: str | None = None,
) -> PlotConfig:
    try:
        return PlotConfig(
            title=title,
            xlabel=xlabel,
            ylabel=ylabel,
            xrange=parse_range(xrange),
            yrange=parse_range(yrange),
            cbrange=parse_range(cbrange),
            output=save,
        )
    except ValueError as err:
        log.error(f"❌ {err}")
        raise typer.Exit(code=1) from err


def heatmap(
    data: Path = typer.Argument(..., help="Whitespace-separated grid of values."),
    title: str = typer.Option("", "--title", "-t", help="Plot title."),
    xlabel: str = typer.Option("", "--xlabel", help="X axis label."),
    ylabel: str = typer.Option("", "--ylabel", help="Y axis label."),
    xrange: str | None = typer.Option(
        None, "--xrange", help="X axis range, e.g. '[0:100]'."
    ),
    yrange: str | None = typer.Option(
        None, "--yrange", help="Y axis range, e.g. '[0:100]'."
    ),
    cbrange: str | None = typer.Option(
        None, "--cbrange", help="Colour-bar range, e.g. '[0:*]'."
    ),
    save: Path | None = typer.Option(
        None, "--save", "-s", help="Output filename (.png, .pdf or .svg)."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging."
    ),
):
    """
    Render a heatmap from a precomputed grid file.
    """
    set_verbosity(log, verbose)
    config = _build_config(title, xlabel, ylabel, xrange, yrange, save, cbrange)

    try:
        matrix = load_matrix(data)
    except (OSError, ValueError) as err:
        log.error(f"❌ {err}")
        raise typer.Exit(code=1) from err

    fig = plot_heatmap(matrix, config)
    save_or_show(fig, config.output)
    if config.output is not None:
        typer.echo(f"💾 Figure saved as {config.output}")


def histogram(
    data: Path = typer.Argument(..., help="Whitespace-separated data columns."),
    column: list[int] = typer.Option(
        [],
        "--column",
        "-c",
        help="Zero-based column to plot (repeatable, default: all).",
    ),
    bins: int = typer.Option(30, "--bins", "-b", min=1, help="Number of bins."),
    title: str = typer.Option("", "--title", "-t", help="Plot title."),
    xlabel: str = typer.Option("", "--xlabel", help="X axis label."),
    ylabel: str = typer.Option("", "--ylabel", help="Y axis label."),
    xrange: str | None = typer.Option(
        None, "--xrange", help="X axis range, e.g. '[-90:90]'."
    ),
    yrange: str | None = typer.Option(
        None, "--yrange", help="Y axis range, e.g. '[0:*]'."
    ),
    save: Path | None = typer.Option(
        None, "--save", "-s", help="Output filename (.png, .pdf or .svg)."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging."
    ),
):
    """
    Render histograms of one or more columns of a data file (e.g. poses.dat).
    """
    set_verbosity(log, verbose)
    config = _build_config(title, xlabel, ylabel, xrange, yrange, save)

    try:
        values = load_columns(data, column)
    except (OSError, ValueError) as err:
        log.error(f"❌ {err}")
        raise typer.Exit(code=1) from err

    indices = column or list(range(len(values)))
    labels = [f"Column {c}" for c in indices] if len(values) > 1 else None

    fig = plot_histogram(values, config, bins=bins, labels=labels)
    save_or_show(fig, config.output)
    if config.output is not None:
        typer.echo(f"💾 Figure saved as {config.output}")
