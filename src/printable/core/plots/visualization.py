"""Heatmap and histogram rendering for precomputed data."""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from printable.types import FloatArray

from .config import SUPPORTED_FORMATS, PlotConfig

logger = logging.getLogger(__name__)


def _apply_axes(ax: Axes, config: PlotConfig) -> None:
    """Apply labels and x/y windows to one axes."""
    if config.xlabel:
        ax.set_xlabel(config.xlabel)
    if config.ylabel:
        ax.set_ylabel(config.ylabel)
    if config.xrange is not None:
        ax.set_xlim(*config.xrange)
    if config.yrange is not None:
        ax.set_ylim(*config.yrange)


def plot_heatmap(matrix: FloatArray, config: PlotConfig) -> Figure:
    """
    Draw a 2-D grid as a heatmap.

    Parameters
    ----------
    matrix : np.ndarray
        Grid values, shape (n_rows, n_cols); row 0 is drawn at the bottom.
    config : PlotConfig
        Title, labels and x/y/colour ranges.

    Returns
    -------
    matplotlib.figure.Figure
    """
    matrix = np.atleast_2d(np.asarray(matrix, dtype=float))
    logger.info(f"Rendering {matrix.shape[0]}x{matrix.shape[1]} heatmap")

    fig, ax = plt.subplots(figsize=(8, 6))

    vmin, vmax = config.cbrange if config.cbrange is not None else (None, None)
    image = ax.imshow(
        matrix,
        origin="lower",
        aspect="auto",
        interpolation="nearest",
        cmap="viridis",
        vmin=vmin,
        vmax=vmax,
    )
    fig.colorbar(image, ax=ax)

    _apply_axes(ax, config)
    if config.title:
        ax.set_title(config.title)

    fig.tight_layout()
    return fig


def plot_histogram(
    columns: list[FloatArray],
    config: PlotConfig,
    bins: int = 30,
    labels: list[str] | None = None,
) -> Figure:
    """
    Draw one histogram per data column, stacked vertically.

    The x range, when set, also bounds the binning so every panel shares
    the same bin edges; a reversed range still bins in ascending order.
    """
    if not columns:
        raise ValueError("No data columns to plot.")
    if bins < 1:
        raise ValueError(f"Number of bins must be positive, got {bins}.")
    if labels is not None and len(labels) != len(columns):
        raise ValueError("One label per column is required.")

    n_panels = len(columns)
    logger.info(f"Rendering histogram of {n_panels} column(s) with {bins} bins")

    fig, axes = plt.subplots(
        n_panels, 1, figsize=(8, 3 * n_panels), squeeze=False, sharex=True
    )

    hist_range = None
    if config.xrange is not None and None not in config.xrange:
        hist_range = (min(config.xrange), max(config.xrange))

    for i, values in enumerate(columns):
        ax = axes[i, 0]
        finite = np.asarray(values, dtype=float)
        finite = finite[np.isfinite(finite)]
        ax.hist(finite, bins=bins, range=hist_range, alpha=0.7, edgecolor="black")
        _apply_axes(ax, config)
        if not config.ylabel:
            ax.set_ylabel("Count")
        if labels is not None:
            ax.set_title(labels[i], fontsize=9)
        ax.grid(alpha=0.3)

    if config.title:
        fig.suptitle(config.title)

    fig.tight_layout()
    return fig


def save_or_show(fig: Figure, output: Path | None = None) -> None:
    """Save 'fig' to 'output' (.png, .pdf or .svg) or open it interactively."""
    if output is None:
        plt.show()
        return

    output = Path(output)
    if output.suffix.lower() not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported output format: {output.suffix}.")

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=300, bbox_inches="tight")
    plt.close(fig)
    logger.info(f"Saved plot to {output}")
