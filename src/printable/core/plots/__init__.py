"""Heatmap and histogram rendering of precomputed data files."""

from .config import PlotConfig, parse_range
from .visualization import plot_heatmap, plot_histogram, save_or_show

__all__ = ["PlotConfig", "parse_range", "plot_heatmap", "plot_histogram", "save_or_show"]
