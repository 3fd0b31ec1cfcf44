"""Configuration for heatmap and histogram plots."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from printable.types import AxisRange

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = {".png", ".pdf", ".svg"}

_RANGE_RE = re.compile(r"^\[?\s*(?P<low>[^:\[\]]*?)\s*:\s*(?P<high>[^:\[\]]*?)\s*\]?$")


def _parse_bound(text: str, value: str) -> float | None:
    if text in ("", "*"):
        return None
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Invalid range bound '{text}' in '{value}'.") from None


def parse_range(value: str | None) -> AxisRange | None:
    """
    Parse a gnuplot-style range: '[-90:90]', '0:10', '[*:5]'.

    An empty or '*' bound means autoscale and is returned as None. A first
    bound above the second inverts the axis, as in gnuplot.
    """
    if value is None:
        return None
    match = _RANGE_RE.match(value.strip())
    if match is None:
        raise ValueError(f"Invalid range '{value}'. Expected [min:max].")

    low = _parse_bound(match["low"], value)
    high = _parse_bound(match["high"], value)
    if low is not None and low == high:
        raise ValueError(f"Invalid range '{value}': bounds must differ.")
    return (low, high)


@dataclass
class PlotConfig:
    """Titles, labels and axis ranges shared by heatmap and histogram plots."""

    title: str = ""
    xlabel: str = ""
    ylabel: str = ""

    # Axis windows (None = autoscale)
    xrange: AxisRange | None = None
    yrange: AxisRange | None = None
    # Colour-bar window, heatmap only
    cbrange: AxisRange | None = None

    # Output (None = interactive window)
    output: Path | None = None

    def __post_init__(self):
        """Normalize paths and validate the output format."""
        if self.output is not None:
            self.output = Path(self.output)
            ext = self.output.suffix.lower()
            if ext not in SUPPORTED_FORMATS:
                raise ValueError(
                    f"Unsupported output format: {ext or '(none)'}. "
                    f"Use one of {', '.join(sorted(SUPPORTED_FORMATS))}."
                )

        logger.debug(
            f"Plot configuration: title={self.title!r}, x={self.xrange}, "
            f"y={self.yrange}, cb={self.cbrange}"
        )
