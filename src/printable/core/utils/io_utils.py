from collections.abc import Sequence
from pathlib import Path

import numpy as np

from printable.core.utils.log_utils import log
from printable.types import FloatArray


def _load_table(path: Path) -> FloatArray:
    """Read a whitespace-separated numeric table, '#' starting a comment."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Data file {path} not found.")

    try:
        data = np.loadtxt(path, comments="#", ndmin=2, dtype=float)
    except ValueError as err:
        raise ValueError(f"Could not parse numeric data in {path}: {err}") from err

    if data.size == 0:
        raise ValueError(f"Data file {path} is empty.")
    log.debug(f"Loaded {data.shape[0]}x{data.shape[1]} table from {path}")
    return data


def load_matrix(path: Path) -> FloatArray:
    """
    Load a precomputed 2-D grid (one row per line) for heatmap rendering.
    """
    return _load_table(path)


def load_columns(path: Path, columns: Sequence[int] | None = None) -> list[FloatArray]:
    """
    Load selected columns from a data file such as ``poses.dat``
    (``roll pitch yaw`` per line).

    Parameters
    ----------
    path : Path
        Whitespace-separated data file.
    columns : sequence of int, optional
        Zero-based column indices. All columns when empty or None.

    Returns
    -------
    list of np.ndarray
        One 1-D array per selected column, in the requested order.
    """
    data = _load_table(path)
    n_cols = data.shape[1]

    if not columns:
        columns = list(range(n_cols))

    bad = [c for c in columns if not 0 <= c < n_cols]
    if bad:
        raise ValueError(
            f"Column index out of range {bad}: {path} has {n_cols} column(s)."
        )
    return [data[:, c] for c in columns]
