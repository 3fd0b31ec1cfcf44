# src/printable/types.py

from typing import Any

import numpy as np
from numpy.typing import NDArray

FloatArray = NDArray[np.floating[Any]]
AxisRange = tuple[float | None, float | None]
