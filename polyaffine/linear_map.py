# linear_map.py
"""
1-D linear maps for remapping one coordinate space onto another.

Charting often needs part of a drawing canvas to stand for a data range. For
an x-axis showing data from 0 to 21 between pixels 143 and 200::

    t = derive_linear_map(0.0, 143.0, 21.0, 200.0)
    map_value(t, 0.0)    # 143.0
    map_value(t, 21.0)   # 200.0

The same transform can be created declaratively with
``create({"type": "linear_map", "x1_in": 0.0, "x1_out": 143.0, "x2_in": 21.0, "x2_out": 200.0})``.
"""

import logging
import numpy as np
from typing import Iterable, Union
from numpy import asarray as np_asarray
from numpy import float64 as np_float64
from polyaffine.affine_matrix import AffineMatrix
from polyaffine.creation import create
from polyaffine.errors import DimensionMismatchError
from polyaffine.specs import LinearMap

logger = logging.getLogger(__name__)


def derive_linear_map(x1_in: float, x1_out: float, x2_in: float, x2_out: float) -> AffineMatrix:
    """
    Derive the 1-D scale and translate sending x1_in to x1_out and x2_in to x2_out.

    Raises:
        DegenerateLinearMapError: if ``x1_in == x2_in``.
    """
    t = create(LinearMap(x1_in, x1_out, x2_in, x2_out))
    logger.debug(
        "Linear map (%s -> %s, %s -> %s): slope=%s intercept=%s",
        x1_in, x1_out, x2_in, x2_out, t.matrix[0, 0], t.matrix[0, 1])
    return t


def map_value(t: AffineMatrix, value: float) -> float:
    """Map a single value through a 1-D transform."""
    return t.map(value)


def map_values(t: AffineMatrix, values: Union[np.ndarray, Iterable[float]]) -> np.ndarray:
    """Map an array of values through a 1-D transform."""
    if t.dimensions != 1:
        raise DimensionMismatchError(
            f"map_values requires a 1-D transform, got a {t.dimensions}-D transform.")
    v = np_asarray(values, dtype=np_float64)
    return t.matrix[0, 0] * v + t.matrix[0, 1]
