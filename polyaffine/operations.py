# operations.py
"""
Composition and application of transforms.

Matrix multiplication is not commutative, so the order transforms are passed
to :func:`multiply` matters. Points are column vectors: in
``multiply(t1, t2)`` the right operand ``t2`` is applied to a point first.

    >>> t = multiply(translate(3.0, 4.0, 5.0), scale(2.0, 2.0, 2.0))
    >>> transform(t, [1.0, 2.0, 3.0])
    array([ 5.,  8., 11.])

Swapping the operands translates first and gives ``[8., 12., 16.]``.
Logically, the last transform multiplied is the first applied.
"""

import numpy as np
from typing import Iterable, Union
from polyaffine.affine_matrix import AffineMatrix
from polyaffine.errors import DimensionMismatchError, SpecificationError

Point = Union[np.ndarray, Iterable[float]]


def multiply(t1: AffineMatrix, t2: AffineMatrix) -> AffineMatrix:
    """Return ``t1 · t2``; ``t2`` is applied first to a point."""
    if t1.size != t2.size:
        raise DimensionMismatchError(
            f"Cannot multiply a {t1.size}x{t1.size} transform by a {t2.size}x{t2.size} transform.")
    return AffineMatrix.from_unsafe(t1.matrix @ t2.matrix)


def compose(*transforms: AffineMatrix) -> AffineMatrix:
    """
    Multiply any number of transforms left to right.

    ``compose(a, b, c)`` equals ``multiply(multiply(a, b), c)``, so ``c`` is
    applied to a point first and ``a`` last.
    """
    if not transforms:
        raise SpecificationError("compose requires at least one transform")
    result = transforms[0]
    for t in transforms[1:]:
        result = multiply(result, t)
    return result


def transform(t: AffineMatrix, point: Point) -> np.ndarray:
    """
    Transform a 1, 2 or 3 dimensional point.

    The point is lifted to homogeneous form with a trailing 1.0, multiplied
    as a column vector and the trailing coordinate is dropped again.
    """
    return t.transform_point(point)


def transform_points(t: AffineMatrix, points: Union[np.ndarray, Iterable[Point]]) -> np.ndarray:
    """Transform an (N, n) batch of points."""
    return t.transform_points(points)


# short aliases
m = multiply
t = transform
