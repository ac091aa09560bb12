# transforms.py
"""
Constructors for the basic transforms: translate, scale, shear and rotation
in 1, 2 or 3 dimensions.

Each function returns a fresh :class:`AffineMatrix` sized to the number of
dimensions it describes, e.g. ``translate(3.0)`` is 2x2 and
``translate(3.0, 4.0, 5.0)`` is 4x4.
"""

import numpy as np
from typing import Optional, Union
from numpy import float64 as np_float64
from polyaffine.affine_matrix import AffineMatrix
from polyaffine.config import DEFAULTS
from polyaffine.errors import DimensionMismatchError, SpecificationError
from polyaffine.kernels import (
    translation_matrix,
    scale_matrix,
    shear_matrix,
    rotation_x_matrix,
    rotation_y_matrix,
    rotation_z_matrix,
    rotation_xy_matrix,
)
from polyaffine.units import AngleUnit, to_radians

_AXES = "xyz"


def _axis_values(x, y, z, name: str) -> np.ndarray:
    if y is None and z is not None:
        raise SpecificationError(f"{name} got a z value without a y value.")
    values = tuple(v for v in (x, y, z) if v is not None)
    if len(values) not in DEFAULTS.supported_dimensions:
        raise DimensionMismatchError(
            f"{name} takes 1, 2 or 3 values, got {len(values)}.")
    return np.array(values, dtype=np_float64)


def identity(dimensions: int = 3) -> AffineMatrix:
    """Identity transform, the usual starting point for building a transform."""
    return AffineMatrix.identity(dimensions)


def translate(x: float, y: Optional[float] = None, z: Optional[float] = None) -> AffineMatrix:
    """
    Translation transform. One, two or three offsets may be given and the
    number given sets the dimensions of the result.

    Example:
        >>> translate(3.0, 4.0, 5.0).transform_point([1.0, 2.0, 3.0])
        array([4., 6., 8.])
    """
    return AffineMatrix.from_unsafe(translation_matrix(_axis_values(x, y, z, "translate")))


def scale(x: float, y: Optional[float] = None, z: Optional[float] = None) -> AffineMatrix:
    """
    Scale transform. One, two or three factors may be given and the number
    given sets the dimensions of the result.
    """
    return AffineMatrix.from_unsafe(scale_matrix(_axis_values(x, y, z, "scale")))


def shear(dimensions: int, **factors: float) -> AffineMatrix:
    """
    Shear transform for 2 or 3 dimensions.

    Factors are named by a pair of axes: ``xy=0.5`` adds half of y to x.
    Unnamed factors are zero.

    Args:
        dimensions: 2 or 3.
        **factors: any of xy, xz, yx, yz, zx, zy valid for the dimensions.

    Returns:
        AffineMatrix: the shear transform.
    """
    if dimensions not in (2, 3):
        raise DimensionMismatchError(
            f"Shear is defined for 2 or 3 dimensions, got {dimensions}.")
    axes = _AXES[:dimensions]
    coefficients = np.zeros((dimensions, dimensions), dtype=np_float64)
    for name, value in factors.items():
        if len(name) != 2 or name[0] == name[1] or name[0] not in axes or name[1] not in axes:
            raise SpecificationError(
                f"Invalid shear factor {name!r} for a {dimensions}-D shear.")
        coefficients[axes.index(name[0]), axes.index(name[1])] = value
    return AffineMatrix.from_unsafe(shear_matrix(coefficients))


def rotate_x(angle: float, units: Union[AngleUnit, str] = DEFAULTS.angle_units) -> AffineMatrix:
    """
    3-D rotation about the x axis in the counter clockwise direction.
    """
    return AffineMatrix.from_unsafe(rotation_x_matrix(to_radians(angle, units)))


def rotate_y(angle: float, units: Union[AngleUnit, str] = DEFAULTS.angle_units) -> AffineMatrix:
    """
    3-D rotation about the y axis in the counter clockwise direction.
    """
    return AffineMatrix.from_unsafe(rotation_y_matrix(to_radians(angle, units)))


def rotate_z(angle: float, units: Union[AngleUnit, str] = DEFAULTS.angle_units) -> AffineMatrix:
    """
    3-D rotation about the z axis in the counter clockwise direction.
    """
    return AffineMatrix.from_unsafe(rotation_z_matrix(to_radians(angle, units)))


def rotate_xy(angle: float, units: Union[AngleUnit, str] = DEFAULTS.angle_units) -> AffineMatrix:
    """
    2-D rotation in the xy plane in the counter clockwise direction.
    Only for 2-D transforms; the 3-D equivalent is :func:`rotate_z`.
    """
    return AffineMatrix.from_unsafe(rotation_xy_matrix(to_radians(angle, units)))
