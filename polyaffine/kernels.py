# kernels.py
import math
import numpy as np
from numba import njit
from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)


@njit(cache=True)
def translation_matrix(offsets: np.ndarray) -> np.ndarray:
    """
    Build an (n+1)x(n+1) translation matrix.

    Parameters:
        offsets (ndarray): length-n float64 array of per-axis offsets.

    Returns:
        ndarray: identity with the offsets placed in the last column.
    """
    n = offsets.shape[0]
    m = np.eye(n + 1)
    for i in range(n):
        m[i, n] = offsets[i]
    return m


@njit(cache=True)
def scale_matrix(factors: np.ndarray) -> np.ndarray:
    """
    Build an (n+1)x(n+1) scale matrix.

    Parameters:
        factors (ndarray): length-n float64 array of per-axis scale factors.

    Returns:
        ndarray: identity with the factors placed on the leading diagonal.
    """
    n = factors.shape[0]
    m = np.eye(n + 1)
    for i in range(n):
        m[i, i] = factors[i]
    return m


@njit(cache=True)
def shear_matrix(coefficients: np.ndarray) -> np.ndarray:
    """
    Build an (n+1)x(n+1) shear matrix from an n x n coefficient block.

    Entry [i, j] (i != j) is how much coordinate j is added to coordinate i.
    The diagonal of `coefficients` is ignored and forced to one.
    """
    n = coefficients.shape[0]
    m = np.eye(n + 1)
    for i in range(n):
        for j in range(n):
            if i != j:
                m[i, j] = coefficients[i, j]
    return m


@njit(cache=True)
def rotation_x_matrix(radians: float) -> np.ndarray:
    """Counter clockwise rotation about the x axis (4x4)."""
    s = math.sin(radians)
    c = math.cos(radians)
    m = np.eye(4)
    m[1, 1] = c
    m[1, 2] = -s
    m[2, 1] = s
    m[2, 2] = c
    return m


@njit(cache=True)
def rotation_y_matrix(radians: float) -> np.ndarray:
    """Counter clockwise rotation about the y axis (4x4)."""
    s = math.sin(radians)
    c = math.cos(radians)
    m = np.eye(4)
    m[0, 0] = c
    m[0, 2] = s
    m[2, 0] = -s
    m[2, 2] = c
    return m


@njit(cache=True)
def rotation_z_matrix(radians: float) -> np.ndarray:
    """Counter clockwise rotation about the z axis (4x4)."""
    s = math.sin(radians)
    c = math.cos(radians)
    m = np.eye(4)
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c
    return m


@njit(cache=True)
def rotation_xy_matrix(radians: float) -> np.ndarray:
    """Counter clockwise rotation in the xy plane (3x3, 2-D only)."""
    s = math.sin(radians)
    c = math.cos(radians)
    m = np.eye(3)
    m[0, 0] = c
    m[0, 1] = -s
    m[1, 0] = s
    m[1, 1] = c
    return m


@njit(cache=True)
def is_affine(matrix: np.ndarray) -> bool:
    """True when the last row is exactly [0, ..., 0, 1]."""
    n = matrix.shape[0] - 1
    for j in range(n):
        if matrix[n, j] != 0.0:
            return False
    return matrix[n, n] == 1.0
