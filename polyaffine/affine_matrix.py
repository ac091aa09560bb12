import numpy as np
from numpy import append as np_append
from numpy import asarray as np_asarray
from numpy import array_equal as np_array_equal
from numpy import allclose as np_allclose
from numpy import float64 as np_float64
from typing import Iterable, Union
from polyaffine.config import DEFAULTS
from polyaffine.errors import DimensionMismatchError, MalformedTransformError, DegenerateTransformError
from polyaffine.kernels import is_affine


def _freeze(matrix: np.ndarray) -> np.ndarray:
    matrix.setflags(write=False)
    return matrix


class AffineMatrix:
    """
    An immutable (n+1)x(n+1) homogeneous affine transform for n in {1, 2, 3}.

    Points are treated as column vectors, so ``a @ b`` applied to a point
    performs ``b`` first and ``a`` second.
    """
    __slots__ = ('_matrix',)
    # let ndarray @ AffineMatrix fall through to __rmatmul__
    __array_ufunc__ = None

    def __init__(self, matrix: Union[np.ndarray, Iterable]):
        matrix = np.array(matrix, dtype=np_float64)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise MalformedTransformError(
                f"Transform matrix must be square, got shape {matrix.shape}.")
        if matrix.shape[0] - 1 not in DEFAULTS.supported_dimensions:
            raise MalformedTransformError(
                f"Transform matrix must be 2x2, 3x3 or 4x4, got {matrix.shape[0]}x{matrix.shape[1]}.")
        if not is_affine(matrix):
            raise MalformedTransformError(
                f"Last row of an affine transform must be [0, ..., 0, 1], got {matrix[-1].tolist()}.")
        self._matrix = _freeze(matrix)

    @classmethod
    def identity(cls, dimensions: int = 3) -> 'AffineMatrix':
        """Create an identity transform for the given number of dimensions."""
        if dimensions not in DEFAULTS.supported_dimensions:
            raise DimensionMismatchError(
                f"Dimensions must be one of {DEFAULTS.supported_dimensions}, got {dimensions}.")
        return cls.from_unsafe(np.eye(dimensions + 1, dtype=np_float64))

    @classmethod
    def from_unsafe(cls, matrix: np.ndarray) -> 'AffineMatrix':
        """Create a transform without checking its shape or last row.

        Args:
            matrix (np.ndarray): A float64 matrix the caller no longer mutates.

        Returns:
            AffineMatrix: An instance wrapping the provided matrix.
        """
        instance = object.__new__(cls)
        instance._matrix = _freeze(matrix)
        return instance

    @property
    def matrix(self) -> np.ndarray:
        """The read-only homogeneous matrix."""
        return self._matrix

    @property
    def size(self) -> int:
        return self._matrix.shape[0]

    @property
    def dimensions(self) -> int:
        return self._matrix.shape[0] - 1

    @property
    def translation(self) -> np.ndarray:
        """
        Get the translation vector from the affine matrix.

        Returns:
            The length-n translation column.
        """
        n = self.dimensions
        return self._matrix[:n, n]

    @property
    def linear(self) -> np.ndarray:
        """
        Get the upper-left n x n linear block (rotation, scale and shear).
        """
        n = self.dimensions
        return self._matrix[:n, :n]

    def transpose(self) -> np.ndarray:
        """Return the transposed matrix. The result is not an affine transform."""
        return self._matrix.T.copy()

    def inverse(self) -> 'AffineMatrix':
        """Return the inverse of this transform."""
        try:
            inv = np.linalg.inv(self._matrix)
        except np.linalg.LinAlgError as e:
            raise DegenerateTransformError(
                "Transform is singular and cannot be inverted") from e
        return AffineMatrix.from_unsafe(inv)

    def transform_point(self, point: Union[np.ndarray, Iterable]) -> np.ndarray:
        """
        Apply this transform to a point.

        Args:
            point: length-n sequence of coordinates.

        Returns:
            The transformed length-n point.
        """
        p = np_asarray(point, dtype=np_float64)
        n = self.dimensions
        if p.shape != (n,):
            raise DimensionMismatchError(
                f"Point of shape {p.shape} cannot be transformed by a {self.size}x{self.size} transform.")
        ph = np_append(p, 1.0)
        return (self._matrix @ ph)[:n]

    def transform_points(self, points: Union[np.ndarray, Iterable]) -> np.ndarray:
        """
        Apply this transform to a batch of points.

        Args:
            points: (N, n) array of points, one per row.

        Returns:
            The transformed (N, n) array.
        """
        p = np_asarray(points, dtype=np_float64)
        n = self.dimensions
        if p.ndim != 2 or p.shape[1] != n:
            raise DimensionMismatchError(
                f"Points of shape {p.shape} cannot be transformed by a {self.size}x{self.size} transform.")
        return p @ self._matrix[:n, :n].T + self._matrix[:n, n]

    def map(self, value: float) -> float:
        """Apply a 1-D transform to a scalar value."""
        if self.dimensions != 1:
            raise DimensionMismatchError(
                f"map requires a 1-D transform, got a {self.dimensions}-D transform.")
        return float(self._matrix[0, 0] * value + self._matrix[0, 1])

    def isclose(self, other: Union['AffineMatrix', np.ndarray], atol: float = DEFAULTS.atol) -> bool:
        """Tolerant comparison against another transform or matrix."""
        other_matrix = other.matrix if isinstance(other, AffineMatrix) else np_asarray(other)
        if other_matrix.shape != self._matrix.shape:
            return False
        return bool(np_allclose(self._matrix, other_matrix, atol=atol))

    def to_list(self) -> list:
        return self._matrix.tolist()

    def __matmul__(self, other: Union['AffineMatrix', np.ndarray]) -> Union['AffineMatrix', np.ndarray]:
        if isinstance(other, AffineMatrix):
            other_matrix = other.matrix
        elif isinstance(other, np.ndarray):
            if other.ndim == 1:
                return self.transform_point(other)
            if other.shape != self._matrix.shape:
                raise DimensionMismatchError(
                    f"Cannot compose a {self.size}x{self.size} transform with a {other.shape[0]}x{other.shape[-1]} matrix.")
            other_matrix = AffineMatrix(other).matrix
        else:
            return NotImplemented

        if other_matrix.shape != self._matrix.shape:
            raise DimensionMismatchError(
                f"Cannot compose a {self.size}x{self.size} transform with a {other_matrix.shape[0]}x{other_matrix.shape[-1]} matrix.")
        return AffineMatrix.from_unsafe(self._matrix @ other_matrix)

    def __rmatmul__(self, other: np.ndarray) -> 'AffineMatrix':
        if not isinstance(other, np.ndarray):
            return NotImplemented
        if other.shape != self._matrix.shape:
            raise DimensionMismatchError(
                f"Cannot compose a {other.shape[0]}x{other.shape[-1]} matrix with a {self.size}x{self.size} transform.")
        return AffineMatrix.from_unsafe(AffineMatrix(other).matrix @ self._matrix)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._matrix.tolist()})"

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self._matrix})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, np.ndarray):
            return np_array_equal(self._matrix, other)

        elif isinstance(other, AffineMatrix):
            return np_array_equal(self._matrix, other.matrix)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # + 0.0 folds -0.0 into 0.0 so equal matrices hash alike
        return hash((self._matrix.shape, (self._matrix + 0.0).tobytes()))

    def __copy__(self) -> 'AffineMatrix':
        return self

    def __deepcopy__(self, memo) -> 'AffineMatrix':
        return self
