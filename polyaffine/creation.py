# creation.py
"""
Declarative construction of composite transforms.

A list of operation specifications is folded into one transform. The first
operation in the list is applied to a point LAST, matching the "last
multiplied is first applied" rule of :func:`polyaffine.multiply`::

    t = create([
        Translate(3, x=1, y=2, z=3),
        Scale(3, x=2, y=2, z=2),
        RotateZ(90.0),
    ])
    transform(t, [4, 5, 6])   # rotate, then scale, then translate -> [-9, 10, 15]
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Sequence, Tuple, Union
from polyaffine import transforms
from polyaffine.affine_matrix import AffineMatrix
from polyaffine.config import DEFAULTS
from polyaffine.errors import DimensionMismatchError, SpecificationError, UnknownOperationKindError
from polyaffine.operations import multiply
from polyaffine.specs import (
    LinearMap,
    OperationSpec,
    RotateX,
    RotateXY,
    RotateY,
    RotateZ,
    Scale,
    Shear,
    Translate,
    spec_from_mapping,
)
from polyaffine.units import AngleUnit

logger = logging.getLogger(__name__)

SpecLike = Union[OperationSpec, Mapping]


def as_spec(spec: SpecLike) -> OperationSpec:
    """Return `spec` as a specification object, parsing keyword style records."""
    if isinstance(spec, Mapping):
        return spec_from_mapping(spec)
    if isinstance(spec, (Translate, Scale, RotateX, RotateY, RotateZ, RotateXY, Shear, LinearMap)):
        return spec
    raise UnknownOperationKindError(
        f"Cannot build a transform from {type(spec).__name__!r}")


def build_matrix(spec: SpecLike) -> AffineMatrix:
    """
    Build the transform for a single specification.

    Raises:
        UnknownOperationKindError: `spec` is not a known specification.
        DegenerateLinearMapError: a linear map with equal input coordinates.
    """
    spec = as_spec(spec)
    if isinstance(spec, Translate):
        return transforms.translate(*spec.offsets)
    elif isinstance(spec, Scale):
        return transforms.scale(*spec.factors)
    elif isinstance(spec, RotateX):
        return transforms.rotate_x(spec.angle, spec.units)
    elif isinstance(spec, RotateY):
        return transforms.rotate_y(spec.angle, spec.units)
    elif isinstance(spec, RotateZ):
        return transforms.rotate_z(spec.angle, spec.units)
    elif isinstance(spec, RotateXY):
        return transforms.rotate_xy(spec.angle, spec.units)
    elif isinstance(spec, Shear):
        return transforms.shear(spec.dimensions, **spec.factors)
    elif isinstance(spec, LinearMap):
        return _fold(spec.expand(), 1)
    else:
        raise UnknownOperationKindError(
            f"Cannot build a transform from {type(spec).__name__!r}")


def _fold(specs: Sequence[OperationSpec], dimensions: int) -> AffineMatrix:
    acc = AffineMatrix.identity(dimensions)
    for spec in reversed(specs):
        if spec.dimensions != dimensions:
            raise DimensionMismatchError(
                f"{spec.kind.value} is {spec.dimensions}-D but the transform being built is {dimensions}-D")
        acc = multiply(build_matrix(spec), acc)
    return acc


def create(specs: Union[SpecLike, Iterable[SpecLike]]) -> AffineMatrix:
    """
    Create a transform from one specification or an ordered list of them.

    The dimensions of the result come from the first specification and every
    other specification must match. Folding is
    ``spec1 · (spec2 · (... · specN))``, so specN is applied to a point first.

    Args:
        specs: a specification, a keyword style mapping, or a sequence of
            either.

    Returns:
        AffineMatrix: the composite transform.
    """
    if isinstance(specs, Mapping) or not isinstance(specs, Iterable):
        specs = [specs]
    parsed = [as_spec(s) for s in specs]
    if not parsed:
        raise SpecificationError("create requires at least one specification")

    dimensions = parsed[0].dimensions
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Building %d-D transform from %s",
            dimensions, [s.kind.value for s in parsed])
    return _fold(parsed, dimensions)


class TransformChain:
    """
    Builds a transform one operation at a time.

        t = (TransformChain(3)
             .translate(1, 2, 3)
             .scale(2, 2, 2)
             .rotate_z(90.0)
             .generate())

    As with :func:`create`, the operations are applied to a point in the
    reverse of the order they were appended. Every method returns a new
    chain; a chain is never modified.
    """
    __slots__ = ('_dimensions', '_chain')

    def __init__(self, dimensions: int = 3, chain: Tuple[OperationSpec, ...] = ()):
        self._dimensions = dimensions
        self._chain = tuple(chain)

    @classmethod
    def identity(cls, dimensions: int = 3) -> "TransformChain":
        return cls(dimensions)

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def specs(self) -> Tuple[OperationSpec, ...]:
        return self._chain

    def append(self, spec: SpecLike) -> "TransformChain":
        """Return a new chain with `spec` appended."""
        spec = as_spec(spec)
        if spec.dimensions != self._dimensions:
            raise DimensionMismatchError(
                f"Cannot append a {spec.dimensions}-D {spec.kind.value} to a {self._dimensions}-D chain")
        return TransformChain(self._dimensions, self._chain + (spec,))

    def translate(self, x: float = DEFAULTS.translate_neutral, y: float = DEFAULTS.translate_neutral, z: float = DEFAULTS.translate_neutral) -> "TransformChain":
        return self.append(Translate(self._dimensions, x=x, y=y, z=z))

    def scale(self, x: float = DEFAULTS.scale_neutral, y: float = DEFAULTS.scale_neutral, z: float = DEFAULTS.scale_neutral) -> "TransformChain":
        return self.append(Scale(self._dimensions, x=x, y=y, z=z))

    def shear(self, **factors: float) -> "TransformChain":
        return self.append(Shear(self._dimensions, **factors))

    def rotate_x(self, angle: float, units: Union[AngleUnit, str] = DEFAULTS.angle_units) -> "TransformChain":
        return self.append(RotateX(angle, units))

    def rotate_y(self, angle: float, units: Union[AngleUnit, str] = DEFAULTS.angle_units) -> "TransformChain":
        return self.append(RotateY(angle, units))

    def rotate_z(self, angle: float, units: Union[AngleUnit, str] = DEFAULTS.angle_units) -> "TransformChain":
        return self.append(RotateZ(angle, units))

    def rotate_xy(self, angle: float, units: Union[AngleUnit, str] = DEFAULTS.angle_units) -> "TransformChain":
        return self.append(RotateXY(angle, units))

    def generate(self) -> AffineMatrix:
        """Fold the chain into a single transform."""
        if not self._chain:
            return AffineMatrix.identity(self._dimensions)
        return create(self._chain)

    def transform(self, point: Any):
        """Generate the transform and apply it to `point`."""
        return self.generate().transform_point(point)

    def __len__(self) -> int:
        return len(self._chain)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._dimensions}, {list(self._chain)!r})"
