"""
polyaffine: affine transforms (translation, scale, rotation and shear) for points in 1, 2 and 3
dimensions, represented as homogeneous matrices.

    t = polyaffine.create([
        polyaffine.Translate(3, x=1, y=2, z=3),
        polyaffine.Scale(3, x=2, y=2, z=2),
        polyaffine.RotateZ(90.0),
    ])
    polyaffine.transform(t, [4, 5, 6])   # -> [-9., 10., 15.]

As a transform is built before it is applied, the order of the operations is
reversed: the point is rotated first, then scaled, then translated.
"""

__version__ = version = "0.1.0"

# exposing the public API of the package
from polyaffine.affine_matrix import AffineMatrix
from polyaffine.creation import TransformChain, build_matrix, create
from polyaffine.errors import (
    AffineError,
    DegenerateLinearMapError,
    DegenerateTransformError,
    DimensionMismatchError,
    MalformedTransformError,
    MissingParameterError,
    SpecificationError,
    UnknownOperationKindError,
)
from polyaffine.linear_map import derive_linear_map, map_value, map_values
from polyaffine.operations import compose, multiply, transform, transform_points
from polyaffine.specs import (
    LinearMap,
    RotateX,
    RotateXY,
    RotateY,
    RotateZ,
    Scale,
    Shear,
    Translate,
    spec_from_mapping,
)
from polyaffine.transforms import (
    identity,
    rotate_x,
    rotate_xy,
    rotate_y,
    rotate_z,
    scale,
    shear,
    translate,
)
from polyaffine.units import AngleUnit, OperationKind, to_radians

__all__ = [
    "AffineMatrix",
    "TransformChain",
    "build_matrix",
    "create",
    "AffineError",
    "DegenerateLinearMapError",
    "DegenerateTransformError",
    "DimensionMismatchError",
    "MalformedTransformError",
    "MissingParameterError",
    "SpecificationError",
    "UnknownOperationKindError",
    "derive_linear_map",
    "map_value",
    "map_values",
    "compose",
    "multiply",
    "transform",
    "transform_points",
    "LinearMap",
    "RotateX",
    "RotateXY",
    "RotateY",
    "RotateZ",
    "Scale",
    "Shear",
    "Translate",
    "spec_from_mapping",
    "identity",
    "rotate_x",
    "rotate_xy",
    "rotate_y",
    "rotate_z",
    "scale",
    "shear",
    "translate",
    "AngleUnit",
    "OperationKind",
    "to_radians",
]
