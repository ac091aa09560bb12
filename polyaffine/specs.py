# specs.py
"""
Operation specifications consumed by :func:`polyaffine.create`.

Each kind of operation is a small frozen dataclass carrying only the fields
that kind needs. Axis parameters that are left out take the neutral value for
the operation (0 for translate and shear, 1 for scale), so
``Translate(1, x=5.0)`` is a 1-D translation by five.

The keyword style records of earlier versions of this library are still
accepted through :func:`spec_from_mapping`::

    spec_from_mapping({"type": "scale", "dimensions": 2, "x": 2.0})
"""

import numbers
from dataclasses import dataclass, fields, MISSING
from typing import Any, ClassVar, Dict, Mapping, Tuple, Union
from polyaffine.config import DEFAULTS
from polyaffine.errors import (
    DegenerateLinearMapError,
    MissingParameterError,
    SpecificationError,
    UnknownOperationKindError,
)
from polyaffine.units import AngleUnit, OperationKind, as_angle_unit

_AXES = ("x", "y", "z")
_SHEAR_3D_ONLY = ("xz", "yz", "zx", "zy")


def _check_dimensions(spec, allowed: Tuple[int, ...]) -> None:
    dimensions = spec.dimensions
    if isinstance(dimensions, bool) or not isinstance(dimensions, numbers.Integral) or dimensions not in allowed:
        raise SpecificationError(
            f"{spec.kind.value} supports dimensions {allowed}, got {spec.dimensions!r}")


def _check_unused_axes(spec, names, neutral: float) -> None:
    for name in names:
        if getattr(spec, name) != neutral:
            raise SpecificationError(
                f"{spec.kind.value} parameter {name!r} is not valid for {spec.dimensions} dimensions")


@dataclass(frozen=True, slots=True)
class Translate:
    dimensions: int
    x: float = DEFAULTS.translate_neutral
    y: float = DEFAULTS.translate_neutral
    z: float = DEFAULTS.translate_neutral

    kind: ClassVar[OperationKind] = OperationKind.TRANSLATE

    def __post_init__(self):
        _check_dimensions(self, DEFAULTS.supported_dimensions)
        _check_unused_axes(self, _AXES[self.dimensions:], DEFAULTS.translate_neutral)

    @property
    def offsets(self) -> Tuple[float, ...]:
        return (self.x, self.y, self.z)[:self.dimensions]


@dataclass(frozen=True, slots=True)
class Scale:
    dimensions: int
    x: float = DEFAULTS.scale_neutral
    y: float = DEFAULTS.scale_neutral
    z: float = DEFAULTS.scale_neutral

    kind: ClassVar[OperationKind] = OperationKind.SCALE

    def __post_init__(self):
        _check_dimensions(self, DEFAULTS.supported_dimensions)
        _check_unused_axes(self, _AXES[self.dimensions:], DEFAULTS.scale_neutral)

    @property
    def factors(self) -> Tuple[float, ...]:
        return (self.x, self.y, self.z)[:self.dimensions]


@dataclass(frozen=True, slots=True)
class _Rotation:
    angle: float
    units: AngleUnit = DEFAULTS.angle_units

    def __post_init__(self):
        # accept "degrees" / "radians" as well as the enum
        object.__setattr__(self, "units", as_angle_unit(self.units))


@dataclass(frozen=True, slots=True)
class RotateX(_Rotation):
    kind: ClassVar[OperationKind] = OperationKind.ROTATE_X
    dimensions: ClassVar[int] = 3


@dataclass(frozen=True, slots=True)
class RotateY(_Rotation):
    kind: ClassVar[OperationKind] = OperationKind.ROTATE_Y
    dimensions: ClassVar[int] = 3


@dataclass(frozen=True, slots=True)
class RotateZ(_Rotation):
    kind: ClassVar[OperationKind] = OperationKind.ROTATE_Z
    dimensions: ClassVar[int] = 3


@dataclass(frozen=True, slots=True)
class RotateXY(_Rotation):
    kind: ClassVar[OperationKind] = OperationKind.ROTATE_XY
    dimensions: ClassVar[int] = 2


@dataclass(frozen=True, slots=True)
class Shear:
    """Shear in 2 or 3 dimensions. ``xy`` is how much of y is added to x."""
    dimensions: int
    xy: float = DEFAULTS.shear_neutral
    xz: float = DEFAULTS.shear_neutral
    yx: float = DEFAULTS.shear_neutral
    yz: float = DEFAULTS.shear_neutral
    zx: float = DEFAULTS.shear_neutral
    zy: float = DEFAULTS.shear_neutral

    kind: ClassVar[OperationKind] = OperationKind.SHEAR

    def __post_init__(self):
        _check_dimensions(self, (2, 3))
        if self.dimensions == 2:
            _check_unused_axes(self, _SHEAR_3D_ONLY, DEFAULTS.shear_neutral)

    @property
    def factors(self) -> Dict[str, float]:
        names = ("xy", "yx") if self.dimensions == 2 else ("xy", "xz", "yx", "yz", "zx", "zy")
        return {name: getattr(self, name) for name in names}


@dataclass(frozen=True, slots=True)
class LinearMap:
    """
    A 1-D scale and translate that sends ``x1_in`` to ``x1_out`` and
    ``x2_in`` to ``x2_out``. Used to remap e.g. a data range onto a range of
    pixels on a drawing canvas.
    """
    x1_in: float
    x1_out: float
    x2_in: float
    x2_out: float

    kind: ClassVar[OperationKind] = OperationKind.LINEAR_MAP
    dimensions: ClassVar[int] = 1

    def expand(self) -> Tuple[Translate, Scale]:
        """
        The translate and scale this map is made of, in builder order, so
        the scale is applied first and the result is ``slope * x + intercept``.
        """
        if self.x1_in == self.x2_in:
            raise DegenerateLinearMapError(
                f"Linear map needs two distinct input coordinates, got {self.x1_in!r} twice")
        slope = (self.x2_out - self.x1_out) / (self.x2_in - self.x1_in)
        intercept = self.x2_out - slope * self.x2_in
        return Translate(1, x=intercept), Scale(1, x=slope)


OperationSpec = Union[Translate, Scale, RotateX, RotateY, RotateZ, RotateXY, Shear, LinearMap]

SPEC_TYPES = {
    OperationKind.TRANSLATE: Translate,
    OperationKind.SCALE: Scale,
    OperationKind.ROTATE_X: RotateX,
    OperationKind.ROTATE_Y: RotateY,
    OperationKind.ROTATE_Z: RotateZ,
    OperationKind.ROTATE_XY: RotateXY,
    OperationKind.SHEAR: Shear,
    OperationKind.LINEAR_MAP: LinearMap,
}


def spec_from_mapping(mapping: Mapping[str, Any]) -> OperationSpec:
    """
    Build a specification from a keyword style record.

    The operation is named by ``"type"`` (or ``"kind"``); the remaining keys
    are the fields of the matching specification class. A ``"dimensions"``
    key on a fixed dimension kind (rotations, linear_map) must agree with it.

    Raises:
        UnknownOperationKindError: the kind is not a known operation.
        MissingParameterError: the kind or a required field is absent.
        SpecificationError: an unexpected key or invalid value was given.
    """
    params = dict(mapping)
    kind_name = params.pop("type", None)
    alias = params.pop("kind", None)
    if kind_name is None:
        kind_name = alias
    if kind_name is None:
        raise MissingParameterError(
            "Specification is missing its operation 'type'")
    try:
        kind = kind_name if isinstance(kind_name, OperationKind) else OperationKind(kind_name)
    except ValueError:
        raise UnknownOperationKindError(
            f"Unknown operation kind {kind_name!r}") from None

    cls = SPEC_TYPES[kind]
    field_map = {f.name: f for f in fields(cls)}

    if "dimensions" in params and "dimensions" not in field_map:
        dimensions = params.pop("dimensions")
        if dimensions != cls.dimensions:
            raise SpecificationError(
                f"{kind.value} is a {cls.dimensions}-D operation, got dimensions={dimensions!r}")

    unexpected = sorted(set(params) - set(field_map))
    if unexpected:
        raise SpecificationError(
            f"Unexpected parameters for {kind.value}: {', '.join(map(str, unexpected))}")

    missing = [name for name, f in field_map.items()
               if f.default is MISSING and name not in params]
    if missing:
        raise MissingParameterError(
            f"{kind.value} is missing required parameters: {', '.join(missing)}")

    return cls(**params)
