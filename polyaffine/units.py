import math
from enum import Enum
from typing import Union
from polyaffine.errors import SpecificationError


class AngleUnit(Enum):
    DEGREES = "degrees"
    RADIANS = "radians"


class OperationKind(Enum):
    TRANSLATE = "translate"
    SCALE = "scale"
    ROTATE_X = "rotate_x"
    ROTATE_Y = "rotate_y"
    ROTATE_Z = "rotate_z"
    ROTATE_XY = "rotate_xy"
    SHEAR = "shear"
    LINEAR_MAP = "linear_map"


def as_angle_unit(units: Union[AngleUnit, str]) -> AngleUnit:
    """Accept an AngleUnit or its string value ("degrees" / "radians")."""
    if isinstance(units, AngleUnit):
        return units
    try:
        return AngleUnit(str(units).lower())
    except ValueError:
        raise SpecificationError(
            f"Invalid angle units {units!r}, expected 'degrees' or 'radians'") from None


def to_radians(angle: float, units: Union[AngleUnit, str] = AngleUnit.DEGREES) -> float:
    """Normalize an angle to radians."""
    if as_angle_unit(units) is AngleUnit.DEGREES:
        return angle / 180.0 * math.pi
    return angle
