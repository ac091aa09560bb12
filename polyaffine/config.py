"""Library wide defaults.

The neutral values here are what the builder substitutes for axis parameters
a specification leaves out.
"""

from dataclasses import dataclass

from polyaffine.units import AngleUnit


@dataclass(frozen=True)
class AffineDefaults:
    """Defaults shared by the constructors, specifications and comparisons."""

    translate_neutral: float = 0.0
    scale_neutral: float = 1.0
    shear_neutral: float = 0.0
    angle_units: AngleUnit = AngleUnit.DEGREES
    supported_dimensions: tuple = (1, 2, 3)
    atol: float = 1e-9


# Singleton instance for use throughout the package
DEFAULTS = AffineDefaults()
