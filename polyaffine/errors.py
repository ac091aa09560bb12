"""Exceptions raised by polyaffine.

Every exception derives from :class:`AffineError` and also from the builtin
that numpy based code would normally raise for the same condition, so callers
catching ``ValueError`` or ``ZeroDivisionError`` keep working.
"""


class AffineError(Exception):
    """Base class for all polyaffine errors."""


class DimensionMismatchError(AffineError, ValueError):
    """A point or transform does not have the size the operation requires."""


class MalformedTransformError(AffineError, ValueError):
    """A matrix is not a valid homogeneous affine transform."""


class SpecificationError(AffineError, ValueError):
    """An operation specification cannot be turned into a transform."""


class UnknownOperationKindError(SpecificationError):
    """The specification names an operation kind that does not exist."""


class MissingParameterError(SpecificationError):
    """A required specification parameter was not supplied."""


class DegenerateLinearMapError(AffineError, ZeroDivisionError):
    """Both input coordinates of a linear map are equal."""


class DegenerateTransformError(AffineError, ZeroDivisionError):
    """The transform is singular and cannot be inverted."""
