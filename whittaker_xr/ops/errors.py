"""Exceptions raised by the smoothing operations."""


class SmoothingError(ValueError):
    """Base class for all smoothing failures."""


class PenaltyMatrixError(SmoothingError):
    """Penalty matrix could not be built from the given inputs."""


class InvalidOrderError(PenaltyMatrixError):
    """Difference order is smaller than 1."""


class SpacingLengthError(PenaltyMatrixError):
    """Spacing and data have different lengths."""


class InsufficientDataError(PenaltyMatrixError):
    """Fewer samples than the difference order."""


class InvalidSpacingError(PenaltyMatrixError):
    """Spacing contains zero, negative or non-finite values."""


class SolveError(SmoothingError):
    """Linear system (I + lambda * D'D) could not be solved."""
