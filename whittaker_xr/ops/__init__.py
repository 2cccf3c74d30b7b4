"""Whittaker-Eilers smoothing operations."""
from .errors import (
    InsufficientDataError,
    InvalidOrderError,
    InvalidSpacingError,
    PenaltyMatrixError,
    SmoothingError,
    SolveError,
    SpacingLengthError,
)
from .penalty import binomial_row, penalty_matrix
from .smooth import roughness, smooth
from .system import system_matrix

__all__ = (
    "InsufficientDataError",
    "InvalidOrderError",
    "InvalidSpacingError",
    "PenaltyMatrixError",
    "SmoothingError",
    "SolveError",
    "SpacingLengthError",
    "binomial_row",
    "penalty_matrix",
    "roughness",
    "smooth",
    "system_matrix",
)
