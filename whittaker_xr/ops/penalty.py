"""Finite difference penalty matrix for the Whittaker-Eilers smoother."""
import logging

import numpy as np
from numba import njit

from .errors import (
    InsufficientDataError,
    InvalidOrderError,
    InvalidSpacingError,
    SpacingLengthError,
)

log = logging.getLogger(__name__)


@njit
def binomial_row(d):
    """
    Row ``d`` of Pascal's triangle.

    Args:
        d (int): order, expected >= 1
    Returns:
        row (numpy.array): binomial coefficients C(d, 0) ... C(d, d) as float64
    """
    row = np.ones(d + 1)
    for k in range(1, d):
        for j in range(k, 0, -1):
            row[j] += row[j - 1]
    return row


@njit
def _fill_penalty(spacing, d):
    n = spacing.shape[0]
    coefs = binomial_row(d)
    D = np.zeros((n - d, n))

    for i in range(n - d):
        for j in range(d + 1):
            penalty = coefs[j]
            if j % 2 == 1:
                penalty = -penalty
            # interior terms follow the local sampling density
            if 0 < j < d:
                penalty *= spacing[i + j - 1] / spacing[i + j]
            D[i, i + j] = penalty

    return D


def penalty_matrix(data, spacing, order):
    """
    Build the spacing adjusted difference matrix D.

    Row ``i`` holds the signed binomial coefficients of the ``order``-th
    difference at columns ``i .. i + order``. Interior coefficients are scaled
    by ``spacing[i + j - 1] / spacing[i + j]``.

    Args:
        data (numpy.array): data to be smoothed (1d), only its length is used
        spacing (numpy.array): per sample spacing (1d, same length as data)
        order (int): order of the differences
    Returns:
        D (numpy.array): penalty matrix of shape (n - order, n)
    """
    if order < 1:
        raise InvalidOrderError(f"order must be at least 1, got {order}")

    n = len(data)
    spacing = np.ascontiguousarray(spacing, dtype="float64")

    if spacing.ndim != 1 or spacing.shape[0] != n:
        raise SpacingLengthError(
            f"spacing must be the same length as data ({spacing.size} != {n})"
        )

    if n < order:
        raise InsufficientDataError(
            f"data must be at least as long as order ({n} < {order})"
        )

    if not (np.isfinite(spacing).all() and (spacing > 0).all()):
        raise InvalidSpacingError("spacing values must be finite and positive")

    D = _fill_penalty(spacing, int(order))
    log.debug("Built penalty matrix of shape %s for order %d", D.shape, order)
    return D
