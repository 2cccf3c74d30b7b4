"""Whittaker-Eilers smoother with arbitrary difference order and spacing."""
import logging
from typing import Optional, Sequence
from warnings import warn

import numpy as np

from .errors import SolveError
from .penalty import penalty_matrix
from .system import system_matrix

log = logging.getLogger(__name__)


def smooth(
    data: Sequence[float],
    lmda: float,
    order: int,
    spacing: Optional[Sequence[float]] = None,
) -> np.ndarray:
    """
    Whittaker-Eilers smoother.

    Solves (I + lambda * D'D) z = y with D the ``order``-th difference matrix,
    adjusted for the sample spacing. Larger lambda values give smoother output,
    lambda 0 returns the data unchanged.
    References:
    - Eilers, A perfect smoother, https://doi.org/10.1021/ac034173t

    Args:
        data: raw data (1d)
        lmda: smoothing parameter lambda, expected >= 0
        order: order of the differences, at least 1 and at most len(data)
        spacing: per sample spacing (1d, same length as data). None or empty
            for equally spaced data.
    Returns:
        Smoothed data array z (1d, float64)
    Raises:
        PenaltyMatrixError: if order, spacing or data length are invalid
        SolveError: if the linear system cannot be solved
    """
    y = np.asarray(data, dtype="float64")
    if y.ndim != 1:
        raise ValueError(f"data must be 1-dimensional, got {y.ndim} dimensions")

    n = y.shape[0]

    if spacing is None or len(spacing) == 0:
        spacing = np.ones(n)

    if lmda < 0:
        warn(f"Smoothing with negative lambda ({lmda}), the system may be singular!")

    D = penalty_matrix(y, spacing, order)
    A = system_matrix(D, lmda)

    if not np.isfinite(A).all():
        raise SolveError(
            f"failed to solve the system: non-finite system matrix (lambda={lmda})"
        )

    try:
        z = np.linalg.solve(A, y)
    except np.linalg.LinAlgError as err:
        raise SolveError(f"failed to solve the system: {err}") from err

    log.debug("Solved %dx%d system with lambda=%s", n, n, lmda)
    return z


def roughness(z: Sequence[float], order: int) -> float:
    """Sum of squared differences of the given order."""
    return float(np.sum(np.diff(np.asarray(z, dtype="float64"), n=order) ** 2))
