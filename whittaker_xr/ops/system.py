"""Assembly of the Whittaker-Eilers linear system."""
import numpy as np


def system_matrix(penalty, lmda):
    """
    Compute I + lambda * D'D.

    Args:
        penalty (numpy.array): penalty matrix D of shape (n - d, n)
        lmda (double): smoothing parameter lambda
    Returns:
        A (numpy.array): symmetric system matrix of shape (n, n)
    """
    n = penalty.shape[1]
    A = lmda * (penalty.T @ penalty)
    A[np.diag_indices(n)] += 1.0
    return A
