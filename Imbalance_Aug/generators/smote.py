"""
SMOTE (Synthetic Minority Oversampling Technique).

New observations lie on the segment between a random observation and one
of its k nearest same-class neighbors.

Reference:
    N. V. Chawla, K. W. Bowyer, L. O. Hall, W. P. Kegelmeyer, "SMOTE:
    synthetic minority over-sampling technique," Journal of Artificial
    Intelligence Research, 321-357, 2002.
"""
import numbers
import warnings

import numpy as np
from sklearn.neighbors import NearestNeighbors

from ..config import DEFAULT_SEED
from ..data_loader import tablify, tablify_xy
from ..exceptions import KTooLarge, NonPositiveK, SingleObservationClass
from ..oversample import generic_oversample


def _check_k_positive(k):
    if isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise TypeError(f"k must be an integer, got {type(k).__name__}")
    if k < 1:
        raise NonPositiveK(k)


def check_k(k, n_class):
    """
    Validate the neighbor count for a class of `n_class` observations.

    Args:
        k: Requested number of neighbors.
        n_class: Number of observations in the class (> 1).

    Returns:
        int: `k`, or `n_class - 1` when `k` is too large (with a warning).

    Raises:
        NonPositiveK: If k < 1.
    """
    _check_k_positive(k)
    if k >= n_class:
        warnings.warn(KTooLarge(k, n_class), stacklevel=3)
        k = n_class - 1
    return int(k)


def knn_map(X, k):
    """
    Find the k nearest neighbors of every column of X, excluding itself.

    Args:
        X: Observations, shape (n_features, n_obs), with n_obs > k.
        k: Number of neighbors.

    Returns:
        ndarray: Integer array of shape (n_obs, k); row i holds the column
            indices of the neighbors of column i, nearest first.
    """
    nn = NearestNeighbors(n_neighbors=k + 1)
    nn.fit(X.T)
    _, indices = nn.kneighbors(X.T)
    # Exact duplicates can rank another index before the point itself.
    neighbors = np.empty((X.shape[1], k), dtype=int)
    for i, row in enumerate(indices):
        neighbors[i] = row[row != i][:k]
    return neighbors


def smote_per_class(X, n, rng, k=5):
    """
    Generate `n` new observations for one class with SMOTE.

    Args:
        X: Observations of a single class, shape (n_features, n_obs).
        n: Number of observations to generate.
        rng: numpy.random.Generator.
        k: Number of nearest neighbors to interpolate towards.

    Returns:
        ndarray: New observations, shape (n_features, n). Empty (zero
            columns) when the class has a single observation.
    """
    _check_k_positive(k)
    n_class = X.shape[1]
    if n_class == 1:
        warnings.warn(SingleObservationClass(), stacklevel=2)
        return np.empty((X.shape[0], 0))

    k = check_k(k, n_class)
    neighbors = knn_map(X, k)

    src = rng.integers(0, n_class, size=n)
    dst = neighbors[src, rng.integers(0, k, size=n)]
    r = rng.random(n)
    return (1 - r) * X[:, src] + r * X[:, dst]


def _smote_matrix(X, y, k=5, ratios=None, rng=DEFAULT_SEED, verbose=False):
    return generic_oversample(X, y, smote_per_class, ratios=ratios, rng=rng, verbose=verbose, k=k)


def smote(X, y, k=5, ratios=None, rng=DEFAULT_SEED, return_report=False, verbose=False):
    """
    Oversample a dataset with SMOTE.

    Args:
        X: Features, one observation per row (array or DataFrame).
        y: Labels aligned with the rows of X.
        k: Number of nearest neighbors. Lowered per class to n_class - 1
            when a class is too small.
        ratios: None, a float, or a dict class -> multiplier of the
            majority class size.
        rng: Integer seed or numpy.random.Generator.
        return_report: Also return the OversampleReport.
        verbose: Print per-class progress.

    Returns:
        tuple: (X_resampled, y_resampled), original rows first, plus the
            report when `return_report` is set.

    Raises:
        NonPositiveK: If k < 1.
    """
    _check_k_positive(k)
    if verbose:
        print(f"    Applying SMOTE (k={k})...")
    Xover, yover, report = tablify(_smote_matrix, X, y, k=k, ratios=ratios, rng=rng, verbose=verbose)
    return (Xover, yover, report) if return_report else (Xover, yover)


def smote_xy(Xy, y_col, k=5, ratios=None, rng=DEFAULT_SEED, return_report=False):
    """SMOTE for a table whose column `y_col` holds the labels."""
    _check_k_positive(k)
    Xyover, report = tablify_xy(_smote_matrix, Xy, y_col, k=k, ratios=ratios, rng=rng)
    return (Xyover, report) if return_report else Xyover
