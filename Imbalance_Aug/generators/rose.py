"""
ROSE (Random OverSampling Examples).

Bootstrap draws are perturbed with Gaussian noise whose per-feature scale
follows a Silverman-type bandwidth rule. With s = 0 no noise is added and
ROSE is exactly random oversampling.
"""
import numpy as np

from ..config import DEFAULT_SEED
from ..data_loader import tablify, tablify_xy
from ..oversample import generic_oversample
from ..utils import randcols


def _feature_std(Y, X):
    # Sample std needs two columns; fall back to the class, then to zero.
    for M in (Y, X):
        if M.shape[1] > 1:
            return M.std(axis=1, ddof=1)
    return np.zeros(Y.shape[0])


def rose_per_class(X, n, rng, s=1.0):
    """
    Generate `n` new observations for one class with ROSE.

    Args:
        X: Observations of a single class, shape (n_features, n_obs).
        n: Number of observations to generate.
        rng: numpy.random.Generator.
        s: Scale of the Gaussian kernel bandwidth. 0 disables the noise.

    Returns:
        ndarray: New observations, shape (n_features, n).
    """
    Xnew = randcols(rng, X, n)
    if s == 0 or n == 0:
        return Xnew

    d, N = X.shape
    sigmas = _feature_std(Xnew, X)
    h = (4 / ((d + 2) * N)) ** (1 / (d + 4))
    scale = sigmas * s * h

    noise = rng.standard_normal(Xnew.shape)
    return Xnew + scale[:, None] * noise


def _check_s(s):
    if s < 0:
        raise ValueError(f"s must be non-negative, got {s}")


def _rose_matrix(X, y, s=0.1, ratios=None, rng=DEFAULT_SEED, verbose=False):
    _check_s(s)
    return generic_oversample(X, y, rose_per_class, ratios=ratios, rng=rng, verbose=verbose, s=s)


def rose(X, y, s=0.1, ratios=None, rng=DEFAULT_SEED, return_report=False, verbose=False):
    """
    Oversample a dataset with ROSE.

    Args:
        X: Features, one observation per row (array or DataFrame).
        y: Labels aligned with the rows of X.
        s: Proportional scale of the Gaussian kernel bandwidth (>= 0).
        ratios: None, a float, or a dict class -> multiplier of the
            majority class size.
        rng: Integer seed or numpy.random.Generator.
        return_report: Also return the OversampleReport.
        verbose: Print per-class progress.

    Returns:
        tuple: (X_resampled, y_resampled), original rows first, plus the
            report when `return_report` is set.
    """
    _check_s(s)
    if verbose:
        print(f"    Applying ROSE (s={s})...")
    Xover, yover, report = tablify(_rose_matrix, X, y, s=s, ratios=ratios, rng=rng, verbose=verbose)
    return (Xover, yover, report) if return_report else (Xover, yover)


def rose_xy(Xy, y_col, s=0.1, ratios=None, rng=DEFAULT_SEED, return_report=False):
    """ROSE for a table whose column `y_col` holds the labels."""
    Xyover, report = tablify_xy(_rose_matrix, Xy, y_col, s=s, ratios=ratios, rng=rng)
    return (Xyover, report) if return_report else Xyover
