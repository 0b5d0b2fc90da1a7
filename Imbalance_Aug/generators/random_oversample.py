"""
Random oversampling: duplicate existing observations with replacement.
"""
from ..config import DEFAULT_SEED
from ..data_loader import tablify, tablify_xy
from ..oversample import generic_oversample
from ..utils import randcols


def random_oversample_per_class(X, n, rng):
    """
    Generate `n` new observations for one class by bootstrap.

    Args:
        X: Observations of a single class, shape (n_features, n_obs).
        n: Number of observations to generate.
        rng: numpy.random.Generator.

    Returns:
        ndarray: Copies of randomly chosen columns, shape (n_features, n).
    """
    return randcols(rng, X, n)


def _random_oversample_matrix(X, y, ratios=None, rng=DEFAULT_SEED, verbose=False):
    return generic_oversample(X, y, random_oversample_per_class, ratios=ratios, rng=rng, verbose=verbose)


def random_oversample(X, y, ratios=None, rng=DEFAULT_SEED, return_report=False, verbose=False):
    """
    Naively oversample a dataset by repeating existing observations.

    Args:
        X: Features, one observation per row (array or DataFrame).
        y: Labels aligned with the rows of X.
        ratios: None to grow every class to the majority size, a float
            multiplier of the majority size, or a dict class -> multiplier.
        rng: Integer seed or numpy.random.Generator.
        return_report: Also return the OversampleReport.
        verbose: Print per-class progress.

    Returns:
        tuple: (X_resampled, y_resampled), original rows first, plus the
            report when `return_report` is set.
    """
    if verbose:
        print("    Applying random oversampling...")
    Xover, yover, report = tablify(_random_oversample_matrix, X, y, ratios=ratios, rng=rng, verbose=verbose)
    return (Xover, yover, report) if return_report else (Xover, yover)


def random_oversample_xy(Xy, y_col, ratios=None, rng=DEFAULT_SEED, return_report=False):
    """Random oversampling for a table whose column `y_col` holds the labels."""
    Xyover, report = tablify_xy(_random_oversample_matrix, Xy, y_col, ratios=ratios, rng=rng)
    return (Xyover, report) if return_report else Xyover
