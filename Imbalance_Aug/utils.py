"""
Shared helpers: random generator handling, label grouping and column sampling.

Observation matrices handled here are laid out features x observations,
i.e. every column is one observation.
"""
import numbers

import numpy as np


def rng_handler(rng):
    """Normalize a seed or generator into a numpy Generator.

    Args:
        rng: Integer seed or an existing numpy.random.Generator.

    Returns:
        numpy.random.Generator: A fresh generator seeded with `rng`, or
            `rng` itself when it already is a generator.

    Raises:
        TypeError: If `rng` is neither an integer nor a Generator.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, numbers.Integral) and not isinstance(rng, bool):
        return np.random.default_rng(int(rng))
    raise TypeError(
        f"rng must be an integer seed or a numpy.random.Generator, got {type(rng).__name__}"
    )


def group_inds(y):
    """Group observation positions by label.

    Args:
        y: Sequence of hashable labels.

    Returns:
        dict: Label -> list of positions in ascending order. Labels appear
            in order of first occurrence.
    """
    groups = {}
    for i, label in enumerate(y):
        groups.setdefault(label, []).append(i)
    return groups


def group_lens(y):
    """Count observations per label (first-occurrence order)."""
    return {label: len(inds) for label, inds in group_inds(y).items()}


def randcols(rng, X, n):
    """Draw `n` columns of X uniformly at random with replacement.

    Args:
        rng: numpy.random.Generator.
        X: Matrix of shape (n_features, n_obs).
        n: Number of columns to draw.

    Returns:
        ndarray: Copies of the drawn columns, shape (n_features, n).
    """
    inds = rng.integers(0, X.shape[1], size=n)
    return X[:, inds]
