"""
Per-class oversampling loop shared by all generators, and its inverse.

The loop works on the features x observations layout: `X[:, j]` is the
j-th observation and `y[j]` its label. New observations are always
appended after the original ones, so the first `n_original` columns of
the result are the input itself and reverting is a truncation.
"""
import warnings
from contextlib import contextmanager
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from .config import DEFAULT_SEED
from .exceptions import OversamplingWarning
from .ratios import get_class_counts
from .utils import group_inds, rng_handler


@dataclass
class OversampleReport:
    """What an oversampling call did.

    `class_counts` and `deficits` are fixed before generation starts;
    `generated` may fall short of `deficits` when a generator cannot
    produce every requested observation (e.g. SMOTE on a single point).
    """
    class_counts: dict
    deficits: dict
    generated: dict = field(default_factory=dict)
    warnings: list = field(default_factory=list)
    n_original: int = 0

    @property
    def n_generated(self):
        return sum(self.generated.values())

    @property
    def final_counts(self):
        return {label: n + self.generated.get(label, 0) for label, n in self.class_counts.items()}

    def warnings_of(self, kind):
        """Return the collected warnings of one kind, e.g. 'KTooLarge'."""
        return [w for w in self.warnings if w.kind == kind]

    def get_summary(self):
        """Get human-readable summary."""
        lines = [f"Original: {self.n_original} observations"]
        for label, n in self.class_counts.items():
            lines.append(f"  {label!r}: {n} → {n + self.generated.get(label, 0)}")
        lines.append(f"Generated: {self.n_generated} observations")
        if self.warnings:
            lines.append(f"Warnings: {len(self.warnings)}")
        return "\n".join(lines)


@contextmanager
def _collect_warnings(records, label=None):
    """Record oversampling warnings raised in the block, then re-issue them."""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always', OversamplingWarning)
        yield
    for w in caught:
        if isinstance(w.message, OversamplingWarning):
            if w.message.label is None:
                w.message.label = label
            records.append(w.message)
        warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)


def generic_oversample(X, y, per_class_fn, ratios=None, rng=DEFAULT_SEED, verbose=False, **params):
    """Oversample every class of (X, y) with a per-class generator.

    Args:
        X: Observation matrix of shape (n_features, n_obs).
        y: Labels, length n_obs.
        per_class_fn: Callable `fn(X_class, n, rng, **params)` returning an
            array of shape (n_features, m) with m <= n.
        ratios: None, a positive float or a mapping class -> positive float.
        rng: Integer seed or numpy.random.Generator. Draws happen in order
            of first occurrence of each class.
        verbose: Print per-class progress.
        **params: Extra keyword arguments for `per_class_fn`.

    Returns:
        tuple: (Xover, yover, report) where Xover has shape
            (n_features, n_obs + report.n_generated).
    """
    rng = rng_handler(rng)
    X = np.asarray(X, dtype=float)
    y = np.asarray(y)
    if X.ndim != 2:
        raise ValueError(f"X must be 2-dimensional, got shape {X.shape}")
    if X.shape[1] != len(y):
        raise ValueError(
            f"X has {X.shape[1]} observations (columns) but y has {len(y)} labels"
        )

    collected = []
    with _collect_warnings(collected):
        deficits = get_class_counts(y, ratios)
    class_inds = group_inds(y)
    report = OversampleReport(
        class_counts={label: len(inds) for label, inds in class_inds.items()},
        deficits=dict(deficits),
        warnings=collected,
        n_original=X.shape[1],
    )

    blocks, label_blocks = [X], [y]
    for label, inds in class_inds.items():
        n = deficits[label]
        if n == 0:
            report.generated[label] = 0
            continue
        with _collect_warnings(collected, label):
            X_new = per_class_fn(X[:, inds], n, rng, **params)
        m = X_new.shape[1]
        report.generated[label] = m
        if verbose:
            print(f"    Class {label!r}: {len(inds)} → {len(inds) + m} observations")
        if m:
            blocks.append(X_new)
            label_blocks.append(np.repeat(y[inds[:1]], m))

    Xover = np.hstack(blocks)
    yover = np.concatenate(label_blocks)
    if verbose:
        print(f"    Resampled: {X.shape[1]} → {Xover.shape[1]}")
    return Xover, yover, report


def revert_oversampling(Xover, n_original, y=None, axis=0):
    """Drop the observations added by an oversampling call.

    Args:
        Xover: Oversampled data. Arrays and DataFrames are truncated along
            `axis` (0 for one observation per row, 1 for per column).
        n_original: Number of original observations (the revert cache).
        y: Optional oversampled labels to truncate as well.
        axis: Observation axis of Xover.

    Returns:
        The first `n_original` observations of Xover, or a tuple
        (X, y) when `y` is given.
    """
    if n_original < 0:
        raise ValueError(f"n_original must be non-negative, got {n_original}")
    if isinstance(Xover, (pd.DataFrame, pd.Series)):
        X = Xover.iloc[:n_original] if axis == 0 else Xover.iloc[:, :n_original]
    else:
        Xover = np.asarray(Xover)
        X = Xover[:n_original] if axis == 0 else Xover[:, :n_original]
    if y is None:
        return X
    if isinstance(y, pd.Series):
        return X, y.iloc[:n_original]
    return X, np.asarray(y)[:n_original]
