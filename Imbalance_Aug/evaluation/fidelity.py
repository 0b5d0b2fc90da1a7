"""
Distributional fidelity of oversampled classes.

Each class's synthetic block is compared to the real observations of the
same class: per-feature two-sample distances (KS, Wasserstein) and the
Distance-to-Closest-Real of every synthetic row.
"""
import numpy as np
from scipy.stats import ks_2samp, wasserstein_distance
from sklearn.neighbors import NearestNeighbors

from ..utils import group_inds

DCR_KEYS = ('mean_dcr', 'median_dcr', 'min_dcr', 'pct_exact_copies')


def feature_distances(real, synthetic):
    """
    Per-feature two-sample distances, averaged over features.

    Args:
        real: Real rows, shape (n_real, n_features).
        synthetic: Synthetic rows, shape (n_synth, n_features).

    Returns:
        dict: 'ks_statistic', 'ks_pvalue' and 'wasserstein'; NaN when
            either side is empty.
    """
    real = np.asarray(real, dtype=float)
    synthetic = np.asarray(synthetic, dtype=float)
    if len(real) == 0 or len(synthetic) == 0:
        return {'ks_statistic': np.nan, 'ks_pvalue': np.nan, 'wasserstein': np.nan}

    tests = [ks_2samp(r, s) for r, s in zip(real.T, synthetic.T)]
    return {
        'ks_statistic': float(np.mean([t.statistic for t in tests])),
        'ks_pvalue': float(np.mean([t.pvalue for t in tests])),
        'wasserstein': float(np.mean([wasserstein_distance(r, s) for r, s in zip(real.T, synthetic.T)])),
    }


def dcr_statistics(real, synthetic):
    """
    Distance from every synthetic row to its closest real row.

    A bootstrap copy has distance 0, so `pct_exact_copies` is 100 for
    plain random oversampling.

    Returns:
        dict: 'mean_dcr', 'median_dcr', 'min_dcr' and 'pct_exact_copies'.
    """
    if len(real) == 0 or len(synthetic) == 0:
        return dict.fromkeys(DCR_KEYS, np.nan)
    dist, _ = NearestNeighbors(n_neighbors=1).fit(real).kneighbors(synthetic)
    dist = dist[:, 0]
    values = (dist.mean(), np.median(dist), dist.min(), 100 * np.mean(dist == 0.0))
    return {key: float(v) for key, v in zip(DCR_KEYS, values)}


def per_class_fidelity(X_resampled, y_resampled, n_original):
    """
    Compare every class's synthetic rows to its original rows.

    Relies on the originals-first layout of the oversampling output: the
    first `n_original` rows are real, the rest synthetic.

    Args:
        X_resampled: Oversampled features, shape (n_total, n_features).
        y_resampled: Oversampled labels.
        n_original: Number of original rows.

    Returns:
        dict: Class -> dict with 'n_real', 'n_synthetic', 'ks_statistic',
            'wasserstein' and the DCR statistics. Classes without
            synthetic rows are left out.
    """
    X = np.asarray(X_resampled, dtype=float)
    y = np.asarray(y_resampled)
    X_real, X_synth = X[:n_original], X[n_original:]
    real_inds = group_inds(y[:n_original])

    results = {}
    for label, inds in group_inds(y[n_original:]).items():
        real = X_real[real_inds.get(label, [])]
        synth = X_synth[inds]
        distances = feature_distances(real, synth)
        results[label] = {
            'n_real': len(real),
            'n_synthetic': len(synth),
            'ks_statistic': distances['ks_statistic'],
            'wasserstein': distances['wasserstein'],
            **dcr_statistics(real, synth),
        }
    return results
