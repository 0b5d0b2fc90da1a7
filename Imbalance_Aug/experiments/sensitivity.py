"""
Sensitivity analysis for the ROSE bandwidth scale s and the SMOTE neighbor count k.
"""
import numpy as np
import time
from sklearn.model_selection import train_test_split

from ..config import SENSITIVITY_GRIDS, DEFAULT_SEED
from ..generators.rose import rose
from ..generators.smote import smote
from ..evaluation.fidelity import per_class_fidelity
from ..evaluation.utility import evaluate_simple


def _summarize_fidelity(fidelity):
    """Average per-class fidelity metrics over the oversampled classes."""
    if not fidelity:
        return {'ks_statistic': np.nan, 'wasserstein': np.nan, 'mean_dcr': np.nan}
    return {
        key: float(np.nanmean([stats[key] for stats in fidelity.values()]))
        for key in ('ks_statistic', 'wasserstein', 'mean_dcr')
    }


def _run_grid(method, param_name, values, X, y, n_seeds, ratios):
    results_by_value = {v: [] for v in values}

    for seed_idx in range(n_seeds):
        seed = DEFAULT_SEED + seed_idx * 100
        print(f"\n{'='*60}")
        print(f"Sensitivity Seed {seed_idx+1}/{n_seeds} (seed={seed})")
        print(f"{'='*60}")

        X_train, X_test, y_train, y_test = train_test_split(
            X, y, test_size=0.2, random_state=seed, stratify=y
        )

        for value in values:
            print(f"\n  Testing {param_name}={value}")
            start_t = time.time()
            X_res, y_res, report = method(
                X_train, y_train, ratios=ratios, rng=seed, return_report=True, **{param_name: value}
            )
            elapsed = time.time() - start_t

            r = evaluate_simple(X_res, y_res, X_test, y_test, seed)
            r.update(_summarize_fidelity(per_class_fidelity(X_res, y_res, report.n_original)))
            r['time'] = elapsed
            r[param_name] = value
            r['n_generated'] = report.n_generated
            results_by_value[value].append(r)

            print(f"    F1={r['f1_macro']:.4f}, KS={r['ks_statistic']:.4f}, "
                  f"DCR={r['mean_dcr']:.4f}, Time={elapsed:.2f}s")

    print("\n" + "="*90)
    print(f"SENSITIVITY SUMMARY: {param_name} ({n_seeds} Seeds)")
    print("="*90)
    print(f"\n{param_name:<10} {'F1':<20} {'KS':<20} {'DCR':<20}")
    print("-"*70)
    for value in values:
        rows = results_by_value[value]
        f1_vals = [r['f1_macro'] for r in rows]
        ks_vals = [r['ks_statistic'] for r in rows]
        dcr_vals = [r['mean_dcr'] for r in rows]
        print(f"{value!s:<10} "
              f"{np.mean(f1_vals):.4f}±{np.std(f1_vals):.4f}{'':<6} "
              f"{np.nanmean(ks_vals):.4f}±{np.nanstd(ks_vals):.4f}{'':<6} "
              f"{np.nanmean(dcr_vals):.4f}±{np.nanstd(dcr_vals):.4f}")

    return results_by_value


def run_sensitivity_s(X, y, s_values=None, n_seeds=None, ratios=None):
    """
    Sweep the ROSE bandwidth scale s.

    Args:
        X: Features, one observation per row.
        y: Labels.
        s_values: Values of s to test. Defaults to SENSITIVITY_GRIDS['s'].
        n_seeds: Number of train/test splits. Defaults to SENSITIVITY_GRIDS['n_seeds'].
        ratios: Ratio specification passed to ROSE.

    Returns:
        dict: Mapping from s to a list of per-seed result dicts (utility,
            fidelity and timing metrics).
    """
    print("\n" + "="*80)
    print("SENSITIVITY ANALYSIS: ROSE BANDWIDTH SCALE (s)")
    print("="*80)
    s_values = SENSITIVITY_GRIDS['s'] if s_values is None else s_values
    n_seeds = SENSITIVITY_GRIDS['n_seeds'] if n_seeds is None else n_seeds
    return _run_grid(rose, 's', s_values, X, y, n_seeds, ratios)


def run_sensitivity_k(X, y, k_values=None, n_seeds=None, ratios=None):
    """
    Sweep the SMOTE neighbor count k.

    Args:
        X: Features, one observation per row.
        y: Labels.
        k_values: Values of k to test. Defaults to SENSITIVITY_GRIDS['k'].
        n_seeds: Number of train/test splits. Defaults to SENSITIVITY_GRIDS['n_seeds'].
        ratios: Ratio specification passed to SMOTE.

    Returns:
        dict: Mapping from k to a list of per-seed result dicts.
    """
    print("\n" + "="*80)
    print("SENSITIVITY ANALYSIS: SMOTE NEIGHBORS (k)")
    print("="*80)
    k_values = SENSITIVITY_GRIDS['k'] if k_values is None else k_values
    n_seeds = SENSITIVITY_GRIDS['n_seeds'] if n_seeds is None else n_seeds
    return _run_grid(smote, 'k', k_values, X, y, n_seeds, ratios)
