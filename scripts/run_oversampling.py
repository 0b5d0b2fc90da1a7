#!/usr/bin/env python3
"""
Oversample a CSV dataset with random oversampling, ROSE or SMOTE.

Usage:
    python scripts/run_oversampling.py --input data.csv --target label --method smote --k 5
    python scripts/run_oversampling.py --demo --method rose --s 0.5 --ratio 0.8
"""
import sys
from pathlib import Path
import argparse
import json

sys.path.insert(0, str(Path(__file__).parent.parent))

from Imbalance_Aug.config import get_config, DEFAULT_SEED
from Imbalance_Aug.data_loader import load_dataset, generate_imbalanced_data
from Imbalance_Aug.generators import random_oversample, rose, smote
from Imbalance_Aug.evaluation.balance import checkbalance

METHODS = {
    'random_oversample': random_oversample,
    'rose': rose,
    'smote': smote,
}


def parse_ratios(ratio, ratios_json):
    """Build a ratio specification from the --ratio / --ratios options."""
    if ratios_json:
        return json.loads(ratios_json)
    return ratio


def run_oversampling(X, y, method, params, verbose=True):
    """Apply one oversampling method and print class balance before and after.

    Args:
        X: Features, one observation per row.
        y: Labels.
        method (str): Key of METHODS.
        params (dict): Keyword arguments for the method (ratios, rng, s or k).
        verbose (bool): Print per-class progress.

    Returns:
        tuple: (X_resampled, y_resampled, report).
    """
    print("\nClass balance before:")
    checkbalance(y)

    X_res, y_res, report = METHODS[method](X, y, return_report=True, verbose=verbose, **params)

    print("\nClass balance after:")
    checkbalance(y_res)
    for w in report.warnings:
        print(f"  WARNING [{w.kind}] class {w.label!r}: {w}")
    return X_res, y_res, report


def main():
    parser = argparse.ArgumentParser(
        description='Oversample an imbalanced tabular dataset'
    )
    parser.add_argument('--input', type=str, help='CSV file to oversample')
    parser.add_argument('--target', type=str, default=None,
                        help='Label column (default: last column)')
    parser.add_argument('--output', type=str, default=None,
                        help='Where to write the oversampled CSV')
    parser.add_argument('--demo', action='store_true',
                        help='Use generated imbalanced data instead of --input')
    parser.add_argument('--method', type=str, default='smote', choices=sorted(METHODS))
    parser.add_argument('--ratio', type=float, default=None,
                        help='Target size of every class relative to the majority class')
    parser.add_argument('--ratios', type=str, default=None,
                        help='Per-class ratios as JSON, e.g. \'{"0": 1.0, "1": 0.8}\'')
    parser.add_argument('--k', type=int, default=None, help='SMOTE neighbors')
    parser.add_argument('--s', type=float, default=None, help='ROSE bandwidth scale')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED)
    args = parser.parse_args()

    if args.demo:
        X, y = generate_imbalanced_data(200, 4, class_probs=[0.6, 0.3, 0.1], rng=args.seed)
        y = y.astype(str)
    elif args.input:
        X, y = load_dataset(args.input, args.target)
        y = y.astype(str)
    else:
        parser.error('either --input or --demo is required')

    params = get_config(args.method)
    params['ratios'] = parse_ratios(args.ratio, args.ratios)
    params['rng'] = args.seed
    if args.method == 'smote' and args.k is not None:
        params['k'] = args.k
    if args.method == 'rose' and args.s is not None:
        params['s'] = args.s

    print("="*80)
    print(f"Imbalance-Aug: {args.method}")
    print("="*80)

    X_res, y_res, report = run_oversampling(X, y, args.method, params)
    print(f"\n{report.get_summary()}")

    if args.output:
        out = X_res.copy()
        out[y_res.name or 'target'] = y_res.to_numpy()
        out.to_csv(args.output, index=False)
        print(f"\nSaved {len(out)} rows to {args.output}")


if __name__ == '__main__':
    main()
