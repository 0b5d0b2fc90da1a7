"""
Evaluation helpers for oversampled data.

Modules:
    balance: Class size summaries (checkbalance)
    fidelity: Distributional similarity metrics (KS, WD, DCR)
    utility: Classification performance metrics
"""

from .balance import checkbalance

from .fidelity import (
    feature_distances,
    dcr_statistics,
    per_class_fidelity
)

from .utility import evaluate_simple

__all__ = [
    'checkbalance',
    'feature_distances',
    'dcr_statistics',
    'per_class_fidelity',
    'evaluate_simple'
]
