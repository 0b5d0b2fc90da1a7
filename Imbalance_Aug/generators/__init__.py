"""
Oversampling methods.

Modules:
    random_oversample: Bootstrap duplication of existing observations
    rose: Bootstrap plus Gaussian kernel perturbation (ROSE)
    smote: Interpolation towards nearest same-class neighbors (SMOTE)

Every module exposes a `*_per_class(X, n, rng, ...)` generator working on a
single class in the features x observations layout, a public function for
(X, y) inputs, and a `*_xy` variant for tables holding their labels.
"""

from .random_oversample import (
    random_oversample_per_class,
    random_oversample,
    random_oversample_xy
)
from .rose import rose_per_class, rose, rose_xy
from .smote import smote_per_class, smote, smote_xy, check_k, knn_map

__all__ = [
    'random_oversample_per_class',
    'random_oversample',
    'random_oversample_xy',
    'rose_per_class',
    'rose',
    'rose_xy',
    'smote_per_class',
    'smote',
    'smote_xy',
    'check_k',
    'knn_map'
]
