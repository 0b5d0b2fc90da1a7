"""
Imbalance-Aug: Ratio-Driven Oversampling for Imbalanced Tabular Data

Modules:
    config: Default hyperparameters and experiment grids
    data_loader: Table adapters and dataset utilities
    ratios: Ratio specification to per-class deficits
    oversample: Per-class oversampling loop and its revert
    generators: Random oversampling, ROSE and SMOTE
    transforms: Sampler objects (fit_resample / apply / revert)
    evaluation: Balance summaries and quality metrics
    experiments: Sensitivity studies
"""

from .config import get_config, GENERATOR_CONFIGS, DEFAULT_SEED
from .data_loader import load_dataset, generate_imbalanced_data, tablify, tablify_xy
from .exceptions import (
    OversamplingError,
    MissingClassRatio,
    InvalidRatio,
    NonPositiveK,
    UnsupportedTableType,
    OversamplingWarning,
    KTooLarge,
    SingleObservationClass,
    UnderSampleRequested
)
from .utils import rng_handler, group_inds, group_lens
from .ratios import get_class_counts
from .oversample import generic_oversample, revert_oversampling, OversampleReport
from .generators import (
    random_oversample,
    random_oversample_xy,
    rose,
    rose_xy,
    smote,
    smote_xy
)
from .transforms import RandomOversampler, ROSE, SMOTE
from .evaluation import checkbalance

__all__ = [
    'get_config',
    'GENERATOR_CONFIGS',
    'DEFAULT_SEED',
    'load_dataset',
    'generate_imbalanced_data',
    'tablify',
    'tablify_xy',
    'OversamplingError',
    'MissingClassRatio',
    'InvalidRatio',
    'NonPositiveK',
    'UnsupportedTableType',
    'OversamplingWarning',
    'KTooLarge',
    'SingleObservationClass',
    'UnderSampleRequested',
    'rng_handler',
    'group_inds',
    'group_lens',
    'get_class_counts',
    'generic_oversample',
    'revert_oversampling',
    'OversampleReport',
    'random_oversample',
    'random_oversample_xy',
    'rose',
    'rose_xy',
    'smote',
    'smote_xy',
    'RandomOversampler',
    'ROSE',
    'SMOTE',
    'checkbalance'
]
