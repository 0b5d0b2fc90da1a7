"""
Configuration constants for Imbalance-Aug oversamplers and experiments.
"""
import copy

DEFAULT_SEED = 42

GENERATOR_CONFIGS = {
    'random_oversample': {
        'ratios': None,
    },
    'rose': {
        's': 0.1,
        'ratios': None,
    },
    'smote': {
        'k': 5,
        'ratios': None,
    }
}


def get_config(method):
    """Retrieve default hyperparameters for an oversampling method.

    Args:
        method (str): Method key, e.g. 'random_oversample', 'rose', or 'smote'.

    Returns:
        dict: A copy of the default hyperparameters for the method.

    Raises:
        KeyError: If the method name is not in GENERATOR_CONFIGS.
    """
    return copy.deepcopy(GENERATOR_CONFIGS[method])

# Grids swept by experiments.sensitivity
SENSITIVITY_GRIDS = {
    's': [0.0, 0.1, 0.5, 1.0, 2.0],
    'k': [1, 3, 5, 10],
    'n_seeds': 3,
}
