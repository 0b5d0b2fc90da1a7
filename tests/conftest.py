"""
Shared fixtures for all tests.
"""
import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

# Add project root to path for imports (scripts/ is not installed)
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from Imbalance_Aug.data_loader import generate_imbalanced_data


@pytest.fixture
def toy_rows():
    """Three classes of sizes 6, 3 and 2, one observation per row."""
    X = np.array([
        [0.0, 0.0], [0.1, 0.2], [0.3, 0.1], [0.2, 0.4], [0.5, 0.5], [0.4, 0.0],
        [5.0, 5.0], [5.5, 4.5], [4.8, 5.2],
        [-3.0, 2.0], [-2.5, 2.5],
    ])
    y = np.array([0, 0, 0, 0, 0, 0, 1, 1, 1, 2, 2])
    return X, y


@pytest.fixture
def class_matrix():
    """A single class in the features x observations layout (3 features, 5 obs)."""
    return np.array([
        [1.0, 2.0, 3.0, 4.0, 5.0],
        [0.0, 1.0, 0.0, 1.0, 0.0],
        [10.0, 20.0, 15.0, 12.0, 18.0],
    ])


@pytest.fixture
def imbalanced_df():
    """Generated DataFrame/Series pair with three unequal classes."""
    return generate_imbalanced_data(200, 4, class_probs=[0.6, 0.3, 0.1], rng=42)


@pytest.fixture
def labeled_table(imbalanced_df):
    """Table with the label column in the middle."""
    X, y = imbalanced_df
    Xy = X.copy()
    Xy.insert(2, 'target', y)
    return Xy


@pytest.fixture
def string_labels():
    return pd.Series(['cat', 'dog', 'cat', 'cat', 'bird', 'dog', 'cat'], name='animal')
