"""
Table adapters and dataset utilities.

The oversampling core works on a features x observations matrix. The
functions here accept the usual one-observation-per-row inputs (numpy
arrays, lists of rows, pandas DataFrames), transpose them on the way in
and restore the caller's container on the way out.
"""
import os
import numpy as np
import pandas as pd

from .config import DEFAULT_SEED
from .exceptions import UnsupportedTableType
from .utils import rng_handler


def _to_matrix(X):
    """Return (matrix of shape (n_features, n_obs), columns or None)."""
    if isinstance(X, pd.DataFrame):
        non_numeric = [col for col in X.columns if not pd.api.types.is_numeric_dtype(X[col])]
        if non_numeric:
            raise ValueError(
                f"All feature columns must be numeric; encode these first: {non_numeric}"
            )
        return X.to_numpy(dtype=float).T, X.columns
    if isinstance(X, (np.ndarray, list, tuple)):
        arr = np.asarray(X, dtype=float)
        if arr.ndim != 2:
            raise ValueError(f"X must be 2-dimensional, got shape {arr.shape}")
        return arr.T, None
    raise UnsupportedTableType(type(X))


def _extend_index(index, n_new):
    """Append labels for `n_new` generated rows after an existing index.

    Integer indexes continue past their largest label; any other index
    gets string labels "synthetic_0", "synthetic_1", ...
    """
    if pd.api.types.is_integer_dtype(index):
        start = int(index.max()) + 1 if len(index) else 0
        return index.append(pd.RangeIndex(start, start + n_new))
    dtype = index.dtype if pd.api.types.is_string_dtype(index) else object
    return index.append(pd.Index([f"synthetic_{i}" for i in range(n_new)], dtype=dtype))


def _restore_labels(y, yover):
    if isinstance(y, pd.Series):
        index = _extend_index(y.index, len(yover) - len(y))
        return pd.Series(yover, name=y.name, index=index).astype(y.dtype)
    if isinstance(y, pd.Categorical):
        return pd.Categorical(yover, categories=y.categories, ordered=y.ordered)
    return yover


def tablify(func, X, y, **kwargs):
    """Run a matrix-level oversampler on tabular input.

    Args:
        func: Callable `func(X_cols, y, **kwargs) -> (Xover_cols, yover, report)`
            working on the features x observations layout.
        X: 2-D numpy array, list of rows or DataFrame with numeric columns,
            one observation per row.
        y: Labels aligned with the rows of X.
        **kwargs: Passed through to `func`.

    Returns:
        tuple: (Xover, yover, report) with Xover in the container type of X
            (DataFrames keep their columns and index; generated rows are
            labelled after the existing ones) and yover in the container
            type of y.

    Raises:
        UnsupportedTableType: If X is not a supported table type.
    """
    matrix, columns = _to_matrix(X)
    labels = y.to_numpy() if isinstance(y, pd.Series) else np.asarray(y)
    Xover_cols, yover, report = func(matrix, labels, **kwargs)
    Xover = Xover_cols.T
    if columns is not None:
        Xover = pd.DataFrame(Xover, columns=columns, index=_extend_index(X.index, len(Xover) - len(X)))
    return Xover, _restore_labels(y, yover), report


def tablify_xy(func, Xy, y_col, **kwargs):
    """Run a matrix-level oversampler on a table that holds its labels.

    Args:
        func: Same as in `tablify`.
        Xy: DataFrame (or 2-D array) containing features and labels.
        y_col: Label column, as a column name or an integer position.
        **kwargs: Passed through to `func`.

    Returns:
        tuple: (Xyover, report) where the label column keeps its position.
    """
    if isinstance(Xy, pd.DataFrame):
        if y_col in Xy.columns:
            name = y_col
            pos = Xy.columns.get_loc(y_col)
        elif isinstance(y_col, int) and 0 <= y_col < Xy.shape[1]:
            pos = y_col
            name = Xy.columns[y_col]
        else:
            raise KeyError(f"Label column {y_col!r} not found")
        Xover, yover, report = tablify(func, Xy.drop(columns=[name]), Xy[name], **kwargs)
        Xover.insert(pos, name, yover.to_numpy())
        Xover[name] = Xover[name].astype(Xy[name].dtype)
        return Xover, report
    if isinstance(Xy, (np.ndarray, list, tuple)):
        arr = np.asarray(Xy)
        if arr.ndim != 2:
            raise ValueError(f"Xy must be 2-dimensional, got shape {arr.shape}")
        y = arr[:, y_col]
        X = np.delete(arr, y_col, axis=1)
        Xover, yover, report = tablify(func, X, y, **kwargs)
        if np.issubdtype(yover.dtype, np.number):
            return np.insert(Xover, y_col, yover.astype(float), axis=1), report
        return np.insert(Xover.astype(object), y_col, yover, axis=1), report
    raise UnsupportedTableType(type(Xy))


def generate_imbalanced_data(num_rows, num_features, class_probs, rng=DEFAULT_SEED,
                             means=None, min_sep=1.0):
    """Generate a Gaussian classification dataset with skewed class sizes.

    Args:
        num_rows (int): Total number of observations.
        num_features (int): Number of continuous features.
        class_probs (list of float): Probability of each class; labels are
            0, 1, ..., len(class_probs) - 1.
        rng: Integer seed or numpy.random.Generator.
        means (array-like, optional): Class means, shape
            (n_classes, num_features). Drawn at random when omitted.
        min_sep (float, optional): Scale of the random class means.

    Returns:
        tuple: (X, y) as a DataFrame with columns 'Column1', ... and an
            integer Series named 'target'.
    """
    rng = rng_handler(rng)
    probs = np.asarray(class_probs, dtype=float)
    if probs.ndim != 1 or len(probs) == 0 or np.any(probs < 0) or probs.sum() <= 0:
        raise ValueError("class_probs must be a non-empty list of non-negative numbers")
    probs = probs / probs.sum()

    y = rng.choice(len(probs), size=num_rows, p=probs)
    if means is None:
        means = rng.normal(0.0, 3.0 * min_sep, size=(len(probs), num_features))
    means = np.asarray(means, dtype=float)
    X = means[y] + rng.standard_normal((num_rows, num_features))

    columns = [f'Column{i + 1}' for i in range(num_features)]
    return pd.DataFrame(X, columns=columns), pd.Series(y, name='target')


def load_dataset(path, target_col=None):
    """Load a CSV dataset and split features from labels.

    Args:
        path (str): CSV file path.
        target_col (str, optional): Label column. Defaults to the last column.

    Returns:
        tuple: (X, y) as a DataFrame and a Series. Rows with missing values
            are dropped.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"{path} not found in {os.getcwd()}")
    df = pd.read_csv(path, skipinitialspace=True)
    df.columns = df.columns.str.strip()
    df = df.replace(['?', ' ?'], np.nan).dropna().reset_index(drop=True)

    target_col = target_col if target_col is not None else df.columns[-1]
    y = df[target_col]
    X = df.drop(columns=[target_col])
    print(f"\n{os.path.basename(path)}: {X.shape}, Classes: {y.value_counts().to_dict()}")
    return X, y
