import numpy as np
import pandas as pd
import pytest

from Imbalance_Aug.data_loader import generate_imbalanced_data, load_dataset, tablify, tablify_xy
from Imbalance_Aug.exceptions import UnsupportedTableType
from Imbalance_Aug.generators.random_oversample import _random_oversample_matrix
from Imbalance_Aug.oversample import revert_oversampling


@pytest.mark.unit
class TestTablify:
    def test_array_rows(self, toy_rows):
        X, y = toy_rows
        Xover, yover, report = tablify(_random_oversample_matrix, X, y, rng=0)
        assert isinstance(Xover, np.ndarray)
        assert Xover.shape == (18, 2)
        assert report.n_original == 11

    def test_list_of_rows(self, toy_rows):
        X, y = toy_rows
        Xover, yover, _ = tablify(_random_oversample_matrix, X.tolist(), y.tolist(), rng=0)
        assert Xover.shape == (18, 2)
        np.testing.assert_array_equal(Xover[:11], X)

    def test_dataframe_keeps_columns_and_index(self, imbalanced_df):
        X, y = imbalanced_df
        rows = [f'row{i}' for i in range(len(X))]
        X, y = X.set_axis(rows, axis=0), y.set_axis(rows)
        Xover, yover, report = tablify(_random_oversample_matrix, X, y, rng=0)
        assert list(Xover.columns) == list(X.columns)
        assert list(Xover.index[:len(X)]) == rows
        assert list(Xover.index[len(X):]) == [f'synthetic_{i}' for i in range(report.n_generated)]
        assert Xover.index.equals(yover.index)
        assert len(Xover) == len(X) + report.n_generated
        assert yover.dtype == y.dtype
        assert yover.name == 'target'

    def test_integer_index_is_continued(self, imbalanced_df):
        X, y = imbalanced_df
        X, y = X.iloc[::2], y.iloc[::2]
        Xover, yover, report = tablify(_random_oversample_matrix, X, y, rng=0)
        assert Xover.index.is_unique
        assert list(Xover.index[:len(X)]) == list(X.index)
        assert list(Xover.index[len(X):]) == list(range(399, 399 + report.n_generated))
        assert Xover.index.equals(yover.index)

    def test_string_labels(self, string_labels):
        X = np.arange(len(string_labels) * 2, dtype=float).reshape(-1, 2)
        Xover, yover, _ = tablify(_random_oversample_matrix, X, string_labels, rng=0)
        assert yover.name == 'animal'
        assert yover.value_counts().to_dict() == {'cat': 4, 'dog': 4, 'bird': 4}
        assert len(Xover) == 12

    def test_categorical_labels(self, string_labels):
        y = string_labels.astype('category')
        X = np.zeros((len(y), 1))
        _, yover, _ = tablify(_random_oversample_matrix, X, y, rng=0)
        assert isinstance(yover.dtype, pd.CategoricalDtype)
        assert list(yover.cat.categories) == list(y.cat.categories)

    @pytest.mark.parametrize("bad", [{'a': [1, 2]}, "table", 3.0])
    def test_unsupported_type(self, bad):
        with pytest.raises(UnsupportedTableType) as exc:
            tablify(_random_oversample_matrix, bad, [0, 1])
        assert exc.value.actual_type is type(bad)

    def test_non_numeric_column(self):
        X = pd.DataFrame({'a': [1.0, 2.0, 3.0], 'b': ['x', 'y', 'z']})
        with pytest.raises(ValueError, match="'b'"):
            tablify(_random_oversample_matrix, X, [0, 0, 1])

    def test_one_dimensional_array(self):
        with pytest.raises(ValueError):
            tablify(_random_oversample_matrix, np.arange(4.0), [0, 0, 1, 1])


@pytest.mark.unit
class TestTablifyXy:
    def test_label_column_by_name(self, labeled_table):
        Xyover, report = tablify_xy(_random_oversample_matrix, labeled_table, 'target', rng=0)
        assert list(Xyover.columns) == list(labeled_table.columns)
        assert Xyover['target'].dtype == labeled_table['target'].dtype
        assert Xyover['target'].value_counts().nunique() == 1
        pd.testing.assert_frame_equal(Xyover.iloc[:len(labeled_table)], labeled_table)

    def test_label_column_by_position(self, labeled_table):
        by_pos, _ = tablify_xy(_random_oversample_matrix, labeled_table, 2, rng=0)
        by_name, _ = tablify_xy(_random_oversample_matrix, labeled_table, 'target', rng=0)
        pd.testing.assert_frame_equal(by_pos, by_name)

    def test_missing_column(self, labeled_table):
        with pytest.raises(KeyError):
            tablify_xy(_random_oversample_matrix, labeled_table, 'label')

    def test_array(self):
        Xy = np.array([
            [0.0, 1.0, 0.5],
            [0.0, 2.0, 0.7],
            [0.0, 3.0, 0.2],
            [1.0, 9.0, 0.1],
        ])
        Xyover, report = tablify_xy(_random_oversample_matrix, Xy, 0, rng=0)
        assert Xyover.shape == (6, 3)
        np.testing.assert_array_equal(Xyover[:4], Xy)
        np.testing.assert_array_equal(Xyover[4:], np.tile(Xy[3], (2, 1)))
        assert report.deficits == {0.0: 0, 1.0: 2}

    def test_array_with_text_labels(self):
        Xy = np.array([[1.0, 'a'], [2.0, 'a'], [3.0, 'b']], dtype=object)
        Xyover, report = tablify_xy(_random_oversample_matrix, Xy, 1, rng=0)
        assert Xyover.shape == (4, 2)
        assert list(Xyover[:, 1]) == ['a', 'a', 'b', 'b']
        assert list(Xyover[:, 0]) == [1.0, 2.0, 3.0, 3.0]

    def test_custom_index_round_trip(self, labeled_table):
        Xy = labeled_table.set_axis([f'id{i}' for i in range(len(labeled_table))], axis=0)
        Xyover, report = tablify_xy(_random_oversample_matrix, Xy, 'target', rng=0)
        assert Xyover.index.is_unique
        pd.testing.assert_frame_equal(revert_oversampling(Xyover, report.n_original), Xy)


@pytest.mark.unit
class TestGenerateImbalancedData:
    def test_shape_and_names(self, imbalanced_df):
        X, y = imbalanced_df
        assert X.shape == (200, 4)
        assert list(X.columns) == ['Column1', 'Column2', 'Column3', 'Column4']
        assert y.name == 'target'
        assert set(y.unique()) <= {0, 1, 2}

    def test_class_sizes_follow_probabilities(self):
        _, y = generate_imbalanced_data(5000, 2, class_probs=[0.7, 0.2, 0.1], rng=0)
        counts = y.value_counts(normalize=True)
        assert counts[0] > counts[1] > counts[2]

    def test_same_seed_same_data(self):
        a, ya = generate_imbalanced_data(50, 3, class_probs=[0.5, 0.5], rng=7)
        b, yb = generate_imbalanced_data(50, 3, class_probs=[0.5, 0.5], rng=7)
        pd.testing.assert_frame_equal(a, b)
        pd.testing.assert_series_equal(ya, yb)

    def test_given_means(self):
        X, y = generate_imbalanced_data(400, 1, class_probs=[0.5, 0.5], rng=0, means=[[-10.0], [10.0]])
        assert X['Column1'][y == 0].mean() < 0 < X['Column1'][y == 1].mean()

    @pytest.mark.parametrize("probs", [[], [-0.1, 1.1], [0.0, 0.0]])
    def test_invalid_probabilities(self, probs):
        with pytest.raises(ValueError):
            generate_imbalanced_data(10, 2, class_probs=probs)


@pytest.mark.unit
class TestLoadDataset:
    def test_last_column_is_target(self, tmp_path):
        path = tmp_path / "toy.csv"
        path.write_text("a,b,label\n1,2,x\n3,4,y\n5,6,x\n")
        X, y = load_dataset(str(path))
        assert list(X.columns) == ['a', 'b']
        assert y.tolist() == ['x', 'y', 'x']

    def test_named_target_and_missing_values(self, tmp_path):
        path = tmp_path / "toy.csv"
        path.write_text("label, a, b\n0,1,2\n1,?,4\n0,5,6\n")
        X, y = load_dataset(str(path), target_col='label')
        assert list(X.columns) == ['a', 'b']
        assert len(X) == 2
        assert y.tolist() == [0, 0]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_dataset(str(tmp_path / "nope.csv"))
