import sys

import numpy as np
import pandas as pd
import pytest

from Imbalance_Aug.experiments import run_sensitivity_k, run_sensitivity_s
from scripts.run_oversampling import main as run_oversampling_main
from scripts.run_oversampling import parse_ratios, run_oversampling

RESULT_KEYS = {'f1_macro', 'balanced_accuracy', 'ks_statistic', 'wasserstein',
               'mean_dcr', 'time', 'n_generated'}


@pytest.mark.integration
class TestSensitivity:
    def test_s_grid(self, imbalanced_df):
        X, y = imbalanced_df
        results = run_sensitivity_s(X, y, s_values=[0.0, 1.0], n_seeds=1)
        assert list(results) == [0.0, 1.0]
        for s, rows in results.items():
            assert len(rows) == 1
            assert RESULT_KEYS | {'s'} <= set(rows[0])
            assert rows[0]['s'] == s
            assert rows[0]['n_generated'] > 0
        assert results[0.0][0]['mean_dcr'] == 0.0
        assert results[1.0][0]['mean_dcr'] > 0.0

    def test_k_grid(self, imbalanced_df):
        X, y = imbalanced_df
        results = run_sensitivity_k(X, y, k_values=[1, 3], n_seeds=1, ratios=0.8)
        assert list(results) == [1, 3]
        assert all(RESULT_KEYS | {'k'} <= set(rows[0]) for rows in results.values())


@pytest.mark.integration
class TestRunOversamplingScript:
    def test_parse_ratios(self):
        assert parse_ratios(0.5, None) == 0.5
        assert parse_ratios(None, '{"0": 1.0, "1": 0.8}') == {'0': 1.0, '1': 0.8}

    def test_run_oversampling(self, imbalanced_df, capsys):
        X, y = imbalanced_df
        X_res, y_res, report = run_oversampling(X, y, 'rose', {'s': 0.5, 'rng': 0}, verbose=False)
        out = capsys.readouterr().out
        assert "Class balance before:" in out
        assert "Class balance after:" in out
        assert len(X_res) == len(X) + report.n_generated
        assert y_res.value_counts().nunique() == 1

    def test_main_writes_csv(self, tmp_path, monkeypatch):
        src = tmp_path / "data.csv"
        dst = tmp_path / "out.csv"
        rng = np.random.default_rng(0)
        df = pd.DataFrame(rng.normal(size=(30, 2)), columns=['a', 'b'])
        df['label'] = ['maj'] * 24 + ['min'] * 6
        df.to_csv(src, index=False)

        monkeypatch.setattr(sys, 'argv', [
            'run_oversampling.py', '--input', str(src), '--target', 'label',
            '--output', str(dst), '--method', 'smote', '--k', '3', '--seed', '1'
        ])
        run_oversampling_main()

        result = pd.read_csv(dst)
        assert list(result.columns) == ['a', 'b', 'label']
        assert len(result) == 48
        assert result['label'].value_counts().to_dict() == {'maj': 24, 'min': 24}
        pd.testing.assert_frame_equal(result.iloc[:30], df, check_exact=False)
