"""
Classification utility metrics for oversampled training sets.
"""
import numpy as np
from sklearn.ensemble import RandomForestClassifier
from sklearn.linear_model import LogisticRegression
from sklearn.metrics import balanced_accuracy_score, f1_score


def evaluate_simple(X_train, y_train, X_test, y_test, seed=42):
    """
    Train reference classifiers and score them on held-out data.

    Works for binary and multi-class labels (macro-averaged F1).

    Args:
        X_train: Training features, possibly oversampled.
        y_train: Training labels.
        X_test: Test features (real data).
        y_test: Test labels.
        seed: Random seed for classifiers.

    Returns:
        dict: Mean 'f1_macro' and 'balanced_accuracy' over the classifiers.
    """
    CLASSIFIERS = [
        RandomForestClassifier(n_estimators=100, max_depth=15, random_state=seed),
        LogisticRegression(max_iter=500, random_state=seed),
    ]

    f1_scores, bacc_scores = [], []
    for clf in CLASSIFIERS:
        clf.fit(X_train, y_train)
        y_pred = clf.predict(X_test)
        f1_scores.append(f1_score(y_test, y_pred, average='macro'))
        bacc_scores.append(balanced_accuracy_score(y_test, y_pred))

    return {
        'f1_macro': float(np.mean(f1_scores)),
        'balanced_accuracy': float(np.mean(bacc_scores))
    }
