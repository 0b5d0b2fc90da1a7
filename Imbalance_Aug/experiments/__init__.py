"""
Experimental analysis modules for Imbalance-Aug.

Modules:
    sensitivity: Hyperparameter robustness analysis (ROSE s, SMOTE k)
"""

from .sensitivity import run_sensitivity_s, run_sensitivity_k

__all__ = [
    'run_sensitivity_s',
    'run_sensitivity_k'
]
