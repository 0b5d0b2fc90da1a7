"""
Runner scripts for Imbalance-Aug.

Available runners:
- Oversampling of a CSV or generated dataset (run_oversampling.py)
- Hyperparameter Sensitivity analysis (run_sensitivity.py)
"""


from .run_oversampling import main as run_oversampling_main, run_oversampling
from .run_sensitivity import main as run_sensitivity_main

__all__ = [
    "run_oversampling",
    "run_oversampling_main",
    "run_sensitivity_main"
]
