"""
Resolution of ratio specifications into per-class deficits.

A ratio describes the wanted size of a class relative to the majority
class. The deficit of a class is how many new observations must be
generated for it to reach that size.
"""
import numbers
import warnings
from collections.abc import Mapping

from .exceptions import InvalidRatio, MissingClassRatio, UnderSampleRequested
from .utils import group_lens


def _check_ratio(ratio, label=None):
    if isinstance(ratio, bool) or not isinstance(ratio, numbers.Real):
        raise TypeError(f"Ratios must be numbers, got {type(ratio).__name__}")
    if not ratio > 0:
        raise InvalidRatio(label, ratio)
    return float(ratio)


def validate_ratios(ratios, labels):
    """Check a ratio specification against the observed classes.

    Args:
        ratios: None, a positive float, or a mapping class -> positive float.
        labels: Observed class labels, in processing order.

    Returns:
        dict: Class -> ratio for every observed class, or None when
            `ratios` is None.

    Raises:
        MissingClassRatio: If a mapping lacks an observed class.
        InvalidRatio: If any supplied ratio is not strictly positive.
    """
    if ratios is None:
        return None
    if isinstance(ratios, Mapping):
        for label in labels:
            if label not in ratios:
                raise MissingClassRatio(label)
        for label, ratio in ratios.items():
            _check_ratio(ratio, label)
        return {label: float(ratios[label]) for label in labels}
    ratio = _check_ratio(ratios)
    return {label: ratio for label in labels}


def get_class_counts(y, ratios=None):
    """Compute how many observations to add to each class.

    With `ratios=None` every class is grown to the majority size. A float
    `r` asks for `round(r * majority)` observations in every class, and a
    mapping gives that multiplier per class. Targets below the current
    size are not honored: a UnderSampleRequested warning is issued and the
    deficit is set to 0.

    Args:
        y: Sequence of class labels.
        ratios: None, a positive float, or a mapping class -> positive float.

    Returns:
        dict: Class -> non-negative number of observations to generate, in
            first-occurrence order of the classes.
    """
    counts = group_lens(y)
    if not counts:
        return {}
    majority = max(counts.values())
    per_class = validate_ratios(ratios, counts.keys())

    deficits = {}
    for label, n in counts.items():
        if per_class is None:
            target = majority
        else:
            target = round(per_class[label] * majority)
        deficit = target - n
        if deficit < 0:
            warnings.warn(
                UnderSampleRequested(per_class[label], label, deficit, n / majority),
                stacklevel=2,
            )
            deficit = 0
        deficits[label] = int(deficit)
    return deficits
