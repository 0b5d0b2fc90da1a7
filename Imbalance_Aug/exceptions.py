"""
Errors and warnings raised while oversampling.

Fatal conditions are exceptions derived from OversamplingError and abort a
call before anything is generated. Recoverable conditions are warnings
derived from OversamplingWarning; they carry a `kind`, the offending
`label` (when a class is involved) and a `params` dict so callers can
inspect them without parsing messages.
"""


class OversamplingError(ValueError):
    """Base class for invalid oversampling requests."""


class MissingClassRatio(OversamplingError):
    """A per-class ratio mapping has no entry for an observed class."""

    def __init__(self, label):
        self.label = label
        super().__init__(
            f"Class {label!r} was found in y but no ratio was given for it. "
            f"Either pass a ratio for every class or a single float."
        )


class InvalidRatio(OversamplingError):
    """A ratio is zero or negative. `label` is None for a scalar ratio."""

    def __init__(self, label=None, ratio=None):
        self.label = label
        self.ratio = ratio
        if label is None:
            msg = f"Ratio must be a positive number but got {ratio!r}."
        else:
            msg = f"Ratio for class {label!r} must be a positive number but got {ratio!r}."
        super().__init__(msg)


class NonPositiveK(OversamplingError):
    """SMOTE was asked for fewer than one neighbor."""

    def __init__(self, k):
        self.k = k
        super().__init__(f"Number of nearest neighbors k must be at least 1 but got {k}.")


class UnsupportedTableType(TypeError):
    """No table adapter exists for the given input type."""

    def __init__(self, actual_type):
        self.actual_type = actual_type
        super().__init__(
            f"Unsupported table type {actual_type.__name__}. "
            f"Pass a 2-D numpy array, a list of rows or a pandas DataFrame."
        )


class OversamplingWarning(UserWarning):
    """Base class for recoverable conditions, localized to one class."""

    def __init__(self, message, label=None, **params):
        super().__init__(message)
        self.label = label
        self.params = params

    @property
    def kind(self):
        return type(self).__name__

    def as_record(self):
        """Return the warning as a plain dict."""
        return {'kind': self.kind, 'label': self.label, 'message': str(self), **self.params}


class KTooLarge(OversamplingWarning):
    """k was at least the class size and has been lowered to n_class - 1."""

    def __init__(self, k, n_class, label=None):
        super().__init__(
            f"Requested k={k} neighbors but the class has only {n_class} observations. "
            f"Using k={n_class - 1} instead.",
            label=label, k=k, n_class=n_class,
        )


class SingleObservationClass(OversamplingWarning):
    """A class with a single observation cannot be interpolated."""

    def __init__(self, label=None):
        super().__init__(
            "Class has only one observation so no neighbors exist. "
            "No new observations will be generated for it.",
            label=label,
        )


class UnderSampleRequested(OversamplingWarning):
    """The requested target is below the current class size; nothing is removed."""

    def __init__(self, ratio, label, deficit, keep_ratio):
        super().__init__(
            f"Requesting ratio {ratio:.2f} for class {label!r} would remove "
            f"{-deficit} observations, which oversampling cannot do. "
            f"Leaving the class unchanged (its current ratio is {keep_ratio:.2f}).",
            label=label, ratio=ratio, deficit=deficit, keep_ratio=keep_ratio,
        )
