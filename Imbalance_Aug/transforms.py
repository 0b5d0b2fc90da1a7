"""
Sampler objects wrapping the oversampling functions.

Samplers follow the `fit_resample(X, y)` convention of imbalanced-learn
and additionally behave as revertible table transforms: `apply` returns
the oversampled table with a cache (the original row count) that `revert`
uses to drop the added rows again.
"""
from abc import ABC, abstractmethod
import numbers

from .config import DEFAULT_SEED
from .data_loader import tablify, tablify_xy
from .exceptions import NonPositiveK
from .generators.random_oversample import _random_oversample_matrix
from .generators.rose import _rose_matrix
from .generators.smote import _smote_matrix
from .oversample import revert_oversampling


class BaseOversampler(ABC):
    """Shared fit_resample/apply/revert machinery."""

    _param_names = ()

    @property
    @abstractmethod
    def _matrix_fn(self):
        """Matrix-level oversampler `fn(X, y, **kwargs) -> (Xover, yover, report)`."""

    def __init__(self, ratios=None, rng=DEFAULT_SEED, y_col=None):
        """
        Args:
            ratios: None, a float, or a dict class -> multiplier of the
                majority class size.
            rng: Integer seed (the same draws on every call) or a
                numpy.random.Generator (advanced by every call).
            y_col: Label column name or position, needed by `apply`.
        """
        self.ratios = ratios
        self.rng = rng
        self.y_col = y_col
        self.last_report_ = None

    def get_params(self):
        params = {name: getattr(self, name) for name in self._param_names}
        params.update(ratios=self.ratios, rng=self.rng, y_col=self.y_col)
        return params

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in self.get_params().items())
        return f"{type(self).__name__}({args})"

    def _kwargs(self):
        kwargs = {name: getattr(self, name) for name in self._param_names}
        kwargs.update(ratios=self.ratios, rng=self.rng)
        return kwargs

    def fit_resample(self, X, y):
        """Oversample (X, y); rows of X are observations."""
        Xover, yover, self.last_report_ = tablify(type(self)._matrix_fn, X, y, **self._kwargs())
        return Xover, yover

    def apply(self, Xy):
        """Oversample a table holding its labels in column `y_col`.

        Returns:
            tuple: (Xyover, cache) where cache is the original row count.
        """
        if self.y_col is None:
            raise ValueError(f"{type(self).__name__} needs y_col to transform a single table")
        Xyover, self.last_report_ = tablify_xy(type(self)._matrix_fn, Xy, self.y_col, **self._kwargs())
        return Xyover, self.last_report_.n_original

    def revert(self, Xyover, cache):
        """Remove the rows added by `apply`."""
        return revert_oversampling(Xyover, cache)

    def reapply(self, Xy, cache):
        """Same as `apply`; oversamplers learn nothing from the data."""
        return self.apply(Xy)


class RandomOversampler(BaseOversampler):
    """Random oversampling by duplicating observations."""

    _matrix_fn = staticmethod(_random_oversample_matrix)


class ROSE(BaseOversampler):
    """ROSE oversampling with kernel bandwidth scale `s`."""

    _matrix_fn = staticmethod(_rose_matrix)
    _param_names = ('s',)

    def __init__(self, s=0.1, ratios=None, rng=DEFAULT_SEED, y_col=None):
        if s < 0:
            raise ValueError(f"s must be non-negative, got {s}")
        self.s = float(s)
        super().__init__(ratios=ratios, rng=rng, y_col=y_col)


class SMOTE(BaseOversampler):
    """SMOTE oversampling with `k` nearest neighbors."""

    _matrix_fn = staticmethod(_smote_matrix)
    _param_names = ('k',)

    def __init__(self, k=5, ratios=None, rng=DEFAULT_SEED, y_col=None):
        if isinstance(k, bool) or not isinstance(k, numbers.Integral):
            raise TypeError(f"k must be an integer, got {type(k).__name__}")
        if k < 1:
            raise NonPositiveK(k)
        self.k = int(k)
        super().__init__(ratios=ratios, rng=rng, y_col=y_col)
