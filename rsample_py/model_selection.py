"""scikit-learn cross-validator built on a SchemeConfig."""

import numpy as np
from typing import Iterator, Tuple

from sklearn.utils import indexable

from .core.config import Scheme, SchemeConfig
from .core.resampler import resample
from .core.rsplit import ResampleSet
from .core.seeds import resolve_seed


class ResampleCV:
    """
    Use any resampling scheme as the ``cv`` argument of scikit-learn.

    Each split yields ``(analysis, assessment)`` row positions. Bootstrap
    analysis positions keep their duplicates, so estimators see the rows as
    many times as they were drawn.

    Args:
        config: The resampling scheme. Nested configs yield their outer splits.
        labels: Stratification labels. When the config is stratified and no
            labels are given, ``y`` is used.

    Example:
        >>> from sklearn.model_selection import cross_val_score
        >>> cv = ResampleCV(SchemeConfig('vfold_cv', folds=5, repeats=2, seed=3))
        >>> scores = cross_val_score(LinearRegression(), X, y, cv=cv)
    """

    def __init__(self, config: SchemeConfig, labels=None):
        if not isinstance(config, SchemeConfig):
            raise TypeError("config must be a SchemeConfig.")
        # Fix the seed now so repeated split() calls agree
        self.config = config.with_seed(resolve_seed(config.seed))
        self.labels = labels

    def resamples(self, X, y=None) -> ResampleSet:
        """The ResampleSet for the rows of `X`."""
        labels = self.labels
        if self.config.strata and labels is None:
            labels = y
        n_rows = X.shape[0] if hasattr(X, "shape") else len(X)
        return resample(n_rows, self.config, labels)

    def split(self, X, y=None, groups=None) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
        """Generate analysis/assessment positions for each split."""
        X, y, groups = indexable(X, y, groups)
        for s in self.resamples(X, y):
            yield np.asarray(s.analysis), np.asarray(s.assessment)

    def get_n_splits(self, X=None, y=None, groups=None) -> int:
        """Number of splits. `X` is needed for schemes whose count depends on the data."""
        if X is None:
            scheme = self.config.scheme
            if scheme == Scheme.VFOLD:
                return self.config.folds * self.config.repeats
            if scheme in (Scheme.MC, Scheme.BOOTSTRAP):
                return self.config.times
            if scheme in (Scheme.INITIAL_SPLIT, Scheme.INITIAL_TIME_SPLIT):
                return 1
            raise ValueError(f"X is required to count the splits of '{scheme.value}'.")
        return len(self.resamples(X, y))

    def __repr__(self) -> str:
        return f"ResampleCV(scheme='{self.config.scheme.value}', seed={self.config.seed})"
