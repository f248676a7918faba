"""Split and ResampleSet value types."""

import numpy as np
import pandas as pd
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Tuple

from .config import Scheme, SchemeConfig


class Role(str, Enum):
    """Role of a row within one split."""

    ANALYSIS = "Analysis"
    ASSESSMENT = "Assessment"


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=np.int64)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class Split:
    """
    One analysis/assessment partition of a dataset's row identifiers.

    Attributes:
        analysis: Row identifiers used to fit a model. May contain duplicates
            for bootstrap splits.
        assessment: Row identifiers used to evaluate the fitted model.
        scheme: The scheme that produced the split.
        id: Label of the split within its set (e.g. ``"Fold03"``).
        index: 0-based position of the split within its set.
        fold: 1-based fold number (k-fold only).
        repeat: 1-based repeat number (k-fold only).
        inner: Inner resamples of `analysis` (nested resampling only).
    """

    analysis: np.ndarray
    assessment: np.ndarray
    scheme: Scheme
    id: str
    index: int = 0
    fold: Optional[int] = None
    repeat: Optional[int] = None
    inner: Optional["ResampleSet"] = field(default=None, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "analysis", _frozen(self.analysis))
        object.__setattr__(self, "assessment", _frozen(self.assessment))

    @property
    def n_analysis(self) -> int:
        return len(self.analysis)

    @property
    def n_assessment(self) -> int:
        return len(self.assessment)

    def equals(self, other: "Split") -> bool:
        """Whether two splits hold the same rows in the same order and the same tags."""
        if not isinstance(other, Split):
            return False
        same = (
            self.scheme == other.scheme and self.id == other.id and self.index == other.index
            and self.fold == other.fold and self.repeat == other.repeat
            and np.array_equal(self.analysis, other.analysis)
            and np.array_equal(self.assessment, other.assessment)
        )
        if not same:
            return False
        if self.inner is None or other.inner is None:
            return self.inner is None and other.inner is None
        return self.inner.equals(other.inner)

    def __repr__(self) -> str:
        total = len(np.unique(np.concatenate([self.analysis, self.assessment])))
        return f"<Split {self.id} Analysis/Assess/Total <{self.n_analysis}/{self.n_assessment}/{total}>>"


@dataclass(frozen=True, eq=False)
class ResampleSet:
    """
    Ordered splits produced by one resampling run, with the config that made them.

    The stored `config` always carries a concrete seed, so
    ``resample(dataset, resample_set.config, labels)`` reproduces the set.
    """

    splits: Tuple[Split, ...]
    config: SchemeConfig

    def __post_init__(self):
        object.__setattr__(self, "splits", tuple(self.splits))

    def __len__(self) -> int:
        return len(self.splits)

    def __iter__(self) -> Iterator[Split]:
        return iter(self.splits)

    def __getitem__(self, item) -> Split:
        return self.splits[item]

    @property
    def scheme(self) -> Scheme:
        return self.config.scheme

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(s.id for s in self.splits)

    def equals(self, other: "ResampleSet") -> bool:
        """Whether both sets hold equal splits in the same order."""
        if not isinstance(other, ResampleSet) or len(self) != len(other):
            return False
        return all(a.equals(b) for a, b in zip(self.splits, other.splits))

    def tidy(self) -> pd.DataFrame:
        """Row-level long format, see `rsample_py.tidy.tidy`."""
        from ..tidy import tidy
        return tidy(self)

    def summary(self) -> pd.DataFrame:
        """One row per split with its analysis and assessment sizes."""
        return pd.DataFrame({
            'split_id': [s.id for s in self.splits],
            'n_analysis': [s.n_analysis for s in self.splits],
            'n_assessment': [s.n_assessment for s in self.splits],
        }, columns=['split_id', 'n_analysis', 'n_assessment'])

    def __repr__(self) -> str:
        return f"<ResampleSet {self.scheme.value}: {len(self)} splits>"


def split_label(prefix: str, number: int, total: int) -> str:
    """Build a split label such as ``Fold03``, zero-padded to the width of `total`."""
    return f"{prefix}{number:0{len(str(total))}d}"
