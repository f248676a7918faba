"""Scheme configuration objects."""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..exceptions import ConfigurationError


class Scheme(str, Enum):
    """Resampling schemes understood by `resample`."""

    INITIAL_SPLIT = "initial_split"
    INITIAL_TIME_SPLIT = "initial_time_split"
    VFOLD = "vfold_cv"
    LOO = "loo_cv"
    MC = "mc_cv"
    BOOTSTRAP = "bootstraps"
    ROLLING_ORIGIN = "rolling_origin"
    NESTED = "nested_cv"


# Schemes whose `proportion` must lie in (0, 1)
PROPORTION_SCHEMES = (Scheme.INITIAL_SPLIT, Scheme.INITIAL_TIME_SPLIT, Scheme.MC)

# Schemes that accept `strata=True`
STRATIFIED_SCHEMES = (Scheme.INITIAL_SPLIT, Scheme.VFOLD, Scheme.MC, Scheme.BOOTSTRAP)


@dataclass(frozen=True)
class SchemeConfig:
    """
    Configuration selecting one resampling scheme and its parameters.

    Only the fields relevant to `scheme` are read; the others keep their
    defaults and are ignored. Parameter values are checked by `resample`
    against the dataset they are applied to, so a config can be valid for one
    dataset and invalid for a smaller one.

    Args:
        scheme: A `Scheme` member or its string value (e.g. ``"vfold_cv"``).
        proportion: Fraction of rows placed in the analysis set
            (holdout, time holdout, Monte Carlo).
        folds: Number of folds for k-fold cross-validation.
        repeats: Number of independent k-fold repetitions.
        times: Number of Monte Carlo or bootstrap splits.
        strata: Whether to stratify on the labels passed to `resample`.
        breaks: Number of quantile bins used when the labels are floats.
        initial: Analysis window size of the first rolling-origin slice.
        assess: Number of assessment rows per rolling-origin slice.
        skip: Rows skipped between consecutive rolling-origin slices.
        cumulative: Whether rolling-origin analysis windows grow (True) or
            keep a fixed width (False).
        seed: Random seed. ``None`` draws fresh entropy, which is recorded in
            the returned `ResampleSet.config`.
        outer: Outer configuration (nested only).
        inner: Inner configuration (nested only).

    Raises:
        ConfigurationError: If `scheme` is not a known scheme.
    """

    scheme: Union[Scheme, str]
    proportion: float = 0.75
    folds: int = 10
    repeats: int = 1
    times: int = 25
    strata: bool = False
    breaks: int = 4
    initial: Optional[int] = None
    assess: int = 1
    skip: int = 0
    cumulative: bool = True
    seed: Optional[int] = None
    outer: Optional["SchemeConfig"] = None
    inner: Optional["SchemeConfig"] = None

    def __post_init__(self):
        try:
            scheme = Scheme(self.scheme)
        except ValueError:
            known = ", ".join(s.value for s in Scheme)
            raise ConfigurationError(
                f"Unknown scheme '{self.scheme}'. Choose one of: {known}.",
                parameter="scheme"
            )
        object.__setattr__(self, "scheme", scheme)

    @property
    def is_random(self) -> bool:
        """Whether the scheme consumes the seed."""
        if self.scheme == Scheme.NESTED:
            return any(c is not None and c.is_random for c in (self.outer, self.inner))
        return self.scheme not in (Scheme.INITIAL_TIME_SPLIT, Scheme.LOO, Scheme.ROLLING_ORIGIN)

    def with_seed(self, seed: Optional[int]) -> "SchemeConfig":
        """Return a copy of this config with a different seed."""
        return dataclasses.replace(self, seed=seed)
