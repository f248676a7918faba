"""Convenience functions: one call per resampling scheme, plus row accessors."""

import numpy as np
import pandas as pd
from typing import Optional, Union

from .core.config import Scheme, SchemeConfig
from .core.resampler import resample
from .core.rsplit import Split, ResampleSet


def initial_split(
    dataset,
    prop: float = 0.75,
    strata=None,
    breaks: int = 4,
    seed: Optional[int] = None
) -> ResampleSet:
    """
    Single random split into analysis (training) and assessment (testing) rows.

    Args:
        dataset: Row count, pandas DataFrame/Series or row identifiers.
        prop: Proportion of rows placed in the analysis set.
        strata: Optional per-row labels. When given, `prop` is applied within
            each stratum separately.
        breaks: Quantile bins for floating point `strata`.
        seed: Random seed.

    Returns:
        A ResampleSet holding one split.

    Example:
        >>> split = initial_split(df, prop=0.8, strata=df['segment'], seed=42)[0]
        >>> train, test = analysis(split, df), assessment(split, df)
    """
    config = SchemeConfig(Scheme.INITIAL_SPLIT, proportion=prop, strata=strata is not None,
                          breaks=breaks, seed=seed)
    return resample(dataset, config, strata)


def initial_time_split(dataset, prop: float = 0.75) -> ResampleSet:
    """Split time-ordered rows: the first `prop` of them for analysis, the rest for assessment."""
    return resample(dataset, SchemeConfig(Scheme.INITIAL_TIME_SPLIT, proportion=prop))


def vfold_cv(
    dataset,
    v: int = 10,
    repeats: int = 1,
    strata=None,
    breaks: int = 4,
    seed: Optional[int] = None
) -> ResampleSet:
    """
    V-fold cross-validation, optionally repeated and stratified.

    Args:
        dataset: Row count, pandas DataFrame/Series or row identifiers.
        v: Number of folds.
        repeats: Number of independent repetitions of the whole partition.
        strata: Optional per-row labels used to balance the folds.
        breaks: Quantile bins for floating point `strata`.
        seed: Random seed.

    Returns:
        A ResampleSet of ``v * repeats`` splits.
    """
    config = SchemeConfig(Scheme.VFOLD, folds=v, repeats=repeats, strata=strata is not None,
                          breaks=breaks, seed=seed)
    return resample(dataset, config, strata)


def loo_cv(dataset) -> ResampleSet:
    """Leave-one-out cross-validation: one split per row."""
    return resample(dataset, SchemeConfig(Scheme.LOO))


def mc_cv(
    dataset,
    prop: float = 0.75,
    times: int = 25,
    strata=None,
    breaks: int = 4,
    seed: Optional[int] = None
) -> ResampleSet:
    """Monte Carlo cross-validation: `times` independent random holdouts."""
    config = SchemeConfig(Scheme.MC, proportion=prop, times=times, strata=strata is not None,
                          breaks=breaks, seed=seed)
    return resample(dataset, config, strata)


def bootstraps(
    dataset,
    times: int = 25,
    strata=None,
    breaks: int = 4,
    seed: Optional[int] = None
) -> ResampleSet:
    """Bootstrap resampling: analysis drawn with replacement, out-of-bag rows for assessment."""
    config = SchemeConfig(Scheme.BOOTSTRAP, times=times, strata=strata is not None,
                          breaks=breaks, seed=seed)
    return resample(dataset, config, strata)


def rolling_origin(
    dataset,
    initial: int = 5,
    assess: int = 1,
    cumulative: bool = True,
    skip: int = 0
) -> ResampleSet:
    """
    Rolling origin resampling over time-ordered rows.

    Args:
        dataset: Row count, pandas DataFrame/Series or row identifiers, in
            chronological order.
        initial: Analysis window size of the first slice.
        assess: Assessment rows per slice.
        cumulative: Whether the analysis window grows (True) or keeps a fixed
            width and rolls forward (False).
        skip: Rows skipped between consecutive slices.

    Returns:
        A ResampleSet of slices.
    """
    config = SchemeConfig(Scheme.ROLLING_ORIGIN, initial=initial, assess=assess,
                          cumulative=cumulative, skip=skip)
    return resample(dataset, config)


def nested_cv(
    dataset,
    outside: SchemeConfig,
    inside: SchemeConfig,
    labels=None,
    seed: Optional[int] = None
) -> ResampleSet:
    """
    Nested resampling.

    The dataset is resampled with `outside`; the analysis rows of every outer
    split are then resampled with `inside`, and the inner ResampleSet is
    attached to the outer split as ``split.inner``.

    Args:
        dataset: Row count, pandas DataFrame/Series or row identifiers.
        outside: Outer scheme configuration. Must not be bootstrap.
        inside: Inner scheme configuration.
        labels: Per-row labels for whichever side is stratified.
        seed: Seed used for any side whose own seed is None.

    Returns:
        A ResampleSet of outer splits, each with an inner ResampleSet.

    Raises:
        ConfigurationError: If either config is invalid for the rows it is
            applied to. Inner failures name the outer split they occurred in.
    """
    config = SchemeConfig(Scheme.NESTED, outer=outside, inner=inside, seed=seed)
    return resample(dataset, config, labels)


def analysis(split: Split, data: Union[pd.DataFrame, pd.Series]) -> Union[pd.DataFrame, pd.Series]:
    """Rows of `data` in the split's analysis set, selected by position."""
    return _rows(split.analysis, data)


def assessment(split: Split, data: Union[pd.DataFrame, pd.Series]) -> Union[pd.DataFrame, pd.Series]:
    """Rows of `data` in the split's assessment set, selected by position."""
    return _rows(split.assessment, data)


def _rows(row_ids: np.ndarray, data):
    if not isinstance(data, (pd.DataFrame, pd.Series)):
        raise TypeError("Input 'data' must be a pandas DataFrame or Series.")
    if len(row_ids) and row_ids.max() >= len(data):
        raise ValueError(f"Split refers to row {row_ids.max()} but data has only {len(data)} rows.")
    return data.iloc[row_ids]
