"""Validation utilities for rsample_py."""

import numbers
import numpy as np
import pandas as pd
from typing import Optional, Union, Sequence

from ..exceptions import ConfigurationError, SplitValidationError
from ..core.config import Scheme, SchemeConfig, PROPORTION_SCHEMES, STRATIFIED_SCHEMES
from ..core.strata import make_strata, strata_groups


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 rounded up.

    The value is first rounded to 9 decimals so that products such as
    ``25 * 0.58 == 14.499999999999998`` count as an exact half.
    """
    return int(np.floor(np.round(value, 9) + 0.5))


def validate_dataset(dataset: Union[int, Sequence[int], np.ndarray, pd.DataFrame, pd.Series]) -> np.ndarray:
    """
    Validate a dataset and return its row identifiers.

    Args:
        dataset: Either the number of rows N (identifiers ``0..N-1``), a pandas
            DataFrame/Series (identifiers are its row positions) or a 1-D
            sequence of unique integer row identifiers.

    Returns:
        np.ndarray: The row identifiers, in dataset order.

    Raises:
        ConfigurationError: If the dataset is empty or its identifiers are
            not unique 1-D integers.
    """
    if isinstance(dataset, (bool, np.bool_)):
        raise ConfigurationError("dataset must be a row count or a sequence of row identifiers.", parameter="dataset")
    if isinstance(dataset, numbers.Integral):
        if dataset < 0:
            raise ConfigurationError(f"Row count must be non-negative, got {dataset}.", parameter="dataset")
        ids = np.arange(int(dataset), dtype=np.int64)
    elif isinstance(dataset, (pd.DataFrame, pd.Series)):
        ids = np.arange(len(dataset), dtype=np.int64)
    else:
        ids = np.asarray(dataset)
        if ids.ndim != 1:
            raise ConfigurationError("Row identifiers must be one-dimensional.", parameter="dataset")
        if ids.size and ids.dtype.kind not in 'iu':
            raise ConfigurationError("Row identifiers must be integers.", parameter="dataset")
        ids = ids.astype(np.int64)
        if len(np.unique(ids)) != len(ids):
            raise ConfigurationError("Row identifiers must be unique.", parameter="dataset")

    if len(ids) == 0:
        raise ConfigurationError("dataset must contain at least one row.", parameter="dataset")
    return ids


def validate_labels(labels, n_rows: int) -> np.ndarray:
    """Validate stratification labels against the dataset length."""
    if labels is None:
        raise ConfigurationError("strata was requested but no labels were supplied.", parameter="labels")
    if isinstance(labels, (pd.Series, pd.Index)):
        labels = labels.to_numpy()
    labels = np.asarray(labels)
    if labels.ndim != 1:
        raise ConfigurationError("labels must be one-dimensional.", parameter="labels")
    if len(labels) != n_rows:
        raise ConfigurationError(
            f"labels has length {len(labels)} but the dataset has {n_rows} rows.",
            parameter="labels"
        )
    return labels


def _check_count(value, name: str, minimum: int) -> None:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f"'{name}' must be an integer, got {value!r}.", parameter=name)
    if value < minimum:
        if minimum == 1:
            raise ConfigurationError(f"'{name}' must be positive, got {value}.", parameter=name)
        raise ConfigurationError(f"'{name}' must be at least {minimum}, got {value}.", parameter=name)


def _check_proportion(config: SchemeConfig, n_rows: int, codes: Optional[np.ndarray]) -> None:
    prop = config.proportion
    if isinstance(prop, (bool, np.bool_)) or not isinstance(prop, numbers.Real) or not 0 < prop < 1:
        raise ConfigurationError(f"'proportion' must be in (0, 1), got {prop!r}.", parameter="proportion")

    if codes is not None:
        n_analysis = sum(round_half_up(len(g) * prop) for g in strata_groups(codes))
    else:
        n_analysis = round_half_up(n_rows * prop)
    if n_analysis == 0 or n_analysis == n_rows:
        side = "analysis" if n_analysis == 0 else "assessment"
        raise ConfigurationError(
            f"'proportion' {prop} leaves an empty {side} set for a dataset of {n_rows} rows.",
            parameter="proportion"
        )


def validate_config(config: SchemeConfig, n_rows: int, labels=None) -> Optional[np.ndarray]:
    """
    Check a non-nested config against a dataset of `n_rows` rows.

    Args:
        config: The scheme configuration.
        n_rows: Number of rows in the dataset.
        labels: Per-row stratification labels; only read when
            `config.strata` is set.

    Returns:
        The stratum codes of the rows when `config.strata` is set, else None.

    Raises:
        ConfigurationError: Naming the first violated precondition.
    """
    scheme = config.scheme
    if scheme == Scheme.NESTED:
        raise ConfigurationError("Nested configs cannot be validated against a single dataset.", parameter="scheme")

    codes = None
    if config.strata:
        if scheme not in STRATIFIED_SCHEMES:
            raise ConfigurationError(f"Scheme '{scheme.value}' does not support stratification.", parameter="strata")
        _check_count(config.breaks, "breaks", 1)
        labels = validate_labels(labels, n_rows)
        try:
            codes = make_strata(labels, config.breaks)
        except ValueError as e:
            raise ConfigurationError(f"Invalid strata labels: {e}", parameter="labels")

    if scheme in PROPORTION_SCHEMES:
        _check_proportion(config, n_rows, codes)

    if scheme == Scheme.VFOLD:
        _check_count(config.folds, "folds", 2)
        _check_count(config.repeats, "repeats", 1)
        if config.folds > n_rows:
            raise ConfigurationError(
                f"'folds' ({config.folds}) exceeds the number of rows ({n_rows}).",
                parameter="folds"
            )
    elif scheme == Scheme.LOO:
        if n_rows < 2:
            raise ConfigurationError("Leave-one-out needs at least 2 rows.", parameter="dataset")
    elif scheme in (Scheme.MC, Scheme.BOOTSTRAP):
        _check_count(config.times, "times", 1)
    elif scheme == Scheme.ROLLING_ORIGIN:
        if config.initial is None:
            raise ConfigurationError("'initial' is required for rolling origin.", parameter="initial")
        _check_count(config.initial, "initial", 1)
        _check_count(config.assess, "assess", 1)
        _check_count(config.skip, "skip", 0)
        if config.initial >= n_rows:
            raise ConfigurationError(
                f"'initial' ({config.initial}) must be smaller than the number of rows ({n_rows}).",
                parameter="initial"
            )
        if config.initial + config.assess > n_rows:
            raise ConfigurationError(
                f"'initial' ({config.initial}) plus 'assess' ({config.assess}) exceeds the number of rows ({n_rows}).",
                parameter="assess"
            )
    return codes


def validate_resample_set(resample_set, dataset) -> None:
    """
    Check that every split of a ResampleSet respects the split invariants.

    Analysis and assessment must be disjoint and drawn from the dataset's
    row identifiers; inner sets of nested splits must stay within their outer
    split's analysis rows.

    Raises:
        SplitValidationError: If a split is invalid.
    """
    ids = validate_dataset(dataset)
    for split in resample_set:
        if not np.isin(split.analysis, ids).all():
            raise SplitValidationError(f"Split {split.id}: analysis rows are not in the dataset.")
        if not np.isin(split.assessment, ids).all():
            raise SplitValidationError(f"Split {split.id}: assessment rows are not in the dataset.")
        if len(np.intersect1d(split.analysis, split.assessment)) > 0:
            raise SplitValidationError(f"Split {split.id}: analysis and assessment sets overlap.")
        if split.inner is not None:
            try:
                validate_resample_set(split.inner, np.unique(split.analysis))
            except SplitValidationError as e:
                raise SplitValidationError(f"Split {split.id} inner: {e}")
