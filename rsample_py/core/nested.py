"""Nested resampling: an inner scheme applied to each outer split's analysis rows."""

import dataclasses
import warnings
import numpy as np
import pandas as pd
from typing import List, Tuple

from .config import Scheme, SchemeConfig
from .rsplit import Split, ResampleSet
from .seeds import resolve_seed, derive_seed
from ..exceptions import ConfigurationError
from ..utils.validation import validate_dataset, validate_labels


def check_nested(config: SchemeConfig) -> Tuple[SchemeConfig, SchemeConfig]:
    """Return the (outer, inner) configs of a nested config after structural checks."""
    for name in ("outer", "inner"):
        side = getattr(config, name)
        if not isinstance(side, SchemeConfig):
            raise ConfigurationError(f"Nested resampling needs an '{name}' SchemeConfig.", parameter=name)
        if side.scheme == Scheme.NESTED:
            raise ConfigurationError(f"The '{name}' config of a nested config cannot itself be nested.", parameter=name)
    if config.outer.scheme == Scheme.BOOTSTRAP:
        warnings.warn(
            "Bootstrap outer splits repeat rows; inner resampling uses each distinct "
            "outer analysis row once.",
            UserWarning
        )
    return config.outer, config.inner


def plan_nested(dataset, config: SchemeConfig, labels=None):
    """
    Run the outer resampling and fix every seed the inner runs will use.

    Returns:
        Tuple of (row identifiers, resolved nested config, outer ResampleSet,
        labels as an array or None).
    """
    outer, inner = check_nested(config)
    ids = validate_dataset(dataset)
    if labels is not None and (outer.strata or inner.strata):
        labels = validate_labels(labels, len(ids))

    seed = resolve_seed(config.seed)
    if outer.seed is None:
        outer = outer.with_seed(derive_seed(seed, 0))
    if inner.seed is None:
        inner = inner.with_seed(derive_seed(seed, 1))
    else:
        inner = inner.with_seed(resolve_seed(inner.seed))

    outer_set = _resample(ids, outer, labels)
    resolved = dataclasses.replace(config, seed=seed, outer=outer_set.config, inner=inner)
    return ids, resolved, outer_set, labels


def inner_resample(
    split: Split,
    ids: np.ndarray,
    inner: SchemeConfig,
    labels,
) -> ResampleSet:
    """
    Resample one outer split's analysis rows with the inner config.

    Repeated outer analysis rows (bootstrap) are resampled once each. The
    inner seed is derived from ``inner.seed`` and the split's index, so each
    outer split gets an independent, order-free stream.

    Raises:
        ConfigurationError: If the inner config is invalid for this subset.
    """
    rows = np.unique(split.analysis)
    inner_labels = None
    if inner.strata and labels is not None:
        positions = pd.Index(ids).get_indexer(rows)
        inner_labels = np.asarray(labels)[positions]

    config = inner.with_seed(derive_seed(inner.seed, split.index))
    try:
        return _resample(rows, config, inner_labels)
    except ConfigurationError as e:
        raise ConfigurationError(
            f"Inner resampling of outer split {split.id} ({len(rows)} rows) failed: {e}",
            parameter=e.parameter
        ) from e


def attach(outer_set: ResampleSet, inner_sets: List[ResampleSet], resolved: SchemeConfig) -> ResampleSet:
    """Return the outer splits with their inner sets attached, tagged with the nested config."""
    splits = [dataclasses.replace(s, inner=inner) for s, inner in zip(outer_set, inner_sets)]
    return ResampleSet(splits, resolved)


def nested_resample(dataset, config: SchemeConfig, labels=None) -> ResampleSet:
    """Sequential nested resampling. See `rsample_py.nested_cv`."""
    ids, resolved, outer_set, labels = plan_nested(dataset, config, labels)
    inner_sets = [inner_resample(split, ids, resolved.inner, labels) for split in outer_set]
    return attach(outer_set, inner_sets, resolved)


def _resample(dataset, config, labels):
    from .resampler import resample
    return resample(dataset, config, labels)
