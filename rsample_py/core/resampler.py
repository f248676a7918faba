"""Scheme dispatch: `resample` turns a dataset and a SchemeConfig into a ResampleSet."""

import dataclasses
import numpy as np
from typing import List, Optional

from .config import Scheme, SchemeConfig
from .rsplit import Split, ResampleSet
from .seeds import resolve_seed
from .holdout import initial_split_positions, initial_time_split_positions
from .vfold import vfold_positions, loo_positions
from .bootstrap import mc_positions, bootstrap_positions
from .rolling import rolling_origin_positions
from ..utils.validation import validate_dataset, validate_config


# Schemes that draw from a seeded stream, optionally within strata.
_RANDOM_RESAMPLERS = {
    Scheme.INITIAL_SPLIT: initial_split_positions,
    Scheme.VFOLD: vfold_positions,
    Scheme.MC: mc_positions,
    Scheme.BOOTSTRAP: bootstrap_positions,
}

# Schemes fully determined by the row order.
_ORDERED_RESAMPLERS = {
    Scheme.INITIAL_TIME_SPLIT: initial_time_split_positions,
    Scheme.LOO: loo_positions,
    Scheme.ROLLING_ORIGIN: rolling_origin_positions,
}


def _positions(n_rows: int, config: SchemeConfig, codes: Optional[np.ndarray], seed: int) -> List[Split]:
    if config.scheme in _ORDERED_RESAMPLERS:
        return _ORDERED_RESAMPLERS[config.scheme](n_rows, config)
    return _RANDOM_RESAMPLERS[config.scheme](n_rows, config, codes, seed)


def resample(dataset, config: SchemeConfig, labels=None) -> ResampleSet:
    """
    Resample a dataset according to a scheme configuration.

    The resampler only looks at row identifiers and, for stratified schemes,
    the labels; it never reads row contents. Identical (dataset, config,
    labels) with a fixed seed always give identical output.

    Args:
        dataset: Number of rows, a pandas DataFrame/Series (positional
            identifiers) or a 1-D sequence of unique integer row identifiers.
            Time-ordered schemes take this order as chronological.
        config: The scheme to apply. Nested configs are delegated to
            `nested_cv`.
        labels: Per-row stratification labels, parallel to `dataset`.
            Required when ``config.strata`` is set, ignored otherwise.

    Returns:
        ResampleSet: The splits, with identifiers from `dataset`, and the
        config that produced them (seed resolved).

    Raises:
        ConfigurationError: If the config or its inputs violate a
            precondition. Raised before any split is drawn.
        TypeError: If `config` is not a SchemeConfig.
    """
    if not isinstance(config, SchemeConfig):
        raise TypeError("config must be a SchemeConfig.")

    if config.scheme == Scheme.NESTED:
        from .nested import nested_resample
        return nested_resample(dataset, config, labels)

    ids = validate_dataset(dataset)
    codes = validate_config(config, len(ids), labels)

    seed = resolve_seed(config.seed)
    resolved = config.with_seed(seed)

    splits = [
        dataclasses.replace(s, analysis=ids[s.analysis], assessment=ids[s.assessment])
        for s in _positions(len(ids), resolved, codes, seed)
    ]
    return ResampleSet(splits, resolved)
