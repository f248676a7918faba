"""Monte Carlo cross-validation and bootstrap resampling."""

import warnings
import numpy as np
from typing import List, Optional

from .config import SchemeConfig
from .holdout import complement, draw_analysis, warn_single_row_strata
from .rsplit import Split, split_label
from .seeds import make_rng
from .strata import strata_groups


def mc_positions(
    n_rows: int,
    config: SchemeConfig,
    codes: Optional[np.ndarray],
    seed: int
) -> List[Split]:
    """`times` independent random holdouts; rows may repeat across assessment sets."""
    groups = strata_groups(codes) if config.strata else None
    warn_single_row_strata(groups, config.scheme)

    splits = []
    for i in range(config.times):
        analysis = draw_analysis(make_rng(seed, i), n_rows, config.proportion, groups)
        splits.append(Split(
            analysis, complement(analysis, n_rows), config.scheme,
            id=split_label("Resample", i + 1, config.times), index=i
        ))
    return splits


def draw_bootstrap(
    rng: np.random.Generator,
    n_rows: int,
    groups: Optional[List[np.ndarray]] = None
) -> np.ndarray:
    """
    Draw `n_rows` positions with replacement.

    With `groups`, each stratum is resampled separately to its own size, so the
    stratum composition of the analysis set matches the dataset.

    Returns:
        Sorted drawn positions, duplicates included.
    """
    if groups is None:
        drawn = rng.integers(0, n_rows, size=n_rows)
    else:
        drawn = np.concatenate([g[rng.integers(0, len(g), size=len(g))] for g in groups])
    return np.sort(drawn)


def bootstrap_positions(
    n_rows: int,
    config: SchemeConfig,
    codes: Optional[np.ndarray],
    seed: int
) -> List[Split]:
    """`times` bootstrap draws; the assessment set holds the out-of-bag rows."""
    groups = strata_groups(codes) if config.strata else None
    warn_single_row_strata(groups, config.scheme)

    splits = []
    n_empty = 0
    for i in range(config.times):
        analysis = draw_bootstrap(make_rng(seed, i), n_rows, groups)
        assessment = complement(analysis, n_rows)
        if len(assessment) == 0:
            n_empty += 1
        splits.append(Split(
            analysis, assessment, config.scheme,
            id=split_label("Bootstrap", i + 1, config.times), index=i
        ))

    if n_empty:
        warnings.warn(
            f"{n_empty} of {config.times} bootstrap samples drew every row and have an empty assessment set.",
            UserWarning
        )
    return splits
