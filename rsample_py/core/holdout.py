"""Simple, stratified and time-ordered holdout splits."""

import warnings
import numpy as np
from typing import List, Optional

from .config import Scheme, SchemeConfig
from .rsplit import Split
from .seeds import make_rng
from .strata import strata_groups
from ..utils.validation import round_half_up


def warn_single_row_strata(groups: Optional[List[np.ndarray]], scheme: Scheme) -> None:
    """Warn once per run when a stratum is too small to be split."""
    if groups is None:
        return
    n_small = sum(1 for g in groups if len(g) < 2)
    if n_small:
        warnings.warn(
            f"{n_small} stratum/strata with a single row in '{scheme.value}'. "
            "Their rows always land on one side, so the realized proportion drifts from the nominal one.",
            UserWarning
        )


def draw_analysis(
    rng: np.random.Generator,
    n_rows: int,
    proportion: float,
    groups: Optional[List[np.ndarray]] = None
) -> np.ndarray:
    """
    Sample `proportion` of the row positions without replacement.

    With `groups`, the proportion is applied (and rounded half up) within each
    stratum independently and the per-stratum draws are merged.

    Returns:
        Sorted positions of the analysis rows.
    """
    if groups is None:
        n_analysis = round_half_up(n_rows * proportion)
        picked = rng.choice(n_rows, size=n_analysis, replace=False)
    else:
        parts = []
        for group in groups:
            n_group = round_half_up(len(group) * proportion)
            parts.append(group[rng.permutation(len(group))[:n_group]])
        picked = np.concatenate(parts)
    return np.sort(picked)


def complement(positions: np.ndarray, n_rows: int) -> np.ndarray:
    """Sorted positions in ``0..n_rows-1`` that are not in `positions`."""
    return np.setdiff1d(np.arange(n_rows), positions)


def initial_split_positions(
    n_rows: int,
    config: SchemeConfig,
    codes: Optional[np.ndarray],
    seed: int
) -> List[Split]:
    """Single random (optionally stratified) analysis/assessment split."""
    groups = strata_groups(codes) if config.strata else None
    warn_single_row_strata(groups, config.scheme)

    analysis = draw_analysis(make_rng(seed, 0), n_rows, config.proportion, groups)
    return [Split(analysis, complement(analysis, n_rows), config.scheme, id="Train/Test")]


def initial_time_split_positions(n_rows: int, config: SchemeConfig) -> List[Split]:
    """First rows for analysis, the rest for assessment. Input order is taken as time order."""
    n_analysis = round_half_up(n_rows * config.proportion)
    positions = np.arange(n_rows)
    return [Split(positions[:n_analysis], positions[n_analysis:], config.scheme, id="Train/Test")]
