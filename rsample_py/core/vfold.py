"""K-fold and leave-one-out cross-validation."""

import warnings
import numpy as np
from typing import List, Optional

from .config import SchemeConfig
from .rsplit import Split, split_label
from .seeds import make_rng
from .strata import strata_groups


def assign_folds(
    rng: np.random.Generator,
    n_rows: int,
    folds: int,
    groups: Optional[List[np.ndarray]] = None
) -> np.ndarray:
    """
    Randomly assign each row position to one of `folds` folds.

    Rows are shuffled (within each stratum when `groups` is given, strata
    kept in order) and dealt round-robin. One counter runs across all strata,
    so fold sizes differ by at most one overall and within every stratum.
    """
    if groups is None:
        order = rng.permutation(n_rows)
    else:
        order = np.concatenate([g[rng.permutation(len(g))] for g in groups])
    assignment = np.empty(n_rows, dtype=np.int64)
    assignment[order] = np.arange(n_rows) % folds
    return assignment


def vfold_positions(
    n_rows: int,
    config: SchemeConfig,
    codes: Optional[np.ndarray],
    seed: int
) -> List[Split]:
    """V-fold splits, `repeats` times over with an independent shuffle per repeat."""
    v = config.folds
    groups = strata_groups(codes) if config.strata else None
    if groups is not None:
        n_small = sum(1 for g in groups if len(g) < v)
        if n_small:
            warnings.warn(
                f"{n_small} stratum/strata have fewer rows than folds ({v}); "
                "some assessment sets will not contain them.",
                UserWarning
            )

    splits = []
    for r in range(config.repeats):
        assignment = assign_folds(make_rng(seed, r), n_rows, v, groups)
        for i in range(v):
            fold_id = split_label("Fold", i + 1, v)
            if config.repeats > 1:
                split_id = f"{split_label('Repeat', r + 1, config.repeats)}.{fold_id}"
            else:
                split_id = fold_id
            splits.append(Split(
                analysis=np.flatnonzero(assignment != i),
                assessment=np.flatnonzero(assignment == i),
                scheme=config.scheme,
                id=split_id,
                index=len(splits),
                fold=i + 1,
                repeat=r + 1
            ))
    return splits


def loo_positions(n_rows: int, config: SchemeConfig) -> List[Split]:
    """One split per row, holding that row out."""
    positions = np.arange(n_rows)
    return [
        Split(np.delete(positions, i), positions[i:i + 1], config.scheme,
              id=f"Resample{i + 1}", index=i, fold=i + 1)
        for i in range(n_rows)
    ]
