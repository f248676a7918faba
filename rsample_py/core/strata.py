"""Conversion of per-row labels into stratum codes."""

import warnings
import numpy as np
import pandas as pd
from typing import List


def make_strata(labels: np.ndarray, breaks: int = 4) -> np.ndarray:
    """
    Map per-row labels to integer stratum codes.

    Floating point labels are binned into `breaks` quantile bins; every other
    dtype is treated as categorical. Codes follow the sorted order of the
    distinct labels (or bins), so the same labels always give the same codes.

    Args:
        labels: One label per row.
        breaks: Number of quantile bins for floating point labels.

    Returns:
        An int array of stratum codes, parallel to `labels`.
    """
    labels = np.asarray(labels)
    if labels.dtype.kind == 'f':
        if np.isnan(labels).any():
            raise ValueError("Numeric strata labels must not contain NaN.")
        bins = pd.qcut(labels, q=breaks, labels=False, duplicates='drop')
        codes = np.asarray(bins, dtype=np.int64)
        n_bins = len(np.unique(codes))
        if n_bins < breaks:
            warnings.warn(
                f"Numeric strata could only be split into {n_bins} bins instead of the requested {breaks}.",
                UserWarning
            )
        return codes

    codes, _ = pd.factorize(pd.Series(labels, dtype=object), sort=True)
    if (codes < 0).any():
        raise ValueError("Strata labels must not contain missing values.")
    return codes.astype(np.int64)


def strata_groups(codes: np.ndarray) -> List[np.ndarray]:
    """Return the sorted row positions of each stratum, in code order."""
    codes = np.asarray(codes)
    return [np.flatnonzero(codes == code) for code in np.unique(codes)]
