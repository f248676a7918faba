"""Rolling origin resampling over time-ordered rows."""

import numpy as np
from typing import List

from .config import SchemeConfig
from .rsplit import Split, split_label


def rolling_origin_positions(n_rows: int, config: SchemeConfig) -> List[Split]:
    """
    Slices whose assessment window moves forward through the rows.

    Slice k starts at ``k * (skip + 1)``. Its assessment set is the `assess`
    rows right after the analysis window. The analysis window is
    ``[0, start + initial)`` when cumulative and ``[start, start + initial)``
    otherwise. Slicing stops once the assessment window would pass the last
    row; with ``assess=1, skip=0`` that gives ``n_rows - initial`` slices.
    """
    initial, assess = config.initial, config.assess
    starts = range(0, n_rows - initial - assess + 1, config.skip + 1)
    total = len(starts)

    splits = []
    for k, start in enumerate(starts):
        origin = start + initial
        analysis_start = 0 if config.cumulative else start
        splits.append(Split(
            analysis=np.arange(analysis_start, origin),
            assessment=np.arange(origin, origin + assess),
            scheme=config.scheme,
            id=split_label("Slice", k + 1, total),
            index=k
        ))
    return splits
