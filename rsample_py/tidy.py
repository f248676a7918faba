"""Row-level projection of resampling results."""

import numpy as np
import pandas as pd

from .core.rsplit import ResampleSet, Role

TIDY_COLUMNS = ['split_id', 'row_id', 'role']


def tidy(resample_set: ResampleSet) -> pd.DataFrame:
    """
    Flatten a ResampleSet into one record per (split, row, role).

    Splits appear in set order; within a split the analysis rows come first,
    then the assessment rows, each in stored order. Bootstrap analysis rows
    drawn several times appear once per draw. Inner sets of nested splits are
    not included; call `tidy` on ``split.inner`` for those.

    Args:
        resample_set: Output of `resample` or one of the scheme functions.

    Returns:
        A pandas DataFrame with columns ['split_id', 'row_id', 'role'], where
        role is ``"Analysis"`` or ``"Assessment"``.

    Raises:
        TypeError: If `resample_set` is not a ResampleSet.
    """
    if not isinstance(resample_set, ResampleSet):
        raise TypeError("resample_set must be a ResampleSet.")

    if len(resample_set) == 0:
        return pd.DataFrame(columns=TIDY_COLUMNS)

    split_ids, row_ids, roles = [], [], []
    for split in resample_set:
        n_in, n_out = split.n_analysis, split.n_assessment
        split_ids.append(np.repeat(split.id, n_in + n_out))
        row_ids.append(np.concatenate([split.analysis, split.assessment]))
        roles.append(np.array([Role.ANALYSIS.value] * n_in + [Role.ASSESSMENT.value] * n_out, dtype=object))

    return pd.DataFrame({
        'split_id': np.concatenate(split_ids).astype(object),
        'row_id': np.concatenate(row_ids).astype(np.int64),
        'role': np.concatenate(roles),
    }, columns=TIDY_COLUMNS)
