"""Parallel processing utilities for rsample_py."""

import multiprocessing
from typing import Optional

from joblib import Parallel, delayed
from tqdm.auto import tqdm

from .core.config import Scheme, SchemeConfig
from .core.nested import plan_nested, inner_resample, attach, nested_resample
from .core.rsplit import ResampleSet


def nested_cv_parallel(
    dataset,
    outside: SchemeConfig,
    inside: SchemeConfig,
    labels=None,
    seed: Optional[int] = None,
    n_jobs: int = -1,
    verbose: int = 0,
    backend: str = 'loky'
) -> ResampleSet:
    """
    Parallel version of nested_cv using joblib.

    The outer resampling runs once; the inner resampling of each outer split
    is dispatched to a worker. Every inner run has its own derived seed, so
    the result is identical to `nested_cv` whatever `n_jobs` is.

    Args:
        dataset: Row count, pandas DataFrame/Series or row identifiers.
        outside: Outer scheme configuration.
        inside: Inner scheme configuration.
        labels: Per-row labels for whichever side is stratified.
        seed: Seed used for any side whose own seed is None.
        n_jobs: Number of parallel jobs (-1 for all cores, 0 for sequential)
        verbose: Verbosity level (0=silent, 1=progress bar)
        backend: Joblib backend ('loky', 'threading', 'multiprocessing')

    Returns:
        A ResampleSet of outer splits with inner sets attached.

    Example:
        >>> from rsample_py.parallel import nested_cv_parallel
        >>> nested = nested_cv_parallel(
        ...     1000, SchemeConfig('vfold_cv', folds=5), SchemeConfig('bootstraps', times=50),
        ...     seed=1, n_jobs=-1
        ... )
    """
    config = SchemeConfig(Scheme.NESTED, outer=outside, inner=inside, seed=seed)
    if n_jobs == -1:
        n_jobs = multiprocessing.cpu_count()
    elif n_jobs == 0:
        # Fall back to sequential processing
        return nested_resample(dataset, config, labels)

    ids, resolved, outer_set, labels = plan_nested(dataset, config, labels)

    if verbose >= 1:
        outer_splits = tqdm(outer_set, total=len(outer_set), desc="Inner resamples")
    else:
        outer_splits = outer_set

    inner_sets = Parallel(n_jobs=n_jobs, backend=backend, verbose=0)(
        delayed(inner_resample)(split, ids, resolved.inner, labels)
        for split in outer_splits
    )
    return attach(outer_set, inner_sets, resolved)
