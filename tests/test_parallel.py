import pytest
import numpy as np

from rsample_py import SchemeConfig, ConfigurationError, nested_cv
from rsample_py.parallel import nested_cv_parallel


OUTSIDE = SchemeConfig("vfold_cv", folds=4)
INSIDE = SchemeConfig("bootstraps", times=5)


def test_parallel_matches_sequential():
    sequential = nested_cv(40, OUTSIDE, INSIDE, seed=17)
    parallel = nested_cv_parallel(40, OUTSIDE, INSIDE, seed=17, n_jobs=2, backend='threading')
    assert parallel.equals(sequential)

def test_parallel_result_independent_of_n_jobs():
    one = nested_cv_parallel(40, OUTSIDE, INSIDE, seed=3, n_jobs=1, backend='threading')
    four = nested_cv_parallel(40, OUTSIDE, INSIDE, seed=3, n_jobs=4, backend='threading')
    assert one.equals(four)

def test_parallel_sequential_fallback():
    rs = nested_cv_parallel(40, OUTSIDE, INSIDE, seed=3, n_jobs=0)
    assert rs.equals(nested_cv(40, OUTSIDE, INSIDE, seed=3))

def test_parallel_with_progress_bar():
    rs = nested_cv_parallel(20, OUTSIDE, INSIDE, seed=1, n_jobs=2, verbose=1, backend='threading')
    assert len(rs) == 4
    assert all(len(s.inner) == 5 for s in rs)

def test_parallel_stratified_labels():
    labels = np.array(['x'] * 16 + ['y'] * 8)
    outside = SchemeConfig("vfold_cv", folds=2, strata=True)
    inside = SchemeConfig("vfold_cv", folds=4, strata=True)
    parallel = nested_cv_parallel(24, outside, inside, labels=labels, seed=2, n_jobs=2, backend='threading')
    assert parallel.equals(nested_cv(24, outside, inside, labels=labels, seed=2))

def test_parallel_inner_error_propagates():
    with pytest.raises(ConfigurationError, match="Inner resampling"):
        nested_cv_parallel(10, SchemeConfig("vfold_cv", folds=2), SchemeConfig("vfold_cv", folds=6),
                           seed=1, n_jobs=2, backend='threading')
