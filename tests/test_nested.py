import pytest
import numpy as np

from rsample_py import (
    SchemeConfig, Scheme, ConfigurationError, resample, nested_cv
)
from rsample_py.utils.validation import validate_resample_set


def test_nested_inner_rows_come_from_outer_analysis():
    rs = nested_cv(50, SchemeConfig("vfold_cv", folds=5), SchemeConfig("bootstraps", times=10), seed=1)
    assert len(rs) == 5
    assert rs.scheme == Scheme.NESTED
    for outer in rs:
        assert outer.inner is not None
        assert len(outer.inner) == 10
        for inner in outer.inner:
            assert np.isin(inner.analysis, outer.analysis).all()
            assert np.isin(inner.assessment, outer.analysis).all()
            assert not np.isin(inner.assessment, outer.assessment).any()
    validate_resample_set(rs, 50)

def test_nested_inner_vfold_partitions_outer_analysis():
    rs = nested_cv(np.arange(100, 140), SchemeConfig("vfold_cv", folds=4), SchemeConfig("vfold_cv", folds=3), seed=7)
    for outer in rs:
        inner_assessment = np.concatenate([s.assessment for s in outer.inner])
        np.testing.assert_array_equal(np.sort(inner_assessment), outer.analysis)

def test_nested_via_resample_config():
    config = SchemeConfig(Scheme.NESTED, outer=SchemeConfig("mc_cv", times=3), inner=SchemeConfig("loo_cv"), seed=3)
    rs = resample(12, config)
    assert len(rs) == 3
    for outer in rs:
        assert len(outer.inner) == outer.n_analysis

def test_nested_is_deterministic_and_reproducible():
    outside = SchemeConfig("vfold_cv", folds=3)
    inside = SchemeConfig("mc_cv", proportion=0.5, times=4)
    a = nested_cv(30, outside, inside, seed=42)
    b = nested_cv(30, outside, inside, seed=42)
    assert a.equals(b)
    # The resolved config carries every seed
    assert a.config.outer.seed is not None
    assert a.config.inner.seed is not None
    assert resample(30, a.config).equals(a)

def test_nested_inner_runs_use_independent_seeds():
    rs = nested_cv(40, SchemeConfig("initial_time_split", proportion=0.5),
                   SchemeConfig("bootstraps", times=2), seed=5)
    inner = rs[0].inner
    assert not np.array_equal(inner[0].analysis, inner[1].analysis)

def test_nested_with_explicit_side_seeds():
    outside = SchemeConfig("vfold_cv", folds=2, seed=10)
    inside = SchemeConfig("vfold_cv", folds=2, seed=20)
    a = nested_cv(20, outside, inside, seed=1)
    b = nested_cv(20, outside, inside, seed=2)
    assert a.equals(b)

def test_nested_stratified_inner():
    labels = np.array(['a'] * 24 + ['b'] * 16)
    rs = nested_cv(40, SchemeConfig("vfold_cv", folds=2, strata=True),
                   SchemeConfig("vfold_cv", folds=4, strata=True), labels=labels, seed=9)
    for outer in rs:
        # Outer analysis holds 12 'a' and 8 'b'; inner folds split them 3/2
        for inner in outer.inner:
            assert np.sum(labels[inner.assessment] == 'a') == 3
            assert np.sum(labels[inner.assessment] == 'b') == 2

def test_nested_inner_folds_exceed_outer_analysis():
    # 6 folds is valid for 10 rows but not for the 5-row outer analysis sets
    with pytest.raises(ConfigurationError, match="Inner resampling of outer split Fold1") as exc:
        nested_cv(10, SchemeConfig("vfold_cv", folds=2), SchemeConfig("vfold_cv", folds=6), seed=1)
    assert exc.value.parameter == "folds"

def test_nested_outer_error_is_plain():
    with pytest.raises(ConfigurationError, match="'folds' \\(20\\) exceeds") as exc:
        nested_cv(10, SchemeConfig("vfold_cv", folds=20), SchemeConfig("vfold_cv", folds=2), seed=1)
    assert "Inner" not in str(exc.value)

def test_nested_stratified_inner_without_labels():
    with pytest.raises(ConfigurationError, match="no labels"):
        nested_cv(20, SchemeConfig("vfold_cv", folds=2), SchemeConfig("vfold_cv", folds=2, strata=True), seed=1)

def test_nested_bootstrap_outer_uses_distinct_rows():
    with pytest.warns(UserWarning, match="Bootstrap outer splits repeat rows"):
        rs = nested_cv(20, SchemeConfig("bootstraps", times=3), SchemeConfig("vfold_cv", folds=2), seed=6)
    for outer in rs:
        distinct = np.unique(outer.analysis)
        for inner in outer.inner:
            assert len(np.intersect1d(inner.analysis, inner.assessment)) == 0
            assert np.isin(inner.analysis, distinct).all()
        inner_assessment = np.concatenate([s.assessment for s in outer.inner])
        np.testing.assert_array_equal(np.sort(inner_assessment), distinct)
    validate_resample_set(rs, 20)

def test_nested_bootstrap_outer_stratified_inner():
    labels = np.repeat(['x', 'y'], 15)
    with pytest.warns(UserWarning, match="Bootstrap outer"):
        rs = nested_cv(30, SchemeConfig("bootstraps", times=2),
                       SchemeConfig("vfold_cv", folds=2, strata=True), labels=labels, seed=8)
    for outer in rs:
        assert sum(s.n_assessment for s in outer.inner) == len(np.unique(outer.analysis))

@pytest.mark.parametrize("outer, inner, parameter", [
    (None, SchemeConfig("loo_cv"), "outer"),
    (SchemeConfig("loo_cv"), None, "inner"),
    (SchemeConfig("loo_cv"), SchemeConfig("nested_cv"), "inner"),
])
def test_nested_structure_errors(outer, inner, parameter):
    with pytest.raises(ConfigurationError) as exc:
        resample(10, SchemeConfig("nested_cv", outer=outer, inner=inner))
    assert exc.value.parameter == parameter
