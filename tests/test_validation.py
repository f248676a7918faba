import pytest
import numpy as np
import pandas as pd

from rsample_py import (
    SchemeConfig, Scheme, Split, ResampleSet, ConfigurationError, SplitValidationError, vfold_cv
)
from rsample_py.utils.validation import (
    validate_dataset, validate_labels, validate_config, validate_resample_set, round_half_up
)


@pytest.mark.parametrize("value, expected", [
    (2.5, 3), (2.4999, 2), (0.5, 1), (14.0, 14), (0.0, 0), (25 * 0.58, 15), (7 * 0.5, 4)
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected

@pytest.mark.parametrize("dataset, expected", [
    (4, [0, 1, 2, 3]),
    ([7, 3, 9], [7, 3, 9]),
    (np.array([2, 1], dtype=np.uint8), [2, 1]),
    (pd.Series([1.5, 2.5, 3.5]), [0, 1, 2]),
    (pd.DataFrame({'a': range(3)}, index=[10, 20, 30]), [0, 1, 2]),
])
def test_validate_dataset_valid(dataset, expected):
    np.testing.assert_array_equal(validate_dataset(dataset), expected)

@pytest.mark.parametrize("dataset, match", [
    ([1, 1, 2], "unique"),
    ([0.5, 1.5], "integers"),
    (np.zeros((2, 2), dtype=int), "one-dimensional"),
    (-3, "non-negative"),
    (True, "row count or a sequence"),
    (0, "at least one row"),
])
def test_validate_dataset_invalid(dataset, match):
    with pytest.raises(ConfigurationError, match=match) as exc:
        validate_dataset(dataset)
    assert exc.value.parameter == "dataset"

def test_validate_labels():
    labels = validate_labels(pd.Series(['a', 'b']), 2)
    assert isinstance(labels, np.ndarray)
    with pytest.raises(ConfigurationError, match="one-dimensional"):
        validate_labels(np.zeros((2, 1)), 2)

def test_validate_config_returns_codes_only_when_stratified():
    assert validate_config(SchemeConfig("vfold_cv", folds=2), 10) is None
    codes = validate_config(SchemeConfig("vfold_cv", folds=2, strata=True), 4, labels=['b', 'a', 'b', 'a'])
    np.testing.assert_array_equal(codes, [1, 0, 1, 0])

def test_validate_config_rejects_nested():
    config = SchemeConfig("nested_cv", outer=SchemeConfig("loo_cv"), inner=SchemeConfig("loo_cv"))
    with pytest.raises(ConfigurationError, match="Nested configs"):
        validate_config(config, 10)

@pytest.mark.parametrize("field, value", [("skip", -1), ("assess", 0)])
def test_validate_config_rolling_counts(field, value):
    config = SchemeConfig("rolling_origin", initial=3, **{field: value})
    with pytest.raises(ConfigurationError) as exc:
        validate_config(config, 10)
    assert exc.value.parameter == field

def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        vfold_cv(3, v=5)

def test_unknown_scheme():
    with pytest.raises(ConfigurationError, match="Unknown scheme 'kfold'") as exc:
        SchemeConfig("kfold")
    assert exc.value.parameter == "scheme"

def test_scheme_string_is_normalized():
    config = SchemeConfig("mc_cv")
    assert config.scheme is Scheme.MC
    assert config.is_random
    assert not SchemeConfig("rolling_origin", initial=2).is_random
    assert SchemeConfig("nested_cv", outer=SchemeConfig("loo_cv"), inner=SchemeConfig("mc_cv")).is_random

def test_config_is_frozen_and_with_seed_copies():
    config = SchemeConfig("vfold_cv", seed=1)
    with pytest.raises(Exception):
        config.seed = 2
    copy = config.with_seed(2)
    assert copy.seed == 2
    assert config.seed == 1
    assert copy.scheme is config.scheme

def test_split_arrays_are_read_only():
    split = vfold_cv(10, v=2, seed=1)[0]
    with pytest.raises(ValueError):
        split.analysis[0] = 99
    assert "Analysis/Assess/Total <5/5/10>" in repr(split)

def test_validate_resample_set_accepts_valid():
    rs = vfold_cv(np.arange(20, 40), v=4, seed=1)
    validate_resample_set(rs, np.arange(20, 40))

def test_validate_resample_set_detects_overlap():
    split = Split(np.array([0, 1, 2]), np.array([2, 3]), Scheme.INITIAL_SPLIT, id="Bad")
    rs = ResampleSet([split], SchemeConfig("initial_split"))
    with pytest.raises(SplitValidationError, match="Split Bad: analysis and assessment sets overlap"):
        validate_resample_set(rs, 5)

def test_validate_resample_set_detects_foreign_rows():
    split = Split(np.array([0, 1]), np.array([42]), Scheme.INITIAL_SPLIT, id="Bad")
    rs = ResampleSet([split], SchemeConfig("initial_split"))
    with pytest.raises(SplitValidationError, match="assessment rows are not in the dataset"):
        validate_resample_set(rs, 5)

def test_validate_resample_set_checks_inner_sets():
    inner = ResampleSet([Split(np.array([0]), np.array([4]), Scheme.LOO, id="Resample1")], SchemeConfig("loo_cv"))
    outer = Split(np.array([0, 1]), np.array([4]), Scheme.VFOLD, id="Fold1", inner=inner)
    rs = ResampleSet([outer], SchemeConfig("vfold_cv"))
    with pytest.raises(SplitValidationError, match="Split Fold1 inner"):
        validate_resample_set(rs, 5)
