"""
Quick Start Examples for rsample_py
===================================

This file shows the most common use cases of the library.
"""

import pandas as pd
import numpy as np
from sklearn.linear_model import LinearRegression
from sklearn.model_selection import cross_val_score

from rsample_py import (
    SchemeConfig,
    ResampleCV,
    initial_split,
    bootstraps,
    rolling_origin,
    nested_cv,
    analysis,
    assessment,
    tidy
)
from rsample_py.parallel import nested_cv_parallel


def make_sales_data(n=120, seed=0):
    rng = np.random.default_rng(seed)
    dates = pd.date_range('2015-01-01', periods=n, freq='MS')
    return pd.DataFrame({
        'date': dates,
        'region': rng.choice(['north', 'south', 'east'], size=n, p=[0.6, 0.3, 0.1]),
        'sales': 100 + np.cumsum(rng.normal(size=n)),
    })


# ============================================================================
# 1. STRATIFIED HOLDOUT
# ============================================================================

def quick_example_1_holdout(df):
    """Quick Example 1: Stratified train/test split"""
    print("Example 1: Stratified holdout")
    print("-" * 50)

    split = initial_split(df, prop=0.8, strata=df['region'], seed=42)[0]
    train, test = analysis(split, df), assessment(split, df)
    print(split)
    print(train['region'].value_counts(normalize=True).round(2))
    print(test['region'].value_counts(normalize=True).round(2))


# ============================================================================
# 2. ROLLING ORIGIN
# ============================================================================

def quick_example_2_rolling(df):
    """Quick Example 2: Fixed-window rolling origin over monthly data"""
    print("\nExample 2: Rolling origin")
    print("-" * 50)

    slices = rolling_origin(df, initial=60, assess=12, skip=11, cumulative=False)
    print(slices.summary())
    print(tidy(slices).groupby(['split_id', 'role']).size().unstack())


# ============================================================================
# 3. CROSS-VALIDATION WITH SCIKIT-LEARN
# ============================================================================

def quick_example_3_sklearn(df):
    """Quick Example 3: Repeated v-fold and bootstrap as scikit-learn cv"""
    print("\nExample 3: scikit-learn")
    print("-" * 50)

    X = np.arange(len(df)).reshape(-1, 1)
    y = df['sales'].to_numpy()
    for config in (SchemeConfig('vfold_cv', folds=5, repeats=2, seed=1),
                   SchemeConfig('bootstraps', times=20, seed=1)):
        scores = cross_val_score(LinearRegression(), X, y, cv=ResampleCV(config),
                                 scoring='neg_mean_absolute_error')
        print(f"{config.scheme.value}: MAE {-scores.mean():.2f} over {len(scores)} resamples")


# ============================================================================
# 4. NESTED RESAMPLING
# ============================================================================

def quick_example_4_nested(df):
    """Quick Example 4: Nested resampling, sequential and parallel"""
    print("\nExample 4: Nested resampling")
    print("-" * 50)

    outside = SchemeConfig('vfold_cv', folds=5)
    inside = SchemeConfig('bootstraps', times=25)
    nested = nested_cv(df, outside, inside, seed=7)
    parallel = nested_cv_parallel(df, outside, inside, seed=7, n_jobs=-1, verbose=1)
    print(f"Outer splits: {len(nested)}, inner per split: {len(nested[0].inner)}")
    print(f"Parallel result identical: {parallel.equals(nested)}")

    # A None seed is resolved and recorded, so the run can be reproduced
    boot = bootstraps(df, times=5)
    print(f"Bootstrap seed used: {boot.config.seed}")
    print(f"Reproduced: {bootstraps(df, times=5, seed=boot.config.seed).equals(boot)}")


if __name__ == '__main__':
    data = make_sales_data()
    quick_example_1_holdout(data)
    quick_example_2_rolling(data)
    quick_example_3_sklearn(data)
    quick_example_4_nested(data)
