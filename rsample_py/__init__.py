"""
Rsample for Python
==================

A Python implementation of data resampling schemes, inspired by the R
rsample package.

This package provides tools for:
- Random, stratified and time-ordered holdout splits
- V-fold (repeated, stratified), leave-one-out and Monte Carlo cross-validation
- Bootstrap and rolling origin resampling
- Nested resampling, sequential or parallel
- Tidy row-level output and a scikit-learn cross-validator adapter
"""

__version__ = '0.1.0'

# Core
from .core.config import Scheme, SchemeConfig
from .core.rsplit import Role, Split, ResampleSet
from .core.resampler import resample
from .exceptions import RsampleError, ConfigurationError, SplitValidationError

# Scheme functions and row accessors
from .convenience import (
    initial_split,
    initial_time_split,
    vfold_cv,
    loo_cv,
    mc_cv,
    bootstraps,
    rolling_origin,
    nested_cv,
    analysis,
    assessment
)

# Reporting
from .tidy import tidy

# Parallel processing
from .parallel import nested_cv_parallel

# scikit-learn integration
from .model_selection import ResampleCV

__all__ = [
    # Core
    'Scheme',
    'SchemeConfig',
    'Role',
    'Split',
    'ResampleSet',
    'resample',
    'RsampleError',
    'ConfigurationError',
    'SplitValidationError',
    # Schemes
    'initial_split',
    'initial_time_split',
    'vfold_cv',
    'loo_cv',
    'mc_cv',
    'bootstraps',
    'rolling_origin',
    'nested_cv',
    'analysis',
    'assessment',
    # Reporting
    'tidy',
    # Parallel
    'nested_cv_parallel',
    # scikit-learn
    'ResampleCV'
]
