"""Utility functions for rsample_py."""

from .validation import (
    validate_dataset, validate_labels, validate_config, validate_resample_set
)

__all__ = ['validate_dataset', 'validate_labels', 'validate_config', 'validate_resample_set']
