"""Core resampling functionality."""

from .config import Scheme, SchemeConfig
from .rsplit import Role, Split, ResampleSet
from .resampler import resample

__all__ = ['Scheme', 'SchemeConfig', 'Role', 'Split', 'ResampleSet', 'resample']
