"""Custom exceptions for rsample_py."""

from typing import Optional


class RsampleError(Exception):
    """Base exception for rsample_py."""
    pass


class ConfigurationError(RsampleError, ValueError):
    """Raised when a scheme configuration or its inputs are invalid.

    Args:
        message: Description of the violated precondition.
        parameter: Name of the offending parameter, if there is one.
    """

    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.parameter = parameter


class SplitValidationError(RsampleError):
    """Raised when produced splits break the analysis/assessment invariants."""
    pass
