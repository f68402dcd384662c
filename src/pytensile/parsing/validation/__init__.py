"""Validation utilities for pytensile."""

from .array_validator import is_monotonic
from .errors import ConfigurationError, UnknownFieldError

__all__ = [
    "ConfigurationError",
    "UnknownFieldError",
    "is_monotonic"
]
