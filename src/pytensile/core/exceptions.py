"""Custom exceptions for pytensile core functionality."""
import logging

logger = logging.getLogger(__name__)


class TensileError(Exception):
    """Base exception for all tensile-data errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("TensileError raised: %s", message)


class SampleError(TensileError):
    """Exception raised when a stress/strain sample holds an invalid value."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("SampleError raised: %s", message)


class DatasetError(TensileError):
    """Exception raised when a dataset cannot be assembled from the given arrays."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("DatasetError raised: %s", message)
