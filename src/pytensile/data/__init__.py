"""
Constants and bundled specimen data.

This package provides the processing constants used throughout pytensile and a
small set of example tensile test descriptions under ``specimens/``.
"""

from .constants.processing_constants import ProcessingConstants, ErrorMessages, FileConstants

__all__ = [
    "ProcessingConstants",
    "ErrorMessages",
    "FileConstants"
]
