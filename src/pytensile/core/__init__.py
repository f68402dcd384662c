"""
Core data structures for stress-strain analysis.

This module contains the sample and dataset value types, the outcome types
returned by the property calculator, the exceptions raised for invalid data,
and the session state container used by interactive front ends.
"""

from .samples import Sample, Dataset
from .results import DerivedProperties, Computed, Unavailable, PropertyOutcome
from .exceptions import TensileError, SampleError, DatasetError
from .session import PlotterSession

__all__ = [
    "Sample",
    "Dataset",
    "DerivedProperties",
    "Computed",
    "Unavailable",
    "PropertyOutcome",
    "TensileError",
    "SampleError",
    "DatasetError",
    "PlotterSession"
]
