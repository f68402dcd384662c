"""File input for stress-strain curves."""

from .data_handler import load_curve_data

__all__ = [
    "load_curve_data"
]
