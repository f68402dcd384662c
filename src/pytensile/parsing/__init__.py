"""
Input handling for pytensile.

This package turns user input into datasets: free-text point entry, curve
files (CSV, XLSX, TXT), and YAML specimen descriptions.
"""

from .api import analyze_specimen, validate_yaml_file, compute_from_arrays, SpecimenAnalysis
from .config.specimen_yaml_parser import SpecimenYAMLParser
from .entry import parse_sample, parse_number
from .io.data_handler import load_curve_data

__all__ = [
    'analyze_specimen',
    'validate_yaml_file',
    'compute_from_arrays',
    'SpecimenAnalysis',
    'SpecimenYAMLParser',
    'parse_sample',
    'parse_number',
    'load_curve_data'
]
