"""
pytensile - stress-strain curve analysis.

This library collects stress/strain data pairs, renders them as a line chart,
and derives elementary material properties from the curve: tensile strength,
Young's modulus, 0.2% offset yield strength, toughness, ductility and
resilience.

Main Components:
- Core: Sample and Dataset value types, result types, session state
- Algorithms: Property calculator, elastic fit, energy integrals
- Parsing: Point entry, curve files, YAML specimen descriptions
- Visualization: Chart rendering, SVG export, display formatting
- Data: Processing constants
"""

try:
    from importlib.metadata import version, PackageNotFoundError
    __version__ = version("pytensile")
except PackageNotFoundError:
    __version__ = "0.1.0+unknown"  # Fallback version

# Core data structures
from .core.samples import Sample, Dataset
from .core.results import DerivedProperties, Computed, Unavailable
from .core.session import PlotterSession

# Main API functions
from .algorithms.calculator import compute_properties
from .parsing.api import analyze_specimen, validate_yaml_file, compute_from_arrays
from .parsing.entry import parse_sample
from .parsing.io.data_handler import load_curve_data

# Visualization
from .visualization.plotters import CurveVisualizer
from .visualization.formatting import format_properties, property_lines

__all__ = [
    # Version
    '__version__',

    # Core classes
    'Sample',
    'Dataset',
    'DerivedProperties',
    'Computed',
    'Unavailable',
    'PlotterSession',

    # Main API
    'compute_properties',
    'analyze_specimen',
    'validate_yaml_file',
    'compute_from_arrays',
    'parse_sample',
    'load_curve_data',

    # Visualization
    'CurveVisualizer',
    'format_properties',
    'property_lines'
]
