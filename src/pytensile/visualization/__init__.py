"""Chart rendering, SVG export and display formatting."""

from .plotters import CurveVisualizer
from .formatting import format_properties, property_lines, data_point_lines

__all__ = [
    "CurveVisualizer",
    "format_properties",
    "property_lines",
    "data_point_lines"
]
