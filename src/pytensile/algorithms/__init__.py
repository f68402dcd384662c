"""
Computational algorithms for stress-strain analysis.

This module provides the property calculator together with its building
blocks: the least-squares elastic fit, the offset-method yield search, the
trapezoidal energy integrals, and symbolic elastic/offset lines.
"""

from .calculator import compute_properties
from .elastic import linear_region_size, least_squares_slope, youngs_modulus, offset_yield_strength
from .energy import trapezoid_area, elastic_area
from .symbolic import elastic_line_expression, offset_line_expression, offset_line_function

__all__ = [
    "compute_properties",
    "linear_region_size",
    "least_squares_slope",
    "youngs_modulus",
    "offset_yield_strength",
    "trapezoid_area",
    "elastic_area",
    "elastic_line_expression",
    "offset_line_expression",
    "offset_line_function"
]
