"""Trapezoidal energy integrals over a strain-ordered stress-strain curve."""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def trapezoid_area(strains: np.ndarray, stresses: np.ndarray) -> float:
    """Sum of (e_i - e_{i-1}) * (s_i + s_{i-1}) / 2 over consecutive pairs."""
    if len(strains) != len(stresses):
        raise ValueError(f"Array length mismatch: strains({len(strains)}) != stresses({len(stresses)})")
    if len(strains) < 2:
        return 0.0
    widths = np.diff(strains)
    heights = (stresses[1:] + stresses[:-1]) / 2.0
    return float(np.sum(widths * heights))


def elastic_area(strains: np.ndarray, stresses: np.ndarray, yield_strength: float) -> float:
    """
    Trapezoidal area accumulated while the curve stays at or below the yield strength.

    Pairs are scanned in order; pair (i-1, i) contributes only while stress[i]
    does not exceed the yield strength, and the scan stops at the first sample
    above it. The crossing itself is not interpolated.
    """
    if len(strains) != len(stresses):
        raise ValueError(f"Array length mismatch: strains({len(strains)}) != stresses({len(stresses)})")
    total = 0.0
    for i in range(1, len(strains)):
        if stresses[i] > yield_strength:
            logger.debug("Elastic area stops at sample %d (stress %.6g > yield %.6g)",
                         i, stresses[i], yield_strength)
            break
        total += (strains[i] - strains[i - 1]) * (stresses[i] + stresses[i - 1]) / 2.0
    return float(total)
