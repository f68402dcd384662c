import logging
import math
from typing import Optional, Tuple

import numpy as np

from pytensile.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


def linear_region_size(sample_count: int) -> int:
    """Number of leading samples taken as the linear-elastic region: ceil(N/3)."""
    if sample_count < 0:
        raise ValueError(f"Sample count cannot be negative, got {sample_count}")
    return math.ceil(sample_count / ProcessingConstants.LINEAR_REGION_DIVISOR)


def least_squares_slope(x_array: np.ndarray, y_array: np.ndarray) -> Optional[float]:
    """
    Ordinary least-squares slope of y over x.

    Returns None when the slope is undefined, i.e. fewer than two points or
    zero variance in x.
    """
    if len(x_array) != len(y_array):
        raise ValueError(f"Array length mismatch: x_array({len(x_array)}) != y_array({len(y_array)})")
    if len(x_array) < 2:
        logger.debug("Slope undefined for %d point(s)", len(x_array))
        return None
    if np.ptp(x_array) == 0:
        logger.debug("Slope undefined: all x values identical (%.6g)", x_array[0])
        return None
    x_mean = np.mean(x_array)
    y_mean = np.mean(y_array)
    dx = x_array - x_mean
    numerator = float(np.sum(dx * (y_array - y_mean)))
    denominator = float(np.sum(dx ** 2))
    logger.debug("Least-squares sums: numerator=%.6e, denominator=%.6e", numerator, denominator)
    if denominator == 0.0:
        logger.debug("Slope undefined: zero variance in x")
        return None
    return numerator / denominator


def youngs_modulus(strains: np.ndarray, stresses: np.ndarray) -> Tuple[Optional[float], int]:
    """
    Fit the elastic modulus over the first ceil(N/3) samples.

    Returns:
        Tuple of (raw modulus in MPa per unit strain or None, linear region size)
    """
    region = linear_region_size(len(strains))
    modulus = least_squares_slope(strains[:region], stresses[:region])
    if modulus is None:
        logger.warning("Young's modulus is indeterminate over the first %d sample(s)", region)
    else:
        logger.debug("Young's modulus over first %d samples: %.6e MPa", region, modulus)
    return modulus, region


def offset_line(strains: np.ndarray, modulus_raw: float,
                offset: float = ProcessingConstants.YIELD_OFFSET_STRAIN) -> np.ndarray:
    """Stress of the offset line E*(strain - offset) at each strain."""
    return modulus_raw * (strains - offset)


def offset_yield_strength(strains: np.ndarray, stresses: np.ndarray, modulus_raw: Optional[float],
                          offset: float = ProcessingConstants.YIELD_OFFSET_STRAIN) -> Tuple[float, Optional[int]]:
    """
    Yield strength by the offset method.

    The yield strength is the stress of the first sample, in ascending strain
    order, whose stress reaches the offset line at its own strain.

    Returns:
        Tuple of (yield strength, index of the yielding sample). When no sample
        reaches the line, or the modulus is indeterminate, this is (0.0, None).
    """
    if modulus_raw is None:
        logger.debug("Offset yield skipped: modulus is indeterminate")
        return 0.0, None
    line = offset_line(strains, modulus_raw, offset)
    for i, (stress, line_stress) in enumerate(zip(stresses, line)):
        if stress >= line_stress:
            logger.debug("Offset line reached at sample %d: stress=%.6g >= %.6g", i, stress, line_stress)
            return float(stress), i
    logger.info("Curve never reaches the %.4g offset line; yield strength reported as 0", offset)
    return 0.0, None
