"""General data validation utilities."""

import logging
import numpy as np
from pytensile.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)

def is_monotonic(arr: np.ndarray, name: str = "Array",
                 threshold: float = ProcessingConstants.MONOTONICITY_THRESHOLD,
                 raise_error: bool = True) -> bool:
    """Check that an array is non-decreasing; equal neighbours are allowed."""
    for i in range(1, len(arr)):
        if arr[i] - arr[i-1] < -threshold:
            error_msg = (
                f"{name} is not non decreasing at index {i}: "
                f"previous value ({i-1}) {arr[i-1]:.10e}, current value ({i}) {arr[i]:.10e}"
            )
            if raise_error:
                raise ValueError(error_msg)
            logger.debug("%s", error_msg)
            return False
    logger.debug("%s is non decreasing", name)
    return True
