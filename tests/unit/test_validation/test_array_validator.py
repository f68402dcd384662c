"""Unit tests for array validation functions."""

import pytest
import numpy as np
from pytensile.parsing.validation.array_validator import is_monotonic

class TestArrayValidator:
    """Test cases for array validation functions."""
    def test_non_decreasing_allows_ties(self):
        assert is_monotonic(np.array([0.0, 0.001, 0.001, 0.002])) is True

    def test_decrease_reported_without_raising(self):
        assert is_monotonic(np.array([0.0, 0.002, 0.001]), raise_error=False) is False

    def test_error_raising(self):
        with pytest.raises(ValueError, match="not non decreasing at index 2"):
            is_monotonic(np.array([0.0, 0.002, 0.001]), name="Strain")

    def test_threshold_tolerates_small_decrease(self):
        assert is_monotonic(np.array([0.0, 0.002, 0.0015]), threshold=0.001) is True

    @pytest.mark.parametrize("array", [np.array([]), np.array([42.0])])
    def test_trivial_arrays(self, array):
        assert is_monotonic(array) is True
