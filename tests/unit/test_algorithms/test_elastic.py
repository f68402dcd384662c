"""Unit tests for the elastic fit and offset yield helpers."""

import pytest
import numpy as np

from pytensile.algorithms.elastic import (linear_region_size, least_squares_slope, youngs_modulus,
                                          offset_line, offset_yield_strength)


class TestLinearRegion:
    """Test cases for the one-third linear region heuristic."""
    @pytest.mark.parametrize("count,expected", [
        (0, 0), (1, 1), (2, 1), (3, 1), (4, 2), (5, 2), (6, 2), (7, 3), (9, 3), (10, 4)
    ])
    def test_ceil_one_third(self, count, expected):
        assert linear_region_size(count) == expected

    def test_negative_count(self):
        with pytest.raises(ValueError, match="negative"):
            linear_region_size(-1)


class TestLeastSquaresSlope:
    """Test cases for least_squares_slope."""
    def test_exact_line(self):
        x = np.array([0.0, 1.0, 2.0, 3.0])
        assert least_squares_slope(x, 4.0 * x + 1.0) == pytest.approx(4.0)

    def test_noisy_line(self):
        x = np.array([0.0, 1.0, 2.0])
        y = np.array([0.0, 2.0, 2.0])
        # x̄ = 1, ȳ = 4/3 -> Σdxdy = 2, Σdx² = 2
        assert least_squares_slope(x, y) == pytest.approx(1.0)

    def test_single_point_undefined(self):
        assert least_squares_slope(np.array([0.1]), np.array([5.0])) is None

    def test_identical_x_undefined(self):
        assert least_squares_slope(np.array([0.1, 0.1, 0.1]), np.array([1.0, 2.0, 3.0])) is None

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="length mismatch"):
            least_squares_slope(np.array([0.0, 1.0]), np.array([0.0]))


class TestYoungsModulus:
    def test_uses_only_linear_region(self):
        strains = np.array([0.0, 0.001, 0.002, 0.010, 0.020])
        stresses = np.array([0.0, 200.0, 400.0, 450.0, 460.0])
        modulus, region = youngs_modulus(strains, stresses)
        assert region == 2
        assert modulus == pytest.approx(200000.0)

    def test_indeterminate(self):
        modulus, region = youngs_modulus(np.array([0.0, 1.0]), np.array([0.0, 2.0]))
        assert modulus is None
        assert region == 1


class TestOffsetYield:
    """Test cases for the 0.2% offset yield search."""
    def test_offset_line_values(self):
        line = offset_line(np.array([0.002, 0.003]), 200000.0)
        np.testing.assert_allclose(line, [0.0, 200.0], atol=1e-9)

    def test_first_crossing_wins(self):
        strains = np.array([0.0, 0.001, 0.002, 0.003])
        stresses = np.array([-500.0, -300.0, -100.0, 400.0])
        assert offset_yield_strength(strains, stresses, 200000.0) == (400.0, 3)

    def test_equal_to_line_counts_as_crossing(self):
        strains = np.array([0.75])
        stresses = np.array([2.0])
        assert offset_yield_strength(strains, stresses, 4.0, offset=0.25) == (2.0, 0)

    def test_no_crossing(self):
        strains = np.array([0.010, 0.020])
        stresses = np.array([0.0, 10.0])
        assert offset_yield_strength(strains, stresses, 100000.0) == (0.0, None)

    def test_indeterminate_modulus(self):
        assert offset_yield_strength(np.array([0.0, 1.0]), np.array([0.0, 2.0]), None) == (0.0, None)
