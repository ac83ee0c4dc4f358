"""
Tests for the closed-form normal quantile approximation.
"""

import math

import numpy as np
import pytest
from scipy import stats

from sampsize import InvalidParameter, approx_normal_quantile


class TestApproxNormalQuantile:
    """Test approx_normal_quantile values and preconditions."""

    def test_formula(self):
        p = 0.05
        expected = -0.862 + math.sqrt(0.743 - 2.404 * math.log(p))
        assert approx_normal_quantile(p) == expected

    @pytest.mark.parametrize(
        "p, expected",
        [
            (0.05, 1.956642),
            (0.2, 1.285577),
            (0.01, 2.575125),
            (0.1, 1.643676),
        ],
    )
    def test_known_values(self, p, expected):
        assert approx_normal_quantile(p) == pytest.approx(expected, abs=1e-6)

    @pytest.mark.parametrize("p", [0.001, 0.01, 0.025, 0.05, 0.1, 0.2, 0.3])
    def test_tracks_two_sided_quantile(self, p):
        """Agrees with the exact two-sided quantile to about two decimals."""
        exact = stats.norm.isf(p / 2)
        assert approx_normal_quantile(p) == pytest.approx(exact, abs=0.02)

    def test_decreasing_in_p(self):
        ps = np.linspace(0.001, 0.999, 200)
        zs = [approx_normal_quantile(float(p)) for p in ps]
        assert all(a > b for a, b in zip(zs, zs[1:]))

    def test_deterministic(self):
        assert approx_normal_quantile(0.05) == approx_normal_quantile(0.05)

    def test_accepts_numpy_float(self):
        assert approx_normal_quantile(np.float64(0.05)) == approx_normal_quantile(0.05)

    @pytest.mark.parametrize("p", [0, 1, -0.1, 1.5, 0.0, 1.0])
    def test_rejects_outside_open_interval(self, p):
        with pytest.raises(InvalidParameter, match=r"p must be in \(0, 1\)"):
            approx_normal_quantile(p)

    @pytest.mark.parametrize("p", [float("nan"), float("inf"), "0.05", None, True])
    def test_rejects_non_numeric(self, p):
        with pytest.raises(InvalidParameter) as exc_info:
            approx_normal_quantile(p)
        assert exc_info.value.parameter == "p"

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            approx_normal_quantile(0)
