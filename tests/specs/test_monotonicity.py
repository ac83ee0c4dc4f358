"""
Sample size monotonicity tests.

Required N must not grow with effect size and must not shrink with
stricter alpha, higher power, more dropout or a larger design effect.
"""

import pytest

from sampsize import calculate_sample_size

# Valid inputs for each parameter, in increasing order
EFFECT_SIZES = [0.5, 1.0, 2.0, 3.0, 4.5]
ALPHAS = [0.001, 0.01, 0.05, 0.1]
POWERS = [0.7, 0.8, 0.9, 0.95]
DROPOUT_RATES = [0.0, 0.1, 0.2, 0.5]
DESIGN_EFFECTS = [1.0, 1.18, 1.5, 2.0, 3.0]

BASE = {
    "effect_size": 2.0,
    "sigma": 4.0,
    "alpha": 0.05,
    "power": 0.8,
    "dropout_rate": 0.2,
    "design_effect": 1.0,
}


def _sizes(param, values, **overrides):
    inputs = {**BASE, **overrides}
    return [calculate_sample_size(**{**inputs, param: v}) for v in values]


def _non_increasing(xs):
    return all(a >= b for a, b in zip(xs, xs[1:]))


def _non_decreasing(xs):
    return all(a <= b for a, b in zip(xs, xs[1:]))


class TestSampleSizeMonotonicity:
    """N responds to each input in the expected direction."""

    def test_effect_size(self):
        sizes = _sizes("effect_size", EFFECT_SIZES)
        assert _non_increasing(sizes), f"N not monotone in effect size: {sizes}"
        assert sizes[0] > sizes[-1]

    def test_sigma(self):
        sizes = _sizes("sigma", [1.0, 2.0, 4.0, 8.0])
        assert _non_decreasing(sizes), f"N not monotone in sigma: {sizes}"

    def test_alpha(self):
        """Stricter alpha never needs fewer participants."""
        sizes = _sizes("alpha", ALPHAS)
        assert _non_increasing(sizes), f"N not monotone in alpha: {sizes}"
        assert sizes[0] > sizes[-1]

    def test_power(self):
        sizes = _sizes("power", POWERS)
        assert _non_decreasing(sizes), f"N not monotone in power: {sizes}"
        assert sizes[0] < sizes[-1]

    def test_dropout_rate(self):
        sizes = _sizes("dropout_rate", DROPOUT_RATES)
        assert _non_decreasing(sizes), f"N not monotone in dropout: {sizes}"

    def test_design_effect(self):
        sizes = _sizes("design_effect", DESIGN_EFFECTS)
        assert _non_decreasing(sizes), f"N not monotone in design effect: {sizes}"

    @pytest.mark.parametrize("dropout_rate", DROPOUT_RATES)
    @pytest.mark.parametrize("design_effect", DESIGN_EFFECTS)
    def test_effect_size_under_adjustments(self, dropout_rate, design_effect):
        sizes = _sizes("effect_size", EFFECT_SIZES, dropout_rate=dropout_rate, design_effect=design_effect)
        assert _non_increasing(sizes)

    def test_adjustments_never_reduce_base(self):
        base = calculate_sample_size(**{**BASE, "dropout_rate": 0.0, "design_effect": 1.0})
        for d in DROPOUT_RATES:
            for de in DESIGN_EFFECTS:
                assert calculate_sample_size(**{**BASE, "dropout_rate": d, "design_effect": de}) >= base
