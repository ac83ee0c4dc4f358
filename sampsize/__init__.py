"""SampSize - Sample Size Estimation.

Closed-form per-group sample size for two-arm comparisons of means,
with dropout inflation and a design effect for cluster randomization.

Example:
    >>> from sampsize import calculate_sample_size, compute_design_effect
    >>>
    >>> calculate_sample_size(effect_size=3, sigma=4, alpha=0.05, power=0.8, dropout_rate=0.2)
    48
    >>> de = compute_design_effect(cluster_size=10, icc=0.02)
    >>> calculate_sample_size(3, 4, 0.05, 0.8, 0.2, design_effect=de)
    57

    >>> from sampsize import SampleSizeEstimator
    >>>
    >>> SampleSizeEstimator("Andrews").set_cluster(10, 0.02).sweep(plot=True)
"""

from importlib.metadata import version as _get_version

from .core import EFFECT_SIZE_METHODS, SampleSizeBreakdown, SampleSizeQuery, SweepResult
from .errors import InvalidParameter
from .estimator import SampleSizeEstimator
from .stats.quantiles import approx_normal_quantile
from .stats.sample_size import calculate_sample_size, compute_design_effect, sample_size_breakdown

__version__ = _get_version("SampSize")
__author__ = "SampSize Developers"

__all__ = [
    "calculate_sample_size",
    "compute_design_effect",
    "approx_normal_quantile",
    "sample_size_breakdown",
    "SampleSizeEstimator",
    "SampleSizeQuery",
    "SampleSizeBreakdown",
    "SweepResult",
    "EFFECT_SIZE_METHODS",
    "InvalidParameter",
]
