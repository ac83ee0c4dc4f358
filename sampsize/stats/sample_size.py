"""
Per-group sample size for a two-arm comparison of means.

The base size for equal allocation and equal variance is

    n = 2 * ((z_alpha + z_beta) / (effect_size / sigma)) ** 2

rounded up, then inflated for dropout (divided by the retained fraction)
and multiplied by the design effect, rounded up again. Both roundings
are kept as separate ceilings.
"""

import math

from ..core.query import SampleSizeBreakdown, SampleSizeQuery
from ..errors import InvalidParameter
from ..utils.validators import _validate_cluster
from .quantiles import approx_normal_quantile

__all__ = ["calculate_sample_size", "compute_design_effect", "sample_size_breakdown"]


def compute_design_effect(cluster_size: float, icc: float) -> float:
    """Design effect for cluster sampling, ``1 + (cluster_size - 1) * icc``.

    Args:
        cluster_size: Average participants per cluster (>= 1).
        icc: Intraclass correlation coefficient, in [0, 1].

    Returns:
        The design effect, at least 1.

    Raises:
        InvalidParameter: If *cluster_size* < 1 or *icc* is outside [0, 1].
    """
    _validate_cluster(cluster_size, icc).raise_if_invalid()
    return 1 + (cluster_size - 1) * icc


def _base_sample_size(z_alpha: float, z_beta: float, standardized_effect: float) -> int:
    """Unadjusted per-group size, rounded up.

    Raises ``OverflowError`` when the size leaves the float range.
    """
    raw = 2 * ((z_alpha + z_beta) / standardized_effect) ** 2
    # A very large effect can underflow raw to 0.0
    return max(1, math.ceil(raw))


def _adjust_sample_size(base_n: int, dropout_rate: float, design_effect: float) -> int:
    """Apply dropout inflation then the design effect, rounded up."""
    return math.ceil(base_n / (1 - dropout_rate) * design_effect)


def sample_size_breakdown(query: SampleSizeQuery) -> SampleSizeBreakdown:
    """Run the full calculation for *query*, keeping intermediate values.

    Args:
        query: A validated ``SampleSizeQuery``.

    Returns:
        ``SampleSizeBreakdown`` with both quantiles, the standardized
        effect, the base size and the adjusted per-group size.

    Raises:
        InvalidParameter: If the required size is beyond the float range.
    """
    z_alpha = approx_normal_quantile(query.alpha)
    z_beta = approx_normal_quantile(1 - query.power)
    standardized_effect = query.standardized_effect

    try:
        base_n = _base_sample_size(z_alpha, z_beta, standardized_effect)
    except OverflowError:
        raise InvalidParameter("effect_size", "is too small relative to sigma", query.effect_size) from None

    try:
        sample_size = _adjust_sample_size(base_n, query.dropout_rate, query.design_effect)
    except OverflowError:
        parameter = "design_effect" if query.design_effect > 1 else "dropout_rate"
        raise InvalidParameter(
            parameter, "inflates the sample size beyond the float range", getattr(query, parameter)
        ) from None

    return SampleSizeBreakdown(
        z_alpha=z_alpha,
        z_beta=z_beta,
        standardized_effect=standardized_effect,
        base_n=base_n,
        sample_size=sample_size,
    )


def calculate_sample_size(
    effect_size: float,
    sigma: float,
    alpha: float,
    power: float,
    dropout_rate: float = 0.0,
    design_effect: float = 1.0,
) -> int:
    """Required participants per study arm.

    Args:
        effect_size: Difference to detect (nonzero; sign is irrelevant).
        sigma: Outcome standard deviation (> 0).
        alpha: Type-I error rate, in (0, 1).
        power: Target power, in (0, 1).
        dropout_rate: Expected attrition, in [0, 1). Default 0.
        design_effect: Clustering inflation (>= 1). Default 1.

    Returns:
        Positive integer sample size per group.

    Raises:
        InvalidParameter: If any input violates its constraint.

    Example:
        >>> calculate_sample_size(3, 4, 0.05, 0.8, 0.2, 1.0)
        48
    """
    query = SampleSizeQuery(effect_size, sigma, alpha, power, dropout_rate, design_effect)
    return sample_size_breakdown(query).sample_size
