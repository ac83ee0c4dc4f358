"""
Closed-form normal quantile approximation.

Sample size planning only needs quantiles to two or three significant
digits, so a logarithmic approximation is used instead of an exact
inverse CDF:

    z(p) = -0.862 + sqrt(0.743 - 2.404 * ln(p))

For the probabilities used in study planning this tracks the two-sided
standard normal quantile ``z_{1 - p/2}``: ``z(0.05) ~= 1.957`` against
1.960, ``z(0.2) ~= 1.286`` against 1.282.
"""

import math

from ..utils.validators import _validate_probability

__all__ = ["approx_normal_quantile"]

_OFFSET = -0.862
_INTERCEPT = 0.743
_SLOPE = 2.404


def approx_normal_quantile(p: float) -> float:
    """Approximate the standard normal quantile for tail probability *p*.

    Args:
        p: Tail probability, strictly between 0 and 1.

    Returns:
        The approximate quantile. Decreases as *p* increases.

    Raises:
        InvalidParameter: If *p* is not a finite real in (0, 1).
    """
    _validate_probability(p).raise_if_invalid()
    return _OFFSET + math.sqrt(_INTERCEPT - _SLOPE * math.log(p))
