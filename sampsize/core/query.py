"""
Value types for sample size calculations.
"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict

from ..utils.validators import _validate_query

__all__ = ["SampleSizeQuery", "SampleSizeBreakdown"]


@dataclass(frozen=True)
class SampleSizeQuery:
    """Inputs of one per-group sample size calculation.

    Validated on construction, so an existing query is always computable.

    Attributes:
        effect_size: Difference the study is powered to detect (nonzero).
        sigma: Standard deviation of the outcome (> 0).
        alpha: Type-I error rate, in (0, 1).
        power: Target power 1 - beta, in (0, 1).
        dropout_rate: Expected attrition proportion, in [0, 1).
        design_effect: Inflation for non-independent sampling (>= 1).

    Raises:
        InvalidParameter: If any field violates its constraint.
    """

    effect_size: float
    sigma: float
    alpha: float = 0.05
    power: float = 0.8
    dropout_rate: float = 0.0
    design_effect: float = 1.0

    def __post_init__(self):
        _validate_query(
            self.effect_size,
            self.sigma,
            self.alpha,
            self.power,
            self.dropout_rate,
            self.design_effect,
        ).raise_if_invalid()

    @property
    def standardized_effect(self) -> float:
        """Effect size in units of the outcome standard deviation."""
        return self.effect_size / self.sigma

    def replace(self, **changes) -> "SampleSizeQuery":
        """Return a new validated query with the given fields changed."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SampleSizeBreakdown:
    """Intermediate and final values of one calculation.

    Attributes:
        z_alpha: Quantile for the significance level.
        z_beta: Quantile for ``1 - power``.
        standardized_effect: ``effect_size / sigma``.
        base_n: Unadjusted per-group size, rounded up.
        sample_size: Per-group size after dropout and design effect.
    """

    z_alpha: float
    z_beta: float
    standardized_effect: float
    base_n: int
    sample_size: int

    @property
    def total_sample_size(self) -> int:
        """Participants across both arms."""
        return 2 * self.sample_size

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["total_sample_size"] = self.total_sample_size
        return data
