"""
SampSize - Sample Size Estimation.

This module provides the SampleSizeEstimator class for planning two-arm
studies with dropout and cluster adjustments.
"""

from typing import Any, Dict, Optional

from .core import (
    DEFAULT_METHOD,
    SampleSizeQuery,
    build_sample_size_result,
    build_sweep_result,
    effect_size_grid,
    get_method,
    sweep_effect_size,
)
from .stats.sample_size import compute_design_effect, sample_size_breakdown
from .utils.formatters import _format_results
from .utils.validators import (
    _validate_alpha,
    _validate_cluster,
    _validate_design_effect,
    _validate_dropout_rate,
    _validate_effect_size,
    _validate_power,
    _validate_sigma,
    _ValidationResult,
)
from .utils.visualization import _create_sample_size_plot


class SampleSizeEstimator:
    """Per-group sample size for a two-arm comparison of means.

    Holds the study assumptions and evaluates the closed-form sample size
    formula with dropout inflation and a clustering design effect. All
    ``set_*`` methods validate immediately and return ``self`` for method
    chaining.

    Attributes:
        method: Name of the effect-size method supplying the default.
        effect_size: Difference to detect (default: method default).
        sigma: Outcome standard deviation (default: 4).
        alpha: Significance level (default: 0.05).
        power: Target power (default: 0.8).
        dropout_rate: Expected attrition (default: 0.2).
        design_effect: Clustering inflation (default: 1).
        use_cluster: Whether the design effect is derived from
            ``cluster_size`` and ``icc``.
        cluster_size: Average participants per cluster (default: 10).
        icc: Intraclass correlation coefficient (default: 0.02).

    Example:
        >>> est = SampleSizeEstimator("Andrews")
        >>> est.find_sample_size()

        >>> # Cluster randomized design
        >>> est.set_cluster(cluster_size=10, icc=0.02).find_sample_size(summary="long")
    """

    def __init__(self, method: str = DEFAULT_METHOD):
        """Initialize the estimator with the calculator defaults.

        Args:
            method: Effect-size method (``"Doi"``, ``"Ito"`` or
                ``"Andrews"``) whose default effect size is used.
        """
        self.sigma = 4.0
        self.alpha = 0.05
        self.power = 0.8
        self.dropout_rate = 0.2
        self.design_effect = 1.0

        # Cluster randomization
        self.use_cluster = False
        self.cluster_size = 10.0
        self.icc = 0.02

        self.method = DEFAULT_METHOD
        self.effect_size = get_method(DEFAULT_METHOD).default_effect_size
        self.set_method(method)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def query(self) -> SampleSizeQuery:
        """Current configuration as a validated ``SampleSizeQuery``."""
        return SampleSizeQuery(
            effect_size=self.effect_size,
            sigma=self.sigma,
            alpha=self.alpha,
            power=self.power,
            dropout_rate=self.dropout_rate,
            design_effect=self.design_effect,
        )

    @property
    def min_effect_size(self) -> float:
        """Lower end of the sweep range for the current method."""
        return get_method(self.method).min_effect_size

    # =========================================================================
    # Configuration methods
    # =========================================================================

    @staticmethod
    def _check(result: _ValidationResult):
        for warning in result.warnings:
            print(f"Warning: {warning}")
        result.raise_if_invalid()

    def set_method(self, method: str):
        """Select an effect-size method and adopt its default effect size.

        Args:
            method: ``"Doi"``, ``"Ito"`` or ``"Andrews"`` (case-insensitive).

        Returns:
            self: For method chaining.

        Raises:
            InvalidParameter: If *method* is unknown.
        """
        selected = get_method(method)
        self.method = selected.name
        self.effect_size = selected.default_effect_size
        return self

    def set_effect_size(self, effect_size: float):
        """Set the difference the study is powered to detect.

        Values below the current method's sweep minimum are accepted with
        a warning.

        Returns:
            self: For method chaining.

        Raises:
            InvalidParameter: If *effect_size* is zero or not a finite number.
        """
        result = _validate_effect_size(effect_size)
        if result.is_valid and abs(effect_size) < self.min_effect_size:
            result.warnings.append(
                f"effect_size={effect_size} is below the {self.method} method minimum of {self.min_effect_size:g}"
            )
        self._check(result)
        self.effect_size = float(effect_size)
        return self

    def set_sigma(self, sigma: float):
        """Set the outcome standard deviation (> 0).

        Returns:
            self: For method chaining.
        """
        self._check(_validate_sigma(sigma))
        self.sigma = float(sigma)
        return self

    def set_alpha(self, alpha: float):
        """Set the significance level.

        Args:
            alpha: Type-I error rate in (0, 1). Values outside
                [0.001, 0.1] are accepted with a warning.

        Returns:
            self: For method chaining.
        """
        self._check(_validate_alpha(alpha))
        self.alpha = float(alpha)
        return self

    def set_power(self, power: float):
        """Set the target power.

        Args:
            power: Proportion in (0, 1). Values outside [0.7, 0.99] are
                accepted with a warning.

        Returns:
            self: For method chaining.
        """
        self._check(_validate_power(power))
        self.power = float(power)
        return self

    def set_dropout_rate(self, dropout_rate: float):
        """Set the expected proportion of participants lost to follow-up.

        Args:
            dropout_rate: Proportion in [0, 1).

        Returns:
            self: For method chaining.
        """
        self._check(_validate_dropout_rate(dropout_rate))
        self.dropout_rate = float(dropout_rate)
        return self

    def set_design_effect(self, design_effect: float):
        """Set the design effect directly, disabling cluster derivation.

        Args:
            design_effect: Inflation factor (>= 1).

        Returns:
            self: For method chaining.
        """
        self._check(_validate_design_effect(design_effect))
        self.design_effect = float(design_effect)
        self.use_cluster = False
        return self

    def set_cluster(self, cluster_size: float = 10, icc: float = 0.02):
        """Enable cluster randomization.

        The design effect becomes ``1 + (cluster_size - 1) * icc``.

        Args:
            cluster_size: Average participants per cluster (>= 1).
            icc: Intraclass correlation coefficient in [0, 1].

        Returns:
            self: For method chaining.
        """
        self._check(_validate_cluster(cluster_size, icc))
        self.cluster_size = float(cluster_size)
        self.icc = float(icc)
        self.design_effect = compute_design_effect(self.cluster_size, self.icc)
        self.use_cluster = True
        return self

    def clear_cluster(self):
        """Disable cluster randomization (design effect back to 1).

        Returns:
            self: For method chaining.
        """
        self.use_cluster = False
        self.design_effect = 1.0
        return self

    # =========================================================================
    # Analysis
    # =========================================================================

    def _cluster_info(self) -> Optional[Dict[str, float]]:
        if not self.use_cluster:
            return None
        return {"cluster_size": self.cluster_size, "icc": self.icc}

    def find_sample_size(
        self,
        print_results: bool = True,
        summary: str = "short",
        return_results: bool = False,
    ):
        """
        Calculate the required sample size per group.

        Args:
            print_results: Whether to print results
            summary: Output detail level ("short" or "long")
            return_results: Return results dict

        Returns:
            dict or None: If *return_results* is ``True``, returns a
            results dictionary with keys ``"query"`` (inputs) and
            ``"results"`` (quantiles, base and adjusted sizes). Returns
            ``None`` otherwise.
        """
        query = self.query
        result = build_sample_size_result(
            query,
            sample_size_breakdown(query),
            method=self.method,
            cluster=self._cluster_info(),
        )

        if print_results:
            print(f"\n{'=' * 80}")
            print("SAMPLE SIZE ESTIMATION RESULTS")
            print(f"{'=' * 80}")
            print(_format_results("sample_size", result, summary))

        return result if return_results else None

    def sweep(
        self,
        from_size: Optional[float] = None,
        to_size: float = 5.0,
        by: float = 0.1,
        print_results: bool = True,
        summary: str = "short",
        plot: bool = False,
        return_results: bool = False,
    ):
        """
        Evaluate the sample size over a range of effect sizes.

        Args:
            from_size: Smallest effect size (default: method minimum)
            to_size: Largest effect size (default: 5)
            by: Step between effect sizes (default: 0.1)
            print_results: Whether to print results
            summary: Output detail level ("short" or "long")
            plot: Draw the sample size curve
            return_results: Return results dict

        Returns:
            dict or None: If *return_results* is ``True``, returns a
            results dictionary with keys ``"query"`` and ``"results"``
            (``effect_sizes``, ``sample_sizes``, ``effect_size_range``).

        Warns:
            UserWarning: If the range has more than 1000 effect sizes.
        """
        if from_size is None:
            from_size = self.min_effect_size

        query = self.query
        sweep = sweep_effect_size(query, effect_size_grid(from_size, to_size, by))
        result = build_sweep_result(sweep, method=self.method, cluster=self._cluster_info())

        if print_results:
            print(f"\n{'=' * 80}")
            print("SAMPLE SIZE CURVE")
            print(f"{'=' * 80}")
            print(_format_results("sweep", result, summary))

        if plot:
            self._create_sweep_plot(result)

        return result if return_results else None

    def _create_sweep_plot(self, result: Dict[str, Any]):
        """Plot the sweep curve, marking the configured effect size."""
        _create_sample_size_plot(
            effect_sizes=result["results"]["effect_sizes"],
            sample_sizes=result["results"]["sample_sizes"],
            title=f"{self.method} Method: Sample Size per Group",
            current_effect_size=self.effect_size,
            current_sample_size=sample_size_breakdown(self.query).sample_size,
        )

    def __repr__(self):
        return (
            f"SampleSizeEstimator(method='{self.method}', effect_size={self.effect_size:g}, "
            f"sigma={self.sigma:g}, alpha={self.alpha:g}, power={self.power:g}, "
            f"dropout_rate={self.dropout_rate:g}, design_effect={self.design_effect:g})"
        )
