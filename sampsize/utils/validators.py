"""
Validation utilities for sample size estimation.

This module provides the precondition checks shared by the pure
calculation functions and the estimator front-end.
"""

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

import numpy as np

from ..errors import InvalidParameter

__all__ = []

_NUMERIC_TYPES = (int, float, np.integer, np.floating)


@dataclass
class _ValidationResult:
    """Outcome of a validation check, carrying errors and warnings.

    Attributes:
        is_valid: ``True`` if no errors were found.
        errors: List of ``(parameter, constraint, value)`` tuples
            (empty when valid).
        warnings: List of non-fatal warning messages.
    """

    is_valid: bool
    errors: List[Tuple[str, str, Any]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def raise_if_invalid(self):
        """Raise ``InvalidParameter`` for the first recorded error."""
        if not self.is_valid:
            parameter, constraint, value = self.errors[0]
            raise InvalidParameter(parameter, constraint, value)


class _Validator:
    """Static helpers for type and range checks used by all validators."""

    @staticmethod
    def _check_type(value: Any, name: str) -> Optional[Tuple[str, str, Any]]:
        """Check that value is a finite real number (booleans excluded)."""
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, _NUMERIC_TYPES):
            return (name, f"must be a real number, not {type(value).__name__}", value)
        if not math.isfinite(value):
            return (name, "must be finite", value)
        return None

    @staticmethod
    def _check_interval(
        value: float,
        low: Optional[float],
        high: Optional[float],
        name: str,
        low_open: bool = True,
        high_open: bool = True,
    ) -> Optional[Tuple[str, str, Any]]:
        """Check that value lies in an interval with open or closed ends."""
        below = low is not None and (value <= low if low_open else value < low)
        above = high is not None and (value >= high if high_open else value > high)
        if not (below or above):
            return None

        if low is not None and high is not None:
            left = "(" if low_open else "["
            right = ")" if high_open else "]"
            return (name, f"must be in {left}{low:g}, {high:g}{right}", value)
        if low is not None:
            return (name, f"must be {'>' if low_open else '>='} {low:g}", value)
        return (name, f"must be {'<' if high_open else '<='} {high:g}", value)


_validator = _Validator()


def _validate_real(
    value: Any,
    name: str,
    low: Optional[float] = None,
    high: Optional[float] = None,
    low_open: bool = True,
    high_open: bool = True,
) -> _ValidationResult:
    """Generic validation for a real-valued parameter."""
    error = _validator._check_type(value, name)
    if error is None:
        error = _validator._check_interval(value, low, high, name, low_open, high_open)
    if error:
        return _ValidationResult(False, [error])
    return _ValidationResult(True)


def _validate_probability(p: Any, name: str = "p") -> _ValidationResult:
    """Validate a tail probability strictly inside (0, 1)."""
    return _validate_real(p, name, 0, 1)


def _validate_alpha(alpha: Any) -> _ValidationResult:
    """Validate significance level (0, 1); warn outside the usual 0.001-0.1 band."""
    result = _validate_probability(alpha, "alpha")
    if result.is_valid and not 0.001 <= alpha <= 0.1:
        result.warnings.append(f"alpha={alpha} is outside the conventional range [0.001, 0.1]")
    return result


def _validate_power(power: Any) -> _ValidationResult:
    """Validate target power (0, 1); warn outside the usual 0.7-0.99 band."""
    result = _validate_probability(power, "power")
    if result.is_valid and 1 - power >= 1:
        # z_beta is taken at 1 - power, which must stay below 1 in floating point
        return _ValidationResult(False, [("power", "is too small to compute 1 - power", power)])
    if result.is_valid and not 0.7 <= power <= 0.99:
        result.warnings.append(f"power={power} is outside the conventional range [0.7, 0.99]")
    return result


def _validate_sigma(sigma: Any) -> _ValidationResult:
    """Validate outcome standard deviation (> 0)."""
    return _validate_real(sigma, "sigma", low=0)


def _validate_effect_size(effect_size: Any) -> _ValidationResult:
    """Validate effect size (any finite nonzero real)."""
    result = _validate_real(effect_size, "effect_size")
    if result.is_valid and effect_size == 0:
        return _ValidationResult(False, [("effect_size", "must be nonzero", effect_size)])
    return result


def _validate_dropout_rate(dropout_rate: Any) -> _ValidationResult:
    """Validate dropout proportion [0, 1); warn above 0.5."""
    result = _validate_real(dropout_rate, "dropout_rate", 0, 1, low_open=False)
    if result.is_valid and dropout_rate > 0.5:
        result.warnings.append(
            f"dropout_rate={dropout_rate} means more than half of the enrolled participants are expected to be lost"
        )
    return result


def _validate_design_effect(design_effect: Any) -> _ValidationResult:
    """Validate design effect (>= 1)."""
    return _validate_real(design_effect, "design_effect", low=1, low_open=False)


def _validate_cluster(cluster_size: Any, icc: Any) -> _ValidationResult:
    """Validate cluster size (>= 1) and intraclass correlation [0, 1]."""
    errors = []
    warnings = []

    for check in (
        _validate_real(cluster_size, "cluster_size", low=1, low_open=False),
        _validate_real(icc, "icc", 0, 1, low_open=False, high_open=False),
    ):
        errors.extend(check.errors)

    if not errors and cluster_size < 2:
        warnings.append(f"cluster_size={cluster_size} gives no clustering (design effect 1)")

    return _ValidationResult(len(errors) == 0, errors, warnings)


def _validate_query(
    effect_size: Any,
    sigma: Any,
    alpha: Any,
    power: Any,
    dropout_rate: Any,
    design_effect: Any,
) -> _ValidationResult:
    """Validate all six inputs of a sample size calculation.

    Errors are collected in parameter order, so ``raise_if_invalid``
    reports the first offending parameter.
    """
    errors: List[Tuple[str, str, Any]] = []
    warnings: List[str] = []

    for check in (
        _validate_effect_size(effect_size),
        _validate_sigma(sigma),
        _validate_alpha(alpha),
        _validate_power(power),
        _validate_dropout_rate(dropout_rate),
        _validate_design_effect(design_effect),
    ):
        errors.extend(check.errors)
        warnings.extend(check.warnings)

    # Each input can be valid while their ratio leaves the float range
    if not errors:
        standardized_effect = effect_size / sigma
        if not math.isfinite(standardized_effect):
            errors.append(("effect_size", "is too large relative to sigma", effect_size))
        elif standardized_effect == 0:
            errors.append(("effect_size", "is too small relative to sigma", effect_size))

    return _ValidationResult(len(errors) == 0, errors, warnings)


def _validate_method(method: Any, valid_methods: List[str]) -> _ValidationResult:
    """Validate effect-size method name (case-insensitive)."""
    if isinstance(method, str) and method.strip().lower() in [m.lower() for m in valid_methods]:
        return _ValidationResult(True)
    return _ValidationResult(False, [("method", f"must be one of {', '.join(valid_methods)}", method)])


def _validate_effect_size_range(from_size: Any, to_size: Any, by: Any) -> _ValidationResult:
    """Validate effect size sweep range parameters."""
    errors: List[Tuple[str, str, Any]] = []
    warnings: List[str] = []

    # Type checks
    for param, name in [(from_size, "from_size"), (to_size, "to_size"), (by, "by")]:
        errors.extend(_validate_real(param, name, low=0).errors)

    if errors:
        return _ValidationResult(False, errors, warnings)

    # Logic checks
    if from_size >= to_size:
        errors.append(("from_size", f"must be less than to_size ({to_size})", from_size))
    elif by > (to_size - from_size):
        errors.append(("by", f"must not exceed the range width ({to_size - from_size:g})", by))

    # Warning for many points
    if not errors:
        n_points = int(round((to_size - from_size) / by)) + 1
        if n_points > 1000:
            warnings.append(f"Large number of effect sizes to evaluate ({n_points}).")

    return _ValidationResult(len(errors) == 0, errors, warnings)
