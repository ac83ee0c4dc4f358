"""
Labeled effect-size defaults.

A method only supplies a literature-based default effect size (on the
MMSE scale) and the lower end of the sweep range; the calculation itself
is the same for every method.
"""

from dataclasses import dataclass
from typing import Dict, List

from ..utils.validators import _validate_method

__all__ = ["EffectSizeMethod", "EFFECT_SIZE_METHODS", "DEFAULT_METHOD", "get_method", "method_names"]


@dataclass(frozen=True)
class EffectSizeMethod:
    """Named default for the effect size.

    Attributes:
        name: Display name.
        default_effect_size: Effect size used when the method is selected.
        min_effect_size: Smallest effect size shown in sweeps.
        explanation: Where the default comes from.
    """

    name: str
    default_effect_size: float
    min_effect_size: float
    explanation: str


EFFECT_SIZE_METHODS: Dict[str, EffectSizeMethod] = {
    "Doi": EffectSizeMethod(
        "Doi",
        0.82,
        0.1,
        "The Doi method is based on observed MMSE changes from Doi et al. study.",
    ),
    "Ito": EffectSizeMethod(
        "Ito",
        0.4,
        0.1,
        "The Ito method uses the standardized mean difference from Ito et al. meta-analysis.",
    ),
    "Andrews": EffectSizeMethod(
        "Andrews",
        3.0,
        1.0,
        "The Andrews method considers the minimal clinically important difference in MMSE scores.",
    ),
}

DEFAULT_METHOD = "Andrews"


def method_names() -> List[str]:
    return list(EFFECT_SIZE_METHODS)


def get_method(name: str) -> EffectSizeMethod:
    """Look up a method by name, ignoring case and surrounding whitespace.

    Raises:
        InvalidParameter: If *name* is not a known method.
    """
    _validate_method(name, method_names()).raise_if_invalid()
    key = name.strip().lower()
    return next(m for k, m in EFFECT_SIZE_METHODS.items() if k.lower() == key)
