"""Core components for the SampSize framework.

Re-exports the foundational building blocks:

- ``SampleSizeQuery``, ``SampleSizeBreakdown`` — calculation inputs and
  outputs.
- ``EffectSizeMethod``, ``EFFECT_SIZE_METHODS``, ``get_method`` — labeled
  effect-size defaults.
- ``SweepResult``, ``effect_size_grid``, ``sweep_effect_size`` — sample
  size curves over effect size.
- ``build_sample_size_result``, ``build_sweep_result`` — result
  dictionaries.
"""

from .query import SampleSizeBreakdown, SampleSizeQuery
from .methods import DEFAULT_METHOD, EFFECT_SIZE_METHODS, EffectSizeMethod, get_method, method_names
from .sweep import SweepResult, effect_size_grid, sweep_effect_size
from .results import build_sample_size_result, build_sweep_result

__all__ = [
    # Queries
    "SampleSizeQuery",
    "SampleSizeBreakdown",
    # Methods
    "EffectSizeMethod",
    "EFFECT_SIZE_METHODS",
    "DEFAULT_METHOD",
    "get_method",
    "method_names",
    # Sweeps
    "SweepResult",
    "effect_size_grid",
    "sweep_effect_size",
    # Results
    "build_sample_size_result",
    "build_sweep_result",
]
