"""
Effect-size sweeps for sample size curves.

Evaluates the sample size formula over a grid of effect sizes with every
other input held fixed, producing the data behind a sample size curve.
"""

import warnings
from dataclasses import dataclass
from typing import Any, Dict, Iterable

import numpy as np
import pandas as pd

from ..stats.sample_size import sample_size_breakdown
from ..utils.validators import _validate_effect_size_range
from .query import SampleSizeQuery

__all__ = ["SweepResult", "effect_size_grid", "sweep_effect_size"]

# Grid points are rounded so that repeated steps of e.g. 0.1 land exactly on
# the decimal values (and the endpoint is included).
_GRID_DECIMALS = 10


def effect_size_grid(
    from_size: float,
    to_size: float = 5.0,
    by: float = 0.1,
) -> np.ndarray:
    """Evenly spaced effect sizes from *from_size* to *to_size* inclusive.

    Args:
        from_size: First effect size (> 0).
        to_size: Last effect size (> *from_size*). Default 5.
        by: Step (> 0, at most the range width). Default 0.1.

    Returns:
        1-D float array. When the range is not a whole number of steps the
        grid stops at the last step not exceeding *to_size*.

    Warns:
        UserWarning: If the grid has more than 1000 points.

    Raises:
        InvalidParameter: If the range is invalid.
    """
    result = _validate_effect_size_range(from_size, to_size, by)
    result.raise_if_invalid()
    for message in result.warnings:
        warnings.warn(message, UserWarning, stacklevel=2)

    n_steps = int(np.floor(round((to_size - from_size) / by, _GRID_DECIMALS)))
    return np.round(from_size + by * np.arange(n_steps + 1), _GRID_DECIMALS)


@dataclass(frozen=True)
class SweepResult:
    """Sample sizes over a grid of effect sizes.

    Attributes:
        query: Base query; its ``effect_size`` is replaced per grid point.
        effect_sizes: Grid of effect sizes.
        sample_sizes: Per-group sample size at each grid point.
    """

    query: SampleSizeQuery
    effect_sizes: np.ndarray
    sample_sizes: np.ndarray

    def __len__(self):
        return len(self.effect_sizes)

    def to_dataframe(self) -> pd.DataFrame:
        """Two-column table ``effect_size`` / ``sample_size``."""
        return pd.DataFrame(
            {
                "effect_size": self.effect_sizes,
                "sample_size": self.sample_sizes,
            }
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "effect_sizes": self.effect_sizes.tolist(),
            "sample_sizes": self.sample_sizes.tolist(),
        }


def sweep_effect_size(query: SampleSizeQuery, effect_sizes: Iterable[float]) -> SweepResult:
    """Evaluate the sample size for each effect size in *effect_sizes*.

    Args:
        query: Supplies sigma, alpha, power, dropout and design effect.
        effect_sizes: Effect sizes to evaluate (each nonzero).

    Returns:
        ``SweepResult`` aligned with the given effect sizes.

    Raises:
        InvalidParameter: If any effect size is invalid.
    """
    grid = np.asarray(list(effect_sizes), dtype=float)
    sizes = np.array(
        [sample_size_breakdown(query.replace(effect_size=float(es))).sample_size for es in grid],
        dtype=int,
    )
    return SweepResult(query=query, effect_sizes=grid, sample_sizes=sizes)
