"""
Result dictionaries for SampSize.

Bundles the inputs and outputs of a calculation or sweep into plain
dictionaries consumed by the formatters and plots, and returned to
callers with ``return_results=True``.
"""

from typing import Any, Dict, Optional

from .query import SampleSizeBreakdown, SampleSizeQuery
from .sweep import SweepResult


def _build_query_info(
    query: SampleSizeQuery,
    method: Optional[str],
    cluster: Optional[Dict[str, float]],
) -> Dict[str, Any]:
    info = query.to_dict()
    info["method"] = method
    info["cluster"] = dict(cluster) if cluster else None
    return info


def build_sample_size_result(
    query: SampleSizeQuery,
    breakdown: SampleSizeBreakdown,
    method: Optional[str] = None,
    cluster: Optional[Dict[str, float]] = None,
) -> Dict[str, Any]:
    """
    Build complete sample size result dictionary.

    Args:
        query: Inputs of the calculation
        breakdown: Intermediate and final values
        method: Effect-size method name, if any
        cluster: ``{"cluster_size", "icc"}`` when the design effect was derived

    Returns:
        Dictionary with keys ``"query"`` and ``"results"``
    """
    return {
        "query": _build_query_info(query, method, cluster),
        "results": breakdown.to_dict(),
    }


def build_sweep_result(
    sweep: SweepResult,
    method: Optional[str] = None,
    cluster: Optional[Dict[str, float]] = None,
) -> Dict[str, Any]:
    """
    Build complete effect-size sweep result dictionary.

    Args:
        sweep: Sweep output
        method: Effect-size method name, if any
        cluster: ``{"cluster_size", "icc"}`` when the design effect was derived

    Returns:
        Dictionary with keys ``"query"`` and ``"results"``; the query's
        ``effect_size`` is the configured one, not a sweep point
    """
    effect_sizes = sweep.effect_sizes.tolist()
    return {
        "query": _build_query_info(sweep.query, method, cluster),
        "results": {
            "effect_sizes": effect_sizes,
            "sample_sizes": sweep.sample_sizes.tolist(),
            "effect_size_range": {
                "from_size": effect_sizes[0],
                "to_size": effect_sizes[-1],
                "n_points": len(effect_sizes),
            },
        },
    }
