"""
Result formatting utilities for sample size estimation.

Turns the result dictionaries built in ``sampsize.core.results`` into
plain-text summaries.
"""

from typing import Any, Dict, List, Optional

__all__ = []


class _TableFormatter:
    """Fixed-width text tables."""

    def _create_table(
        self,
        headers: List[str],
        rows: List[List[str]],
        col_widths: Optional[List[int]] = None,
    ) -> str:
        if col_widths is None:
            col_widths = [max([len(str(h))] + [len(str(r[i])) for r in rows]) for i, h in enumerate(headers)]

        lines = [" ".join(f"{h:<{w}}" for h, w in zip(headers, col_widths))]
        lines.append(" ".join("-" * w for w in col_widths))
        for row in rows:
            lines.append(" ".join(f"{str(c):<{w}}" for c, w in zip(row, col_widths)))
        return "\n".join(lines)

    def _format_value(self, value: Any, fmt: Optional[str] = None) -> str:
        if fmt is not None:
            return format(value, fmt)
        if isinstance(value, float):
            return f"{value:.6f}" if abs(value) < 0.001 and value != 0 else f"{value:.4f}"
        return str(value)


class _ResultFormatter(_TableFormatter):
    """Short and long summaries for calculations and sweeps."""

    def _format_inputs(self, query: Dict[str, Any]) -> List[str]:
        lines = []
        if query.get("method"):
            lines.append(f"Method: {query['method']}")
        lines.append(
            f"Effect size (Δ): {query['effect_size']:g}, SD (σ): {query['sigma']:g}, "
            f"standardized: {query['effect_size'] / query['sigma']:.3f}"
        )
        lines.append(f"Alpha: {query['alpha']:g}, Power: {query['power']:g}")
        lines.append(f"Dropout rate: {query['dropout_rate']:g}, Design effect: {query['design_effect']:g}")
        cluster = query.get("cluster")
        if cluster:
            lines.append(f"Cluster randomization: cluster size {cluster['cluster_size']:g}, ICC {cluster['icc']:g}")
        return lines

    def _format_short_sample_size(self, data: Dict) -> str:
        results = data["results"]
        lines = ["Sample Size Requirements:"]
        lines.extend(self._format_inputs(data["query"]))
        lines.append(f"Required: {results['sample_size']} participants per group ({results['total_sample_size']} total)")
        return "\n".join(lines)

    def _format_long_sample_size(self, data: Dict) -> str:
        results = data["results"]
        query = data["query"]
        rows = [
            ["z (alpha)", self._format_value(results["z_alpha"])],
            ["z (1 - power)", self._format_value(results["z_beta"])],
            ["Standardized effect", self._format_value(results["standardized_effect"])],
            ["Base N per group", str(results["base_n"])],
            ["Dropout inflation", f"1 / (1 - {query['dropout_rate']:g})"],
            ["Design effect", self._format_value(query["design_effect"])],
            ["N per group", str(results["sample_size"])],
            ["N total", str(results["total_sample_size"])],
        ]
        return "\n".join(
            [
                self._format_short_sample_size(data),
                "",
                "Calculation Breakdown:",
                self._create_table(["Step", "Value"], rows),
            ]
        )

    def _format_short_sweep(self, data: Dict) -> str:
        results = data["results"]
        sizes = results["sample_sizes"]
        rng = results["effect_size_range"]
        lines = ["Sample Size Curve:"]
        lines.extend(self._format_inputs(data["query"]))
        lines.append(
            f"Effect sizes {rng['from_size']:g} to {rng['to_size']:g} ({rng['n_points']} points): "
            f"N per group from {sizes[0]} down to {sizes[-1]}"
        )
        return "\n".join(lines)

    def _format_long_sweep(self, data: Dict) -> str:
        results = data["results"]
        rows = [[f"{es:g}", str(n)] for es, n in zip(results["effect_sizes"], results["sample_sizes"])]
        return "\n".join(
            [
                self._format_short_sweep(data),
                "",
                self._create_table(["Effect size", "N per group"], rows),
            ]
        )


_formatter = _ResultFormatter()

_DISPATCH = {
    ("sample_size", "short"): _formatter._format_short_sample_size,
    ("sample_size", "long"): _formatter._format_long_sample_size,
    ("sweep", "short"): _formatter._format_short_sweep,
    ("sweep", "long"): _formatter._format_long_sweep,
}


def _format_results(result_type: str, data: Dict, summary: str = "short") -> str:
    """Format a result dictionary.

    Args:
        result_type: ``"sample_size"`` or ``"sweep"``.
        data: Dictionary from ``build_sample_size_result`` or
            ``build_sweep_result``.
        summary: ``"short"`` or ``"long"``.

    Raises:
        ValueError: If *result_type* or *summary* is unknown.
    """
    format_func = _DISPATCH.get((result_type, summary))
    if format_func is None:
        raise ValueError(
            f"Unknown result type/summary: {result_type!r}/{summary!r}. "
            "Use result_type 'sample_size' or 'sweep' and summary 'short' or 'long'."
        )
    return format_func(data)
