"""
Visualization utilities for sample size estimation.

This module provides plotting functions for effect-size sweeps.
"""

from typing import List, Optional

__all__ = []


def _create_sample_size_plot(
    effect_sizes: List[float],
    sample_sizes: List[int],
    title: str,
    current_effect_size: Optional[float] = None,
    current_sample_size: Optional[int] = None,
):
    """Create an effect-size vs. per-group sample size line plot.

    Draws the sweep curve with the y-axis starting at zero and, when given,
    marks and annotates the currently configured effect size.

    Args:
        effect_sizes: X-axis values.
        sample_sizes: Per-group sample size at each effect size.
        title: Plot title.
        current_effect_size: Configured effect size to highlight.
        current_sample_size: Sample size at *current_effect_size*.

    Raises:
        ImportError: If ``matplotlib`` is not installed.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib required for plotting: pip install matplotlib") from None

    fig, ax = plt.subplots(figsize=(12, 8))
    color = "#4bc0c0"

    ax.plot(
        effect_sizes,
        sample_sizes,
        "o-",
        color=color,
        label="Sample Size per Group",
        linewidth=2,
        markersize=4,
    )

    # Mark configured point
    if current_effect_size is not None and current_sample_size is not None:
        ax.plot(
            current_effect_size,
            current_sample_size,
            "s",
            color=color,
            markersize=10,
            markerfacecolor="white",
            markeredgewidth=2,
            markeredgecolor=color,
        )
        ax.annotate(
            f"N={current_sample_size}",
            xy=(current_effect_size, current_sample_size),
            xytext=(10, 10),
            textcoords="offset points",
            bbox={"boxstyle": "round,pad=0.3", "facecolor": color, "alpha": 0.3},
            arrowprops={"arrowstyle": "->", "color": color},
        )

    # Configure axes
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_xlabel("Effect Size (Δ)", fontsize=12)
    ax.set_ylabel("Sample Size per Group", fontsize=12)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right")
    ax.set_ylim(bottom=0)

    plt.tight_layout()
    plt.show()
