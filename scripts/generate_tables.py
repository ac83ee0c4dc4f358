#!/usr/bin/env python
"""
Generate reference tables for SampSize.

Writes two CSV files:
  - quantile_accuracy.csv — approximate vs exact two-sided normal quantiles
  - sample_sizes.csv      — per-group N over an alpha x power x effect-size grid

Requires scipy for the exact quantiles.

Usage:
    python scripts/generate_tables.py [--output-dir PATH] [--sigma S] [--dropout-rate D]
"""

import argparse
from itertools import product
from pathlib import Path

import numpy as np
import pandas as pd
from scipy.stats import norm

from sampsize import approx_normal_quantile, calculate_sample_size

ALPHAS = [0.001, 0.01, 0.025, 0.05, 0.1]
POWERS = [0.7, 0.8, 0.85, 0.9, 0.95, 0.99]


def generate_quantile_table(resolution: int = 200) -> pd.DataFrame:
    """
    Compare the closed-form approximation to the exact two-sided quantile.

    Args:
        resolution: Number of tail probabilities in (0.001, 0.5)

    Returns:
        DataFrame with columns p, approx, exact, abs_error
    """
    print(f"Generating quantile accuracy table (resolution {resolution})...")
    ps = np.linspace(0.001, 0.5, resolution)
    approx = np.array([approx_normal_quantile(float(p)) for p in ps])
    exact = norm.isf(ps / 2)
    return pd.DataFrame({"p": ps, "approx": approx, "exact": exact, "abs_error": np.abs(approx - exact)})


def generate_sample_size_table(sigma: float, dropout_rate: float) -> pd.DataFrame:
    """
    Per-group sample sizes over alpha, power and effect size.

    Args:
        sigma: Outcome standard deviation
        dropout_rate: Expected attrition

    Returns:
        Long-format DataFrame with columns alpha, power, effect_size, sample_size
    """
    print(f"Generating sample size table (sigma={sigma}, dropout_rate={dropout_rate})...")
    effect_sizes = np.round(np.arange(0.5, 5.01, 0.5), 2)
    rows = [
        (alpha, power, float(es), calculate_sample_size(float(es), sigma, alpha, power, dropout_rate))
        for alpha, power, es in product(ALPHAS, POWERS, effect_sizes)
    ]
    return pd.DataFrame(rows, columns=["alpha", "power", "effect_size", "sample_size"])


def main():
    parser = argparse.ArgumentParser(description="Generate reference tables for SampSize")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(__file__).parent.parent / "tables",
        help="Output directory for tables",
    )
    parser.add_argument("--sigma", type=float, default=4.0, help="Outcome SD (default: 4)")
    parser.add_argument("--dropout-rate", type=float, default=0.2, help="Expected dropout (default: 0.2)")
    args = parser.parse_args()

    args.output_dir.mkdir(parents=True, exist_ok=True)

    quantiles = generate_quantile_table()
    quantiles.to_csv(args.output_dir / "quantile_accuracy.csv", index=False)
    print(f"  max abs error: {quantiles['abs_error'].max():.4f}")

    sizes = generate_sample_size_table(args.sigma, args.dropout_rate)
    sizes.to_csv(args.output_dir / "sample_sizes.csv", index=False)
    print(f"  {len(sizes)} rows")

    print(f"Tables written to {args.output_dir}")


if __name__ == "__main__":
    main()
