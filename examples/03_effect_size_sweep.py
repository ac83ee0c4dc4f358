"""
Effect Size Sweep Example
=========================

Shows how the required sample size falls as the detectable effect grows,
and draws the curve.
"""

from sampsize import SampleSizeEstimator

print("=" * 60)
print("EFFECT SIZE SWEEP EXAMPLE")
print("=" * 60)

# 1. Curve for the Andrews method (effect sizes 1 to 5)
estimator = SampleSizeEstimator("Andrews")
estimator.sweep(summary="short", plot=True)

# 2. Coarser table for the Ito method, as a pandas DataFrame
from sampsize.core import effect_size_grid, sweep_effect_size

estimator.set_method("Ito")
sweep = sweep_effect_size(estimator.query, effect_size_grid(0.1, 1.0, 0.1))
print("\nIto method, small effects:")
print(sweep.to_dataframe().to_string(index=False))
