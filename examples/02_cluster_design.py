"""
Cluster Randomization Example
=============================

When participants are randomized in clusters (clinics, care homes), the
required sample size is inflated by the design effect
1 + (cluster_size - 1) * ICC.
"""

from sampsize import SampleSizeEstimator, calculate_sample_size, compute_design_effect

print("=" * 60)
print("CLUSTER RANDOMIZATION EXAMPLE")
print("=" * 60)

# 1. Design effect for 10 residents per care home, ICC 0.02
de = compute_design_effect(cluster_size=10, icc=0.02)
print(f"\nDesign effect: {de:.2f}")

individual = calculate_sample_size(3, 4, 0.05, 0.8, 0.2)
clustered = calculate_sample_size(3, 4, 0.05, 0.8, 0.2, design_effect=de)
print(f"Individual randomization: {individual} per group")
print(f"Cluster randomization:    {clustered} per group")

# 2. Sensitivity to the ICC
print("\nSensitivity to ICC (cluster size 10):")
estimator = SampleSizeEstimator()
for icc in [0.0, 0.01, 0.02, 0.05, 0.1]:
    result = estimator.set_cluster(cluster_size=10, icc=icc).find_sample_size(print_results=False, return_results=True)
    print(f"  ICC={icc:<5g} design effect={estimator.design_effect:.2f} N per group={result['results']['sample_size']}")

# 3. Full summary for the planned design
estimator.set_cluster(cluster_size=10, icc=0.02).find_sample_size(summary="long")
