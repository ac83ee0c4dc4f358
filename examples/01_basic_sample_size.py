"""
Basic Sample Size Example
=========================

This example shows how to compute the number of participants needed per
group for a two-arm trial, first with the plain function and then with
the configurable estimator.
"""

from sampsize import SampleSizeEstimator, calculate_sample_size

# Example: cognitive intervention trial, outcome = change in MMSE score
# Research question: How many participants per arm do we need?

print("=" * 60)
print("BASIC SAMPLE SIZE EXAMPLE")
print("=" * 60)

# 1. One-off calculation
# Detect a 3-point MMSE difference, SD 4, alpha 0.05, 80% power, 20% dropout
n = calculate_sample_size(effect_size=3, sigma=4, alpha=0.05, power=0.8, dropout_rate=0.2)
print(f"\nParticipants per group: {n}")

# 2. Same study with the estimator (Andrews method defaults)
estimator = SampleSizeEstimator("Andrews")
estimator.find_sample_size(summary="long")

# 3. Stricter assumptions
print("\nStricter design (alpha=0.01, power=0.9):")
estimator.set_alpha(0.01).set_power(0.9).find_sample_size()

# 4. Compare literature-based effect sizes
print("\nEffect-size methods:")
for method in ["Doi", "Ito", "Andrews"]:
    result = SampleSizeEstimator(method).find_sample_size(print_results=False, return_results=True)
    print(f"  {method:<8} Δ={result['query']['effect_size']:<5g} N per group = {result['results']['sample_size']}")
