"""
Shared pytest fixtures for SampSize tests.
"""

import pytest


@pytest.fixture
def reference_inputs():
    """Calculator defaults for the Andrews method."""
    return {
        "effect_size": 3.0,
        "sigma": 4.0,
        "alpha": 0.05,
        "power": 0.8,
        "dropout_rate": 0.2,
        "design_effect": 1.0,
    }


@pytest.fixture
def reference_query(reference_inputs):
    from sampsize import SampleSizeQuery

    return SampleSizeQuery(**reference_inputs)


@pytest.fixture
def estimator():
    """Default estimator."""
    from sampsize import SampleSizeEstimator

    return SampleSizeEstimator()

