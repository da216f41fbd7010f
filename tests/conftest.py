"""
Shared fixtures for the grainscan test suite.
"""

import pytest

from grainscan.domain import GrainSample, SampleMetadata

SCENARIO_DIAMETERS = [0.20, 0.22, 0.25, 0.28, 0.30, 0.32, 0.35, 0.40]


@pytest.fixture
def scenario_sample():
    """Eight-grain fine/medium sand sample."""
    return GrainSample.from_values(
        SCENARIO_DIAMETERS,
        SampleMetadata(sample_id="beach-01", coordinates=(40.7128, -74.006), timestamp="2024-05-01T10:00:00Z"),
    )


@pytest.fixture
def uniform_sample():
    """Five identical grains: every spread-based denominator is zero."""
    return GrainSample.from_values([0.3] * 5)


@pytest.fixture
def empty_sample():
    return GrainSample()
