"""
Pytest configuration and shared fixtures.
"""

import pytest

from normcurve.approximation.curve import CurveApproximator
from normcurve.core.distributions import NormalDistribution


@pytest.fixture
def standard_normal():
    """Standard normal distribution, mean 0 and std 1."""
    return NormalDistribution()


@pytest.fixture
def shifted_normal():
    """Wide distribution off the origin."""
    return NormalDistribution(mean=2.0, std=1.5)


@pytest.fixture
def narrow_normal():
    """Narrow distribution that triggers unconditional arc splitting."""
    return NormalDistribution(mean=1.0, std=0.5)


@pytest.fixture
def approximator(standard_normal):
    """Curve approximator over the standard normal with default settings."""
    return CurveApproximator(standard_normal)
