"""
Unit tests for normal distribution statistics.

This module validates:
1. Parameter validation (rejection with retention)
2. CDF against known values and scipy
3. Quantile function and round trips
4. Prediction interval and its inverse
5. Density and its derivative
"""

import math

import pytest
from scipy.stats import norm

from normcurve.core.distributions import (
    NormalDistribution,
    standard_normal_cdf,
    standard_normal_pdf,
    standard_normal_quantile,
)


# ===========================
# Parameter Tests
# ===========================


def test_defaults_are_standard_normal(standard_normal):
    assert standard_normal.mean == 0.0
    assert standard_normal.std == 1.0


def test_mutators_accept_valid_values(standard_normal):
    standard_normal.mean = 2.0
    standard_normal.std = 0.2

    assert standard_normal.mean == 2.0
    assert standard_normal.std == 0.2


@pytest.mark.parametrize("bad_std", [math.nan, math.inf, -math.inf, 0.0, -1.0, -1e-12])
def test_invalid_std_keeps_previous_value(bad_std):
    """Invalid std assignments are silently rejected."""
    normal = NormalDistribution(mean=-1.0, std=3.0)
    normal.std = bad_std

    assert normal.std == 3.0
    assert normal.mean == -1.0


def test_infinite_std_keeps_median_at_mean():
    normal = NormalDistribution(mean=4.0, std=2.0)
    normal.std = math.inf

    assert normal.inverse_cdf(0.5) == 4.0
    assert normal.density(4.0) > 0.0


def test_invalid_std_at_construction_falls_back_to_default():
    normal = NormalDistribution(mean=1.0, std=-2.0)
    assert normal.std == 1.0
    assert normal.mean == 1.0


@pytest.mark.parametrize("bad_mean", [math.nan, math.inf, -math.inf])
def test_non_finite_mean_keeps_previous_value(bad_mean):
    normal = NormalDistribution(mean=5.0)
    normal.mean = bad_mean
    assert normal.mean == 5.0


def test_variance(shifted_normal):
    assert shifted_normal.variance == 2.25


def test_peak_and_inflection_points(shifted_normal):
    assert abs(shifted_normal.peak - shifted_normal.density(2.0)) < 1e-15
    assert shifted_normal.inflection_points == (0.5, 3.5)


# ===========================
# CDF Tests
# ===========================


@pytest.mark.parametrize(
    "x,expected",
    [
        (0.5, 0.69146),
        (-0.5, 0.30854),
        (1.0, 0.84134),
        (-1.0, 0.15866),
        (2.0, 0.97725),
        (-2.0, 0.02275),
        (4.0, 0.99997),
        (-4.0, 0.00003),
    ],
)
def test_standard_cdf_known_values(standard_normal, x, expected):
    assert abs(standard_normal.cdf(x) - expected) < 1e-5


@pytest.mark.parametrize("mean,std", [(0.0, 1.0), (2.0, 1.5), (-3.0, 0.25), (10.0, 7.0)])
def test_cdf_at_mean_is_exactly_half(mean, std):
    assert NormalDistribution(mean, std).cdf(mean) == 0.5


def test_shifted_cdf(shifted_normal):
    """u = 2.0, s = 1.5 lower cumulative at zero."""
    assert abs(shifted_normal.cdf(0.0) - 0.09121) < 1e-5


@pytest.mark.parametrize("mean,std", [(0.0, 1.0), (2.0, 1.5), (-1.0, 0.3)])
def test_cdf_matches_scipy(mean, std):
    normal = NormalDistribution(mean, std)

    for i in range(-60, 61):
        x = mean + std * i / 10.0
        expected = norm.cdf(x, loc=mean, scale=std)
        assert abs(normal.cdf(x) - expected) < 1e-5, f"x={x}"


def test_cdf_bounds_in_far_tails():
    assert standard_normal_cdf(-40.0) == 0.0
    assert standard_normal_cdf(40.0) == 1.0
    assert 0.0 < standard_normal_cdf(-10.0) < 1e-20


def test_cdf_tail_relative_accuracy():
    """Continued-fraction branch keeps relative accuracy past 7 std."""
    assert abs(standard_normal_cdf(-8.0) / norm.cdf(-8.0) - 1.0) < 1e-4


# ===========================
# Quantile Tests
# ===========================


def test_inverse_cdf_median_is_mean(standard_normal, shifted_normal):
    assert standard_normal.inverse_cdf(0.5) == 0.0
    assert shifted_normal.inverse_cdf(0.5) == 2.0


@pytest.mark.parametrize(
    "p,expected",
    [
        (0.99997, 4.013),
        (0.8, 0.842),
        (0.84134, 1.0),
        (0.02275, -2.0),
        (0.975, 1.96),
    ],
)
def test_standard_inverse_cdf_known_values(standard_normal, p, expected):
    assert abs(standard_normal.inverse_cdf(p) - expected) < 1e-3


@pytest.mark.parametrize("p", [0.001, 0.01, 0.02425, 0.1, 0.3, 0.7, 0.9, 0.97575, 0.99, 0.999])
def test_quantile_matches_scipy(p):
    assert abs(standard_normal_quantile(p) - norm.ppf(p)) < 1e-6


@pytest.mark.parametrize("mean,std", [(0.0, 1.0), (2.0, 1.5), (-5.0, 0.1)])
def test_inverse_cdf_roundtrip(mean, std):
    """inverse_cdf(cdf(x)) recovers x within ±4 std of the mean."""
    normal = NormalDistribution(mean, std)

    for i in range(-40, 41):
        x = mean + std * i / 10.0
        assert abs(normal.inverse_cdf(normal.cdf(x)) - x) < 1e-3, f"x={x}"


@pytest.mark.parametrize("p", [0.0, 1.0, -0.5, 1.5, math.nan])
def test_inverse_cdf_out_of_range_is_nan(standard_normal, p):
    """Out-of-range probabilities do not raise."""
    assert math.isnan(standard_normal.inverse_cdf(p))


def test_quantile_extreme_tail_does_not_raise():
    z = standard_normal_quantile(1e-300)
    assert -38.0 < z < -36.0


# ===========================
# Prediction Interval Tests
# ===========================


@pytest.mark.parametrize(
    "n,expected",
    [
        (0.5, 0.3829),
        (1.0, 0.6827),
        (2.0, 0.9545),
        (3.0, 0.9973),
    ],
)
def test_prediction_interval_known_values(standard_normal, n, expected):
    assert abs(standard_normal.prediction_interval(n) - expected) < 1e-4


def test_prediction_interval_independent_of_parameters(shifted_normal, standard_normal):
    assert shifted_normal.prediction_interval(1.5) == standard_normal.prediction_interval(1.5)


def test_prediction_interval_monotonic(standard_normal):
    values = [standard_normal.prediction_interval(i / 20.0) for i in range(0, 101)]

    assert values[0] == 0.0
    for lower, upper in zip(values, values[1:]):
        assert lower < upper
    assert all(0.0 <= v < 1.0 for v in values)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_inverse_prediction_interval_roundtrip(standard_normal, n):
    p = standard_normal.prediction_interval(n)
    assert abs(standard_normal.inverse_prediction_interval(p) - n) < 1e-2


@pytest.mark.parametrize(
    "p,expected",
    [
        (0.6826895, 1.0),
        (0.9544997, 2.0),
        (0.9973002, 3.0),
    ],
)
def test_inverse_prediction_interval_known_values(standard_normal, p, expected):
    assert abs(standard_normal.inverse_prediction_interval(p) - expected) < 1e-3


# ===========================
# Density Tests
# ===========================


def test_standard_density_known_values(standard_normal):
    assert abs(standard_normal.density(1.0) - 0.2419) < 1e-3
    assert abs(standard_normal.density(2.0) - 0.0540) < 1e-3


def test_narrow_density_known_values(narrow_normal):
    """u = 1 and s = 0.5"""
    assert abs(narrow_normal.density(1.0) - 0.7979) < 1e-3
    assert abs(narrow_normal.density(2.0) - 0.1080) < 1e-3


@pytest.mark.parametrize("mean,std", [(0.0, 1.0), (2.0, 1.5), (1.0, 0.4472135955)])
def test_density_matches_scipy(mean, std):
    normal = NormalDistribution(mean, std)

    for i in range(-30, 31):
        x = mean + std * i / 10.0
        assert abs(normal.density(x) - norm.pdf(x, loc=mean, scale=std)) < 1e-12


def test_standard_pdf_helper():
    assert abs(standard_normal_pdf(0.0) - 1.0 / math.sqrt(2.0 * math.pi)) < 1e-15


@pytest.mark.parametrize("x", [-3.0, -1.0, -0.2, 0.0, 0.7, 2.5])
def test_density_derivative_finite_difference(shifted_normal, x):
    h = 1e-5
    numeric = (shifted_normal.density(x + h) - shifted_normal.density(x - h)) / (2 * h)
    assert abs(shifted_normal.density_derivative(x) - numeric) < 1e-8


def test_density_derivative_zero_at_mean(shifted_normal):
    assert shifted_normal.density_derivative(2.0) == 0.0


def test_density_derivative_sign(standard_normal):
    assert standard_normal.density_derivative(-1.0) > 0.0
    assert standard_normal.density_derivative(1.0) < 0.0
