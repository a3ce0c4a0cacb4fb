"""
Command-line interface for the normal-curve toolkit.

This CLI provides access to:
- Distribution statistics (CDF, density, derivative)
- Quantiles and prediction intervals
- Quadratic Bezier approximation of the density curve
"""

import json
import logging
import math

import click

from normcurve.approximation.curve import CurveApproximator
from normcurve.core.distributions import NormalDistribution
from normcurve.utils.constants import REFINEMENT_ERROR_TOLERANCE, REFINEMENT_PASSES

distribution_options = [
    click.option("--mean", "-u", type=float, default=0.0, show_default=True, help="Mean"),
    click.option("--std", "-s", type=float, default=1.0, show_default=True, help="Standard deviation"),
]


def with_distribution(command):
    for option in reversed(distribution_options):
        command = option(command)
    return command


def make_distribution(mean: float, std: float) -> NormalDistribution:
    normal = NormalDistribution(mean, std)
    if normal.std != std:
        click.echo(f"Warning: invalid std {std}, using {normal.std}", err=True)
    return normal


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", "-V", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Normal Curve Toolkit - normal distribution statistics and Bezier curve approximation."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@with_distribution
@click.argument("x", type=float)
def stats(mean, std, x):
    """Evaluate CDF, density and density derivative at X."""
    normal = make_distribution(mean, std)

    click.echo(f"\nN(mean={normal.mean:g}, std={normal.std:g}) at x = {x:g}:")
    click.echo(f"  CDF:         {normal.cdf(x):>12.6f}")
    click.echo(f"  Density:     {normal.density(x):>12.6f}")
    click.echo(f"  Derivative:  {normal.density_derivative(x):>12.6f}")


@cli.command()
@with_distribution
@click.argument("p", type=float)
def quantile(mean, std, p):
    """Solve for x such that CDF(x) = P."""
    normal = make_distribution(mean, std)
    value = normal.inverse_cdf(p)

    if math.isnan(value):
        click.echo(f"\nError: probability must be in (0, 1), got {p}", err=True)
        return

    click.echo(f"\nQuantile: {value:.6f}")


@cli.command()
@click.argument("n", type=float)
def interval(n):
    """Probability mass within N standard deviations of the mean."""
    mass = NormalDistribution().prediction_interval(n)
    click.echo(f"\nPrediction interval ({n:g} std): {mass:.6f} ({mass*100:.4f}%)")


@cli.command(name="inverse-interval")
@click.argument("p", type=float)
def inverse_interval(p):
    """Number of standard deviations covering probability mass P."""
    n = NormalDistribution().inverse_prediction_interval(p)

    if math.isnan(n):
        click.echo(f"\nError: probability must be in (0, 1), got {p}", err=True)
        return

    click.echo(f"\nStandard deviations: {n:.6f}")


@cli.command()
@with_distribution
@click.option("--left", "-a", type=float, default=None, help="Left endpoint (default mean - 4 std)")
@click.option("--right", "-b", type=float, default=None, help="Right endpoint (default mean + 4 std)")
@click.option("--tolerance", type=float, default=REFINEMENT_ERROR_TOLERANCE, show_default=True,
              help="Midpoint error tolerance")
@click.option("--passes", type=int, default=REFINEMENT_PASSES, show_default=True, help="Refinement passes")
@click.option("--json", "as_json", is_flag=True, help="Emit arcs as JSON")
def bezier(mean, std, left, right, tolerance, passes, as_json):
    """Approximate the density curve with quadratic Bezier arcs."""
    normal = make_distribution(mean, std)
    a = normal.mean - 4.0 * normal.std if left is None else left
    b = normal.mean + 4.0 * normal.std if right is None else right

    try:
        approximator = CurveApproximator(normal, error_tolerance=tolerance, refinement_passes=passes)
    except ValueError as e:
        click.echo(f"\nError: {e}", err=True)
        return

    arcs = approximator.to_bezier(a, b)

    if not arcs:
        click.echo(f"\nError: invalid interval [{a:g}, {b:g}]", err=True)
        return

    if as_json:
        click.echo(json.dumps([arc.to_dict() for arc in arcs], indent=2))
        return

    click.echo(f"\n{len(arcs)} arcs on [{a:g}, {b:g}] (max midpoint error {approximator.max_error(arcs):.2e}):")
    for arc in arcs:
        click.echo(
            f"  ({arc.x0:>9.4f}, {arc.y0:.6f})  "
            f"c=({arc.cx:>9.4f}, {arc.cy:.6f})  "
            f"({arc.x1:>9.4f}, {arc.y1:.6f})"
        )


if __name__ == "__main__":
    cli()
