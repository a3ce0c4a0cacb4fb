"""
Quadratic Bezier approximation of the normal density curve.

The density over an interval [a, b] is drawn as a short sequence of
quadratic Bezier arcs. Each arc interpolates the curve at its endpoints and
places its control point where the tangent lines at those endpoints meet
(tangent-intersection construction), which matches the local curvature of
the density closely with a single arc.

Construction:
    1. Split [a, b] at the mean; each side is built independently because
       the curvature changes sign at the inflection points mean ± std.
    2. Inside each side, the joint between its two arcs is the inflection
       point when it lies strictly inside, otherwise the midpoint.
    3. Narrow curves (std <= 1) have every arc split once.
    4. Refinement: an arc whose midpoint (t = 0.5) misses the density by
       more than the error tolerance is replaced by two tangent-built
       children joined at that midpoint abscissa.

Adjacent arcs share their joint exactly, and arcs are returned in
ascending x order.
"""

import logging
import math
from typing import Optional, Sequence

from normcurve.core.bezier import QuadraticBezier
from normcurve.core.distributions import NormalDistribution
from normcurve.geometry.lines import line_intersection
from normcurve.utils.constants import (
    MEAN_TANGENT_OFFSET,
    NARROW_STD,
    REFINEMENT_ERROR_TOLERANCE,
    REFINEMENT_PASSES,
    TANGENT_STEP,
)
from normcurve.utils.types import ArcSegment, Point

logger = logging.getLogger(__name__)

LEFT = -1
RIGHT = 1


class CurveApproximator:
    """
    Builds quadratic Bezier sequences approximating a normal density.

    The approximator holds a reference to a NormalDistribution; changes made
    to that distribution's mean or std are picked up by the next call.

    Args:
        distribution: Distribution to draw (a standard normal if omitted)
        error_tolerance: Largest accepted |arc(t=0.5) − density| before an
            arc is split
        refinement_passes: Number of refinement passes; arcs produced during
            a pass are only re-tested by a later pass

    Raises:
        ValueError: If error_tolerance is not a positive finite number or
            refinement_passes is negative

    Examples:
        >>> arcs = CurveApproximator(NormalDistribution(0.0, 2.0)).to_bezier(-6.0, 6.0)
        >>> arcs[0].x0, arcs[-1].x1
        (-6.0, 6.0)
    """

    def __init__(
        self,
        distribution: Optional[NormalDistribution] = None,
        error_tolerance: float = REFINEMENT_ERROR_TOLERANCE,
        refinement_passes: int = REFINEMENT_PASSES,
    ) -> None:
        if not (math.isfinite(error_tolerance) and error_tolerance > 0):
            raise ValueError(f"Error tolerance must be positive and finite, got {error_tolerance}")
        if refinement_passes < 0:
            raise ValueError(f"Refinement passes cannot be negative, got {refinement_passes}")

        self._distribution = distribution if distribution is not None else NormalDistribution()
        self.error_tolerance = error_tolerance
        self.refinement_passes = int(refinement_passes)

    @property
    def distribution(self) -> NormalDistribution:
        return self._distribution

    def to_bezier(self, a: float, b: float) -> list[ArcSegment]:
        """
        Approximate the density over [a, b] with quadratic Bezier arcs.

        Args:
            a: Left endpoint of the interval
            b: Right endpoint of the interval, b > a

        Returns:
            Arcs in ascending x order, the first starting at a and the last
            ending at b. Empty if either bound is non-finite or b <= a.
        """
        if not (math.isfinite(a) and math.isfinite(b)) or b <= a:
            return []

        mean = self._distribution.mean

        arcs: list[ArcSegment] = []
        if a < mean:
            arcs.extend(self._half(a, min(mean, b), LEFT))
            if b > mean:
                arcs.extend(self._half(mean, b, RIGHT))
        else:
            arcs.extend(self._half(a, b, RIGHT))

        logger.debug(
            "Approximated density on [%g, %g] with %d arcs (mean=%g, std=%g)",
            a,
            b,
            len(arcs),
            mean,
            self._distribution.std,
        )
        return arcs

    def max_error(self, arcs: Sequence[ArcSegment]) -> float:
        """
        Largest midpoint deviation of an arc sequence from the density.

        Returns:
            max |arc(t=0.5).y − density(arc(t=0.5).x)|, or 0 for no arcs
        """
        return max((self._midpoint_error(arc) for arc in arcs), default=0.0)

    def _half(self, lo: float, hi: float, side: int) -> list[ArcSegment]:
        """Arcs for one side of the mean, lo < hi."""
        normal = self._distribution
        inflection = normal.mean - normal.std if side == LEFT else normal.mean + normal.std

        if lo < inflection < hi:
            pivot = inflection
        else:
            pivot = 0.5 * (lo + hi)

        arcs = [self._tangent_arc(lo, pivot, side), self._tangent_arc(pivot, hi, side)]

        # Narrow curves bend too sharply for one arc per piece
        if normal.std <= NARROW_STD:
            arcs = [child for arc in arcs for child in self._split(arc, side)]

        for _ in range(self.refinement_passes):
            arcs = self._refine(arcs, side)

        return arcs

    def _refine(self, arcs: list[ArcSegment], side: int) -> list[ArcSegment]:
        refined: list[ArcSegment] = []

        for arc in arcs:
            if self._midpoint_error(arc) > self.error_tolerance:
                refined.extend(self._split(arc, side))
            else:
                refined.append(arc)

        if len(refined) != len(arcs):
            logger.debug("Refinement split %d of %d arcs", len(refined) - len(arcs), len(arcs))
        return refined

    def _midpoint_error(self, arc: ArcSegment) -> float:
        bezier = QuadraticBezier(arc)
        x = bezier.evaluate_x(0.5)
        return abs(bezier.evaluate_y(0.5) - self._distribution.density(x))

    def _split(self, arc: ArcSegment, side: int) -> tuple[ArcSegment, ArcSegment]:
        """
        Replace an arc by two arcs joined on the true curve.

        This is not Bezier subdivision: the joint is the point of the density
        at the arc's t = 0.5 abscissa, and both children are rebuilt by
        tangent intersection.
        """
        xm = QuadraticBezier(arc).evaluate_x(0.5)
        return self._tangent_arc(arc.x0, xm, side), self._tangent_arc(xm, arc.x1, side)

    def _slope(self, x: float, side: int) -> float:
        normal = self._distribution

        # The tangent at the peak is flat; take the slope just inside this side
        if x == normal.mean:
            return normal.density_derivative(normal.mean + side * MEAN_TANGENT_OFFSET * normal.std)
        return normal.density_derivative(x)

    def _tangent_arc(self, x0: float, x1: float, side: int) -> ArcSegment:
        """
        Arc from (x0, density(x0)) to (x1, density(x1)) whose control point
        is the intersection of the tangent lines at both endpoints.
        """
        normal = self._distribution
        y0 = normal.density(x0)
        y1 = normal.density(x1)
        m0 = self._slope(x0, side)
        m1 = self._slope(x1, side)

        control = line_intersection(
            Point(x0, y0),
            Point(x0 + TANGENT_STEP, y0 + m0 * TANGENT_STEP),
            Point(x1, y1),
            Point(x1 - TANGENT_STEP, y1 - m1 * TANGENT_STEP),
        )

        # Parallel tangents (e.g. both endpoints deep in a tail) have no
        # intersection; a control point on the chord draws a straight arc
        if not control.is_finite():
            control = Point(0.5 * (x0 + x1), 0.5 * (y0 + y1))

        return ArcSegment(x0, y0, control.x, control.y, x1, y1)
