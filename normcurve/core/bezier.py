"""
Quadratic Bezier arc evaluation.

A quadratic Bezier arc is defined by a start point P0, a single control
point C and an end point P1:

    B(t) = (1−t)²·P0 + 2t(1−t)·C + t²·P1,   t ∈ [0, 1]

Each axis is evaluated independently. Parameters outside [0, 1] are not
rejected; they extrapolate along the same polynomial.
"""

import numpy as np

from normcurve.utils.types import ArcSegment, Point


class QuadraticBezier:
    """
    Parametric evaluator for a single quadratic Bezier arc.

    Evaluators accept a float or a numpy array of parameter values.

    Attributes:
        arc: The ArcSegment being evaluated

    Examples:
        >>> bezier = QuadraticBezier(ArcSegment(0.0, 0.0, 1.0, 2.0, 2.0, 0.0))
        >>> bezier.evaluate(0.5)
        Point(x=1.0, y=1.0)
    """

    def __init__(self, arc: ArcSegment) -> None:
        self.arc = arc

    @classmethod
    def from_points(cls, p0: Point, c: Point, p1: Point) -> "QuadraticBezier":
        return cls(ArcSegment(p0.x, p0.y, c.x, c.y, p1.x, p1.y))

    def from_arc(self, arc: ArcSegment) -> None:
        """Re-target this evaluator at another arc."""
        self.arc = arc

    @staticmethod
    def _bernstein(t, p0, c, p1):
        s = 1.0 - t
        return s * s * p0 + 2.0 * t * s * c + t * t * p1

    def evaluate_x(self, t):
        arc = self.arc
        return self._bernstein(t, arc.x0, arc.cx, arc.x1)

    def evaluate_y(self, t):
        arc = self.arc
        return self._bernstein(t, arc.y0, arc.cy, arc.y1)

    def evaluate(self, t: float) -> Point:
        return Point(self.evaluate_x(t), self.evaluate_y(t))

    def sample(self, n: int) -> tuple[np.ndarray, np.ndarray]:
        """
        Sample the arc at n evenly spaced parameters in [0, 1].

        Args:
            n: Number of samples (the endpoints are always included for n >= 2)

        Returns:
            (xs, ys) arrays of length n
        """
        t = np.linspace(0.0, 1.0, n)
        return self.evaluate_x(t), self.evaluate_y(t)
