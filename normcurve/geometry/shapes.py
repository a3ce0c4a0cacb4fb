"""
Angle, area, projection, reflection and circle primitives.

Functions take Point values and return plain numbers or new Points.
Inputs are not validated; see the individual functions for what is
returned on degenerate input.
"""

import math
from typing import Sequence

import numpy as np

from normcurve.utils.constants import (
    CIRCLE_COINCIDENT_TOL,
    CIRCLE_TANGENT_TOL,
    POINT_ON_LINE_TOL,
    RAD_TO_DEG,
    ZERO_TOL,
)
from normcurve.utils.types import Point, Projection


def interior_angle(p1: Point, p2: Point, p3: Point, to_degrees: bool = False) -> float:
    """
    Interior angle at p2 of the polyline p1 → p2 → p3.

    Args:
        p1, p3: Outer points
        p2: Interior (vertex) point
        to_degrees: Return degrees instead of radians

    Returns:
        Angle in [0, π] (or [0, 180]); 0 if either leg has zero length
    """
    v1x = p1.x - p2.x
    v1y = p1.y - p2.y
    v2x = p3.x - p2.x
    v2y = p3.y - p2.y

    v1 = math.hypot(v1x, v1y)
    v2 = math.hypot(v2x, v2y)

    if v1 <= ZERO_TOL or v2 <= ZERO_TOL:
        return 0.0

    # Clamp roundoff just outside [-1, 1]
    cosine = max(-1.0, min(1.0, (v1x * v2x + v1y * v2y) / (v1 * v2)))
    result = math.acos(cosine)

    return result * RAD_TO_DEG if to_degrees else result


def is_clockwise(p0: Point, p1: Point, p2: Point) -> bool:
    """Is the sequence p0, p1, p2 in clockwise order (y-up)? Colinear counts as clockwise."""
    return not ((p2.y - p0.y) * (p1.x - p0.x) > (p1.y - p0.y) * (p2.x - p0.x))


def point_on_line(r: Point, p: Point, q: Point) -> bool:
    """
    Is r (numerically) on the infinite line through p and q?

    The determinant tolerance is sized for screen-space coordinates and
    loses significance for very close points of very small magnitude.
    """
    det = (q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x)
    return abs(det) < POINT_ON_LINE_TOL


def triangle_area(p1: Point, p2: Point, p3: Point) -> float:
    """Unsigned area of the triangle with vertices p1, p2, p3."""
    a = p1.x * (p2.y - p3.y) + p2.x * (p3.y - p1.y) + p3.x * (p1.y - p2.y)
    return 0.5 * abs(a)


def point_to_segment_distance(p0: Point, p1: Point, p: Point) -> float:
    """
    Distance from p to the segment p0-p1.

    This may be larger than the distance from p to the infinite line
    through p0 and p1.
    """
    vx = p1.x - p0.x
    vy = p1.y - p0.y
    wx = p.x - p0.x
    wy = p.y - p0.y

    c1 = wx * vx + wy * vy
    if c1 <= 0:
        return math.hypot(wx, wy)

    c2 = vx * vx + vy * vy
    if c2 <= c1:
        return math.hypot(p1.x - p.x, p1.y - p.y)

    b = c1 / c2
    return math.hypot(p.x - (p0.x + b * vx), p.y - (p0.y + b * vy))


def project_to_segment(p0: Point, p1: Point, p: Point) -> Projection:
    """
    Closest point to p on the segment p0-p1.

    Returns:
        Projection of p; a zero-length segment projects to p0 with d = 0
    """
    dx = p1.x - p0.x
    dy = p1.y - p0.y
    norm = dx * dx + dy * dy

    if norm < ZERO_TOL:
        return Projection(p0.x, p0.y, 0.0)

    t = ((p.x - p0.x) * dx + (p.y - p0.y) * dy) / norm

    if t <= 0:
        vx, vy = p0.x, p0.y
    elif t >= 1:
        vx, vy = p1.x, p1.y
    else:
        vx, vy = p0.x + t * dx, p0.y + t * dy

    return Projection(vx, vy, math.hypot(vx - p.x, vy - p.y))


def reflect(points: Sequence[Point], p0: Point, p1: Point) -> list[Point]:
    """
    Reflect a point cloud about the infinite line through p0 and p1.

    Args:
        points: Points to reflect
        p0, p1: Two distinct points on the mirror line

    Returns:
        Reflected points in input order. If p0 and p1 are (numerically)
        coincident there is no mirror line and the points are returned
        unchanged.

    Formula:
        With d = p1 − p0, a = (dx² − dy²)/|d|², b = 2·dx·dy/|d|²,
        x' = a·(x−x0) + b·(y−y0) + x0 and y' = b·(x−x0) − a·(y−y0) + y0
    """
    dx = p1.x - p0.x
    dy = p1.y - p0.y
    d = dx * dx + dy * dy

    if abs(d) < ZERO_TOL or len(points) == 0:
        return list(points)

    a = (dx * dx - dy * dy) / d
    b = 2.0 * dx * dy / d

    xy = np.array([(pt.x - p0.x, pt.y - p0.y) for pt in points], dtype=float)
    rx = a * xy[:, 0] + b * xy[:, 1] + p0.x
    ry = b * xy[:, 0] - a * xy[:, 1] + p0.y

    return [Point(float(x), float(y)) for x, y in zip(rx, ry)]


def circle_to_circle_intersection(c0: Point, r0: float, c1: Point, r1: float) -> list[Point]:
    """
    Intersection points of two circles.

    Args:
        c0, r0: Center and radius of the first circle
        c1, r1: Center and radius of the second circle

    Returns:
        Two points for a proper intersection, one point when the circles
        are tangent, and an empty list when they are disjoint, one is
        contained in the other, or they are coincident

    Examples:
        >>> circle_to_circle_intersection(Point(0, 0), 1.0, Point(2, 0), 1.0)
        [Point(x=1.0, y=0.0)]
    """
    dx = c1.x - c0.x
    dy = c1.y - c0.y
    d = math.hypot(dx, dy)

    outer = r0 + r1
    inner = abs(r0 - r1)
    tol = CIRCLE_TANGENT_TOL * outer

    if d > outer + tol or d < inner - tol:
        return []

    # Coincident circles (this also covers concentric equal radii)
    if d < CIRCLE_COINCIDENT_TOL and abs(r1 - r0) < CIRCLE_COINCIDENT_TOL:
        return []

    r0sq = r0 * r0
    a = (r0sq - r1 * r1 + d * d) / (2.0 * d)
    h = math.sqrt(max(r0sq - a * a, 0.0))

    # Unit vector between centers
    ux = dx / d
    uy = dy / d

    # Foot of the common chord
    x2 = c0.x + a * ux
    y2 = c0.y + a * uy

    # Externally or internally tangent, up to rounding of the center distance
    if abs(d - outer) <= tol or abs(d - inner) <= tol:
        return [Point(x2, y2)]

    return [
        Point(x2 + h * uy, y2 - h * ux),
        Point(x2 - h * uy, y2 + h * ux),
    ]
