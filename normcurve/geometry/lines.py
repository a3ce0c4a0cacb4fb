"""
Line, segment and box primitives for 2D analytic geometry.

Functions in this module operate on Point and Rect values and are
intended for performance-critical drawing paths, so error checking is
kept to a minimum: degenerate input produces NaN/inf coordinates or a
negative test result rather than an exception.

No state is kept between calls. Quantities that a follow-up computation
may reuse (such as the intersection parameters of a segment test) are
part of the returned value.
"""

import math

from normcurve.utils.constants import (
    CROSS_TOL,
    ORIENTATION_TOL,
    POINT_COMPARE_TOL,
    SLOPE_COMPARE_TOL,
    TINY_MAGNITUDE,
)
from normcurve.utils.types import Orientation, Point, Rect, RectCrossing, SegmentIntersection


def compare(a: float, b: float, tol: float) -> bool:
    """
    Relative floating-point comparison.

    Two values compare equal if they are identical, if both are tiny and the
    tolerance is loose, or if their relative difference is within tol.

    Args:
        a, b: Values to compare
        tol: Relative tolerance

    Returns:
        True if a and b are equal within tol
    """
    if a == b:
        return True

    ma = abs(a)
    mb = abs(b)

    # Pixel-scale coordinates rarely need tight tolerances
    if ma < TINY_MAGNITUDE and mb < TINY_MAGNITUDE and tol > 1e-7:
        return True

    if mb > ma:
        return abs((a - b) / b) <= tol
    return abs((a - b) / a) <= tol


def points_equal(a: Point, b: Point, tol: float = POINT_COMPARE_TOL) -> bool:
    """Are two points equal coordinate-wise within a relative tolerance?"""
    return compare(a.x, b.x, tol) and compare(a.y, b.y, tol)


def cross(ax: float, ay: float, bx: float, by: float) -> float:
    """z-component of the cross product of two origin-based vectors."""
    return ax * by - ay * bx


def line_intersection(p1a: Point, p1b: Point, p2a: Point, p2b: Point) -> Point:
    """
    Intersection point of the infinite lines through p1a-p1b and p2a-p2b.

    This is NOT a general-purpose line intersection. It is a fast
    construction for well-posed data (lines neither parallel nor
    coincident) and performs no tests for bad data.

    Args:
        p1a, p1b: Two points on the first line
        p2a, p2b: Two points on the second line

    Returns:
        Intersection point; coordinates are NaN or inf for parallel lines

    Formula:
        With r = p1b − p1a, s = p2b − p2a and w = p2a − p1a,
        t = (w × s) / (r × s) and the point is p1a + t·r
    """
    rx = p1b.x - p1a.x
    ry = p1b.y - p1a.y
    sx = p2b.x - p2a.x
    sy = p2b.y - p2a.y
    wx = p2a.x - p1a.x
    wy = p2a.y - p1a.y

    den = cross(rx, ry, sx, sy)
    num = cross(wx, wy, sx, sy)

    if den == 0.0:
        # Follow IEEE semantics instead of raising ZeroDivisionError
        t = math.nan if num == 0.0 else math.copysign(math.inf, num)
    else:
        t = num / den

    t1 = 1.0 - t
    return Point(t1 * p1a.x + t * p1b.x, t1 * p1a.y + t * p1b.y)


def segments_intersect(p: Point, p2: Point, q: Point, q2: Point) -> SegmentIntersection:
    """
    Bounded intersection test for segments p-p2 and q-q2.

    A 2D rendition of Goldman's algorithm (Graphics Gems). Coincident
    endpoints and colinear overlap count as intersections; parallel,
    non-colinear segments never intersect.

    Args:
        p, p2: Endpoints of the first segment
        q, q2: Endpoints of the second segment

    Returns:
        SegmentIntersection with the parameters t (along p-p2) and u
        (along q-q2) when they were solved for

    Examples:
        >>> bool(segments_intersect(Point(0, 0), Point(1, 1), Point(1, 1), Point(2, 0)))
        True
    """
    rx = p2.x - p.x
    ry = p2.y - p.y
    sx = q2.x - q.x
    sy = q2.y - q.y
    tx = q.x - p.x
    ty = q.y - p.y

    num = cross(tx, ty, rx, ry)
    den = cross(rx, ry, sx, sy)

    # Colinear
    if abs(num) < CROSS_TOL and abs(den) < CROSS_TOL:
        if (
            points_equal(p, q)
            or points_equal(p, q2)
            or points_equal(p2, q)
            or points_equal(p2, q2)
        ):
            return SegmentIntersection(True)

        overlap = ((q.x - p.x < 0) != (q.x - p2.x < 0)) or ((q.y - p.y < 0) != (q.y - p2.y < 0))
        return SegmentIntersection(overlap)

    # Parallel
    if abs(den) < CROSS_TOL:
        return SegmentIntersection(False)

    u = num / den
    t = cross(tx, ty, sx, sy) / den

    return SegmentIntersection(0.0 <= t <= 1.0 and 0.0 <= u <= 1.0, t, u)


def lines_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """
    Do the infinite lines through p1-p2 and p3-p4 intersect?

    Lines sharing an endpoint always intersect; otherwise the lines
    intersect unless their slopes compare equal (parallel).
    """
    if points_equal(p1, p3) or points_equal(p1, p4) or points_equal(p2, p3) or points_equal(p2, p4):
        return True

    m1 = p2.x - p1.x
    m2 = p4.x - p3.x
    vertical1 = abs(m1) < CROSS_TOL
    vertical2 = abs(m2) < CROSS_TOL

    if vertical1:
        return not vertical2
    if vertical2:
        return True

    return not compare((p2.y - p1.y) / m1, (p4.y - p3.y) / m2, SLOPE_COMPARE_TOL)


def inside_box(point: Point, rect: Rect) -> bool:
    """
    Is the point strictly inside the box (boundary excluded)?

    Both y-up and y-down box orientations are honored.
    """
    if not rect.left < point.x < rect.right:
        return False

    if rect.y_down:
        return rect.top < point.y < rect.bottom
    return rect.bottom < point.y < rect.top


def boxes_intersect(bound1: Rect, bound2: Rect) -> bool:
    """
    Do two axis-aligned boxes intersect? A single point of contact counts.
    """
    # Normalize to y-up
    t1 = max(bound1.top, bound1.bottom)
    b1 = min(bound1.top, bound1.bottom)
    t2 = max(bound2.top, bound2.bottom)
    b2 = min(bound2.top, bound2.bottom)

    if bound2.left > bound1.right or bound2.right < bound1.left:
        return False
    if t2 < b1 or t1 < b2:
        return False
    return True


def point_orientation(a: Point, b: Point, p: Point) -> Orientation:
    """
    Classify p as left of, right of, or on the directed line a → b.

    The ON test is made first, within a fixed tolerance suited to typical
    screen-space drawing coordinates.
    """
    test = (b.x - a.x) * (p.y - a.y) - (p.x - a.x) * (b.y - a.y)

    if abs(test) < ORIENTATION_TOL:
        return Orientation.ON
    return Orientation.LEFT if test > 0 else Orientation.RIGHT


def _box_edges(rect: Rect) -> tuple[tuple[Point, Point], ...]:
    """Box edges in top, right, bottom, left order."""
    top_left = Point(rect.left, rect.top)
    top_right = Point(rect.right, rect.top)
    bottom_right = Point(rect.right, rect.bottom)
    bottom_left = Point(rect.left, rect.bottom)
    return (
        (top_left, top_right),
        (top_right, bottom_right),
        (bottom_right, bottom_left),
        (bottom_left, top_left),
    )


def segment_intersects_box(p0: Point, p1: Point, rect: Rect) -> bool:
    """
    Does the segment p0-p1 cross the boundary of the box?

    Touching the boundary at a single point counts. A segment lying
    entirely inside the box does not cross its boundary.
    """
    if (p0.x < rect.left and p1.x < rect.left) or (p0.x > rect.right and p1.x > rect.right):
        return False

    low = min(rect.top, rect.bottom)
    high = max(rect.top, rect.bottom)
    if (p0.y < low and p1.y < low) or (p0.y > high and p1.y > high):
        return False

    return any(segments_intersect(p0, p1, e0, e1) for e0, e1 in _box_edges(rect))


def segment_rect_intersection(p0: Point, p1: Point, rect: Rect) -> RectCrossing:
    """
    Points where the segment p0-p1 crosses the boundary of the rectangle.

    Edges are visited top, right, bottom, left; the first two crossings
    found are kept. A crossing exactly at a box corner is reported once.

    Returns:
        RectCrossing with zero, one or two points ordered by ascending x
    """
    found: list[Point] = []

    for e0, e1 in _box_edges(rect):
        hit = segments_intersect(p0, p1, e0, e1)
        if not hit:
            continue

        if math.isnan(hit.t):
            # Colinear with an edge; no single crossing point to report
            continue

        point = hit.point_on_first(p0, p1)
        if any(points_equal(point, other) for other in found):
            continue

        found.append(point)
        if len(found) == 2:
            break

    found.sort(key=lambda pt: pt.x)
    return RectCrossing(tuple(found))
