"""
Closest pair of points by divide and conquer.

Classic O(n log n) algorithm (Shamos & Hoey):

1. Sort the points by x.
2. Solve n <= 3 by brute force.
3. Otherwise recurse on the left and right halves, let d be the smaller of
   the two best distances, and scan the vertical strip of half-width d
   around the median x. Points in the strip are visited in y order and the
   inner loop stops once the y gap reaches d, so the strip work is linear.

The y ordering is produced by merging the halves on the way back up the
recursion, so no level re-sorts.

Ties: when several pairs share the minimum distance, the pair returned is
the first one found under this traversal order (left half before right
half, then strip pairs in y order). It is not a canonical choice.
"""

import heapq
import math
from typing import Optional, Sequence

import numpy as np

from normcurve.utils.types import ClosestPairResult, Point

_Pair = Optional[tuple[Point, Point]]


def _distance(p: Point, q: Point) -> float:
    return math.hypot(q.x - p.x, q.y - p.y)


def _brute_force(points: Sequence[Point]) -> tuple[float, _Pair]:
    best = math.inf
    pair = None
    n = len(points)

    for i in range(n):
        for j in range(i + 1, n):
            d = _distance(points[i], points[j])
            if d < best:
                best = d
                pair = (points[i], points[j])

    return best, pair


def _closest(by_x: Sequence[Point], lo: int, hi: int) -> tuple[float, _Pair, list[Point]]:
    """
    Best distance and pair among by_x[lo:hi], plus those points sorted by y.
    """
    if hi - lo <= 3:
        best, pair = _brute_force(by_x[lo:hi])
        return best, pair, sorted(by_x[lo:hi], key=lambda p: p.y)

    mid = (lo + hi) // 2
    median_x = by_x[mid].x

    left_best, left_pair, left_by_y = _closest(by_x, lo, mid)
    right_best, right_pair, right_by_y = _closest(by_x, mid, hi)

    if right_best < left_best:
        best, pair = right_best, right_pair
    else:
        best, pair = left_best, left_pair

    by_y = list(heapq.merge(left_by_y, right_by_y, key=lambda p: p.y))

    strip = [p for p in by_y if abs(p.x - median_x) < best]
    m = len(strip)

    for i in range(m):
        j = i + 1
        # Bounded by the strip height; at most a constant number of steps
        while j < m and strip[j].y - strip[i].y < best:
            d = _distance(strip[i], strip[j])
            if d < best:
                best = d
                pair = (strip[i], strip[j])
            j += 1

    return best, pair, by_y


def closest_pair(xs: Optional[Sequence[float]], ys: Optional[Sequence[float]]) -> ClosestPairResult:
    """
    Two points of a cloud at minimum Euclidean distance.

    Args:
        xs: x-coordinates of the cloud
        ys: y-coordinates of the cloud (same length as xs)

    Returns:
        The two closest points, or an empty tuple if the input is missing,
        has mismatched lengths, or holds fewer than two points. Multiple
        pairs may share the minimum distance; see the module notes on ties.

    Examples:
        >>> a, b = closest_pair([0, 1, 2, 5], [0, 0, 0, 0])
        >>> abs(b.x - a.x)
        1.0
    """
    if xs is None or ys is None:
        return ()

    x = np.asarray(xs, dtype=float).ravel()
    y = np.asarray(ys, dtype=float).ravel()

    if x.shape != y.shape or x.size < 2:
        return ()

    # Sort on x, then y
    order = np.lexsort((y, x))
    by_x = [Point(float(x[i]), float(y[i])) for i in order]

    _, pair, _ = _closest(by_x, 0, len(by_x))

    # NaN coordinates never compare below the running best
    return pair if pair is not None else ()
