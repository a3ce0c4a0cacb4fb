"""
Data types and structures for normal-curve geometry.

This module defines the value types exchanged between the distribution,
geometry and approximation layers, as well as the explicit result types
returned by geometric tests.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Attributes:
        x: x-coordinate
        y: y-coordinate
    """
    x: float
    y: float

    def is_finite(self) -> bool:
        """True if both coordinates are finite (degenerate constructions yield NaN/inf)."""
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class ArcSegment:
    """
    Quadratic Bezier arc given by start point, single control point and end point.

    Attributes:
        x0, y0: Start point (t = 0)
        cx, cy: Control point
        x1, y1: End point (t = 1)
    """
    x0: float
    y0: float
    cx: float
    cy: float
    x1: float
    y1: float

    def to_dict(self) -> dict[str, float]:
        """Plain mapping of the six coordinates, for serialization by a renderer."""
        return {
            "x0": self.x0,
            "y0": self.y0,
            "cx": self.cx,
            "cy": self.cy,
            "x1": self.x1,
            "y1": self.y1,
        }


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned box given by its (left, top) and (right, bottom) corners.

    Both y-up (top > bottom) and y-down (bottom > top) orientations are accepted.
    """
    left: float
    top: float
    right: float
    bottom: float

    @property
    def y_down(self) -> bool:
        return self.bottom > self.top


class Orientation(Enum):
    """Position of a point relative to a directed line."""
    LEFT = "left"
    RIGHT = "right"
    ON = "on"


@dataclass(frozen=True)
class SegmentIntersection:
    """
    Result of a bounded segment-segment intersection test.

    Attributes:
        intersects: Whether the two segments intersect
        t: Parameter of the intersection along the first segment
        u: Parameter of the intersection along the second segment

    Notes:
        t and u are NaN when the test is decided without solving for them
        (coincident endpoints, colinear or parallel segments).
    """
    intersects: bool
    t: float = math.nan
    u: float = math.nan

    def __bool__(self) -> bool:
        return self.intersects

    def point_on_first(self, p: Point, p2: Point) -> Point:
        """Intersection point evaluated along the first segment p-p2."""
        t1 = 1.0 - self.t
        return Point(t1 * p.x + self.t * p2.x, t1 * p.y + self.t * p2.y)


@dataclass(frozen=True)
class Projection:
    """
    Closest point on a segment to a query point.

    Attributes:
        x, y: Coordinates of the projected point
        d: Distance from the query point to the projected point
    """
    x: float
    y: float
    d: float


@dataclass(frozen=True)
class RectCrossing:
    """
    Points where a segment crosses the boundary of a rectangle.

    Attributes:
        points: Zero, one or two crossing points, ordered by ascending x
    """
    points: Tuple[Point, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.points)


# Two points in traversal order, or empty when fewer than two points were given
ClosestPairResult = Tuple[Point, ...]
