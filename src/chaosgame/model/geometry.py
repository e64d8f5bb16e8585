"""
Geometric Primitives and Triangle Utilities.
"""
from __future__ import annotations

from dataclasses import dataclass

# Tolerance of the area decomposition test, in squared pixels.
AREA_TOLERANCE: float = 0.001


@dataclass(frozen=True)
class Point:
    """A point in canvas pixel space (x right, y down)."""
    x: float
    y: float

    def midpoint(self, other: Point) -> Point:
        """Point halfway between this point and another."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)


Triangle = tuple[Point, Point, Point]


def triangle_corners(width: float, height: float) -> Triangle:
    """
    Corners of the bounding triangle for a canvas of the given size.

    Returns:
        (top-center, bottom-left, bottom-right)
    """
    return (
        Point(width / 2, 0.0),
        Point(0.0, height),
        Point(width, height),
    )


def triangle_area(c1: Point, c2: Point, c3: Point) -> float:
    """Unsigned area of the triangle (c1, c2, c3)."""
    return abs(
        c1.x * (c2.y - c3.y) + c2.x * (c3.y - c1.y) + c3.x * (c1.y - c2.y)
    ) / 2


def is_inside_triangle(p: Point, c1: Point, c2: Point, c3: Point) -> bool:
    """
    Check whether a point lies inside the triangle (c1, c2, c3).

    The triangle is split into three sub-triangles by substituting `p` for each
    corner. For a point inside (or on an edge of) the triangle the sub-areas sum
    up to the total area; outside they exceed it.

    Args:
        p: The point to test.
        c1, c2, c3: Corners of the triangle.

    Returns:
        True if `p` is inside or on the boundary of the triangle.
    """
    total = triangle_area(c1, c2, c3)
    area1 = triangle_area(p, c2, c3)
    area2 = triangle_area(c1, p, c3)
    area3 = triangle_area(c1, c2, p)
    return abs(total - (area1 + area2 + area3)) < AREA_TOLERANCE
