"""Convex hull construction for control polygons."""

from __future__ import annotations

from collections.abc import Sequence

from seedtrack.track.models import Point


def cross(origin: Point, a: Point, b: Point) -> float:
    """Z-component of the cross product of ``origin->a`` and ``origin->b``.

    Args:
        origin: Shared vector origin.
        a: End of the first vector.
        b: End of the second vector.

    Returns:
        Positive for a left turn, negative for a right turn, zero when
        collinear.
    """
    return (a.x - origin.x) * (b.y - origin.y) - (a.y - origin.y) * (b.x - origin.x)


def _half_hull(points: Sequence[Point]) -> list[Point]:
    """Build one monotone chain, dropping points that do not turn left.

    Args:
        points: Points in sweep order.

    Returns:
        Chain including both sweep endpoints.
    """
    chain: list[Point] = []
    for p in points:
        while len(chain) >= 2 and cross(chain[-2], chain[-1], p) <= 0.0:
            chain.pop()
        chain.append(p)
    return chain


def convex_hull(points: Sequence[Point]) -> list[Point]:
    """Compute the convex hull with Andrew's monotone chain.

    Collinear boundary points are dropped. The result winds
    counter-clockwise in a y-up frame (clockwise on a y-down canvas),
    starting at the lexicographically smallest point.

    Args:
        points: Candidate points in any order.

    Returns:
        Hull vertices as a cyclic sequence without a repeated endpoint.
        Inputs with at most one point are returned sorted.
    """
    ordered = sorted(points, key=lambda p: (p.x, p.y))
    if len(ordered) <= 1:
        return ordered

    lower = _half_hull(ordered)
    upper = _half_hull(list(reversed(ordered)))
    return lower[:-1] + upper[:-1]


def control_hull(points: Sequence[Point], min_count: int = 3) -> list[Point]:
    """Hull of the raw control points with a degenerate-case fallback.

    Args:
        points: Raw control points in sampling order.
        min_count: Smallest usable polygon size.

    Returns:
        The convex hull, or the first ``min_count`` raw points in sampling
        order when the hull has fewer than ``min_count`` vertices.
    """
    hull = convex_hull(points)
    if len(hull) < min_count:
        return list(points[:min_count])
    return hull
