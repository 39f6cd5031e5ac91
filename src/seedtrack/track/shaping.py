"""Control-polygon roughening and separation relaxation."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from seedtrack.rng import Mulberry32
from seedtrack.track.models import Point
from seedtrack.utils.constants import SMALL_EPS

EDGE_VIOLATION = "edge"
ANGLE_VIOLATION = "angle"


@dataclass(frozen=True)
class RelaxationViolation:
    """Constraint left unsatisfied after relaxation.

    Args:
        index: Vertex index (edge start for edge violations).
        kind: ``"edge"`` for short edges, ``"angle"`` for sharp vertices.
        value: Measured edge length or vertex angle [rad].
    """

    index: int
    kind: str
    value: float


def vertex_angle(prev: Point, curr: Point, nxt: Point) -> float:
    """Interior angle at ``curr`` between the edges to its neighbors.

    Args:
        prev: Preceding vertex.
        curr: Vertex at which the angle is measured.
        nxt: Following vertex.

    Returns:
        Angle in ``[0, pi]``. ``pi`` (a straight pass) when either edge has
        zero length.
    """
    v1x = prev.x - curr.x
    v1y = prev.y - curr.y
    v2x = nxt.x - curr.x
    v2y = nxt.y - curr.y
    dot = v1x * v2x + v1y * v2y
    magnitude = math.hypot(v1x, v1y) * math.hypot(v2x, v2y)
    if magnitude == 0.0:
        return math.pi
    return math.acos(max(-1.0, min(1.0, dot / magnitude)))


def add_displaced_midpoints(
    hull: Sequence[Point],
    rng: Mulberry32,
    displacement: float,
) -> list[Point]:
    """Insert a randomly displaced midpoint after every hull vertex.

    Each midpoint moves along the edge's left normal by a uniform offset in
    ``[-displacement, displacement)``. Zero-length edges get no midpoint and
    consume no random draw.

    Args:
        hull: Cyclic hull polygon.
        rng: Seeded generator.
        displacement: Maximum absolute normal offset.

    Returns:
        Polygon with original vertices interleaved with displaced midpoints.
    """
    result: list[Point] = []
    n = len(hull)
    for i, curr in enumerate(hull):
        nxt = hull[(i + 1) % n]
        result.append(curr)

        mx = (curr.x + nxt.x) / 2.0
        my = (curr.y + nxt.y) / 2.0
        dx = nxt.x - curr.x
        dy = nxt.y - curr.y
        length = math.hypot(dx, dy)
        if length > 0.0:
            nx = -dy / length
            ny = dx / length
            offset = (rng.next_float() - 0.5) * 2.0 * displacement
            result.append(Point(mx + nx * offset, my + ny * offset))
    return result


def _separate_edges(points: list[Point], min_distance: float) -> None:
    """Stretch every too-short edge to ``min_distance`` about its midpoint.

    Args:
        points: Cyclic polygon, updated in place.
        min_distance: Minimum adjacent vertex distance.
    """
    n = len(points)
    half = min_distance / 2.0
    for i in range(n):
        j = (i + 1) % n
        a = points[i]
        b = points[j]
        if a.distance_to(b) >= min_distance:
            continue
        mx = (a.x + b.x) / 2.0
        my = (a.y + b.y) / 2.0
        dx = b.x - a.x
        dy = b.y - a.y
        length = math.hypot(dx, dy) or 1.0
        points[i] = Point(mx - (dx / length) * half, my - (dy / length) * half)
        points[j] = Point(mx + (dx / length) * half, my + (dy / length) * half)


def _open_sharp_turns(points: list[Point], min_angle: float, push_step: float) -> None:
    """Push vertices with too-sharp turns away from their neighbors' midpoint.

    Args:
        points: Cyclic polygon, updated in place.
        min_angle: Smallest allowed vertex angle [rad].
        push_step: Displacement applied to each offending vertex.
    """
    n = len(points)
    for i in range(n):
        prev = points[(i - 1) % n]
        curr = points[i]
        nxt = points[(i + 1) % n]
        if vertex_angle(prev, curr, nxt) >= min_angle:
            continue
        mx = (prev.x + nxt.x) / 2.0
        my = (prev.y + nxt.y) / 2.0
        dx = curr.x - mx
        dy = curr.y - my
        length = math.hypot(dx, dy) or 1.0
        points[i] = Point(curr.x + (dx / length) * push_step, curr.y + (dy / length) * push_step)


def push_apart(
    points: Sequence[Point],
    min_distance: float,
    min_angle: float,
    iterations: int,
    push_step: float,
) -> list[Point]:
    """Relax a control polygon toward minimum edge length and turn angle.

    Every iteration runs one edge pass followed by one angle pass. Moves
    apply immediately, so later vertices in a pass see earlier updates. The
    iteration count is fixed; there is no convergence check.

    Args:
        points: Cyclic control polygon. Not modified.
        min_distance: Minimum adjacent vertex distance.
        min_angle: Smallest allowed vertex angle [rad].
        iterations: Number of relaxation iterations.
        push_step: Displacement applied to sharp vertices per pass.

    Returns:
        Relaxed copy of the polygon with the same vertex count.
    """
    relaxed = list(points)
    for _ in range(iterations):
        _separate_edges(relaxed, min_distance)
        _open_sharp_turns(relaxed, min_angle, push_step)
    return relaxed


def find_relaxation_violations(
    points: Sequence[Point],
    min_distance: float,
    min_angle: float,
) -> list[RelaxationViolation]:
    """List edges and vertices that still break the relaxation constraints.

    Args:
        points: Cyclic control polygon.
        min_distance: Minimum adjacent vertex distance.
        min_angle: Smallest allowed vertex angle [rad].

    Returns:
        Violations ordered by vertex index, edges before angles.
    """
    violations: list[RelaxationViolation] = []
    n = len(points)
    if n < 3:
        return violations
    for i in range(n):
        prev = points[(i - 1) % n]
        curr = points[i]
        nxt = points[(i + 1) % n]
        edge_length = curr.distance_to(nxt)
        # Stretched edges land on min_distance up to rounding.
        if edge_length < min_distance * (1.0 - SMALL_EPS):
            violations.append(RelaxationViolation(i, EDGE_VIOLATION, edge_length))
        angle = vertex_angle(prev, curr, nxt)
        if angle < min_angle:
            violations.append(RelaxationViolation(i, ANGLE_VIOLATION, angle))
    return violations
