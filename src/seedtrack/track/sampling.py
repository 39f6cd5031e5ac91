"""Seeded control-point sampling around an ellipse."""

from __future__ import annotations

import math

from seedtrack.rng import Mulberry32
from seedtrack.track.config import TrackConfig
from seedtrack.track.models import Point


def draw_control_point_count(rng: Mulberry32, config: TrackConfig) -> int:
    """Draw the number of raw control points.

    Args:
        rng: Seeded generator; advanced by one draw.
        config: Track configuration providing count bounds.

    Returns:
        Count in ``[min_control_points, min_control_points + spread)``.
    """
    return config.min_control_points + math.floor(rng.next_float() * config.control_point_spread)


def sample_control_points(
    rng: Mulberry32,
    center_x: float,
    center_y: float,
    width: float,
    height: float,
    config: TrackConfig,
) -> list[Point]:
    """Scatter control points at even angles around a scaled ellipse.

    The count is drawn first, then one radial factor per point, in angular
    order. Radial factors lie in ``[min_radial_factor, 1)`` so no point
    coincides with the center.

    Args:
        rng: Seeded generator.
        center_x: Ellipse center x-coordinate.
        center_y: Ellipse center y-coordinate.
        width: Canvas width; the x half-axis is ``ellipse_ratio * width``.
        height: Canvas height; the y half-axis is ``ellipse_ratio * height``.
        config: Track configuration.

    Returns:
        Raw control points ordered by angle.
    """
    count = draw_control_point_count(rng, config)
    rx = width * config.ellipse_ratio
    ry = height * config.ellipse_ratio
    radial_span = 1.0 - config.min_radial_factor

    points: list[Point] = []
    for i in range(count):
        angle = (i / count) * math.pi * 2.0
        factor = config.min_radial_factor + rng.next_float() * radial_span
        points.append(
            Point(
                center_x + math.cos(angle) * rx * factor,
                center_y + math.sin(angle) * ry * factor,
            )
        )
    return points
