"""Shared test helpers."""

from __future__ import annotations

import numpy as np

from seedtrack.track.geometry import build_track
from seedtrack.track.models import Point, Track

CANONICAL_SEED = "octocat/Hello-World"
CANONICAL_WIDTH = 800.0
CANONICAL_HEIGHT = 450.0
SAMPLE_SEEDS = (
    "octocat/Hello-World",
    "torvalds/linux",
    "python/cpython",
    "",
    "a",
    "numpy/numpy",
    "été/\U0001f3ce",
)


def square_track(side: float = 10.0) -> Track:
    """Build a four-vertex square track with corners at the axes.

    Args:
        side: Square side length.

    Returns:
        Track through ``(0, 0)``, ``(side, 0)``, ``(side, side)``, ``(0, side)``.
    """
    return build_track(
        np.array([0.0, side, side, 0.0]),
        np.array([0.0, 0.0, side, side]),
    )


def as_points(coords: list[tuple[float, float]]) -> list[Point]:
    """Convert coordinate pairs into points.

    Args:
        coords: ``(x, y)`` pairs.

    Returns:
        Points in the same order.
    """
    return [Point(x, y) for x, y in coords]
