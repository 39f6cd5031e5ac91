"""Whole-lap sampling helpers for track consumers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from seedtrack.track.models import Point, Track

DEFAULT_CORNER_SAMPLE_COUNT = 120
DEFAULT_CORNER_THRESHOLD = 3.5
DEFAULT_TURN_SAMPLE_COUNT = 100
DEFAULT_TURN_THRESHOLD = 8.0
DEFAULT_TURN_SPACING = 0.1
DEFAULT_TURN_LIMIT = 8


@dataclass(frozen=True)
class LapSamples:
    """Evenly spaced samples along one lap.

    Args:
        fractions: Lap fractions ``i / count``.
        x: Centerline x-coordinates at each fraction.
        y: Centerline y-coordinates at each fraction.
        tangent_x: Unit tangent x-components.
        tangent_y: Unit tangent y-components.
    """

    fractions: np.ndarray
    x: np.ndarray
    y: np.ndarray
    tangent_x: np.ndarray
    tangent_y: np.ndarray


@dataclass(frozen=True)
class TurnMarker:
    """Numbered turn position for labelling.

    Args:
        fraction: Lap fraction of the turn.
        point: Centerline point at ``fraction``.
        normal: Left-hand unit normal at ``fraction``; labels sit along it.
    """

    fraction: float
    point: Point
    normal: tuple[float, float]


def sample_fractions(track: Track, count: int) -> LapSamples:
    """Sample points and tangents at evenly spaced lap fractions.

    Args:
        track: Track to sample.
        count: Number of samples; fractions are ``0, 1/count, ...``.

    Returns:
        Sampled positions and tangents.

    Raises:
        ValueError: If ``count`` is not positive.
    """
    if count < 1:
        msg = "count must be positive"
        raise ValueError(msg)

    fractions = np.arange(count, dtype=np.float64) / float(count)
    x = np.empty(count, dtype=np.float64)
    y = np.empty(count, dtype=np.float64)
    tangent_x = np.empty(count, dtype=np.float64)
    tangent_y = np.empty(count, dtype=np.float64)
    for i, t in enumerate(fractions):
        p = track.point_at(float(t))
        x[i] = p.x
        y[i] = p.y
        tangent_x[i], tangent_y[i] = track.tangent_at(float(t))
    return LapSamples(fractions=fractions, x=x, y=y, tangent_x=tangent_x, tangent_y=tangent_y)


def corner_fractions(
    track: Track,
    samples: int = DEFAULT_CORNER_SAMPLE_COUNT,
    threshold: float = DEFAULT_CORNER_THRESHOLD,
) -> list[float]:
    """Lap fractions whose turn sharpness exceeds a threshold.

    Fractions ``i / samples`` are measured with a chord of ``2 / samples``
    on each side. Renderers place kerbs at the returned positions.

    Args:
        track: Track to scan.
        samples: Number of sample positions around the lap.
        threshold: Minimum :meth:`Track.turn_sharpness_at` value.

    Returns:
        Increasing lap fractions in ``[0, 1)``.

    Raises:
        ValueError: If ``samples`` is not positive.
    """
    if samples < 1:
        msg = "samples must be positive"
        raise ValueError(msg)

    dt = 2.0 / samples
    corners: list[float] = []
    for i in range(samples):
        t = i / samples
        if track.turn_sharpness_at(t, dt) > threshold:
            corners.append(t)
    return corners


def _within_spacing(a: float, b: float, spacing: float) -> bool:
    """Check whether two lap fractions are closer than ``spacing``.

    Args:
        a: First fraction in ``[0, 1)``.
        b: Second fraction in ``[0, 1)``.
        spacing: Gap in lap fractions, also measured across the seam.

    Returns:
        ``True`` if the fractions are too close.
    """
    diff = abs(a - b)
    return diff < spacing or diff > 1.0 - spacing


def turn_markers(
    track: Track,
    samples: int = DEFAULT_TURN_SAMPLE_COUNT,
    threshold: float = DEFAULT_TURN_THRESHOLD,
    min_spacing: float = DEFAULT_TURN_SPACING,
    limit: int = DEFAULT_TURN_LIMIT,
) -> list[TurnMarker]:
    """Pick well-separated turns for ``T1``, ``T2``, ... labels.

    Samples run in lap order with a chord of ``3 / samples``. A sample above
    ``threshold`` becomes a turn unless it lies within ``min_spacing`` of an
    accepted turn, measured across the start/finish seam.

    Args:
        track: Track to scan.
        samples: Number of sample positions around the lap.
        threshold: Minimum :meth:`Track.turn_sharpness_at` value.
        min_spacing: Smallest lap-fraction gap between two turns.
        limit: Maximum number of turns returned.

    Returns:
        Turns in lap order, at most ``limit`` of them.

    Raises:
        ValueError: If ``samples`` is not positive or ``limit`` is negative.
    """
    if samples < 1:
        msg = "samples must be positive"
        raise ValueError(msg)
    if limit < 0:
        msg = "limit must not be negative"
        raise ValueError(msg)

    dt = 3.0 / samples
    turns: list[TurnMarker] = []
    for i in range(samples):
        if len(turns) >= limit:
            break
        t = i / samples
        if track.turn_sharpness_at(t, dt) <= threshold:
            continue
        if any(_within_spacing(turn.fraction, t, min_spacing) for turn in turns):
            continue
        turns.append(TurnMarker(fraction=t, point=track.point_at(t), normal=track.normal_at(t)))
    return turns
