"""Closed uniform Catmull-Rom resampling."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from seedtrack.track.config import DEFAULT_SAMPLES_PER_SEGMENT
from seedtrack.track.models import Point

FloatArray = npt.NDArray[np.float64]


def _catmull_rom_axis(
    coords: FloatArray,
    t: FloatArray,
) -> FloatArray:
    """Evaluate the closed Catmull-Rom basis for one coordinate axis.

    Args:
        coords: Control coordinates for a single axis, shape ``(n,)``.
        t: Segment parameters in ``[0, 1)``, shape ``(samples,)``.

    Returns:
        Samples of shape ``(n * samples,)``, segment-major.
    """
    p0 = np.roll(coords, 1)[:, None]
    p1 = coords[:, None]
    p2 = np.roll(coords, -1)[:, None]
    p3 = np.roll(coords, -2)[:, None]
    t1 = t[None, :]
    t2 = t1 * t1
    t3 = t2 * t1

    values = 0.5 * (
        2.0 * p1
        + (-p0 + p2) * t1
        + (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3) * t2
        + (-p0 + 3.0 * p1 - 3.0 * p2 + p3) * t3
    )
    return np.asarray(values.reshape(-1), dtype=np.float64)


def catmull_rom_closed(
    points: Sequence[Point],
    samples_per_segment: int = DEFAULT_SAMPLES_PER_SEGMENT,
) -> tuple[FloatArray, FloatArray]:
    """Sample a closed uniform Catmull-Rom spline through control points.

    Segment ``i`` runs from ``points[i]`` to ``points[i + 1]`` and uses
    ``points[i - 1]`` and ``points[i + 2]`` as tangent neighbors, all
    indices taken modulo the point count, so the curve has no seam. Each
    segment is sampled at ``t = j / samples_per_segment`` for
    ``j = 0 .. samples_per_segment - 1``.

    Args:
        points: Cyclic control polygon.
        samples_per_segment: Samples per control-polygon edge.

    Returns:
        Tuple ``(x, y)`` with ``len(points) * samples_per_segment`` samples.
    """
    x = np.fromiter((p.x for p in points), dtype=np.float64, count=len(points))
    y = np.fromiter((p.y for p in points), dtype=np.float64, count=len(points))
    t = np.arange(samples_per_segment, dtype=np.float64) / float(samples_per_segment)
    return _catmull_rom_axis(x, t), _catmull_rom_axis(y, t)
