"""Arc-length indexing for closed polylines."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from seedtrack.track.config import DEFAULT_TANGENT_EPSILON
from seedtrack.track.models import Track
from seedtrack.utils.exceptions import TrackDataError

FloatArray = npt.NDArray[np.float64]


def cumulative_arc_length(x: FloatArray, y: FloatArray) -> FloatArray:
    """Compute cumulative arc length from Cartesian points.

    Args:
        x: Polyline x-coordinates.
        y: Polyline y-coordinates.

    Returns:
        Running Euclidean length at each sample; the first entry is ``0``.
    """
    dx = np.diff(x)
    dy = np.diff(y)
    ds = np.hypot(dx, dy)
    s = np.zeros(x.shape[0], dtype=np.float64)
    s[1:] = np.cumsum(ds)
    return np.asarray(s, dtype=np.float64)


def closed_length(x: FloatArray, y: FloatArray, arc_length: FloatArray) -> float:
    """Total length of a polyline treated as a closed loop.

    Args:
        x: Polyline x-coordinates.
        y: Polyline y-coordinates.
        arc_length: Cumulative arc length from :func:`cumulative_arc_length`.

    Returns:
        Open arc length plus the closing edge from the last sample to the
        first.
    """
    closing = float(np.hypot(x[0] - x[-1], y[0] - y[-1]))
    return float(arc_length[-1]) + closing


def build_track(
    x: FloatArray,
    y: FloatArray,
    tangent_epsilon: float = DEFAULT_TANGENT_EPSILON,
) -> Track:
    """Build a validated ``Track`` from closed-loop polyline samples.

    Args:
        x: Polyline x-coordinates, without a repeated closing sample.
        y: Polyline y-coordinates, without a repeated closing sample.
        tangent_epsilon: Default tangent half-width stored on the track.

    Returns:
        Track with arc-length index and total closed length.

    Raises:
        seedtrack.utils.exceptions.TrackDataError: If the arrays are
            inconsistent or numerically invalid.
    """
    x = np.array(x, dtype=np.float64).reshape(-1)
    y = np.array(y, dtype=np.float64).reshape(-1)
    if x.size != y.size:
        msg = "Track coordinate arrays must have equal length"
        raise TrackDataError(msg)
    arc_length = cumulative_arc_length(x, y) if x.size else np.zeros(0, dtype=np.float64)
    total = closed_length(x, y, arc_length) if x.size else 0.0

    for arr in (x, y, arc_length):
        arr.setflags(write=False)

    track = Track(
        x=x,
        y=y,
        cumulative_lengths=arc_length,
        total_length=total,
        tangent_epsilon=tangent_epsilon,
    )
    track.validate()
    return track
