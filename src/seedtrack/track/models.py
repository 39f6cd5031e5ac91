"""Track data models and lap-fraction queries."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from seedtrack.track.config import DEFAULT_TANGENT_EPSILON
from seedtrack.utils.exceptions import TrackDataError

MIN_TRACK_POINT_COUNT = 2
ZERO_TANGENT_FALLBACK = (1.0, 0.0)


@dataclass(frozen=True)
class Point:
    """Point in canvas coordinates.

    Args:
        x: Horizontal coordinate.
        y: Vertical coordinate.
    """

    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point.

        Args:
            other: Second point.

        Returns:
            Distance between both points.
        """
        return math.hypot(self.x - other.x, self.y - other.y)


def wrap_fraction(t: float) -> float:
    """Normalize a lap fraction into ``[0, 1)``.

    Negative values and values above one wrap around the lap.

    Args:
        t: Lap fraction.

    Returns:
        Equivalent fraction in ``[0, 1)``, or ``nan`` when ``t`` is not
        finite.
    """
    if not math.isfinite(t):
        return math.nan
    return math.fmod(math.fmod(t, 1.0) + 1.0, 1.0)


@dataclass(frozen=True)
class Track:
    """Closed, densely sampled track centerline in arc-length domain.

    Args:
        x: Polyline x-coordinates. The curve implicitly closes from the last
            sample back to the first.
        y: Polyline y-coordinates.
        cumulative_lengths: Arc length up to each sample, starting at ``0``.
        total_length: Full lap length including the closing segment.
        tangent_epsilon: Default central-difference half-width used by
            :meth:`tangent_at` [lap fraction].
    """

    x: np.ndarray
    y: np.ndarray
    cumulative_lengths: np.ndarray
    total_length: float
    tangent_epsilon: float = DEFAULT_TANGENT_EPSILON

    @property
    def points(self) -> np.ndarray:
        """Polyline samples as an ``(n, 2)`` array.

        Returns:
            Stacked ``x``/``y`` coordinates.
        """
        return np.column_stack((self.x, self.y))

    @property
    def size(self) -> int:
        """Number of polyline samples.

        Returns:
            Sample count.
        """
        return int(self.x.size)

    def validate(self) -> None:
        """Validate consistency of the track arrays.

        Raises:
            seedtrack.utils.exceptions.TrackDataError: If array sizes,
                arc-length monotonicity, or numeric validity checks fail.
        """
        size = self.x.size
        if size < MIN_TRACK_POINT_COUNT:
            msg = f"Track must contain at least {MIN_TRACK_POINT_COUNT} points"
            raise TrackDataError(msg)
        if self.y.size != size or self.cumulative_lengths.size != size:
            msg = "Track coordinate and arc-length arrays must have equal length"
            raise TrackDataError(msg)
        arrays = (self.x, self.y, self.cumulative_lengths)
        if any(np.any(~np.isfinite(arr)) for arr in arrays) or not math.isfinite(
            self.total_length
        ):
            msg = "Track arrays contain non-finite values"
            raise TrackDataError(msg)
        if self.cumulative_lengths[0] != 0.0:
            msg = "Arc length must start at zero"
            raise TrackDataError(msg)
        if np.any(np.diff(self.cumulative_lengths) < 0.0):
            msg = "Arc length must be non-decreasing"
            raise TrackDataError(msg)
        if self.total_length < self.cumulative_lengths[-1]:
            msg = "Total length must include every polyline segment"
            raise TrackDataError(msg)

    def _segment_at(self, target: float) -> tuple[int, int]:
        """Locate the polyline segment containing an arc-length position.

        Args:
            target: Arc length in ``[0, total_length)``.

        Returns:
            Start and end sample indices of the containing segment. Targets
            beyond the last sample map to the closing segment.
        """
        last = self.x.size - 1
        index = int(np.searchsorted(self.cumulative_lengths, target, side="left"))
        if index > last:
            return last, 0
        start = max(0, index - 1)
        return start, start + 1

    def point_at(self, t: float) -> Point:
        """Map a lap fraction to a point on the centerline.

        Args:
            t: Lap fraction. ``0`` is the start/finish line; values outside
                ``[0, 1)`` wrap.

        Returns:
            Linearly interpolated centerline point.
        """
        target = wrap_fraction(t) * self.total_length
        i, j = self._segment_at(target)
        x0 = float(self.x[i])
        y0 = float(self.y[i])
        dx = float(self.x[j]) - x0
        dy = float(self.y[j]) - y0
        segment_length = math.hypot(dx, dy)
        frac = (
            (target - float(self.cumulative_lengths[i])) / segment_length
            if segment_length > 0.0
            else 0.0
        )
        return Point(x0 + dx * frac, y0 + dy * frac)

    def tangent_at(
        self,
        t: float,
        epsilon: float | None = None,
    ) -> tuple[float, float]:
        """Estimate the unit travel direction at a lap fraction.

        Args:
            t: Lap fraction, wrapped like :meth:`point_at`.
            epsilon: Central-difference half-width in lap fractions.
                Defaults to the track's ``tangent_epsilon``.

        Returns:
            Unit tangent ``(tx, ty)``. ``(1.0, 0.0)`` when both difference
            samples coincide.
        """
        eps = self.tangent_epsilon if epsilon is None else epsilon
        a = self.point_at(t - eps)
        b = self.point_at(t + eps)
        dx = b.x - a.x
        dy = b.y - a.y
        length = math.hypot(dx, dy)
        if length == 0.0:
            return ZERO_TANGENT_FALLBACK
        return dx / length, dy / length

    def normal_at(self, t: float) -> tuple[float, float]:
        """Left-hand unit normal ``(-ty, tx)`` at a lap fraction.

        Args:
            t: Lap fraction.

        Returns:
            Unit normal vector.
        """
        tx, ty = self.tangent_at(t)
        return -ty, tx

    def offset_point(self, t: float, offset: float) -> Point:
        """Point displaced sideways from the centerline.

        Args:
            t: Lap fraction.
            offset: Signed lateral distance along :meth:`normal_at`.

        Returns:
            Offset point.
        """
        p = self.point_at(t)
        nx, ny = self.normal_at(t)
        return Point(p.x + nx * offset, p.y + ny * offset)

    def start_line(self, half_width: float) -> tuple[Point, Point]:
        """Endpoints of the start/finish line across the track at ``t = 0``.

        Args:
            half_width: Half of the drawn track width.

        Returns:
            Endpoint on the normal side followed by the opposite endpoint.
        """
        return self.offset_point(0.0, half_width), self.offset_point(0.0, -half_width)

    def turn_sharpness_at(self, t: float, dt: float) -> float:
        """Corner intensity from two consecutive chords around ``t``.

        Absolute cross product of ``p(t) - p(t - dt)`` and
        ``p(t + dt) - p(t)``. Scales with the square of the chord length,
        so thresholds depend on canvas size.

        Args:
            t: Lap fraction.
            dt: Chord length in lap fractions.

        Returns:
            Non-negative sharpness value.
        """
        prev = self.point_at(t - dt)
        curr = self.point_at(t)
        nxt = self.point_at(t + dt)
        dx1 = curr.x - prev.x
        dy1 = curr.y - prev.y
        dx2 = nxt.x - curr.x
        dy2 = nxt.y - curr.y
        return abs(dx1 * dy2 - dy1 * dx2)
