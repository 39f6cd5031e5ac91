"""Unit tests for closed Catmull-Rom resampling."""

from __future__ import annotations

import unittest

import numpy as np

from seedtrack.track.spline import catmull_rom_closed
from tests.helpers import as_points


class CatmullRomTests(unittest.TestCase):
    """Closed spline sampling checks."""

    def test_sample_count_and_control_point_interpolation(self) -> None:
        """Emit ``n * samples`` points and pass exactly through control points."""
        points = as_points([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (-3.0, 5.0)])
        x, y = catmull_rom_closed(points, samples_per_segment=60)

        self.assertEqual(x.shape, (300,))
        self.assertEqual(y.shape, (300,))
        for i, p in enumerate(points):
            self.assertEqual(x[i * 60], p.x)
            self.assertEqual(y[i * 60], p.y)

    def test_collinear_neighbors_produce_straight_segment(self) -> None:
        """Sample evenly spaced collinear points on a straight line."""
        points = as_points([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (3.0, 0.0)])
        x, y = catmull_rom_closed(points, samples_per_segment=4)
        # Segment 1 has collinear, equally spaced neighbors on both sides.
        np.testing.assert_allclose(x[4:8], [1.0, 1.25, 1.5, 1.75])
        np.testing.assert_allclose(y[4:8], 0.0)

    def test_curve_wraps_without_seam(self) -> None:
        """Approach the first control point at the end of the last segment."""
        points = as_points([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)])
        x, y = catmull_rom_closed(points, samples_per_segment=200)
        gap_end = np.hypot(x[-1] - x[0], y[-1] - y[0])
        typical_step = np.hypot(x[1] - x[0], y[1] - y[0])
        self.assertLess(gap_end, 2.0 * typical_step)

    def test_square_spline_is_symmetric(self) -> None:
        """Keep the square's rotational symmetry in the sampled curve."""
        points = as_points([(1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0)])
        x, y = catmull_rom_closed(points, samples_per_segment=8)
        np.testing.assert_allclose(x[8:16], -y[0:8], atol=1e-12)
        np.testing.assert_allclose(y[8:16], x[0:8], atol=1e-12)


if __name__ == "__main__":
    unittest.main()
