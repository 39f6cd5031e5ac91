"""Unit tests for convex hull construction."""

from __future__ import annotations

import unittest

from seedtrack.track.hull import control_hull, convex_hull, cross
from seedtrack.track.models import Point
from tests.helpers import as_points


class ConvexHullTests(unittest.TestCase):
    """Monotone-chain hull checks."""

    def test_cross_sign_reflects_turn_direction(self) -> None:
        """Return positive for left turns and zero for collinear points."""
        origin = Point(0.0, 0.0)
        self.assertGreater(cross(origin, Point(1.0, 0.0), Point(1.0, 1.0)), 0.0)
        self.assertLess(cross(origin, Point(1.0, 0.0), Point(1.0, -1.0)), 0.0)
        self.assertEqual(cross(origin, Point(1.0, 1.0), Point(2.0, 2.0)), 0.0)

    def test_interior_points_are_dropped(self) -> None:
        """Keep only the outer boundary in counter-clockwise order."""
        points = as_points(
            [(1.0, 1.0), (0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0), (1.5, 0.5)]
        )
        hull = convex_hull(points)
        self.assertEqual(
            hull,
            as_points([(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]),
        )

    def test_collinear_boundary_points_are_removed(self) -> None:
        """Pop points that make a non-left turn, including straight runs."""
        points = as_points([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (1.0, 1.0)])
        self.assertEqual(convex_hull(points), as_points([(0.0, 0.0), (2.0, 0.0), (1.0, 1.0)]))

    def test_trivial_inputs_are_returned_sorted(self) -> None:
        """Return empty and single-point inputs unchanged."""
        self.assertEqual(convex_hull([]), [])
        self.assertEqual(convex_hull([Point(3.0, 4.0)]), [Point(3.0, 4.0)])

    def test_all_collinear_input_collapses_to_two_points(self) -> None:
        """Reduce collinear inputs to their extreme points."""
        points = as_points([(2.0, 2.0), (0.0, 0.0), (1.0, 1.0)])
        self.assertEqual(convex_hull(points), as_points([(0.0, 0.0), (2.0, 2.0)]))


class ControlHullTests(unittest.TestCase):
    """Degenerate hull fallback checks."""

    def test_degenerate_hull_falls_back_to_first_raw_points(self) -> None:
        """Use the first three raw points in sampling order when the hull collapses."""
        raw = as_points([(2.0, 2.0), (0.0, 0.0), (1.0, 1.0), (3.0, 3.0)])
        self.assertEqual(control_hull(raw), raw[:3])

    def test_regular_hull_is_kept(self) -> None:
        """Return the hull itself when it has at least three vertices."""
        raw = as_points([(0.0, 0.0), (4.0, 0.0), (0.0, 4.0), (1.0, 1.0)])
        self.assertEqual(control_hull(raw), as_points([(0.0, 0.0), (4.0, 0.0), (0.0, 4.0)]))


if __name__ == "__main__":
    unittest.main()
