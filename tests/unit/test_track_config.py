"""Unit tests for generator configuration validation."""

from __future__ import annotations

import math
import unittest

from seedtrack.track.config import TrackConfig, build_track_config, validate_canvas
from seedtrack.utils.exceptions import ConfigurationError


class TrackConfigTests(unittest.TestCase):
    """Default values and bound checks."""

    def test_defaults_define_the_track_family(self) -> None:
        """Keep the shape constants that existing seeds depend on."""
        config = TrackConfig()
        config.validate()
        self.assertEqual(config.min_control_points, 8)
        self.assertEqual(config.control_point_spread, 5)
        self.assertEqual(config.ellipse_ratio, 0.35)
        self.assertEqual(config.min_radial_factor, 0.5)
        self.assertEqual(config.displacement_ratio, 0.12)
        self.assertEqual(config.min_distance_ratio, 0.08)
        self.assertEqual(config.min_turn_angle, math.pi / 6.0)
        self.assertEqual(config.push_step, 5.0)
        self.assertEqual(config.relaxation_iterations, 5)
        self.assertEqual(config.samples_per_segment, 60)
        self.assertEqual(config.tangent_epsilon, 0.0005)
        self.assertFalse(config.strict_relaxation)

    def test_invalid_values_are_rejected(self) -> None:
        """Reject values outside their documented bounds."""
        invalid = (
            {"min_control_points": 2},
            {"control_point_spread": 0},
            {"ellipse_ratio": 0.0},
            {"min_radial_factor": 0.0},
            {"min_radial_factor": 1.5},
            {"displacement_ratio": -0.1},
            {"min_distance_ratio": -0.1},
            {"min_turn_angle": math.pi},
            {"push_step": -1.0},
            {"relaxation_iterations": -1},
            {"samples_per_segment": 0},
            {"tangent_epsilon": 0.0},
            {"strict_relaxation": 1},
        )
        for overrides in invalid:
            with self.subTest(overrides=overrides), self.assertRaises(ConfigurationError):
                build_track_config(**overrides)

    def test_unknown_field_is_a_configuration_error(self) -> None:
        """Wrap unknown override names into ``ConfigurationError``."""
        with self.assertRaises(ConfigurationError):
            build_track_config(samples=10)

    def test_overrides_are_applied(self) -> None:
        """Apply valid overrides on top of the defaults."""
        config = build_track_config(samples_per_segment=12, relaxation_iterations=0)
        self.assertEqual(config.samples_per_segment, 12)
        self.assertEqual(config.relaxation_iterations, 0)
        self.assertEqual(config.push_step, 5.0)


class CanvasValidationTests(unittest.TestCase):
    """Canvas dimension boundary checks."""

    def test_positive_finite_dimensions_pass(self) -> None:
        """Accept positive finite widths and heights, including integers."""
        validate_canvas(800.0, 450.0)
        validate_canvas(1200, 630)

    def test_non_positive_or_non_finite_dimensions_fail(self) -> None:
        """Reject zero, negative, infinite, and NaN dimensions."""
        for width, height in ((0.0, 10.0), (10.0, -1.0), (math.inf, 10.0), (10.0, math.nan)):
            with self.subTest(width=width, height=height), self.assertRaises(ConfigurationError):
                validate_canvas(width, height)


if __name__ == "__main__":
    unittest.main()
