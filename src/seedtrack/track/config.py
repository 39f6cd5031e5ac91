"""Track generator configuration dataclasses."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from seedtrack.utils.exceptions import ConfigurationError

DEFAULT_MIN_CONTROL_POINTS = 8
DEFAULT_CONTROL_POINT_SPREAD = 5
DEFAULT_ELLIPSE_RATIO = 0.35
DEFAULT_MIN_RADIAL_FACTOR = 0.5
DEFAULT_DISPLACEMENT_RATIO = 0.12
DEFAULT_MIN_DISTANCE_RATIO = 0.08
DEFAULT_MIN_TURN_ANGLE = math.pi / 6.0
DEFAULT_PUSH_STEP = 5.0
DEFAULT_RELAXATION_ITERATIONS = 5
DEFAULT_SAMPLES_PER_SEGMENT = 60
DEFAULT_TANGENT_EPSILON = 0.0005
DEFAULT_STRICT_RELAXATION = False
MIN_HULL_POINT_COUNT = 3


@dataclass(frozen=True)
class TrackConfig:
    """Shape controls for the procedural track pipeline.

    Changing any default changes the layout produced for existing seeds.

    Args:
        min_control_points: Lower bound of the sampled control-point count.
        control_point_spread: Number of distinct counts above the minimum
            (count is ``min + floor(rng * spread)``).
        ellipse_ratio: Sampling ellipse half-axis as a fraction of canvas
            width and height.
        min_radial_factor: Smallest radial scale of a sampled point; the
            factor is drawn from ``[min_radial_factor, 1)``.
        displacement_ratio: Maximum midpoint displacement as a fraction of
            ``min(width, height)``.
        min_distance_ratio: Minimum adjacent control-point distance as a
            fraction of ``min(width, height)``.
        min_turn_angle: Smallest allowed vertex angle [rad].
        push_step: Distance a sharp vertex is pushed per relaxation pass
            [canvas units].
        relaxation_iterations: Fixed number of separation passes.
        samples_per_segment: Catmull-Rom samples per control-polygon edge.
        tangent_epsilon: Lap-fraction offset for central-difference tangents.
        strict_relaxation: Raise instead of logging when relaxed control
            points still violate the distance or angle constraints.
    """

    min_control_points: int = DEFAULT_MIN_CONTROL_POINTS
    control_point_spread: int = DEFAULT_CONTROL_POINT_SPREAD
    ellipse_ratio: float = DEFAULT_ELLIPSE_RATIO
    min_radial_factor: float = DEFAULT_MIN_RADIAL_FACTOR
    displacement_ratio: float = DEFAULT_DISPLACEMENT_RATIO
    min_distance_ratio: float = DEFAULT_MIN_DISTANCE_RATIO
    min_turn_angle: float = DEFAULT_MIN_TURN_ANGLE
    push_step: float = DEFAULT_PUSH_STEP
    relaxation_iterations: int = DEFAULT_RELAXATION_ITERATIONS
    samples_per_segment: int = DEFAULT_SAMPLES_PER_SEGMENT
    tangent_epsilon: float = DEFAULT_TANGENT_EPSILON
    strict_relaxation: bool = DEFAULT_STRICT_RELAXATION

    def validate(self) -> None:
        """Validate generator settings.

        Raises:
            seedtrack.utils.exceptions.ConfigurationError: If any setting
                violates its bound.
        """
        if self.min_control_points < MIN_HULL_POINT_COUNT:
            msg = f"min_control_points must be at least {MIN_HULL_POINT_COUNT}"
            raise ConfigurationError(msg)
        if self.control_point_spread < 1:
            msg = "control_point_spread must be at least 1"
            raise ConfigurationError(msg)
        if self.ellipse_ratio <= 0.0:
            msg = "ellipse_ratio must be positive"
            raise ConfigurationError(msg)
        if not 0.0 < self.min_radial_factor <= 1.0:
            msg = "min_radial_factor must be in (0, 1]"
            raise ConfigurationError(msg)
        if self.displacement_ratio < 0.0:
            msg = "displacement_ratio must be non-negative"
            raise ConfigurationError(msg)
        if self.min_distance_ratio < 0.0:
            msg = "min_distance_ratio must be non-negative"
            raise ConfigurationError(msg)
        if not 0.0 <= self.min_turn_angle < math.pi:
            msg = "min_turn_angle must be in [0, pi)"
            raise ConfigurationError(msg)
        if self.push_step < 0.0:
            msg = "push_step must be non-negative"
            raise ConfigurationError(msg)
        if self.relaxation_iterations < 0:
            msg = "relaxation_iterations must be non-negative"
            raise ConfigurationError(msg)
        if self.samples_per_segment < 1:
            msg = "samples_per_segment must be at least 1"
            raise ConfigurationError(msg)
        if not 0.0 < self.tangent_epsilon < 0.5:
            msg = "tangent_epsilon must be in (0, 0.5)"
            raise ConfigurationError(msg)
        if not isinstance(self.strict_relaxation, bool):
            msg = "strict_relaxation must be a boolean"
            raise ConfigurationError(msg)


def build_track_config(**overrides: Any) -> TrackConfig:
    """Build a validated track configuration.

    Args:
        **overrides: Field overrides applied on top of the defaults.

    Returns:
        Validated ``TrackConfig``.

    Raises:
        seedtrack.utils.exceptions.ConfigurationError: If an override names
            an unknown field or produces an invalid configuration.
    """
    try:
        config = TrackConfig(**overrides)
    except TypeError as exc:
        msg = f"Unknown track configuration field: {exc}"
        raise ConfigurationError(msg) from exc
    config.validate()
    return config


def validate_canvas(width: float, height: float) -> None:
    """Validate canvas dimensions at the generator boundary.

    Args:
        width: Canvas width [canvas units].
        height: Canvas height [canvas units].

    Raises:
        seedtrack.utils.exceptions.ConfigurationError: If either dimension is
            not a positive finite number.
    """
    for name, value in (("width", width), ("height", height)):
        if not math.isfinite(value) or value <= 0.0:
            msg = f"{name} must be a positive finite number, got: {value!r}"
            raise ConfigurationError(msg)
