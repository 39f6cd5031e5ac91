"""Seeded procedural track generation pipeline.

Random points -> convex hull -> displaced midpoints -> separation
relaxation -> closed Catmull-Rom spline -> arc-length index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from seedtrack.rng import Mulberry32, hash_seed
from seedtrack.track.config import MIN_HULL_POINT_COUNT, TrackConfig, validate_canvas
from seedtrack.track.geometry import build_track
from seedtrack.track.hull import control_hull
from seedtrack.track.models import Point, Track
from seedtrack.track.sampling import sample_control_points
from seedtrack.track.shaping import (
    RelaxationViolation,
    add_displaced_midpoints,
    find_relaxation_violations,
    push_apart,
)
from seedtrack.track.spline import catmull_rom_closed
from seedtrack.utils.exceptions import TrackDataError

logger = logging.getLogger(__name__)

DEFAULT_TRACK_CONFIG = TrackConfig()


@dataclass(frozen=True)
class ControlPolygonStages:
    """Intermediate control polygons of one generation run.

    Args:
        raw: Sampled control points in angular order.
        hull: Hull polygon, or the first three raw points when the hull
            degenerates.
        displaced: Hull with displaced midpoints inserted.
        relaxed: Polygon after separation relaxation; spline input.
        violations: Constraints still unsatisfied after relaxation.
    """

    raw: tuple[Point, ...]
    hull: tuple[Point, ...]
    displaced: tuple[Point, ...]
    relaxed: tuple[Point, ...]
    violations: tuple[RelaxationViolation, ...]


def build_control_polygon(
    seed: str,
    center_x: float,
    center_y: float,
    width: float,
    height: float,
    config: TrackConfig | None = None,
) -> ControlPolygonStages:
    """Run the control-polygon stages of the pipeline for one seed.

    Args:
        seed: Arbitrary seed string.
        center_x: Track center x-coordinate.
        center_y: Track center y-coordinate.
        width: Canvas width.
        height: Canvas height.
        config: Optional generator configuration; defaults are used when
            omitted.

    Returns:
        All intermediate polygons, ending with the relaxed spline input.

    Raises:
        seedtrack.utils.exceptions.ConfigurationError: If the configuration
            or canvas dimensions are invalid.
    """
    cfg = DEFAULT_TRACK_CONFIG if config is None else config
    cfg.validate()
    validate_canvas(width, height)

    seed_value = hash_seed(seed)
    rng = Mulberry32(seed_value)
    shortest_side = min(width, height)

    raw = sample_control_points(rng, center_x, center_y, width, height, cfg)
    hull = control_hull(raw, MIN_HULL_POINT_COUNT)

    displaced = add_displaced_midpoints(hull, rng, shortest_side * cfg.displacement_ratio)
    min_distance = shortest_side * cfg.min_distance_ratio
    relaxed = push_apart(
        displaced,
        min_distance=min_distance,
        min_angle=cfg.min_turn_angle,
        iterations=cfg.relaxation_iterations,
        push_step=cfg.push_step,
    )
    violations = find_relaxation_violations(relaxed, min_distance, cfg.min_turn_angle)

    logger.debug(
        "Seed %r (hash %d): %d raw, %d hull, %d control points",
        seed,
        seed_value,
        len(raw),
        len(hull),
        len(relaxed),
    )
    return ControlPolygonStages(
        raw=tuple(raw),
        hull=tuple(hull),
        displaced=tuple(displaced),
        relaxed=tuple(relaxed),
        violations=tuple(violations),
    )


def _report_violations(
    seed: str,
    violations: tuple[RelaxationViolation, ...],
    strict: bool,
) -> None:
    """Log or raise for constraints left unsatisfied by relaxation.

    Args:
        seed: Seed string used in the message.
        violations: Remaining violations.
        strict: Raise instead of logging.

    Raises:
        seedtrack.utils.exceptions.TrackDataError: If ``strict`` is set and
            any violation remains.
    """
    if not violations:
        return
    summary = ", ".join(f"{v.kind}@{v.index}={v.value:.4g}" for v in violations)
    if strict:
        msg = f"Relaxed control polygon for seed {seed!r} violates constraints: {summary}"
        raise TrackDataError(msg)
    logger.warning(
        "Relaxed control polygon for seed %r still violates %d constraint(s): %s",
        seed,
        len(violations),
        summary,
    )


def generate_track(
    seed: str,
    center_x: float,
    center_y: float,
    width: float,
    height: float,
    config: TrackConfig | None = None,
) -> Track:
    """Generate the deterministic closed track for a seed and canvas.

    Identical arguments always produce bit-identical tracks. The shape
    scales with the canvas, so the same seed at another size yields a
    similar but not identical layout.

    Args:
        seed: Arbitrary seed string, for example ``"owner/repo"``. Empty
            strings are valid.
        center_x: Track center x-coordinate.
        center_y: Track center y-coordinate.
        width: Canvas width; must be positive and finite.
        height: Canvas height; must be positive and finite.
        config: Optional generator configuration; defaults are used when
            omitted.

    Returns:
        Immutable, arc-length indexed ``Track``.

    Raises:
        seedtrack.utils.exceptions.ConfigurationError: If the configuration
            or canvas dimensions are invalid.
        seedtrack.utils.exceptions.TrackDataError: If
            ``config.strict_relaxation`` is set and relaxation leaves a
            violated constraint.
    """
    cfg = DEFAULT_TRACK_CONFIG if config is None else config
    stages = build_control_polygon(seed, center_x, center_y, width, height, cfg)
    _report_violations(seed, stages.violations, cfg.strict_relaxation)

    x, y = catmull_rom_closed(stages.relaxed, cfg.samples_per_segment)
    track = build_track(x, y, tangent_epsilon=cfg.tangent_epsilon)
    logger.debug(
        "Seed %r: %d spline samples, lap length %.3f",
        seed,
        track.size,
        track.total_length,
    )
    return track


def generate_track_for_canvas(
    seed: str,
    width: float,
    height: float,
    config: TrackConfig | None = None,
) -> Track:
    """Generate a track centered on a ``width`` x ``height`` canvas.

    Args:
        seed: Arbitrary seed string.
        width: Canvas width.
        height: Canvas height.
        config: Optional generator configuration.

    Returns:
        Track centered at ``(width / 2, height / 2)``.
    """
    return generate_track(seed, width / 2.0, height / 2.0, width, height, config)
