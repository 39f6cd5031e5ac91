"""Seeded track generation, geometry processing, and lap-fraction queries."""

from seedtrack.track.analysis import (
    LapSamples,
    TurnMarker,
    corner_fractions,
    sample_fractions,
    turn_markers,
)
from seedtrack.track.cache import TrackCache
from seedtrack.track.config import TrackConfig, build_track_config
from seedtrack.track.generator import (
    ControlPolygonStages,
    build_control_polygon,
    generate_track,
    generate_track_for_canvas,
)
from seedtrack.track.geometry import build_track
from seedtrack.track.models import Point, Track, wrap_fraction

__all__ = [
    "ControlPolygonStages",
    "LapSamples",
    "Point",
    "Track",
    "TrackCache",
    "TrackConfig",
    "TurnMarker",
    "build_control_polygon",
    "build_track",
    "build_track_config",
    "corner_fractions",
    "generate_track",
    "generate_track_for_canvas",
    "sample_fractions",
    "turn_markers",
    "wrap_fraction",
]
