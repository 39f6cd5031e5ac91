"""Deterministic procedural race-track geometry."""

from seedtrack.rng import Mulberry32, hash_seed
from seedtrack.track import Point, Track, TrackCache, TrackConfig, generate_track

__all__ = [
    "Mulberry32",
    "Point",
    "Track",
    "TrackCache",
    "TrackConfig",
    "generate_track",
    "hash_seed",
]
