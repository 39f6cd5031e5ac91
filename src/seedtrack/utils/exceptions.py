"""Custom exceptions for procedural track generation."""


class SeedTrackError(Exception):
    """Base exception for track generation errors."""


class ConfigurationError(SeedTrackError):
    """Raised when generator configuration or canvas dimensions are invalid."""


class TrackDataError(SeedTrackError):
    """Raised when track data is inconsistent or fails a post-condition."""
