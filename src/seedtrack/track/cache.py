"""Caller-owned cache of generated tracks."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict

from seedtrack.track.config import TrackConfig
from seedtrack.track.generator import generate_track_for_canvas
from seedtrack.track.models import Track
from seedtrack.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 64

CacheKey = tuple[str, float, float]


class TrackCache:
    """Least-recently-used cache of tracks keyed by seed and canvas size.

    Tracks are centered on their canvas. One cache instance serves one
    generator configuration.

    Args:
        max_entries: Capacity before the least recently used track is
            evicted.
        config: Generator configuration used for every miss.
    """

    def __init__(
        self,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        config: TrackConfig | None = None,
    ) -> None:
        """Create an empty cache.

        Args:
            max_entries: Cache capacity.
            config: Generator configuration used for every miss.

        Raises:
            seedtrack.utils.exceptions.ConfigurationError: If
                ``max_entries`` is not positive.
        """
        if max_entries < 1:
            msg = "max_entries must be at least 1"
            raise ConfigurationError(msg)
        self._max_entries = max_entries
        self._config = config
        self._entries: OrderedDict[CacheKey, Track] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int:
        """Cache capacity.

        Returns:
            Maximum number of retained tracks.
        """
        return self._max_entries

    def get(self, seed: str, width: float, height: float) -> Track:
        """Return the cached track for a key, generating it on a miss.

        Args:
            seed: Seed string.
            width: Canvas width.
            height: Canvas height.

        Returns:
            Track for ``(seed, width, height)``.
        """
        key = (seed, float(width), float(height))
        with self._lock:
            track = self._entries.get(key)
            if track is not None:
                self._entries.move_to_end(key)
                return track

        track = generate_track_for_canvas(seed, width, height, self._config)

        with self._lock:
            self._entries[key] = track
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted track %r from cache", evicted)
        return track

    def clear(self) -> None:
        """Drop every cached track."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        """Check whether a ``(seed, width, height)`` key is cached.

        Args:
            key: Candidate cache key.

        Returns:
            ``True`` if the key is cached.
        """
        if not isinstance(key, tuple) or len(key) != 3:
            return False
        seed, width, height = key
        try:
            normalized = (seed, float(width), float(height))
        except (TypeError, ValueError):
            return False
        with self._lock:
            return normalized in self._entries

    def __len__(self) -> int:
        """Number of cached tracks.

        Returns:
            Current entry count.
        """
        with self._lock:
            return len(self._entries)
