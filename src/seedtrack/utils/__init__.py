"""Utility helpers."""

from seedtrack.utils.constants import SMALL_EPS
from seedtrack.utils.logging import configure_logging

__all__ = ["SMALL_EPS", "configure_logging"]
