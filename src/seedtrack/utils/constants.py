"""Numeric constants shared across the library."""

UINT32_MASK: int = 0xFFFFFFFF
UINT32_RANGE: float = 4294967296.0
SMALL_EPS: float = 1e-9
