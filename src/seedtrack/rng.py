"""Deterministic seed hashing and pseudo-random number generation.

The generator reproduces 32-bit integer wraparound exactly so that a seed
string maps to the same float stream in every runtime that renders a track.
"""

from __future__ import annotations

from seedtrack.utils.constants import UINT32_MASK, UINT32_RANGE

HASH_MULTIPLIER = 31
MULBERRY32_INCREMENT = 0x6D2B79F5
INT32_SIGN_BIT = 0x80000000


def _imul(a: int, b: int) -> int:
    """Multiply two 32-bit values keeping the low 32 bits.

    Args:
        a: First operand (any integer, reduced modulo ``2**32``).
        b: Second operand (any integer, reduced modulo ``2**32``).

    Returns:
        Unsigned low 32 bits of the product.
    """
    return ((a & UINT32_MASK) * (b & UINT32_MASK)) & UINT32_MASK


def _to_int32(value: int) -> int:
    """Reinterpret an unsigned 32-bit value as a signed 32-bit integer.

    Args:
        value: Integer whose low 32 bits are reinterpreted.

    Returns:
        Signed integer in ``[-2**31, 2**31)``.
    """
    value &= UINT32_MASK
    return value - (1 << 32) if value & INT32_SIGN_BIT else value


def hash_seed(seed: str) -> int:
    """Hash a seed string into a signed 32-bit integer.

    The string is walked in UTF-16 code units (characters outside the BMP
    contribute both surrogates) and folded with ``h = h * 31 + unit``.

    Args:
        seed: Arbitrary seed string, for example ``"owner/repo"``.

    Returns:
        Signed 32-bit hash. The empty string hashes to ``0``.
    """
    encoded = seed.encode("utf-16-le", "surrogatepass")
    value = 0
    for index in range(0, len(encoded), 2):
        unit = encoded[index] | (encoded[index + 1] << 8)
        value = (_imul(HASH_MULTIPLIER, value) + unit) & UINT32_MASK
    return _to_int32(value)


class Mulberry32:
    """Mulberry32 generator producing floats in ``[0, 1)``.

    Args:
        seed: Integer seed. Only its low 32 bits are used, so signed and
            unsigned representations of the same bits are equivalent.
    """

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        """Initialize generator state.

        Args:
            seed: Integer seed.
        """
        self._state = seed & UINT32_MASK

    @classmethod
    def from_seed(cls, seed: str) -> Mulberry32:
        """Create a generator from a seed string.

        Args:
            seed: Arbitrary seed string hashed with :func:`hash_seed`.

        Returns:
            Generator initialized with the hashed seed.
        """
        return cls(hash_seed(seed))

    @property
    def state(self) -> int:
        """Current unsigned 32-bit state.

        Returns:
            Internal state value.
        """
        return self._state

    def next_uint32(self) -> int:
        """Advance the generator and return the raw 32-bit output.

        Returns:
            Unsigned 32-bit output value.
        """
        self._state = (self._state + MULBERRY32_INCREMENT) & UINT32_MASK
        state = self._state
        t = _imul(state ^ (state >> 15), 1 | state)
        t = ((t + _imul(t ^ (t >> 7), 61 | t)) & UINT32_MASK) ^ t
        return (t ^ (t >> 14)) & UINT32_MASK

    def next_float(self) -> float:
        """Advance the generator and return a float in ``[0, 1)``.

        Returns:
            Uniform sample with 32 bits of resolution.
        """
        return self.next_uint32() / UINT32_RANGE

    def __call__(self) -> float:
        """Alias of :meth:`next_float`.

        Returns:
            Uniform sample in ``[0, 1)``.
        """
        return self.next_float()
