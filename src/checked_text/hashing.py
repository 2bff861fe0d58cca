"""Hash codes over raw text bytes, for use as keys in associative containers."""

from __future__ import annotations

from .view import TextView

HASH_SEED = 5381
HASH_MULTIPLIER = 33
HASH_MASK = 0x7FFFFFFF


def hash_code(text: object) -> int:
    """Return a non-negative 31-bit hash of ``text``'s bytes.

    The same bytes always hash the same, whichever text-like form they arrive
    in (``Text``, ``str``, ``bytes``).
    """

    value = HASH_SEED
    for code in TextView.of(text).tobytes():
        value = (value * HASH_MULTIPLIER + code) & 0xFFFFFFFF
    return value & HASH_MASK


__all__ = ["hash_code", "HASH_SEED", "HASH_MULTIPLIER", "HASH_MASK"]
