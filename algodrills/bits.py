"""Powers of small bases and bit counting."""

from __future__ import annotations

# Largest power of three that fits in a signed 32-bit integer.
_MAX_POWER_OF_THREE = 1162261467


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def is_power_of_three(n: int) -> bool:
    """Tell whether ``n`` is a power of three within the 32-bit range."""
    return n > 0 and _MAX_POWER_OF_THREE % n == 0


def count_bits(n: int) -> list[int]:
    """Number of set bits of every integer from 0 through ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    counts = [0] * (n + 1)
    for i in range(1, n + 1):
        counts[i] = counts[i >> 1] + (i & 1)
    return counts


def is_power_of_four(n: int) -> bool:
    """Tell whether ``n`` is a positive power of four."""
    return is_power_of_two(n) and (n.bit_length() - 1) % 2 == 0