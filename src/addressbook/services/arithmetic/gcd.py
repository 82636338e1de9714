"""Greatest common divisor helpers."""

from __future__ import annotations

import functools
from typing import Optional, Sequence


def _truncated_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, unlike Python's floored ``%``."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the GCD of two integers using the Euclidean algorithm.

    The larger operand is moved first before iterating. The result is not
    normalised to an absolute value, so negative inputs can yield a negative
    divisor, e.g. ``gcd(-4, -6) == -2``.
    """
    if a < b:
        a, b = b, a

    while b != 0:
        a, b = b, _truncated_mod(a, b)

    return a


def gcd_array(values: Sequence[int]) -> Optional[int]:
    """Return the GCD of all values, or ``None`` when the sequence is empty."""
    if not values:
        return None
    return functools.reduce(gcd, values, values[0])
