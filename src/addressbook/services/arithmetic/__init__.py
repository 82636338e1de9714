"""Integer arithmetic helpers."""

from .gcd import gcd, gcd_array

__all__ = [
    "gcd",
    "gcd_array",
]
