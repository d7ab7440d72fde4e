"""Arithmetic in the BabyBear prime field, with elements held as plain integers."""

from __future__ import annotations

ORDER: int = 15 * (1 << 27) + 1
"""The field modulus, 2**31 - 2**27 + 1."""

_U32_LIMIT = 1 << 32


def _element(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value % ORDER


def from_wrapped_u32(value: int) -> int:
    """Reduce an unsigned 32-bit integer into the field."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    if not 0 <= value < _U32_LIMIT:
        raise ValueError(f"{value} does not fit in 32 unsigned bits")
    return value % ORDER


def add(a: int, b: int) -> int:
    """Sum of two field elements."""
    return (_element(a) + _element(b)) % ORDER


def mul(a: int, b: int) -> int:
    """Product of two field elements."""
    return (_element(a) * _element(b)) % ORDER


def power(base: int, exponent: int) -> int:
    """``base`` raised to ``exponent``; a negative exponent inverts a non-zero base."""
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise TypeError(f"expected an integer exponent, got {exponent!r}")
    reduced = _element(base)
    if exponent < 0 and reduced == 0:
        raise ZeroDivisionError("zero has no inverse in the field")
    return pow(reduced, exponent, ORDER)