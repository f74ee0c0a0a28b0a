"""Bit primitives for the D-dimensional Hilbert curve. No curve imports.

Every "local" quantity (Gray code, entry point, rotation) lives in a D-bit
field, so the functions taking ``dimension`` mask their result to the low D
bits. All functions are pure and constant-time in the integer width.
"""

from __future__ import annotations

from collections.abc import Sequence


def mask(dimension: int) -> int:
    """2^D - 1: the number of sub-cubes of a basic cell, minus one."""
    return (1 << dimension) - 1


def gray_code(i: int) -> int:
    """Binary-reflected Gray code."""
    return i ^ (i >> 1)


def gray_code_inverse(g: int, dimension: int) -> int:
    """Invert :func:`gray_code` for a D-bit value.

    Folds ``g >> j`` for ``j`` in ``1..D-1`` into ``g``. Only valid for
    ``g < 2**D``; wider inputs are not fully decoded.
    """
    i = g
    for j in range(1, dimension):
        i ^= g >> j
    return i


def trailing_ones(i: int) -> int:
    """Number of trailing set bits of ``i``."""
    return ((i ^ (i + 1)) >> 1).bit_length()


def direction_map(i: int, dimension: int) -> int:
    """Axis toggled when moving from sub-cube ``i - 1`` to sub-cube ``i``."""
    if i == 0:
        return 0
    if i & 1 == 0:
        return trailing_ones(i - 1) % dimension
    return trailing_ones(i) % dimension


def entry_map(i: int) -> int:
    """Gray-coded entry vertex of sub-cube ``i`` in a basic cell."""
    if i == 0:
        return 0
    return gray_code(2 * ((i - 1) // 2))


def rotate_right(b: int, i: int, dimension: int) -> int:
    """Circular right rotation of ``b`` by ``i mod D`` inside a D-bit field."""
    i %= dimension
    return ((b >> i) | (b << (dimension - i))) & mask(dimension)


def rotate_left(b: int, i: int, dimension: int) -> int:
    """Circular left rotation of ``b`` by ``i mod D`` inside a D-bit field."""
    i %= dimension
    return ((b << i) | (b >> (dimension - i))) & mask(dimension)


def reduce(point: Sequence[int], i: int) -> int:
    """Pack bit ``i`` of every coordinate into one word (coordinate k -> bit k)."""
    word = 0
    for k, x in enumerate(point):
        word |= ((x >> i) & 1) << k
    return word


def digit(index: int, i: int, dimension: int) -> int:
    """The D-bit digit of ``index`` occupying bits ``[i*D, i*D + D)``."""
    return (index >> (i * dimension)) & mask(dimension)
