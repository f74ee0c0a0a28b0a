"""Per-bit-plane digit transform and the (entry, direction) state update.

``t`` maps a bit-plane code into the local frame of the current sub-cube,
``t_inv`` maps it back. Encode and decode share :func:`next_state` so both
directions evolve the state identically.
"""

from __future__ import annotations

from hilbert_index.bits import direction_map, entry_map, rotate_left, rotate_right


def t(b: int, e: int, d: int, dimension: int) -> int:
    return rotate_right(b ^ e, d + 1, dimension)


def t_inv(b: int, e: int, d: int, dimension: int) -> int:
    return rotate_left(b, d + 1, dimension) ^ e


def next_state(w: int, e: int, d: int, dimension: int) -> tuple[int, int]:
    """Entry point and direction for the next (finer) plane after digit ``w``."""
    e ^= rotate_left(entry_map(w), d + 1, dimension)
    d = (d + direction_map(w, dimension) + 1) % dimension
    return e, d
