"""HilbertCurve: grid point <-> Hilbert index for a fixed dimension.

Follows Hamilton's "Compact Hilbert Indices" construction: the index is built
one D-bit digit per bit-plane, most significant plane first, with an
(entry point, direction) pair carried from each plane to the next.

Usage:
    curve = HilbertCurve(3)
    for h in curve.indices(2):
        p = curve.decode(h, 2)
        assert curve.encode(p, 2) == h
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from hilbert_index.bits import digit, gray_code, gray_code_inverse, reduce
from hilbert_index.config import settings
from hilbert_index.digits import next_state, t, t_inv
from hilbert_index.errors import DomainError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HilbertCurve:
    """D-dimensional Hilbert curve. Instances are immutable and thread-safe."""

    dimension: int
    # Validate points and indices against the level before transforming
    strict: bool = field(default_factory=lambda: settings.strict)

    def __post_init__(self) -> None:
        if self.dimension < 1:
            raise DomainError(f"dimension must be positive, got {self.dimension}")

    # --- Geometry ---

    def side(self, level: int) -> int:
        """Grid side length 2^level."""
        _check_level(level)
        return 1 << level

    def size(self, level: int) -> int:
        """Number of grid points (and indices) 2^(D*level)."""
        _check_level(level)
        return 1 << (self.dimension * level)

    def indices(self, level: int) -> range:
        """All Hilbert indices at ``level``: ``range(0, 2**(D*level))``."""
        return range(self.size(level))

    def points(self, level: int) -> Iterator[tuple[int, ...]]:
        """Grid points in curve order."""
        for h in self.indices(level):
            yield self.decode(h, level)

    def offset(self, level: int) -> int:
        """``level`` copies of the pattern ``0...01`` (D bits each), concatenated.

        Reserved for curves with unequal side lengths; encode and decode
        do not use it.
        """
        _check_level(level)
        ofs = 0
        for _ in range(level):
            ofs = (ofs << self.dimension) | 1
        return ofs

    # --- Transforms ---

    def encode(self, point: Sequence[int], level: int) -> int:
        """Grid point -> Hilbert index. Coordinates may be any integer type (numpy included)."""
        point = [operator.index(x) for x in point]
        _check_level(level)
        if self.strict:
            self._check_point(point, level)

        dim = self.dimension
        h, e, d = 0, 0, 0
        for i in reversed(range(level)):
            code = t(reduce(point, i), e, d, dim)
            w = gray_code_inverse(code, dim)
            e, d = next_state(w, e, d, dim)
            h = (h << dim) | w
        return h

    def decode(self, index: int, level: int) -> tuple[int, ...]:
        """Hilbert index -> grid point."""
        index = operator.index(index)
        _check_level(level)
        if self.strict:
            self._check_index(index, level)

        dim = self.dimension
        e, d = 0, 0
        p = [0] * dim
        for i in reversed(range(level)):
            w = digit(index, i, dim)
            code = t_inv(gray_code(w), e, d, dim)
            for j in range(dim):
                p[j] = (p[j] << 1) | ((code >> j) & 1)
            e, d = next_state(w, e, d, dim)
        return tuple(p)

    # Long and short names for the two transforms
    to_hilbert_index = encode
    to_hindex = encode
    from_hilbert_index = decode
    from_hindex = decode

    # --- Validation ---

    def _check_point(self, point: Sequence[int], level: int) -> None:
        if len(point) != self.dimension:
            logger.debug("Rejected point %r for D=%d", point, self.dimension)
            raise DomainError(
                f"point has {len(point)} coordinates, curve has dimension {self.dimension}"
            )
        side = 1 << level
        for k, x in enumerate(point):
            if not 0 <= x < side:
                logger.debug("Rejected point %r at level %d", point, level)
                raise DomainError(
                    f"coordinate {k} = {x} out of range [0, {side}) for level {level}"
                )

    def _check_index(self, index: int, level: int) -> None:
        size = 1 << (self.dimension * level)
        if not 0 <= index < size:
            logger.debug("Rejected index %d at level %d", index, level)
            raise DomainError(
                f"index {index} out of range [0, {size}) for dimension {self.dimension}, level {level}"
            )


def _check_level(level: int) -> None:
    if level < 0:
        raise DomainError(f"level must be non-negative, got {level}")


# --- Functional API ---


def to_hilbert_index(point: Sequence[int], level: int) -> int:
    """Grid point -> Hilbert index, with D taken from ``len(point)``."""
    return HilbertCurve(len(point)).encode(point, level)


def from_hilbert_index(index: int, level: int, dimension: int) -> tuple[int, ...]:
    """Hilbert index -> D-dimensional grid point."""
    return HilbertCurve(dimension).decode(index, level)


def indices(dimension: int, level: int) -> range:
    """All Hilbert indices of a D-dimensional curve at ``level``."""
    return HilbertCurve(dimension).indices(level)


to_hindex = to_hilbert_index
from_hindex = from_hilbert_index
