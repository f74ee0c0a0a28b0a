"""Vectorised encode / decode over numpy arrays.

Same per-plane algorithm as :class:`~hilbert_index.curve.HilbertCurve`, run on
N lanes at once. Each lane carries its own (entry, direction) state. Lanes are
``uint64``, so a curve whose index needs more than 64 bits is rejected.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hilbert_index.config import settings
from hilbert_index.errors import DomainError

logger = logging.getLogger(__name__)

MAX_INDEX_BITS = 64

_ZERO = np.uint64(0)
_ONE = np.uint64(1)


def _u(x: int) -> np.uint64:
    return np.uint64(x)


def _mask(dimension: int) -> np.uint64:
    return _u((1 << dimension) - 1)


def _gray_code(x: NDArray[np.uint64]) -> NDArray[np.uint64]:
    return x ^ (x >> _ONE)


def _gray_code_inverse(g: NDArray[np.uint64], dimension: int) -> NDArray[np.uint64]:
    x = g.copy()
    for j in range(1, dimension):
        x ^= g >> _u(j)
    return x


def _trailing_ones(x: NDArray[np.uint64], dimension: int) -> NDArray[np.uint64]:
    # Capped at D; callers reduce mod D anyway
    count = np.zeros_like(x)
    run = np.ones_like(x)
    for k in range(dimension):
        run &= (x >> _u(k)) & _ONE
        count += run
    return count


def _direction_map(w: NDArray[np.uint64], dimension: int) -> NDArray[np.uint64]:
    src = np.where(w & _ONE, w, w - _ONE)
    d = _trailing_ones(src, dimension) % _u(dimension)
    return np.where(w == _ZERO, _ZERO, d).astype(np.uint64)


def _entry_map(w: NDArray[np.uint64]) -> NDArray[np.uint64]:
    e = _gray_code(((w - _ONE) >> _ONE) << _ONE)
    return np.where(w == _ZERO, _ZERO, e).astype(np.uint64)


def _rotate_right(b: NDArray[np.uint64], r: NDArray[np.uint64], dimension: int) -> NDArray[np.uint64]:
    r = r % _u(dimension)
    return ((b >> r) | (b << (_u(dimension) - r))) & _mask(dimension)


def _rotate_left(b: NDArray[np.uint64], r: NDArray[np.uint64], dimension: int) -> NDArray[np.uint64]:
    r = r % _u(dimension)
    return ((b << r) | (b >> (_u(dimension) - r))) & _mask(dimension)


def _next_state(
    w: NDArray[np.uint64],
    e: NDArray[np.uint64],
    d: NDArray[np.uint64],
    dimension: int,
) -> tuple[NDArray[np.uint64], NDArray[np.uint64]]:
    e = e ^ _rotate_left(_entry_map(w), d + _ONE, dimension)
    d = (d + _direction_map(w, dimension) + _ONE) % _u(dimension)
    return e, d


def _check_shape(dimension: int, level: int) -> None:
    if dimension < 1:
        raise DomainError(f"dimension must be positive, got {dimension}")
    if level < 0:
        raise DomainError(f"level must be non-negative, got {level}")
    if dimension * level > MAX_INDEX_BITS:
        raise DomainError(
            f"dimension {dimension} x level {level} needs {dimension * level} index bits, "
            f"batch transforms support at most {MAX_INDEX_BITS}"
        )


def _encode_chunk(p: NDArray[np.uint64], level: int, dimension: int) -> NDArray[np.uint64]:
    n = p.shape[0]
    h = np.zeros(n, dtype=np.uint64)
    e = np.zeros(n, dtype=np.uint64)
    d = np.zeros(n, dtype=np.uint64)
    for i in reversed(range(level)):
        plane = np.zeros(n, dtype=np.uint64)
        for k in range(dimension):
            plane |= ((p[:, k] >> _u(i)) & _ONE) << _u(k)
        code = _rotate_right(plane ^ e, d + _ONE, dimension)
        w = _gray_code_inverse(code, dimension)
        e, d = _next_state(w, e, d, dimension)
        h = (h << _u(dimension)) | w
    return h


def _decode_chunk(idx: NDArray[np.uint64], level: int, dimension: int) -> NDArray[np.uint64]:
    n = idx.shape[0]
    p = np.zeros((n, dimension), dtype=np.uint64)
    e = np.zeros(n, dtype=np.uint64)
    d = np.zeros(n, dtype=np.uint64)
    for i in reversed(range(level)):
        w = (idx >> _u(i * dimension)) & _mask(dimension)
        code = _rotate_left(_gray_code(w), d + _ONE, dimension) ^ e
        for j in range(dimension):
            p[:, j] = (p[:, j] << _ONE) | ((code >> _u(j)) & _ONE)
        e, d = _next_state(w, e, d, dimension)
    return p


def encode_many(
    points: ArrayLike,
    level: int,
    dimension: int | None = None,
    strict: bool | None = None,
) -> NDArray[np.uint64]:
    """Encode an (N, D) array of grid points into N Hilbert indices."""
    arr = np.asarray(points)
    if arr.ndim != 2:
        raise DomainError(f"points must be a 2-D (N, D) array, got shape {arr.shape}")
    dim = arr.shape[1] if dimension is None else dimension
    if arr.shape[1] != dim:
        raise DomainError(f"points have {arr.shape[1]} coordinates, expected {dim}")
    _check_shape(dim, level)

    if settings.strict if strict is None else strict:
        if arr.size and (int(arr.min()) < 0 or int(arr.max()) >= (1 << level)):
            raise DomainError(f"coordinates out of range [0, {1 << level}) for level {level}")

    p = arr.astype(np.uint64)
    chunk = max(settings.batch_chunk, 1)
    logger.debug("encode_many: %d points, D=%d, level=%d", p.shape[0], dim, level)

    out = np.empty(p.shape[0], dtype=np.uint64)
    for start in range(0, p.shape[0], chunk):
        stop = start + chunk
        out[start:stop] = _encode_chunk(p[start:stop], level, dim)
    return out


def decode_many(
    indices: ArrayLike,
    level: int,
    dimension: int,
    strict: bool | None = None,
) -> NDArray[np.uint64]:
    """Decode N Hilbert indices into an (N, D) array of grid points."""
    _check_shape(dimension, level)
    arr = np.asarray(indices)
    if arr.ndim != 1:
        raise DomainError(f"indices must be a 1-D array, got shape {arr.shape}")

    if settings.strict if strict is None else strict:
        size = 1 << (dimension * level)
        if arr.size and (int(arr.min()) < 0 or int(arr.max()) >= size):
            raise DomainError(
                f"indices out of range [0, {size}) for dimension {dimension}, level {level}"
            )

    idx = arr.astype(np.uint64)
    chunk = max(settings.batch_chunk, 1)
    logger.debug("decode_many: %d indices, D=%d, level=%d", idx.shape[0], dimension, level)

    out = np.empty((idx.shape[0], dimension), dtype=np.uint64)
    for start in range(0, idx.shape[0], chunk):
        stop = start + chunk
        out[start:stop] = _decode_chunk(idx[start:stop], level, dimension)
    return out
