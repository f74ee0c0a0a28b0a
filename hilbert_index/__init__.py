"""D-dimensional Hilbert curve: grid point <-> Hilbert index.

A curve of dimension D and level l maps the indices ``0 .. 2**(D*l)`` onto the
grid points of the cube ``[0, 2**l)**D``; adjacent indices give adjacent
points. Based on Chris Hamilton's report "Compact Hilbert Indices".
"""

from __future__ import annotations

from hilbert_index.batch import decode_many, encode_many
from hilbert_index.curve import (
    HilbertCurve,
    from_hilbert_index,
    from_hindex,
    indices,
    to_hilbert_index,
    to_hindex,
)
from hilbert_index.errors import DomainError

__version__ = "0.1.0"

__all__ = [
    "DomainError",
    "HilbertCurve",
    "decode_many",
    "encode_many",
    "from_hilbert_index",
    "from_hindex",
    "indices",
    "to_hilbert_index",
    "to_hindex",
]
