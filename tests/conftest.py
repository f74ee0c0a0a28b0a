"""Shared test fixtures."""

from __future__ import annotations

import pytest

from hilbert_index import HilbertCurve

# D=3, level=1: the basic cell in curve order
CELL_3D = [
    (0, 0, 0),
    (0, 1, 0),
    (0, 1, 1),
    (0, 0, 1),
    (1, 0, 1),
    (1, 1, 1),
    (1, 1, 0),
    (1, 0, 0),
]

# D=2, level=2: the 4x4 grid in curve order
GRID_2D_LEVEL2 = [
    (0, 0), (1, 0), (1, 1), (0, 1),
    (0, 2), (0, 3), (1, 3), (1, 2),
    (2, 2), (2, 3), (3, 3), (3, 2),
    (3, 1), (2, 1), (2, 0), (3, 0),
]

# (dimension, max level) pairs walked exhaustively by the curve tests
EXHAUSTIVE_LEVELS = [(1, 10), (2, 7), (3, 6), (4, 5), (5, 4), (6, 3)]


@pytest.fixture
def curve2() -> HilbertCurve:
    return HilbertCurve(2, strict=False)


@pytest.fixture
def curve3() -> HilbertCurve:
    return HilbertCurve(3, strict=False)


@pytest.fixture
def strict3() -> HilbertCurve:
    return HilbertCurve(3, strict=True)
