"""Tetromino catalog and shape helpers.

Every piece is stored as a small read-only ``numpy`` matrix.  Non-zero entries
are occupied and double as the colour index written into the grid when the
piece lands.  Shapes are padded into square bounding boxes so a clockwise
rotation is the same matrix transform for every piece; the padding is what lets
a piece hang over an edge where its own shape is empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

import numpy as np
from numpy.typing import NDArray

Shape = NDArray[np.uint8]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes, in catalog order."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"


# Integer written into the grid for each piece.  ``0`` is reserved for empty.
PIECE_VALUES: Dict[TetrominoType, int] = {t: i + 1 for i, t in enumerate(TetrominoType)}


def _frozen(rows: List[List[int]]) -> Shape:
    shape = np.array(rows, dtype=np.uint8)
    shape.setflags(write=False)
    return shape


_BASE_SHAPES: Dict[TetrominoType, List[List[int]]] = {
    TetrominoType.I: [[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]],
    TetrominoType.J: [[2, 0, 0], [2, 2, 2], [0, 0, 0]],
    TetrominoType.L: [[0, 0, 3], [3, 3, 3], [0, 0, 0]],
    TetrominoType.O: [[4, 4], [4, 4]],
    TetrominoType.S: [[0, 5, 5], [5, 5, 0], [0, 0, 0]],
    TetrominoType.T: [[0, 6, 0], [6, 6, 6], [0, 0, 0]],
    TetrominoType.Z: [[7, 7, 0], [0, 7, 7], [0, 0, 0]],
}

TETROMINOS: Tuple[Shape, ...] = tuple(_frozen(_BASE_SHAPES[t]) for t in TetrominoType)


@dataclass(frozen=True)
class Extent:
    """Bounds of the occupied cells inside a shape matrix (inclusive)."""

    first_row: int
    last_row: int
    first_col: int
    last_col: int


def shape_for(kind: TetrominoType) -> Shape:
    """Return the spawn orientation of ``kind``."""

    return TETROMINOS[PIECE_VALUES[kind] - 1]


def tetromino_type(shape: Shape) -> TetrominoType:
    """Return the catalog type of ``shape`` from its colour value."""

    value = int(shape.max())
    return list(TetrominoType)[value - 1]


def rotate_cw(shape: Shape) -> Shape:
    """Return ``shape`` rotated 90 degrees clockwise.

    The matrix is transposed and each row reversed.  Four rotations give back
    the original matrix.
    """

    return _frozen(shape.T[:, ::-1].tolist())


def extent(shape: Shape) -> Extent:
    """Return the occupied extent of ``shape``.

    Raises:
        ValueError: If the shape has no occupied cells.
    """

    rows = np.flatnonzero(shape.any(axis=1))
    cols = np.flatnonzero(shape.any(axis=0))
    if rows.size == 0:
        raise ValueError("Shape has no occupied cells")
    return Extent(int(rows[0]), int(rows[-1]), int(cols[0]), int(cols[-1]))


def occupied_cells(shape: Shape) -> List[Tuple[int, int]]:
    """Return the ``(i, j)`` offsets of the non-empty cells of ``shape``."""

    return [(int(i), int(j)) for i, j in np.argwhere(shape != 0)]


__all__ = [
    "Shape",
    "TetrominoType",
    "PIECE_VALUES",
    "TETROMINOS",
    "Extent",
    "shape_for",
    "tetromino_type",
    "rotate_cw",
    "extent",
    "occupied_cells",
]
