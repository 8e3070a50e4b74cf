"""Hyperlane connection tables.

A hyperlane tile carries a 6x6 table where ``matrix[i][j]`` links side ``i`` to
side ``j`` and ``matrix[d][d]`` marks side ``d`` as a loop (every loop side of
the tile connects to every other loop side). The map editor exchanges tables as
nine hex digits: the 36 cells row-major, most significant bit first.
"""
from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np

MATRIX_SIZE = 6
HEX_DIGITS = 9


class MalformedMatrixError(ValueError):
    """Raised when a connection table is not a 6x6 table of booleans."""


def normalize_matrix(raw: Any, *, label: str = "?") -> np.ndarray:
    """Convert ``raw`` into a fresh 6x6 boolean array.

    Accepts nested sequences of ``bool`` or ``0``/``1`` integers, an existing
    array of that shape, or the editor's compact hex string. ``label`` is only
    used to name the tile in error messages.
    """
    if isinstance(raw, str):
        return matrix_from_hex(raw, label=label)
    if isinstance(raw, np.ndarray):
        rows: Sequence[Any] = raw.tolist()
    elif isinstance(raw, (list, tuple)):
        rows = raw
    else:
        raise MalformedMatrixError(f"Tile {label}: connection table must be a 6x6 table, got {type(raw).__name__}")

    if len(rows) != MATRIX_SIZE:
        raise MalformedMatrixError(f"Tile {label}: connection table has {len(rows)} rows, expected 6")
    out = np.zeros((MATRIX_SIZE, MATRIX_SIZE), dtype=bool)
    for i, row in enumerate(rows):
        if not isinstance(row, (list, tuple)) or len(row) != MATRIX_SIZE:
            raise MalformedMatrixError(f"Tile {label}: row {i} of connection table is not 6 wide")
        for j, cell in enumerate(row):
            out[i, j] = _cell(cell, label, i, j)
    return out


def _cell(value: Any, label: str, i: int, j: int) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, np.integer)) and value in (0, 1):
        return bool(value)
    raise MalformedMatrixError(f"Tile {label}: connection table cell [{i}][{j}] is {value!r}, expected a boolean")


def matrix_from_hex(text: str, *, label: str = "?") -> np.ndarray:
    """Decode the editor's hex string (1-9 hex digits) into a 6x6 table."""
    cleaned = text.strip()
    if not cleaned or len(cleaned) > HEX_DIGITS:
        raise MalformedMatrixError(f"Tile {label}: connection string {text!r} must be 1-9 hex digits")
    try:
        value = int(cleaned, 16)
    except ValueError:
        raise MalformedMatrixError(f"Tile {label}: connection string {text!r} is not hexadecimal") from None
    if value >> (MATRIX_SIZE * MATRIX_SIZE):
        raise MalformedMatrixError(f"Tile {label}: connection string {text!r} encodes more than 36 links")
    bits = format(value, "036b")
    return np.array([c == "1" for c in bits], dtype=bool).reshape(MATRIX_SIZE, MATRIX_SIZE)


def matrix_to_hex(matrix: Any) -> str:
    """Encode a connection table as nine lower-case hex digits."""
    table = normalize_matrix(matrix)
    bits = "".join("1" if cell else "0" for cell in table.flatten())
    return format(int(bits, 2), f"0{HEX_DIGITS}x")


def has_links(matrix: Any) -> bool:
    """Return ``True`` when the table connects at least one pair of sides."""
    if matrix is None:
        return False
    return bool(np.asarray(matrix, dtype=bool).any())


def symmetrize(matrix: np.ndarray) -> np.ndarray:
    """Return a new table where every link also runs in reverse."""
    return np.logical_or(matrix, matrix.T)


def is_symmetric(matrix: np.ndarray) -> bool:
    return bool(np.array_equal(matrix, matrix.T))


def loop_directions(matrix: np.ndarray) -> List[int]:
    """Sides marked as loops on the diagonal, in ascending order."""
    return [int(d) for d in np.flatnonzero(np.diagonal(matrix))]


__all__ = [
    "MalformedMatrixError",
    "has_links",
    "is_symmetric",
    "loop_directions",
    "matrix_from_hex",
    "matrix_to_hex",
    "normalize_matrix",
    "symmetrize",
]
