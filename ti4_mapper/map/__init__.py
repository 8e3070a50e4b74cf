"""Map data structures for hex tiles, connection tables and adjacency."""

from .hex import DuplicateCoordinateError, Tile, TileGraph
from .matrix import MalformedMatrixError, matrix_from_hex, matrix_to_hex

__all__ = [
    "DuplicateCoordinateError",
    "MalformedMatrixError",
    "Tile",
    "TileGraph",
    "matrix_from_hex",
    "matrix_to_hex",
]
