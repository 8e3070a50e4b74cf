"""TI4 mapper: movement distances over hex maps with rifts, wormholes and hyperlanes."""

from importlib import import_module
from typing import Any

__version__ = "0.1.0"
__all__ = [
    "compute_distances",
    "distance_layers",
    "reachable_within",
    "UnknownSourceTileError",
    "MovementOptions",
    "is_passable",
    "Tile",
    "TileGraph",
    "DuplicateCoordinateError",
    "MalformedMatrixError",
    "validate_graph",
    "load_movement_options",
    "__version__",
]

_EXPORTS = {
    "compute_distances": ("pathing", "compute_distances"),
    "distance_layers": ("pathing", "distance_layers"),
    "reachable_within": ("pathing", "reachable_within"),
    "UnknownSourceTileError": ("pathing", "UnknownSourceTileError"),
    "MovementOptions": ("movement", "MovementOptions"),
    "is_passable": ("movement", "is_passable"),
    "Tile": ("map.hex", "Tile"),
    "TileGraph": ("map.hex", "TileGraph"),
    "DuplicateCoordinateError": ("map.hex", "DuplicateCoordinateError"),
    "MalformedMatrixError": ("map.matrix", "MalformedMatrixError"),
    "validate_graph": ("map.validation", "validate_graph"),
    "load_movement_options": ("config", "load_movement_options"),
}


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        module_name, attr_name = _EXPORTS[name]
        module = import_module(f".{module_name}", __name__)
        attr = getattr(module, attr_name)
        globals()[name] = attr
        return attr
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(__all__)))
