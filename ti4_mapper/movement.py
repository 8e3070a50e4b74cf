"""Movement options and terrain passability."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

from .map.hex import IMPERMEABLE_TYPES, Tile

_CAMEL_KEYS = {
    "useSupernova": "use_supernova",
    "useRift": "use_rift",
    "useNebula": "use_nebula",
    "useAsteroid": "use_asteroid",
}


@dataclass(frozen=True)
class MovementOptions:
    """Terrain rules that can be toggled off in the editor.

    Each flag enables the blocking (or, for rifts, flooding) behaviour of the
    matching effect tag. All rules are active by default.
    """

    use_supernova: bool = True
    use_rift: bool = True
    use_nebula: bool = True
    use_asteroid: bool = True

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "MovementOptions":
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in (data or {}).items():
            name = _CAMEL_KEYS.get(key, key)
            if name in known and value is not None:
                kwargs[name] = bool(value)
        return cls(**kwargs)

    @classmethod
    def coerce(cls, options: Union["MovementOptions", Mapping[str, Any], None]) -> "MovementOptions":
        if isinstance(options, MovementOptions):
            return options
        return cls.from_mapping(options)


def is_passable(tile: Optional[Tile], is_source: bool, options: MovementOptions) -> bool:
    """Return ``True`` if a ship may move into ``tile``.

    The source tile is exempt from effect blocking but not from the base type
    check. Rifts are never blocking here; the search floods them instead.
    """
    if tile is None:
        return False
    if not is_source:
        if options.use_supernova and tile.has_effect("supernova"):
            return False
        if options.use_asteroid and tile.has_effect("asteroid"):
            return False
        if options.use_nebula and tile.has_effect("nebula"):
            return False
    return tile.base_type not in IMPERMEABLE_TYPES


def stops_movement(tile: Tile, is_source: bool, options: MovementOptions) -> bool:
    """Return ``True`` if movement ends on ``tile`` once it is entered."""
    if is_source:
        return False
    if (options.use_nebula and tile.has_effect("nebula")) or tile.base_type == "nebula":
        return True
    if (options.use_supernova and tile.has_effect("supernova")) or tile.base_type == "supernova":
        return True
    return False


def is_rift(tile: Optional[Tile]) -> bool:
    return tile is not None and tile.has_effect("rift")


__all__ = [
    "MovementOptions",
    "is_passable",
    "is_rift",
    "stops_movement",
]
