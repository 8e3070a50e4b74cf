from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .coordinates import axial_add
from .matrix import has_links, normalize_matrix, symmetrize

logger = logging.getLogger(__name__)

EFFECT_TAGS = frozenset({"rift", "nebula", "supernova", "asteroid"})
IMPERMEABLE_TYPES = frozenset({"", "void"})

Matrix = Tuple[Tuple[bool, ...], ...]


class DuplicateCoordinateError(ValueError):
    """Raised when two tiles claim the same axial position."""


@dataclass(frozen=True)
class Tile:
    label: str
    q: int
    r: int
    base_type: str = ""
    effects: FrozenSet[str] = field(default_factory=frozenset)
    wormholes: FrozenSet[str] = field(default_factory=frozenset)
    matrix: Optional[Matrix] = None

    @property
    def coord(self) -> Tuple[int, int]:
        return (self.q, self.r)

    @property
    def is_hyperlane(self) -> bool:
        return has_links(self.matrix)

    def has_effect(self, effect: str) -> bool:
        return effect in self.effects

    @classmethod
    def from_dict(cls, label: str, data: Dict[str, Any]) -> "Tile":
        """Build a tile from the map editor's plain record.

        Both ``baseType`` and ``base_type`` spellings are accepted. ``matrix``
        may be a 6x6 table or the editor's hex string; anything else raises
        :class:`~ti4_mapper.map.matrix.MalformedMatrixError`.
        """
        q = _coordinate(data, "q", label)
        r = _coordinate(data, "r", label)
        base_type = data.get("base_type", data.get("baseType", "")) or ""
        effects = frozenset(str(e).lower() for e in (data.get("effects") or ()))
        wormholes = frozenset(str(w).lower() for w in (data.get("wormholes") or ()))
        raw_matrix = data.get("matrix")
        matrix: Optional[Matrix] = None
        if raw_matrix is not None:
            table = normalize_matrix(raw_matrix, label=label)
            matrix = tuple(tuple(bool(cell) for cell in row) for row in table.tolist())
        return cls(
            label=str(label),
            q=q,
            r=r,
            base_type=str(base_type).lower(),
            effects=effects,
            wormholes=wormholes,
            matrix=matrix,
        )


def _coordinate(data: Dict[str, Any], key: str, label: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Tile {label}: coordinate {key!r} must be an integer, got {value!r}")
    return value


class TileGraph(Mapping):
    """Read-only snapshot of the map keyed by tile label.

    The graph indexes tiles by position and by wormhole tag, and keeps its own
    symmetrised copy of every connection table. Tiles handed in by the caller
    are never modified.
    """

    def __init__(self, tiles: Iterable[Tile]) -> None:
        self._tiles: Dict[str, Tile] = {}
        self._by_coord: Dict[Tuple[int, int], str] = {}
        self._by_wormhole: Dict[str, List[str]] = {}
        self._links: Dict[str, np.ndarray] = {}
        for tile in tiles:
            self._add(tile)
        for tags in self._by_wormhole.values():
            tags.sort()
        logger.debug(
            "Built tile graph: %d tiles, %d hyperlane tiles, %d wormhole tags",
            len(self._tiles),
            len(self._links),
            len(self._by_wormhole),
        )

    def _add(self, tile: Tile) -> None:
        if tile.label in self._tiles:
            raise ValueError(f"Duplicate tile label {tile.label}")
        other = self._by_coord.get(tile.coord)
        if other is not None:
            raise DuplicateCoordinateError(
                f"Duplicate coordinates ({tile.q}, {tile.r}) for tiles {other} and {tile.label}"
            )
        self._tiles[tile.label] = tile
        self._by_coord[tile.coord] = tile.label
        for tag in tile.wormholes:
            self._by_wormhole.setdefault(tag, []).append(tile.label)
        if tile.matrix is not None:
            table = normalize_matrix(tile.matrix, label=tile.label)
            if table.any():
                self._links[tile.label] = symmetrize(table)

    @classmethod
    def from_dict(cls, data: Mapping) -> "TileGraph":
        """Build a graph from ``label -> record`` (records may already be tiles)."""
        tiles = []
        for label, record in data.items():
            if isinstance(record, Tile):
                tiles.append(record)
            else:
                tiles.append(Tile.from_dict(label, record))
        return cls(tiles)

    @classmethod
    def coerce(cls, graph: Any) -> "TileGraph":
        if isinstance(graph, TileGraph):
            return graph
        if isinstance(graph, Mapping):
            return cls.from_dict(graph)
        raise TypeError(f"Cannot build a tile graph from {type(graph).__name__}")

    def __getitem__(self, label: str) -> Tile:
        return self._tiles[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def label_at(self, q: int, r: int) -> Optional[str]:
        return self._by_coord.get((q, r))

    def step(self, label: str, direction: int) -> Optional[str]:
        """Label of the tile across side ``direction`` of ``label``, if any."""
        tile = self._tiles[label]
        return self._by_coord.get(axial_add(tile.coord, direction))

    def wormhole_partners(self, label: str) -> List[str]:
        """Other tiles sharing at least one wormhole tag, in label order."""
        tile = self._tiles[label]
        partners = set()
        for tag in tile.wormholes:
            partners.update(self._by_wormhole.get(tag, ()))
        partners.discard(label)
        return sorted(partners)

    def is_hyperlane(self, label: str) -> bool:
        return label in self._links

    def links(self, label: str) -> Optional[np.ndarray]:
        """Symmetrised connection table of a hyperlane tile (read-only view)."""
        table = self._links.get(label)
        if table is None:
            return None
        view = table.view()
        view.flags.writeable = False
        return view


__all__ = [
    "DuplicateCoordinateError",
    "EFFECT_TAGS",
    "IMPERMEABLE_TYPES",
    "Tile",
    "TileGraph",
]
