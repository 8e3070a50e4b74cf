"""Neighbor lookup across grid sides, wormholes and hyperlane chains."""
from __future__ import annotations

from collections import deque
from typing import Deque, List, NamedTuple, Optional, Set, Tuple

from ..movement import MovementOptions, is_passable
from .coordinates import opposite_edge
from .hex import Tile, TileGraph
from .matrix import loop_directions


class Neighbor(NamedTuple):
    label: str
    tile: Tile
    direction: Optional[int]  # None for wormhole links


def neighbors(graph: TileGraph, label: str) -> List[Neighbor]:
    """Return the tiles one hop away from ``label``.

    Grid neighbors come first in side order, followed by every other tile
    sharing a wormhole tag. A tile may appear twice when it is both.
    """
    out: List[Neighbor] = []
    for direction in range(6):
        nb = graph.step(label, direction)
        if nb is not None:
            out.append(Neighbor(nb, graph[nb], direction))
    for nb in graph.wormhole_partners(label):
        out.append(Neighbor(nb, graph[nb], None))
    return out


def hyperlane_exits(graph: TileGraph, label: str, entry: int) -> List[int]:
    """Sides a ship entering ``label`` through side ``entry`` can leave by."""
    table = graph.links(label)
    if table is None:
        return []
    exits = [e for e in range(6) if e != entry and table[entry, e]]
    loops = loop_directions(table)
    if entry in loops:
        exits.extend(d for d in loops if d != entry)
    return sorted(set(exits))


def hyperlane_reachable(
    graph: TileGraph,
    entry_label: str,
    entry_direction: int,
    options: MovementOptions,
) -> Set[str]:
    """Return the real tiles reached by riding the hyperlanes from ``entry_label``.

    ``entry_direction`` is the side of ``entry_label`` the ship came in by.
    Chains of hyperlane tiles are followed until they end on an ordinary tile;
    the whole chain counts as one hop. A hyperlane tile may be crossed more
    than once as long as it is entered by a different side each time.
    """
    seen: Set[Tuple[str, int]] = set()
    reachable: Set[str] = set()
    queue: Deque[Tuple[str, int]] = deque([(entry_label, entry_direction)])
    while queue:
        state = queue.popleft()
        if state in seen:
            continue
        seen.add(state)
        label, entry = state
        for exit_side in hyperlane_exits(graph, label, entry):
            far = graph.step(label, exit_side)
            if far is None:
                continue
            if graph.is_hyperlane(far):
                queue.append((far, opposite_edge(exit_side)))
            elif is_passable(graph[far], False, options):
                reachable.add(far)
    reachable.discard(entry_label)
    return reachable


__all__ = [
    "Neighbor",
    "hyperlane_exits",
    "hyperlane_reachable",
    "neighbors",
]
