"""Gravity rift flooding.

Connected rift tiles are crossed as a unit: once a search enters any tile of a
rift cluster, the whole cluster and everything bordering it is reached at the
same distance.
"""
from __future__ import annotations

import logging
from typing import Dict, List

from .map.connectivity import hyperlane_reachable, neighbors
from .map.coordinates import opposite_edge
from .map.hex import TileGraph
from .movement import MovementOptions, is_passable, is_rift

logger = logging.getLogger(__name__)


def flood_rift(
    graph: TileGraph,
    start_label: str,
    distance: int,
    visited: Dict[str, int],
    sink: List[str],
    options: MovementOptions,
) -> List[str]:
    """Flood the rift cluster containing ``start_label`` at ``distance``.

    Every newly reached tile is written to ``visited`` and appended to
    ``sink``. Tiles already in ``visited`` keep their distance. Returns the
    rift tiles flooded, in the order they were reached.
    """
    flooded: List[str] = []
    seeds = [start_label]
    cursor = 0
    while seeds:
        _flood_cluster(graph, seeds.pop(), distance, visited, sink, flooded)
        # Rifts found at the far end of a hyperlane become new seeds.
        while cursor < len(flooded):
            label = flooded[cursor]
            cursor += 1
            for nb in neighbors(graph, label):
                if nb.label in visited:
                    continue
                if graph.is_hyperlane(nb.label):
                    if nb.direction is None:
                        continue
                    entry = opposite_edge(nb.direction)
                    for dest in sorted(hyperlane_reachable(graph, nb.label, entry, options)):
                        if dest in visited:
                            continue
                        dest_tile = graph[dest]
                        if not is_passable(dest_tile, False, options):
                            continue
                        if options.use_rift and is_rift(dest_tile):
                            seeds.append(dest)
                            continue
                        visited[dest] = distance
                        sink.append(dest)
                elif not is_rift(nb.tile) and is_passable(nb.tile, False, options):
                    visited[nb.label] = distance
                    sink.append(nb.label)
    logger.debug("Flooded rift cluster from %s at distance %d: %s", start_label, distance, flooded)
    return flooded


def _flood_cluster(
    graph: TileGraph,
    start_label: str,
    distance: int,
    visited: Dict[str, int],
    sink: List[str],
    flooded: List[str],
) -> None:
    stack = [start_label]
    while stack:
        label = stack.pop()
        if label in visited:
            continue
        visited[label] = distance
        sink.append(label)
        flooded.append(label)
        for nb in reversed(neighbors(graph, label)):
            if nb.label not in visited and is_rift(nb.tile) and not graph.is_hyperlane(nb.label):
                stack.append(nb.label)


__all__ = ["flood_rift"]
