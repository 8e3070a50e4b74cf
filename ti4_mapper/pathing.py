"""Movement distances from a tile, shared by the slice and overlay tools."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from .map.connectivity import hyperlane_reachable, neighbors
from .map.coordinates import opposite_edge
from .map.hex import TileGraph
from .movement import MovementOptions, is_passable, is_rift, stops_movement
from .rifts import flood_rift

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 3


class UnknownSourceTileError(ValueError):
    """Raised when the search is started from a label that is not on the map."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Unknown source tile: {label!r}")
        self.label = label


def compute_distances(
    graph: Union[TileGraph, Mapping[str, Any]],
    source_label: str,
    max_distance: int = DEFAULT_MAX_DISTANCE,
    options: Union[MovementOptions, Mapping[str, Any], None] = None,
) -> Dict[str, int]:
    """Return ``label -> distance`` for every tile reachable from ``source_label``.

    The search runs one breadth-first layer per point of movement. Rift
    clusters are crossed for free, hyperlane chains count as a single hop and
    tiles sharing a wormhole tag are adjacent. A search starting on a rift gets
    one extra layer, and every distance except the source's is then reduced by
    one so the reported bound is still ``max_distance``.

    Raises:
        UnknownSourceTileError: ``source_label`` is not in ``graph``.
        ValueError: ``max_distance`` is not a non-negative integer.
    """
    if isinstance(max_distance, bool) or not isinstance(max_distance, int) or max_distance < 0:
        raise ValueError(f"max_distance must be a non-negative integer, got {max_distance!r}")
    graph = TileGraph.coerce(graph)
    opts = MovementOptions.coerce(options)
    source = graph.get(source_label)
    if source is None:
        raise UnknownSourceTileError(source_label)

    effective_max = max_distance
    shift = opts.use_rift and is_rift(source)
    if shift:
        effective_max += 1
    logger.debug(
        "Computing distances from %s (max=%d, effective=%d, rift shift=%s)",
        source_label,
        max_distance,
        effective_max,
        shift,
    )

    visited: Dict[str, int] = {source_label: 0}
    layer: List[str] = [source_label]
    for distance in range(1, effective_max + 1):
        next_layer: List[str] = []
        for label in layer:
            current = graph[label]
            from_source = label == source_label
            if stops_movement(current, from_source, opts):
                continue
            for nb in neighbors(graph, label):
                if nb.label in visited:
                    continue
                if graph.is_hyperlane(nb.label):
                    if nb.direction is not None:
                        _enter_hyperlane(graph, nb.label, opposite_edge(nb.direction), distance, visited, next_layer, opts)
                elif opts.use_rift and is_rift(nb.tile):
                    flood_rift(graph, nb.label, distance, visited, next_layer, opts)
                elif is_passable(nb.tile, from_source, opts) or (is_rift(current) and is_rift(nb.tile)):
                    visited[nb.label] = distance
                    next_layer.append(nb.label)
        if not next_layer:
            break
        layer = next_layer

    if shift:
        logger.debug("Shifting distances from rift source %s down by one", source_label)
        visited = {label: d if d == 0 else max(1, d - 1) for label, d in visited.items()}
    return dict(sorted(visited.items(), key=lambda item: (item[1], item[0])))


def _enter_hyperlane(
    graph: TileGraph,
    label: str,
    entry: int,
    distance: int,
    visited: Dict[str, int],
    next_layer: List[str],
    options: MovementOptions,
) -> None:
    for dest in sorted(hyperlane_reachable(graph, label, entry, options)):
        if dest in visited:
            continue
        dest_tile = graph[dest]
        if not is_passable(dest_tile, False, options):
            continue
        if options.use_rift and is_rift(dest_tile):
            flood_rift(graph, dest, distance, visited, next_layer, options)
            continue
        visited[dest] = distance
        next_layer.append(dest)


def distance_layers(distances: Mapping[str, int]) -> Dict[int, List[str]]:
    """Group a distance map by distance, labels sorted within each layer."""
    layers: Dict[int, List[str]] = {}
    for label, distance in distances.items():
        layers.setdefault(distance, []).append(label)
    return {d: sorted(labels) for d, labels in sorted(layers.items())}


def reachable_within(distances: Mapping[str, int], max_distance: Optional[int] = None) -> List[str]:
    """Labels other than the source within ``max_distance`` (all when None)."""
    return sorted(
        label
        for label, distance in distances.items()
        if distance > 0 and (max_distance is None or distance <= max_distance)
    )


__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "UnknownSourceTileError",
    "compute_distances",
    "distance_layers",
    "reachable_within",
]
