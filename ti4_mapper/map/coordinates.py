"""Axial coordinate system for the hex map.

The map editor lays tiles out on a pointy-top grid addressed by axial
coordinates ``(q, r)``. Sides of a tile are numbered clockwise starting at the
upper-left face; connection tables on hyperlane tiles use the same numbering.

Edge Numbering (clockwise from Northwest):
    0 = Northwest: ( 0, -1)
    1 = Northeast: (+1, -1)
    2 = East     : (+1,  0)
    3 = Southeast: ( 0, +1)
    4 = Southwest: (-1, +1)
    5 = West     : (-1,  0)
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

AXIAL_DIRECTIONS: List[Tuple[int, int]] = [
    ( 0, -1),  # 0: Northwest
    (+1, -1),  # 1: Northeast
    (+1,  0),  # 2: East
    ( 0, +1),  # 3: Southeast
    (-1, +1),  # 4: Southwest
    (-1,  0),  # 5: West
]

DIRECTION_NAMES: Tuple[str, ...] = ("NW", "NE", "E", "SE", "SW", "W")


def axial_add(coord: Tuple[int, int], direction: int) -> Tuple[int, int]:
    """Step one tile from ``coord`` across side ``direction``.

    Args:
        coord: (q, r) axial coordinates
        direction: Side index 0-5

    Returns:
        New (q, r) coordinates
    """
    q, r = coord
    dq, dr = AXIAL_DIRECTIONS[direction % 6]
    return (q + dq, r + dr)


def axial_neighbors(q: int, r: int) -> Dict[int, Tuple[int, int]]:
    """Return all 6 neighbor positions of a tile as a dict of side -> (q, r)."""
    return {edge: axial_add((q, r), edge) for edge in range(6)}


def axial_distance(q1: int, r1: int, q2: int, r2: int) -> int:
    """Grid distance between two tiles, ignoring terrain and wormholes.

    Uses the axial coordinate distance formula:
    distance = max(|q1-q2|, |r1-r2|, |(q1+r1)-(q2+r2)|)
    """
    dq = q1 - q2
    dr = r1 - r2
    ds = -(dq + dr)
    return max(abs(dq), abs(dr), abs(ds))


def opposite_edge(edge: int) -> int:
    """Return the side facing ``edge`` on the adjacent tile.

    Northwest (0) faces Southeast (3), Northeast (1) faces Southwest (4), and
    East (2) faces West (5).
    """
    return (edge + 3) % 6


def direction_between_coords(from_q: int, from_r: int, to_q: int, to_r: int) -> Optional[int]:
    """Find the side of ``from`` that touches the adjacent tile ``to``.

    Returns:
        Side index (0-5) if the tiles are adjacent, None otherwise
    """
    delta = (to_q - from_q, to_r - from_r)
    for edge, step in enumerate(AXIAL_DIRECTIONS):
        if delta == step:
            return edge
    return None


__all__ = [
    "AXIAL_DIRECTIONS",
    "DIRECTION_NAMES",
    "axial_add",
    "axial_distance",
    "axial_neighbors",
    "direction_between_coords",
    "opposite_edge",
]
