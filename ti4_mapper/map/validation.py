"""Validation of map data handed over by the editor.

Unlike :meth:`TileGraph.from_dict`, which stops at the first bad record, these
checks collect every problem so the editor can show them all at once.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

import numpy as np

from .coordinates import AXIAL_DIRECTIONS, DIRECTION_NAMES
from .hex import EFFECT_TAGS, Tile
from .matrix import MalformedMatrixError, is_symmetric, normalize_matrix


def validate_graph(data: Mapping[str, Any]) -> List[str]:
    """Validate raw map records (or tiles) keyed by label.

    Checks:
    - Integer coordinates, no duplicate coordinates
    - Connection tables are 6x6 boolean tables
    - Effect tags are known
    - Connection tables are symmetric
    - Hyperlane exits lead onto the map

    Args:
        data: ``label -> record`` as accepted by ``TileGraph.from_dict``

    Returns:
        List of error messages (empty if valid)
    """
    errors: List[str] = []
    positions: Dict[Tuple[int, int], str] = {}
    tables: Dict[str, np.ndarray] = {}

    for label, record in data.items():
        fields = _record_fields(record)
        q, r = fields.get("q"), fields.get("r")
        if not _is_int(q) or not _is_int(r):
            errors.append(f"Tile {label} missing integer axial coordinates")
        else:
            other = positions.get((q, r))
            if other is not None:
                errors.append(f"Duplicate coordinates ({q}, {r}) for tiles {other} and {label}")
            else:
                positions[(q, r)] = label

        for effect in fields.get("effects") or ():
            if str(effect).lower() not in EFFECT_TAGS:
                errors.append(f"Tile {label} has unknown effect {effect!r}")

        raw_matrix = fields.get("matrix")
        if raw_matrix is None:
            continue
        try:
            table = normalize_matrix(raw_matrix, label=label)
        except MalformedMatrixError as exc:
            errors.append(str(exc))
            continue
        if not table.any():
            continue
        if not is_symmetric(table):
            errors.append(f"Tile {label} connection table is not symmetric")
        tables[label] = table

    for label, table in tables.items():
        fields = _record_fields(data[label])
        q, r = fields.get("q"), fields.get("r")
        if not _is_int(q) or not _is_int(r):
            continue
        used = table.any(axis=0) | table.any(axis=1)
        for side in range(6):
            if not used[side]:
                continue
            dq, dr = AXIAL_DIRECTIONS[side]
            if (q + dq, r + dr) not in positions:
                errors.append(f"Tile {label} hyperlane exits {DIRECTION_NAMES[side]} off the map")

    return errors


def _record_fields(record: Any) -> Dict[str, Any]:
    if isinstance(record, Tile):
        return {
            "q": record.q,
            "r": record.r,
            "effects": record.effects,
            "matrix": record.matrix,
        }
    if isinstance(record, Mapping):
        return dict(record)
    return {}


def _is_int(value: Optional[Any]) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


__all__ = ["validate_graph"]
