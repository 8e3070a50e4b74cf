"""Tests for the map validation report."""
from ti4_mapper.map.hex import Tile
from ti4_mapper.map.validation import validate_graph


def _links(*pairs):
    table = [[0] * 6 for _ in range(6)]
    for i, j in pairs:
        table[i][j] = 1
    return table


def test_valid_map_has_no_errors():
    data = {
        "A": {"q": 0, "r": 0, "baseType": "empty", "effects": ["rift", "Nebula"]},
        "H": {"q": 1, "r": 0, "matrix": _links((5, 2), (2, 5))},
        "B": {"q": 2, "r": 0, "baseType": "empty"},
    }
    assert validate_graph(data) == []


def test_collects_every_problem():
    data = {
        "A": {"q": 0, "r": 0, "effects": ["wormhole"]},
        "B": {"q": 0, "r": 0},
        "C": {"q": "x", "r": 1},
        "H": {"q": 5, "r": 5, "matrix": [[0, 1]]},
    }
    errors = validate_graph(data)
    assert len(errors) == 4
    assert any("unknown effect 'wormhole'" in e for e in errors)
    assert any("Duplicate coordinates (0, 0)" in e for e in errors)
    assert any("Tile C missing integer axial coordinates" in e for e in errors)
    assert any("Tile H" in e and "rows" in e for e in errors)


def test_asymmetric_table_and_exit_off_map():
    data = {
        "A": {"q": 0, "r": 0, "baseType": "empty"},
        "H": {"q": 1, "r": 0, "matrix": _links((5, 2))},
    }
    errors = validate_graph(data)
    assert "Tile H connection table is not symmetric" in errors
    assert "Tile H hyperlane exits E off the map" in errors
    assert len(errors) == 2


def test_accepts_tiles():
    tiles = {
        "A": Tile(label="A", q=0, r=0, base_type="empty"),
        "B": Tile(label="B", q=0, r=0, base_type="empty"),
    }
    assert validate_graph(tiles) == ["Duplicate coordinates (0, 0) for tiles A and B"]
