"""Tests for building tile graphs from editor records."""
import copy

import pytest

from ti4_mapper.map.hex import DuplicateCoordinateError, Tile, TileGraph
from ti4_mapper.map.matrix import MalformedMatrixError


def _links(*pairs):
    table = [[0] * 6 for _ in range(6)]
    for i, j in pairs:
        table[i][j] = 1
    return table


def test_from_dict_reads_editor_records():
    graph = TileGraph.from_dict(
        {
            "000": {"q": 0, "r": 0, "baseType": "homesystem", "effects": ["Rift"], "wormholes": ["Alpha"]},
            "101": {"q": 1, "r": 0, "base_type": "1 planet"},
        }
    )
    tile = graph["000"]
    assert tile.base_type == "homesystem"
    assert tile.effects == frozenset({"rift"})
    assert tile.wormholes == frozenset({"alpha"})
    assert tile.matrix is None
    assert graph["101"].base_type == "1 planet"
    assert len(graph) == 2
    assert set(graph) == {"000", "101"}


def test_lookup_by_position_and_side():
    graph = TileGraph.from_dict({"A": {"q": 0, "r": 0}, "B": {"q": 1, "r": 0}})
    assert graph.label_at(1, 0) == "B"
    assert graph.label_at(5, 5) is None
    assert graph.step("A", 2) == "B"
    assert graph.step("B", 5) == "A"
    assert graph.step("A", 0) is None


def test_duplicate_coordinates_rejected():
    with pytest.raises(DuplicateCoordinateError):
        TileGraph.from_dict({"A": {"q": 0, "r": 0}, "B": {"q": 0, "r": 0}})


@pytest.mark.parametrize("record", [{"r": 0}, {"q": "1", "r": 0}, {"q": True, "r": 0}])
def test_bad_coordinates_rejected(record):
    with pytest.raises(ValueError):
        TileGraph.from_dict({"A": record})


def test_malformed_matrix_rejected_at_construction():
    with pytest.raises(MalformedMatrixError):
        TileGraph.from_dict({"H": {"q": 0, "r": 0, "matrix": [[1, 0, 0]]}})


def test_matrix_from_hex_string():
    graph = TileGraph.from_dict({"H": {"q": 0, "r": 0, "matrix": "000000008"}})
    assert graph.is_hyperlane("H")
    assert graph["H"].is_hyperlane
    assert graph["H"].matrix[5][2] is True


def test_empty_matrix_is_not_a_hyperlane():
    graph = TileGraph.from_dict({"T": {"q": 0, "r": 0, "baseType": "empty", "matrix": _links()}})
    assert not graph.is_hyperlane("T")
    assert graph.links("T") is None


def test_links_are_symmetrised_without_touching_input():
    data = {"H": {"q": 0, "r": 0, "matrix": _links((5, 2))}}
    before = copy.deepcopy(data)
    graph = TileGraph.from_dict(data)
    links = graph.links("H")
    assert links[5, 2] and links[2, 5]
    assert data == before
    assert graph["H"].matrix[2][5] is False
    with pytest.raises(ValueError):
        links[0, 0] = True


def test_wormhole_partners_sorted_and_exclude_self():
    graph = TileGraph.from_dict(
        {
            "C": {"q": 2, "r": 0, "wormholes": ["alpha"]},
            "A": {"q": 0, "r": 0, "wormholes": ["alpha", "beta"]},
            "B": {"q": 1, "r": 0, "wormholes": ["beta"]},
            "D": {"q": 3, "r": 0, "wormholes": ["gamma"]},
        }
    )
    assert graph.wormhole_partners("A") == ["B", "C"]
    assert graph.wormhole_partners("D") == []


def test_graph_accepts_tiles_and_coerce():
    tile = Tile(label="A", q=0, r=0, base_type="empty")
    graph = TileGraph.from_dict({"A": tile})
    assert graph["A"] is tile
    assert TileGraph.coerce(graph) is graph
    with pytest.raises(TypeError):
        TileGraph.coerce([tile])
