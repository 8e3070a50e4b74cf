"""Tests for hyperlane connection tables."""
import numpy as np
import pytest

from ti4_mapper.map.matrix import (
    MalformedMatrixError,
    has_links,
    is_symmetric,
    loop_directions,
    matrix_from_hex,
    matrix_to_hex,
    normalize_matrix,
    symmetrize,
)


def _links(*pairs):
    table = [[0] * 6 for _ in range(6)]
    for i, j in pairs:
        table[i][j] = 1
    return table


def test_hex_round_trip_single_link():
    # West (5) -> East (2) is bit 32 of 36, counted from the most significant end
    assert matrix_to_hex(_links((5, 2))) == "000000008"
    table = matrix_from_hex("000000008")
    assert table[5, 2]
    assert table.sum() == 1


def test_hex_accepts_short_strings():
    assert np.array_equal(matrix_from_hex("8"), matrix_from_hex("000000008"))
    assert matrix_to_hex(matrix_from_hex("fffffffff")) == "fffffffff"


@pytest.mark.parametrize("text", ["", "zz", "1000000000", "  "])
def test_hex_rejects_bad_strings(text):
    with pytest.raises(MalformedMatrixError):
        matrix_from_hex(text)


def test_normalize_accepts_bools_and_ints():
    raw = _links((0, 3))
    raw[1][4] = True
    table = normalize_matrix(raw)
    assert table.dtype == bool
    assert table[0, 3] and table[1, 4]
    assert table.sum() == 2


@pytest.mark.parametrize(
    "raw",
    [
        [[0] * 6 for _ in range(5)],
        [[0] * 5 for _ in range(6)],
        [[0] * 6 for _ in range(5)] + [[0, 0, 2, 0, 0, 0]],
        [[0] * 6 for _ in range(5)] + [[0, 0, "1", 0, 0, 0]],
        [[0] * 6 for _ in range(5)] + [[0, 0, None, 0, 0, 0]],
        42,
    ],
)
def test_normalize_rejects_malformed_tables(raw):
    with pytest.raises(MalformedMatrixError):
        normalize_matrix(raw, label="H1")


def test_error_names_the_tile():
    with pytest.raises(MalformedMatrixError, match="H7"):
        normalize_matrix([[0] * 6], label="H7")


def test_symmetrize_returns_new_table():
    table = normalize_matrix(_links((5, 2)))
    sym = symmetrize(table)
    assert sym[2, 5] and sym[5, 2]
    assert not table[2, 5]
    assert is_symmetric(sym)
    assert not is_symmetric(table)


def test_loop_directions_and_links():
    table = normalize_matrix(_links((0, 0), (3, 3), (1, 4)))
    assert loop_directions(table) == [0, 3]
    assert has_links(table)
    assert not has_links(_links())
    assert not has_links(None)
