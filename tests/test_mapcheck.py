import pytest

from solong.mapcheck import (
    MapError,
    MapInfo,
    Tile,
    flood_fill,
    validate_format,
    validate_map,
    validate_path,
)

VALID = [
    "1111111",
    "1P0C0E1",
    "1000C01",
    "1111111",
]


def test_valid_map_info():
    info = validate_map(VALID)
    assert info == MapInfo(width=7, height=4, collectibles=2, player=(1, 1))


def test_tile_symbols():
    assert Tile.WALL.value == "1"
    assert Tile("P") is Tile.PLAYER


@pytest.mark.parametrize(
    "grid, message",
    [
        (["11111", "1PCE1", "1111"], "Map not rectangular!"),
        (["11111", "1PXE1", "11111"], "Map contains a forbidden symbol!"),
        (["111111", "1PPCE1", "111111"], "There must be exactly 1 player!"),
        (["11111", "10CE1", "11111"], "There must be exactly 1 player!"),
        (["111111", "1PCEE1", "111111"], "There must be exactly 1 exit!"),
        (["11111", "1P0E1", "11111"], "No collectibles found."),
        (["11111", "1PCE0", "11111"], "Missing walls around map"),
        (["11011", "1PCE1", "11111"], "Missing walls around map"),
    ],
)
def test_format_errors(grid, message):
    with pytest.raises(MapError) as excinfo:
        validate_format(grid)
    assert str(excinfo.value) == message


def test_empty_grid_rejected():
    with pytest.raises(MapError):
        validate_format([])


def test_forbidden_symbol_reported_before_counts():
    with pytest.raises(MapError, match="forbidden"):
        validate_format(["11111", "1PZ01", "11111"])


def test_flood_fill_marks_reachable_only():
    grid = ["111111", "1P1C01", "111111"]
    filled = flood_fill(grid, (1, 1))
    assert filled[1][1] == "F"
    assert filled[1][3:5] == grid[1][3:5]
    assert [row.replace("F", "x") for row in filled] == [
        row.replace("P", "x") for row in grid
    ]


def test_flood_fill_keeps_walls_and_shape():
    filled = flood_fill(VALID, (1, 1))
    assert len(filled) == len(VALID)
    for original, row in zip(VALID, filled):
        assert len(row) == len(original)
        for a, b in zip(original, row):
            assert (a == "1") == (b == "1")
            if a != "1":
                assert b == "F"


def test_flood_fill_does_not_change_input():
    grid = list(VALID)
    flood_fill(grid, (1, 1))
    assert grid == VALID


def test_unreachable_collectible():
    grid = ["1111111", "1PE01C1", "1111111"]
    with pytest.raises(MapError, match="not reachable"):
        validate_map(grid)


def test_unreachable_exit():
    grid = ["1111111", "1PC01E1", "1111111"]
    with pytest.raises(MapError, match="not reachable"):
        validate_path(grid, (1, 1))


def test_path_passes_through_exit():
    grid = ["111111", "1PEC01", "111111"]
    info = validate_map(grid)
    assert info.collectibles == 1
    assert info.player == (1, 1)