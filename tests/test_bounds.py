"""Tests for expand_to, trim and pad."""

import pytest

from tilegrid.exceptions import InvalidArgumentError
from tilegrid.grid import (
    BoundingBox,
    Connection,
    GrowthOffset,
    Tile,
    TileMap,
    TileType,
    WallObject,
    content_bounds,
    expand_to,
    pad,
    trim,
)

WALKABLE = TileType.WALKABLE


def _labelled(rows: int, cols: int) -> TileMap:
    """Map whose tiles are distinguishable by their connection spawn."""
    return TileMap(tiles=[
        [
            Tile(tile_type=WALKABLE, connection=Connection(target_map="m", spawn=(r, c)))
            for c in range(cols)
        ]
        for r in range(rows)
    ])


def _from_rows(*rows: str) -> TileMap:
    """Build a map from strings of '.' (Walkable) and '#' (Blocked)."""
    return TileMap(tiles=[
        [Tile(tile_type=WALKABLE if ch == "." else TileType.BLOCKED) for ch in row]
        for row in rows
    ])


def _rows(tile_map: TileMap) -> list:
    return [
        "".join("." if tile.tile_type == WALKABLE else "#" for tile in row)
        for row in tile_map.tiles
    ]


def test_expand_inside_bounds_is_noop():
    tile_map = _labelled(3, 4)
    before = tile_map.copy()
    for row in range(3):
        for col in range(4):
            assert expand_to(tile_map, row, col) == GrowthOffset(0, 0)
    assert tile_map == before


def test_expand_appends_rows_and_columns():
    tile_map = _labelled(2, 2)
    offset = expand_to(tile_map, 3, 4)

    assert offset == GrowthOffset(0, 0)
    assert not offset.shifted
    assert tile_map.size == (4, 5)
    assert tile_map.is_rectangular
    assert tile_map.get_tile(1, 1).connection.spawn == (1, 1)
    assert tile_map.get_tile(3, 4) == Tile()
    assert tile_map.get_tile(0, 4) == Tile()
    assert tile_map.get_tile(3, 0) == Tile()


def test_expand_before_origin_shifts_rows():
    tile_map = _labelled(2, 2)
    offset = expand_to(tile_map, -2, 0)

    assert offset == GrowthOffset(rows=2, cols=0)
    assert tile_map.size == (4, 2)
    assert tile_map.tiles[0] == [Tile(), Tile()]
    assert tile_map.tiles[1] == [Tile(), Tile()]
    for r in range(2):
        for c in range(2):
            assert tile_map.get_tile(r + 2, c).connection.spawn == (r, c)


def test_expand_before_origin_shifts_columns():
    tile_map = _labelled(2, 3)
    offset = expand_to(tile_map, 1, -3)

    assert offset == GrowthOffset(rows=0, cols=3)
    assert tile_map.size == (2, 6)
    for r in range(2):
        assert tile_map.tiles[r][:3] == [Tile(), Tile(), Tile()]
        for c in range(3):
            assert tile_map.get_tile(r, c + 3).connection.spawn == (r, c)


def test_expand_mixed_directions():
    tile_map = _labelled(2, 2)
    offset = expand_to(tile_map, -1, 4)

    assert offset == GrowthOffset(rows=1, cols=0)
    assert tile_map.size == (3, 5)
    assert tile_map.is_rectangular
    assert tile_map.get_tile(1, 0).connection.spawn == (0, 0)
    assert tile_map.get_tile(2, 1).connection.spawn == (1, 1)


def test_expand_both_axes_before_origin():
    tile_map = _labelled(1, 1)
    offset = expand_to(tile_map, -2, -1)

    assert offset == GrowthOffset(rows=2, cols=1)
    assert offset.shifted
    assert tile_map.size == (3, 2)
    assert tile_map.get_tile(2, 1).connection.spawn == (0, 0)
    # The requested address is now (0, 0)
    assert tile_map.get_tile(0, 0) == Tile()


def test_expand_empty_map():
    tile_map = TileMap.empty()
    assert expand_to(tile_map, 0, 0) == GrowthOffset(0, 0)
    assert tile_map.size == (1, 1)

    other = TileMap.empty()
    assert expand_to(other, -2, 3) == GrowthOffset(rows=2, cols=0)
    assert other.size == (2, 4)
    assert other.is_rectangular


def test_expand_squares_up_ragged_map():
    tile_map = TileMap(tiles=[[Tile(tile_type=WALKABLE)] * 3, [Tile(tile_type=WALKABLE)]])
    expand_to(tile_map, 0, 0)

    assert tile_map.is_rectangular
    assert tile_map.size == (2, 3)
    assert tile_map.get_tile(1, 0).tile_type == WALKABLE
    assert tile_map.get_tile(1, 2) == Tile()


def test_content_bounds():
    tile_map = _from_rows(
        "#####",
        "##.##",
        "#...#",
        "#####",
    )
    assert content_bounds(tile_map) == BoundingBox(top=1, left=1, bottom=2, right=3)
    assert content_bounds(_from_rows("##", "##")) is None


def test_trim_crops_to_content():
    tile_map = _from_rows(
        "######",
        "##.###",
        "####.#",
        "######",
    )
    box = trim(tile_map)

    assert box == BoundingBox(top=1, left=2, bottom=2, right=4)
    assert (box.rows, box.cols) == (2, 3)
    assert _rows(tile_map) == [".##", "##."]


def test_trim_keeps_non_type_fields_of_cropped_tiles():
    tile_map = _from_rows("###", "#.#", "###")
    tile_map.get_tile(1, 1).object = WallObject()
    trim(tile_map)
    assert tile_map.size == (1, 1)
    assert tile_map.get_tile(0, 0).object == WallObject()


def test_trim_all_blocked_is_unchanged():
    tile_map = _from_rows("###", "###")
    before = tile_map.copy()
    box = trim(tile_map)
    assert box == BoundingBox(top=0, left=0, bottom=1, right=2)
    assert tile_map == before


def test_trim_empty_map_is_noop():
    tile_map = TileMap.empty()
    assert trim(tile_map) is None
    assert tile_map.size == (0, 0)


def test_trim_is_idempotent():
    tile_map = _from_rows(
        "#######",
        "#..####",
        "####.##",
        "#######",
    )
    trim(tile_map)
    once = tile_map.copy()
    trim(tile_map)
    assert tile_map == once


def test_pad_adds_uniform_border():
    tile_map = _from_rows(".#", "..")
    pad(tile_map, 2)

    assert tile_map.size == (6, 6)
    assert _rows(tile_map) == [
        "######",
        "######",
        "##.###",
        "##..##",
        "######",
        "######",
    ]


def test_pad_zero_is_copy():
    tile_map = _labelled(2, 3)
    before = tile_map.copy()
    pad(tile_map, 0)
    assert tile_map == before


def test_pad_empty_map():
    tile_map = TileMap.empty()
    pad(tile_map, 1)
    assert tile_map.size == (2, 2)
    assert all(tile == Tile() for row in tile_map.tiles for tile in row)


@pytest.mark.parametrize("margin", [-1, 1.5, True])
def test_pad_rejects_invalid_margin(margin):
    tile_map = _from_rows("..")
    with pytest.raises(InvalidArgumentError):
        pad(tile_map, margin)
    assert _rows(tile_map) == [".."]


def test_trim_then_pad_reproduces_single_tile_scenario():
    original = TileMap.filled(3, 3)
    original.set_tile(1, 1, Tile(tile_type=WALKABLE))
    tile_map = original.copy()

    trim(tile_map)
    assert tile_map == TileMap(tiles=[[Tile(tile_type=WALKABLE)]])

    pad(tile_map, 1)
    assert tile_map == original


def test_pad_then_trim_round_trips_only_without_edge_content():
    interior = _from_rows(
        "####",
        "#..#",
        "####",
    )
    padded = interior.copy()
    pad(padded, 1)
    trim(padded)
    # Blocked border of the original is cropped together with the padding
    assert _rows(padded) == [".."]
    assert padded != interior

    flush = _from_rows(
        ".#",
        "#.",
    )
    padded = flush.copy()
    pad(padded, 1)
    trim(padded)
    # Content touching every edge survives the round trip exactly
    assert padded == flush

    # Re-padding the trimmed interior reproduces it when it had a one-tile border
    restored = interior.copy()
    trim(restored)
    pad(restored, 1)
    assert restored == interior


def test_operations_keep_map_rectangular():
    tile_map = TileMap.empty()
    for row, col in [(0, 0), (2, -1), (-3, 4), (1, 1)]:
        expand_to(tile_map, row, col)
        assert tile_map.is_rectangular
    pad(tile_map, 1)
    assert tile_map.is_rectangular
    trim(tile_map)
    assert tile_map.is_rectangular
