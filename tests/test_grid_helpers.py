"""Tests for tile labels, ASCII rendering and game movement helpers."""

import pytest

from tilegrid.grid import (
    DEFAULT_SPAWN,
    Connection,
    FloorObject,
    ObjectType,
    Tile,
    TileMap,
    TileType,
    WallObject,
    connection_at,
    describe_tile,
    is_walkable,
    iter_tiles,
    render_ascii,
    step,
    walkable_cells,
)


def make_room() -> TileMap:
    """3x4 room: walkable interior row with a door and a portal."""
    tile_map = TileMap.filled(3, 4)
    tile_map.set_tile(1, 1, Tile(tile_type=TileType.WALKABLE))
    tile_map.set_tile(
        1, 2,
        Tile(tile_type=TileType.WALKABLE, object=WallObject(object_type=ObjectType.DOOR)),
    )
    tile_map.set_tile(0, 3, Tile(object=WallObject()))
    tile_map.set_tile(
        2, 2,
        Tile(
            tile_type=TileType.WALKABLE,
            connection=Connection(target_map="cellar", spawn=(1, 1)),
        ),
    )
    return tile_map


def test_iter_tiles_visits_every_cell_in_row_order():
    tile_map = make_room()
    cells = [(r, c) for r, c, _ in iter_tiles(tile_map)]
    assert cells[:5] == [(0, 0), (0, 1), (0, 2), (0, 3), (1, 0)]
    assert len(cells) == 12


def test_walkable_cells():
    assert walkable_cells(make_room()) == [(1, 1), (1, 2), (2, 2)]


def test_describe_tile_lists_all_slots():
    assert describe_tile(Tile()) == "Object: None\nFloorObject: None\nConnection: None"

    tile = Tile(
        object=WallObject(object_type=ObjectType.DOOR),
        floor_object=FloorObject(),
        connection=Connection(target_map="cellar", spawn=(2, 5)),
    )
    assert describe_tile(tile) == (
        "Object: Door\nFloorObject: Wall\nConnection: Map: cellar, Spawn: (2, 5)"
    )


def test_render_ascii():
    assert render_ascii(make_room()) == "###W\n#.D#\n##>#"
    assert render_ascii(TileMap.empty()) == ""


def test_render_ascii_custom_symbols():
    text = render_ascii(TileMap.filled(1, 2), symbols={"blocked": " "})
    assert text == "  "


def test_is_walkable_is_safe_out_of_range():
    tile_map = make_room()
    assert is_walkable(tile_map, 1, 1)
    assert not is_walkable(tile_map, 0, 0)
    assert not is_walkable(tile_map, -1, 1)
    assert not is_walkable(tile_map, 1, 99)


def test_step_moves_only_onto_walkable_tiles():
    tile_map = make_room()
    assert step(tile_map, DEFAULT_SPAWN, "right") == (1, 2)
    assert step(tile_map, (1, 2), "down") == (2, 2)
    # Blocked and off-map destinations leave the player in place
    assert step(tile_map, DEFAULT_SPAWN, "up") == DEFAULT_SPAWN
    assert step(tile_map, DEFAULT_SPAWN, "left") == DEFAULT_SPAWN
    assert step(tile_map, [1, 1], "down") == (1, 1)

    with pytest.raises(KeyError):
        step(tile_map, DEFAULT_SPAWN, "north")


def test_connection_at():
    tile_map = make_room()
    assert connection_at(tile_map, 2, 2).target_map == "cellar"
    assert connection_at(tile_map, 1, 1) is None
    assert connection_at(tile_map, 10, 10) is None
