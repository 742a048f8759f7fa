"""Read-only utilities over a ``TileMap`` for renderers and the game."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from .model import TileMap
from .schemas import Connection, ObjectType, Tile, TileType

# The game places the player here when a map is entered without a connection.
# Saved maps carry a one-tile Blocked border, so (1, 1) is the first interior cell.
DEFAULT_SPAWN: Tuple[int, int] = (1, 1)

# (row delta, col delta); row 0 is the top of the map
DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}

_DEFAULT_SYMBOLS: Dict[str, str] = {
    "walkable": ".",
    "blocked": "#",
    "wall": "W",
    "door": "D",
    "connection": ">",
}


def iter_tiles(tile_map: TileMap) -> Iterator[Tuple[int, int, Tile]]:
    """Yield ``(row, col, tile)`` for every tile, row by row."""
    for r, row in enumerate(tile_map.tiles):
        for c, tile in enumerate(row):
            yield r, c, tile


def walkable_cells(tile_map: TileMap) -> List[Tuple[int, int]]:
    """Coordinates of every Walkable tile; the game builds its floor from these."""
    return [
        (r, c)
        for r, c, tile in iter_tiles(tile_map)
        if tile.tile_type == TileType.WALKABLE
    ]


def describe_tile(tile: Tile) -> str:
    """Three-line label the editor draws over each tile."""
    obj = str(tile.object.object_type) if tile.object else "None"
    floor = str(tile.floor_object.object_type) if tile.floor_object else "None"
    connection = str(tile.connection) if tile.connection else "None"
    return f"Object: {obj}\nFloorObject: {floor}\nConnection: {connection}"


def render_ascii(tile_map: TileMap, *, symbols: Optional[Dict[str, str]] = None) -> str:
    """Render the map as text, one character per tile.

    Connections win over objects, objects over the tile type. Useful in the
    CLI and in test failure output.
    """
    mapping = {**_DEFAULT_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    lines: List[str] = []
    for row in tile_map.tiles:
        chars: List[str] = []
        for tile in row:
            if tile.connection is not None:
                chars.append(mapping["connection"])
            elif tile.object is not None:
                key = "door" if tile.object.object_type == ObjectType.DOOR else "wall"
                chars.append(mapping[key])
            elif tile.tile_type == TileType.WALKABLE:
                chars.append(mapping["walkable"])
            else:
                chars.append(mapping["blocked"])
        lines.append("".join(chars))
    return "\n".join(lines)


def is_walkable(tile_map: TileMap, row: int, col: int) -> bool:
    """Return True if (row, col) is inside the map and Walkable. Never raises."""
    tile = tile_map.safe_get(row, col)
    return tile is not None and tile.tile_type == TileType.WALKABLE


def step(tile_map: TileMap, position: Tuple[int, int], direction: str) -> Tuple[int, int]:
    """Move one tile in ``direction`` if the destination is walkable.

    Returns the new position, or ``position`` unchanged when the move is
    blocked. Raises KeyError for an unknown direction.
    """
    dr, dc = DIRECTIONS[direction]
    row, col = position[0] + dr, position[1] + dc
    if is_walkable(tile_map, row, col):
        return row, col
    return tuple(position)


def connection_at(tile_map: TileMap, row: int, col: int) -> Optional[Connection]:
    """Connection on the tile at (row, col), or None (also when out of range)."""
    tile = tile_map.safe_get(row, col)
    return tile.connection if tile is not None else None
