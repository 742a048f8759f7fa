"""
Walk through the bundled maps

Moves a player around examples/maps/init.map the way the game does: one tile
per step, only onto Walkable tiles, and through connections into other maps.

Run: uv run python examples/game_walk/run.py
"""

from pathlib import Path

from tilegrid import DEFAULT_SPAWN, JsonMapStore, connection_at, follow_connection, render_ascii, step

MAPS_DIR = Path(__file__).resolve().parent.parent / "maps"

ROUTE = ["right", "down", "right", "right", "up", "right"]


def main() -> None:
    store = JsonMapStore(MAPS_DIR)
    current = "init"
    tile_map = store.load(current)
    position = DEFAULT_SPAWN
    print(render_ascii(tile_map))

    for direction in ROUTE:
        new_position = step(tile_map, position, direction)
        if new_position == position:
            print(f"{direction}: blocked at {position}")
            continue
        position = new_position
        print(f"{direction}: {position}")

        connection = connection_at(tile_map, *position)
        if connection is not None:
            tile_map, position = follow_connection(store, connection)
            current = connection.target_map
            print(f"Entered {current} at {position}")
            print(render_ascii(tile_map))


if __name__ == "__main__":
    main()
