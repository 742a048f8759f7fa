"""
Command-line tools for ``.map`` files.

Usage:
    tilegrid info maps/init.map
    tilegrid render maps/init.map
    tilegrid normalize drafts/cellar.map maps/cellar.map --padding 1
    tilegrid new maps/blank.map --rows 5 --cols 8
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import Config
from .exceptions import TileGridError
from .grid import TileMap, TileType, content_bounds, iter_tiles, pad, render_ascii, trim
from .logging_utils import log_error, log_info, log_success
from .persistence import load_map, save_map


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tilegrid", description="Inspect and prepare tile maps")
    subparsers = parser.add_subparsers(dest="command", required=True)

    info = subparsers.add_parser("info", help="Print map size and tile counts")
    info.add_argument("path", help="Map file to inspect")

    render = subparsers.add_parser("render", help="Print the map as ASCII")
    render.add_argument("path", help="Map file to render")

    normalize = subparsers.add_parser(
        "normalize", help="Trim a map to its content and add a blocked border"
    )
    normalize.add_argument("source", help="Map file to read")
    normalize.add_argument("destination", help="Map file to write")
    normalize.add_argument(
        "--padding",
        type=int,
        default=Config.SAVE_PADDING,
        help="Border width in tiles (default: %(default)s)",
    )

    new = subparsers.add_parser("new", help="Write a rectangular map of one tile type")
    new.add_argument("destination", help="Map file to write")
    new.add_argument("--rows", type=int, required=True)
    new.add_argument("--cols", type=int, required=True)
    new.add_argument(
        "--walkable",
        action="store_true",
        help="Fill with Walkable tiles instead of Blocked",
    )

    return parser.parse_args(argv)


def _info(tile_map: TileMap) -> List[str]:
    rows, cols = tile_map.size
    counts = {"walkable": 0, "objects": 0, "floor_objects": 0, "connections": 0}
    for _, _, tile in iter_tiles(tile_map):
        counts["walkable"] += tile.tile_type == TileType.WALKABLE
        counts["objects"] += tile.object is not None
        counts["floor_objects"] += tile.floor_object is not None
        counts["connections"] += tile.connection is not None

    lines = [f"Size: {rows}x{cols}"]
    if not tile_map.is_rectangular:
        lines.append("Warning: rows have different lengths")
    box = content_bounds(tile_map)
    if box is not None:
        lines.append(
            f"Content: rows {box.top}-{box.bottom}, cols {box.left}-{box.right}"
        )
    lines.extend(
        f"{key.replace('_', ' ').title()}: {value}" for key, value in counts.items()
    )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        Config.validate()
        if args.command == "info":
            tile_map = load_map(args.path)
            for line in _info(tile_map):
                log_info(line)
        elif args.command == "render":
            print(render_ascii(load_map(args.path)))
        elif args.command == "normalize":
            tile_map = load_map(args.source)
            trim(tile_map)
            pad(tile_map, args.padding)
            save_map(tile_map, args.destination)
            rows, cols = tile_map.size
            log_success(f"Wrote {rows}x{cols} map to {args.destination}")
        elif args.command == "new":
            tile_type = TileType.WALKABLE if args.walkable else TileType.BLOCKED
            tile_map = TileMap.filled(args.rows, args.cols, tile_type)
            save_map(tile_map, args.destination)
            log_success(f"Wrote {args.rows}x{args.cols} map to {args.destination}")
    except (TileGridError, ValueError) as exc:
        log_error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
