"""Algorithms that change the extent of a ``TileMap``.

All three operations mutate the map in place and leave it rectangular:

- ``expand_to`` grows the map until it contains an address, inserting rows or
  columns at the front when the address is negative.
- ``trim`` crops the map to the bounding box of non-Blocked tiles.
- ``pad`` surrounds the map with a uniform border of default tiles.

The editor saves maps as ``trim`` followed by ``pad(1)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..exceptions import InvalidArgumentError
from .model import TileMap
from .schemas import Tile, TileType


@dataclass(frozen=True)
class GrowthOffset:
    """Rows and columns inserted before the old origin by ``expand_to``.

    Every tile that was at (r, c) before the call is at
    (r + rows, c + cols) after it. Anything outside the map that stores grid
    coordinates (a camera, a cursor, a spawn point) must be shifted by the same
    amount.
    """

    rows: int = 0
    cols: int = 0

    @property
    def shifted(self) -> bool:
        return self.rows > 0 or self.cols > 0


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive row/column range of a region of the map."""

    top: int
    left: int
    bottom: int
    right: int

    @property
    def rows(self) -> int:
        return self.bottom - self.top + 1

    @property
    def cols(self) -> int:
        return self.right - self.left + 1


def _width(tile_map: TileMap) -> int:
    # Widest row, so a ragged hand-authored map never loses tiles when rebuilt
    return max((len(row) for row in tile_map.tiles), default=0)


def _rebuild(
    tile_map: TileMap,
    rows: int,
    cols: int,
    row_offset: int,
    col_offset: int,
) -> List[List[Tile]]:
    """Return a ``rows`` x ``cols`` grid with the old tiles placed at the offset."""
    new_tiles = [[Tile() for _ in range(cols)] for _ in range(rows)]
    for r, row in enumerate(tile_map.tiles):
        for c, tile in enumerate(row):
            new_tiles[r + row_offset][c + col_offset] = tile
    return new_tiles


def expand_to(tile_map: TileMap, target_row: int, target_col: int) -> GrowthOffset:
    """Grow ``tile_map`` so that (target_row, target_col) is inside it.

    Per axis the target is either past the end (append default rows/columns),
    negative (insert ``-target`` default rows/columns at the front, shifting
    every existing tile) or already inside (unchanged). The new extent is
    computed before the map is touched and swapped in as a whole.

    Returns:
        The number of rows/columns inserted at the front. A target that is
        already inside a rectangular map returns ``GrowthOffset(0, 0)`` and
        leaves the map as it was.
    """
    height = tile_map.row_count
    width = _width(tile_map)

    row_offset = 0
    new_height = height
    if target_row < 0:
        row_offset = -target_row
        new_height = height + row_offset
    elif target_row >= height:
        new_height = target_row + 1

    col_offset = 0
    new_width = width
    if target_col < 0:
        col_offset = -target_col
        new_width = width + col_offset
    elif target_col >= width:
        new_width = target_col + 1

    unchanged = (new_height, new_width, row_offset, col_offset) == (height, width, 0, 0)
    if unchanged and tile_map.is_rectangular:
        return GrowthOffset()

    tile_map.tiles = _rebuild(tile_map, new_height, new_width, row_offset, col_offset)
    return GrowthOffset(rows=row_offset, cols=col_offset)


def content_bounds(tile_map: TileMap) -> Optional[BoundingBox]:
    """Bounding box of every tile that is not Blocked.

    Returns None when the map has no non-Blocked tile.
    """
    top = bottom = left = right = None
    for r, row in enumerate(tile_map.tiles):
        for c, tile in enumerate(row):
            if tile.tile_type == TileType.BLOCKED:
                continue
            if top is None:
                top = r
            bottom = r
            left = c if left is None else min(left, c)
            right = c if right is None else max(right, c)

    if top is None:
        return None
    return BoundingBox(top=top, left=left, bottom=bottom, right=right)


def trim(tile_map: TileMap) -> Optional[BoundingBox]:
    """Crop ``tile_map`` to the bounding box of its non-Blocked tiles.

    A map without any non-Blocked tile keeps its full row range and the full
    column range of row 0, so an all-Blocked map is left as it is rather than
    collapsed. An empty map is a no-op.

    Returns:
        The box that was kept, in coordinates of the map before the call, or
        None for a map without rows.
    """
    if not tile_map.tiles:
        return None

    box = content_bounds(tile_map)
    if box is None:
        box = BoundingBox(
            top=0,
            left=0,
            bottom=tile_map.row_count - 1,
            right=tile_map.column_count - 1,
        )

    cropped: List[List[Tile]] = []
    for row in tile_map.tiles[box.top:box.bottom + 1]:
        cropped.append([
            row[c] if c < len(row) else Tile()
            for c in range(box.left, box.right + 1)
        ])
    tile_map.tiles = cropped
    return box


def pad(tile_map: TileMap, margin: int) -> None:
    """Surround ``tile_map`` with ``margin`` default tiles on every side.

    The result is ``(rows + 2*margin) x (cols + 2*margin)`` with the original
    tiles at offset (margin, margin). A margin of 0 copies the map unchanged.

    Raises InvalidArgumentError for a negative or non-integer margin.
    """
    if isinstance(margin, bool) or not isinstance(margin, int):
        raise InvalidArgumentError(f"Pad margin must be an integer, got {margin!r}")
    if margin < 0:
        raise InvalidArgumentError(f"Pad margin must not be negative, got {margin}")

    rows = tile_map.row_count + 2 * margin
    cols = _width(tile_map) + 2 * margin
    tile_map.tiles = _rebuild(tile_map, rows, cols, margin, margin)
