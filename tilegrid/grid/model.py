"""The tile map container.

``TileMap`` is the persisted document (``{"tiles": [[...], ...]}``) and the
object an editing session mutates. Rows are the vertical axis, columns the
horizontal one; ``tiles[row][col]``. Writes never grow the map: callers use
``tilegrid.grid.bounds.expand_to`` first.
"""

from __future__ import annotations

from typing import ClassVar, List, Optional, Tuple

from pydantic import Field

from ..exceptions import OutOfRangeError
from .schemas import Tile, TileType, _MapFileModel


class TileMap(_MapFileModel):
    """Row-major 2D grid of tiles."""

    required_on_load: ClassVar[Tuple[str, ...]] = ("tiles",)

    tiles: List[List[Tile]] = Field(
        default_factory=list,
        description="Rows top-to-bottom, each row left-to-right",
    )

    @classmethod
    def empty(cls) -> "TileMap":
        """Map used when a new editing session starts."""
        return cls(tiles=[])

    @classmethod
    def filled(cls, rows: int, cols: int, tile_type: TileType = TileType.BLOCKED) -> "TileMap":
        """Rectangular map of ``rows`` x ``cols`` fresh tiles of ``tile_type``."""
        if rows < 0 or cols < 0:
            raise ValueError(f"Map dimensions must not be negative, got {rows}x{cols}")
        return cls(tiles=[[Tile(tile_type=tile_type) for _ in range(cols)] for _ in range(rows)])

    @property
    def row_count(self) -> int:
        return len(self.tiles)

    @property
    def column_count(self) -> int:
        """Width of row 0, or 0 for a map without rows."""
        return len(self.tiles[0]) if self.tiles else 0

    @property
    def size(self) -> Tuple[int, int]:
        return self.row_count, self.column_count

    @property
    def is_rectangular(self) -> bool:
        width = self.column_count
        return all(len(row) == width for row in self.tiles)

    def is_within(self, row: int, col: int) -> bool:
        """Check if (row, col) addresses an existing tile. Never raises."""
        return 0 <= row < len(self.tiles) and 0 <= col < len(self.tiles[row])

    def get_tile(self, row: int, col: int) -> Tile:
        """Return the tile at (row, col) by reference.

        Raises OutOfRangeError when the address is outside the map.
        """
        if not self.is_within(row, col):
            raise OutOfRangeError(row, col, self.row_count, self.column_count)
        return self.tiles[row][col]

    def safe_get(self, row: int, col: int) -> Optional[Tile]:
        """Return the tile at (row, col), or None when out of range."""
        if not self.is_within(row, col):
            return None
        return self.tiles[row][col]

    def set_tile(self, row: int, col: int, tile: Tile) -> None:
        """Replace the tile at (row, col) with a copy of ``tile``.

        Raises OutOfRangeError when the address is outside the map.
        """
        if not isinstance(tile, Tile):
            raise TypeError(f"tile must be a Tile, got {type(tile).__name__}")
        if not self.is_within(row, col):
            raise OutOfRangeError(row, col, self.row_count, self.column_count)
        self.tiles[row][col] = tile.model_copy(deep=True)

    def copy(self) -> "TileMap":
        """Deep copy; edits to the copy never reach this map."""
        return self.model_copy(deep=True)
