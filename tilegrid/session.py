"""
Editor session: the map editor's control flow over the grid engine.

The host application (window, renderer, file picker) forwards input here:

- ``EditorSession.start(path)`` when the editor screen opens, with the file the
  user picked or None for a new map
- ``click(cursor)`` on a left click: map the pixel to a cell, grow the map if
  the cell is outside it, write the tile, re-anchor the camera
- ``drag``/``scroll`` for camera navigation
- ``save(path)`` on the save trigger: trim and pad a copy, write it

After any call that returns, ``session.tile_map`` is what the renderer should
draw (``tilegrid.grid.iter_tiles``) and ``session.camera`` where to draw it.
A session owns its map exclusively and is not thread-safe.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from .config import Config
from .coordinates import CameraState, Point, anchor_camera, cursor_to_cell
from .exceptions import InvalidArgumentError, MapIOError, MapParseError
from .grid import Tile, TileMap, TileType, expand_to, pad, trim
from .logging_utils import log_deterministic, log_error, log_info, log_success
from .persistence import load_map, save_map


class EditorSession:
    """One editing session over one map."""

    def __init__(
        self,
        tile_map: Optional[TileMap] = None,
        *,
        camera: Optional[CameraState] = None,
        viewport: Optional[Point] = None,
        tile_size: int = Config.TILE_SIZE,
    ):
        if isinstance(tile_size, bool) or tile_size <= 0:
            raise InvalidArgumentError(f"Tile size must be positive, got {tile_size}")
        self.tile_map = tile_map if tile_map is not None else TileMap.empty()
        self.camera = camera or CameraState()
        self.viewport: Point = viewport or (Config.VIEWPORT_WIDTH, Config.VIEWPORT_HEIGHT)
        self.tile_size = tile_size
        # Tile type written by a plain click
        self.brush: TileType = TileType.WALKABLE

    @classmethod
    def start(cls, input_path: Path | str | None = None, **kwargs) -> "EditorSession":
        """Open a session on ``input_path``, or on a new empty map.

        A file that cannot be read or parsed is reported and the session
        starts with an empty map instead.
        """
        if input_path is None:
            log_info("Starting new empty map")
            return cls(**kwargs)

        try:
            tile_map = load_map(input_path)
        except (MapParseError, MapIOError) as exc:
            log_error(f"Failed to load map from {input_path}: {exc}")
            log_info("Starting new empty map")
            return cls(**kwargs)

        rows, cols = tile_map.size
        log_info(f"Loaded {rows}x{cols} map from {input_path}")
        return cls(tile_map, **kwargs)

    def click(self, cursor: Point, tile: Optional[Tile] = None) -> Tuple[int, int]:
        """Paint the cell under ``cursor``.

        Writes ``tile`` if given, otherwise sets the cell's type to the current
        brush and keeps its object, floor object and connection.

        Returns:
            The (row, col) written, in coordinates after any growth.
        """
        if tile is not None and not isinstance(tile, Tile):
            raise TypeError(f"tile must be a Tile, got {type(tile).__name__}")

        row, col = cursor_to_cell(cursor, self.viewport, self.camera, self.tile_size)

        offset = expand_to(self.tile_map, row, col)
        row += offset.rows
        col += offset.cols
        if offset.shifted:
            rows, cols = self.tile_map.size
            log_deterministic(
                f"Grew map to {rows}x{cols} "
                f"({offset.rows} row(s), {offset.cols} column(s) before origin)"
            )
            self.camera = anchor_camera(cursor, self.viewport, self.camera, offset)

        if tile is None:
            tile = self.tile_map.get_tile(row, col).model_copy(update={"tile_type": self.brush})
        self.tile_map.set_tile(row, col, tile)
        return row, col

    def set_tile(self, row: int, col: int, tile: Tile) -> None:
        """Write a tile at an existing address; raises OutOfRangeError otherwise."""
        self.tile_map.set_tile(row, col, tile)

    def drag(self, dx: float, dy: float) -> None:
        self.camera.drag(dx, dy)

    def scroll(self, amount: float) -> None:
        self.camera.scroll(amount)

    def resize_viewport(self, width: float, height: float) -> None:
        self.viewport = (width, height)

    def save(
        self,
        output_path: Path | str | None,
        *,
        padding: int = Config.SAVE_PADDING,
    ) -> Optional[TileMap]:
        """Write a trimmed, padded copy of the map to ``output_path``.

        The live map keeps its extent so editing can continue where it was.
        A None path (picker cancelled) does nothing.

        Returns:
            The map as written, or None when nothing was saved.

        Raises:
            MapIOError: If the file cannot be written
        """
        if output_path is None:
            return None

        normalized = self.tile_map.copy()
        trim(normalized)
        pad(normalized, padding)
        save_map(normalized, output_path)

        rows, cols = normalized.size
        log_success(f"Saved {rows}x{cols} map to {output_path}")
        return normalized
