"""Screen-to-grid coordinate mapping for the editor.

A cursor position in viewport pixels becomes a grid cell as follows, per axis
(x gives the column, y gives the row):

    local  = cursor - viewport / 2
    world  = local + camera.pan
    scaled = world * camera.zoom
    cell   = floor(scaled / tile_size)

Cells are signed. A negative cell means the click landed before the map's
origin and the map has to grow at the front (``expand_to``). Front growth
renumbers every cell, so the camera is re-anchored afterwards with
``anchor_camera`` to keep the clicked pixel on the clicked cell.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Tuple

from .config import Config
from .grid import GrowthOffset

TILE_SIZE: int = Config.TILE_SIZE

# Fraction of a mouse-drag delta applied to the pan, scaled by zoom
PAN_SENSITIVITY = 0.2
# Fraction of the current zoom added per scroll unit
ZOOM_SENSITIVITY = 0.1
MIN_ZOOM = 0.05

Point = Tuple[float, float]


@dataclass
class CameraState:
    """Editor camera: pan offset in world units and a uniform zoom factor."""

    pan_x: float = 0.0
    pan_y: float = 0.0
    zoom: float = 1.0

    def drag(self, dx: float, dy: float) -> None:
        """Pan opposite to a mouse drag so the map follows the pointer."""
        self.pan_x -= dx * self.zoom * PAN_SENSITIVITY
        self.pan_y -= dy * self.zoom * PAN_SENSITIVITY

    def scroll(self, amount: float) -> None:
        """Change zoom proportionally to its current value."""
        self.zoom = max(self.zoom + amount * self.zoom * ZOOM_SENSITIVITY, MIN_ZOOM)


def _scaled(cursor: float, viewport: float, pan: float, zoom: float) -> float:
    local = cursor - viewport / 2
    world = local + pan
    return world * zoom


def cursor_to_cell(
    cursor: Point,
    viewport: Point,
    camera: CameraState,
    tile_size: int = TILE_SIZE,
) -> Tuple[int, int]:
    """Return the (row, col) under ``cursor``.

    Args:
        cursor: (x, y) pixel position inside the viewport, origin top-left
        viewport: (width, height) of the viewport in pixels
        camera: Current pan/zoom
        tile_size: Tile edge in pixels

    Returns:
        Signed (row, col); either may be negative or past the map's extent.
    """
    x = _scaled(cursor[0], viewport[0], camera.pan_x, camera.zoom)
    y = _scaled(cursor[1], viewport[1], camera.pan_y, camera.zoom)
    return math.floor(y / tile_size), math.floor(x / tile_size)


def anchor_camera(
    cursor: Point,
    viewport: Point,
    camera: CameraState,
    offset: GrowthOffset,
) -> CameraState:
    """Re-anchor the camera after ``expand_to`` inserted rows/columns at the front.

    On every axis that grew at the front the pan is recomputed from the
    clicked pixel so that it maps to cell 0, the freshly inserted cell the
    click created. Axes that did not shift keep their pan. Returns a new
    camera; ``camera`` is not modified.
    """
    pan_x = camera.pan_x
    pan_y = camera.pan_y
    if offset.cols > 0:
        pan_x = -(cursor[0] - viewport[0] / 2)
    if offset.rows > 0:
        pan_y = -(cursor[1] - viewport[1] / 2)
    return replace(camera, pan_x=pan_x, pan_y=pan_y)
