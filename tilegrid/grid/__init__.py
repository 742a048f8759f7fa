"""Tile grid data model and the algorithms that resize it."""

from .schemas import (
    IDENTITY_ROTATION,
    Connection,
    FloorObject,
    ObjectType,
    Tile,
    TileType,
    WallObject,
)
from .model import TileMap
from .bounds import (
    BoundingBox,
    GrowthOffset,
    content_bounds,
    expand_to,
    pad,
    trim,
)
from .helpers import (
    DEFAULT_SPAWN,
    DIRECTIONS,
    connection_at,
    describe_tile,
    is_walkable,
    iter_tiles,
    render_ascii,
    step,
    walkable_cells,
)

__all__ = [
    "IDENTITY_ROTATION",
    "Connection",
    "FloorObject",
    "ObjectType",
    "Tile",
    "TileType",
    "WallObject",
    "TileMap",
    "BoundingBox",
    "GrowthOffset",
    "content_bounds",
    "expand_to",
    "pad",
    "trim",
    "DEFAULT_SPAWN",
    "DIRECTIONS",
    "connection_at",
    "describe_tile",
    "is_walkable",
    "iter_tiles",
    "render_ascii",
    "step",
    "walkable_cells",
]
