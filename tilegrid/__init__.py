"""
Tilegrid - tile-grid map model for a map editor and the game that plays its maps.

A map is a resizable 2D grid of tiles; each tile may carry a wall/door, a floor
object and a connection to another map. The editor paints tiles by mapping
cursor positions to cells, growing the map in any direction, and saves maps
trimmed to their content with a blocked border.
"""

__version__ = "0.1.0"

# Data model and bounds algorithms
from .grid import (
    IDENTITY_ROTATION,
    Connection,
    FloorObject,
    ObjectType,
    Tile,
    TileType,
    WallObject,
    TileMap,
    BoundingBox,
    GrowthOffset,
    content_bounds,
    expand_to,
    pad,
    trim,
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

# Persistence
from .persistence import (
    MapStore,
    InMemoryMapStore,
    JsonMapStore,
    dumps_map,
    loads_map,
    save_map,
    load_map,
    follow_connection,
)

# Editor
from .coordinates import TILE_SIZE, CameraState, cursor_to_cell, anchor_camera
from .session import EditorSession

# Errors
from .exceptions import (
    TileGridError,
    OutOfRangeError,
    MapParseError,
    MapIOError,
    InvalidArgumentError,
)

__all__ = [
    # Tile schema
    "IDENTITY_ROTATION",
    "Connection",
    "FloorObject",
    "ObjectType",
    "Tile",
    "TileType",
    "WallObject",
    # Grid
    "TileMap",
    "BoundingBox",
    "GrowthOffset",
    "content_bounds",
    "expand_to",
    "pad",
    "trim",
    # Grid helpers
    "DEFAULT_SPAWN",
    "DIRECTIONS",
    "connection_at",
    "describe_tile",
    "is_walkable",
    "iter_tiles",
    "render_ascii",
    "step",
    "walkable_cells",
    # Persistence
    "MapStore",
    "InMemoryMapStore",
    "JsonMapStore",
    "dumps_map",
    "loads_map",
    "save_map",
    "load_map",
    "follow_connection",
    # Editor
    "TILE_SIZE",
    "CameraState",
    "cursor_to_cell",
    "anchor_camera",
    "EditorSession",
    # Errors
    "TileGridError",
    "OutOfRangeError",
    "MapParseError",
    "MapIOError",
    "InvalidArgumentError",
]
