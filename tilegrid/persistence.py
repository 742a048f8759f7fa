"""
Map persistence: the ``.map`` codec and pluggable named-map stores.

A map file is JSON with a fixed nesting:

```json
{
  "tiles": [
    [
      {
        "tile_type": "Walkable",
        "object": {"object_type": "Door", "rotation": [0.0, 0.0, 0.0, 1.0]},
        "floor_object": null,
        "connection": {"map": "cellar", "spawn": [1, 1]}
      }
    ]
  ]
}
```

Optional fields are written as explicit ``null``. Unknown keys are ignored on
load so hand-authored maps can carry notes. Missing required keys, wrong
nesting and unknown enum values raise ``MapParseError``; unreadable or
unwritable files raise ``MapIOError``.

Two layers:
1. Codec functions - ``dumps_map``/``loads_map`` (text) and
   ``save_map``/``load_map`` (paths). The editor uses these with paths chosen
   in its file picker.
2. ``MapStore`` - maps addressed by name, which is how a ``Connection``
   refers to its target. ``InMemoryMapStore`` for tests and tools,
   ``JsonMapStore`` for a directory of ``<name>.map`` files (bundled maps).

Usage pattern:
    tile_map = load_map("maps/init.map")
    ...
    save_map(tile_map, "maps/init.map")

    store = JsonMapStore("maps")
    target, spawn = follow_connection(store, tile.connection)
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError

from .config import Config
from .exceptions import InvalidArgumentError, MapIOError, MapParseError
from .grid import Connection, TileMap


def dumps_map(tile_map: TileMap, *, indent: Optional[int] = None) -> str:
    """Encode ``tile_map`` as map-file JSON text."""
    payload = tile_map.model_dump(mode="json", by_alias=True)
    return json.dumps(payload, indent=indent)


def loads_map(text: str) -> TileMap:
    """Decode map-file JSON text.

    Validation is strict: spawn coordinates must be JSON integers and
    rotation components JSON numbers, never strings or booleans.

    Raises:
        MapParseError: If the text is not JSON or does not match the schema
    """
    try:
        return TileMap.model_validate_json(
            text, strict=True, context={"from_file": True}
        )
    except ValidationError as exc:
        if any(error["type"] == "json_invalid" for error in exc.errors()):
            raise MapParseError(f"Map is not valid JSON: {exc}") from exc
        raise MapParseError(f"Map does not match the tile schema: {exc}") from exc


def save_map(
    tile_map: TileMap,
    destination: Path | str,
    *,
    indent: Optional[int] = Config.MAP_INDENT,
) -> None:
    """Write ``tile_map`` to ``destination``.

    Raises:
        MapIOError: If the destination cannot be written
    """
    path = Path(destination)
    text = dumps_map(tile_map, indent=indent)
    try:
        path.write_text(text, "utf-8")
    except OSError as exc:
        raise MapIOError(f"Could not write map to {path}: {exc}") from exc


def load_map(source: Path | str) -> TileMap:
    """Read a map from ``source``.

    Raises:
        MapIOError: If the file cannot be read
        MapParseError: If the content does not match the map schema
    """
    path = Path(source)
    try:
        text = path.read_text("utf-8")
    except UnicodeDecodeError as exc:
        raise MapParseError(f"Map file {path} is not UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise MapIOError(f"Could not read map from {path}: {exc}") from exc
    return loads_map(text)


class MapStore(ABC):
    """Abstract base class for maps addressed by name.

    A ``Connection`` names its target map; a store turns that name into a
    ``TileMap``. Stores never check that connections point at maps that exist.

    Concrete implementations:
    - InMemoryMapStore: dict-backed, copies on the way in and out
    - JsonMapStore: one ``<name>.map`` file per map in a directory
    """

    @abstractmethod
    def save(self, name: str, tile_map: TileMap) -> None:
        """
        Store ``tile_map`` under ``name``, replacing any previous map.

        Raises:
            MapIOError: If the map cannot be written
        """
        pass

    @abstractmethod
    def load(self, name: str) -> TileMap:
        """
        Return the map stored under ``name``.

        Raises:
            MapIOError: If no such map exists or it cannot be read
            MapParseError: If the stored content is malformed
        """
        pass

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Return True if a map is stored under ``name``."""
        pass

    @abstractmethod
    def list_maps(self) -> List[str]:
        """Return stored map names in sorted order."""
        pass


class InMemoryMapStore(MapStore):
    """Dict-based store; maps are deep-copied so callers cannot alias them."""

    def __init__(self) -> None:
        self.maps: Dict[str, TileMap] = {}

    def save(self, name: str, tile_map: TileMap) -> None:
        self.maps[name] = tile_map.copy()

    def load(self, name: str) -> TileMap:
        if name not in self.maps:
            raise MapIOError(f"Map '{name}' not found in memory store")
        return self.maps[name].copy()

    def exists(self, name: str) -> bool:
        return name in self.maps

    def list_maps(self) -> List[str]:
        return sorted(self.maps)


class JsonMapStore(MapStore):
    """Directory of ``<name>.map`` files.

    ```
    {base_path}/
      init.map
      cellar.map
    ```
    The directory is created on first save. Names may not contain path
    separators.
    """

    def __init__(self, base_path: Path | str | None = None, *, indent: Optional[int] = Config.MAP_INDENT):
        self.base_path = Path(base_path) if base_path is not None else Config.MAPS_DIR
        self.indent = indent

    def path_for(self, name: str) -> Path:
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise InvalidArgumentError(f"Invalid map name: {name!r}")
        return self.base_path / f"{name}{Config.MAP_EXTENSION}"

    def save(self, name: str, tile_map: TileMap) -> None:
        path = self.path_for(name)
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise MapIOError(f"Could not create map directory {self.base_path}: {exc}") from exc
        save_map(tile_map, path, indent=self.indent)

    def load(self, name: str) -> TileMap:
        return load_map(self.path_for(name))

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def list_maps(self) -> List[str]:
        if not self.base_path.is_dir():
            return []
        return sorted(path.stem for path in self.base_path.glob(f"*{Config.MAP_EXTENSION}"))


def follow_connection(store: MapStore, connection: Connection) -> Tuple[TileMap, Tuple[int, int]]:
    """Load the map a connection leads to and return it with the spawn cell.

    The spawn is returned as stored; it is not checked against the target's
    size.
    """
    target = store.load(connection.target_map)
    return target, connection.spawn
