"""Pydantic schemas for a single map cell.

These models are both the in-memory tile representation and the persisted
file format, so field names here are the names written to ``.map`` files.
Construction from code fills in defaults; loading a file (validation with a
``{"from_file": True}`` context) insists on the fields listed in
``required_on_load`` so a hand-authored map cannot silently drop them.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, ClassVar, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    ValidationInfo,
    field_validator,
    model_validator,
)

IDENTITY_ROTATION: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)

# Allowed drift from |q| == 1 for rotations typed by hand into map files
_UNIT_TOLERANCE = 1e-3


class _OrderedEnum(str, Enum):
    """String enum ordered by declaration rather than by value.

    Only members of the same enum compare; ordering against a plain string
    or another enum raises TypeError instead of falling back to ``str``.
    """

    def _rank_against(self, other: object, op: str) -> Tuple[int, int]:
        if type(other) is not type(self):
            raise TypeError(
                f"'{op}' not supported between {type(self).__name__} "
                f"and {type(other).__name__}"
            )
        members = list(type(self))
        return members.index(self), members.index(other)

    def __lt__(self, other: object) -> bool:
        mine, theirs = self._rank_against(other, "<")
        return mine < theirs

    def __le__(self, other: object) -> bool:
        mine, theirs = self._rank_against(other, "<=")
        return mine <= theirs

    def __gt__(self, other: object) -> bool:
        mine, theirs = self._rank_against(other, ">")
        return mine > theirs

    def __ge__(self, other: object) -> bool:
        mine, theirs = self._rank_against(other, ">=")
        return mine >= theirs

    def __str__(self) -> str:
        return self.value


class TileType(_OrderedEnum):
    """Whether a tile can be stood on. Walkable sorts before Blocked."""

    WALKABLE = "Walkable"
    BLOCKED = "Blocked"


class ObjectType(_OrderedEnum):
    """Kind of object occupying or decorating a tile."""

    WALL = "Wall"
    DOOR = "Door"


class _MapFileModel(BaseModel):
    """Base for models that appear inside a persisted map."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    required_on_load: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def _require_fields_from_file(cls, data: Any, info: ValidationInfo) -> Any:
        if not (info.context and info.context.get("from_file")):
            return data
        if not isinstance(data, dict):
            return data
        missing = [name for name in cls.required_on_load if name not in data]
        if missing:
            raise ValueError(f"missing required field(s): {', '.join(missing)}")
        return data


class WallObject(_MapFileModel):
    """Obstructing wall or door standing on a tile."""

    required_on_load: ClassVar[Tuple[str, ...]] = ("object_type", "rotation")

    object_type: ObjectType = ObjectType.WALL
    rotation: Tuple[float, float, float, float] = Field(
        IDENTITY_ROTATION,
        description="Orientation as a unit quaternion (x, y, z, w)",
    )

    @field_validator("rotation")
    @classmethod
    def _check_unit_quaternion(
        cls, value: Tuple[float, float, float, float]
    ) -> Tuple[float, float, float, float]:
        norm = math.sqrt(sum(component * component for component in value))
        if not math.isfinite(norm) or abs(norm - 1.0) > _UNIT_TOLERANCE:
            raise ValueError(f"rotation {value} is not a unit quaternion (|q| = {norm:.4f})")
        return value


class FloorObject(_MapFileModel):
    """Non-obstructing object drawn on the floor of a tile."""

    required_on_load: ClassVar[Tuple[str, ...]] = ("object_type",)

    object_type: ObjectType = ObjectType.WALL


class Connection(_MapFileModel):
    """Portal from a tile to a spawn point in another map.

    The target map is not checked for existence or size.
    """

    required_on_load: ClassVar[Tuple[str, ...]] = ("map", "spawn")

    target_map: str = Field(..., alias="map", description="Name of the destination map")
    spawn: Tuple[NonNegativeInt, NonNegativeInt] = Field(
        ..., description="(row, column) in the destination map"
    )

    def __str__(self) -> str:
        return f"Map: {self.target_map}, Spawn: ({self.spawn[0]}, {self.spawn[1]})"


class Tile(_MapFileModel):
    """Content of one grid cell. The default tile is Blocked and empty."""

    required_on_load: ClassVar[Tuple[str, ...]] = ("tile_type",)

    tile_type: TileType = TileType.BLOCKED
    object: Optional[WallObject] = None
    floor_object: Optional[FloorObject] = None
    connection: Optional[Connection] = None

    @property
    def is_default(self) -> bool:
        return self == Tile()
