"""Error hierarchy for tilegrid.

Every error raised by the grid engine derives from ``TileGridError`` and also
from the closest builtin so callers catching ``IndexError``/``ValueError``/
``OSError`` keep working.
"""


class TileGridError(Exception):
    """Base exception for the tilegrid package."""


class OutOfRangeError(TileGridError, IndexError):
    """Raised when a tile address lies outside the current grid bounds."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        self.row = row
        self.col = col
        super().__init__(
            f"Tile address ({row}, {col}) is outside the {rows}x{cols} grid; "
            "call expand_to() before writing"
        )


class MapParseError(TileGridError, ValueError):
    """Raised when persisted map content does not match the map schema."""


class MapIOError(TileGridError, OSError):
    """Raised when a map file cannot be read or written."""


class InvalidArgumentError(TileGridError, ValueError):
    """Raised for invalid arguments such as a negative pad margin."""
