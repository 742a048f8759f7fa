"""
Tilegrid Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Grid geometry
    # Pixel size of one tile; the editor draws and hit-tests with this value
    TILE_SIZE: int = int(os.getenv("TILEGRID_TILE_SIZE", "32"))

    # Blocked border added around the trimmed map on save
    SAVE_PADDING: int = int(os.getenv("TILEGRID_SAVE_PADDING", "1"))

    # Editor viewport used when the host does not report one
    VIEWPORT_WIDTH: float = float(os.getenv("TILEGRID_VIEWPORT_WIDTH", "1280"))
    VIEWPORT_HEIGHT: float = float(os.getenv("TILEGRID_VIEWPORT_HEIGHT", "720"))

    # Persistence
    MAP_EXTENSION: str = ".map"
    # JSON indent for saved maps; 0 or empty writes compact single-line JSON
    MAP_INDENT: int | None = int(os.getenv("TILEGRID_MAP_INDENT", "2") or 0) or None

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    MAPS_DIR: Path = Path(os.getenv("TILEGRID_MAPS_DIR", str(PROJECT_ROOT / "examples" / "maps")))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.TILE_SIZE <= 0:
            raise ValueError(
                f"TILEGRID_TILE_SIZE must be a positive integer, got {cls.TILE_SIZE}"
            )

        if cls.SAVE_PADDING < 0:
            raise ValueError(
                f"TILEGRID_SAVE_PADDING must not be negative, got {cls.SAVE_PADDING}"
            )

        if cls.VIEWPORT_WIDTH <= 0 or cls.VIEWPORT_HEIGHT <= 0:
            raise ValueError(
                "TILEGRID_VIEWPORT_WIDTH and TILEGRID_VIEWPORT_HEIGHT must be positive"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Tilegrid Configuration:",
            f"  Tile Size: {cls.TILE_SIZE}px",
            f"  Save Padding: {cls.SAVE_PADDING}",
            f"  Viewport: {cls.VIEWPORT_WIDTH:g}x{cls.VIEWPORT_HEIGHT:g}",
            f"  Maps Directory: {cls.MAPS_DIR}",
        ]
        return "\n".join(lines)
