"""
Gridwalk Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Library configuration loaded from environment variables."""

    # Rendering
    # Width of a rendered cell when the printer is not told otherwise
    DEFAULT_CELL_WIDTH: int = int(os.getenv("GRIDWALK_CELL_WIDTH", "1"))

    # Logging
    LOG_LEVEL: str = os.getenv("GRIDWALK_LOG_LEVEL", "INFO")

    @classmethod
    def debug_search(cls) -> bool:
        """Whether searches should print a diagnostic summary.

        Read on every call so tests and callers can toggle it at runtime.
        """
        return bool(os.getenv("DEBUG_SEARCH"))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.DEFAULT_CELL_WIDTH < 1:
            raise ValueError(
                "GRIDWALK_CELL_WIDTH must be at least 1 "
                f"(got {cls.DEFAULT_CELL_WIDTH})"
            )

        if cls.LOG_LEVEL.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
            raise ValueError(
                f"GRIDWALK_LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR (got {cls.LOG_LEVEL})"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Gridwalk Configuration:",
            f"  Default Cell Width: {cls.DEFAULT_CELL_WIDTH}",
            f"  Log Level: {cls.LOG_LEVEL}",
            f"  Debug Search: {'on' if cls.debug_search() else 'off'}",
        ]
        return "\n".join(lines)
