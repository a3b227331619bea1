"""Logging utilities for gridwalk.

Provides color-coded console output so search diagnostics stand apart from
rendered grids and command line results.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for message types
    BLUE = "\033[94m"      # Search diagnostics (expansions, bounds)
    RED = "\033[91m"       # Errors and missing paths
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if GRIDWALK_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("GRIDWALK_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_search(message: str) -> None:
    """Log a search diagnostic (blue)."""
    print(colored(f"{LOG_TAG_SEARCH} {message}", Color.BLUE))


def log_error(message: str) -> None:
    """Log an error or a failed search (red)."""
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


# Markers for message types (color-blind accessible)
LOG_TAG_SEARCH = "[•]"   # Search diagnostic
LOG_TAG_ERROR = "[!]"    # Error/no path
LOG_TAG_SUCCESS = "[✓]"  # Success
LOG_TAG_INFO = "[i]"     # Information
