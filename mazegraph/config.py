"""
Configuration constants for the Maze Graph project.

Marker characters, display settings, and data paths are defined here.
The log level can be overridden through the environment.
"""

import os
from pathlib import Path

# =============================================================================
# Maze Format
# =============================================================================

# Cell markers understood by the parser
WALL_CHAR = "*"
OPEN_CHAR = " "
START_CHAR = "A"
GOAL_CHAR = "B"

# Filler used to right-pad ragged lines (must be traversable)
FILLER_CHAR = OPEN_CHAR

# =============================================================================
# Display Configuration
# =============================================================================

# Character drawn over open cells that lie on a path
PATH_CHAR = "·"

# Character used for open cells when a node sequence is printed
OPEN_DISPLAY_CHAR = "·"

# Separator between nodes in a printed sequence
SEQUENCE_SEPARATOR = " -> "

# Width of each cell when printing a matrix
MATRIX_CELL_WIDTH = 3

# Width of the banner lines printed by the CLI
BANNER_WIDTH = 50

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of mazegraph/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (contains bundled maze files)
DATA_DIR = PROJECT_ROOT / "data"
MAZES_DIR = DATA_DIR / "mazes"

# Maze used by the CLI when no path is given
DEFAULT_MAZE_PATH = MAZES_DIR / "sample.txt"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# =============================================================================
# Helpers
# =============================================================================

def available_mazes() -> list[Path]:
    """Return the bundled maze files, sorted by name."""
    if not MAZES_DIR.exists():
        return []
    return sorted(MAZES_DIR.glob("*.txt"))
