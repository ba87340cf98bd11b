"""
Configuration constants for the pathfinding visualizer.

All limits, timings, and tunable parameters are defined here.
Timing and logging can be overridden from the environment or a .env file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of pathviz/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Graph Configuration
# =============================================================================

# Letters used for node labels, uppercase block first
LABEL_LETTERS = ("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")

# Suffix tiers appended to each letter: plain, single-mark, double-mark
LABEL_SUFFIXES = ("", "'", "''")

# Hard capacity of the label enumeration (26 letters x 2 cases x 3 tiers)
MAX_NODES = 156

# Valid label syntax (used when a node is renamed)
LABEL_PATTERN = r"^[a-zA-Z]'{0,2}$"

# Edge cost bounds (inclusive)
MIN_EDGE_COST = 0
MAX_EDGE_COST = 999

# Subtracted from the euclidean node distance for default edge costs and
# the A* heuristic (roughly two node radii on the grid)
NODE_RADIUS_OFFSET = 2

# =============================================================================
# Random Graph Configuration
# =============================================================================

# Random edge costs are drawn uniformly from this range (inclusive)
RANDOM_EDGE_COST_RANGE = (1, 20)

# Grid area used by the random generator
RANDOM_GRID_WIDTH = 70
RANDOM_GRID_HEIGHT = 40

# Size presets: minimum node count, node-skip bias, extra diagonal bias,
# column spacing and nodes per column
RANDOM_GRAPH_SIZES = {
    "s": {"min_nodes": 9, "skip_bias": 0.1, "edge_bias": 0.2, "col_spacing": 16, "rows": 4},
    "m": {"min_nodes": 12, "skip_bias": 0.0, "edge_bias": 0.1, "col_spacing": 14, "rows": 5},
    "l": {"min_nodes": 20, "skip_bias": 0.2, "edge_bias": 0.0, "col_spacing": 14, "rows": 5},
}

# Circle layout presets: number of 12-node rings and the gap between the
# outer ring and the grid border
CIRCLE_GRAPH_SIZES = {
    "s": {"rings": 1, "border": 4},
    "m": {"rings": 2, "border": 4},
    "l": {"rings": 2, "border": 2},
}

# Nodes per ring and the radius ratio between two neighboring rings
CIRCLE_RING_NODES = 12
CIRCLE_RING_RATIO = 1.5

# =============================================================================
# Animation Configuration
# =============================================================================

# Delay between two visible animation steps at speed factor 1.0
BASE_DELAY_SECONDS = float(os.environ.get("PATHVIZ_BASE_DELAY", "0.5"))

# Speed slider levels -> (display name, delay factor)
# A smaller factor results in a faster animation
SPEED_PRESETS = {
    1: ("slower", 1.75),
    2: ("slow", 1.5),
    3: ("steady", 1.25),
    4: ("medium", 1.0),
    5: ("moderate", 0.5),
    6: ("fast", 0.25),
    7: ("insane", 0.05),
}

DEFAULT_SPEED_LEVEL = 4

# =============================================================================
# Visualization Configuration
# =============================================================================

DEFAULT_NODE_COLOR = "#3498db"
DEFAULT_EDGE_COLOR = "black"

# Overlay colors used by renderers
OVERLAY_COLORS = {
    "neutral": "#f1c40f",
    "success": "#2ecc71",
    "failure": "#e74c3c",
}

# Figure settings for the plotly renderer
FIGURE_NODE_SIZE = 28
FIGURE_EDGE_WIDTH = 2
FIGURE_OVERLAY_WIDTH = 5

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def speed_factor_for(level: int) -> float:
    """Return the delay factor for a speed slider level (unknown -> medium)."""
    return SPEED_PRESETS.get(level, SPEED_PRESETS[DEFAULT_SPEED_LEVEL])[1]
