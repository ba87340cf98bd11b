"""
Heuristics module.

Provides heuristic functions for guiding pathfinding:
- euclidean_heuristic: Straight-line grid distance to the finish node
"""

from pathviz.heuristics.distance import euclidean_heuristic

__all__ = ["euclidean_heuristic"]
