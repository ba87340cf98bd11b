"""
A* search: Dijkstra's expansion loop ranked by known cost plus the
straight-line distance to the finish.
"""

from __future__ import annotations

import logging
from typing import Sequence

from pathviz.algorithms.base import SearchResult
from pathviz.algorithms.dijkstra import best_first_search
from pathviz.graph.model import Node
from pathviz.graph.translator import AdjacencyMapping
from pathviz.heuristics import euclidean_heuristic

logger = logging.getLogger(__name__)


def astar(
    mapping: AdjacencyMapping,
    nodes: Sequence[Node],
    finish_node: Node,
) -> SearchResult:
    """
    Heuristic best-first search.

    Args:
        mapping: Graph snapshot to search
        nodes: Nodes providing the coordinates for the heuristic
        finish_node: The finish node (heuristic target)

    Raises:
        ValueError: If a label of the mapping has no coordinates
    """
    estimates = euclidean_heuristic(nodes, finish_node)

    missing = [label for label in mapping.labels if label not in estimates]
    if missing:
        raise ValueError(f"No coordinates for nodes: {', '.join(missing)}")

    result = best_first_search(mapping, estimate=estimates.__getitem__)
    logger.debug(f"A*: {result.outcome.value} after {result.iterations} expansions")
    return result
