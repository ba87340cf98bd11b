"""
Algorithms module.

Provides the six search strategies over an AdjacencyMapping:
- dijkstra: Shortest path, cheapest-first expansion
- astar: Cheapest-first expansion guided by straight-line distance
- dfs: Exhaustive depth-first search over all simple paths
- bfs: Exhaustive breadth-first search over all simple paths
- greedy: Cheapest outgoing edge at every step
- smart_greedy: Cheapest outgoing edge into an unvisited node
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from pathviz.algorithms.astar import astar
from pathviz.algorithms.base import SearchResult, no_path
from pathviz.algorithms.bfs import bfs
from pathviz.algorithms.dfs import dfs
from pathviz.algorithms.dijkstra import dijkstra
from pathviz.algorithms.greedy import greedy
from pathviz.algorithms.smart_greedy import smart_greedy
from pathviz.graph.model import Node
from pathviz.graph.translator import AdjacencyMapping
from pathviz.trace import Visit

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """Selectable search strategies, keyed by their three-letter code."""

    DIJKSTRA = "dij"
    GREEDY = "gre"
    SMART_GREEDY = "sma"
    DFS = "dfs"
    BFS = "bfs"
    ASTAR = "ast"

    @classmethod
    def from_key(cls, key: str) -> Algorithm:
        """
        Look up an algorithm by its key.

        Raises:
            ValueError: If the key is unknown
        """
        try:
            return cls(key)
        except ValueError:
            available = ", ".join(a.value for a in cls)
            raise ValueError(f"Unknown algorithm '{key}'. Available: {available}") from None

    @property
    def title(self) -> str:
        return _INFO[self][0]

    @property
    def description(self) -> str:
        """Human-readable description of the strategy."""
        return _INFO[self][1]


_INFO = {
    Algorithm.DIJKSTRA: (
        "dijkstra's algorithm",
        "Stores the current cost and predecessor of every known node and always "
        "expands the cheapest one, replacing both whenever a cheaper route is "
        "found. Always produces an optimal path.",
    ),
    Algorithm.GREEDY: (
        "greedy (naive)",
        "Takes the cheapest outgoing edge at every node, or the edge straight to "
        "the target if there is one. Cannot revert a step, so it may run into a "
        "dead end or a cycle.",
    ),
    Algorithm.SMART_GREEDY: (
        "greedy (smart)",
        "Like greedy (naive), but never takes an edge back to a node it already "
        "visited. Still cannot revert a step when it reaches a dead end.",
    ),
    Algorithm.DFS: (
        "depth first search",
        "Follows every branch as far as possible before backtracking, finding "
        "every path to the target. The cheapest one is returned, so the result "
        "is optimal.",
    ),
    Algorithm.BFS: (
        "breadth first search",
        "Explores all nodes at the current depth before moving one level deeper, "
        "finding every path to the target. The cheapest one is returned, so the "
        "result is optimal.",
    ),
    Algorithm.ASTAR: (
        "a* star algorithm",
        "Works like dijkstra's algorithm but ranks nodes by known cost plus their "
        "straight-line distance to the target, skipping nodes far away from it. "
        "Optimal when edge costs relate to the real distances.",
    ),
}

_IMPLEMENTATIONS = {
    Algorithm.DIJKSTRA: dijkstra,
    Algorithm.GREEDY: greedy,
    Algorithm.SMART_GREEDY: smart_greedy,
    Algorithm.DFS: dfs,
    Algorithm.BFS: bfs,
}


def run(
    algorithm: Algorithm | str,
    mapping: AdjacencyMapping,
    nodes: Sequence[Node] | None = None,
    finish_node: Node | None = None,
) -> SearchResult:
    """
    Run one search strategy over a graph snapshot.

    A start node without outgoing edges short-circuits to a no-path result
    without invoking the algorithm.

    Args:
        algorithm: Algorithm member or its three-letter key
        mapping: Graph snapshot to search
        nodes: Node coordinates for the A* heuristic
        finish_node: Finish node for the A* heuristic

    Returns:
        SearchResult with label path and replay trace

    Raises:
        ValueError: If the algorithm is unknown or A* lacks nodes/finish_node
    """
    if not isinstance(algorithm, Algorithm):
        algorithm = Algorithm.from_key(algorithm)

    if not mapping.children(mapping.start):
        logger.info(f"Start node {mapping.start!r} has no outgoing edges")
        return no_path([Visit(mapping.start)])

    if algorithm is Algorithm.ASTAR:
        if nodes is None or finish_node is None:
            raise ValueError("A* needs the node list and the finish node for its heuristic")
        return astar(mapping, nodes, finish_node)

    return _IMPLEMENTATIONS[algorithm](mapping)


__all__ = [
    "Algorithm",
    "SearchResult",
    "astar",
    "bfs",
    "dfs",
    "dijkstra",
    "greedy",
    "run",
    "smart_greedy",
]
