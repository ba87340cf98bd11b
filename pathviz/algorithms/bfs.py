"""
Exhaustive breadth-first search.

Expands the frontier level by level, cloning the accumulated path and cost
for every neighbor, and keeps the cheapest branch that reaches the finish.
"""

from __future__ import annotations

import logging

from pathviz.algorithms.base import SearchResult, expansion_trace, first_minimum, no_path
from pathviz.graph.translator import AdjacencyMapping
from pathviz.trace import SINGLE, Outcome, TraceItem

logger = logging.getLogger(__name__)


def bfs(mapping: AdjacencyMapping) -> SearchResult:
    """
    Cheapest start-to-finish path over all simple paths, explored breadth-first.

    Branches that reached the finish are not expanded further. The trace
    draws every branch in creation order, animating its newest edge.
    """
    start, finish = mapping.start, mapping.finish

    # Queue of (cost, path); consumed by index so it doubles as the branch log
    branches: list[tuple[int, list[str]]] = [(0, [start])]
    finish_branches: list[tuple[int, list[str]]] = []
    iterations = 0
    index = 0

    while index < len(branches):
        iterations += 1
        cost, path = branches[index]
        index += 1

        if path[-1] == finish:
            continue

        for child, weight in mapping.children(path[-1]).items():
            if child in path:
                continue

            branch = (cost + weight, path + [child])
            branches.append(branch)
            if child == finish:
                finish_branches.append(branch)

    trace: list[TraceItem] = [SINGLE]
    for _, path in branches:
        trace.extend(expansion_trace(path))

    logger.debug(
        f"BFS: {len(branches)} branches, {len(finish_branches)} reach the finish, "
        f"{iterations} expansions"
    )

    if not finish_branches:
        return no_path(trace, iterations)

    cost, path = first_minimum(finish_branches)
    return SearchResult(Outcome.SUCCESS, path, trace, cost, iterations)
