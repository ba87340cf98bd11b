"""
Dijkstra's algorithm (label-correcting shortest path).

Also provides the shared best-first loop used by A*: the two differ only
in how the next node to expand is ranked.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from pathviz.algorithms.base import SearchResult, expansion_trace, no_path, path_from_parents
from pathviz.graph.translator import AdjacencyMapping
from pathviz.trace import SINGLE, Outcome, TraceItem

logger = logging.getLogger(__name__)


def _lowest_cost_node(
    costs: dict[str, float],
    processed: set[str],
    finish: str,
    estimate: Callable[[str], float] | None,
) -> str | None:
    """
    Pick the unprocessed node with the lowest known cost (plus estimate).

    The finish is skipped while it is still unreachable. Ties go to the
    node that entered the cost table first.
    """
    lowest = None
    lowest_rank = math.inf

    for label, cost in costs.items():
        if label in processed:
            continue
        if label == finish and cost == math.inf:
            continue

        rank = cost + estimate(label) if estimate else cost
        if lowest is None or rank < lowest_rank:
            lowest = label
            lowest_rank = rank

    return lowest


def best_first_search(
    mapping: AdjacencyMapping,
    estimate: Callable[[str], float] | None = None,
) -> SearchResult:
    """
    Expand nodes cheapest-first until the finish is selected.

    Args:
        mapping: Graph snapshot to search
        estimate: Optional heuristic added to the known cost when ranking

    Returns:
        SearchResult; the trace shows the best known path after every expansion
    """
    start, finish = mapping.start, mapping.finish

    costs: dict[str, float] = {finish: math.inf}
    costs.update(mapping.children(start))
    parents: dict[str, str | None] = {finish: None}
    for child in mapping.children(start):
        parents[child] = start

    processed = {start}
    trace: list[TraceItem] = [SINGLE]
    iterations = 0

    node = _lowest_cost_node(costs, processed, finish, estimate)
    while node is not None:
        iterations += 1
        cost_to_node = costs[node]

        for child, weight in mapping.children(node).items():
            if child == start:
                continue
            cost_to_child = cost_to_node + weight
            if child not in costs or cost_to_child < costs[child]:
                costs[child] = cost_to_child
                parents[child] = node

        processed.add(node)
        trace.extend(expansion_trace(path_from_parents(node, parents, start)))

        if node == finish:
            break
        node = _lowest_cost_node(costs, processed, finish, estimate)

    if parents[finish] is None:
        return no_path(trace, iterations)

    return SearchResult(
        outcome=Outcome.SUCCESS,
        path=path_from_parents(finish, parents, start),
        trace=trace,
        cost=int(costs[finish]),
        iterations=iterations,
    )


def dijkstra(mapping: AdjacencyMapping) -> SearchResult:
    """Shortest path from start to finish over non-negative edge costs."""
    result = best_first_search(mapping)
    logger.debug(f"Dijkstra: {result.outcome.value} after {result.iterations} expansions")
    return result
