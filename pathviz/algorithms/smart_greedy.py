"""
Revisit-avoiding greedy walk.

Same choice rule as the naive greedy walk, but edges into nodes already on
the walk are never taken. A node whose every outgoing edge leads back into
the walk ends the search as a cycle.
"""

from __future__ import annotations

import logging

from pathviz.algorithms.base import SearchResult
from pathviz.algorithms.greedy import cheapest_step, cycle_result, deadlock_result
from pathviz.graph.translator import AdjacencyMapping
from pathviz.trace import SINGLE, Outcome, visits

logger = logging.getLogger(__name__)


def smart_greedy(mapping: AdjacencyMapping) -> SearchResult:
    finish = mapping.finish
    walk = [mapping.start]
    visited = {mapping.start}
    cost = 0
    iterations = 0

    while walk[-1] != finish:
        iterations += 1
        children = mapping.children(walk[-1])

        if not children:
            logger.debug(f"Smart greedy: dead end at {walk[-1]!r}")
            return deadlock_result(walk, iterations)

        if all(child in visited for child in children):
            # show the edge the naive walk would have taken
            child, _ = cheapest_step(children, finish)
            logger.debug(f"Smart greedy: every edge from {walk[-1]!r} leads back")
            return cycle_result(walk, child, iterations)

        child, weight = cheapest_step(children, finish, exclude=visited)
        cost += weight
        walk.append(child)
        visited.add(child)

    return SearchResult(Outcome.SUCCESS, walk, [SINGLE, *visits(walk)], cost, iterations)
