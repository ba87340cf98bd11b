"""
Naive greedy walk.

From the current node always take the cheapest outgoing edge; an edge
straight to the finish is taken regardless of its cost. The walk has no way
to back out of a dead end or a cycle: both end the search.
"""

from __future__ import annotations

import logging
from typing import Container

from pathviz.algorithms.base import SearchResult
from pathviz.graph.translator import AdjacencyMapping
from pathviz.trace import SINGLE, CycleMarker, DeadlockMarker, Outcome, TraceItem, visits

logger = logging.getLogger(__name__)


def cheapest_step(
    children: dict[str, int],
    finish: str,
    exclude: Container[str] = (),
) -> tuple[str, int] | None:
    """
    Choose the next node of a greedy walk.

    Returns:
        (label, cost) of the finish if it is a child, otherwise of the first
        cheapest child not in exclude; None if no child qualifies
    """
    if finish in children:
        return finish, children[finish]

    best = None
    for child, weight in children.items():
        if child in exclude:
            continue
        if best is None or weight < best[1]:
            best = (child, weight)
    return best


def deadlock_result(walk: list[str], iterations: int) -> SearchResult:
    """The walk stopped on a node without outgoing edges."""
    trace: list[TraceItem] = [SINGLE, *visits(walk), DeadlockMarker()]
    return SearchResult(Outcome.DEADLOCK, list(walk), trace, None, iterations)


def cycle_result(walk: list[str], revisited: str, iterations: int) -> SearchResult:
    """The walk stepped back onto a node it already visited; path is the closed cycle."""
    closed = walk + [revisited]
    trace: list[TraceItem] = [SINGLE, *visits(closed), CycleMarker()]
    cycle = closed[walk.index(revisited):]
    return SearchResult(Outcome.CYCLE, cycle, trace, None, iterations)


def greedy(mapping: AdjacencyMapping) -> SearchResult:
    """Walk the cheapest edges from the start until finish, dead end or cycle."""
    finish = mapping.finish
    walk = [mapping.start]
    cost = 0
    iterations = 0

    while walk[-1] != finish:
        iterations += 1
        step = cheapest_step(mapping.children(walk[-1]), finish)

        if step is None:
            logger.debug(f"Greedy: dead end at {walk[-1]!r}")
            return deadlock_result(walk, iterations)

        child, weight = step
        if child in walk:
            logger.debug(f"Greedy: cycle back to {child!r}")
            return cycle_result(walk, child, iterations)

        cost += weight
        walk.append(child)

    return SearchResult(Outcome.SUCCESS, walk, [SINGLE, *visits(walk)], cost, iterations)
