"""
Exhaustive depth-first search.

Explores every simple path from the start and keeps the cheapest one that
reaches the finish. Exploration uses an explicit stack of frames instead of
recursion, so the depth is bounded by the heap rather than the call stack.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from pathviz.algorithms.base import SearchResult, first_minimum, no_path
from pathviz.graph.translator import AdjacencyMapping
from pathviz.trace import FULL, SINGLE, BranchRestart, Outcome, RemoveLast, TraceItem, visits

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """A node on the current path with the iterator over its remaining children."""

    label: str
    path: list[str]
    cost: int
    children: Iterator[tuple[str, int]]


def _explore(mapping: AdjacencyMapping) -> tuple[list[list[TraceItem]], list[tuple[int, list[str]]], int]:
    """
    Walk all simple paths depth-first.

    Returns:
        (tours, finish_tours, iterations). A tour ends at the finish, at a
        dead end, or at a revisited node (followed by RemoveLast).
    """
    finish = mapping.finish
    tours: list[list[TraceItem]] = []
    finish_tours: list[tuple[int, list[str]]] = []
    iterations = 0

    stack = [_Frame(mapping.start, [mapping.start], 0, iter(mapping.children(mapping.start).items()))]

    while stack:
        frame = stack[-1]
        step = next(frame.children, None)
        if step is None:
            stack.pop()
            continue

        child, weight = step
        if child in frame.path:
            tours.append(visits(frame.path + [child]) + [RemoveLast()])
            continue

        iterations += 1
        path = frame.path + [child]
        cost = frame.cost + weight

        if child == finish:
            tours.append(visits(path))
            finish_tours.append((cost, path))
            continue

        if not mapping.children(child):
            # dead end
            tours.append(visits(path))

        stack.append(_Frame(child, path, cost, iter(mapping.children(child).items())))

    return tours, finish_tours, iterations


def _mark_branches(tours: list[list[TraceItem]]) -> None:
    """Insert a BranchRestart where each tour leaves the previous one."""
    for tour in tours:
        tour.append(FULL)

    for i in range(len(tours) - 1, 0, -1):
        current, previous = tours[i], tours[i - 1]
        for j, item in enumerate(current):
            if j >= len(previous) or item != previous[j]:
                current.insert(j, BranchRestart())
                break


def dfs(mapping: AdjacencyMapping) -> SearchResult:
    """Cheapest start-to-finish path over all simple paths, explored depth-first."""
    tours, finish_tours, iterations = _explore(mapping)
    _mark_branches(tours)

    trace: list[TraceItem] = [SINGLE]
    for tour in tours:
        trace.extend(tour)

    logger.debug(
        f"DFS: {len(tours)} tours, {len(finish_tours)} reach the finish, "
        f"{iterations} expansions"
    )

    if not finish_tours:
        return no_path(trace, iterations)

    cost, path = first_minimum(finish_tours)
    return SearchResult(Outcome.SUCCESS, path, trace, cost, iterations)
