"""
Shared result type and helpers for the search algorithms.

Every algorithm is a pure function AdjacencyMapping -> SearchResult. The
result carries the label path, the replay trace and the search statistics.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pathviz.trace import FULL, EdgeMarker, Outcome, TraceItem, visits


@dataclass
class SearchResult:
    """
    Outcome of one search over an adjacency mapping.

    Attributes:
        outcome: How the search ended
        path: Labels of the returned path. For CYCLE the closed cyclic suffix
            of the walk, for DEADLOCK the walk up to the dead end, empty for
            NO_PATH
        trace: Label-level replay trace
        cost: Total path cost, None unless the finish was reached
        iterations: Number of node-expansion steps taken
    """

    outcome: Outcome
    path: list[str] = field(default_factory=list)
    trace: list[TraceItem] = field(default_factory=list)
    cost: int | None = None
    iterations: int = 0

    @property
    def found(self) -> bool:
        """Whether a path to the finish was found."""
        return self.outcome is Outcome.SUCCESS


def no_path(trace: list[TraceItem], iterations: int = 0) -> SearchResult:
    """Result for a search that never reached the finish."""
    return SearchResult(Outcome.NO_PATH, [], trace, None, iterations)


def path_from_parents(label: str, parents: dict[str, str | None], start: str) -> list[str]:
    """Walk parent pointers back from label to start."""
    path = [label]
    parent = parents.get(label)

    while parent is not None and start not in path:
        path.append(parent)
        parent = parents.get(parent)

    path.reverse()
    return path


def expansion_trace(path: list[str]) -> list[TraceItem]:
    """
    Trace segment for one expansion step: the known path drawn at once,
    with the edge into its last node animated on its own.
    """
    items: list[TraceItem] = visits(path)
    if len(items) > 1:
        items.insert(len(items) - 1, EdgeMarker())
    items.append(FULL)
    return items


def first_minimum(candidates: list[tuple[int, list[str]]]) -> tuple[int, list[str]]:
    """The first (cost, path) candidate with the lowest cost."""
    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate[0] < best[0]:
            best = candidate
    return best

