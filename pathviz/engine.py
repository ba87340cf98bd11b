"""
Search engine: runs an algorithm on a graph and decodes the result.

The engine is the seam between the graph object model and the label-level
algorithms. It validates the graph, takes an adjacency snapshot, runs the
selected strategy and resolves the returned path and trace back into live
Node/Edge objects the animation interpreter can replay.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from pathviz.algorithms import Algorithm, SearchResult, run
from pathviz.graph.model import Edge, Graph, Node
from pathviz.graph.translator import DrawItem, decode_path, decode_trace, encode
from pathviz.trace import Outcome

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """
    Decoded record of one search.

    Attributes:
        algorithm: Strategy that produced the result
        outcome: How the search ended
        path: Alternating Node/Edge objects of the returned path (the cycle
            for CYCLE, the walk for DEADLOCK, empty for NO_PATH)
        trace: Decoded replay trace for the animation interpreter
        cost: Total path cost, None unless the finish was reached
        iterations: Node-expansion steps taken
        labels: The label path as returned by the algorithm
        elapsed_ms: Wall time of the search in milliseconds
    """

    algorithm: Algorithm
    outcome: Outcome
    path: list[Node | Edge]
    trace: list[DrawItem]
    cost: int | None
    iterations: int
    labels: list[str] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def found(self) -> bool:
        """Whether a start-to-finish path was found."""
        return self.outcome is Outcome.SUCCESS

    @property
    def path_nodes(self) -> list[Node]:
        return [element for element in self.path if isinstance(element, Node)]


class SearchEngine:
    """
    Runs search strategies against one graph.

    The graph is treated as a read-only snapshot for the duration of a run.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    @property
    def graph(self) -> Graph:
        return self._graph

    def search(self, algorithm: Algorithm | str) -> SearchResult:
        """
        Run an algorithm and return its label-level result.

        Raises:
            MissingEndpointError: If the graph lacks a start or finish node
            ValueError: If the algorithm key is unknown
        """
        if not isinstance(algorithm, Algorithm):
            algorithm = Algorithm.from_key(algorithm)

        mapping = encode(self._graph)
        logger.debug(f"Converted graph: {mapping.neighbors}")

        return run(algorithm, mapping, self._graph.nodes, self._graph.finish)

    def run(self, algorithm: Algorithm | str) -> RunResult:
        """
        Run an algorithm and decode its result for animation.

        Args:
            algorithm: Algorithm member or its three-letter key

        Returns:
            RunResult with Node/Edge path and decoded trace

        Raises:
            MissingEndpointError: If the graph lacks a start or finish node
            ValueError: If the algorithm key is unknown
            TraceDecodeError: If the algorithm returned labels the graph does not have
        """
        if not isinstance(algorithm, Algorithm):
            algorithm = Algorithm.from_key(algorithm)

        started = time.perf_counter()
        result = self.search(algorithm)
        elapsed_ms = (time.perf_counter() - started) * 1000

        closed = result.outcome is Outcome.CYCLE
        decoded = RunResult(
            algorithm=algorithm,
            outcome=result.outcome,
            path=decode_path(result.path, self._graph, closed=closed),
            trace=decode_trace(result.trace, self._graph),
            cost=result.cost,
            iterations=result.iterations,
            labels=list(result.path),
            elapsed_ms=elapsed_ms,
        )

        logger.info(
            f"{algorithm.title}: {result.outcome.value}, cost {result.cost}, "
            f"{result.iterations} iterations"
            + (f", path {' -> '.join(result.path)}" if result.path else "")
        )
        return decoded
