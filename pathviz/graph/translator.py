"""
Translation between the graph object model and the label-keyed adjacency
mapping the search algorithms work on.

encode() turns a Graph into an AdjacencyMapping. decode_path() and
decode_trace() turn the label sequences an algorithm returns back into
live Node/Edge objects for rendering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Union

from pathviz.graph.model import Edge, Graph, Node
from pathviz.trace import (
    BranchRestart,
    CycleMarker,
    DeadlockMarker,
    EdgeMarker,
    Mode,
    ModeSwitch,
    RemoveLast,
    TraceItem,
    Visit,
)

logger = logging.getLogger(__name__)

# Element of a decoded trace
DrawItem = Union[Node, Edge, ModeSwitch]


class MissingEndpointError(ValueError):
    """Raised when a search is requested on a graph without start or finish node."""


class TraceDecodeError(RuntimeError):
    """Raised when a label path or trace does not match the graph it is decoded against."""


@dataclass
class AdjacencyMapping:
    """
    Label-keyed adjacency of one graph snapshot.

    Attributes:
        start: Label of the start node
        finish: Label of the finish node
        neighbors: label -> {neighbor label -> edge cost}, in insertion order
    """

    start: str
    finish: str
    neighbors: dict[str, dict[str, int]] = field(default_factory=dict)

    def children(self, label: str) -> dict[str, int]:
        """Outgoing neighbors of a label (empty for unknown labels)."""
        return self.neighbors.get(label, {})

    @property
    def labels(self) -> list[str]:
        return list(self.neighbors)

    def __contains__(self, label: object) -> bool:
        return label in self.neighbors


def encode(graph: Graph) -> AdjacencyMapping:
    """
    Build the adjacency mapping for a graph.

    Raises:
        MissingEndpointError: If the graph has no start or no finish node
    """
    if graph.start is None and graph.finish is None:
        raise MissingEndpointError("Graph has neither a start nor a finish node")
    if graph.start is None:
        raise MissingEndpointError("Graph has no start node")
    if graph.finish is None:
        raise MissingEndpointError("Graph has no finish node")

    neighbors: dict[str, dict[str, int]] = {node.label: {} for node in graph.nodes}
    for edge in graph.edges:
        neighbors[edge.source.label][edge.target.label] = int(edge.cost)

    start = graph.start.label
    # A start self-entry would make every search loop on the start node
    neighbors.setdefault(start, {}).pop(start, None)
    neighbors.setdefault(graph.finish.label, {})

    return AdjacencyMapping(start=start, finish=graph.finish.label, neighbors=neighbors)


class _Lookup:
    """Label -> Node and (label, label) -> Edge indexes over one graph."""

    def __init__(self, graph: Graph) -> None:
        self._nodes = {node.label: node for node in graph.nodes}
        self._edges = {
            (edge.source.label, edge.target.label): edge for edge in graph.edges
        }

    def node(self, label: str) -> Node:
        try:
            return self._nodes[label]
        except KeyError:
            raise TraceDecodeError(f"No node labelled {label!r} in graph") from None

    def edge(self, source: str | None, target: str) -> Edge:
        try:
            return self._edges[(source, target)]
        except KeyError:
            raise TraceDecodeError(f"No edge {source!r} -> {target!r} in graph") from None


def decode_path(labels: Iterable[str], graph: Graph, closed: bool = False) -> list[Node | Edge]:
    """
    Resolve a label path into alternating Node and Edge objects.

    Args:
        labels: Consecutive node labels
        graph: Graph the labels were encoded from
        closed: The path is a cycle whose last label repeats an earlier one;
            the repeated node is left out so it is not highlighted twice

    Raises:
        TraceDecodeError: If a label or a connecting edge does not exist
    """
    lookup = _Lookup(graph)
    path: list[Node | Edge] = []
    previous = None

    for label in labels:
        if previous is not None:
            path.append(lookup.edge(previous, label))
        path.append(lookup.node(label))
        previous = label

    if closed and path:
        path.pop()
    return path


def decode_trace(trace: Iterable[TraceItem], graph: Graph) -> list[DrawItem]:
    """
    Decode a label-level trace into drawable objects and mode switches.

    Raises:
        TraceDecodeError: If the trace references missing nodes or edges
    """
    lookup = _Lookup(graph)
    decoded: list[DrawItem] = []
    previous: str | None = None
    fresh = True
    marker: TraceItem | None = None

    for item in trace:
        if isinstance(item, Visit):
            label = item.label
            if marker is not None:
                decoded.append(ModeSwitch(Mode.SINGLE))
                decoded.append(lookup.edge(previous, label))
                marker = None
            elif not fresh:
                decoded.append(lookup.edge(previous, label))
            decoded.append(lookup.node(label))
            previous = label
            fresh = False

        elif isinstance(item, ModeSwitch):
            decoded.append(item)
            if item.mode is Mode.FULL:
                fresh = True

        elif isinstance(item, EdgeMarker):
            marker = item

        elif isinstance(item, BranchRestart):
            if decoded:
                decoded.pop()
            marker = item

        elif isinstance(item, RemoveLast):
            del decoded[-2:]

        elif isinstance(item, CycleMarker):
            # the revisited node is already drawn earlier on the walk
            if decoded and isinstance(decoded[-1], Node):
                decoded.pop()

        elif isinstance(item, DeadlockMarker):
            continue

        else:
            raise TraceDecodeError(f"Unknown trace item {item!r}")

    return decoded
