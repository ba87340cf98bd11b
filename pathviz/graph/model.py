"""
Graph model: nodes, directed edges, and the graph that owns them.

The graph enforces the identity and connectivity invariants the search
algorithms rely on:
- at most one start node and at most one finish node, never the same node
- at most one edge per unordered node pair
- unique labels, allocated by the graph's own LabelAllocator
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from pathviz.config import (
    DEFAULT_EDGE_COLOR,
    DEFAULT_NODE_COLOR,
    MAX_EDGE_COST,
    MIN_EDGE_COST,
    NODE_RADIUS_OFFSET,
)
from pathviz.graph.labels import LabelAllocator

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """
    A labelled node placed on the grid.

    Nodes compare by identity; two nodes with equal attributes are still
    different nodes.

    Attributes:
        label: Display identifier (A, B', c'', ...)
        x: Grid column
        y: Grid row
        color: Display color
        is_start: Whether this is the graph's start node
        is_finish: Whether this is the graph's finish node
    """

    label: str
    x: int
    y: int
    color: str = DEFAULT_NODE_COLOR
    is_start: bool = False
    is_finish: bool = False

    def __repr__(self) -> str:
        return f"Node({self.label!r}, x={self.x}, y={self.y})"


@dataclass(eq=False)
class Edge:
    """
    A directed, weighted edge between two nodes.

    Attributes:
        source: Node the edge leaves
        target: Node the edge enters
        cost: Integer weight in [MIN_EDGE_COST, MAX_EDGE_COST]
        color: Display color
    """

    source: Node
    target: Node
    cost: int = 0
    color: str = DEFAULT_EDGE_COLOR

    def __post_init__(self) -> None:
        check_cost(self.cost)

    def __repr__(self) -> str:
        return f"Edge({self.source.label!r} -> {self.target.label!r}, cost={self.cost})"


def check_cost(cost: int) -> None:
    """Raise ValueError unless cost is an integer within the edge cost bounds."""
    if isinstance(cost, bool) or not isinstance(cost, int):
        raise ValueError(f"Edge cost must be an integer, got {cost!r}")
    if not MIN_EDGE_COST <= cost <= MAX_EDGE_COST:
        raise ValueError(
            f"Edge cost {cost} outside [{MIN_EDGE_COST}, {MAX_EDGE_COST}]"
        )


def node_distance(a: Node, b: Node) -> int:
    """Grid distance between two nodes, reduced by the node radius and clamped to valid costs."""
    distance = math.floor(math.hypot(a.x - b.x, a.y - b.y)) - NODE_RADIUS_OFFSET
    return max(MIN_EDGE_COST, min(MAX_EDGE_COST, distance))


@dataclass(eq=False)
class Graph:
    """
    Owns the node and edge collections of one graph.

    Attributes:
        nodes: Nodes in insertion order
        edges: Edges in insertion order
        start: The start node, if one is set
        finish: The finish node, if one is set
        labels: Allocator for node labels
    """

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    start: Node | None = None
    finish: Node | None = None
    labels: LabelAllocator = field(default_factory=LabelAllocator)

    # -------------------------------------------------------------------------
    # Nodes
    # -------------------------------------------------------------------------

    def add_node(self, node: Node) -> None:
        """Append a node. The caller guarantees its label is unused."""
        self.labels.reserve(node.label)
        self.nodes.append(node)
        if node.is_start:
            self.set_start(node)
        if node.is_finish:
            self.set_finish(node)

    def create_node(self, x: int, y: int, color: str = DEFAULT_NODE_COLOR) -> Node | None:
        """
        Create a node with the lowest free label and add it.

        Returns:
            The new node, or None if the label capacity is exhausted
        """
        label = self.next_label()
        if label is None:
            return None

        node = Node(label, x, y, color)
        self.nodes.append(node)
        return node

    def delete_node(self, node: Node) -> None:
        """Delete a node together with all incident edges and free its label."""
        self.release_label(node.label)
        self.edges = [
            edge for edge in self.edges
            if edge.source is not node and edge.target is not node
        ]
        self.nodes = [n for n in self.nodes if n is not node]

        if self.start is node:
            self.start = None
        if self.finish is node:
            self.finish = None

    def rename_node(self, node: Node, label: str) -> bool:
        """
        Give a node a new label.

        Returns:
            False if the label is invalid or used by another node
        """
        if label == node.label:
            return True
        if not LabelAllocator.is_valid(label) or self.node_by_label(label) is not None:
            return False

        if not self.labels.reserve(label):
            return False

        self.release_label(node.label)
        node.label = label
        return True

    def node_by_label(self, label: str) -> Node | None:
        for node in self.nodes:
            if node.label == label:
                return node
        return None

    def next_label(self) -> str | None:
        """Allocate the lowest free label, or None at capacity."""
        return self.labels.allocate()

    def release_label(self, label: str) -> None:
        self.labels.release(label)

    # -------------------------------------------------------------------------
    # Start / finish
    # -------------------------------------------------------------------------

    def set_start(self, node: Node | None) -> None:
        """Mark node as the start node (None clears it)."""
        if self.start is not None:
            self.start.is_start = False
        self.start = node
        if node is None:
            return

        node.is_start = True
        if node.is_finish:
            node.is_finish = False
            self.finish = None

    def set_finish(self, node: Node | None) -> None:
        """Mark node as the finish node (None clears it)."""
        if self.finish is not None:
            self.finish.is_finish = False
        self.finish = node
        if node is None:
            return

        node.is_finish = True
        if node.is_start:
            node.is_start = False
            self.start = None

    # -------------------------------------------------------------------------
    # Edges
    # -------------------------------------------------------------------------

    def add_edge(self, edge: Edge) -> None:
        """Append an edge. The caller guarantees the endpoints are not yet connected."""
        self.edges.append(edge)

    def connect(self, source: Node, target: Node, cost: int | None = None) -> Edge | None:
        """
        Create an edge if the nodes are distinct and not yet connected.

        Args:
            source: Node the edge leaves
            target: Node the edge enters
            cost: Edge weight; defaults to the distance between the nodes

        Returns:
            The new edge, or None if it would violate the graph invariants
        """
        if source is target or self.are_connected(source, target):
            return None

        if cost is None:
            cost = node_distance(source, target)

        edge = Edge(source, target, cost)
        self.edges.append(edge)
        return edge

    def delete_edge(self, edge: Edge) -> None:
        for index, candidate in enumerate(self.edges):
            if candidate is edge:
                del self.edges[index]
                return

    def are_connected(self, a: Node, b: Node) -> bool:
        """Whether an edge exists between a and b in either direction."""
        return self.edge_between(a, b) is not None or self.edge_between(b, a) is not None

    def edge_between(self, source: Node, target: Node) -> Edge | None:
        """The edge leading from source to target, if any."""
        for edge in self.edges:
            if edge.source is source and edge.target is target:
                return edge
        return None

    def apply_distance_costs(self) -> None:
        """Set every edge cost to the distance between its nodes."""
        for edge in self.edges:
            edge.cost = node_distance(edge.source, edge.target)

    # -------------------------------------------------------------------------
    # Whole graph
    # -------------------------------------------------------------------------

    def reset(self) -> None:
        """Delete all nodes and edges."""
        self.nodes = []
        self.edges = []
        self.start = None
        self.finish = None
        self.labels.clear()

    def __len__(self) -> int:
        return len(self.nodes)
