"""
Random graph generator.

Places nodes column by column across the grid with a little jitter, links
each column vertically and connects neighboring columns with horizontal and
diagonal edges. The first node becomes the start, the last one the finish.
"""

from __future__ import annotations

import logging

import numpy as np

from pathviz.config import (
    CIRCLE_GRAPH_SIZES,
    CIRCLE_RING_NODES,
    CIRCLE_RING_RATIO,
    MAX_NODES,
    RANDOM_EDGE_COST_RANGE,
    RANDOM_GRAPH_SIZES,
    RANDOM_GRID_HEIGHT,
    RANDOM_GRID_WIDTH,
)
from pathviz.graph.model import Graph, Node

logger = logging.getLogger(__name__)

# Origin of the first column and row
_MARGIN = 5


def random_graph(
    size: str = "m",
    seed: int | None = None,
    width: int = RANDOM_GRID_WIDTH,
    height: int = RANDOM_GRID_HEIGHT,
) -> Graph:
    """
    Generate a random, connected-looking graph.

    Args:
        size: Size preset ("s", "m" or "l")
        seed: Seed for reproducible graphs
        width: Grid width to fill with columns
        height: Grid height to fill with rows

    Returns:
        New Graph with start and finish set

    Raises:
        ValueError: If size is not a known preset
    """
    if size not in RANDOM_GRAPH_SIZES:
        available = ", ".join(RANDOM_GRAPH_SIZES)
        raise ValueError(f"Unknown graph size '{size}'. Available: {available}")

    preset = RANDOM_GRAPH_SIZES[size]
    rng = np.random.default_rng(seed)
    graph = Graph()

    columns = _place_nodes(graph, rng, preset, width, height)
    _link_columns(graph, rng, columns, preset["edge_bias"])

    graph.set_start(graph.nodes[0])
    graph.set_finish(graph.nodes[-1])

    logger.info(
        f"Generated random graph ({size}): {len(graph.nodes)} nodes, {len(graph.edges)} edges"
    )
    return graph


def _jitter(rng: np.random.Generator) -> int:
    return int(rng.integers(0, 2)) * 2 - 1


def _random_cost(rng: np.random.Generator) -> int:
    low, high = RANDOM_EDGE_COST_RANGE
    return int(rng.integers(low, high + 1))


def _place_nodes(
    graph: Graph,
    rng: np.random.Generator,
    preset: dict,
    width: int,
    height: int,
) -> list[list[Node]]:
    """Fill the grid column by column; every column gets at least one node."""
    row_distance = max(1, height // preset["rows"])
    keep_probability = 0.7 + preset["skip_bias"]
    columns: list[list[Node]] = []
    x = _MARGIN

    while (x < width or len(graph) < preset["min_nodes"]) and len(graph) < MAX_NODES:
        column: list[Node] = []
        y = _MARGIN

        while y < height and len(graph) < MAX_NODES:
            y += _jitter(rng)
            if rng.random() < keep_probability:
                node = graph.create_node(x + _jitter(rng), y)
                if node is not None:
                    column.append(node)
            y += row_distance

        if not column and len(graph) < MAX_NODES:
            node = graph.create_node(x + _jitter(rng), y - row_distance)
            if node is not None:
                column.append(node)

        if column:
            columns.append(column)
        x += preset["col_spacing"]

    return columns


def _link_columns(
    graph: Graph,
    rng: np.random.Generator,
    columns: list[list[Node]],
    edge_bias: float,
) -> None:
    """Vertical edges inside each column, random horizontal and diagonal edges between columns."""
    for i, column in enumerate(columns):
        following = columns[i + 1] if i + 1 < len(columns) else None

        for j in range(len(column) - 1):
            graph.connect(column[j], column[j + 1], _random_cost(rng))

            if following is None:
                continue
            if j < len(following) and rng.random() < 0.6:
                graph.connect(column[j], following[j], _random_cost(rng))
            if j + 1 < len(following) and rng.random() < 0.6 - edge_bias:
                graph.connect(column[j], following[j + 1], _random_cost(rng))

        if following is not None:
            # top and bottom rows are always linked
            graph.connect(column[0], following[0], _random_cost(rng))
            graph.connect(column[-1], following[-1], _random_cost(rng))



def circle_graph(
    size: str = "m",
    seed: int | None = None,
    width: int = RANDOM_GRID_WIDTH,
    height: int = RANDOM_GRID_HEIGHT,
) -> Graph:
    """
    Generate concentric rings around a finish node in the grid center.

    The start sits at the left border and enters the outer ring. Each ring
    is an open chain of nodes linked to the next ring inward; the innermost
    ring feeds a four-node core that leads to the finish. One reversed edge
    per ring level gives the greedy walks a chance to go the long way round.

    Args:
        size: Size preset ("s", "m" or "l")
        seed: Seed for reproducible edge costs
        width: Grid width
        height: Grid height

    Raises:
        ValueError: If size is not a known preset
    """
    if size not in CIRCLE_GRAPH_SIZES:
        available = ", ".join(CIRCLE_GRAPH_SIZES)
        raise ValueError(f"Unknown graph size '{size}'. Available: {available}")

    preset = CIRCLE_GRAPH_SIZES[size]
    rng = np.random.default_rng(seed)
    graph = Graph()

    cx = width // 2 - width // 15
    cy = height // 2
    radius = float(cy - preset["border"])

    start = graph.create_node(2, cy)
    rings = []
    for _ in range(preset["rings"]):
        rings.append(_ring(graph, cx, cy, radius, CIRCLE_RING_NODES))
        radius /= CIRCLE_RING_RATIO
    core = _ring(graph, cx, cy, radius, 4)
    finish = graph.create_node(cx, cy)

    graph.connect(start, rings[0][0], _random_cost(rng))
    for ring in rings + [core]:
        for a, b in zip(ring, ring[1:]):
            graph.connect(a, b, _random_cost(rng))
        # reversed edge across the gap of the open chain
        graph.connect(ring[0], ring[-1], _random_cost(rng))

    for outer, inner in zip(rings, rings[1:]):
        for a, b in zip(outer[1:], inner[1:]):
            graph.connect(a, b, _random_cost(rng))

    step = CIRCLE_RING_NODES // len(core)
    for i, node in enumerate(core):
        graph.connect(rings[-1][i * step], node, _random_cost(rng))
    graph.connect(core[-1], finish, _random_cost(rng))

    graph.set_start(start)
    graph.set_finish(finish)

    logger.info(
        f"Generated circle graph ({size}): {len(graph.nodes)} nodes, {len(graph.edges)} edges"
    )
    return graph


def _ring(graph: Graph, cx: int, cy: int, radius: float, count: int) -> list[Node]:
    """Place count nodes evenly on a circle, the first one on its left side."""
    angles = np.pi + np.arange(count) * (2 * np.pi / count)
    xs = np.rint(cx + radius * np.cos(angles)).astype(int)
    ys = np.rint(cy - radius * np.sin(angles)).astype(int)
    return [graph.create_node(int(x), int(y)) for x, y in zip(xs, ys)]


# (label, x, y) of the demo graph, start first and finish last
_DEMO_NODES = [
    ("S", 5, 20),
    ("A", 20, 8),
    ("B", 20, 32),
    ("C", 38, 8),
    ("D", 38, 32),
    ("F", 55, 20),
]

_DEMO_EDGES = [
    ("S", "A", 4),
    ("S", "B", 2),
    ("B", "A", 1),
    ("A", "C", 5),
    ("B", "D", 8),
    ("C", "D", 3),
    ("C", "F", 6),
    ("D", "F", 2),
]


def demo_graph() -> Graph:
    """A small fixed graph where the strategies disagree on the route."""
    graph = Graph()
    nodes = {}
    for label, x, y in _DEMO_NODES:
        nodes[label] = Node(label, x, y)
        graph.add_node(nodes[label])

    for source, target, cost in _DEMO_EDGES:
        graph.connect(nodes[source], nodes[target], cost)

    graph.set_start(nodes["S"])
    graph.set_finish(nodes["F"])
    return graph
