"""
Straight-line distance heuristic for A*.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from pathviz.config import NODE_RADIUS_OFFSET
from pathviz.graph.model import Node


def euclidean_heuristic(
    nodes: Sequence[Node],
    finish: Node,
    offset: int = NODE_RADIUS_OFFSET,
) -> dict[str, int]:
    """
    Estimated remaining cost for every node.

    h(v) is the euclidean grid distance from v to the finish minus the node
    radius offset, rounded half up; h(finish) is 0. No admissibility is
    enforced: the estimate is only as good as the edge costs are related to
    the node distances.

    Args:
        nodes: Nodes to estimate (usually every node of the graph)
        finish: The finish node
        offset: Subtracted from each distance before rounding

    Returns:
        Dict mapping node label to its estimate
    """
    if not nodes:
        return {finish.label: 0}

    coords = np.array([(node.x, node.y) for node in nodes], dtype=np.float64)
    distances = np.hypot(coords[:, 0] - finish.x, coords[:, 1] - finish.y) - offset
    estimates = np.floor(distances + 0.5).astype(np.int64)

    table = {node.label: int(estimate) for node, estimate in zip(nodes, estimates)}
    table[finish.label] = 0
    return table
